"""Stubbing and invocation tracking for hand-written test doubles."""

from moxie.config import MoxieConfig
from moxie.core.values import ABSENT
from moxie.engine import Moxie, MoxieError, MoxieThreadError
from moxie.mock import Mock

__all__ = ["ABSENT", "Mock", "Moxie", "MoxieConfig", "MoxieError", "MoxieThreadError"]
__version__ = "0.1.0"
