from __future__ import annotations

import logging
from typing import Iterator

import pytest

from moxie import Moxie, MoxieConfig


@pytest.fixture
def engine() -> Moxie:
    return Moxie()


@pytest.fixture
def make_engine():
    def _make(**config: object) -> Moxie:
        return Moxie(MoxieConfig.from_dict(config))

    return _make


@pytest.fixture
def moxie_logger() -> Iterator[logging.Logger]:
    logger = logging.getLogger("moxie")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield logger
    for handler in list(logger.handlers):
        if handler not in saved[0]:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(saved[1])
    logger.propagate = saved[2]
