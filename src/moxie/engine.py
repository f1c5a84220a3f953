"""
The test-double engine embedded in hand-written or generated mocks.

A mock forwards every intercepted call into one ``Moxie`` instance: ``stub`` to
configure canned return values, ``record_call`` to log the call, and
``next_stubbed_value`` to fetch what the call should return. Misses never raise;
they come back as ``None`` or ``[]``.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Hashable
from typing import Any, Iterable, Sequence

from moxie.config import MoxieConfig
from moxie.core.invocations import InvocationLog
from moxie.core.keys import key_encoder, render_key
from moxie.core.registry import StubRegistry
from moxie.core.report import describe, render_arguments, render_queue
from moxie.core.values import as_items
from moxie.logging_utils import event_level, log_event

logger = logging.getLogger(__name__)


class MoxieError(RuntimeError):
    """Error raised when an engine is used outside its contract."""


class MoxieThreadError(MoxieError):
    """Raised when a thread-checked engine is touched from a second thread."""


class Moxie:
    """Stub registry plus invocation log for a single mock.

    Not thread-safe: create one engine per mock per test and never share it
    across threads. With ``MoxieConfig(thread_check=True)`` cross-thread use
    raises ``MoxieThreadError`` instead of corrupting state silently.
    """

    def __init__(self, config: MoxieConfig | None = None) -> None:
        self.config = config or MoxieConfig()
        self._encode = key_encoder(self.config.key_strategy)
        self._registry = StubRegistry()
        self._log = InvocationLog()
        self._owner_thread: int | None = None
        self._event_level = event_level(self.config)

    def __repr__(self) -> str:
        return f"Moxie(key_strategy={self.config.key_strategy!r}, invocations={len(self._log)})"

    def _check_thread_ownership(self) -> None:
        if not self.config.thread_check:
            return
        current_thread = threading.current_thread().ident
        if self._owner_thread is None:
            self._owner_thread = current_thread
        elif self._owner_thread != current_thread:
            raise MoxieThreadError(
                "Moxie is not thread-safe and cannot be shared across threads. "
                "Create a separate engine instance for each mock and thread."
            )

    def key_for(self, parameters: Sequence[Any] = ()) -> Hashable:
        return self._encode(as_items(parameters))

    # stubbing

    def stub(self, function: str, parameters: Sequence[Any] = (), values: Iterable[Any] = ()) -> None:
        """Return ``values`` in order for calls to ``function`` with ``parameters``.

        The last value repeats once the others are used up. Stubbing the same
        call again replaces whatever was left; an empty ``values`` is ignored.
        """
        self.stub_key(function, self.key_for(parameters), values)

    def stub_key(self, function: str, key: Hashable, values: Iterable[Any] = ()) -> None:
        self._check_thread_ownership()
        if self._registry.stub(function, key, values):
            log_event(
                logger,
                "stub",
                level=self._event_level,
                function=function,
                key=render_key(key),
                values=render_queue(self._registry.entries(function)[key], self.config.absent_token),
            )
        else:
            log_event(logger, "stub_ignored", level=self._event_level, function=function, key=render_key(key))

    def next_stubbed_value(
        self,
        function: str,
        parameters: Sequence[Any] = (),
        expected_type: type | tuple[type, ...] | None = None,
    ) -> Any:
        """The next stubbed value for this call, or ``None`` if nothing usable is configured."""
        return self.next_value_for_key(function, self.key_for(parameters), expected_type)

    def next_value_for_key(
        self,
        function: str,
        key: Hashable,
        expected_type: type | tuple[type, ...] | None = None,
    ) -> Any:
        self._check_thread_ownership()
        if not self._registry.is_stubbed(function, key):
            log_event(logger, "miss", level=self._event_level, function=function, key=render_key(key))
            return None
        value = self._registry.consume(function, key, expected_type)
        log_event(
            logger, "consume", level=self._event_level, function=function, key=render_key(key), value=repr(value)
        )
        return value

    # invocations

    def record_call(self, function: str, arguments: Iterable[Any] = ()) -> None:
        self._check_thread_ownership()
        invocation = self._log.record(function, arguments)
        log_event(
            logger,
            "record",
            level=self._event_level,
            function=function,
            arguments=render_arguments(invocation.arguments, self.config.absent_token),
        )

    def invocation_count(self, function: str) -> int:
        return self._log.count(function)

    def was_invoked(self, function: str) -> bool:
        return self._log.was_invoked(function)

    def arguments_for(self, function: str, ordinal: int = 1) -> list[Any]:
        return self._log.arguments_of(function, ordinal)

    def interaction_report(self, function: str) -> str:
        return describe(function, self._registry, self._log, absent_token=self.config.absent_token)


__all__ = ["Moxie", "MoxieError", "MoxieThreadError"]
