from __future__ import annotations

from typing import Any, Iterable, Sequence

from moxie.config import MoxieConfig
from moxie.engine import Moxie


class Mock:
    """Mixin for hand-written mocks backed by a ``Moxie`` engine.

    Example::

        class FakeGreeter(Greeter, Mock):
            def say(self, number: int) -> str:
                return self.intercept("say", number, expected_type=str, default="")
    """

    moxie_config: MoxieConfig | None = None

    @property
    def moxie(self) -> Moxie:
        engine = self.__dict__.get("_moxie")
        if engine is None:
            engine = Moxie(self.moxie_config)
            self.__dict__["_moxie"] = engine
        return engine

    def intercept(
        self,
        function: str,
        *args: Any,
        expected_type: type | tuple[type, ...] | None = None,
        default: Any = None,
    ) -> Any:
        """Record the call, then return its next stubbed value (or ``default``)."""
        self.moxie.record_call(function, args)
        value = self.moxie.next_stubbed_value(function, args, expected_type)
        return default if value is None else value

    def stub(self, function: str, parameters: Sequence[Any] = (), values: Iterable[Any] = ()) -> None:
        self.moxie.stub(function, parameters, values)

    def record_call(self, function: str, arguments: Iterable[Any] = ()) -> None:
        self.moxie.record_call(function, arguments)

    def next_stubbed_value(
        self,
        function: str,
        parameters: Sequence[Any] = (),
        expected_type: type | tuple[type, ...] | None = None,
    ) -> Any:
        return self.moxie.next_stubbed_value(function, parameters, expected_type)

    def invocation_count(self, function: str) -> int:
        return self.moxie.invocation_count(function)

    def was_invoked(self, function: str) -> bool:
        return self.moxie.was_invoked(function)

    def arguments_for(self, function: str, ordinal: int = 1) -> list[Any]:
        return self.moxie.arguments_for(function, ordinal)

    def interaction_report(self, function: str) -> str:
        return self.moxie.interaction_report(function)


__all__ = ["Mock"]
