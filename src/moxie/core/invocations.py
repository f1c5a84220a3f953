from __future__ import annotations

from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict

from moxie.core.values import as_items


class Invocation(BaseModel):
    """A recorded call. Arguments may contain ``None`` for absent values."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    function: str
    arguments: tuple[Any, ...] = ()


class InvocationLog:
    """Append-only call history in recording order. Not thread-safe."""

    def __init__(self) -> None:
        self._invocations: list[Invocation] = []

    def __len__(self) -> int:
        return len(self._invocations)

    def __iter__(self):
        return iter(self._invocations)

    def record(self, function: str, arguments: Iterable[Any] = ()) -> Invocation:
        invocation = Invocation(function=function, arguments=as_items(arguments))
        self._invocations.append(invocation)
        return invocation

    def for_function(self, function: str) -> list[Invocation]:
        return [invocation for invocation in self._invocations if invocation.function == function]

    def count(self, function: str) -> int:
        return sum(1 for invocation in self._invocations if invocation.function == function)

    def was_invoked(self, function: str) -> bool:
        return self.count(function) > 0

    def arguments_of(self, function: str, ordinal: int = 1) -> list[Any]:
        """Arguments of the ``ordinal``-th call (1-based) to ``function``; ``[]`` when out of range."""
        matching = self.for_function(function)
        if ordinal <= 0 or ordinal > len(matching):
            return []
        return list(matching[ordinal - 1].arguments)


__all__ = ["Invocation", "InvocationLog"]
