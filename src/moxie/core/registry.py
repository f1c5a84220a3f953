from __future__ import annotations

from collections.abc import Hashable
from typing import Any, Iterable

from moxie.core.values import Slot, accepts, as_items, to_slot, unwrap


class StubRegistry:
    """Canned return values per ``(function, argument key)``.

    Each key holds a queue of slots. Reading consumes the front slot while more
    than one remains; the last slot is returned on every later read.
    Not thread-safe.
    """

    def __init__(self) -> None:
        self._stubbings: dict[str, dict[Hashable, list[Slot]]] = {}

    def stub(self, function: str, key: Hashable, values: Iterable[Any]) -> bool:
        """Replace the queue at ``(function, key)``. Returns ``False`` when ``values`` is empty."""
        slots = [to_slot(value) for value in as_items(values)]
        if not slots:
            return False
        self._stubbings.setdefault(function, {})[key] = slots
        return True

    def consume(
        self,
        function: str,
        key: Hashable,
        expected_type: type | tuple[type, ...] | None = None,
    ) -> Any:
        queue = self._stubbings.get(function, {}).get(key)
        if not queue:
            return None
        slot = queue[0]
        if not accepts(slot, expected_type):
            # a payload of the wrong type is a miss and leaves the queue untouched
            return None
        if len(queue) > 1:
            queue.pop(0)
        return unwrap(slot)

    def is_stubbed(self, function: str, key: Hashable) -> bool:
        return key in self._stubbings.get(function, {})

    def entries(self, function: str) -> dict[Hashable, tuple[Slot, ...]]:
        return {key: tuple(queue) for key, queue in self._stubbings.get(function, {}).items()}

    def count(self, function: str) -> int:
        return len(self._stubbings.get(function, {}))


__all__ = ["StubRegistry"]
