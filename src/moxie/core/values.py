"""
Stored return values for stubbed calls.

A queue slot is either ``Present(value)`` or the ``ABSENT`` marker. Callers of the
engine only ever see ``value`` or ``None``: a slot configured as absent reads the
same as a key that was never stubbed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Union


class _Absent:
    _instance: _Absent | None = None

    def __new__(cls) -> _Absent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "ABSENT"


ABSENT = _Absent()


@dataclass(frozen=True)
class Present:
    value: Any

    def __repr__(self) -> str:
        return f"Present({self.value!r})"


Slot = Union[Present, _Absent]


def as_items(items: Iterable[Any]) -> tuple[Any, ...]:
    """Tuple of ``items``; a bare ``str``/``bytes`` is one item, not a sequence of characters."""
    if isinstance(items, (str, bytes, bytearray)):
        return (items,)
    return tuple(items)


def to_slot(value: Any) -> Slot:
    """Wrap a stubbed value; ``None`` and ``ABSENT`` both mean "return nothing"."""
    if value is None or value is ABSENT:
        return ABSENT
    if isinstance(value, Present):
        return to_slot(value.value)
    return Present(value)


def accepts(slot: Slot, expected_type: type | tuple[type, ...] | None) -> bool:
    """False only for a present payload that is not an instance of ``expected_type``."""
    if expected_type is None or not isinstance(slot, Present):
        return True
    return isinstance(slot.value, expected_type)


def unwrap(slot: Slot) -> Any:
    return slot.value if isinstance(slot, Present) else None


def render_slot(slot: Slot, absent_token: str = "nil") -> str:
    if isinstance(slot, Present):
        return repr(slot.value)
    return absent_token


__all__ = ["ABSENT", "Present", "Slot", "accepts", "as_items", "render_slot", "to_slot", "unwrap"]
