"""
Argument keys for stub lookup.

The default key renders every argument with ``repr()`` and brackets the result, so
two argument lists match when they *print* the same. Values whose reprs coincide
share a key; that is accepted behaviour, not a bug.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any, Callable, Literal, Sequence

KeyStrategy = Literal["repr", "structural"]
KEY_STRATEGIES: tuple[KeyStrategy, ...] = ("repr", "structural")

KEY_SEPARATOR = ", "


def encode_key(arguments: Sequence[Any] = ()) -> str:
    return "[" + KEY_SEPARATOR.join(repr(argument) for argument in arguments) + "]"


def structural_key(arguments: Sequence[Any] = ()) -> Hashable:
    """Key by value equality when every argument is hashable, else fall back to ``encode_key``."""
    items = tuple(arguments)
    try:
        hash(items)
    except TypeError:
        return encode_key(items)
    return ("structural", items)


def render_key(key: Hashable) -> str:
    if isinstance(key, tuple) and len(key) == 2 and key[0] == "structural":
        return encode_key(key[1])
    return str(key)


def key_encoder(strategy: KeyStrategy) -> Callable[[Sequence[Any]], Hashable]:
    if strategy == "repr":
        return encode_key
    if strategy == "structural":
        return structural_key
    choices = ", ".join(KEY_STRATEGIES)
    raise ValueError(f"Unsupported key strategy '{strategy}'. Supported values: {choices}")


__all__ = ["KEY_SEPARATOR", "KEY_STRATEGIES", "KeyStrategy", "encode_key", "key_encoder", "render_key", "structural_key"]
