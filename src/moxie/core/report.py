"""
Human-readable summary of how a mocked function was stubbed and called.

Used for debug output and assertion failure messages, e.g.::

    This function has 1 stubbing and 2 invocations.

      Stubbings:
      - When called with `[1]`, then return `['One']`.

      Invocations:
      - Called with `[1]`.
      - Called with `[2, nil]`.
"""

from __future__ import annotations

from typing import Any, Iterable

from moxie.core.invocations import InvocationLog
from moxie.core.keys import render_key
from moxie.core.registry import StubRegistry
from moxie.core.values import Slot, render_slot

DEFAULT_ABSENT_TOKEN = "nil"


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}{'' if count == 1 else 's'}"


def summary_line(stubbings: int, invocations: int) -> str:
    return f"This function has {_plural(stubbings, 'stubbing')} and {_plural(invocations, 'invocation')}."


def render_queue(slots: Iterable[Slot], absent_token: str = DEFAULT_ABSENT_TOKEN) -> str:
    return "[" + ", ".join(render_slot(slot, absent_token) for slot in slots) + "]"


def render_arguments(arguments: Iterable[Any], absent_token: str = DEFAULT_ABSENT_TOKEN) -> str:
    return "[" + ", ".join(absent_token if argument is None else str(argument) for argument in arguments) + "]"


def describe(
    function: str,
    registry: StubRegistry,
    log: InvocationLog,
    *,
    absent_token: str = DEFAULT_ABSENT_TOKEN,
) -> str:
    entries = registry.entries(function)
    invocations = log.for_function(function)

    lines = [summary_line(len(entries), len(invocations))]
    if entries:
        lines.extend(["", "  Stubbings:"])
        for key, slots in entries.items():
            lines.append(
                f"  - When called with `{render_key(key)}`, then return `{render_queue(slots, absent_token)}`."
            )
    if invocations:
        lines.extend(["", "  Invocations:"])
        for invocation in invocations:
            lines.append(f"  - Called with `{render_arguments(invocation.arguments, absent_token)}`.")
    return "\n".join(lines)


__all__ = ["DEFAULT_ABSENT_TOKEN", "describe", "render_arguments", "render_queue", "summary_line"]
