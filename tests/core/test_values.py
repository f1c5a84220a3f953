from __future__ import annotations

import pickle

from moxie.core.values import ABSENT, Present, accepts, as_items, render_slot, to_slot, unwrap


def test_none_and_absent_become_the_absent_slot() -> None:
    assert to_slot(None) is ABSENT
    assert to_slot(ABSENT) is ABSENT
    assert to_slot(Present(None)) is ABSENT
    assert to_slot(Present(3)) == Present(3)
    assert pickle.loads(pickle.dumps(ABSENT)) is ABSENT


def test_unwrap_returns_payload_or_none() -> None:
    assert unwrap(Present(0)) == 0
    assert unwrap(ABSENT) is None


def test_accepts_checks_only_present_payloads() -> None:
    assert accepts(Present("x"), None)
    assert accepts(Present("x"), str)
    assert accepts(Present("x"), (int, str))
    assert not accepts(Present("x"), int)
    assert accepts(ABSENT, int)


def test_as_items_keeps_text_whole() -> None:
    assert as_items("ab") == ("ab",)
    assert as_items(b"ab") == (b"ab",)
    assert as_items(["a", "b"]) == ("a", "b")
    assert as_items(x for x in (1, 2)) == (1, 2)
    assert as_items(()) == ()


def test_render_slot() -> None:
    assert render_slot(Present("x")) == "'x'"
    assert render_slot(ABSENT, "null") == "null"
