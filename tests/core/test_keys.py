from __future__ import annotations

from dataclasses import dataclass

import pytest

from moxie.core.keys import encode_key, key_encoder, render_key, structural_key


@dataclass(frozen=True)
class Point:
    x: int
    y: int


class Opaque:
    def __init__(self, label: str):
        self.label = label

    def __repr__(self) -> str:
        return "Opaque"


def test_empty_arguments_encode_to_brackets() -> None:
    assert encode_key() == "[]"
    assert encode_key([]) == "[]"


def test_arguments_render_with_repr_and_separator() -> None:
    assert encode_key([1, "5", None]) == "[1, '5', None]"


def test_equal_values_encode_identically_regardless_of_identity() -> None:
    assert encode_key([Point(1, 2)]) == encode_key([Point(1, 2)])
    assert encode_key([[1, 2]]) == encode_key([[1, 2]])


def test_different_arguments_encode_differently() -> None:
    assert encode_key([1]) != encode_key([2])
    assert encode_key([1, 2]) != encode_key([12])
    assert encode_key(["1"]) != encode_key([1])


def test_colliding_renderings_share_a_key() -> None:
    # Known limitation: distinct values that print the same are one key.
    assert encode_key([Opaque("a")]) == encode_key([Opaque("b")])
    assert encode_key(["a, b"]) != encode_key(["a", "b"])
    assert encode_key([1.0]) != encode_key([1])


def test_structural_key_uses_value_equality_for_hashable_arguments() -> None:
    assert structural_key([Opaque("a")]) != structural_key([Opaque("b")])
    assert structural_key([Point(1, 2)]) == structural_key([Point(1, 2)])


def test_structural_key_falls_back_for_unhashable_arguments() -> None:
    assert structural_key([[1, 2]]) == encode_key([[1, 2]])


def test_render_key_for_both_strategies() -> None:
    assert render_key(encode_key([1, "x"])) == "[1, 'x']"
    assert render_key(structural_key([1, "x"])) == "[1, 'x']"


def test_key_encoder_rejects_unknown_strategy() -> None:
    assert key_encoder("repr") is encode_key
    assert key_encoder("structural") is structural_key
    with pytest.raises(ValueError, match="Unsupported key strategy"):
        key_encoder("fuzzy")  # type: ignore[arg-type]
