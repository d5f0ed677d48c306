"""Vector2 と算術演算のテスト。"""

from __future__ import annotations

import pytest

from escher.core.vector import Vector2, add_vec, as_vec, scale_vec, sub_vec


def test_scale_add_sub_basic_values() -> None:
    assert scale_vec(Vector2(2, 3), 4) == Vector2(8, 12)
    assert add_vec(Vector2(-1, 2), Vector2(3, -2)) == Vector2(2, 0)
    assert sub_vec(Vector2(2, -3), Vector2(-1, -2)) == Vector2(3, -1)


def test_operators_match_functions() -> None:
    a = Vector2(1.5, -2.0)
    b = Vector2(0.25, 4.0)
    assert a + b == add_vec(a, b)
    assert a - b == sub_vec(a, b)
    assert a * 2 == scale_vec(a, 2)
    assert 2 * a == scale_vec(a, 2)
    assert -a == Vector2(-1.5, 2.0)


@pytest.mark.parametrize(
    ("a", "b", "s"),
    [
        (Vector2(1.0, 2.0), Vector2(3.0, 4.0), 2.0),
        (Vector2(-0.5, 0.25), Vector2(8.0, -16.0), -4.0),
        (Vector2(0.0, 0.0), Vector2(1.0, 1.0), 0.0),
    ],
)
def test_scale_distributes_over_add(a: Vector2, b: Vector2, s: float) -> None:
    assert scale_vec(add_vec(a, b), s) == add_vec(scale_vec(a, s), scale_vec(b, s))


def test_add_inverts_sub() -> None:
    a = Vector2(3.0, -7.0)
    b = Vector2(-2.0, 5.5)
    assert add_vec(a, sub_vec(b, a)) == b


def test_vector_is_immutable() -> None:
    v = Vector2(1.0, 2.0)
    with pytest.raises(AttributeError):
        v.x = 3.0  # type: ignore[misc]


def test_as_vec_accepts_tuples_and_rejects_bad_length() -> None:
    assert as_vec((1, 2)) == Vector2(1.0, 2.0)
    v = Vector2(0.5, 0.5)
    assert as_vec(v) is v
    with pytest.raises(ValueError):
        as_vec((1, 2, 3))
