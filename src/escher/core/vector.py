# src/escher/core/vector.py
# 2 次元ベクトル（点）の値型と純粋な算術演算。

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from types import NotImplementedType


@dataclass(frozen=True, slots=True)
class Vector2:
    """不変の 2 次元ベクトル / 点。

    Parameters
    ----------
    x : float
        x 成分。
    y : float
        y 成分。
    """

    x: float
    y: float

    def __add__(self, other: object) -> "Vector2 | NotImplementedType":
        if not isinstance(other, Vector2):
            return NotImplemented
        return add_vec(self, other)

    def __sub__(self, other: object) -> "Vector2 | NotImplementedType":
        if not isinstance(other, Vector2):
            return NotImplemented
        return sub_vec(self, other)

    def __mul__(self, s: object) -> "Vector2 | NotImplementedType":
        if isinstance(s, bool) or not isinstance(s, (int, float)):
            return NotImplemented
        return scale_vec(self, s)

    def __rmul__(self, s: object) -> "Vector2 | NotImplementedType":
        return self.__mul__(s)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def as_tuple(self) -> tuple[float, float]:
        """`(x, y)` のタプルを返す。"""
        return (self.x, self.y)


def add_vec(a: Vector2, b: Vector2) -> Vector2:
    """ベクトル和 `a + b` を返す。"""
    return Vector2(a.x + b.x, a.y + b.y)


def sub_vec(a: Vector2, b: Vector2) -> Vector2:
    """ベクトル差 `a - b` を返す。"""
    return Vector2(a.x - b.x, a.y - b.y)


def scale_vec(v: Vector2, s: float) -> Vector2:
    """スカラー倍 `v * s` を返す。"""
    return Vector2(v.x * s, v.y * s)


def as_vec(value: Vector2 | Sequence[float]) -> Vector2:
    """Vector2 または長さ 2 のシーケンスを Vector2 に正規化する。

    Parameters
    ----------
    value : Vector2 or Sequence[float]
        `Vector2` そのもの、または `(x, y)`。

    Returns
    -------
    Vector2
        正規化済みベクトル。

    Raises
    ------
    ValueError
        長さ 2 のシーケンスでない場合。
    """
    if isinstance(value, Vector2):
        return value
    try:
        x, y = value
    except Exception as exc:
        raise ValueError(f"vector は長さ 2 のシーケンスである必要がある: {value!r}") from exc
    return Vector2(float(x), float(y))


__all__ = ["Vector2", "add_vec", "as_vec", "scale_vec", "sub_vec"]
