"""
どこで: `src/escher/core/combinators.py`。
何を: flip/rotate/beside/below などの Picture 組み合わせ子と、再帰的な split 系タイリングを定義する。
なぜ: 全ての空間的な組み合わせ子を transform_picture の合成だけで表現するため。
"""

from __future__ import annotations

from collections.abc import Callable

from escher.core.picture import (
    CompositePicture,
    Picture,
    over,
    transform_picture,
)

PictureOp = Callable[[Picture], Picture]
BinaryOp = Callable[[Picture, Picture], Picture]
SplitFn = Callable[[Picture, int], Picture]


def identity(p: Picture) -> Picture:
    return p


def flip_vert(p: Picture) -> Picture:
    """上下反転。"""
    return transform_picture(p, (0.0, 1.0), (1.0, 1.0), (0.0, 0.0))


def flip_horiz(p: Picture) -> Picture:
    """左右反転。"""
    return transform_picture(p, (1.0, 0.0), (0.0, 0.0), (1.0, 1.0))


def rotate90(p: Picture) -> Picture:
    """1/4 回転。向きはキャンバスの y 軸の向きに従う。"""
    return transform_picture(p, (1.0, 0.0), (1.0, 1.0), (0.0, 0.0))


rotate = rotate90


def rotate180(p: Picture) -> Picture:
    return rotate90(rotate90(p))


def rotate270(p: Picture) -> Picture:
    return rotate90(rotate90(rotate90(p)))


def beside(p1: Picture, p2: Picture) -> Picture:
    """x=0.5 で左右に分割し、左に `p1`、右に `p2` を描く。"""
    left = transform_picture(p1, (0.0, 0.0), (0.5, 0.0), (0.0, 1.0))
    right = transform_picture(p2, (0.5, 0.0), (1.0, 0.0), (0.5, 1.0))
    return CompositePicture((left, right))


def below(p1: Picture, p2: Picture) -> Picture:
    """上に `p1`、下に `p2`。`rotate90(beside(rotate270(p1), rotate270(p2)))`。"""
    return rotate90(beside(rotate270(p1), rotate270(p2)))


def quartet(p1: Picture, p2: Picture, p3: Picture, p4: Picture) -> Picture:
    """左上・右上・左下・右下の 4 分割配置。"""
    return below(beside(p1, p2), beside(p3, p4))


def square_of_four(tl: PictureOp, tr: PictureOp, bl: PictureOp, br: PictureOp) -> PictureOp:
    """4 隅それぞれの変換関数から、1 枚の Picture を 4 分割配置する関数を作る。

    Parameters
    ----------
    tl, tr, bl, br : Callable[[Picture], Picture]
        左上・右上・左下・右下に適用する変換。

    Returns
    -------
    Callable[[Picture], Picture]
        `below(beside(tl(p), tr(p)), beside(bl(p), br(p)))` を返す関数。
    """

    def combine(p: Picture) -> Picture:
        top = beside(tl(p), tr(p))
        bottom = beside(bl(p), br(p))
        return below(top, bottom)

    return combine


def check_depth(n: object) -> int:
    """再帰深さを検証して int で返す。

    Raises
    ------
    TypeError
        整数でない（bool を含む）場合。
    ValueError
        負の場合。
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"再帰深さは int である必要がある: got={n!r}")
    if n < 0:
        raise ValueError(f"再帰深さは 0 以上である必要がある: got={n}")
    return n


def split(f: BinaryOp, g: BinaryOp) -> SplitFn:
    """再帰分割の生成器。

    Parameters
    ----------
    f : Callable[[Picture, Picture], Picture]
        元の Picture と縮小版の組を並べる外側の組み合わせ子。
    g : Callable[[Picture, Picture], Picture]
        縮小版 2 枚を並べる内側の組み合わせ子。

    Returns
    -------
    Callable[[Picture, int], Picture]
        `n == 0` で `p` を、それ以外で `f(p, g(smaller, smaller))` を返す関数。
    """

    def split_rec(p: Picture, n: int) -> Picture:
        check_depth(n)
        return _split_rec(p, n)

    def _split_rec(p: Picture, n: int) -> Picture:
        if n == 0:
            return p
        smaller = _split_rec(p, n - 1)
        return f(p, g(smaller, smaller))

    return split_rec


right_split = split(beside, below)
up_split = split(below, beside)


def corner_split(p: Picture, n: int) -> Picture:
    """右上の隅へ向かって自己相似に細かくなるタイリング。

    Notes
    -----
    各段で up_split / right_split / corner_split をそれぞれ深さ n-1 で計算する。
    メモ化はしない。
    """
    check_depth(n)
    return _corner_split(p, n)


def _corner_split(p: Picture, n: int) -> Picture:
    if n == 0:
        return p
    up = up_split(p, n - 1)
    right = right_split(p, n - 1)
    top_left = beside(up, up)
    bottom_right = below(right, right)
    corner = _corner_split(p, n - 1)
    return beside(below(p, top_left), below(bottom_right, corner))


def square_limit(p: Picture, n: int) -> Picture:
    """corner_split を 4 方向に配置した対称タイリング。"""
    check_depth(n)
    return square_of_four(rotate180, flip_vert, flip_horiz, identity)(corner_split(p, n))


combine_four = square_of_four(flip_horiz, identity, rotate180, flip_vert)


__all__ = [
    "below",
    "beside",
    "check_depth",
    "combine_four",
    "corner_split",
    "flip_horiz",
    "flip_vert",
    "identity",
    "over",
    "quartet",
    "right_split",
    "rotate",
    "rotate180",
    "rotate270",
    "rotate90",
    "square_limit",
    "square_of_four",
    "split",
    "up_split",
]
