"""
どこで: `src/escher/core/picture.py`。
何を: 「Frame を受け取って自分を描く」Picture 抽象と、その基本実装（線分・画像・変換・重ね合わせ・スタイル）を定義する。
なぜ: 全ての組み合わせ子がこの少数のノード型の合成として表現できるようにするため。
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import numpy as np

from escher.core.canvas import Bitmap, Canvas
from escher.core.frame import Frame
from escher.core.style import Style
from escher.core.vector import Vector2, as_vec

Point = Vector2 | Sequence[float]
Segment = tuple[Vector2, Vector2]


class Picture(ABC):
    """Frame と Canvas を受け取り、描画副作用だけを起こす不変オブジェクト。

    Notes
    -----
    インスタンスは構築後に変化しないため、複数の合成や描画で共有してよい。
    """

    __slots__ = ()

    @abstractmethod
    def render(self, frame: Frame, canvas: Canvas) -> None:
        """`frame` が表す領域へ自分を描く。"""

    def __call__(self, frame: Frame, canvas: Canvas) -> None:
        self.render(frame, canvas)


def path(*points: Point) -> list[Segment]:
    """点列を隣接ペアの線分列に変換する。

    Parameters
    ----------
    *points : Vector2 or Sequence[float]
        順序付きの点列。

    Returns
    -------
    list[tuple[Vector2, Vector2]]
        `k` 点に対して `k-1` 本の線分。2 点未満なら空リスト。
    """
    vecs = [as_vec(p) for p in points]
    return list(zip(vecs[:-1], vecs[1:]))


def _segments_to_array(segments: Iterable[Sequence[Point]]) -> np.ndarray:
    rows: list[list[tuple[float, float]]] = []
    for segment in segments:
        try:
            start, end = segment
        except Exception as exc:
            raise ValueError(f"segment は (start, end) の 2 要素である必要がある: {segment!r}") from exc
        rows.append([as_vec(start).as_tuple(), as_vec(end).as_tuple()])
    if not rows:
        return np.zeros((0, 2, 2), dtype=np.float64)
    return np.asarray(rows, dtype=np.float64)


@dataclass(frozen=True, slots=True, eq=False)
class SegmentPicture(Picture):
    """単位正方形座標の線分列から成る Picture。

    Parameters
    ----------
    segments : np.ndarray
        float64 型 shape (K, 2, 2) の線分配列（K 本 x 始点/終点 x xy）。

    Notes
    -----
    配列は writeable=False に固定する。描画は保存順を保つ。
    """

    segments: np.ndarray

    def __post_init__(self) -> None:
        segments = np.asarray(self.segments, dtype=np.float64)
        if segments.size == 0:
            segments = np.zeros((0, 2, 2), dtype=np.float64)
        if segments.ndim != 3 or segments.shape[1:] != (2, 2):
            raise ValueError("segments は shape (K,2,2) の配列である必要がある")
        segments = segments.copy()
        segments.setflags(write=False)
        object.__setattr__(self, "segments", segments)

    def map_segments(self, frame: Frame) -> np.ndarray:
        """全線分をまとめてデバイス座標へ写した (K, 2, 2) 配列を返す。"""
        m = frame.matrix()
        points = self.segments.reshape(-1, 2)
        mapped = points @ m[:2, :2].T + m[:2, 2]
        return mapped.reshape(-1, 2, 2)

    def render(self, frame: Frame, canvas: Canvas) -> None:
        for (x0, y0), (x1, y1) in self.map_segments(frame).tolist():
            canvas.draw_line(Vector2(x0, y0), Vector2(x1, y1))


def segment_picture(segments: Iterable[Sequence[Point]]) -> SegmentPicture:
    """線分列（`path(...)` の結果など）から Picture を作る。"""
    return SegmentPicture(_segments_to_array(segments))


def image_affine(bitmap: Bitmap, frame: Frame) -> np.ndarray:
    """画素座標からデバイス座標への 2x3 アフィン行列を返す。

    画素座標は x 右向き・y が行方向で、`[0, width] x [0, height]` が
    Frame の平行四辺形全体に写る（せん断を含みうる）。
    """
    w = float(bitmap.width)
    h = float(bitmap.height)
    return np.array(
        [
            [frame.e1.x / w, frame.e2.x / h, frame.origin.x],
            [frame.e1.y / w, frame.e2.y / h, frame.origin.y],
        ],
        dtype=np.float64,
    )


@dataclass(frozen=True, slots=True, eq=False)
class ImagePicture(Picture):
    """ビットマップを Frame 全体に貼る Picture。

    Notes
    -----
    ビットマップは借用のみでコピーしない。リサンプリングは Canvas 側の責務。
    """

    bitmap: Bitmap

    def __post_init__(self) -> None:
        width = int(self.bitmap.width)
        height = int(self.bitmap.height)
        if width <= 0 or height <= 0:
            raise ValueError(f"bitmap の寸法は正である必要がある: got={(width, height)!r}")

    def render(self, frame: Frame, canvas: Canvas) -> None:
        canvas.draw_image(self.bitmap, frame)


def image_picture(bitmap: Bitmap) -> ImagePicture:
    """ビットマップから Picture を作る。"""
    return ImagePicture(bitmap)


@dataclass(frozen=True, slots=True, eq=False)
class TransformedPicture(Picture):
    """子 Picture を、与えられた Frame の部分領域へ描く Picture。

    Parameters
    ----------
    picture : Picture
        描画対象。
    origin, e1, e2 : Vector2
        部分領域の 3 隅（単位正方形座標）。範囲外も許容する。
    """

    picture: Picture
    origin: Vector2
    e1: Vector2
    e2: Vector2

    def sub_frame(self, frame: Frame) -> Frame:
        """`frame` から子に渡す Frame を導出する。"""
        new_origin = frame.map(self.origin)
        return Frame(
            origin=new_origin,
            e1=frame.map(self.e1) - new_origin,
            e2=frame.map(self.e2) - new_origin,
        )

    def render(self, frame: Frame, canvas: Canvas) -> None:
        self.picture.render(self.sub_frame(frame), canvas)


def transform_picture(picture: Picture, origin: Point, e1: Point, e2: Point) -> TransformedPicture:
    """`picture` を単位正方形の `(origin, e1, e2)` 領域へ描く Picture を返す。"""
    return TransformedPicture(picture, as_vec(origin), as_vec(e1), as_vec(e2))


@dataclass(frozen=True, slots=True, eq=False)
class CompositePicture(Picture):
    """複数の Picture を同じ Frame へ順に描く Picture。"""

    parts: tuple[Picture, ...]

    def render(self, frame: Frame, canvas: Canvas) -> None:
        for part in self.parts:
            part.render(frame, canvas)


def over(p1: Picture, p2: Picture) -> CompositePicture:
    """`p2` の上に `p1` を重ねる（同じ Frame に p2 → p1 の順で描く）。"""
    return CompositePicture((p2, p1))


class _StyledCanvas:
    """style 未指定の線分描画に既定の style を差し込む Canvas ラッパ。"""

    __slots__ = ("_canvas", "_style")

    def __init__(self, canvas: Canvas, style: Style) -> None:
        self._canvas = canvas
        self._style = style

    def draw_line(self, start: Vector2, end: Vector2, *, style: Style | None = None) -> None:
        self._canvas.draw_line(start, end, style=style if style is not None else self._style)

    def draw_image(self, bitmap: Bitmap, frame: Frame) -> None:
        self._canvas.draw_image(bitmap, frame)


@dataclass(frozen=True, slots=True, eq=False)
class StyledPicture(Picture):
    """子 Picture の線分描画に明示的な Style を付ける Picture。

    Notes
    -----
    入れ子になった場合は内側の Style が優先される。
    """

    picture: Picture
    style: Style

    def render(self, frame: Frame, canvas: Canvas) -> None:
        self.picture.render(frame, _StyledCanvas(canvas, self.style))


def styled(
    picture: Picture,
    style: Style | None = None,
    *,
    color: tuple[float, float, float] | None = None,
    thickness: float | None = None,
) -> StyledPicture:
    """`picture` に Style を付ける。`style` 省略時は color/thickness から作る。"""
    if style is None:
        style = Style(color=color, thickness=thickness)
    return StyledPicture(picture, style)


def draw(picture: Picture, frame: Frame, canvas: Canvas) -> None:
    """トップレベルの描画入口。`picture.render(frame, canvas)` と等価。"""
    picture.render(frame, canvas)


__all__ = [
    "CompositePicture",
    "ImagePicture",
    "Picture",
    "SegmentPicture",
    "StyledPicture",
    "TransformedPicture",
    "draw",
    "image_affine",
    "image_picture",
    "over",
    "path",
    "segment_picture",
    "styled",
    "transform_picture",
]
