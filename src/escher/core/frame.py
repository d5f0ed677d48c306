"""
どこで: `src/escher/core/frame.py`。
何を: 平行四辺形座標系 Frame と、単位正方形からデバイス座標への写像を定義する。
なぜ: 全ての描画と変換合成がこの 1 つの写像の上に組み立てられるため。
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from escher.core.vector import Vector2, add_vec, as_vec, scale_vec

if TYPE_CHECKING:
    from escher.core.canvas import Canvas


@dataclass(frozen=True, slots=True)
class Frame:
    """origin と 2 本の基底ベクトルで定まる平行四辺形。

    Parameters
    ----------
    origin : Vector2
        単位正方形の (0, 0) が写る点。
    e1 : Vector2
        単位正方形の x 方向が写るベクトル。
    e2 : Vector2
        単位正方形の y 方向が写るベクトル。

    Notes
    -----
    e1 と e2 が線形従属な退化 Frame も許容する（描画が線/点に潰れるだけ）。
    """

    origin: Vector2
    e1: Vector2
    e2: Vector2

    @classmethod
    def of(
        cls,
        origin: Vector2 | Sequence[float],
        e1: Vector2 | Sequence[float],
        e2: Vector2 | Sequence[float],
    ) -> "Frame":
        """タプル表記も受け付けて Frame を生成する。"""
        return cls(origin=as_vec(origin), e1=as_vec(e1), e2=as_vec(e2))

    def map(self, point: Vector2) -> Vector2:
        """単位正方形座標 `point` をデバイス座標へ写す。"""
        return add_vec(
            self.origin,
            add_vec(scale_vec(self.e1, point.x), scale_vec(self.e2, point.y)),
        )

    def matrix(self) -> np.ndarray:
        """写像と等価な 3x3 同次アフィン行列（float64）を返す。"""
        return np.array(
            [
                [self.e1.x, self.e2.x, self.origin.x],
                [self.e1.y, self.e2.y, self.origin.y],
                [0.0, 0.0, 1.0],
            ],
            dtype=np.float64,
        )

    def corners(self) -> tuple[Vector2, Vector2, Vector2, Vector2]:
        """origin, origin+e1, origin+e1+e2, origin+e2 の順に 4 隅を返す。"""
        o = self.origin
        return (o, o + self.e1, o + self.e1 + self.e2, o + self.e2)


def frame_coord_map(frame: Frame) -> Callable[[Vector2], Vector2]:
    """Frame の座標写像を関数として返す。"""
    return frame.map


def whole_canvas_frame(width: float, height: float) -> Frame:
    """幅 W・高さ H のキャンバス全体を覆う Frame を返す。

    Raises
    ------
    ValueError
        width / height が正でない場合。
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"canvas size は正の値である必要がある: got={(width, height)!r}")
    return Frame(
        origin=Vector2(0.0, 0.0),
        e1=Vector2(float(width), 0.0),
        e2=Vector2(0.0, float(height)),
    )


def frame_painter(frame: Frame, canvas: "Canvas") -> None:
    """Frame の平行四辺形の 4 辺を描く（確認用）。"""
    o, a, c, b = frame.corners()
    canvas.draw_line(o, a)
    canvas.draw_line(o, b)
    canvas.draw_line(b, c)
    canvas.draw_line(a, c)


__all__ = ["Frame", "frame_coord_map", "frame_painter", "whole_canvas_frame"]
