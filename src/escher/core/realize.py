"""
どこで: `src/escher/core/realize.py`。
何を: Picture を記録用 Canvas に描き、スタイルごとの実体配列（RealizedLayer 列）へまとめる。
なぜ: SVG/PNG などのヘッドレス出力が Picture 代数を知らずに済むようにするため。
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from escher.core.canvas import ImageCommand, LineCommand, RecordingCanvas
from escher.core.frame import Frame
from escher.core.picture import Picture
from escher.core.style import ColorRGB, ResolvedStyle, StyleDefaults, resolve_style


@dataclass(frozen=True, slots=True)
class RealizedGeometry:
    """描画結果の頂点配列とポリライン区切り。

    Parameters
    ----------
    coords : np.ndarray
        float64 型 shape (N, 2) のデバイス座標頂点配列。
    offsets : np.ndarray
        int32 型 shape (M+1,) のポリライン開始インデックス配列。

    Notes
    -----
    配列は writeable=False で保持する。
    """

    coords: np.ndarray
    offsets: np.ndarray

    def __post_init__(self) -> None:
        coords = np.asarray(self.coords, dtype=np.float64)
        offsets = np.asarray(self.offsets)

        if coords.size == 0:
            coords = np.zeros((0, 2), dtype=np.float64)
        if coords.ndim != 2 or coords.shape[1] != 2:
            raise ValueError("coords は shape (N,2) の 2 次元配列である必要がある")

        if offsets.ndim != 1:
            raise ValueError("offsets は 1 次元配列である必要がある")

        if offsets.dtype != np.int32:
            offsets = offsets.astype(np.int32, copy=False)

        if offsets.size == 0:
            raise ValueError("offsets は少なくとも 1 要素を含む必要がある")

        if offsets[0] != 0:
            raise ValueError("offsets[0] は 0 である必要がある")

        if offsets[-1] != coords.shape[0]:
            raise ValueError("offsets[-1] は coords 行数と一致する必要がある")

        if np.any(np.diff(offsets) < 0):
            raise ValueError("offsets は単調非減少である必要がある")

        coords = coords.copy()
        offsets = offsets.copy()
        coords.setflags(write=False)
        offsets.setflags(write=False)

        object.__setattr__(self, "coords", coords)
        object.__setattr__(self, "offsets", offsets)

    @property
    def n_polylines(self) -> int:
        return int(self.offsets.size - 1)


def empty_realized_geometry() -> RealizedGeometry:
    return RealizedGeometry(
        coords=np.zeros((0, 2), dtype=np.float64),
        offsets=np.zeros((1,), dtype=np.int32),
    )


@dataclass(frozen=True, slots=True)
class RealizedLayer:
    """同じスタイルで連続して描かれた線分、または連続して描かれた画像のまとまり。"""

    realized: RealizedGeometry
    color: ColorRGB
    thickness: float
    images: tuple[ImageCommand, ...] = ()


@dataclass(slots=True)
class _LayerBuilder:
    style: ResolvedStyle
    points: list[tuple[float, float]] = field(default_factory=list)
    images: list[ImageCommand] = field(default_factory=list)

    def build(self) -> RealizedLayer:
        if self.points:
            coords = np.asarray(self.points, dtype=np.float64)
            offsets = np.arange(0, len(self.points) + 1, 2, dtype=np.int32)
            realized = RealizedGeometry(coords=coords, offsets=offsets)
        else:
            realized = empty_realized_geometry()
        return RealizedLayer(
            realized=realized,
            color=self.style.color,
            thickness=self.style.thickness,
            images=tuple(self.images),
        )


def realize_picture(
    picture: Picture,
    frame: Frame,
    defaults: StyleDefaults,
) -> list[RealizedLayer]:
    """Picture を `frame` に描いた結果を RealizedLayer 列として返す。

    Parameters
    ----------
    picture : Picture
        描画対象。
    frame : Frame
        描画先の Frame（通常はキャンバス全体）。
    defaults : StyleDefaults
        Style 未指定の線分に使う既定値。

    Returns
    -------
    list[RealizedLayer]
        描画順を保った Layer 列。同じ解決済みスタイルが連続する線分は
        1 つの Layer にまとめ、各線分は 2 頂点のポリラインになる。
        連続する画像は線分を含まない別の Layer にまとめるため、
        1 つの Layer が線分と画像の両方を持つことはない。
    """
    canvas = RecordingCanvas()
    picture.render(frame, canvas)

    out: list[RealizedLayer] = []
    current: _LayerBuilder | None = None
    for command in canvas.commands:
        if isinstance(command, LineCommand):
            style = resolve_style(command.style, defaults)
            if current is None or current.images or current.style != style:
                if current is not None:
                    out.append(current.build())
                current = _LayerBuilder(style=style)
            current.points.append(command.start.as_tuple())
            current.points.append(command.end.as_tuple())
            continue
        if current is None or current.points:
            if current is not None:
                out.append(current.build())
            current = _LayerBuilder(style=resolve_style(None, defaults))
        current.images.append(command)

    if current is not None:
        out.append(current.build())
    return out


__all__ = [
    "RealizedGeometry",
    "RealizedLayer",
    "empty_realized_geometry",
    "realize_picture",
]
