"""
どこで: `src/escher/core/canvas.py`。
何を: 描画バックエンド（Canvas）と画像（Bitmap）の能力インタフェース、および記録用 Canvas を定義する。
なぜ: Picture 代数をウィンドウ系・画像デコードから切り離し、ヘッドレスに検証・出力できるようにするため。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from escher.core.frame import Frame
from escher.core.style import Style
from escher.core.vector import Vector2


@runtime_checkable
class Bitmap(Protocol):
    """画素寸法を持つ画像。読み込み/デコードは範囲外。"""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...


class Canvas(Protocol):
    """デバイス座標で線分と画像を描ける描画先。"""

    def draw_line(self, start: Vector2, end: Vector2, *, style: Style | None = None) -> None: ...

    def draw_image(self, bitmap: Bitmap, frame: Frame) -> None: ...


@dataclass(frozen=True, slots=True)
class LineCommand:
    """記録された線分描画。"""

    start: Vector2
    end: Vector2
    style: Style | None = None


@dataclass(frozen=True, slots=True)
class ImageCommand:
    """記録された画像描画。"""

    bitmap: Bitmap
    frame: Frame


DrawCommand = LineCommand | ImageCommand


@dataclass(slots=True)
class RecordingCanvas:
    """描画呼び出しを呼び出し順に記録する Canvas。"""

    commands: list[DrawCommand] = field(default_factory=list)

    def draw_line(self, start: Vector2, end: Vector2, *, style: Style | None = None) -> None:
        self.commands.append(LineCommand(start=start, end=end, style=style))

    def draw_image(self, bitmap: Bitmap, frame: Frame) -> None:
        self.commands.append(ImageCommand(bitmap=bitmap, frame=frame))

    @property
    def lines(self) -> list[LineCommand]:
        """記録済みの線分描画だけを返す。"""
        return [c for c in self.commands if isinstance(c, LineCommand)]

    @property
    def images(self) -> list[ImageCommand]:
        """記録済みの画像描画だけを返す。"""
        return [c for c in self.commands if isinstance(c, ImageCommand)]

    def segments(self) -> list[tuple[tuple[float, float], tuple[float, float]]]:
        """線分を `((x0, y0), (x1, y1))` のタプル列として返す。"""
        return [(c.start.as_tuple(), c.end.as_tuple()) for c in self.lines]

    def clear(self) -> None:
        self.commands.clear()


__all__ = [
    "Bitmap",
    "Canvas",
    "DrawCommand",
    "ImageCommand",
    "LineCommand",
    "RecordingCanvas",
]
