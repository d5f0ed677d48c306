"""
どこで: `src/escher/core/style.py`。
何を: 線の色・線幅を表す Style と、その既定値解決・色変換ユーティリティを定義する。
"""

from __future__ import annotations

from dataclasses import dataclass

ColorRGB = tuple[float, float, float]


@dataclass(frozen=True, slots=True)
class Style:
    """描画スタイル。None は「未指定（既定値に従う）」を表す。"""

    color: ColorRGB | None = None
    thickness: float | None = None


@dataclass(frozen=True, slots=True)
class StyleDefaults:
    """Style の欠損を埋める既定値。"""

    color: ColorRGB
    thickness: float


@dataclass(frozen=True, slots=True)
class ResolvedStyle:
    """色と線幅を欠損なく持つスタイル。"""

    color: ColorRGB
    thickness: float


def resolve_style(style: Style | None, defaults: StyleDefaults) -> ResolvedStyle:
    """Style の色・線幅を確定させる。

    Parameters
    ----------
    style : Style or None
        未指定（None を含む）を許容する Style。
    defaults : StyleDefaults
        欠損を埋めるための既定スタイル。

    Returns
    -------
    ResolvedStyle
        色と線幅を欠損なく持つスタイル。

    Raises
    ------
    ValueError
        thickness が正の値でない場合。
    """
    if style is None:
        style = Style()

    thickness = style.thickness if style.thickness is not None else defaults.thickness
    if thickness <= 0:
        raise ValueError("thickness は正の値である必要がある")

    color = style.color if style.color is not None else defaults.color
    return ResolvedStyle(color=color, thickness=float(thickness))


def rgb01_to_rgb255(rgb: ColorRGB) -> tuple[int, int, int]:
    """0..1 float の RGB を 0..255 int の RGB に変換して返す。"""

    r, g, b = rgb
    out: list[int] = []
    for v in (r, g, b):
        fv = float(v)
        fv = 0.0 if fv < 0.0 else 1.0 if fv > 1.0 else fv
        out.append(int(round(fv * 255.0)))
    return int(out[0]), int(out[1]), int(out[2])


def rgb01_to_hex(rgb: ColorRGB) -> str:
    """0..1 float RGB を #RRGGBB に変換して返す。"""
    r, g, b = rgb01_to_rgb255(rgb)
    return f"#{r:02X}{g:02X}{b:02X}"


__all__ = [
    "ColorRGB",
    "ResolvedStyle",
    "Style",
    "StyleDefaults",
    "resolve_style",
    "rgb01_to_hex",
    "rgb01_to_rgb255",
]
