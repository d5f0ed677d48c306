"""
どこで: `src/escher/api/export.py`。
何を: Picture をキャンバス全体に描いてファイルへ書き出す公開導線 `Export` を提供する。
なぜ: 対話ウィンドウなしで 1 枚の Picture を保存できる形を固定するため。
"""

from __future__ import annotations

from pathlib import Path

from escher.core.frame import whole_canvas_frame
from escher.core.picture import Picture
from escher.core.realize import RealizedLayer, realize_picture
from escher.core.runtime_config import output_root_dir, runtime_config
from escher.core.style import ColorRGB, StyleDefaults
from escher.export.image import export_png
from escher.export.svg import export_svg

_SUFFIXES = {"svg": ".svg", "png": ".png", "image": ".png"}


def default_output_path(name: str, fmt: str = "svg") -> Path:
    """`{output_root}/{ext}/{name}.{ext}` を返す。"""
    ext = _SUFFIXES[fmt].lstrip(".")
    return output_root_dir() / ext / f"{name}.{ext}"


def _output_path(path: str | Path, suffix: str) -> Path:
    """拡張子なしなら `suffix` を補い、食い違う拡張子は拒否する。"""
    out = Path(path)
    if not out.suffix:
        return out.with_suffix(suffix)
    if out.suffix.lower() != suffix:
        raise ValueError(f"出力パスの拡張子 {out.suffix!r} が fmt の {suffix!r} と一致しない: {out}")
    return out


class Export:
    """Picture をキャンバス全体の Frame に描き、ファイルへ書き出す。

    Parameters
    ----------
    picture : Picture
        出力対象。
    fmt : str
        出力フォーマット。`"svg"`, `"png"`（`"image"` は `"png"` の別名）。
    path : str or Path
        出力先パス。拡張子を省略すると fmt から補う。
    canvas_size : tuple[int, int] or None
        キャンバス寸法。None なら config の `canvas.size`。
    line_color, line_thickness, background_color
        既定スタイル。None なら config の値。

    Raises
    ------
    ValueError
        未対応の fmt、または path の拡張子が fmt と食い違う場合。
    """

    def __init__(
        self,
        picture: Picture,
        fmt: str,
        path: str | Path,
        *,
        canvas_size: tuple[int, int] | None = None,
        line_color: ColorRGB | None = None,
        line_thickness: float | None = None,
        background_color: ColorRGB | None = None,
    ) -> None:
        cfg = runtime_config()
        key = str(fmt).lower().strip()
        if key not in _SUFFIXES:
            raise ValueError(f"未対応の export fmt: {fmt!r}")
        self.fmt = "png" if key == "image" else key
        self.path = _output_path(path, _SUFFIXES[key])

        self.canvas_size = canvas_size if canvas_size is not None else cfg.canvas_size
        defaults = StyleDefaults(
            color=line_color if line_color is not None else cfg.line_color,
            thickness=float(line_thickness if line_thickness is not None else cfg.line_thickness),
        )
        frame = whole_canvas_frame(*self.canvas_size)
        self.layers: list[RealizedLayer] = realize_picture(picture, frame, defaults)

        if self.fmt == "svg":
            export_svg(self.layers, self.path, canvas_size=self.canvas_size)
            return
        export_png(
            self.layers,
            self.path,
            canvas_size=self.canvas_size,
            scale=cfg.png_scale,
            background_color=background_color if background_color is not None else cfg.background_color,
        )
