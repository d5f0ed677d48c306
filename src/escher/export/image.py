"""
どこで: `src/escher/export/image.py`。
何を: 隣に書いた SVG を外部ラスタライザ resvg で PNG に変換する。
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

from escher.core.realize import RealizedLayer
from escher.core.style import ColorRGB, rgb01_to_hex
from escher.export.svg import export_svg

_logger = logging.getLogger(__name__)


def scaled_size(canvas_size: tuple[int, int], scale: float) -> tuple[int, int]:
    """キャンバス寸法に倍率を掛けた PNG の画素寸法を返す。

    Raises
    ------
    ValueError
        結果が 1 画素未満になる場合。
    """
    width, height = (int(round(v * float(scale))) for v in canvas_size)
    if width <= 0 or height <= 0:
        raise ValueError(f"PNG 寸法が正になりません: canvas_size={canvas_size!r}, scale={scale!r}")
    return width, height


def export_png(
    layers: Sequence[RealizedLayer],
    path: str | Path,
    *,
    canvas_size: tuple[int, int],
    scale: float = 1.0,
    background_color: ColorRGB = (1.0, 1.0, 1.0),
) -> Path:
    """Layer 列を PNG として保存する。

    同じ stem の `.svg` を先に書き出し、それを resvg でラスタライズする。
    SVG は残すので、別の倍率で PNG を作り直せる。

    Parameters
    ----------
    layers : Sequence[RealizedLayer]
        realize 済みの Layer 列。
    path : str or Path
        出力 PNG のパス。
    canvas_size : tuple[int, int]
        キャンバス寸法（SVG の viewBox）。
    scale : float
        キャンバス 1 単位あたりの画素数。
    background_color : tuple[float, float, float]
        背景色 RGB（0..1）。

    Raises
    ------
    RuntimeError
        resvg が見つからない、またはラスタライズに失敗した場合。
    """
    png_path = Path(path)
    svg_path = export_svg(layers, png_path.with_suffix(".svg"), canvas_size=canvas_size)
    width, height = scaled_size(canvas_size, scale)
    _run_resvg(
        [
            "resvg",
            "--width", str(width),
            "--height", str(height),
            "--background", rgb01_to_hex(background_color),
            str(svg_path),
            str(png_path),
        ]
    )
    _logger.info("PNG を保存しました: %s (%dx%d)", png_path, width, height)
    return png_path


def _run_resvg(cmd: list[str]) -> None:
    try:
        proc = subprocess.run(cmd, capture_output=True, text=True, check=False)
    except FileNotFoundError as exc:
        raise RuntimeError("resvg が見つかりません（PATH に resvg をインストールしてください）") from exc
    if proc.returncode != 0:
        details = (proc.stderr or proc.stdout or "").strip()
        raise RuntimeError(f"resvg が失敗しました (code={proc.returncode}) {details}".strip())
