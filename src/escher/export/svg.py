"""
どこで: `src/escher/export/svg.py`。
何を: realize 済みの Layer 列を、Layer ごとの `<g>` 要素から成る SVG として保存する。
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from html import escape
from pathlib import Path

import numpy as np

from escher.core.canvas import ImageCommand
from escher.core.picture import image_affine
from escher.core.realize import RealizedLayer
from escher.core.style import rgb01_to_hex

_logger = logging.getLogger(__name__)

_SVG_NS = "http://www.w3.org/2000/svg"


def _num(value: float, decimals: int = 3) -> str:
    """小数点以下 `decimals` 桁の決定的な文字列を返す（-0 は 0 に揃える）。"""
    text = f"{float(value):.{decimals}f}"
    if float(text) == 0.0:
        return text.lstrip("-")
    return text


def _segment_paths(layer: RealizedLayer) -> list[str]:
    """Layer のポリラインを `<path>` 要素の列に変換する。"""
    coords = layer.realized.coords
    offsets = layer.realized.offsets.tolist()
    out: list[str] = []
    for start, end in zip(offsets[:-1], offsets[1:]):
        if end - start < 2:
            continue
        points = coords[start:end]
        d = "M " + " L ".join(f"{_num(px)} {_num(py)}" for px, py in points)
        out.append(f'    <path d="{d}" />')
    return out


def _image_element(command: ImageCommand) -> str | None:
    """画像描画を `<image>` 要素へ変換する。href を持たない bitmap は None。"""
    href = getattr(command.bitmap, "href", None)
    if not href:
        _logger.warning(
            "href を持たない bitmap は SVG に出力できないためスキップします: %r",
            command.bitmap,
        )
        return None
    # SVG の matrix(a b c d e f) は列優先で [[a c e], [b d f]]。
    m = image_affine(command.bitmap, command.frame)
    matrix = " ".join(_num(v, 6) for v in np.asarray(m).T.reshape(-1))
    return (
        f'    <image href="{escape(str(href), quote=True)}" x="0" y="0" '
        f'width="{int(command.bitmap.width)}" height="{int(command.bitmap.height)}" '
        f'preserveAspectRatio="none" transform="matrix({matrix})" />'
    )


def _layer_group(layer: RealizedLayer) -> list[str]:
    """1 つの Layer を `<g>` 要素にする。中身が空なら空リスト。"""
    body = [el for el in map(_image_element, layer.images) if el is not None]
    body += _segment_paths(layer)
    if not body:
        return []
    head = (
        f'  <g fill="none" stroke="{rgb01_to_hex(layer.color)}" '
        f'stroke-width="{_num(layer.thickness)}" stroke-linecap="round" '
        f'stroke-linejoin="round">'
    )
    return [head, *body, "  </g>"]


def export_svg(
    layers: Sequence[RealizedLayer],
    path: str | Path,
    *,
    canvas_size: tuple[int, int],
) -> Path:
    """Layer 列を SVG として保存する。

    Layer は与えられた順に `<g>` 要素として書き出すため、後の Layer が前面に来る。

    Parameters
    ----------
    layers : Sequence[RealizedLayer]
        realize 済みの Layer 列。
    path : str or Path
        出力先パス。
    canvas_size : tuple[int, int]
        キャンバス寸法（viewBox と width/height に使う）。

    Returns
    -------
    Path
        保存先パス。

    Raises
    ------
    ValueError
        canvas_size が正でない場合。
    """
    width, height = (int(v) for v in canvas_size)
    if width <= 0 or height <= 0:
        raise ValueError(f"canvas_size は正の値である必要がある: got={canvas_size!r}")

    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg xmlns="{_SVG_NS}" viewBox="0 0 {width} {height}" width="{width}" height="{height}">',
    ]
    for layer in layers:
        lines.extend(_layer_group(layer))
    lines.append("</svg>")

    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text("\n".join(lines) + "\n", encoding="utf-8", newline="\n")
    _logger.info("SVG を保存しました: %s (%d layers)", out, len(layers))
    return out
