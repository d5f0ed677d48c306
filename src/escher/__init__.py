# どこで: `src/escher/__init__.py`。
# 何を: ルート `escher` パッケージとして Picture 代数の公開 API を再エクスポートする。

from __future__ import annotations

from escher.api import Export
from escher.core.canvas import Bitmap, Canvas, RecordingCanvas
from escher.core.combinators import (
    below,
    beside,
    combine_four,
    corner_split,
    flip_horiz,
    flip_vert,
    identity,
    quartet,
    right_split,
    rotate,
    rotate180,
    rotate270,
    rotate90,
    split,
    square_limit,
    square_of_four,
    up_split,
)
from escher.core.frame import Frame, frame_coord_map, frame_painter, whole_canvas_frame
from escher.core.picture import (
    Picture,
    draw,
    image_picture,
    over,
    path,
    segment_picture,
    styled,
    transform_picture,
)
from escher.core.style import Style
from escher.core.vector import Vector2, add_vec, scale_vec, sub_vec

__all__ = [
    "Bitmap",
    "Canvas",
    "Export",
    "Frame",
    "Picture",
    "RecordingCanvas",
    "Style",
    "Vector2",
    "add_vec",
    "below",
    "beside",
    "combine_four",
    "corner_split",
    "draw",
    "flip_horiz",
    "flip_vert",
    "frame_coord_map",
    "frame_painter",
    "identity",
    "image_picture",
    "over",
    "path",
    "quartet",
    "right_split",
    "rotate",
    "rotate180",
    "rotate270",
    "rotate90",
    "scale_vec",
    "segment_picture",
    "split",
    "square_limit",
    "square_of_four",
    "styled",
    "sub_vec",
    "transform_picture",
    "up_split",
    "whole_canvas_frame",
]
