# src/escher/core/shapes.py
# path / segment_picture で組み立てた基本図形。
# 座標は y 下向きのキャンバスで正立して見える向きで記述している。

from __future__ import annotations

from escher.core.picture import SegmentPicture, path, segment_picture

box: SegmentPicture = segment_picture(path((0, 0), (1, 0), (1, 1), (0, 1), (0, 0)))

x: SegmentPicture = segment_picture(path((0, 0), (1, 1)) + path((1, 0), (0, 1)))

diamond: SegmentPicture = segment_picture(
    path((0.5, 0), (1, 0.5), (0.5, 1), (0, 0.5), (0.5, 0))
)

diag: SegmentPicture = segment_picture([((0, 0), (1, 1))])

# SICP の "George"。
george: SegmentPicture = segment_picture(
    path((0, 0.15), (0.15, 0.4), (0.3, 0.35), (0.4, 0.35), (0.35, 0.15), (0.4, 0))
    + path((0.6, 0), (0.65, 0.15), (0.6, 0.35), (0.75, 0.35), (1, 0.65))
    + path((1, 0.85), (0.6, 0.55), (0.75, 1))
    + path((0.6, 1), (0.5, 0.7), (0.4, 1))
    + path((0.25, 1), (0.35, 0.5), (0.3, 0.4), (0.15, 0.6), (0, 0.35))
)


__all__ = ["box", "diag", "diamond", "george", "x"]
