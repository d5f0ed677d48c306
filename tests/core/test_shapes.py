"""基本図形のテスト。"""

from __future__ import annotations

import numpy as np

from escher.core.shapes import box, diag, diamond, george, x


def test_shape_segment_counts() -> None:
    assert box.segments.shape == (4, 2, 2)
    assert x.segments.shape == (2, 2, 2)
    assert diamond.segments.shape == (4, 2, 2)
    assert diag.segments.shape == (1, 2, 2)
    assert george.segments.shape == (17, 2, 2)


def test_box_is_closed_unit_square() -> None:
    assert box.segments[0, 0].tolist() == [0.0, 0.0]
    assert box.segments[-1, 1].tolist() == [0.0, 0.0]


def test_shapes_stay_inside_unit_square() -> None:
    for shape in (box, x, diamond, diag, george):
        assert np.all(shape.segments >= 0.0)
        assert np.all(shape.segments <= 1.0)


def test_george_is_left_right_asymmetric() -> None:
    points = {tuple(p) for p in george.segments.reshape(-1, 2).tolist()}
    assert (0.0, 0.15) in points
    assert (1.0, 0.15) not in points
