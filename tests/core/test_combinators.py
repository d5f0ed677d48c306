"""Picture 組み合わせ子と再帰タイリングのテスト。"""

from __future__ import annotations

import numpy as np
import pytest

from escher.core.canvas import RecordingCanvas
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
from escher.core.frame import Frame
from escher.core.picture import Picture, segment_picture
from escher.core.shapes import george

F = Frame.of((0, 0), (10, 0), (0, 10))
UNIT = Frame.of((0, 0), (1, 0), (0, 1))

diag = segment_picture([((0, 0), (1, 1))])
bottom_edge = segment_picture([((0, 0), (1, 0))])
blank = segment_picture([])


def _segments(picture: Picture, frame: Frame = F) -> np.ndarray:
    canvas = RecordingCanvas()
    picture.render(frame, canvas)
    return np.asarray(canvas.segments(), dtype=np.float64).reshape(-1, 2, 2)


def _assert_same_drawing(a: Picture, b: Picture, frame: Frame = F) -> None:
    np.testing.assert_allclose(_segments(a, frame), _segments(b, frame), rtol=0.0, atol=1e-9)


def _assert_segments(picture: Picture, expected, frame: Frame = F) -> None:
    np.testing.assert_allclose(
        _segments(picture, frame),
        np.asarray(expected, dtype=np.float64).reshape(-1, 2, 2),
        rtol=0.0,
        atol=1e-9,
    )


def test_flip_vert() -> None:
    _assert_segments(flip_vert(diag), [((0, 1), (1, 0))], UNIT)


def test_flip_horiz() -> None:
    _assert_segments(flip_horiz(diag), [((1, 0), (0, 1))], UNIT)


def test_rotate90_corner_mapping() -> None:
    # (u, v) -> (1 - v, u)
    _assert_segments(rotate90(bottom_edge), [((1, 0), (1, 1))], UNIT)
    assert rotate is rotate90


def test_rotate180_is_rotate90_twice() -> None:
    _assert_same_drawing(rotate180(george), rotate90(rotate90(george)))
    _assert_segments(rotate180(bottom_edge), [((1, 1), (0, 1))], UNIT)


def test_rotate270_is_rotate90_three_times() -> None:
    _assert_same_drawing(rotate270(george), rotate90(rotate90(rotate90(george))))


def test_four_quarter_turns_are_identity() -> None:
    frame = Frame.of((200, 50), (200, 100), (150, 200))
    _assert_same_drawing(rotate90(rotate90(rotate90(rotate90(george)))), george, frame)


def test_beside_splits_frame_at_half_width() -> None:
    half = segment_picture([((0, 0), (1, 0.5))])
    _assert_segments(beside(half, blank), [((0, 0), (5, 5))])
    _assert_segments(beside(diag, blank), [((0, 0), (5, 10))])
    _assert_segments(beside(blank, diag), [((5, 0), (10, 10))])


def test_beside_is_union_of_half_frames() -> None:
    left = Frame.of((0, 0), (5, 0), (0, 10))
    right = Frame.of((5, 0), (5, 0), (0, 10))
    expected = np.concatenate([_segments(george, left), _segments(diag, right)])
    np.testing.assert_allclose(_segments(beside(george, diag)), expected, atol=1e-9)


def test_below_puts_first_picture_on_top() -> None:
    _assert_segments(below(diag, diag), [((0, 0), (10, 5)), ((0, 5), (10, 10))])
    _assert_segments(below(bottom_edge, blank), [((0, 0), (10, 0))])


def test_below_is_rotated_beside() -> None:
    _assert_same_drawing(
        below(george, diag),
        rotate90(beside(rotate270(george), rotate270(diag))),
    )


def test_quartet_places_in_reading_order() -> None:
    _assert_segments(
        quartet(diag, diag, diag, diag),
        [
            ((0, 0), (5, 5)),
            ((5, 0), (10, 5)),
            ((0, 5), (5, 10)),
            ((5, 5), (10, 10)),
        ],
    )


def test_square_of_four_applies_corner_transforms() -> None:
    combine = square_of_four(identity, flip_horiz, flip_vert, rotate180)
    _assert_same_drawing(
        combine(george),
        below(beside(george, flip_horiz(george)), beside(flip_vert(george), rotate180(george))),
    )


def test_combine_four_layout() -> None:
    _assert_same_drawing(
        combine_four(george),
        below(beside(flip_horiz(george), george), beside(rotate180(george), flip_vert(george))),
    )


def test_split_depth_zero_returns_picture() -> None:
    assert right_split(george, 0) is george
    assert up_split(george, 0) is george
    assert split(beside, beside)(diag, 0) is diag


def test_right_split_depth_one() -> None:
    _assert_segments(
        right_split(diag, 1),
        [((0, 0), (5, 10)), ((5, 0), (10, 5)), ((5, 5), (10, 10))],
    )


def test_up_split_depth_one() -> None:
    _assert_segments(
        up_split(diag, 1),
        [((0, 0), (10, 5)), ((0, 5), (5, 10)), ((5, 5), (10, 10))],
    )


def test_split_matches_explicit_recursion() -> None:
    smaller = right_split(george, 1)
    _assert_same_drawing(right_split(george, 2), beside(george, below(smaller, smaller)))


@pytest.mark.parametrize(("n", "count"), [(0, 1), (1, 6), (2, 19)])
def test_corner_split_segment_counts(n: int, count: int) -> None:
    assert len(_segments(corner_split(diag, n))) == count


def test_corner_split_depth_one_layout() -> None:
    _assert_same_drawing(
        corner_split(george, 1),
        beside(below(george, beside(george, george)), below(below(george, george), george)),
    )


def test_square_limit_depth_zero() -> None:
    expected = square_of_four(rotate180, flip_vert, flip_horiz, identity)(george)
    _assert_same_drawing(square_limit(george, 0), expected)


def test_square_limit_is_four_corner_splits() -> None:
    assert len(_segments(square_limit(diag, 2))) == 4 * 19


@pytest.mark.parametrize(
    "build",
    [
        lambda: corner_split(diag, -1),
        lambda: square_limit(diag, -1),
        lambda: right_split(diag, -1),
        lambda: up_split(diag, -3),
    ],
)
def test_negative_depth_is_rejected(build) -> None:
    with pytest.raises(ValueError):
        build()


@pytest.mark.parametrize("n", [1.5, True, "2"])
def test_non_integer_depth_is_rejected(n) -> None:
    with pytest.raises(TypeError):
        corner_split(diag, n)  # type: ignore[arg-type]
