"""
Unit tests for ratio parsing and layout partitioning.

Boundary values are pinned exactly: callers place panels on these boxes and
rely on them not shifting by a cell.
"""
import pytest

from vexes.core import errors
from vexes.core.errors import InvalidRatioError
from vexes.core.geometry import Rect
from vexes.core.surface import SurfaceConfig
from vexes.renderers.buffer_surface import BufferSurface
from vexes.ui.layouts import (
    Layouts,
    RatioParseResult,
    calculate_h_boxes,
    calculate_v_boxes,
    default_region,
    parse_ratio,
    validate_ratio,
)

INVALID_RATIOS = [
    ("1", errors.MISSING_COLON),
    ("", errors.MISSING_COLON),
    (":1:2", errors.EDGE_COLON),
    ("1:2:", errors.EDGE_COLON),
    ("1::2", errors.DOUBLE_COLON),
    ("abc:1", errors.NON_INTEGER),
    ("1.5:2", errors.NON_INTEGER),
    (" 1:2", errors.NON_INTEGER),
    ("1_0:2", errors.NON_INTEGER),
    ("1:0", errors.ZERO_VALUE),
    ("-0:1", errors.ZERO_VALUE),
    ("-1:2", errors.NEGATIVE_VALUE),
]


class TestParseRatio:

    def test_valid(self):
        result = parse_ratio("2:1:3")

        assert result.is_valid
        assert result.weights == [2, 1, 3]
        assert result.reason == ""

    def test_explicit_plus_sign(self):
        assert parse_ratio("+1:2").weights == [1, 2]

    def test_leading_zeros(self):
        assert parse_ratio("01:002").weights == [1, 2]

    @pytest.mark.parametrize("ratio,reason", INVALID_RATIOS)
    def test_invalid(self, ratio, reason):
        result = parse_ratio(ratio)

        assert not result.is_valid
        assert result.reason == reason
        assert result.weights == []

    def test_messages_are_distinct(self):
        messages = {reason for _, reason in INVALID_RATIOS}
        assert len(messages) == 6

    def test_result_constructors(self):
        assert RatioParseResult.valid([1, 1]) == RatioParseResult(True, [1, 1], "")
        assert RatioParseResult.invalid("nope") == RatioParseResult(False, [], "nope")


class TestValidateRatio:

    def test_returns_weights(self):
        assert validate_ratio("1:1") == [1, 1]

    @pytest.mark.parametrize("ratio,reason", INVALID_RATIOS)
    def test_raises_with_message(self, ratio, reason):
        with pytest.raises(InvalidRatioError) as excinfo:
            validate_ratio(ratio)

        assert excinfo.value.message == reason
        assert excinfo.value.ratio == ratio
        assert reason in str(excinfo.value)

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            validate_ratio("1::1")


class TestHorizontalLayouts:

    def test_even_split_of_width_ten(self):
        """Second box absorbs the seam and the truncation slack."""
        boxes = Layouts.custom_h_layout("1:1", Rect(0, 0, 10, 5))
        assert boxes == [Rect(0, 0, 5, 5), Rect(6, 0, 4, 5)]

    def test_thirds(self):
        assert Layouts.h_thirds(Rect(0, 0, 30, 10)) == [
            Rect(0, 0, 10, 10),
            Rect(11, 0, 10, 10),
            Rect(22, 0, 8, 10),
        ]

    def test_two_thirds_left(self):
        assert Layouts.h_two_thirds_left(Rect(0, 0, 30, 10)) == [
            Rect(0, 0, 20, 10),
            Rect(21, 0, 9, 10),
        ]

    def test_two_thirds_right(self):
        assert Layouts.h_two_thirds_right(Rect(0, 0, 30, 10)) == [
            Rect(0, 0, 10, 10),
            Rect(11, 0, 19, 10),
        ]

    def test_uneven_weights(self):
        assert Layouts.custom_h_layout("2:1:3", Rect(0, 0, 60, 4)) == [
            Rect(0, 0, 20, 4),
            Rect(21, 0, 10, 4),
            Rect(32, 0, 28, 4),
        ]

    def test_default_region_is_grid_minus_margin(self):
        boxes = Layouts.h_split(grid_size=(81, 25))
        assert boxes == [Rect(0, 0, 40, 24), Rect(41, 0, 39, 24)]

    def test_default_region_follows_surface_grid(self):
        surface = BufferSurface(SurfaceConfig(width=121, height=41))

        assert default_region(surface=surface) == Rect(0, 0, 120, 40)
        assert Layouts.h_split(surface=surface) == [Rect(0, 0, 60, 40), Rect(61, 0, 59, 40)]

    def test_explicit_grid_size_wins_over_surface(self):
        surface = BufferSurface(SurfaceConfig(width=121, height=41))
        assert default_region((81, 25), surface) == Rect(0, 0, 80, 24)

    def test_theme_grid_without_surface(self):
        assert default_region() == Rect(0, 0, 79, 23)
        assert Layouts.h_split() == calculate_h_boxes([1, 1], Rect(0, 0, 79, 23))

    def test_clamps_against_region_width(self):
        """The clamp compares with the width, not the region's right edge."""
        assert Layouts.h_split(Rect(5, 2, 20, 10)) == [
            Rect(5, 2, 10, 10),
            Rect(16, 2, 4, 10),
        ]

    def test_invalid_ratio_produces_no_boxes(self):
        with pytest.raises(InvalidRatioError):
            Layouts.custom_h_layout("1:0", Rect(0, 0, 10, 10))


class TestVerticalLayouts:

    def test_thirds_of_thirty_rows(self):
        boxes = Layouts.v_thirds(Rect(0, 0, 20, 30))

        assert boxes == [
            Rect(0, 0, 20, 10),
            Rect(0, 11, 20, 10),
            Rect(0, 22, 20, 8),
        ]
        assert sum(box.h for box in boxes) <= 30
        assert all(a.y + a.h < b.y for a, b in zip(boxes, boxes[1:]))

    def test_split(self):
        assert Layouts.v_split(Rect(0, 0, 8, 10)) == [
            Rect(0, 0, 8, 5),
            Rect(0, 6, 8, 4),
        ]

    def test_two_thirds_above(self):
        assert Layouts.v_two_thirds_above(Rect(0, 0, 8, 30)) == [
            Rect(0, 0, 8, 20),
            Rect(0, 21, 8, 9),
        ]

    def test_two_thirds_below(self):
        assert Layouts.v_two_thirds_below(Rect(0, 0, 8, 30)) == [
            Rect(0, 0, 8, 10),
            Rect(0, 11, 8, 19),
        ]

    def test_default_region(self):
        assert Layouts.v_split(grid_size=(81, 25)) == [
            Rect(0, 0, 80, 12),
            Rect(0, 13, 80, 11),
        ]

    def test_default_region_follows_surface_grid(self):
        surface = BufferSurface(SurfaceConfig(width=121, height=41))
        assert Layouts.v_split(surface=surface) == [
            Rect(0, 0, 120, 20),
            Rect(0, 21, 120, 19),
        ]

    def test_invalid_ratio(self):
        with pytest.raises(InvalidRatioError):
            Layouts.custom_v_layout(":1", Rect(0, 0, 10, 10))


class TestPartitionProperties:

    RATIOS = [[1, 1], [2, 1], [1, 2], [1, 1, 1], [2, 1, 3], [5, 3, 2, 1], [1, 7]]
    EXTENTS = [20, 23, 37, 50, 79, 120]

    @pytest.mark.parametrize("weights", RATIOS)
    @pytest.mark.parametrize("extent", EXTENTS)
    def test_horizontal_boxes_fit(self, weights, extent):
        boxes = calculate_h_boxes(weights, Rect(0, 0, extent, 5))

        assert len(boxes) == len(weights)
        assert boxes[0].x == 0
        assert sum(box.w for box in boxes) + len(boxes) - 1 <= extent
        assert all(box.h == 5 and box.y == 0 for box in boxes)
        assert all(a.x + a.w < b.x for a, b in zip(boxes, boxes[1:]))

    @pytest.mark.parametrize("weights", RATIOS)
    @pytest.mark.parametrize("extent", EXTENTS)
    def test_vertical_boxes_fit(self, weights, extent):
        boxes = calculate_v_boxes(weights, Rect(0, 0, 5, extent))

        assert len(boxes) == len(weights)
        assert boxes[0].y == 0
        assert sum(box.h for box in boxes) + len(boxes) - 1 <= extent
        assert all(box.w == 5 and box.x == 0 for box in boxes)

    @pytest.mark.parametrize("weights", RATIOS)
    def test_axes_are_symmetric(self, weights):
        h_boxes = calculate_h_boxes(weights, Rect(0, 0, 47, 9))
        v_boxes = calculate_v_boxes(weights, Rect(0, 0, 9, 47))

        assert [(b.x, b.w) for b in h_boxes] == [(b.y, b.h) for b in v_boxes]


class TestLayoutDebugLogging:

    def test_callback_receives_boxes(self):
        messages = []
        Layouts.set_debug_callback(messages.append)
        try:
            Layouts.h_split(Rect(0, 0, 10, 5))
        finally:
            Layouts.set_debug_callback(None)

        assert len(messages) == 1
        assert messages[0].startswith("[LAYOUT]")
        assert "'1:1'" in messages[0]
