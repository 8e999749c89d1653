"""Tests for line, area, bar and segment path strings."""

import pytest

from chart_core.layout.paths import (
    build_area_path,
    build_bar_path,
    build_line_path,
    line_to_path,
)
from chart_core.layout.scale import LinearScale, LogScale, make_band
from chart_core.parser.model import AxisBounds

X = LinearScale(AxisBounds(0, 2), AxisBounds(0, 20))
Y = LinearScale(AxisBounds(0, 10), AxisBounds(100, 0))


def _line(data, **kwargs):
    return build_line_path(data, X, Y, **kwargs)


def _area(data, **kwargs):
    return build_area_path(data, X, Y, **kwargs)


# --- Line ---


def test_line_simple():
    assert _line([1, 2, 3]) == "M0,90L10,80L20,70"


def test_line_gap_splits_subpaths():
    assert _line([1, None, 3]) == "M0,90ZM20,70Z"


def test_line_nan_is_a_gap():
    assert _line([1, float("nan"), 3]) == "M0,90ZM20,70Z"


def test_line_connect_nulls():
    assert _line([1, None, 3], connect_nulls=True) == "M0,90L20,70"


def test_line_single_point_closes():
    assert _line([5]) == "M0,50Z"


@pytest.mark.parametrize("data", [[], [None, None], ["x", float("inf")]])
def test_line_without_points_is_empty(data):
    assert _line(data) == ""


def test_line_range_values_use_upper_bound():
    assert _line([[0, 1], [1, 2], [2, 3]]) == "M0,90L10,80L20,70"


def test_line_point_objects_carry_x():
    data = [{"x": 0, "y": 1}, {"x": 2, "y": 3}]
    assert _line(data) == "M0,90L20,70"


def test_line_numeric_x_data():
    x = LinearScale(AxisBounds(0, 10), AxisBounds(0, 100))
    path = build_line_path([1, 2, 3], x, Y, x_data=[0, 5, 10])
    assert path == "M0,90L50,80L100,70"


def test_line_and_area_share_x_for_mixed_x_data():
    x = LinearScale(AxisBounds(0, 10), AxisBounds(0, 100))
    x_data = [0, None, 10]
    assert build_line_path([1, 2, 3], x, Y, x_data=x_data) == "M0,90L10,80L100,70"
    area = build_area_path([1, 2, 3], x, Y, x_data=x_data)
    assert area == "M0,90L10,80L100,70L100,100L10,100L0,100Z"


def test_line_on_band_axis_uses_band_centres():
    band = make_band(AxisBounds(0, 2), AxisBounds(0, 90), 0)
    assert build_line_path([1, 2, 3], band, Y) == "M15,90L45,80L75,70"


def test_line_log_scale_never_emits_nan():
    y = LogScale(AxisBounds(1, 100), AxisBounds(100, 0))
    path = build_line_path([0, 10, 100], X, y)
    assert "NaN" not in path
    assert "Infinity" not in path
    assert path.endswith("L10,50L20,0")


def test_line_coordinates_rounded():
    x = LinearScale(AxisBounds(0, 3), AxisBounds(0, 10))
    path = build_line_path([1, 1], x, Y)
    assert path == "M0,90L3.333,90"


# --- Area ---


def test_area_simple():
    assert _area([1, 2, 3]) == "M0,90L10,80L20,70L20,100L10,100L0,100Z"


def test_area_gap_splits_polygons():
    assert _area([1, None, 3]) == "M0,90L0,100ZM20,70L20,100Z"


def test_area_single_point():
    assert _area([5]) == "M0,50L0,100Z"


def test_area_range_tuples():
    assert _area([[1, 3], [2, 4]]) == "M0,70L10,60L10,80L0,90Z"


def test_area_connect_nulls():
    assert _area([1, None, 3], connect_nulls=True) == "M0,90L20,70L20,100L0,100Z"


def test_area_baseline_is_domain_minimum():
    y = LinearScale(AxisBounds(-10, 10), AxisBounds(100, 0))
    assert build_area_path([0, 5], X, y) == "M0,50L10,25L10,100L0,100Z"


def test_area_empty():
    assert _area([]) == ""
    assert _area([None]) == ""


def test_area_with_curve_closes_each_polygon():
    path = _area([1, 4, 2, None, 3, 5], curve="monotone")
    assert path.count("M") == 2
    assert path.count("Z") == 2


# --- Bar ---


def test_bar_square_corners():
    assert build_bar_path(10, 20, 30, 40, 0, False, False) == (
        "M 10 20 L 40 20 A 0 0 0 0 1 40 20 L 40 60 A 0 0 0 0 1 40 60 "
        "L 10 60 A 0 0 0 0 1 10 60 L 10 20 A 0 0 0 0 1 10 20 Z"
    )


def test_bar_rounded_top():
    assert build_bar_path(10, 20, 30, 40, 5, True, False) == (
        "M 15 20 L 35 20 A 5 5 0 0 1 40 25 L 40 60 A 0 0 0 0 1 40 60 "
        "L 10 60 A 0 0 0 0 1 10 60 L 10 25 A 5 5 0 0 1 15 20 Z"
    )


def test_bar_rounded_both():
    assert build_bar_path(0, 0, 50, 100, 8, True, True) == (
        "M 8 0 L 42 0 A 8 8 0 0 1 50 8 L 50 92 A 8 8 0 0 1 42 100 "
        "L 8 100 A 8 8 0 0 1 0 92 L 0 8 A 8 8 0 0 1 8 0 Z"
    )


def test_bar_radius_clamped_to_half_width():
    assert build_bar_path(0, 0, 10, 100, 20, True, False) == (
        "M 5 0 L 5 0 A 5 5 0 0 1 10 5 L 10 100 A 0 0 0 0 1 10 100 "
        "L 0 100 A 0 0 0 0 1 0 100 L 0 5 A 5 5 0 0 1 5 0 Z"
    )


def test_bar_radius_clamped_to_half_height_when_both_rounded():
    path = build_bar_path(0, 0, 100, 6, 10, True, True)
    assert path.startswith("M 3 0 L 97 0 A 3 3 0 0 1 100 3")


def test_bar_fractional_coordinates_not_rounded():
    path = build_bar_path(0.1234, 0, 10, 10, 0, False, False)
    assert path.startswith("M 0.1234 0")


# --- Segment ---


def test_line_to_path():
    assert line_to_path(0, 10.5, 100, 10.5) == "M0,10.5 L100,10.5"
