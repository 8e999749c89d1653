"""Tests for projecting data into pixel space."""

import logging
import math

from chart_core.layout.points import point_on_scale, project_point, project_points
from chart_core.layout.scale import LinearScale, LogScale, make_band
from chart_core.parser.model import AxisBounds, Point

X = LinearScale(AxisBounds(0, 2), AxisBounds(0, 20))
Y = LinearScale(AxisBounds(0, 10), AxisBounds(100, 0))


def test_project_point():
    assert project_point(1, 5, X, Y) == Point(10, 50)


def test_project_point_extrapolates():
    assert project_point(4, -10, X, Y) == Point(40, 200)


def test_project_points_keeps_one_entry_per_datum():
    data = [1, None, [2, 4], {"x": 2, "y": 3}, "bad"]
    assert project_points(data, X, Y) == [
        Point(0, 90),
        None,
        Point(20, 60),
        Point(20, 70),
        None,
    ]


def test_project_points_with_numeric_x_data():
    x = LinearScale(AxisBounds(0, 10), AxisBounds(0, 100))
    points = project_points([1, 2, 3], x, Y, x_data=[0, 5, 10])
    assert [p.x for p in points] == [0, 50, 100]


def test_project_points_ignores_category_x_data():
    points = project_points([1, 2], X, Y, x_data=["a", "b"])
    assert [p.x for p in points] == [0, 10]


def test_project_points_reads_x_data_per_entry():
    x = LinearScale(AxisBounds(0, 10), AxisBounds(0, 100))
    points = project_points([1, 2, 3], x, Y, x_data=[None, 5, 10])
    assert [p.x for p in points] == [0, 50, 100]


def test_project_points_accepts_y_data():
    assert project_points([1], X, Y, y_data=[9]) == [Point(0, 90)]


def test_band_points_centred():
    band = make_band(AxisBounds(0, 2), AxisBounds(0, 90), 0)
    points = project_points([1, 2, 3], band, Y)
    assert [p.x for p in points] == [15, 45, 75]


def test_unknown_band_value_treated_as_band_zero():
    band = make_band(AxisBounds(0, 2), AxisBounds(0, 90), 0)
    assert point_on_scale(9, band) == 15


def test_log_projection_is_finite_for_zero():
    y = LogScale(AxisBounds(1, 100), AxisBounds(200, 0))
    assert math.isfinite(point_on_scale(0, y))
    assert math.isfinite(point_on_scale(-3, y))


def test_malformed_datum_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="chart_core.layout.points"):
        project_points([1, [1, 2, 3]], X, Y)
    assert "malformed" in caplog.text
