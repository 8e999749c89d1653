"""Tests for pointer and keyboard scrubbing."""

import pytest

from chart_core.layout.scale import LinearScale, make_band
from chart_core.layout.scrubber import (
    Scrubber,
    index_bounds,
    keyboard_step,
    resolve_index_from_key,
    resolve_index_from_pixel,
)
from chart_core.parser.model import AxisBounds, AxisConfig

SCALE = LinearScale(AxisBounds(0, 9), AxisBounds(0, 90))


def _axis_with_data(data, domain=(0, 10)):
    return AxisConfig(
        scale_type="linear",
        domain=AxisBounds(*domain),
        range=AxisBounds(0, 100),
        domain_limit="strict",
        data=tuple(data),
    )


# --- Pointer ---


@pytest.mark.parametrize(
    "pixel,expected",
    [
        (0, 0),
        (44, 4),
        (45, 5),
        (46, 5),
        (90, 9),
        (-30, 0),
        (200, 9),
    ],
)
def test_pixel_on_linear_axis(pixel, expected):
    assert resolve_index_from_pixel(pixel, SCALE) == expected


def test_pixel_on_band_axis():
    band = make_band(AxisBounds(0, 3), AxisBounds(0, 100), 0)
    assert resolve_index_from_pixel(0, band) == 0
    assert resolve_index_from_pixel(70, band) == 2
    assert resolve_index_from_pixel(500, band) == 3


def test_pixel_band_tie_goes_to_lower_index():
    band = make_band(AxisBounds(0, 3), AxisBounds(0, 100), 0)
    assert resolve_index_from_pixel(50, band) == 1


def test_pixel_with_numeric_axis_data():
    scale = LinearScale(AxisBounds(0, 10), AxisBounds(0, 100))
    axis = _axis_with_data([0, 1, 5, 10])
    assert resolve_index_from_pixel(40, scale, axis) == 2
    assert resolve_index_from_pixel(90, scale, axis) == 3


def test_pixel_clamped_to_axis_domain():
    scale = LinearScale(AxisBounds(0, 10), AxisBounds(0, 100))
    axis = AxisConfig(
        scale_type="linear",
        domain=AxisBounds(2, 6),
        range=AxisBounds(0, 100),
        domain_limit="strict",
    )
    assert resolve_index_from_pixel(95, scale, axis) == 6
    assert resolve_index_from_pixel(5, scale, axis) == 2


def test_pixel_clamped_to_whole_indices_of_fractional_domain():
    scale = LinearScale(AxisBounds(0, 10), AxisBounds(0, 100))
    axis = AxisConfig(
        scale_type="linear",
        domain=AxisBounds(0.5, 3.5),
        range=AxisBounds(0, 100),
        domain_limit="strict",
    )
    assert resolve_index_from_pixel(0, scale, axis) == 1
    assert resolve_index_from_pixel(100, scale, axis) == 3


# --- Keyboard ---


def test_index_bounds():
    assert index_bounds(SCALE) == (0, 9)
    band = make_band(AxisBounds(0, 3), AxisBounds(0, 100))
    assert index_bounds(band) == (0, 3)
    assert index_bounds(SCALE, _axis_with_data([0, 2, 4])) == (0, 2)


@pytest.mark.parametrize(
    "lo,hi,modifier,expected",
    [
        (0, 9, False, 1),
        (0, 9, True, 1),
        (0, 99, True, 10),
        (0, 14, True, 1),
        (0, 15, True, 2),
    ],
)
def test_keyboard_step(lo, hi, modifier, expected):
    assert keyboard_step(lo, hi, modifier) == expected


@pytest.mark.parametrize(
    "key,current,expected",
    [
        ("ArrowRight", 3, 4),
        ("ArrowLeft", 3, 2),
        ("ArrowLeft", 0, 0),
        ("ArrowRight", 9, 9),
        ("Home", 5, 0),
        ("End", 5, 9),
        ("Escape", 5, None),
        ("a", 5, 5),
        ("Enter", None, None),
        ("ArrowRight", None, 1),
    ],
)
def test_resolve_index_from_key(key, current, expected):
    assert resolve_index_from_key(key, current, SCALE) == expected


def test_modifier_jumps_and_clamps():
    scale = LinearScale(AxisBounds(0, 99), AxisBounds(0, 500))
    assert resolve_index_from_key("ArrowRight", 0, scale, modifier=True) == 10
    assert resolve_index_from_key("ArrowRight", 95, scale, modifier=True) == 99
    assert resolve_index_from_key("ArrowLeft", 4, scale, modifier=True) == 0


# --- Scrubber state ---


def test_scrubber_reports_changes():
    scrubber = Scrubber(SCALE)
    assert scrubber.pointer_move(44) is True
    assert scrubber.index == 4
    assert scrubber.pointer_move(43) is False
    assert scrubber.key_down("ArrowRight") is True
    assert scrubber.index == 5
    assert scrubber.key_down("q") is False


def test_scrubber_clears_on_leave_and_blur():
    scrubber = Scrubber(SCALE, index=3)
    assert scrubber.pointer_leave() is True
    assert scrubber.index is None
    assert scrubber.blur() is False
    scrubber.key_down("End")
    assert scrubber.blur() is True
    assert scrubber.index is None


def test_scrubber_value():
    scrubber = Scrubber(SCALE)
    data = [10, 20, 30]
    assert scrubber.value(data) is None
    scrubber.key_down("ArrowRight")
    assert scrubber.value(data) == 20
    scrubber.key_down("End")
    assert scrubber.value(data) is None
