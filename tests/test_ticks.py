"""Tests for tick generation and tick label formatting."""

import logging

import pytest

from chart_core.layout.scale import LinearScale, LogScale, make_band
from chart_core.layout.ticks import (
    TickMark,
    TickOptions,
    format_tick,
    format_ticks,
    generate_ticks,
    nice_step,
)
from chart_core.parser.model import AxisBounds


def _linear(d0=0, d1=10, r0=0, r1=100):
    return LinearScale(AxisBounds(d0, d1), AxisBounds(r0, r1))


def _band(count=4):
    return make_band(AxisBounds(0, count - 1), AxisBounds(0, 100), 0)


def _values(marks):
    return [m.tick for m in marks]


# --- Band ---


def test_band_ticks_centered_in_bands():
    marks = generate_ticks(_band())
    assert marks == [
        TickMark(0, 12.5),
        TickMark(1, 37.5),
        TickMark(2, 62.5),
        TickMark(3, 87.5),
    ]


def test_band_ignores_count_and_interval():
    marks = generate_ticks(_band(), requested_tick_count=2, tick_interval=500)
    assert _values(marks) == [0, 1, 2, 3]


def test_band_ticks_disabled():
    assert generate_ticks(_band(), ticks=False) == []


def test_band_ticks_predicate():
    marks = generate_ticks(_band(), ticks=lambda i: i % 2 == 0)
    assert _values(marks) == [0, 2]


def test_band_ticks_explicit_indices():
    marks = generate_ticks(_band(), ticks=[1, 7, -1])
    assert _values(marks) == [1]


def test_band_ticks_follow_categories():
    marks = generate_ticks(_band(4), categories=["a", "b"])
    assert _values(marks) == [0, 1]


# --- Numeric ---


def test_explicit_tick_list():
    marks = generate_ticks(_linear(), ticks=[0, 5, 10])
    assert marks == [TickMark(0, 0), TickMark(5, 50), TickMark(10, 100)]


def test_explicit_list_beats_count():
    marks = generate_ticks(_linear(), ticks=[3], requested_tick_count=5)
    assert _values(marks) == [3]


def test_numeric_ticks_disabled():
    assert generate_ticks(_linear(), ticks=False, requested_tick_count=5) == []


def test_predicate_filters_scale_ticks():
    marks = generate_ticks(_linear(), ticks=lambda v: v > 5, requested_tick_count=5)
    assert _values(marks) == [6, 8, 10]


def test_predicate_filters_possible_values():
    marks = generate_ticks(
        _linear(),
        ticks=lambda v: v % 3 == 0,
        possible_tick_values=[0, 1, 2, 3, 4, 5, 6],
    )
    assert _values(marks) == [0, 3, 6]


def test_requested_count():
    marks = generate_ticks(_linear(), requested_tick_count=5)
    assert _values(marks) == [0, 2, 4, 6, 8, 10]
    assert [m.position for m in marks] == [0, 20, 40, 60, 80, 100]


def test_log_requested_count():
    scale = LogScale(AxisBounds(1, 1000), AxisBounds(300, 0))
    marks = generate_ticks(scale, requested_tick_count=5)
    assert 1 in _values(marks)
    assert 1000 in _values(marks)
    assert marks[0].position == pytest.approx(300)


def test_interval_ticks():
    scale = _linear(0, 100, 0, 400)
    marks = generate_ticks(scale, tick_interval=100)
    assert _values(marks) == [0, 50, 100]


def test_interval_ticks_include_domain_max():
    scale = _linear(0, 8, 0, 400)
    values = _values(generate_ticks(scale, tick_interval=100))
    assert values == [0, 5, 8]


def test_interval_picks_from_possible_values():
    scale = _linear(0, 9, 0, 400)
    marks = generate_ticks(
        scale, possible_tick_values=list(range(10)), tick_interval=100
    )
    assert _values(marks) == [0, 3, 6, 9]


def test_interval_single_tick_uses_last_possible_value():
    scale = _linear(0, 9, 0, 400)
    marks = generate_ticks(
        scale,
        possible_tick_values=list(range(10)),
        tick_interval=1000,
        options=TickOptions(min_tick_count=1),
    )
    assert _values(marks) == [9]


def test_interval_respects_max_step():
    scale = _linear(0, 100, 0, 400)
    marks = generate_ticks(
        scale, tick_interval=100, options=TickOptions(max_step=20)
    )
    assert _values(marks) == [0, 20, 40, 60, 80, 100]


def test_no_selection_yields_no_ticks():
    assert generate_ticks(_linear()) == []


def test_unsupported_scale_warns(caplog):
    with caplog.at_level(logging.WARNING, logger="chart_core.layout.ticks"):
        assert generate_ticks(object(), requested_tick_count=5) == []
    assert "does not support" in caplog.text


def test_non_finite_ticks_dropped():
    marks = generate_ticks(_linear(), ticks=[1, float("nan"), None, 2])
    assert _values(marks) == [1, 2]


# --- nice_step ---


@pytest.mark.parametrize(
    "rough,expected",
    [
        (0.7, 1),
        (1.0, 1),
        (1.5, 2),
        (3, 5),
        (7, 10),
        (33.3, 50),
        (120, 200),
    ],
)
def test_nice_step(rough, expected):
    assert nice_step(rough) == pytest.approx(expected)


def test_nice_step_clamps():
    assert nice_step(12, max_step=10) == 10
    assert nice_step(0.3, min_step=1) == 1
    assert nice_step(-1) == 1


# --- formatting ---


@pytest.mark.parametrize(
    "value,step,expected",
    [
        (2.0, None, "2"),
        (-0.0, None, "0"),
        (0.30000000000000004, 0.1, "0.3"),
        (1e-12, 0.5, "0"),
        (12.5, 2.5, "12.5"),
        (1500000.0, None, "1.5000e+06"),
    ],
)
def test_format_tick(value, step, expected):
    assert format_tick(value, step) == expected


def test_format_ticks_uses_step_of_first_pair():
    assert format_ticks([0, 0.5, 1]) == ["0", "0.5", "1"]
    assert format_ticks([0.25]) == ["0.25"]
    assert format_ticks([]) == []
