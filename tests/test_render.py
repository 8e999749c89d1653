"""Tests for SVG rendering."""

import xml.etree.ElementTree as ET

from chart_core.layout import compute_chart_layout
from chart_core.parser import parse_chart
from chart_core.render import render_svg
from chart_core.render.legend import compute_legend_dimensions
from chart_core.themes import DARK_THEME, LIGHT_THEME, THEMES

SVG_NS = "{http://www.w3.org/2000/svg}"


def _render(doc=None, theme=DARK_THEME, width=640, height=400, **kwargs):
    doc = doc or {
        "title": "Test chart",
        "series": [
            {"id": "a", "label": "Alpha", "color": "#ff0000", "data": [1, 2, 3]},
            {"id": "b", "label": "Beta", "data": [3, 1, 2]},
        ],
    }
    layout = compute_chart_layout(parse_chart(doc), width, height)
    return render_svg(layout, theme, **kwargs)


def _elements(svg, tag):
    return list(ET.fromstring(svg).iter(f"{SVG_NS}{tag}"))


def test_render_produces_valid_svg():
    root = ET.fromstring(_render())
    assert root.tag == f"{SVG_NS}svg"


def test_render_contains_title():
    assert "Test chart" in _render()


def test_render_series_colors():
    svg = _render()
    assert "#ff0000" in svg
    # second series falls back to the palette
    assert DARK_THEME.series_colors[1] in svg


def test_render_series_paths():
    svg = _render()
    classes = [p.get("class") for p in _elements(svg, "path")]
    assert "series series-a" in classes
    assert "series series-b" in classes


def test_render_tick_labels():
    texts = [t.text for t in _elements(_render(), "text")]
    assert "0" in texts
    assert "2" in texts


def test_render_legend():
    texts = [t.text for t in _elements(_render(), "text")]
    assert "Alpha" in texts
    assert "Beta" in texts


def test_render_without_legend():
    texts = [t.text for t in _elements(_render(legend=False), "text")]
    assert "Alpha" not in texts


def test_single_series_has_no_legend():
    doc = {"series": [{"id": "a", "label": "Alone", "data": [1, 2]}]}
    texts = [t.text for t in _elements(_render(doc), "text")]
    assert "Alone" not in texts


def test_render_scrubber_overlay():
    doc = {
        "series": [
            {"id": "a", "label": "Alpha", "data": [1, 2, 3]},
            {"id": "b", "label": "Beta", "data": [3, 1, 2]},
        ],
        "scrub_index": 1,
    }
    svg = _render(doc)
    assert len(_elements(svg, "circle")) == 2
    texts = [t.text for t in _elements(svg, "text")]
    assert "Alpha 2" in texts
    assert "Beta 1" in texts


def test_render_bars():
    doc = {
        "x_axis": {"scale_type": "band", "data": ["a", "b", "c"]},
        "series": [{"id": "a", "type": "bar", "data": [3, 5, 2]}],
    }
    svg = _render(doc)
    bars = [p for p in _elements(svg, "path") if " A " in (p.get("d") or "")]
    assert len(bars) == 3


def test_render_area_opacity():
    doc = {"series": [{"id": "a", "type": "area", "data": [1, 3, 2]}]}
    svg = _render(doc)
    (area,) = [p for p in _elements(svg, "path") if p.get("class") == "series series-a"]
    assert area.get("fill-opacity") is not None
    assert area.get("fill") == DARK_THEME.series_colors[0]


def test_render_light_theme():
    svg = _render(theme=LIGHT_THEME)
    assert LIGHT_THEME.tick_label_color in svg


def test_render_empty_canvas():
    svg = _render(width=0, height=0)
    ET.fromstring(svg)
    assert _elements(svg, "path") == []


def test_themes_registered():
    assert set(THEMES) == {"dark", "light"}


def test_legend_dimensions():
    assert compute_legend_dimensions([], DARK_THEME) == (0.0, 0.0)
