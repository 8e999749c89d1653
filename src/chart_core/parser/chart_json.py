"""Reader for JSON chart definitions.

Example document::

    {
      "title": "Revenue",
      "x_axis": {"scale_type": "band", "data": ["Q1", "Q2", "Q3"]},
      "y_axis": {"domain": {"min": 0}},
      "series": [
        {"id": "a", "data": [4, 8, null], "type": "line", "curve": "monotone"}
      ]
    }
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from chart_core.errors import ChartDataError
from chart_core.parser.model import (
    AxisConfigProps,
    ChartDefinition,
    PartialBounds,
    Series,
)

_SCALE_TYPES = {"linear", "log", "band"}
_DOMAIN_LIMITS = {"nice", "strict"}
_SERIES_TYPES = {"line", "area", "bar"}
_STYLES = {"dark", "light"}
_INSET_SIDES = {"top", "left", "bottom", "right"}


def _expect(condition: bool, message: str) -> None:
    if not condition:
        raise ChartDataError(message)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _optional_str(obj: Mapping[str, Any], key: str, where: str) -> str | None:
    value = obj.get(key)
    _expect(value is None or isinstance(value, str), f"{where}: '{key}' must be a string")
    return value


def _optional_number(obj: Mapping[str, Any], key: str, where: str) -> float | None:
    value = obj.get(key)
    _expect(value is None or _is_number(value), f"{where}: '{key}' must be a number")
    return value


def _parse_bounds(value: Any, where: str) -> PartialBounds | None:
    if value is None:
        return None
    _expect(isinstance(value, Mapping), f"{where} must be an object with min/max")
    for key in ("min", "max"):
        _expect(
            value.get(key) is None or _is_number(value[key]),
            f"{where}.{key} must be a number",
        )
    return PartialBounds(value.get("min"), value.get("max"))


def _parse_axis(obj: Any, where: str) -> AxisConfigProps:
    _expect(isinstance(obj, Mapping), f"{where} must be an object")
    scale_type = obj.get("scale_type")
    _expect(
        scale_type is None or scale_type in _SCALE_TYPES,
        f"{where}: unknown scale_type {scale_type!r} "
        f"(expected one of {sorted(_SCALE_TYPES)})",
    )
    domain_limit = obj.get("domain_limit")
    _expect(
        domain_limit is None or domain_limit in _DOMAIN_LIMITS,
        f"{where}: domain_limit must be 'nice' or 'strict'",
    )
    data = obj.get("data")
    _expect(data is None or isinstance(data, list), f"{where}: 'data' must be a list")

    ticks = obj.get("ticks")
    _expect(
        ticks is None
        or isinstance(ticks, bool)
        or (isinstance(ticks, list) and all(_is_number(t) for t in ticks)),
        f"{where}: 'ticks' must be a boolean or a list of numbers",
    )
    tick_count = obj.get("tick_count")
    _expect(
        tick_count is None or _is_int(tick_count),
        f"{where}: 'tick_count' must be an integer",
    )

    return AxisConfigProps(
        id=_optional_str(obj, "id", where),
        scale_type=scale_type,
        domain_limit=domain_limit,
        data=data,
        category_padding=_optional_number(obj, "category_padding", where),
        domain=_parse_bounds(obj.get("domain"), f"{where}.domain"),
        range=_parse_bounds(obj.get("range"), f"{where}.range"),
        ticks=ticks,
        tick_count=tick_count,
        tick_interval=_optional_number(obj, "tick_interval", where),
        size=_optional_number(obj, "size", where),
    )


def _parse_axes(value: Any, name: str) -> list[AxisConfigProps] | None:
    if value is None:
        return None
    if isinstance(value, list):
        return [_parse_axis(item, f"{name}[{i}]") for i, item in enumerate(value)]
    return [_parse_axis(value, name)]


def _parse_series(obj: Any, index: int) -> Series:
    where = f"series[{index}]"
    _expect(isinstance(obj, Mapping), f"{where} must be an object")
    series_id = obj.get("id")
    _expect(isinstance(series_id, str) and bool(series_id), f"{where}: 'id' is required")
    data = obj.get("data", [])
    _expect(isinstance(data, list), f"{where}: 'data' must be a list")
    series_type = obj.get("type", "line")
    _expect(
        series_type in _SERIES_TYPES,
        f"{where}: unknown type {series_type!r} (expected line, area or bar)",
    )
    connect_nulls = obj.get("connect_nulls", False)
    _expect(isinstance(connect_nulls, bool), f"{where}: 'connect_nulls' must be a boolean")
    return Series(
        id=series_id,
        data=data,
        label=_optional_str(obj, "label", where),
        color=_optional_str(obj, "color", where),
        x_axis_id=_optional_str(obj, "x_axis_id", where),
        y_axis_id=_optional_str(obj, "y_axis_id", where),
        stack_id=_optional_str(obj, "stack_id", where),
        type=series_type,
        curve=_optional_str(obj, "curve", where) or "linear",
        connect_nulls=connect_nulls,
    )


def _parse_inset(value: Any) -> float | dict[str, float] | None:
    if value is None or _is_number(value):
        return value
    _expect(isinstance(value, Mapping), "'inset' must be a number or an object")
    unknown = set(value) - _INSET_SIDES
    _expect(not unknown, f"'inset' has unknown sides: {sorted(unknown)}")
    for side, amount in value.items():
        _expect(_is_number(amount), f"inset.{side} must be a number")
    return dict(value)


def parse_chart(doc: Any) -> ChartDefinition:
    """Build a ChartDefinition from an already-decoded JSON document."""
    _expect(isinstance(doc, Mapping), "Chart definition must be a JSON object")
    _expect("series" in doc, "Chart definition has no 'series'")
    _expect(isinstance(doc["series"], list), "'series' must be a list")

    style = doc.get("style", "dark")
    _expect(style in _STYLES, f"Unknown style {style!r} (expected dark or light)")
    scrub_index = doc.get("scrub_index")
    _expect(
        scrub_index is None or _is_int(scrub_index),
        "'scrub_index' must be an integer",
    )

    series = [_parse_series(item, i) for i, item in enumerate(doc["series"])]
    seen: set[str] = set()
    for s in series:
        _expect(s.id not in seen, f"Duplicate series id {s.id!r}")
        seen.add(s.id)

    return ChartDefinition(
        title=_optional_str(doc, "title", "chart") or "",
        style=style,
        series=series,
        x_axes=_parse_axes(doc.get("x_axis"), "x_axis"),
        y_axes=_parse_axes(doc.get("y_axis"), "y_axis"),
        inset=_parse_inset(doc.get("inset")),
        scrub_index=scrub_index,
    )


def parse_chart_json(text: str) -> ChartDefinition:
    """Parse a JSON chart definition.

    Raises ChartDataError when the text is not valid JSON or does not have
    the expected shape.
    """
    try:
        doc = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ChartDataError(
            f"Invalid JSON at line {exc.lineno}, column {exc.colno}: {exc.msg}"
        ) from exc
    return parse_chart(doc)
