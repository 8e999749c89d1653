#!/usr/bin/env python3
"""Batch render every example chart to SVG in each theme.

Outputs go to /tmp/chart_core_renders/.

Usage:
    python scripts/render_examples.py [--width 640] [--height 400]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from chart_core.errors import ChartConfigError, ChartDataError
from chart_core.layout import compute_chart_layout
from chart_core.parser import parse_chart_json
from chart_core.render import render_svg
from chart_core.themes import THEMES

OUTPUT_DIR = Path("/tmp/chart_core_renders")
EXAMPLES_DIR = Path(__file__).parent.parent / "examples"


def render_file(
    json_path: Path, output_dir: Path, *, width: int, height: int
) -> tuple[str, list[str]]:
    """Parse, lay out and render one chart definition in every theme.

    Returns (name, list_of_issues).
    """
    name = json_path.stem
    try:
        chart = parse_chart_json(json_path.read_text())
    except ChartDataError as e:
        return name, [f"PARSE ERROR: {e}"]

    try:
        layout = compute_chart_layout(chart, width, height)
    except ChartConfigError as e:
        return name, [f"LAYOUT ERROR: {e}"]

    issues: list[str] = []
    if not layout.series:
        issues.append("no series")
    for theme_name, theme in THEMES.items():
        svg_path = output_dir / f"{name}_{theme_name}.svg"
        svg_path.write_text(render_svg(layout, theme))
    return name, issues


def main():
    parser = argparse.ArgumentParser(description="Batch render example charts")
    parser.add_argument("--width", type=int, default=640)
    parser.add_argument("--height", type=int, default=400)
    args = parser.parse_args()

    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)

    all_files = sorted(EXAMPLES_DIR.glob("*.json"))
    print(f"Rendering {len(all_files)} files to {OUTPUT_DIR}/")
    print()

    max_name_len = max(len(f.stem) for f in all_files)
    any_errors = False

    for json_path in all_files:
        name, issues = render_file(
            json_path, OUTPUT_DIR, width=args.width, height=args.height
        )
        status = "OK" if not issues else "ISSUES"
        if any("ERROR" in i for i in issues):
            status = "FAIL"
            any_errors = True

        print(f"  {name:<{max_name_len}}  [{status}]")
        for issue in issues:
            print(f"    - {issue}")

    print(f"\nOutputs in: {OUTPUT_DIR}/")

    if any_errors:
        sys.exit(1)


if __name__ == "__main__":
    main()
