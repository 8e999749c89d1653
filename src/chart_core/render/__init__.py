"""SVG rendering of computed chart layouts."""

from chart_core.render.svg import render_svg

__all__ = ["render_svg"]
