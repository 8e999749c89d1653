"""Theme and style constants for chart rendering."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Theme:
    """Visual theme for a chart."""

    name: str
    background_color: str
    grid_color: str
    axis_color: str
    tick_label_color: str
    tick_font_size: float
    label_font_family: str
    title_color: str
    title_font_size: float
    legend_background: str
    legend_text_color: str
    legend_font_size: float
    series_colors: list[str] = field(default_factory=list)
    line_width: float = 2.0
    area_opacity: float = 0.25
    # Scrubber overlay
    scrubber_line_color: str = "#888888"
    beacon_radius: float = 4.0
    beacon_stroke: str = "#ffffff"
    beacon_stroke_width: float = 2.0
    label_background: str = "#000000"
    label_text_color: str = "#ffffff"
    label_font_size: float = 12.0

    def series_color(self, index: int, explicit: str | None = None) -> str:
        """Explicit color if set, otherwise cycle through the palette."""
        if explicit:
            return explicit
        if not self.series_colors:
            return self.axis_color
        return self.series_colors[index % len(self.series_colors)]
