"""Render constants used across render modules.

Theme-dependent values remain in style.py.
"""

# ---------------------------------------------------------------------------
# Canvas
# ---------------------------------------------------------------------------
DEFAULT_WIDTH: int = 640
"""Default SVG width when none is given."""

DEFAULT_HEIGHT: int = 400
"""Default SVG height when none is given."""

TITLE_BASELINE: float = 22.0
"""Y position of the chart title baseline."""

# ---------------------------------------------------------------------------
# Axes
# ---------------------------------------------------------------------------
TICK_LENGTH: float = 4.0
"""Length of tick marks drawn outside the drawing area."""

TICK_LABEL_GAP: float = 6.0
"""Gap between a tick mark and its label."""

AXIS_STROKE_WIDTH: float = 1.0
"""Stroke width of axis lines and tick marks."""

GRID_STROKE_WIDTH: float = 1.0
"""Stroke width of horizontal grid lines."""

GRID_DASH: str = "2,4"
"""Dash pattern for grid lines."""

# ---------------------------------------------------------------------------
# Legend
# ---------------------------------------------------------------------------
LEGEND_LINE_HEIGHT: float = 20.0
"""Vertical height per series entry in the legend."""

LEGEND_PADDING: float = 8.0
"""Internal padding of the legend box."""

LEGEND_SWATCH_WIDTH: float = 16.0
"""Width of the color swatch line."""

LEGEND_TEXT_GAP: float = 8.0
"""Gap between swatch end and label text."""

LEGEND_CHAR_WIDTH_RATIO: float = 0.55
"""Character width as a fraction of font size for legend text sizing."""

LEGEND_BORDER_RADIUS: int = 4
"""Corner radius for the legend background rectangle."""

LEGEND_MARGIN: float = 8.0
"""Distance between the legend and the top-right corner of the drawing area."""

# ---------------------------------------------------------------------------
# Scrubber
# ---------------------------------------------------------------------------
SCRUBBER_DASH: str = "4,4"
"""Dash pattern of the vertical scrubber line."""

LABEL_PADDING_X: float = 6.0
"""Horizontal padding inside a scrubber label box."""

LABEL_BORDER_RADIUS: int = 4
"""Corner radius of scrubber label boxes."""
