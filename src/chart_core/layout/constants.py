"""Layout constants used across layout modules.

Centralizes policy values for scales, axes, ticks and label placement.
"""

# ---------------------------------------------------------------------------
# Scales
# ---------------------------------------------------------------------------
LOG_EPSILON: float = 0.001
"""Substitute for zero/negative values evaluated on a logarithmic scale."""

DEFAULT_LOG_BASE: float = 10.0
"""Base of logarithmic scales."""

DEFAULT_CATEGORY_PADDING: float = 0.1
"""Band padding (fraction of a step) when a band scale is built directly."""

DEFAULT_NICE_COUNT: int = 10
"""Tick count used to choose the step when rounding a domain outward."""

NICE_MAX_ITERATIONS: int = 10
"""Upper bound on nice() refinement rounds."""

# ---------------------------------------------------------------------------
# Axes
# ---------------------------------------------------------------------------
DEFAULT_AXIS_ID: str = "DEFAULT_AXIS_ID"
"""Id given to an axis declared without one."""

DEFAULT_SCALE_TYPE: str = "linear"
"""Scale type for axes that do not name one."""

DEFAULT_AXIS_CATEGORY_PADDING: float = 0.3
"""Band padding for categorical axes built from an axis config."""

DEFAULT_X_AXIS_SIZE: float = 32.0
"""Vertical space reserved below the drawing area for an x-axis."""

DEFAULT_Y_AXIS_SIZE: float = 44.0
"""Horizontal space reserved beside the drawing area for a y-axis."""

DEFAULT_CHART_INSET: dict[str, float] = {
    "top": 32.0,
    "left": 16.0,
    "bottom": 16.0,
    "right": 16.0,
}
"""Blank margin between the canvas edge and the axes."""

DEFAULT_STACK_AXIS_KEY: str = "default"
"""y-axis component of a stack key for series without a y-axis id."""

# ---------------------------------------------------------------------------
# Ticks
# ---------------------------------------------------------------------------
DEFAULT_MIN_TICK_COUNT: int = 4
"""Lower bound on tick count when ticks are spaced by pixel interval."""

TICK_ROUND_DIGITS: int = 10
"""Decimal places kept for synthesized tick values."""

TICK_STEP_TOLERANCE: float = 0.0001
"""Fraction of a step treated as floating point noise."""

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
PATH_DIGITS: int = 3
"""Decimal places kept for coordinates in generated curve paths."""

# ---------------------------------------------------------------------------
# Labels / scrubber
# ---------------------------------------------------------------------------
DEFAULT_LABEL_X_OFFSET: float = 16.0
"""Horizontal gap between the scrubber beacon and its labels."""

DEFAULT_LABEL_MIN_GAP: float = 4.0
"""Minimum vertical gap between stacked scrubber labels."""

COLLISION_TOLERANCE: float = 0.01
"""Slack when deciding whether two labels are touching."""

MIN_COMPRESSED_GAP: float = 1.0
"""Smallest gap allowed when a label group must be compressed."""

KEYBOARD_JUMP_FRACTION: float = 0.1
"""Fraction of the index range skipped per key press with a modifier held."""

LABEL_CHAR_WIDTH: float = 7.0
"""Approximate character width (px) used to size scrubber labels."""

LABEL_HEIGHT: float = 20.0
"""Height (px) of a scrubber label box."""

# ---------------------------------------------------------------------------
# Chart layout
# ---------------------------------------------------------------------------
DEFAULT_X_TICK_INTERVAL: float = 64.0
"""Pixel spacing between x-axis ticks when neither ticks nor a count is set."""

DEFAULT_Y_TICK_COUNT: int = 5
"""Tick count requested from y-axis scales by default."""

BAR_WIDTH_FRACTION: float = 0.6
"""Share of a slot filled by bars when the x-axis is not categorical."""

DEFAULT_BAR_RADIUS: float = 4.0
"""Corner radius of the rounded end of a bar."""
