"""Exception types raised by chart-core."""

from __future__ import annotations


class ChartConfigError(ValueError):
    """Raised for chart misconfiguration the caller has to fix.

    Examples are several axes of one type declared without unique ids, or
    non-finite bounds handed to scale construction.
    """


class ChartDataError(ValueError):
    """Raised when a chart definition document cannot be read."""
