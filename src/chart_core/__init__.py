"""chart-core: coordinate and layout core for cartesian charts."""

__version__ = "0.3.0"
