"""Multi-dimensional arrays with per-dimension lower bounds and the PostgreSQL binary array format."""

__version__ = "0.11.1"
__all__ = ["array", "binary"]