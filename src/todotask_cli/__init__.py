"""TodoTask CLI - local task tracking with a statistics dashboard."""

__version__ = "0.3.0"
