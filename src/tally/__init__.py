"""Tally: survey submissions and the dominant answer per question."""

__version__ = "0.1.0"
