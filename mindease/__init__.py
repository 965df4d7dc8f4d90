"""MindEase mood-insight and suggestion engine."""

__version__ = "0.1.0"
