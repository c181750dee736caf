"""Adaptive math learning platform: diagnostics, adaptive practice, and course management."""

__version__ = "0.1.0"
