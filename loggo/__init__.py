"""Loggo - win/loss activity journal with notes, statistics and charts."""

__version__ = "0.1.0"
