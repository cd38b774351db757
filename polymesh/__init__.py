"""Polygonal mesh import from CSV cell files, validation, and UCD ASCII export."""

__version__ = "1.0.0"