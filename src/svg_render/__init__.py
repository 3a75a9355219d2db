"""
HTTP service that renders remote SVG templates.

This package provides a FastAPI-based service that fetches an SVG document,
fills in its placeholders with caller-supplied values and returns the markup.
"""

__version__ = "1.0.0"
