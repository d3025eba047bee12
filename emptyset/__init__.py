"""Parametric empty-set (U+2205) SVG generator."""

__version__ = "0.1.0"
