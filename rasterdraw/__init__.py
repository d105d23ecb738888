"""Raster drawing primitives: gradient lines, midpoint circles, cubic Bezier curves and a small viewer."""

__version__ = "0.1.0"
__all__ = ["app", "bezier", "circle", "color", "line"]