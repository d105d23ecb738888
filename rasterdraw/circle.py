"""Midpoint circle rasterisation using eight-way symmetry."""

from __future__ import annotations

from math import isqrt


def eight_points(xc: int, yc: int, x: int, y: int) -> list[tuple[int, int]]:
    """Return the eight symmetric reflections of offset (x, y) around a centre."""
    return [
        (xc + x, yc + y),
        (xc - x, yc + y),
        (xc + x, yc - y),
        (xc - x, yc - y),
        (xc + y, yc + x),
        (xc - y, yc + x),
        (xc + y, yc - x),
        (xc - y, yc - x),
    ]


def circle_points(xc: int, yc: int, radius: int) -> list[tuple[int, int]]:
    """Return the points of a circle in drawing order, using second-order differences."""
    if radius < 0:
        raise ValueError("radius must not be negative")
    x, y = 0, radius
    d = 1 - radius
    c1, c2 = 3, 5 - 2 * radius
    points = eight_points(xc, yc, x, y)
    while x < y:
        if d < 0:
            d += c1
            c2 += 2
        else:
            d += c2
            c2 += 4
            y -= 1
        c1 += 2
        x += 1
        points.extend(eight_points(xc, yc, x, y))
    return points


def radius_between(x1: int, y1: int, x2: int, y2: int) -> int:
    """Return the distance between two points, truncated to an integer."""
    dx = x2 - x1
    dy = y2 - y1
    return isqrt(dx * dx + dy * dy)