"""Cubic Bezier curve evaluation and colour-graded segmentation."""

from __future__ import annotations

from dataclasses import dataclass

from rasterdraw.color import Color, interpolate_color


@dataclass(frozen=True)
class Point:
    """A point in the plane."""

    x: float
    y: float


def bezier_point(p0: Point, p1: Point, p2: Point, p3: Point, t: float) -> Point:
    """Evaluate the cubic Bezier curve with the given control points at ``t``."""
    u = 1 - t
    u2 = u * u
    u3 = u2 * u
    t2 = t * t
    t3 = t2 * t
    return Point(
        u3 * p0.x + 3 * u2 * t * p1.x + 3 * u * t2 * p2.x + t3 * p3.x,
        u3 * p0.y + 3 * u2 * t * p1.y + 3 * u * t2 * p2.y + t3 * p3.y,
    )


def bezier_segments(
    p0: Point,
    p1: Point,
    p2: Point,
    p3: Point,
    c1: Color,
    c2: Color,
    num_points: int = 300,
) -> list[tuple[Point, Point, Color]]:
    """Split the curve into straight segments, each coloured by its end parameter.

    Returns an empty list when fewer than two points are requested.
    """
    if num_points < 2:
        return []
    segments = []
    prev = bezier_point(p0, p1, p2, p3, 0.0)
    for i in range(1, num_points + 1):
        t = i / num_points
        curr = bezier_point(p0, p1, p2, p3, t)
        segments.append((prev, curr, interpolate_color(c1, c2, t)))
        prev = curr
    return segments