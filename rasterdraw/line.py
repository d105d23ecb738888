"""Line rasterisation with colour interpolation along the line."""

from __future__ import annotations

from math import floor

from rasterdraw.color import Color, Pixel


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _round_half_away(value: float) -> int:
    """Round to nearest, with halves away from zero."""
    if value >= 0:
        return floor(value + 0.5)
    return -floor(-value + 0.5)


def _require_length(x1: int, y1: int, x2: int, y2: int) -> None:
    if x1 == x2 and y1 == y2:
        raise ValueError("line endpoints must differ")


def interpolated_bresenham_line(
    x1: int, y1: int, x2: int, y2: int, c1: Color, c2: Color
) -> list[Pixel]:
    """Rasterise a line with integer steps, blending colour with fixed integer increments."""
    _require_length(x1, y1, x2, y2)
    dx = abs(x2 - x1)
    dy = abs(y2 - y1)
    x, y = x1, y1
    x_inc = 1 if x2 > x1 else -1
    y_inc = 1 if y2 > y1 else -1

    steps = max(dx, dy)
    r_step = _trunc_div(c2.r - c1.r, steps)
    g_step = _trunc_div(c2.g - c1.g, steps)
    b_step = _trunc_div(c2.b - c1.b, steps)
    r, g, b = c1.r, c1.g, c1.b

    pixels = [Pixel(x, y, Color.wrapped(r, g, b))]
    if dy <= dx:
        d = dx - 2 * dy
        change1 = 2 * (dx - dy)
        change2 = -2 * dy
        for _ in range(dx + 1):
            if d < 0:
                d += change1
                y += y_inc
            else:
                d += change2
            x += x_inc
            r, g, b = r + r_step, g + g_step, b + b_step
            pixels.append(Pixel(x, y, Color.wrapped(r, g, b)))
    else:
        d = 2 * dx - dy
        change1 = 2 * (dx - dy)
        change2 = 2 * dx
        for _ in range(dy + 1):
            if d < 0:
                d += change1
                x += x_inc
            else:
                d += change2
            y += y_inc
            r, g, b = r + r_step, g + g_step, b + b_step
            pixels.append(Pixel(x, y, Color.wrapped(r, g, b)))
    return pixels


def interpolated_colored_line(
    x1: int, y1: int, x2: int, y2: int, c1: Color, c2: Color
) -> list[Pixel]:
    """Rasterise a line by stepping along its major axis and blending colour linearly."""
    _require_length(x1, y1, x2, y2)
    dx = x2 - x1
    dy = y2 - y1

    if abs(dy) <= abs(dx):
        slope = dy / dx
        if x1 > x2:
            x1, x2, y1, y2, c1, c2 = x2, x1, y2, y1, c2, c1
        length = x2 - x1
        pixels = []
        for x in range(x1, x2 + 1):
            y = _round_half_away(y1 + (x - x1) * slope)
            t = (x - x1) / length
            pixels.append(Pixel(x, y, _blend(c1, c2, t)))
        return pixels

    slope = dx / dy
    if y1 > y2:
        x1, x2, y1, y2, c1, c2 = x2, x1, y2, y1, c2, c1
    length = y2 - y1
    pixels = []
    for y in range(y1, y2 + 1):
        t = (y - y1) / length
        x = _round_half_away(x1 + (y - y1) * slope)
        pixels.append(Pixel(x, y, _blend(c1, c2, t)))
    return pixels


def _blend(c1: Color, c2: Color, t: float) -> Color:
    return Color.wrapped(
        int(c1.r + t * (c2.r - c1.r)),
        int(c1.g + t * (c2.g - c1.g)),
        int(c1.b + t * (c2.b - c1.b)),
    )