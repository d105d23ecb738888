# rasterdraw

Classic raster drawing algorithms as plain Python functions, plus a small
interactive window for trying them out with the mouse.

What is included:

- **Lines** with a colour gradient from one end to the other, using either an
  integer Bresenham stepper or a rounded slope walk.
- **Circles** drawn with the incremental midpoint method and eight-way
  symmetry.
- **Cubic Bezier curves** sampled into short straight segments whose colour
  blends from a start colour to an end colour.

The drawing functions return lists of pixels, points or segments; they do not
depend on any canvas, so the results can be fed to whatever renders them.

## Installation

```
pip install rasterdraw
```

To run the test suite:

```
pip install "rasterdraw[test]"
pytest
```

## Colours

`rasterdraw.color` holds the `Color` and `Pixel` dataclasses and the blending
helpers:

```python
from rasterdraw.color import Color, interpolate_color, lerp_byte

red = Color(255, 0, 0)
blue = Color(0, 0, 255)

halfway = interpolate_color(red, blue, 0.5)
print(halfway.to_hex())          # "#7f007f"
print(lerp_byte(0, 200, 0.25))   # 50
```

`Color` channels must be integers in 0..255, otherwise `ValueError` is raised.
`Color.wrapped(r, g, b)` keeps only the low byte of each channel instead.
`lerp_byte` truncates toward zero and keeps the low byte of the result.
A `Pixel` is an `x`, `y` position with a `color`.

## Lines

`rasterdraw.line` has two functions with the same signature,
`(x1, y1, x2, y2, c1, c2)`, each returning a list of `Pixel`:

```python
from rasterdraw.color import Color
from rasterdraw.line import interpolated_colored_line, interpolated_bresenham_line

red = Color(255, 0, 0)
blue = Color(0, 0, 255)

for pixel in interpolated_colored_line(10, 10, 120, 60, red, blue):
    print(pixel)

stepped = interpolated_bresenham_line(10, 10, 120, 60, red, blue)
```

- `interpolated_colored_line` steps along the major axis, rounds the other
  coordinate (halves away from zero) and blends the colour linearly, so the
  first pixel has `c1` and the last `c2`.
- `interpolated_bresenham_line` uses integer decision variables and adds a
  fixed integer colour step per pixel, the step being the colour difference
  divided by the line length, truncated toward zero. Channels wrap to their
  low byte.

Both raise `ValueError` if the two endpoints are the same.

## Circles

`rasterdraw.circle` works in plain `(x, y)` tuples:

```python
from rasterdraw.circle import circle_points, eight_points, radius_between

r = radius_between(100, 100, 130, 140)   # 50
outline = circle_points(100, 100, r)
```

- `circle_points(xc, yc, radius)` returns the circle's points in drawing
  order, eight per step, built from `eight_points`. Points on the axes and
  diagonals appear more than once. A negative radius raises `ValueError`.
- `eight_points(xc, yc, x, y)` gives the eight symmetric positions of one
  octant offset around the centre.
- `radius_between(x1, y1, x2, y2)` is the distance between two points,
  truncated to an integer.

## Bezier curves

`rasterdraw.bezier` has a frozen `Point` dataclass and two functions:

```python
from rasterdraw.bezier import Point, bezier_point, bezier_segments
from rasterdraw.color import Color

p0, p1, p2, p3 = Point(50, 300), Point(150, 50), Point(350, 50), Point(450, 300)

mid = bezier_point(p0, p1, p2, p3, 0.5)

for start, end, color in bezier_segments(p0, p1, p2, p3, Color(255, 0, 0), Color(0, 0, 255), 300):
    print(start, end, color)
```

`bezier_segments` returns `num_points` segments (300 by default) as
`(start, end, color)` tuples, each coloured by blending the two colours at
the segment's end parameter. With fewer than two points it returns an empty
list.

## Interactive viewer

The `rasterdraw` command opens an 800×600 window for one of three tools.
It uses `tkinter`, which must be available in your Python installation.

```
rasterdraw line
rasterdraw circle
rasterdraw curve
```

- **line**: press the left mouse button at the start point and release it at
  the end point. A red-to-blue gradient line is drawn between them.
- **circle**: press the left button at the centre and release it anywhere;
  a black circle through that distance is drawn.
- **curve**: left-click up to four control points. The first is marked in the
  start colour, the fourth in the end colour, the others in black; once all
  four are placed the curve is drawn with a red-to-blue gradient. Right-click
  clears the points; the space bar restores the default colours.

From Python, `rasterdraw.app.main(argv)` parses the same arguments and
`run(tool_name)` opens the window for `"line"`, `"circle"` or `"curve"`
(any other name raises `ValueError`).

The interaction state is kept by three dataclasses in `rasterdraw.app`, which
work without a window:

- `LineTool`: `press(x, y)`, `release(x, y)`, and `pixels()`, which is empty
  until a line is released and is a single start-coloured pixel if start and
  end coincide.
- `CircleTool`: `press(x, y)` sets the centre, `release(x, y)` fixes the
  radius, `pixels()` returns the circle's pixels.
- `CurveTool`: `add_point(x, y)` returns `False` once four points are placed,
  `reset()`, `reset_colors()`, `markers()` gives each control point with its
  marker colour, and `segments()` is empty until four points are placed.

## What it does not do

rasterdraw only computes and shows drawings. It does not save images to
files, load them, or offer any drawing tools beyond the three above.