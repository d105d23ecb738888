"""Interactive drawing tools and a small window to try them in."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field

from rasterdraw.bezier import Point, bezier_segments
from rasterdraw.circle import circle_points, radius_between
from rasterdraw.color import BLACK, BLUE, RED, Color, Pixel
from rasterdraw.line import interpolated_colored_line

WIDTH = 800
HEIGHT = 600
MARKER_RADIUS = 5
MAX_CONTROL_POINTS = 4


@dataclass
class LineTool:
    """Drag from a start point to an end point to draw a colour-graded line."""

    start_color: Color = RED
    end_color: Color = BLUE
    start: tuple[int, int] = (0, 0)
    end: tuple[int, int] = (0, 0)
    drawing: bool = False

    def press(self, x: int, y: int) -> None:
        """Begin a new line at (x, y); the previous line is dropped."""
        self.start = (x, y)
        self.drawing = False

    def release(self, x: int, y: int) -> None:
        """Finish the line at (x, y)."""
        self.end = (x, y)
        self.drawing = True

    def pixels(self) -> list[Pixel]:
        """Return the pixels of the finished line, or none while no line is set."""
        if not self.drawing:
            return []
        if self.start == self.end:
            return [Pixel(*self.start, self.start_color)]
        return interpolated_colored_line(
            *self.start, *self.end, self.start_color, self.end_color
        )


@dataclass
class CircleTool:
    """Drag from a centre outward to draw a circle through the release point."""

    color: Color = BLACK
    center: tuple[int, int] = (0, 0)
    radius: int = 0
    drawing: bool = False

    def press(self, x: int, y: int) -> None:
        """Set the centre at (x, y); the previous circle is dropped."""
        self.center = (x, y)
        self.drawing = False

    def release(self, x: int, y: int) -> None:
        """Fix the radius as the distance from the centre to (x, y)."""
        self.radius = radius_between(*self.center, x, y)
        self.drawing = True

    def pixels(self) -> list[Pixel]:
        """Return the pixels of the finished circle, or none while no circle is set."""
        if not self.drawing:
            return []
        return [Pixel(x, y, self.color) for x, y in circle_points(*self.center, self.radius)]


@dataclass
class CurveTool:
    """Click four control points to draw a colour-graded cubic Bezier curve."""

    start_color: Color = RED
    end_color: Color = BLUE
    points: list[Point] = field(default_factory=list)

    def add_point(self, x: float, y: float) -> bool:
        """Add a control point; return False once four are already placed."""
        if len(self.points) >= MAX_CONTROL_POINTS:
            return False
        self.points.append(Point(x, y))
        return True

    def reset(self) -> None:
        """Remove every control point."""
        self.points.clear()

    def reset_colors(self) -> None:
        """Restore the default red-to-blue colours."""
        self.start_color = RED
        self.end_color = BLUE

    def markers(self) -> list[tuple[Point, Color]]:
        """Return each control point with the colour its marker is drawn in."""
        result = []
        for index, point in enumerate(self.points):
            if index == 0:
                color = self.start_color
            elif index == MAX_CONTROL_POINTS - 1:
                color = self.end_color
            else:
                color = BLACK
            result.append((point, color))
        return result

    def segments(self) -> list[tuple[Point, Point, Color]]:
        """Return the curve's segments once all four control points are placed."""
        if len(self.points) < MAX_CONTROL_POINTS:
            return []
        return bezier_segments(*self.points, self.start_color, self.end_color)


_TITLES = {
    "line": "Bresenham Colored Line",
    "circle": "Draw Circle",
    "curve": "Draw Bezier Curve with Mouse",
}


def _put_pixels(image, pixels: list[Pixel]) -> None:
    image.blank()
    for pixel in pixels:
        if 0 <= pixel.x < WIDTH and 0 <= pixel.y < HEIGHT:
            image.put(pixel.color.to_hex(), (pixel.x, pixel.y))


def run(tool_name: str) -> None:
    """Open a window for the named tool ("line", "circle" or "curve")."""
    if tool_name not in _TITLES:
        raise ValueError(f"unknown tool {tool_name!r}; choose from {', '.join(_TITLES)}")

    import tkinter as tk

    root = tk.Tk()
    root.title(_TITLES[tool_name])
    canvas = tk.Canvas(root, width=WIDTH, height=HEIGHT, background="white", highlightthickness=0)
    canvas.pack(fill="both", expand=True)

    if tool_name in ("line", "circle"):
        tool = LineTool() if tool_name == "line" else CircleTool()
        image = tk.PhotoImage(width=WIDTH, height=HEIGHT)
        canvas.create_image(0, 0, image=image, anchor="nw")

        def on_press(event) -> None:
            tool.press(event.x, event.y)

        def on_release(event) -> None:
            tool.release(event.x, event.y)
            _put_pixels(image, tool.pixels())

        canvas.bind("<ButtonPress-1>", on_press)
        canvas.bind("<ButtonRelease-1>", on_release)
    else:
        curve = CurveTool()

        def repaint() -> None:
            canvas.delete("all")
            for point, color in curve.markers():
                x, y = int(point.x), int(point.y)
                canvas.create_oval(
                    x - MARKER_RADIUS,
                    y - MARKER_RADIUS,
                    x + MARKER_RADIUS,
                    y + MARKER_RADIUS,
                    fill=color.to_hex(),
                    outline="black",
                )
            for start, end, color in curve.segments():
                canvas.create_line(
                    int(start.x), int(start.y), int(end.x), int(end.y), fill=color.to_hex()
                )

        def on_left(event) -> None:
            if curve.add_point(event.x, event.y):
                repaint()

        def on_right(_event) -> None:
            curve.reset()
            repaint()

        def on_space(_event) -> None:
            curve.reset_colors()
            repaint()

        canvas.bind("<ButtonPress-1>", on_left)
        canvas.bind("<ButtonPress-3>", on_right)
        root.bind("<space>", on_space)

    root.mainloop()


def main(argv: list[str] | None = None) -> int:
    """Parse the command line and open the chosen drawing tool."""
    parser = argparse.ArgumentParser(prog="rasterdraw", description="Draw with the mouse.")
    parser.add_argument("tool", choices=sorted(_TITLES), help="which drawing tool to open")
    args = parser.parse_args(argv)
    run(args.tool)
    return 0