import math

import pytest

from rasterdraw.app import CircleTool, CurveTool, LineTool, main, run
from rasterdraw.bezier import Point
from rasterdraw.color import BLACK, BLUE, RED, Color


def test_line_tool_has_no_pixels_before_release():
    tool = LineTool()
    tool.press(10, 10)
    assert tool.pixels() == []


def test_line_tool_endpoints_and_colors():
    tool = LineTool()
    tool.press(10, 20)
    tool.release(50, 30)
    pixels = tool.pixels()
    assert (pixels[0].x, pixels[0].y) == (10, 20)
    assert (pixels[-1].x, pixels[-1].y) == (50, 30)
    assert pixels[0].color == RED
    assert pixels[-1].color == BLUE


def test_line_tool_press_drops_previous_line():
    tool = LineTool()
    tool.press(0, 0)
    tool.release(20, 5)
    assert tool.pixels()
    tool.press(3, 3)
    assert tool.pixels() == []


def test_line_tool_zero_length_gives_single_pixel():
    tool = LineTool()
    tool.press(7, 8)
    tool.release(7, 8)
    pixels = tool.pixels()
    assert len(pixels) == 1
    assert (pixels[0].x, pixels[0].y, pixels[0].color) == (7, 8, RED)


def test_circle_tool_radius_from_drag():
    tool = CircleTool()
    tool.press(100, 100)
    tool.release(103, 104)
    assert tool.radius == 5


def test_circle_tool_pixels_lie_near_radius():
    tool = CircleTool()
    tool.press(200, 150)
    tool.release(240, 150)
    pixels = tool.pixels()
    assert pixels
    for pixel in pixels:
        assert pixel.color == BLACK
        distance = math.hypot(pixel.x - 200, pixel.y - 150)
        assert abs(distance - 40) < 1.0


def test_circle_tool_press_clears_circle():
    tool = CircleTool()
    tool.press(1, 1)
    tool.release(11, 1)
    tool.press(5, 5)
    assert tool.pixels() == []


def test_curve_tool_accepts_at_most_four_points():
    tool = CurveTool()
    results = [tool.add_point(i * 10, i * 5) for i in range(5)]
    assert results == [True, True, True, True, False]
    assert len(tool.points) == 4


def test_curve_tool_marker_colors():
    tool = CurveTool()
    for x, y in [(0, 0), (10, 40), (30, 40), (50, 0)]:
        tool.add_point(x, y)
    colors = [color for _point, color in tool.markers()]
    assert colors == [RED, BLACK, BLACK, BLUE]
    assert [p for p, _c in tool.markers()][0] == Point(0, 0)


def test_curve_tool_segments_need_four_points():
    tool = CurveTool()
    for x, y in [(0, 0), (10, 40), (30, 40)]:
        tool.add_point(x, y)
    assert tool.segments() == []
    tool.add_point(50, 0)
    segments = tool.segments()
    assert len(segments) == 300
    assert segments[0][0] == Point(0, 0)
    assert segments[-1][1] == Point(50, 0)
    assert segments[-1][2] == BLUE


def test_curve_tool_segments_are_connected():
    tool = CurveTool()
    for x, y in [(0, 0), (100, 200), (300, 200), (400, 0)]:
        tool.add_point(x, y)
    segments = tool.segments()
    for (_a, end, _c), (start, _b, _d) in zip(segments, segments[1:]):
        assert end == start


def test_curve_tool_reset_clears_points():
    tool = CurveTool()
    tool.add_point(1, 2)
    tool.add_point(3, 4)
    tool.reset()
    assert tool.points == []
    assert tool.markers() == []
    assert tool.add_point(5, 6) is True


def test_curve_tool_reset_colors():
    tool = CurveTool(start_color=Color(0, 255, 0), end_color=Color(1, 2, 3))
    tool.reset_colors()
    assert (tool.start_color, tool.end_color) == (RED, BLUE)


def test_run_rejects_unknown_tool():
    with pytest.raises(ValueError):
        run("spiral")


def test_main_rejects_unknown_tool():
    with pytest.raises(SystemExit) as info:
        main(["spiral"])
    assert info.value.code == 2