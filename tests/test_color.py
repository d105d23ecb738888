import pytest

from rasterdraw.color import Color, Pixel, interpolate_color, lerp_byte


def test_to_hex_red():
    assert Color(255, 0, 0).to_hex() == "#ff0000"


def test_to_hex_blue():
    assert Color(0, 0, 255).to_hex() == "#0000ff"


@pytest.mark.parametrize("bad", [-1, 256, 1000])
def test_channel_out_of_range(bad):
    with pytest.raises(ValueError):
        Color(bad, 0, 0)


def test_wrapped_keeps_low_byte():
    assert Color.wrapped(256 + 7, -1, 3) == Color(7, 255, 3)


def test_lerp_byte_endpoints():
    assert lerp_byte(10, 200, 0.0) == 10
    assert lerp_byte(10, 200, 1.0) == 200


def test_lerp_byte_midpoint_truncates():
    assert lerp_byte(0, 255, 0.5) == 127


def test_lerp_byte_monotonic():
    values = [lerp_byte(0, 255, i / 20) for i in range(21)]
    assert values == sorted(values)


def test_interpolate_color_endpoints():
    red, blue = Color(255, 0, 0), Color(0, 0, 255)
    assert interpolate_color(red, blue, 0.0) == red
    assert interpolate_color(red, blue, 1.0) == blue


def test_interpolate_color_same_color_constant():
    c = Color(12, 34, 56)
    assert all(interpolate_color(c, c, i / 10) == c for i in range(11))


def test_interpolate_color_green_stays_zero():
    mid = interpolate_color(Color(255, 0, 0), Color(0, 0, 255), 0.3)
    assert mid.g == 0
    assert 0 < mid.r < 255 and 0 < mid.b < 255


def test_pixel_fields_and_equality():
    pixel = Pixel(1, 2, Color(1, 2, 3))
    assert (pixel.x, pixel.y) == (1, 2)
    assert pixel.color == Color(1, 2, 3)
    assert pixel == Pixel(1, 2, Color(1, 2, 3))
    assert (pixel == Pixel(1, 2, Color(3, 2, 1))) is False