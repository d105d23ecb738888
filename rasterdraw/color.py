"""RGB colours and linear colour interpolation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An 8-bit-per-channel RGB colour."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"channel {name} must be an int in 0..255, got {value!r}")

    @classmethod
    def wrapped(cls, r: int, g: int, b: int) -> Color:
        """Build a colour keeping only the low byte of each channel."""
        return cls(r & 0xFF, g & 0xFF, b & 0xFF)

    def to_hex(self) -> str:
        """Return the colour as a ``#rrggbb`` string."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


@dataclass(frozen=True)
class Pixel:
    """A single coloured pixel at integer coordinates."""

    x: int
    y: int
    color: Color


RED = Color(255, 0, 0)
BLUE = Color(0, 0, 255)
BLACK = Color(0, 0, 0)


def lerp_byte(a: int, b: int, t: float) -> int:
    """Interpolate between two byte values, truncating toward zero."""
    return int(a + (b - a) * t) & 0xFF


def interpolate_color(c1: Color, c2: Color, t: float) -> Color:
    """Blend two colours channel by channel at parameter ``t``."""
    return Color(
        lerp_byte(c1.r, c2.r, t),
        lerp_byte(c1.g, c2.g, t),
        lerp_byte(c1.b, c2.b, t),
    )