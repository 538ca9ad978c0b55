"""Mapping of normalised scalar values onto a seven-colour rainbow."""

from __future__ import annotations

from typing import NamedTuple

RGB = tuple[float, float, float]

BLACK: RGB = (0.0, 0.0, 0.0)
RED: RGB = (0.93, 0.0, 0.01)
LIGHT_RED: RGB = (1.0, 0.5, 0.5)
ORANGE: RGB = (1.0, 0.45, 0.21)
YELLOW: RGB = (0.9, 0.9, 0.0)
LIGHT_YELLOW: RGB = (1.0, 1.0, 0.8)
LIGHT_ROSE: RGB = (1.0, 0.8, 0.8)
DARK_YELLOW: RGB = (0.45, 0.45, 0.0)
GREEN: RGB = (0.01, 0.98, 0.01)
BLUE: RGB = (0.0, 0.1, 1.0)
LIGHT_BLUE: RGB = (0.5, 0.75, 1.0)
INDIGO: RGB = (0.3, 0.0, 0.53)
VIOLET: RGB = (0.58, 0.0, 0.83)
DARK_RED: RGB = (0.5, 0.0, 0.01)
ROSE: RGB = (1.0, 0.0, 1.0)
PURPLE: RGB = (0.6, 0.0, 0.6)
DARK_GREEN: RGB = (0.01, 0.5, 0.01)
DARK_BLUE: RGB = (0.0, 0.1, 0.5)
GOLD: RGB = (0.864, 0.7, 0.325)
DARK_GOLD: RGB = (0.4, 0.3, 0.16)
SILVER: RGB = (0.75, 0.75, 0.75)
PEACH: RGB = (1.0, 0.89, 0.705)
BRONZE: RGB = (0.8, 0.5, 0.2)
GRAY: RGB = (0.5, 0.5, 0.5)
LIGHT_GRAY: RGB = (0.8, 0.8, 0.8)
DARK_GRAY: RGB = (0.2, 0.2, 0.2)
WHITE: RGB = (1.0, 1.0, 1.0)
DARK_CHERRY: RGB = (0.57, 0.11, 0.26)
LIGHT_CHERRY: RGB = (0.87, 0.2, 0.4)

RAINBOW7: tuple[RGB, ...] = (INDIGO, BLUE, LIGHT_BLUE, GREEN, YELLOW, ORANGE, RED)


class Color(NamedTuple):
    """An 8-bit ARGB colour."""

    a: int
    r: int
    g: int
    b: int


def _to_byte(component: float) -> int:
    return int(component * 255) & 0xFF


def value_color(x: float, striped: bool = False) -> Color:
    """Colour for a value in [0, 1]; values outside are clamped just inside.

    With ``striped`` the colour is constant within each of the six bands;
    otherwise it is interpolated linearly between neighbouring colours.
    """
    if x <= 0:
        x = 0.001
    elif x >= 1:
        x = 0.999
    scaled = x * (len(RAINBOW7) - 1)
    band = int(scaled)
    low = RAINBOW7[band]
    if striped:
        rgb = low
    else:
        high = RAINBOW7[band + 1]
        frac = scaled - band
        rgb = tuple(lo + (hi - lo) * frac for lo, hi in zip(low, high))
    r, g, b = (_to_byte(c) for c in rgb)
    return Color(255, r, g, b)