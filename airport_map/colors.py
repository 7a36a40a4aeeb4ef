"""
Colors module: continuous severity color scale over a control-point palette.

The scale maps a normalized reduction in [0, 1] to an RGB color by finding the
palette segment that contains it and blending the two segment colors with
smoothstep easing. Every control point is reproduced exactly.
"""

import math
from dataclasses import dataclass

from . import config


@dataclass(frozen=True)
class RGBColor:
    r: int
    g: int
    b: int

    def css(self) -> str:
        return f"rgb({self.r}, {self.g}, {self.b})"

    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def as_unit_tuple(self) -> tuple[float, float, float]:
        """Channels scaled to [0, 1] (matplotlib color format)."""
        return (self.r / 255, self.g / 255, self.b / 255)


@dataclass(frozen=True)
class ControlPoint:
    position: float
    color: RGBColor


def parse_hex(hex_color: str) -> RGBColor:
    """
    Parse '#rrggbb' or '#rrggbbaa' into an RGBColor (alpha is ignored).

    Raises:
        ValueError: if the string is not a 6- or 8-digit hex color
    """
    value = str(hex_color).strip()
    digits = value[1:] if value.startswith("#") else value
    if len(digits) not in (6, 8):
        raise ValueError(f"Invalid hex color: {hex_color!r}")
    try:
        return RGBColor(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
    except ValueError:
        raise ValueError(f"Invalid hex color: {hex_color!r}") from None


def _round_half_up(x: float) -> int:
    # Python's round() is banker's rounding; channel values must round .5 up
    return int(math.floor(x + 0.5))


def smoothstep(t: float) -> float:
    """Cubic easing with zero slope at both ends: t^2 * (3 - 2t)."""
    return t * t * (3 - 2 * t)


class Palette:
    """
    Ordered, immutable sequence of control points.

    Positions must start at 0.0, end at 1.0 and be strictly increasing.
    """

    def __init__(self, points):
        points = tuple(points)
        if len(points) < 2:
            raise ValueError(f"Palette needs at least 2 control points, got {len(points)}")
        if points[0].position != 0.0:
            raise ValueError(f"First control point must be at 0.0, got {points[0].position}")
        if points[-1].position != 1.0:
            raise ValueError(f"Last control point must be at 1.0, got {points[-1].position}")
        for lower, upper in zip(points[:-1], points[1:]):
            if not upper.position > lower.position:
                raise ValueError(
                    f"Control point positions must be strictly increasing "
                    f"({lower.position} -> {upper.position})"
                )
        self._points = points

    @classmethod
    def from_hex_stops(cls, stops):
        """Build a palette from [(position, '#hex'), ...] pairs."""
        return cls(ControlPoint(float(pos), parse_hex(color)) for pos, color in stops)

    @property
    def points(self):
        return self._points

    def segments(self):
        return zip(self._points[:-1], self._points[1:])

    def __len__(self):
        return len(self._points)

    def __iter__(self):
        return iter(self._points)

    def __eq__(self, other):
        return isinstance(other, Palette) and self._points == other._points

    def __hash__(self):
        return hash(self._points)

    def __repr__(self):
        stops = ", ".join(f"({p.position}, {p.color.hex()})" for p in self._points)
        return f"Palette([{stops}])"


def default_palette() -> Palette:
    return Palette.from_hex_stops(config.DEFAULT_PALETTE)


class ColorInterpolator:
    """
    Piecewise smoothstep interpolation over a palette.

    Values of t outside [0, 1] are clamped to the nearest endpoint before the
    segment lookup, so color_at(-0.3) is the first color and color_at(1.7)
    the last. NaN raises ValueError.
    """

    def __init__(self, palette=None):
        self.palette = palette if palette is not None else default_palette()

    def color_at(self, t: float) -> RGBColor:
        t = float(t)
        if math.isnan(t):
            raise ValueError("Cannot interpolate a color for NaN")
        t = min(1.0, max(0.0, t))

        for lower, upper in self.palette.segments():
            if lower.position <= t <= upper.position:
                local_t = (t - lower.position) / (upper.position - lower.position)
                eased = smoothstep(local_t)
                a, b = lower.color, upper.color
                return RGBColor(
                    _round_half_up(a.r + (b.r - a.r) * eased),
                    _round_half_up(a.g + (b.g - a.g) * eased),
                    _round_half_up(a.b + (b.b - a.b) * eased),
                )

        # Unreachable for a validated palette after clamping
        return self.palette.points[-1].color

    def css_at(self, t: float) -> str:
        return self.color_at(t).css()

    def scale(self, value: float, domain=config.REDUCTION_DOMAIN) -> RGBColor:
        """Sequential scale: normalize value linearly over domain, then color it."""
        d0, d1 = domain
        if d1 == d0:
            return self.color_at(0.0)
        return self.color_at((float(value) - d0) / (d1 - d0))

    def legend_stops(self, step: float = config.LEGEND_STEP):
        """
        Gradient stops for the legend.

        Returns:
            list of (offset_percent, css_color) from 0% to 100% inclusive
        """
        n = int(round(1 / step))
        stops = []
        for i in range(n + 1):
            offset = round(i * step * 100, 6)
            stops.append((offset, self.css_at(offset / 100)))
        return stops
