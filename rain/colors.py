"""
Color value type and the trail gradient for each color scheme.

A trail runs from a white leader, through the scheme's primary tone, to a
darker mid trail and a faded tail. Alpha stays opaque for the first tenth of
the trail and then falls off linearly to zero at the tail.
"""

from dataclasses import dataclass
from enum import Enum


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int
    a: float = 1.0

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> "Color":
        return cls(r, g, b, 1.0)

    @classmethod
    def rgba(cls, r: int, g: int, b: int, a: float) -> "Color":
        return cls(r, g, b, _clamp(float(a), 0.0, 1.0))

    @classmethod
    def from_rgba_tuple(cls, rgba) -> "Color":
        r, g, b, a = rgba
        return cls.rgba(r, g, b, a)

    def as_normalized(self):
        return (self.r / 255.0, self.g / 255.0, self.b / 255.0, self.a)

    def darken(self, factor: float) -> "Color":
        """Scale toward black. 0.0 is black, 1.0 leaves the color unchanged."""
        factor = _clamp(factor, 0.0, 1.0)
        return Color.rgba(int(self.r * factor), int(self.g * factor), int(self.b * factor), self.a)

    def lighten(self, factor: float) -> "Color":
        """Scale toward white. 0.0 leaves the color unchanged, 1.0 is white."""
        factor = _clamp(factor, 0.0, 1.0)
        return Color.rgba(
            int(self.r + (255 - self.r) * factor),
            int(self.g + (255 - self.g) * factor),
            int(self.b + (255 - self.b) * factor),
            self.a,
        )

    def with_alpha(self, alpha: float) -> "Color":
        return Color.rgba(self.r, self.g, self.b, alpha)

    @property
    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


Color.BLACK = Color(0, 0, 0, 1.0)
Color.WHITE = Color(255, 255, 255, 1.0)
Color.MATRIX_GREEN = Color(0, 255, 70, 1.0)


class ColorScheme(Enum):
    MATRIX_GREEN = "matrix-green"
    DARK_BLUE = "dark-blue"
    PURPLE = "purple"
    ORANGE = "orange"
    RED = "red"
    CYAN = "cyan"
    YELLOW = "yellow"
    PINK = "pink"
    WHITE = "white"
    LIME_GREEN = "lime-green"
    TEAL = "teal"

    @classmethod
    def default(cls) -> "ColorScheme":
        return cls.MATRIX_GREEN

    @classmethod
    def all_schemes(cls) -> list:
        return list(cls)

    @classmethod
    def from_name(cls, name: str) -> "ColorScheme":
        key = (name or "").strip().lower().replace("_", "-")
        try:
            return _ALIASES[key]
        except KeyError:
            raise ValueError(f"Unknown color scheme: {name}") from None

    @property
    def label(self) -> str:
        return self.value.replace("-", " ").title()

    def get_primary_color(self):
        return _PRIMARY[self]

    def get_secondary_color(self):
        r, g, b = self.get_primary_color()
        return (int(r * 0.6), int(g * 0.6), int(b * 0.6))

    def get_tertiary_color(self):
        r, g, b = self.get_primary_color()
        return (int(r * 0.3), int(g * 0.3), int(b * 0.3))

    def get_color_with_alpha(self, position_in_trail: float):
        """Return (r, g, b, alpha) for a normalized trail position, 0 = head."""
        if position_in_trail < 0.05:
            r, g, b = 255, 255, 255
        elif position_in_trail < 0.15:
            r, g, b = self.get_primary_color()
        elif position_in_trail < 0.5:
            r, g, b = self.get_secondary_color()
        else:
            r, g, b = self.get_tertiary_color()

        if position_in_trail < 0.1:
            alpha = 1.0
        else:
            alpha = _clamp(1.0 - (position_in_trail - 0.1) / 0.9, 0.0, 1.0)

        return (r, g, b, alpha)

    def color_at(self, position_in_trail: float) -> Color:
        return Color.from_rgba_tuple(self.get_color_with_alpha(position_in_trail))

    def next(self) -> "ColorScheme":
        schemes = list(ColorScheme)
        return schemes[(schemes.index(self) + 1) % len(schemes)]


_PRIMARY = {
    ColorScheme.MATRIX_GREEN: (0, 255, 70),
    ColorScheme.DARK_BLUE: (0, 150, 255),
    ColorScheme.PURPLE: (200, 100, 255),
    ColorScheme.ORANGE: (255, 165, 0),
    ColorScheme.RED: (255, 50, 50),
    ColorScheme.CYAN: (0, 255, 255),
    ColorScheme.YELLOW: (255, 255, 0),
    ColorScheme.PINK: (255, 105, 180),
    ColorScheme.WHITE: (255, 255, 255),
    ColorScheme.LIME_GREEN: (50, 255, 50),
    ColorScheme.TEAL: (0, 200, 200),
}

_ALIASES = {
    "matrix-green": ColorScheme.MATRIX_GREEN,
    "green": ColorScheme.MATRIX_GREEN,
    "dark-blue": ColorScheme.DARK_BLUE,
    "blue": ColorScheme.DARK_BLUE,
    "purple": ColorScheme.PURPLE,
    "orange": ColorScheme.ORANGE,
    "red": ColorScheme.RED,
    "cyan": ColorScheme.CYAN,
    "yellow": ColorScheme.YELLOW,
    "pink": ColorScheme.PINK,
    "white": ColorScheme.WHITE,
    "lime-green": ColorScheme.LIME_GREEN,
    "lime": ColorScheme.LIME_GREEN,
    "teal": ColorScheme.TEAL,
}


def color_at(scheme: ColorScheme, position_in_trail: float):
    return scheme.get_color_with_alpha(position_in_trail)
