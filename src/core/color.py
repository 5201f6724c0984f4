# core/color.py
from typing import Tuple, Union

from PIL import ImageColor

MAX_CHANNEL = 255.0


class Color:
    """
    An RGB color on a 0..255 scale.

    Channels are kept as floats while shading so that sums of several light
    contributions can exceed the displayable range; values are only clamped
    when converted for output with to_rgb().
    """
    __slots__ = ("r", "g", "b")

    def __init__(self, r: float, g: float, b: float):
        self.r = float(r)
        self.g = float(g)
        self.b = float(b)

    @classmethod
    def from_name(cls, name: str) -> "Color":
        """Build a color from a CSS name ("black") or a "#rrggbb" string."""
        try:
            r, g, b = ImageColor.getrgb(name)[:3]
        except ValueError as e:
            raise ValueError(f"Unknown color: {name!r}") from e
        return cls(r, g, b)

    @classmethod
    def coerce(cls, value: Union["Color", str, Tuple[float, float, float]]) -> "Color":
        if isinstance(value, Color):
            return value
        if isinstance(value, str):
            return cls.from_name(value)
        r, g, b = value
        return cls(r, g, b)

    def __add__(self, other: "Color") -> "Color":
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return Color(self.r * other, self.g * other, self.b * other)
        # Component-wise product, normalized back onto the 0..255 scale.
        return Color(
            self.r * other.r / MAX_CHANNEL,
            self.g * other.g / MAX_CHANNEL,
            self.b * other.b / MAX_CHANNEL
        )

    def __rmul__(self, other: float) -> "Color":
        return self.__mul__(other)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.r == other.r and self.g == other.g and self.b == other.b

    def __hash__(self) -> int:
        return hash((self.r, self.g, self.b))

    def clamp(self) -> "Color":
        return Color(
            min(max(self.r, 0.0), MAX_CHANNEL),
            min(max(self.g, 0.0), MAX_CHANNEL),
            min(max(self.b, 0.0), MAX_CHANNEL)
        )

    def to_rgb(self) -> Tuple[int, int, int]:
        c = self.clamp()
        return int(c.r), int(c.g), int(c.b)

    def to_hex(self) -> str:
        return "#{:02x}{:02x}{:02x}".format(*self.to_rgb())

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b})"


Color.BLACK = Color(0.0, 0.0, 0.0)
Color.WHITE = Color(MAX_CHANNEL, MAX_CHANNEL, MAX_CHANNEL)
