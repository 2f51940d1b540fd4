"""
RGB color with float channels.

Channels are nominally in [0, 1] but are not clamped; use ``clamp_to_ref``
before writing to 8-bit targets.
"""

from dataclasses import dataclass
import random as _random
from typing import TYPE_CHECKING, MutableSequence, Optional, Sequence

from rendermath.core.scalar import (
    TO_GAMMA_SPACE,
    TO_LINEAR_SPACE,
    clamp,
    hash_combine,
    to_hex,
)

if TYPE_CHECKING:
    from rendermath.color.color4 import Color4


def parse_hex_channels(hex_string: str, channels: int) -> Optional[list[int]]:
    """
    Parse ``#`` followed by ``channels`` two-digit hex pairs.

    Args:
        hex_string: Text such as ``#FF8000``.
        channels: Number of pairs expected.

    Returns:
        Channel values in [0, 255], or None when the prefix, length or
        digits are wrong.
    """
    if not hex_string.startswith("#") or len(hex_string) != 1 + 2 * channels:
        return None
    values = []
    for index in range(channels):
        pair = hex_string[1 + 2 * index : 3 + 2 * index]
        try:
            values.append(int(pair, 16))
        except ValueError:
            return None
    return values


@dataclass
class Color3:
    """
    Mutable RGB color.

    Attributes:
        r: Red channel.
        g: Green channel.
        b: Blue channel.
    """

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    def __str__(self) -> str:
        return f"{{R: {self.r} G:{self.g} B:{self.b}}}"

    def get_class_name(self) -> str:
        return "Color3"

    def get_hash_code(self) -> int:
        return hash_combine((self.r, self.g, self.b))

    def to_array(self, array: MutableSequence[float], index: int = 0) -> "Color3":
        array[index] = self.r
        array[index + 1] = self.g
        array[index + 2] = self.b
        return self

    def to_color4(self, alpha: float = 1.0) -> "Color4":
        from rendermath.color.color4 import Color4

        return Color4(self.r, self.g, self.b, alpha)

    def as_array(self) -> list[float]:
        return [self.r, self.g, self.b]

    def to_luminance(self) -> float:
        """Perceived brightness with 0.3/0.59/0.11 channel weights."""
        return self.r * 0.3 + self.g * 0.59 + self.b * 0.11

    def multiply(self, other: "Color3") -> "Color3":
        return Color3(self.r * other.r, self.g * other.g, self.b * other.b)

    def multiply_to_ref(self, other: "Color3", result: "Color3") -> "Color3":
        result.r = self.r * other.r
        result.g = self.g * other.g
        result.b = self.b * other.b
        return self

    def equals(self, other: Optional["Color3"]) -> bool:
        return (
            other is not None
            and self.r == other.r
            and self.g == other.g
            and self.b == other.b
        )

    def equals_floats(self, r: float, g: float, b: float) -> bool:
        return self.r == r and self.g == g and self.b == b

    def scale(self, scale: float) -> "Color3":
        return Color3(self.r * scale, self.g * scale, self.b * scale)

    def scale_to_ref(self, scale: float, result: "Color3") -> "Color3":
        result.r = self.r * scale
        result.g = self.g * scale
        result.b = self.b * scale
        return self

    def scale_and_add_to_ref(self, scale: float, result: "Color3") -> "Color3":
        result.r += self.r * scale
        result.g += self.g * scale
        result.b += self.b * scale
        return self

    def clamp_to_ref(
        self, result: "Color3", min_value: float = 0.0, max_value: float = 1.0
    ) -> "Color3":
        result.r = clamp(self.r, min_value, max_value)
        result.g = clamp(self.g, min_value, max_value)
        result.b = clamp(self.b, min_value, max_value)
        return self

    def add(self, other: "Color3") -> "Color3":
        return Color3(self.r + other.r, self.g + other.g, self.b + other.b)

    def add_to_ref(self, other: "Color3", result: "Color3") -> "Color3":
        result.r = self.r + other.r
        result.g = self.g + other.g
        result.b = self.b + other.b
        return self

    def subtract(self, other: "Color3") -> "Color3":
        return Color3(self.r - other.r, self.g - other.g, self.b - other.b)

    def subtract_to_ref(self, other: "Color3", result: "Color3") -> "Color3":
        result.r = self.r - other.r
        result.g = self.g - other.g
        result.b = self.b - other.b
        return self

    def clone(self) -> "Color3":
        return Color3(self.r, self.g, self.b)

    def copy_from(self, source: "Color3") -> "Color3":
        return self.copy_from_floats(source.r, source.g, source.b)

    def copy_from_floats(self, r: float, g: float, b: float) -> "Color3":
        self.r = r
        self.g = g
        self.b = b
        return self

    def set(self, r: float, g: float, b: float) -> "Color3":
        return self.copy_from_floats(r, g, b)

    def to_hex_string(self) -> str:
        """
        Format as ``#RRGGBB``.

        Each channel is scaled by 255 and truncated toward zero.
        """
        return "#" + "".join(to_hex(int(c * 255)) for c in (self.r, self.g, self.b))

    def to_linear_space(self) -> "Color3":
        converted = Color3()
        self.to_linear_space_to_ref(converted)
        return converted

    def to_linear_space_to_ref(self, converted: "Color3") -> "Color3":
        converted.r = self.r**TO_LINEAR_SPACE
        converted.g = self.g**TO_LINEAR_SPACE
        converted.b = self.b**TO_LINEAR_SPACE
        return self

    def to_gamma_space(self) -> "Color3":
        converted = Color3()
        self.to_gamma_space_to_ref(converted)
        return converted

    def to_gamma_space_to_ref(self, converted: "Color3") -> "Color3":
        converted.r = self.r**TO_GAMMA_SPACE
        converted.g = self.g**TO_GAMMA_SPACE
        converted.b = self.b**TO_GAMMA_SPACE
        return self

    @classmethod
    def from_hex_string(cls, hex_string: str) -> "Color3":
        """Parse ``#RRGGBB``; anything else yields black."""
        channels = parse_hex_channels(hex_string, 3)
        if channels is None:
            return cls(0.0, 0.0, 0.0)
        return cls.from_ints(*channels)

    @classmethod
    def from_array(cls, array: Sequence[float], offset: int = 0) -> "Color3":
        return cls(array[offset], array[offset + 1], array[offset + 2])

    @classmethod
    def from_ints(cls, r: int, g: int, b: int) -> "Color3":
        return cls(r / 255.0, g / 255.0, b / 255.0)

    @classmethod
    def red(cls) -> "Color3":
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def green(cls) -> "Color3":
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def blue(cls) -> "Color3":
        return cls(0.0, 0.0, 1.0)

    @classmethod
    def black(cls) -> "Color3":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def white(cls) -> "Color3":
        return cls(1.0, 1.0, 1.0)

    @classmethod
    def purple(cls) -> "Color3":
        return cls(0.5, 0.0, 0.5)

    @classmethod
    def magenta(cls) -> "Color3":
        return cls(1.0, 0.0, 1.0)

    @classmethod
    def yellow(cls) -> "Color3":
        return cls(1.0, 1.0, 0.0)

    @classmethod
    def gray(cls) -> "Color3":
        return cls(0.5, 0.5, 0.5)

    @classmethod
    def teal(cls) -> "Color3":
        return cls(0.0, 1.0, 1.0)

    @classmethod
    def random(cls) -> "Color3":
        return cls(_random.random(), _random.random(), _random.random())


def lerp(start: Color3, end: Color3, amount: float) -> Color3:
    r = start.r + ((end.r - start.r) * amount)
    g = start.g + ((end.g - start.g) * amount)
    b = start.b + ((end.b - start.b) * amount)
    return Color3(r, g, b)
