"""
RGBA color with float channels.
"""

from dataclasses import dataclass
from typing import MutableSequence, Optional, Sequence

from rendermath.color.color3 import parse_hex_channels
from rendermath.core.scalar import (
    TO_GAMMA_SPACE,
    TO_LINEAR_SPACE,
    clamp,
    hash_combine,
    to_hex,
)


@dataclass
class Color4:
    """
    Mutable RGBA color.

    Gamma and linear conversions only touch r, g and b; alpha is copied.
    """

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    def __str__(self) -> str:
        return f"{{R: {self.r} G:{self.g} B:{self.b} A:{self.a}}}"

    def get_class_name(self) -> str:
        return "Color4"

    def get_hash_code(self) -> int:
        return hash_combine((self.r, self.g, self.b, self.a))

    def add_in_place(self, right: "Color4") -> "Color4":
        self.r += right.r
        self.g += right.g
        self.b += right.b
        self.a += right.a
        return self

    def as_array(self) -> list[float]:
        return [self.r, self.g, self.b, self.a]

    def to_array(self, array: MutableSequence[float], index: int = 0) -> "Color4":
        array[index] = self.r
        array[index + 1] = self.g
        array[index + 2] = self.b
        array[index + 3] = self.a
        return self

    def add(self, right: "Color4") -> "Color4":
        return Color4(self.r + right.r, self.g + right.g, self.b + right.b, self.a + right.a)

    def subtract(self, right: "Color4") -> "Color4":
        return Color4(self.r - right.r, self.g - right.g, self.b - right.b, self.a - right.a)

    def subtract_to_ref(self, right: "Color4", result: "Color4") -> "Color4":
        result.r = self.r - right.r
        result.g = self.g - right.g
        result.b = self.b - right.b
        result.a = self.a - right.a
        return self

    def scale(self, scale: float) -> "Color4":
        return Color4(self.r * scale, self.g * scale, self.b * scale, self.a * scale)

    def scale_to_ref(self, scale: float, result: "Color4") -> "Color4":
        result.r = self.r * scale
        result.g = self.g * scale
        result.b = self.b * scale
        result.a = self.a * scale
        return self

    def scale_and_add_to_ref(self, scale: float, result: "Color4") -> "Color4":
        result.r += self.r * scale
        result.g += self.g * scale
        result.b += self.b * scale
        result.a += self.a * scale
        return self

    def clamp_to_ref(
        self, result: "Color4", min_value: float = 0.0, max_value: float = 1.0
    ) -> "Color4":
        result.r = clamp(self.r, min_value, max_value)
        result.g = clamp(self.g, min_value, max_value)
        result.b = clamp(self.b, min_value, max_value)
        result.a = clamp(self.a, min_value, max_value)
        return self

    def multiply(self, color: "Color4") -> "Color4":
        return Color4(self.r * color.r, self.g * color.g, self.b * color.b, self.a * color.a)

    def multiply_to_ref(self, color: "Color4", result: "Color4") -> "Color4":
        """Component-wise product written into ``result``; returns ``result``."""
        result.r = self.r * color.r
        result.g = self.g * color.g
        result.b = self.b * color.b
        result.a = self.a * color.a
        return result

    def equals(self, other: Optional["Color4"]) -> bool:
        return (
            other is not None
            and self.r == other.r
            and self.g == other.g
            and self.b == other.b
            and self.a == other.a
        )

    def clone(self) -> "Color4":
        return Color4(self.r, self.g, self.b, self.a)

    def copy_from(self, source: "Color4") -> "Color4":
        return self.copy_from_floats(source.r, source.g, source.b, source.a)

    def copy_from_floats(self, r: float, g: float, b: float, a: float) -> "Color4":
        self.r = r
        self.g = g
        self.b = b
        self.a = a
        return self

    def set(self, r: float, g: float, b: float, a: float) -> "Color4":
        return self.copy_from_floats(r, g, b, a)

    def to_hex_string(self) -> str:
        """Format as ``#RRGGBBAA`` with truncated channel values."""
        return "#" + "".join(
            to_hex(int(c * 255)) for c in (self.r, self.g, self.b, self.a)
        )

    def to_linear_space(self) -> "Color4":
        converted = Color4()
        self.to_linear_space_to_ref(converted)
        return converted

    def to_linear_space_to_ref(self, converted: "Color4") -> "Color4":
        converted.r = self.r**TO_LINEAR_SPACE
        converted.g = self.g**TO_LINEAR_SPACE
        converted.b = self.b**TO_LINEAR_SPACE
        converted.a = self.a
        return self

    def to_gamma_space(self) -> "Color4":
        converted = Color4()
        self.to_gamma_space_to_ref(converted)
        return converted

    def to_gamma_space_to_ref(self, converted: "Color4") -> "Color4":
        converted.r = self.r**TO_GAMMA_SPACE
        converted.g = self.g**TO_GAMMA_SPACE
        converted.b = self.b**TO_GAMMA_SPACE
        converted.a = self.a
        return self

    @classmethod
    def from_hex_string(cls, hex_string: str) -> "Color4":
        """Parse ``#RRGGBBAA``; anything else yields ``(0, 0, 0, 0)``."""
        channels = parse_hex_channels(hex_string, 4)
        if channels is None:
            return cls(0.0, 0.0, 0.0, 0.0)
        return cls.from_ints(*channels)

    @classmethod
    def from_array(cls, array: Sequence[float], offset: int = 0) -> "Color4":
        return cls(array[offset], array[offset + 1], array[offset + 2], array[offset + 3])

    @classmethod
    def from_ints(cls, r: int, g: int, b: int, a: int) -> "Color4":
        return cls(r / 255.0, g / 255.0, b / 255.0, a / 255.0)


def lerp(left: Color4, right: Color4, amount: float) -> Color4:
    result = Color4(0.0, 0.0, 0.0, 0.0)
    lerp_to_ref(left, right, amount, result)
    return result


def lerp_to_ref(left: Color4, right: Color4, amount: float, result: Color4) -> None:
    result.r = left.r + (right.r - left.r) * amount
    result.g = left.g + (right.g - left.g) * amount
    result.b = left.b + (right.b - left.b) * amount
    result.a = left.a + (right.a - left.a) * amount


def check_colors4(colors: list[float], count: int) -> list[float]:
    """
    Expand a flat RGB buffer to RGBA when it holds exactly ``count`` triples.

    Alpha is set to 1. Any other buffer is returned unchanged.
    """
    if len(colors) == count * 3:
        colors4: list[float] = []
        for index in range(0, len(colors), 3):
            colors4.extend((colors[index], colors[index + 1], colors[index + 2], 1.0))
        return colors4
    return colors
