"""
Width/height pair.
"""

from dataclasses import dataclass
from typing import Optional

from rendermath.core.scalar import hash_combine


@dataclass
class Size:
    """Mutable 2D size."""

    width: float = 0.0
    height: float = 0.0

    def __str__(self) -> str:
        return f"{{W: {self.width}, H: {self.height}}}"

    def get_class_name(self) -> str:
        return "Size"

    def get_hash_code(self) -> int:
        return hash_combine((self.width, self.height))

    def copy_from(self, source: "Size") -> None:
        self.width = source.width
        self.height = source.height

    def copy_from_floats(self, width: float, height: float) -> "Size":
        self.width = width
        self.height = height
        return self

    def set(self, width: float, height: float) -> "Size":
        return self.copy_from_floats(width, height)

    def multiply_by_floats(self, w: float, h: float) -> "Size":
        return Size(self.width * w, self.height * h)

    def clone(self) -> "Size":
        return Size(self.width, self.height)

    def equals(self, other: Optional["Size"]) -> bool:
        if other is None:
            return False
        return self.width == other.width and self.height == other.height

    @property
    def surface(self) -> float:
        """Area covered by the size."""
        return self.width * self.height

    def add(self, other: "Size") -> "Size":
        return Size(self.width + other.width, self.height + other.height)

    def subtract(self, other: "Size") -> "Size":
        return Size(self.width - other.width, self.height - other.height)

    @classmethod
    def zero(cls) -> "Size":
        return cls(0.0, 0.0)


def lerp(start: Size, end: Size, amount: float) -> Size:
    w = start.width + ((end.width - start.width) * amount)
    h = start.height + ((end.height - start.height) * amount)
    return Size(w, h)
