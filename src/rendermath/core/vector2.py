"""
Two-component vector.

Used for texture coordinates, 2D paths and screen-space math.
"""

from dataclasses import dataclass
import math
from typing import TYPE_CHECKING, MutableSequence, Optional, Sequence

from rendermath.core.scalar import EPSILON, hash_combine, within_epsilon

if TYPE_CHECKING:
    from rendermath.core.matrix import Matrix
    from rendermath.core.vector3 import Vector3


@dataclass
class Vector2:
    """Mutable (x, y) vector."""

    x: float = 0.0
    y: float = 0.0

    def __str__(self) -> str:
        return f"{{X: {self.x} Y:{self.y}}}"

    def get_class_name(self) -> str:
        return "Vector2"

    def get_hash_code(self) -> int:
        return hash_combine((self.x, self.y))

    def to_array(self, array: MutableSequence[float], index: int = 0) -> "Vector2":
        array[index] = self.x
        array[index + 1] = self.y
        return self

    def as_array(self) -> list[float]:
        return [self.x, self.y]

    def copy_from(self, source: "Vector2") -> "Vector2":
        return self.copy_from_floats(source.x, source.y)

    def copy_from_floats(self, x: float, y: float) -> "Vector2":
        self.x = x
        self.y = y
        return self

    def set(self, x: float, y: float) -> "Vector2":
        return self.copy_from_floats(x, y)

    def add(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def add_to_ref(self, other: "Vector2", result: "Vector2") -> "Vector2":
        result.x = self.x + other.x
        result.y = self.y + other.y
        return self

    def add_in_place(self, other: "Vector2") -> "Vector2":
        self.x += other.x
        self.y += other.y
        return self

    def add_vector3(self, other: "Vector3") -> "Vector2":
        """Add the x and y of a Vector3, ignoring z."""
        return Vector2(self.x + other.x, self.y + other.y)

    def subtract(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def subtract_to_ref(self, other: "Vector2", result: "Vector2") -> "Vector2":
        result.x = self.x - other.x
        result.y = self.y - other.y
        return self

    def subtract_in_place(self, other: "Vector2") -> "Vector2":
        self.x -= other.x
        self.y -= other.y
        return self

    def multiply_in_place(self, other: "Vector2") -> "Vector2":
        self.x *= other.x
        self.y *= other.y
        return self

    def multiply(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x * other.x, self.y * other.y)

    def multiply_to_ref(self, other: "Vector2", result: "Vector2") -> "Vector2":
        result.x = self.x * other.x
        result.y = self.y * other.y
        return self

    def multiply_by_floats(self, x: float, y: float) -> "Vector2":
        return Vector2(self.x * x, self.y * y)

    def divide(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x / other.x, self.y / other.y)

    def divide_to_ref(self, other: "Vector2", result: "Vector2") -> "Vector2":
        result.x = self.x / other.x
        result.y = self.y / other.y
        return self

    def divide_in_place(self, other: "Vector2") -> "Vector2":
        return self.divide_to_ref(other, self)

    def negate(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def scale_in_place(self, scale: float) -> "Vector2":
        self.x *= scale
        self.y *= scale
        return self

    def scale(self, scale: float) -> "Vector2":
        result = Vector2()
        self.scale_to_ref(scale, result)
        return result

    def scale_to_ref(self, scale: float, result: "Vector2") -> "Vector2":
        result.x = self.x * scale
        result.y = self.y * scale
        return self

    def scale_and_add_to_ref(self, scale: float, result: "Vector2") -> "Vector2":
        result.x += self.x * scale
        result.y += self.y * scale
        return self

    def equals(self, other: Optional["Vector2"]) -> bool:
        return other is not None and self.x == other.x and self.y == other.y

    def equals_with_epsilon(self, other: Optional["Vector2"], epsilon: float = EPSILON) -> bool:
        return (
            other is not None
            and within_epsilon(self.x, other.x, epsilon)
            and within_epsilon(self.y, other.y, epsilon)
        )

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def normalize(self) -> "Vector2":
        """Normalize in place; a zero vector is left unchanged."""
        length = self.length()
        if length == 0:
            return self
        num = 1.0 / length
        self.x *= num
        self.y *= num
        return self

    def clone(self) -> "Vector2":
        return Vector2(self.x, self.y)

    @classmethod
    def zero(cls) -> "Vector2":
        return cls(0.0, 0.0)

    @classmethod
    def one(cls) -> "Vector2":
        return cls(1.0, 1.0)

    @classmethod
    def from_array(cls, array: Sequence[float], offset: int = 0) -> "Vector2":
        return cls(array[offset], array[offset + 1])


def from_array_to_ref(array: Sequence[float], offset: int, result: Vector2) -> None:
    result.x = array[offset]
    result.y = array[offset + 1]


def catmull_rom(
    value1: Vector2, value2: Vector2, value3: Vector2, value4: Vector2, amount: float
) -> Vector2:
    squared = amount * amount
    cubed = amount * squared

    def component(v1: float, v2: float, v3: float, v4: float) -> float:
        return 0.5 * (
            ((2.0 * v2) + ((-v1 + v3) * amount))
            + (((2.0 * v1) - (5.0 * v2) + (4.0 * v3) - v4) * squared)
            + ((-v1 + (3.0 * v2) - (3.0 * v3) + v4) * cubed)
        )

    return Vector2(
        component(value1.x, value2.x, value3.x, value4.x),
        component(value1.y, value2.y, value3.y, value4.y),
    )


def clamp(value: Vector2, min_value: Vector2, max_value: Vector2) -> Vector2:
    x = value.x
    x = max_value.x if x > max_value.x else x
    x = min_value.x if x < min_value.x else x

    y = value.y
    y = max_value.y if y > max_value.y else y
    y = min_value.y if y < min_value.y else y

    return Vector2(x, y)


def hermite(
    value1: Vector2, tangent1: Vector2, value2: Vector2, tangent2: Vector2, amount: float
) -> Vector2:
    squared = amount * amount
    cubed = amount * squared
    part1 = ((2.0 * cubed) - (3.0 * squared)) + 1.0
    part2 = (-2.0 * cubed) + (3.0 * squared)
    part3 = (cubed - (2.0 * squared)) + amount
    part4 = cubed - squared

    x = (value1.x * part1) + (value2.x * part2) + (tangent1.x * part3) + (tangent2.x * part4)
    y = (value1.y * part1) + (value2.y * part2) + (tangent1.y * part3) + (tangent2.y * part4)
    return Vector2(x, y)


def lerp(start: Vector2, end: Vector2, amount: float) -> Vector2:
    x = start.x + ((end.x - start.x) * amount)
    y = start.y + ((end.y - start.y) * amount)
    return Vector2(x, y)


def dot(left: Vector2, right: Vector2) -> float:
    return left.x * right.x + left.y * right.y


def normalize(vector: Vector2) -> Vector2:
    return vector.clone().normalize()


def minimize(left: Vector2, right: Vector2) -> Vector2:
    return Vector2(min(left.x, right.x), min(left.y, right.y))


def maximize(left: Vector2, right: Vector2) -> Vector2:
    return Vector2(max(left.x, right.x), max(left.y, right.y))


def transform(vector: Vector2, transformation: "Matrix") -> Vector2:
    result = Vector2.zero()
    transform_to_ref(vector, transformation, result)
    return result


def transform_to_ref(vector: Vector2, transformation: "Matrix", result: Vector2) -> None:
    """Apply the 2D affine part of ``transformation`` (m0, m1, m4, m5, m12, m13)."""
    m = transformation.m.tolist()
    x = (vector.x * m[0]) + (vector.y * m[4]) + m[12]
    y = (vector.x * m[1]) + (vector.y * m[5]) + m[13]
    result.x = x
    result.y = y


def point_in_triangle(p: Vector2, p0: Vector2, p1: Vector2, p2: Vector2) -> bool:
    """
    Check whether ``p`` lies strictly inside triangle (p0, p1, p2).

    Works for either winding; points on an edge are outside.
    """
    a = 0.5 * (
        -p1.y * p2.x + p0.y * (-p1.x + p2.x) + p0.x * (p1.y - p2.y) + p1.x * p2.y
    )
    sign = -1 if a < 0 else 1
    s = (p0.y * p2.x - p0.x * p2.y + (p2.y - p0.y) * p.x + (p0.x - p2.x) * p.y) * sign
    t = (p0.x * p1.y - p0.y * p1.x + (p0.y - p1.y) * p.x + (p1.x - p0.x) * p.y) * sign

    return s > 0 and t > 0 and (s + t) < 2 * a * sign


def distance(value1: Vector2, value2: Vector2) -> float:
    return math.sqrt(distance_squared(value1, value2))


def distance_squared(value1: Vector2, value2: Vector2) -> float:
    x = value1.x - value2.x
    y = value1.y - value2.y
    return (x * x) + (y * y)


def center(value1: Vector2, value2: Vector2) -> Vector2:
    return value1.add(value2).scale_in_place(0.5)


def distance_of_point_from_segment(p: Vector2, seg_a: Vector2, seg_b: Vector2) -> float:
    """Shortest distance from ``p`` to the segment; a degenerate segment is a point."""
    l2 = distance_squared(seg_a, seg_b)
    if l2 == 0.0:
        return distance(p, seg_a)
    v = seg_b.subtract(seg_a)
    t = max(0.0, min(1.0, dot(p.subtract(seg_a), v) / l2))
    projection = seg_a.add(v.multiply_by_floats(t, t))
    return distance(p, projection)
