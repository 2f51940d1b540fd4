"""
Four-component vector.

Used for matrix rows and homogeneous coordinates.
"""

from dataclasses import dataclass
import math
from typing import TYPE_CHECKING, MutableSequence, Optional, Sequence

from rendermath.core.scalar import EPSILON, hash_combine, within_epsilon
from rendermath.core.vector3 import Vector3

if TYPE_CHECKING:
    from rendermath.core.matrix import Matrix


@dataclass
class Vector4:
    """Mutable (x, y, z, w) vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __str__(self) -> str:
        return f"{{X: {self.x} Y:{self.y} Z:{self.z} W:{self.w}}}"

    def get_class_name(self) -> str:
        return "Vector4"

    def get_hash_code(self) -> int:
        return hash_combine((self.x, self.y, self.z, self.w))

    def as_array(self) -> list[float]:
        return [self.x, self.y, self.z, self.w]

    def to_array(self, array: MutableSequence[float], index: int = 0) -> "Vector4":
        array[index] = self.x
        array[index + 1] = self.y
        array[index + 2] = self.z
        array[index + 3] = self.w
        return self

    def add_in_place(self, other: "Vector4") -> "Vector4":
        self.x += other.x
        self.y += other.y
        self.z += other.z
        self.w += other.w
        return self

    def add(self, other: "Vector4") -> "Vector4":
        return Vector4(
            self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w
        )

    def add_to_ref(self, other: "Vector4", result: "Vector4") -> "Vector4":
        return result.copy_from_floats(
            self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w
        )

    def subtract_in_place(self, other: "Vector4") -> "Vector4":
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        self.w -= other.w
        return self

    def subtract(self, other: "Vector4") -> "Vector4":
        return Vector4(
            self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w
        )

    def subtract_to_ref(self, other: "Vector4", result: "Vector4") -> "Vector4":
        return result.copy_from_floats(
            self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w
        )

    def subtract_from_floats(self, x: float, y: float, z: float, w: float) -> "Vector4":
        return Vector4(self.x - x, self.y - y, self.z - z, self.w - w)

    def negate(self) -> "Vector4":
        return Vector4(-self.x, -self.y, -self.z, -self.w)

    def scale_in_place(self, scale: float) -> "Vector4":
        self.x *= scale
        self.y *= scale
        self.z *= scale
        self.w *= scale
        return self

    def scale(self, scale: float) -> "Vector4":
        return Vector4(self.x * scale, self.y * scale, self.z * scale, self.w * scale)

    def scale_to_ref(self, scale: float, result: "Vector4") -> "Vector4":
        return result.copy_from_floats(
            self.x * scale, self.y * scale, self.z * scale, self.w * scale
        )

    def scale_and_add_to_ref(self, scale: float, result: "Vector4") -> "Vector4":
        return result.copy_from_floats(
            result.x + self.x * scale,
            result.y + self.y * scale,
            result.z + self.z * scale,
            result.w + self.w * scale,
        )

    def multiply_in_place(self, other: "Vector4") -> "Vector4":
        self.x *= other.x
        self.y *= other.y
        self.z *= other.z
        self.w *= other.w
        return self

    def multiply(self, other: "Vector4") -> "Vector4":
        return Vector4(
            self.x * other.x, self.y * other.y, self.z * other.z, self.w * other.w
        )

    def multiply_by_floats(self, x: float, y: float, z: float, w: float) -> "Vector4":
        return Vector4(self.x * x, self.y * y, self.z * z, self.w * w)

    def divide(self, other: "Vector4") -> "Vector4":
        return Vector4(
            self.x / other.x, self.y / other.y, self.z / other.z, self.w / other.w
        )

    def minimize_in_place(self, other: "Vector4") -> "Vector4":
        self.x = min(self.x, other.x)
        self.y = min(self.y, other.y)
        self.z = min(self.z, other.z)
        self.w = min(self.w, other.w)
        return self

    def maximize_in_place(self, other: "Vector4") -> "Vector4":
        self.x = max(self.x, other.x)
        self.y = max(self.y, other.y)
        self.z = max(self.z, other.z)
        self.w = max(self.w, other.w)
        return self

    def equals(self, other: Optional["Vector4"]) -> bool:
        return (
            other is not None
            and self.x == other.x
            and self.y == other.y
            and self.z == other.z
            and self.w == other.w
        )

    def equals_with_epsilon(self, other: "Vector4", epsilon: float = EPSILON) -> bool:
        return (
            other is not None
            and within_epsilon(self.x, other.x, epsilon)
            and within_epsilon(self.y, other.y, epsilon)
            and within_epsilon(self.z, other.z, epsilon)
            and within_epsilon(self.w, other.w, epsilon)
        )

    def equals_to_floats(self, x: float, y: float, z: float, w: float) -> bool:
        return self.x == x and self.y == y and self.z == z and self.w == w

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w

    def normalize(self) -> "Vector4":
        """Normalize in place; a zero vector is left unchanged."""
        length = self.length()
        if length == 0:
            return self
        return self.scale_in_place(1.0 / length)

    def to_vector3(self) -> Vector3:
        """Drop the w component."""
        return Vector3(self.x, self.y, self.z)

    def clone(self) -> "Vector4":
        return Vector4(self.x, self.y, self.z, self.w)

    def copy_from(self, source: "Vector4") -> "Vector4":
        return self.copy_from_floats(source.x, source.y, source.z, source.w)

    def copy_from_floats(self, x: float, y: float, z: float, w: float) -> "Vector4":
        self.x = x
        self.y = y
        self.z = z
        self.w = w
        return self

    def set(self, x: float, y: float, z: float, w: float) -> "Vector4":
        return self.copy_from_floats(x, y, z, w)

    @classmethod
    def zero(cls) -> "Vector4":
        return cls(0.0, 0.0, 0.0, 0.0)

    @classmethod
    def one(cls) -> "Vector4":
        return cls(1.0, 1.0, 1.0, 1.0)

    @classmethod
    def from_array(cls, array: Sequence[float], offset: int = 0) -> "Vector4":
        return cls(array[offset], array[offset + 1], array[offset + 2], array[offset + 3])


def from_array_to_ref(array: Sequence[float], offset: int, result: Vector4) -> None:
    result.copy_from_floats(
        array[offset], array[offset + 1], array[offset + 2], array[offset + 3]
    )


def from_floats_to_ref(x: float, y: float, z: float, w: float, result: Vector4) -> None:
    result.copy_from_floats(x, y, z, w)


def normalize(vector: Vector4) -> Vector4:
    result = Vector4.zero()
    normalize_to_ref(vector, result)
    return result


def normalize_to_ref(vector: Vector4, result: Vector4) -> None:
    result.copy_from(vector)
    result.normalize()


def minimize(left: Vector4, right: Vector4) -> Vector4:
    return left.clone().minimize_in_place(right)


def maximize(left: Vector4, right: Vector4) -> Vector4:
    return left.clone().maximize_in_place(right)


def distance(value1: Vector4, value2: Vector4) -> float:
    return math.sqrt(distance_squared(value1, value2))


def distance_squared(value1: Vector4, value2: Vector4) -> float:
    x = value1.x - value2.x
    y = value1.y - value2.y
    z = value1.z - value2.z
    w = value1.w - value2.w
    return (x * x) + (y * y) + (z * z) + (w * w)


def center(value1: Vector4, value2: Vector4) -> Vector4:
    return value1.add(value2).scale_in_place(0.5)


def transform_normal(vector: Vector4, transformation: "Matrix") -> Vector4:
    result = Vector4.zero()
    transform_normal_to_ref(vector, transformation, result)
    return result


def transform_normal_to_ref(
    vector: Vector4, transformation: "Matrix", result: Vector4
) -> None:
    """Apply the 3x3 part of ``transformation``; w passes through unchanged."""
    transform_normal_from_floats_to_ref(
        vector.x, vector.y, vector.z, vector.w, transformation, result
    )


def transform_normal_from_floats_to_ref(
    x: float, y: float, z: float, w: float, transformation: "Matrix", result: Vector4
) -> None:
    m = transformation.m.tolist()
    result.x = x * m[0] + y * m[4] + z * m[8]
    result.y = x * m[1] + y * m[5] + z * m[9]
    result.z = x * m[2] + y * m[6] + z * m[10]
    result.w = w
