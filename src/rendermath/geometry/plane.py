"""
Plane in Hessian form: ``normal . p + d = 0``.
"""

import math
from typing import TYPE_CHECKING, Sequence

from rendermath.core import vector3 as vec3
from rendermath.core.scalar import hash_combine
from rendermath.core.vector3 import Vector3

if TYPE_CHECKING:
    from rendermath.core.matrix import Matrix


class Plane:
    """
    Mutable plane.

    Attributes:
        normal: Plane normal (a, b, c).
        d: Signed offset.
    """

    def __init__(self, a: float, b: float, c: float, d: float) -> None:
        self.normal = Vector3(a, b, c)
        self.d = d

    def __repr__(self) -> str:
        return f"Plane({self.normal.x}, {self.normal.y}, {self.normal.z}, {self.d})"

    def as_array(self) -> list[float]:
        return [self.normal.x, self.normal.y, self.normal.z, self.d]

    def clone(self) -> "Plane":
        return Plane(self.normal.x, self.normal.y, self.normal.z, self.d)

    def get_class_name(self) -> str:
        return "Plane"

    def get_hash_code(self) -> int:
        return hash_combine((self.normal.get_hash_code(), self.d))

    def normalize(self) -> "Plane":
        """
        Scale the plane so its normal has unit length.

        A zero normal makes every component zero.
        """
        norm = math.sqrt(
            (self.normal.x * self.normal.x)
            + (self.normal.y * self.normal.y)
            + (self.normal.z * self.normal.z)
        )
        magnitude = 0.0
        if norm != 0:
            magnitude = 1.0 / norm

        self.normal.x *= magnitude
        self.normal.y *= magnitude
        self.normal.z *= magnitude
        self.d *= magnitude
        return self

    def transform(self, transformation: "Matrix") -> "Plane":
        """Return a new plane multiplied by the transpose of ``transformation``."""
        from rendermath.core.matrix import transpose

        t = transpose(transformation).m.tolist()
        x = self.normal.x
        y = self.normal.y
        z = self.normal.z
        d = self.d

        normal_x = (x * t[0]) + (y * t[1]) + (z * t[2]) + (d * t[3])
        normal_y = (x * t[4]) + (y * t[5]) + (z * t[6]) + (d * t[7])
        normal_z = (x * t[8]) + (y * t[9]) + (z * t[10]) + (d * t[11])
        final_d = (x * t[12]) + (y * t[13]) + (z * t[14]) + (d * t[15])

        return Plane(normal_x, normal_y, normal_z, final_d)

    def dot_coordinate(self, point: Vector3) -> float:
        return (
            (self.normal.x * point.x)
            + (self.normal.y * point.y)
            + (self.normal.z * point.z)
            + self.d
        )

    def copy_from_points(self, point1: Vector3, point2: Vector3, point3: Vector3) -> "Plane":
        """
        Set this plane through three points.

        The normal is ``(p2 - p1) x (p3 - p1)`` normalized; collinear points
        give a zero normal.
        """
        x1 = point2.x - point1.x
        y1 = point2.y - point1.y
        z1 = point2.z - point1.z
        x2 = point3.x - point1.x
        y2 = point3.y - point1.y
        z2 = point3.z - point1.z
        yz = (y1 * z2) - (z1 * y2)
        xz = (z1 * x2) - (x1 * z2)
        xy = (x1 * y2) - (y1 * x2)
        pyth = math.sqrt((yz * yz) + (xz * xz) + (xy * xy))
        inv_pyth = 1.0 / pyth if pyth != 0 else 0.0

        self.normal.x = yz * inv_pyth
        self.normal.y = xz * inv_pyth
        self.normal.z = xy * inv_pyth
        self.d = -(
            (self.normal.x * point1.x)
            + (self.normal.y * point1.y)
            + (self.normal.z * point1.z)
        )
        return self

    def is_front_facing_to(self, direction: Vector3, epsilon: float) -> bool:
        """True when ``direction`` points against the normal (dot <= epsilon)."""
        return vec3.dot(self.normal, direction) <= epsilon

    def signed_distance_to(self, point: Vector3) -> float:
        return vec3.dot(point, self.normal) + self.d

    @classmethod
    def from_array(cls, array: Sequence[float]) -> "Plane":
        return cls(array[0], array[1], array[2], array[3])

    @classmethod
    def from_points(cls, point1: Vector3, point2: Vector3, point3: Vector3) -> "Plane":
        result = cls(0.0, 0.0, 0.0, 0.0)
        result.copy_from_points(point1, point2, point3)
        return result

    @classmethod
    def from_position_and_normal(cls, origin: Vector3, normal: Vector3) -> "Plane":
        """
        Plane through ``origin`` with the given normal.

        ``normal`` is normalized in place and becomes the plane's normal
        instance.
        """
        result = cls(0.0, 0.0, 0.0, 0.0)
        normal.normalize()
        result.normal = normal
        result.d = -(normal.x * origin.x + normal.y * origin.y + normal.z * origin.z)
        return result


def signed_distance_to_plane_from_position_and_normal(
    origin: Vector3, normal: Vector3, point: Vector3
) -> float:
    d = -(normal.x * origin.x + normal.y * origin.y + normal.z * origin.z)
    return vec3.dot(point, normal) + d
