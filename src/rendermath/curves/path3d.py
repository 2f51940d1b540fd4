"""
Parallel-transport frames along a 3D polyline.

For each point of the path, ``Path3D`` computes a tangent, a normal and a
binormal forming a frame that rotates as little as possible from one point
to the next, plus the cumulative distance from the first point. The frames
are what extrusion and tube builders sweep their cross sections along.
"""

from typing import Optional, Sequence

from rendermath.core import vector3 as vec3
from rendermath.core.scalar import EPSILON, within_epsilon
from rendermath.core.vector3 import Vector3


class Path3D:
    """
    Frames along a polyline.

    Args:
        path: Points of the path (at least two). They are copied.
        first_normal: Optional vector whose projection onto the plane
            orthogonal to the first tangent becomes the first normal.
        raw: Skip normalizing tangents, normals and binormals.
    """

    def __init__(
        self,
        path: Sequence[Vector3],
        first_normal: Optional[Vector3] = None,
        raw: bool = False,
    ) -> None:
        if len(path) < 2:
            raise ValueError(f"Path3D needs at least 2 points, got {len(path)}")
        self.path = path
        self._curve = [point.clone() for point in path]
        self._distances: list[float] = []
        self._tangents: list[Vector3] = []
        self._normals: list[Vector3] = []
        self._binormals: list[Vector3] = []
        self._raw = raw
        self._compute(first_normal)

    def get_curve(self) -> list[Vector3]:
        return self._curve

    def get_tangents(self) -> list[Vector3]:
        return self._tangents

    def get_normals(self) -> list[Vector3]:
        return self._normals

    def get_binormals(self) -> list[Vector3]:
        return self._binormals

    def get_distances(self) -> list[float]:
        return self._distances

    def update(self, path: Sequence[Vector3], first_normal: Optional[Vector3] = None) -> "Path3D":
        """Copy new positions into the curve (same point count) and recompute the frames."""
        for point, source in zip(self._curve, path):
            point.copy_from(source)
        self._compute(first_normal)
        return self

    def _compute(self, first_normal: Optional[Vector3]) -> None:
        count = len(self._curve)
        tangents: list[Optional[Vector3]] = [None] * count
        normals: list[Vector3] = []
        binormals: list[Vector3] = []
        distances = [0.0] * count

        # First and last tangents
        tangents[0] = self._first_non_null_vector(0)
        if not self._raw:
            tangents[0].normalize()
        tangents[count - 1] = self._curve[count - 1].subtract(self._curve[count - 2])
        if not self._raw:
            tangents[count - 1].normalize()

        first_tangent = tangents[0]
        normals.append(self._normal_vector(first_tangent, first_normal))
        if not self._raw:
            normals[0].normalize()
        binormals.append(vec3.cross(first_tangent, normals[0]))
        if not self._raw:
            binormals[0].normalize()

        for i in range(1, count):
            previous = self._last_non_null_vector(i)
            if i < count - 1:
                current = self._first_non_null_vector(i)
                tangents[i] = previous.add(current)
                tangents[i].normalize()
            distances[i] = distances[i - 1] + previous.length()

            tangent = tangents[i]
            normal = vec3.cross(binormals[i - 1], tangent)
            if not self._raw:
                normal.normalize()
            normals.append(normal)
            binormal = vec3.cross(tangent, normal)
            if not self._raw:
                binormal.normalize()
            binormals.append(binormal)

        self._tangents = tangents  # type: ignore[assignment]
        self._normals = normals
        self._binormals = binormals
        self._distances = distances

    def _first_non_null_vector(self, index: int) -> Vector3:
        """First non-zero ``curve[index + n] - curve[index]`` for n >= 1."""
        i = 1
        vector = self._curve[index + i].subtract(self._curve[index])
        while vector.length() == 0 and index + i + 1 < len(self._curve):
            i += 1
            vector = self._curve[index + i].subtract(self._curve[index])
        return vector

    def _last_non_null_vector(self, index: int) -> Vector3:
        """Last non-zero ``curve[index] - curve[index - n]`` for n >= 1."""
        i = 1
        vector = self._curve[index].subtract(self._curve[index - i])
        while vector.length() == 0 and index > i + 1:
            i += 1
            vector = self._curve[index].subtract(self._curve[index - i])
        return vector

    @staticmethod
    def _normal_vector(tangent: Vector3, reference: Optional[Vector3]) -> Vector3:
        """
        Unit vector orthogonal to ``tangent``.

        With a ``reference``, its projection onto the plane orthogonal to the
        tangent is used. Otherwise the first world axis not parallel to the
        tangent is crossed with it.
        """
        tangent_length = tangent.length()
        if tangent_length == 0.0:
            tangent_length = 1.0

        if reference is None:
            if not within_epsilon(abs(tangent.y) / tangent_length, 1.0, EPSILON):
                point = Vector3(0.0, -1.0, 0.0)
            elif not within_epsilon(abs(tangent.x) / tangent_length, 1.0, EPSILON):
                point = Vector3(1.0, 0.0, 0.0)
            elif not within_epsilon(abs(tangent.z) / tangent_length, 1.0, EPSILON):
                point = Vector3(0.0, 0.0, 1.0)
            else:
                point = Vector3.zero()
            normal = vec3.cross(tangent, point)
        else:
            normal = vec3.cross(tangent, reference)
            vec3.cross_to_ref(normal, tangent, normal)
        normal.normalize()
        return normal
