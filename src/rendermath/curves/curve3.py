"""
Sampled 3D curves: Bezier, Hermite and Catmull-Rom splines.
"""

from typing import Sequence

from rendermath.core import vector3 as vec3
from rendermath.core.vector3 import Vector3


class Curve3:
    """
    Polyline of sampled curve points with its precomputed length.

    Args:
        points: Points in order. The list is kept, not copied.
    """

    def __init__(self, points: list[Vector3]) -> None:
        self._points = points
        self._length = self._compute_length(points)

    def get_points(self) -> list[Vector3]:
        return self._points

    def length(self) -> float:
        return self._length

    def continue_curve(self, curve: "Curve3") -> "Curve3":
        """
        Append ``curve`` so that its first point lands on this curve's last point.

        Returns:
            New curve; neither input is modified.
        """
        last_point = self._points[-1]
        continued_points = list(self._points)
        curve_points = curve.get_points()
        for point in curve_points[1:]:
            continued_points.append(point.subtract(curve_points[0]).add(last_point))
        return Curve3(continued_points)

    @staticmethod
    def _compute_length(path: Sequence[Vector3]) -> float:
        total = 0.0
        for i in range(1, len(path)):
            total += path[i].subtract(path[i - 1]).length()
        return total

    @classmethod
    def create_quadratic_bezier(
        cls, v0: Vector3, v1: Vector3, v2: Vector3, nb_points: int
    ) -> "Curve3":
        """
        Quadratic Bezier from ``v0`` to ``v2`` with control point ``v1``.

        ``nb_points`` is raised to at least 3; the curve holds ``nb_points + 1`` points.
        """
        nb_points = nb_points if nb_points > 2 else 3

        def equation(t: float, val0: float, val1: float, val2: float) -> float:
            return (1.0 - t) * (1.0 - t) * val0 + 2.0 * t * (1.0 - t) * val1 + t * t * val2

        bezier = []
        for i in range(nb_points + 1):
            t = i / nb_points
            bezier.append(
                Vector3(
                    equation(t, v0.x, v1.x, v2.x),
                    equation(t, v0.y, v1.y, v2.y),
                    equation(t, v0.z, v1.z, v2.z),
                )
            )
        return cls(bezier)

    @classmethod
    def create_cubic_bezier(
        cls, v0: Vector3, v1: Vector3, v2: Vector3, v3: Vector3, nb_points: int
    ) -> "Curve3":
        """
        Cubic Bezier from ``v0`` to ``v3`` with control points ``v1`` and ``v2``.

        ``nb_points`` is raised to at least 4; the curve holds ``nb_points + 1`` points.
        """
        nb_points = nb_points if nb_points > 3 else 4

        def equation(t: float, val0: float, val1: float, val2: float, val3: float) -> float:
            return (
                (1.0 - t) * (1.0 - t) * (1.0 - t) * val0
                + 3.0 * t * (1.0 - t) * (1.0 - t) * val1
                + 3.0 * t * t * (1.0 - t) * val2
                + t * t * t * val3
            )

        bezier = []
        for i in range(nb_points + 1):
            t = i / nb_points
            bezier.append(
                Vector3(
                    equation(t, v0.x, v1.x, v2.x, v3.x),
                    equation(t, v0.y, v1.y, v2.y, v3.y),
                    equation(t, v0.z, v1.z, v2.z, v3.z),
                )
            )
        return cls(bezier)

    @classmethod
    def create_hermite_spline(
        cls, p1: Vector3, t1: Vector3, p2: Vector3, t2: Vector3, nb_points: int
    ) -> "Curve3":
        step = 1.0 / nb_points
        return cls([vec3.hermite(p1, t1, p2, t2, i * step) for i in range(nb_points + 1)])

    @classmethod
    def create_catmull_rom_spline(
        cls, points: Sequence[Vector3], nb_points: int, closed: bool = False
    ) -> "Curve3":
        """
        Catmull-Rom spline through ``points`` with ``nb_points`` samples per segment.

        An open spline pads the ends by repeating the first and last points
        and ends exactly on the last point. A closed spline wraps around and
        repeats its first sample at the end.

        Raises:
            ValueError: If an open spline gets fewer than two points.
        """
        catmull_rom: list[Vector3] = []
        step = 1.0 / nb_points
        amount = 0.0

        if closed:
            points_count = len(points)
            for i in range(points_count):
                amount = 0.0
                for _ in range(nb_points):
                    catmull_rom.append(
                        vec3.catmull_rom(
                            points[i % points_count],
                            points[(i + 1) % points_count],
                            points[(i + 2) % points_count],
                            points[(i + 3) % points_count],
                            amount,
                        )
                    )
                    amount += step
            catmull_rom.append(catmull_rom[0].clone())
        else:
            if len(points) < 2:
                raise ValueError("An open Catmull-Rom spline needs at least 2 points")
            total_points = [points[0].clone(), *points, points[-1].clone()]
            for i in range(len(total_points) - 3):
                amount = 0.0
                for _ in range(nb_points):
                    catmull_rom.append(
                        vec3.catmull_rom(
                            total_points[i],
                            total_points[i + 1],
                            total_points[i + 2],
                            total_points[i + 3],
                            amount,
                        )
                    )
                    amount += step
            last = len(total_points) - 4
            catmull_rom.append(
                vec3.catmull_rom(
                    total_points[last],
                    total_points[last + 1],
                    total_points[last + 2],
                    total_points[last + 3],
                    amount,
                )
            )
        return cls(catmull_rom)
