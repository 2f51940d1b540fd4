"""
Angles and circular arcs in the plane.
"""

from enum import IntEnum
import math

from rendermath.core.vector2 import Vector2


class Orientation(IntEnum):
    """Winding direction."""

    CW = 0
    CCW = 1


class Angle:
    """
    Angle stored in radians.

    Negative inputs are wrapped once by adding 2π.
    """

    def __init__(self, radians: float) -> None:
        self._radians = radians
        if self._radians < 0.0:
            self._radians += 2.0 * math.pi

    def __repr__(self) -> str:
        return f"Angle({self._radians})"

    def degrees(self) -> float:
        return self._radians * 180.0 / math.pi

    def radians(self) -> float:
        return self._radians

    @classmethod
    def between_two_points(cls, a: Vector2, b: Vector2) -> "Angle":
        """Angle of the vector from ``a`` to ``b`` against the +X axis."""
        delta = b.subtract(a)
        return cls(math.atan2(delta.y, delta.x))

    @classmethod
    def from_radians(cls, radians: float) -> "Angle":
        return cls(radians)

    @classmethod
    def from_degrees(cls, degrees: float) -> "Angle":
        return cls(degrees * math.pi / 180.0)


class Arc2:
    """
    Circular arc through three points.

    Attributes:
        start_point: First point.
        mid_point: Point the arc passes through.
        end_point: Last point.
        center_point: Circumcenter of the three points.
        radius: Circle radius.
        start_angle: Angle of ``start_point`` around the center.
        orientation: CW or CCW, from start toward mid.
        angle: Swept angle from start to end.
    """

    def __init__(self, start_point: Vector2, mid_point: Vector2, end_point: Vector2) -> None:
        self.start_point = start_point
        self.mid_point = mid_point
        self.end_point = end_point

        temp = mid_point.x**2 + mid_point.y**2
        start_to_mid = (start_point.x**2 + start_point.y**2 - temp) / 2.0
        mid_to_end = (temp - end_point.x**2 - end_point.y**2) / 2.0
        det = (start_point.x - mid_point.x) * (mid_point.y - end_point.y) - (
            mid_point.x - end_point.x
        ) * (start_point.y - mid_point.y)

        self.center_point = Vector2(
            (start_to_mid * (mid_point.y - end_point.y) - mid_to_end * (start_point.y - mid_point.y))
            / det,
            ((start_point.x - mid_point.x) * mid_to_end - (mid_point.x - end_point.x) * start_to_mid)
            / det,
        )

        self.radius = self.center_point.subtract(self.start_point).length()
        self.start_angle = Angle.between_two_points(self.center_point, self.start_point)

        a1 = self.start_angle.degrees()
        a2 = Angle.between_two_points(self.center_point, self.mid_point).degrees()
        a3 = Angle.between_two_points(self.center_point, self.end_point).degrees()

        # Keep consecutive angles within half a turn of each other
        if a2 - a1 > 180.0:
            a2 -= 360.0
        if a2 - a1 < -180.0:
            a2 += 360.0
        if a3 - a2 > 180.0:
            a3 -= 360.0
        if a3 - a2 < -180.0:
            a3 += 360.0

        self.orientation = Orientation.CW if (a2 - a1) < 0 else Orientation.CCW
        self.angle = Angle.from_degrees(
            a1 - a3 if self.orientation == Orientation.CW else a3 - a1
        )
