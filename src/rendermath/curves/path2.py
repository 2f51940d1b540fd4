"""
2D polyline built from line and arc segments.
"""

import math

from rendermath.core.vector2 import Vector2
from rendermath.curves.angle import Arc2, Orientation


class Path2:
    """
    Polyline starting at (x, y).

    Once closed, further segments are ignored.
    """

    def __init__(self, x: float, y: float) -> None:
        self._points = [Vector2(x, y)]
        self._length = 0.0
        self.closed = False

    def add_line_to(self, x: float, y: float) -> "Path2":
        if self.closed:
            return self
        new_point = Vector2(x, y)
        previous_point = self._points[-1]
        self._points.append(new_point)
        self._length += new_point.subtract(previous_point).length()
        return self

    def add_arc_to(
        self,
        mid_x: float,
        mid_y: float,
        end_x: float,
        end_y: float,
        number_of_segments: int = 36,
    ) -> "Path2":
        """
        Append an arc from the last point through (mid_x, mid_y) to (end_x, end_y).

        The arc is approximated by ``number_of_segments`` line segments.
        """
        if self.closed:
            return self
        start_point = self._points[-1]
        mid_point = Vector2(mid_x, mid_y)
        end_point = Vector2(end_x, end_y)

        arc = Arc2(start_point, mid_point, end_point)

        increment = arc.angle.radians() / number_of_segments
        if arc.orientation == Orientation.CW:
            increment *= -1
        current_angle = arc.start_angle.radians() + increment

        for _ in range(number_of_segments):
            x = math.cos(current_angle) * arc.radius + arc.center_point.x
            y = math.sin(current_angle) * arc.radius + arc.center_point.y
            self.add_line_to(x, y)
            current_angle += increment
        return self

    def close(self) -> "Path2":
        self.closed = True
        return self

    def length(self) -> float:
        """
        Total length of the path.

        While the path is open, the distance from the last point back to the
        first is included.
        """
        result = self._length
        if not self.closed:
            last_point = self._points[-1]
            first_point = self._points[0]
            result += first_point.subtract(last_point).length()
        return result

    def get_points(self) -> list[Vector2]:
        return self._points

    def get_point_at_length_position(self, normalized_length_position: float) -> Vector2:
        """
        Point at a fraction of ``length()`` along the path.

        Returns the zero vector for positions outside [0, 1].
        """
        if normalized_length_position < 0 or normalized_length_position > 1:
            return Vector2.zero()

        length_position = normalized_length_position * self.length()

        previous_offset = 0.0
        count = len(self._points)
        for i in range(count):
            j = (i + 1) % count

            a = self._points[i]
            b = self._points[j]
            b_to_a = b.subtract(a)

            next_offset = b_to_a.length() + previous_offset
            if previous_offset <= length_position <= next_offset:
                direction = b_to_a.normalize()
                local_offset = length_position - previous_offset
                return Vector2(
                    a.x + (direction.x * local_offset),
                    a.y + (direction.y * local_offset),
                )
            previous_offset = next_offset

        return Vector2.zero()

    @classmethod
    def starting_at(cls, x: float, y: float) -> "Path2":
        return cls(x, y)
