"""
Three-component vector for points and directions.

Instance methods mutate or return new vectors; module-level functions are
the static operations (cross products, transforms, interpolation,
projection). Every allocating function has a ``*_to_ref`` sibling that
writes into a caller-owned result instead.

The coordinate system is left-handed with +Y up and +Z forward.
"""

from dataclasses import dataclass
import math
from typing import TYPE_CHECKING, MutableSequence, Optional, Sequence

from rendermath.config import runtime
from rendermath.core.errors import DegenerateVectorError
from rendermath.core.scalar import EPSILON, divide, hash_combine, within_epsilon
from rendermath.core.scalar import clamp as clamp_scalar

if TYPE_CHECKING:
    from rendermath.core.matrix import Matrix
    from rendermath.core.quaternion import Quaternion
    from rendermath.geometry.viewport import Viewport


@dataclass
class Vector3:
    """
    Mutable (x, y, z) vector.

    Attributes:
        x: X component.
        y: Y component.
        z: Z component.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __str__(self) -> str:
        return f"{{X: {self.x} Y:{self.y} Z:{self.z}}}"

    def get_class_name(self) -> str:
        return "Vector3"

    def get_hash_code(self) -> int:
        return hash_combine((self.x, self.y, self.z))

    # Conversion

    def as_array(self) -> list[float]:
        """Return a new list ``[x, y, z]``."""
        return [self.x, self.y, self.z]

    def to_array(self, array: MutableSequence[float], index: int = 0) -> "Vector3":
        """
        Write the components into ``array`` starting at ``index``.

        Args:
            array: Caller-owned buffer with at least ``index + 3`` elements.
            index: Offset of the first component.

        Returns:
            This vector.
        """
        array[index] = self.x
        array[index + 1] = self.y
        array[index + 2] = self.z
        return self

    def to_quaternion(self) -> "Quaternion":
        """Interpret the components as yaw (x), pitch (y) and roll (z) angles."""
        from rendermath.core.quaternion import rotation_yaw_pitch_roll

        return rotation_yaw_pitch_roll(self.x, self.y, self.z)

    # Arithmetic

    def add_in_place(self, other: "Vector3") -> "Vector3":
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def add(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def add_to_ref(self, other: "Vector3", result: "Vector3") -> "Vector3":
        return result.copy_from_floats(
            self.x + other.x, self.y + other.y, self.z + other.z
        )

    def subtract_in_place(self, other: "Vector3") -> "Vector3":
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def subtract(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def subtract_to_ref(self, other: "Vector3", result: "Vector3") -> "Vector3":
        return result.copy_from_floats(
            self.x - other.x, self.y - other.y, self.z - other.z
        )

    def subtract_from_floats(self, x: float, y: float, z: float) -> "Vector3":
        return Vector3(self.x - x, self.y - y, self.z - z)

    def subtract_from_floats_to_ref(
        self, x: float, y: float, z: float, result: "Vector3"
    ) -> "Vector3":
        return result.copy_from_floats(self.x - x, self.y - y, self.z - z)

    def negate(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def scale_in_place(self, scale: float) -> "Vector3":
        self.x *= scale
        self.y *= scale
        self.z *= scale
        return self

    def scale(self, scale: float) -> "Vector3":
        return Vector3(self.x * scale, self.y * scale, self.z * scale)

    def scale_to_ref(self, scale: float, result: "Vector3") -> "Vector3":
        return result.copy_from_floats(self.x * scale, self.y * scale, self.z * scale)

    def scale_and_add_to_ref(self, scale: float, result: "Vector3") -> "Vector3":
        return result.copy_from_floats(
            result.x + self.x * scale,
            result.y + self.y * scale,
            result.z + self.z * scale,
        )

    def multiply_in_place(self, other: "Vector3") -> "Vector3":
        self.x *= other.x
        self.y *= other.y
        self.z *= other.z
        return self

    def multiply(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def multiply_to_ref(self, other: "Vector3", result: "Vector3") -> "Vector3":
        return result.copy_from_floats(
            self.x * other.x, self.y * other.y, self.z * other.z
        )

    def multiply_by_floats(self, x: float, y: float, z: float) -> "Vector3":
        return Vector3(self.x * x, self.y * y, self.z * z)

    def divide(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x / other.x, self.y / other.y, self.z / other.z)

    def divide_to_ref(self, other: "Vector3", result: "Vector3") -> "Vector3":
        return result.copy_from_floats(
            self.x / other.x, self.y / other.y, self.z / other.z
        )

    def minimize_in_place(self, other: "Vector3") -> "Vector3":
        """Keep the component-wise minimum of this vector and ``other``."""
        if other.x < self.x:
            self.x = other.x
        if other.y < self.y:
            self.y = other.y
        if other.z < self.z:
            self.z = other.z
        return self

    def maximize_in_place(self, other: "Vector3") -> "Vector3":
        """Keep the component-wise maximum of this vector and ``other``."""
        if other.x > self.x:
            self.x = other.x
        if other.y > self.y:
            self.y = other.y
        if other.z > self.z:
            self.z = other.z
        return self

    def __add__(self, other: "Vector3") -> "Vector3":
        return self.add(other)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return self.subtract(other)

    def __neg__(self) -> "Vector3":
        return self.negate()

    def __mul__(self, scale: float) -> "Vector3":
        return self.scale(scale)

    __rmul__ = __mul__

    # Comparison

    def equals(self, other: Optional["Vector3"]) -> bool:
        return (
            other is not None
            and self.x == other.x
            and self.y == other.y
            and self.z == other.z
        )

    def equals_with_epsilon(self, other: "Vector3", epsilon: float = EPSILON) -> bool:
        return (
            other is not None
            and within_epsilon(self.x, other.x, epsilon)
            and within_epsilon(self.y, other.y, epsilon)
            and within_epsilon(self.z, other.z, epsilon)
        )

    def equals_to_floats(self, x: float, y: float, z: float) -> bool:
        return self.x == x and self.y == y and self.z == z

    @property
    def is_non_uniform(self) -> bool:
        """True when the three components are not all equal in magnitude."""
        ax, ay, az = abs(self.x), abs(self.y), abs(self.z)
        if ax != ay or ay != az:
            return True
        return False

    # Length

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalize(self) -> "Vector3":
        """
        Normalize in place.

        A zero-length or unit-length vector is returned unchanged.

        Returns:
            This vector.

        Raises:
            DegenerateVectorError: If strict mode is on and the vector is zero.
        """
        length = self.length()
        if length == 0 or length == 1.0:
            if length == 0 and runtime.is_strict():
                raise DegenerateVectorError("Cannot normalize a zero-length Vector3")
            return self
        num = 1.0 / length
        self.x *= num
        self.y *= num
        self.z *= num
        return self

    def normalize_to_new(self) -> "Vector3":
        result = Vector3()
        self.normalize_to_ref(result)
        return result

    def normalize_to_ref(self, reference: "Vector3") -> "Vector3":
        """Write the normalized vector into ``reference``, leaving this one intact."""
        length = self.length()
        if length == 0 or length == 1.0:
            return reference.copy_from_floats(self.x, self.y, self.z)
        return self.scale_to_ref(1.0 / length, reference)

    # Copying

    def clone(self) -> "Vector3":
        return Vector3(self.x, self.y, self.z)

    def copy_from(self, source: "Vector3") -> "Vector3":
        self.x = source.x
        self.y = source.y
        self.z = source.z
        return self

    def copy_from_floats(self, x: float, y: float, z: float) -> "Vector3":
        self.x = x
        self.y = y
        self.z = z
        return self

    def set(self, x: float, y: float, z: float) -> "Vector3":
        return self.copy_from_floats(x, y, z)

    # Constructors

    @classmethod
    def zero(cls) -> "Vector3":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def one(cls) -> "Vector3":
        return cls(1.0, 1.0, 1.0)

    @classmethod
    def up(cls) -> "Vector3":
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def forward(cls) -> "Vector3":
        return cls(0.0, 0.0, 1.0)

    @classmethod
    def right(cls) -> "Vector3":
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def left(cls) -> "Vector3":
        return cls(-1.0, 0.0, 0.0)

    @classmethod
    def from_array(cls, array: Sequence[float], offset: int = 0) -> "Vector3":
        """Read three components from ``array`` at ``offset`` (not bounds checked)."""
        return cls(array[offset], array[offset + 1], array[offset + 2])

    @classmethod
    def from_float_array(cls, array: Sequence[float], offset: int = 0) -> "Vector3":
        return cls.from_array(array, offset)


def from_array_to_ref(array: Sequence[float], offset: int, result: Vector3) -> None:
    result.x = array[offset]
    result.y = array[offset + 1]
    result.z = array[offset + 2]


def from_floats_to_ref(x: float, y: float, z: float, result: Vector3) -> None:
    result.copy_from_floats(x, y, z)


def get_clip_factor(
    vector0: Vector3, vector1: Vector3, axis: Vector3, size: float
) -> float:
    """
    Fraction along the segment ``vector0 -> vector1`` where it crosses a slab face.

    Args:
        vector0: Segment start.
        vector1: Segment end.
        axis: Slab axis.
        size: Distance of the face along ``axis``.

    Returns:
        Parametric position of the crossing.
    """
    d0 = dot(vector0, axis) - size
    d1 = dot(vector1, axis) - size
    return d0 / (d0 - d1)


def get_angle_between_vectors(
    vector0: Vector3, vector1: Vector3, normal: Vector3
) -> float:
    """
    Signed angle from ``vector0`` to ``vector1`` around ``normal``.

    Returns:
        Angle in radians, positive when the rotation agrees with ``normal``.
    """
    v0 = vector0.clone().normalize()
    v1 = vector1.clone().normalize()
    cos_angle = clamp_scalar(dot(v0, v1), -1.0, 1.0)
    n = cross(v0, v1)
    if dot(n, normal) > 0:
        return math.acos(cos_angle)
    return -math.acos(cos_angle)


def transform_coordinates(vector: Vector3, transformation: "Matrix") -> Vector3:
    result = Vector3()
    transform_coordinates_to_ref(vector, transformation, result)
    return result


def transform_coordinates_to_ref(
    vector: Vector3, transformation: "Matrix", result: Vector3
) -> None:
    """Apply ``transformation`` to a point, including translation and perspective divide."""
    transform_coordinates_from_floats_to_ref(
        vector.x, vector.y, vector.z, transformation, result
    )


def transform_coordinates_from_floats_to_ref(
    x: float, y: float, z: float, transformation: "Matrix", result: Vector3
) -> None:
    m = transformation.m.tolist()
    rx = x * m[0] + y * m[4] + z * m[8] + m[12]
    ry = x * m[1] + y * m[5] + z * m[9] + m[13]
    rz = x * m[2] + y * m[6] + z * m[10] + m[14]
    rw = x * m[3] + y * m[7] + z * m[11] + m[15]

    result.x = divide(rx, rw)
    result.y = divide(ry, rw)
    result.z = divide(rz, rw)


def transform_normal(vector: Vector3, transformation: "Matrix") -> Vector3:
    result = Vector3()
    transform_normal_to_ref(vector, transformation, result)
    return result


def transform_normal_to_ref(
    vector: Vector3, transformation: "Matrix", result: Vector3
) -> None:
    """Apply the 3x3 part of ``transformation`` to a direction."""
    transform_normal_from_floats_to_ref(
        vector.x, vector.y, vector.z, transformation, result
    )


def transform_normal_from_floats_to_ref(
    x: float, y: float, z: float, transformation: "Matrix", result: Vector3
) -> None:
    m = transformation.m.tolist()
    result.x = x * m[0] + y * m[4] + z * m[8]
    result.y = x * m[1] + y * m[5] + z * m[9]
    result.z = x * m[2] + y * m[6] + z * m[10]


def catmull_rom(
    value1: Vector3, value2: Vector3, value3: Vector3, value4: Vector3, amount: float
) -> Vector3:
    """
    Catmull-Rom spline point between ``value2`` and ``value3``.

    Computes ``0.5 * ((2*v2 + (-v1 + v3)*t) + (2*v1 - 5*v2 + 4*v3 - v4)*t^2
    + (-v1 + 3*v2 - 3*v3 + v4)*t^3)`` per component.
    """
    squared = amount * amount
    cubed = amount * squared

    def component(v1: float, v2: float, v3: float, v4: float) -> float:
        return 0.5 * (
            ((2.0 * v2) + ((-v1 + v3) * amount))
            + (((2.0 * v1) - (5.0 * v2) + (4.0 * v3) - v4) * squared)
            + ((-v1 + (3.0 * v2) - (3.0 * v3) + v4) * cubed)
        )

    return Vector3(
        component(value1.x, value2.x, value3.x, value4.x),
        component(value1.y, value2.y, value3.y, value4.y),
        component(value1.z, value2.z, value3.z, value4.z),
    )


def clamp(value: Vector3, min_value: Vector3, max_value: Vector3) -> Vector3:
    x = value.x
    x = max_value.x if x > max_value.x else x
    x = min_value.x if x < min_value.x else x

    y = value.y
    y = max_value.y if y > max_value.y else y
    y = min_value.y if y < min_value.y else y

    z = value.z
    z = max_value.z if z > max_value.z else z
    z = min_value.z if z < min_value.z else z

    return Vector3(x, y, z)


def hermite(
    value1: Vector3, tangent1: Vector3, value2: Vector3, tangent2: Vector3, amount: float
) -> Vector3:
    """
    Cubic Hermite interpolation.

    Blending weights are ``2t^3 - 3t^2 + 1`` for ``value1``, ``-2t^3 + 3t^2``
    for ``value2``, ``t^3 - 2t^2 + t`` for ``tangent1`` and ``t^3 - t^2`` for
    ``tangent2``.
    """
    squared = amount * amount
    cubed = amount * squared
    part1 = ((2.0 * cubed) - (3.0 * squared)) + 1.0
    part2 = (-2.0 * cubed) + (3.0 * squared)
    part3 = (cubed - (2.0 * squared)) + amount
    part4 = cubed - squared

    x = (value1.x * part1) + (value2.x * part2) + (tangent1.x * part3) + (tangent2.x * part4)
    y = (value1.y * part1) + (value2.y * part2) + (tangent1.y * part3) + (tangent2.y * part4)
    z = (value1.z * part1) + (value2.z * part2) + (tangent1.z * part3) + (tangent2.z * part4)
    return Vector3(x, y, z)


def lerp(start: Vector3, end: Vector3, amount: float) -> Vector3:
    result = Vector3()
    lerp_to_ref(start, end, amount, result)
    return result


def lerp_to_ref(start: Vector3, end: Vector3, amount: float, result: Vector3) -> None:
    result.x = start.x + ((end.x - start.x) * amount)
    result.y = start.y + ((end.y - start.y) * amount)
    result.z = start.z + ((end.z - start.z) * amount)


def dot(left: Vector3, right: Vector3) -> float:
    return left.x * right.x + left.y * right.y + left.z * right.z


def cross(left: Vector3, right: Vector3) -> Vector3:
    result = Vector3()
    cross_to_ref(left, right, result)
    return result


def cross_to_ref(left: Vector3, right: Vector3, result: Vector3) -> None:
    """
    Right-handed formula cross product written into ``result``.

    ``result`` may be ``left`` or ``right``: all inputs are read before any
    component is written.
    """
    x = left.y * right.z - left.z * right.y
    y = left.z * right.x - left.x * right.z
    z = left.x * right.y - left.y * right.x
    result.x = x
    result.y = y
    result.z = z


def normalize(vector: Vector3) -> Vector3:
    result = Vector3()
    normalize_to_ref(vector, result)
    return result


def normalize_to_ref(vector: Vector3, result: Vector3) -> None:
    result.copy_from(vector)
    result.normalize()


def project(
    vector: Vector3,
    world: "Matrix",
    transform: "Matrix",
    viewport: "Viewport",
) -> Vector3:
    """
    Project a world-space point to screen space.

    Args:
        vector: Point to project.
        world: World matrix.
        transform: Combined view-projection matrix.
        viewport: Viewport in pixels.

    Returns:
        Screen-space position, z in [0, 1].
    """
    from rendermath.core.matrix import Matrix

    cw = viewport.width
    ch = viewport.height
    cx = viewport.x
    cy = viewport.y

    viewport_matrix = Matrix.from_values(
        cw / 2.0, 0.0, 0.0, 0.0,
        0.0, -ch / 2.0, 0.0, 0.0,
        0.0, 0.0, 0.5, 0.0,
        cx + cw / 2.0, ch / 2.0 + cy, 0.5, 1.0,
    )

    matrix = world.multiply(transform).multiply(viewport_matrix)
    return transform_coordinates(vector, matrix)


def unproject_from_transform(
    source: Vector3,
    viewport_width: float,
    viewport_height: float,
    world: "Matrix",
    transform: "Matrix",
) -> Vector3:
    """
    Unproject a screen-space point with a precombined view-projection matrix.

    Args:
        source: Screen position; z is used as a clip-space depth as given.
        viewport_width: Viewport width in pixels.
        viewport_height: Viewport height in pixels.
        world: World matrix.
        transform: Combined view-projection matrix.

    Returns:
        Unprojected position.
    """
    matrix = world.multiply(transform)
    matrix.invert()
    sx = source.x / viewport_width * 2 - 1
    sy = -(source.y / viewport_height * 2 - 1)
    vector = transform_coordinates(Vector3(sx, sy, source.z), matrix)
    _rescale_unprojected(sx, sy, source.z, matrix, vector)
    return vector


def unproject(
    source: Vector3,
    viewport_width: float,
    viewport_height: float,
    world: "Matrix",
    view: "Matrix",
    projection: "Matrix",
) -> Vector3:
    result = Vector3.zero()
    unproject_to_ref(source, viewport_width, viewport_height, world, view, projection, result)
    return result


def unproject_to_ref(
    source: Vector3,
    viewport_width: float,
    viewport_height: float,
    world: "Matrix",
    view: "Matrix",
    projection: "Matrix",
    result: Vector3,
) -> None:
    unproject_floats_to_ref(
        source.x,
        source.y,
        source.z,
        viewport_width,
        viewport_height,
        world,
        view,
        projection,
        result,
    )


def unproject_floats_to_ref(
    source_x: float,
    source_y: float,
    source_z: float,
    viewport_width: float,
    viewport_height: float,
    world: "Matrix",
    view: "Matrix",
    projection: "Matrix",
    result: Vector3,
) -> None:
    """
    Unproject screen coordinates through world, view and projection into ``result``.

    Screen x/y map to [-1, 1] with y flipped and z maps to ``2z - 1``. The
    transformed point is rescaled by ``1/w`` only when ``w`` is within
    epsilon of 1.
    """
    from rendermath.core.matrix import Matrix

    matrix = Matrix()
    world.multiply_to_ref(view, matrix)
    matrix.multiply_to_ref(projection, matrix)
    matrix.invert()

    sx = source_x / viewport_width * 2 - 1
    sy = -(source_y / viewport_height * 2 - 1)
    sz = 2 * source_z - 1.0
    transform_coordinates_from_floats_to_ref(sx, sy, sz, matrix, result)
    _rescale_unprojected(sx, sy, sz, matrix, result)


def _rescale_unprojected(
    sx: float, sy: float, sz: float, matrix: "Matrix", vector: Vector3
) -> None:
    m = matrix.m.tolist()
    num = sx * m[3] + sy * m[7] + sz * m[11] + m[15]
    if within_epsilon(num, 1.0):
        vector.scale_in_place(1.0 / num)


def minimize(left: Vector3, right: Vector3) -> Vector3:
    return left.clone().minimize_in_place(right)


def maximize(left: Vector3, right: Vector3) -> Vector3:
    return left.clone().maximize_in_place(right)


def distance(value1: Vector3, value2: Vector3) -> float:
    return math.sqrt(distance_squared(value1, value2))


def distance_squared(value1: Vector3, value2: Vector3) -> float:
    x = value1.x - value2.x
    y = value1.y - value2.y
    z = value1.z - value2.z
    return (x * x) + (y * y) + (z * z)


def center(value1: Vector3, value2: Vector3) -> Vector3:
    return value1.add(value2).scale_in_place(0.5)


def rotation_from_axis(axis1: Vector3, axis2: Vector3, axis3: Vector3) -> Vector3:
    """
    Euler angles (YZX) of the rotation that maps the unit axes onto the given ones.

    The three axes must be orthogonal; this is not checked.
    """
    rotation = Vector3.zero()
    rotation_from_axis_to_ref(axis1, axis2, axis3, rotation)
    return rotation


def rotation_from_axis_to_ref(
    axis1: Vector3, axis2: Vector3, axis3: Vector3, ref: Vector3
) -> None:
    from rendermath.core.quaternion import Quaternion, rotation_quaternion_from_axis_to_ref

    quat = Quaternion()
    rotation_quaternion_from_axis_to_ref(axis1, axis2, axis3, quat)
    quat.to_euler_angles_to_ref(ref)
