"""
Quaternion rotations.

Provides the Quaternion value type and its conversions to and from rotation
matrices, Euler angles and axis-angle pairs, plus spherical interpolation.

Conventions:
    - Components are stored as (x, y, z, w); identity is (0, 0, 0, 1).
    - Euler angles follow yaw (Y), pitch (X), roll (Z).
    - Normalization is never enforced; callers renormalize after repeated
      composition or interpolation.
"""

from dataclasses import dataclass
import math
from typing import TYPE_CHECKING, MutableSequence, Optional, Sequence

from rendermath.core.scalar import hash_combine
from rendermath.core.vector3 import Vector3

if TYPE_CHECKING:
    from rendermath.core.matrix import Matrix

# |qy*qz - qx*qw| above this is treated as gimbal lock in Euler extraction
GIMBAL_LOCK_LIMIT = 0.4999999

# Dot product above which slerp falls back to linear weights
SLERP_LINEAR_THRESHOLD = 0.999999


@dataclass
class Quaternion:
    """
    Mutable (x, y, z, w) quaternion.

    Attributes:
        x: X component of the vector part.
        y: Y component of the vector part.
        z: Z component of the vector part.
        w: Scalar part.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def __str__(self) -> str:
        return f"{{X: {self.x} Y:{self.y} Z:{self.z} W:{self.w}}}"

    def get_class_name(self) -> str:
        return "Quaternion"

    def get_hash_code(self) -> int:
        return hash_combine((self.x, self.y, self.z, self.w))

    def as_array(self) -> list[float]:
        return [self.x, self.y, self.z, self.w]

    def to_array(self, array: MutableSequence[float], index: int = 0) -> "Quaternion":
        array[index] = self.x
        array[index + 1] = self.y
        array[index + 2] = self.z
        array[index + 3] = self.w
        return self

    def equals(self, other: Optional["Quaternion"]) -> bool:
        return (
            other is not None
            and self.x == other.x
            and self.y == other.y
            and self.z == other.z
            and self.w == other.w
        )

    def clone(self) -> "Quaternion":
        return Quaternion(self.x, self.y, self.z, self.w)

    def copy_from(self, other: "Quaternion") -> "Quaternion":
        self.x = other.x
        self.y = other.y
        self.z = other.z
        self.w = other.w
        return self

    def copy_from_floats(self, x: float, y: float, z: float, w: float) -> "Quaternion":
        self.x = x
        self.y = y
        self.z = z
        self.w = w
        return self

    def set(self, x: float, y: float, z: float, w: float) -> "Quaternion":
        return self.copy_from_floats(x, y, z, w)

    # Arithmetic

    def add(self, other: "Quaternion") -> "Quaternion":
        return Quaternion(
            self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w
        )

    def add_in_place(self, other: "Quaternion") -> "Quaternion":
        self.x += other.x
        self.y += other.y
        self.z += other.z
        self.w += other.w
        return self

    def subtract(self, other: "Quaternion") -> "Quaternion":
        return Quaternion(
            self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w
        )

    def scale(self, value: float) -> "Quaternion":
        return Quaternion(self.x * value, self.y * value, self.z * value, self.w * value)

    def scale_to_ref(self, scale: float, result: "Quaternion") -> "Quaternion":
        result.x = self.x * scale
        result.y = self.y * scale
        result.z = self.z * scale
        result.w = self.w * scale
        return self

    def scale_in_place(self, value: float) -> "Quaternion":
        self.x *= value
        self.y *= value
        self.z *= value
        self.w *= value
        return self

    def scale_and_add_to_ref(self, scale: float, result: "Quaternion") -> "Quaternion":
        result.x += self.x * scale
        result.y += self.y * scale
        result.z += self.z * scale
        result.w += self.w * scale
        return self

    def multiply(self, q1: "Quaternion") -> "Quaternion":
        result = Quaternion(0.0, 0.0, 0.0, 1.0)
        self.multiply_to_ref(q1, result)
        return result

    def multiply_to_ref(self, q1: "Quaternion", result: "Quaternion") -> "Quaternion":
        """
        Hamilton product ``self * q1`` written into ``result``.

        ``result`` may alias either operand.

        Returns:
            This quaternion.
        """
        x = self.x * q1.w + self.y * q1.z - self.z * q1.y + self.w * q1.x
        y = -self.x * q1.z + self.y * q1.w + self.z * q1.x + self.w * q1.y
        z = self.x * q1.y - self.y * q1.x + self.z * q1.w + self.w * q1.z
        w = -self.x * q1.x - self.y * q1.y - self.z * q1.z + self.w * q1.w
        result.copy_from_floats(x, y, z, w)
        return self

    def multiply_in_place(self, q1: "Quaternion") -> "Quaternion":
        self.multiply_to_ref(q1, self)
        return self

    def conjugate_to_ref(self, ref: "Quaternion") -> "Quaternion":
        ref.copy_from_floats(-self.x, -self.y, -self.z, self.w)
        return self

    def conjugate_in_place(self) -> "Quaternion":
        self.x *= -1
        self.y *= -1
        self.z *= -1
        return self

    def conjugate(self) -> "Quaternion":
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    def length(self) -> float:
        return math.sqrt(
            self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w
        )

    def normalize(self) -> "Quaternion":
        """Normalize in place. A zero quaternion yields non-finite components."""
        length = self.length()
        if length == 0.0:
            self.scale_in_place(math.nan)
            return self
        self.scale_in_place(1.0 / length)
        return self

    # Conversions

    def to_euler_angles(self, order: str = "YZX") -> Vector3:
        """
        Extract Euler angles.

        Args:
            order: Rotation order; only "YZX" is supported.

        Returns:
            Vector3 with pitch in x, yaw in y and roll in z (radians).
        """
        result = Vector3.zero()
        self.to_euler_angles_to_ref(result, order)
        return result

    def to_euler_angles_to_ref(self, result: Vector3, order: str = "YZX") -> "Quaternion":
        """
        Extract Euler angles into ``result``.

        Near gimbal lock, where ``qy*qz - qx*qw`` passes the 0.4999999 guard
        band, pitch snaps to +/- pi/2, roll to 0, and yaw becomes
        ``2*atan2(qy, qw)``.

        Args:
            result: Vector3 receiving pitch (x), yaw (y) and roll (z).
            order: Rotation order; only "YZX" is supported.

        Returns:
            This quaternion.

        Raises:
            ValueError: If ``order`` is not "YZX".
        """
        if order != "YZX":
            raise ValueError(f"Unsupported Euler order: {order}")

        qz = self.z
        qx = self.x
        qy = self.y
        qw = self.w

        sqw = qw * qw
        sqz = qz * qz
        sqx = qx * qx
        sqy = qy * qy

        z_axis_y = qy * qz - qx * qw

        if z_axis_y < -GIMBAL_LOCK_LIMIT:
            result.y = 2 * math.atan2(qy, qw)
            result.x = math.pi / 2
            result.z = 0.0
        elif z_axis_y > GIMBAL_LOCK_LIMIT:
            result.y = 2 * math.atan2(qy, qw)
            result.x = -math.pi / 2
            result.z = 0.0
        else:
            result.z = math.atan2(2.0 * (qx * qy + qz * qw), (-sqz - sqx + sqy + sqw))
            result.x = math.asin(max(-1.0, min(1.0, -2.0 * (qz * qy - qx * qw))))
            result.y = math.atan2(2.0 * (qz * qx + qy * qw), (sqz - sqx - sqy + sqw))

        return self

    def to_rotation_matrix(self, result: "Matrix") -> "Quaternion":
        """
        Write the rotation matrix of this quaternion into ``result``.

        Returns:
            This quaternion.
        """
        from rendermath.core.matrix import from_quaternion_to_ref

        from_quaternion_to_ref(self, result)
        return self

    def from_rotation_matrix(self, matrix: "Matrix") -> "Quaternion":
        """Set this quaternion from the rotation part of ``matrix``."""
        from_rotation_matrix_to_ref(matrix, self)
        return self

    # Constructors

    @classmethod
    def zero(cls) -> "Quaternion":
        return cls(0.0, 0.0, 0.0, 0.0)

    @classmethod
    def identity(cls) -> "Quaternion":
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def from_array(cls, array: Sequence[float], offset: int = 0) -> "Quaternion":
        return cls(array[offset], array[offset + 1], array[offset + 2], array[offset + 3])


def from_rotation_matrix(matrix: "Matrix") -> Quaternion:
    result = Quaternion()
    from_rotation_matrix_to_ref(matrix, result)
    return result


def from_rotation_matrix_to_ref(matrix: "Matrix", result: Quaternion) -> None:
    """
    Extract the rotation of ``matrix`` as a quaternion.

    Branches on a positive trace, otherwise on the largest diagonal element,
    so the square root argument stays well away from zero.

    Args:
        matrix: Matrix whose upper 3x3 is a pure rotation.
        result: Quaternion receiving the rotation.
    """
    data = matrix.m.tolist()
    m11, m12, m13 = data[0], data[4], data[8]
    m21, m22, m23 = data[1], data[5], data[9]
    m31, m32, m33 = data[2], data[6], data[10]
    trace = m11 + m22 + m33

    if trace > 0:
        s = 0.5 / math.sqrt(trace + 1.0)
        result.w = 0.25 / s
        result.x = (m32 - m23) * s
        result.y = (m13 - m31) * s
        result.z = (m21 - m12) * s
    elif m11 > m22 and m11 > m33:
        s = 2.0 * math.sqrt(1.0 + m11 - m22 - m33)
        result.w = (m32 - m23) / s
        result.x = 0.25 * s
        result.y = (m12 + m21) / s
        result.z = (m13 + m31) / s
    elif m22 > m33:
        s = 2.0 * math.sqrt(1.0 + m22 - m11 - m33)
        result.w = (m13 - m31) / s
        result.x = (m12 + m21) / s
        result.y = 0.25 * s
        result.z = (m23 + m32) / s
    else:
        s = 2.0 * math.sqrt(1.0 + m33 - m11 - m22)
        result.w = (m21 - m12) / s
        result.x = (m13 + m31) / s
        result.y = (m23 + m32) / s
        result.z = 0.25 * s


def dot(left: Quaternion, right: Quaternion) -> float:
    return left.x * right.x + left.y * right.y + left.z * right.z + left.w * right.w


def are_close(quat0: Quaternion, quat1: Quaternion) -> bool:
    """True when both quaternions lie in the same hemisphere (dot >= 0)."""
    return dot(quat0, quat1) >= 0


def inverse(q: Quaternion) -> Quaternion:
    """Conjugate of ``q``, the inverse for a unit quaternion."""
    return Quaternion(-q.x, -q.y, -q.z, q.w)


def is_identity(quaternion: Optional[Quaternion]) -> bool:
    return (
        quaternion is not None
        and quaternion.x == 0
        and quaternion.y == 0
        and quaternion.z == 0
        and quaternion.w == 1
    )


def rotation_axis(axis: Vector3, angle: float) -> Quaternion:
    return rotation_axis_to_ref(axis, angle, Quaternion())


def rotation_axis_to_ref(axis: Vector3, angle: float, result: Quaternion) -> Quaternion:
    """
    Rotation of ``angle`` radians around ``axis``.

    ``axis`` is normalized in place.

    Returns:
        ``result``.
    """
    sin = math.sin(angle / 2)
    axis.normalize()
    result.w = math.cos(angle / 2)
    result.x = axis.x * sin
    result.y = axis.y * sin
    result.z = axis.z * sin
    return result


def rotation_yaw_pitch_roll(yaw: float, pitch: float, roll: float) -> Quaternion:
    result = Quaternion()
    rotation_yaw_pitch_roll_to_ref(yaw, pitch, roll, result)
    return result


def rotation_yaw_pitch_roll_to_ref(
    yaw: float, pitch: float, roll: float, result: Quaternion
) -> None:
    """
    Quaternion from yaw (Y), pitch (X) and roll (Z) in radians.

    Built directly from products of the half-angle sines and cosines.
    """
    half_roll = roll * 0.5
    half_pitch = pitch * 0.5
    half_yaw = yaw * 0.5

    sin_roll = math.sin(half_roll)
    cos_roll = math.cos(half_roll)
    sin_pitch = math.sin(half_pitch)
    cos_pitch = math.cos(half_pitch)
    sin_yaw = math.sin(half_yaw)
    cos_yaw = math.cos(half_yaw)

    result.x = (cos_yaw * sin_pitch * cos_roll) + (sin_yaw * cos_pitch * sin_roll)
    result.y = (sin_yaw * cos_pitch * cos_roll) - (cos_yaw * sin_pitch * sin_roll)
    result.z = (cos_yaw * cos_pitch * sin_roll) - (sin_yaw * sin_pitch * cos_roll)
    result.w = (cos_yaw * cos_pitch * cos_roll) + (sin_yaw * sin_pitch * sin_roll)


def rotation_alpha_beta_gamma(alpha: float, beta: float, gamma: float) -> Quaternion:
    result = Quaternion()
    rotation_alpha_beta_gamma_to_ref(alpha, beta, gamma, result)
    return result


def rotation_alpha_beta_gamma_to_ref(
    alpha: float, beta: float, gamma: float, result: Quaternion
) -> None:
    """Quaternion from Euler angles in z-x-z order."""
    half_gamma_plus_alpha = (gamma + alpha) * 0.5
    half_gamma_minus_alpha = (gamma - alpha) * 0.5
    half_beta = beta * 0.5

    result.x = math.cos(half_gamma_minus_alpha) * math.sin(half_beta)
    result.y = math.sin(half_gamma_minus_alpha) * math.sin(half_beta)
    result.z = math.sin(half_gamma_plus_alpha) * math.cos(half_beta)
    result.w = math.cos(half_gamma_plus_alpha) * math.cos(half_beta)


def rotation_quaternion_from_axis(
    axis1: Vector3, axis2: Vector3, axis3: Vector3
) -> Quaternion:
    quat = Quaternion(0.0, 0.0, 0.0, 0.0)
    rotation_quaternion_from_axis_to_ref(axis1, axis2, axis3, quat)
    return quat


def rotation_quaternion_from_axis_to_ref(
    axis1: Vector3, axis2: Vector3, axis3: Vector3, ref: Quaternion
) -> None:
    """
    Rotation that maps the unit X, Y, Z axes onto ``axis1``, ``axis2``, ``axis3``.

    The axes are normalized in place and must be orthogonal.
    """
    from rendermath.core.matrix import Matrix, from_xyz_axes_to_ref

    rot_mat = Matrix()
    from_xyz_axes_to_ref(axis1.normalize(), axis2.normalize(), axis3.normalize(), rot_mat)
    from_rotation_matrix_to_ref(rot_mat, ref)


def slerp(left: Quaternion, right: Quaternion, amount: float) -> Quaternion:
    result = Quaternion.identity()
    slerp_to_ref(left, right, amount, result)
    return result


def slerp_to_ref(
    left: Quaternion, right: Quaternion, amount: float, result: Quaternion
) -> None:
    """
    Spherical interpolation along the shortest arc.

    A negative dot product flips the path. Above a dot of 0.999999 the
    weights become linear to avoid dividing by a vanishing ``sin``.

    Args:
        left: Start rotation.
        right: End rotation.
        amount: Interpolation factor in [0, 1].
        result: Quaternion receiving the interpolated rotation.
    """
    cos_half = dot(left, right)
    flip = False

    if cos_half < 0:
        flip = True
        cos_half = -cos_half

    if cos_half > SLERP_LINEAR_THRESHOLD:
        weight_left = 1 - amount
        weight_right = -amount if flip else amount
    else:
        half_angle = math.acos(cos_half)
        inv_sin = 1.0 / math.sin(half_angle)
        weight_left = math.sin((1.0 - amount) * half_angle) * inv_sin
        weight_right = math.sin(amount * half_angle) * inv_sin
        if flip:
            weight_right = -weight_right

    result.x = (weight_left * left.x) + (weight_right * right.x)
    result.y = (weight_left * left.y) + (weight_right * right.y)
    result.z = (weight_left * left.z) + (weight_right * right.z)
    result.w = (weight_left * left.w) + (weight_right * right.w)


def hermite(
    value1: Quaternion,
    tangent1: Quaternion,
    value2: Quaternion,
    tangent2: Quaternion,
    amount: float,
) -> Quaternion:
    """Component-wise cubic Hermite interpolation with the Vector3 blending weights."""
    squared = amount * amount
    cubed = amount * squared
    part1 = ((2.0 * cubed) - (3.0 * squared)) + 1.0
    part2 = (-2.0 * cubed) + (3.0 * squared)
    part3 = (cubed - (2.0 * squared)) + amount
    part4 = cubed - squared

    def blend(v1: float, v2: float, t1: float, t2: float) -> float:
        return (((v1 * part1) + (v2 * part2)) + (t1 * part3)) + (t2 * part4)

    return Quaternion(
        blend(value1.x, value2.x, tangent1.x, tangent2.x),
        blend(value1.y, value2.y, tangent1.y, tangent2.y),
        blend(value1.z, value2.z, tangent1.z, tangent2.z),
        blend(value1.w, value2.w, tangent1.w, tangent2.w),
    )
