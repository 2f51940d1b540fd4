"""
4x4 transformation matrix.

Storage:
    16 floats in a flat numpy array ``m``. Indices 0-3 hold the first row,
    4-7 the second, and so on; translation lives at ``m[12]``, ``m[13]``,
    ``m[14]``. The dtype comes from the active numerics configuration
    (float32 by default, matching GPU uniform buffers).

Change tracking:
    Every mutation calls ``_mark_as_updated()``, which draws a new value for
    ``update_flag`` from a process-wide monotonically increasing counter and
    invalidates the cached ``is_identity`` result. Consumers compare the
    flag they last saw against the current one to detect changes cheaply.

Aliasing:
    Routines read every input component into Python floats before writing
    the result, so ``result`` may be the same object as any operand.
"""

import itertools
import math
from typing import TYPE_CHECKING, Any, MutableSequence, Optional, Sequence

import numpy as np
from numpy.typing import NDArray

from rendermath.config import runtime
from rendermath.core import vector3 as vec3
from rendermath.core.errors import SingularMatrixError, ZeroScaleError
from rendermath.core import quaternion as quaternions
from rendermath.core.quaternion import Quaternion, from_rotation_matrix_to_ref, slerp_to_ref
from rendermath.core.scalar import hash_combine
from rendermath.core.vector3 import Vector3
from rendermath.core.vector4 import Vector4
from rendermath.logging.setup import get_logger

if TYPE_CHECKING:
    from rendermath.geometry.plane import Plane

logger = get_logger(__name__)

_update_flag_seed = itertools.count()

_IDENTITY_VALUES = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)

# Cells that must be zero for an identity matrix (m[10] is checked separately)
_OFF_DIAGONAL = (1, 2, 3, 4, 6, 7, 8, 9, 11, 12, 13, 14)


class Matrix:
    """
    Mutable 4x4 matrix.

    Attributes:
        m: Flat array of 16 components.
        update_flag: Counter value drawn at the last mutation.
    """

    def __init__(self, dtype: Optional[str] = None) -> None:
        self.m: NDArray[Any] = np.zeros(16, dtype=dtype or runtime.matrix_dtype())
        self.update_flag = 0
        self._is_identity = False
        self._is_identity_texture = False
        self._is_identity_dirty = True
        self._mark_as_updated()

    def _mark_as_updated(self) -> None:
        self.update_flag = next(_update_flag_seed)
        self._is_identity_dirty = True

    def _set_values(self, values: Sequence[float]) -> "Matrix":
        self.m[:] = values
        self._mark_as_updated()
        return self

    def __repr__(self) -> str:
        return f"Matrix({self.m.tolist()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    # Properties

    def is_identity(self, consider_as_texture_matrix: bool = False) -> bool:
        """
        Check whether this is the identity matrix.

        The answer is cached until the next mutation.

        Args:
            consider_as_texture_matrix: Ignore ``m[10]`` (3x2 texture matrices).

        Returns:
            True for an exact identity.
        """
        if self._is_identity_dirty:
            self._is_identity_dirty = False
            m = self.m.tolist()
            core = (
                m[0] == 1.0
                and m[5] == 1.0
                and m[15] == 1.0
                and all(m[i] == 0.0 for i in _OFF_DIAGONAL)
            )
            self._is_identity_texture = core
            self._is_identity = core and m[10] == 1.0

        if consider_as_texture_matrix:
            return self._is_identity_texture
        return self._is_identity

    def determinant(self) -> float:
        m = self.m.tolist()
        temp1 = (m[10] * m[15]) - (m[11] * m[14])
        temp2 = (m[9] * m[15]) - (m[11] * m[13])
        temp3 = (m[9] * m[14]) - (m[10] * m[13])
        temp4 = (m[8] * m[15]) - (m[11] * m[12])
        temp5 = (m[8] * m[14]) - (m[10] * m[12])
        temp6 = (m[8] * m[13]) - (m[9] * m[12])

        return (
            m[0] * (m[5] * temp1 - m[6] * temp2 + m[7] * temp3)
            - m[1] * (m[4] * temp1 - m[6] * temp4 + m[7] * temp5)
            + m[2] * (m[4] * temp2 - m[5] * temp4 + m[7] * temp6)
            - m[3] * (m[4] * temp3 - m[5] * temp5 + m[6] * temp6)
        )

    # Export

    def to_array(self) -> NDArray[Any]:
        """Return the backing array itself (no copy)."""
        return self.m

    def as_array(self) -> NDArray[Any]:
        return self.to_array()

    def copy_to_array(self, array: MutableSequence[float], offset: int = 0) -> "Matrix":
        array[offset : offset + 16] = self.m.tolist()
        return self

    # Mutation

    def invert(self) -> "Matrix":
        """Invert in place. See ``invert_to_ref`` for singular input behavior."""
        self.invert_to_ref(self)
        return self

    def reset(self) -> "Matrix":
        """Set every component to zero."""
        return self._set_values(_ZEROS)

    def add(self, other: "Matrix") -> "Matrix":
        result = Matrix()
        self.add_to_ref(other, result)
        return result

    def add_to_ref(self, other: "Matrix", result: "Matrix") -> "Matrix":
        result._set_values(np.add(self.m, other.m, dtype=np.float64))
        return self

    def add_to_self(self, other: "Matrix") -> "Matrix":
        return self._set_values(np.add(self.m, other.m, dtype=np.float64))

    def invert_to_ref(self, other: "Matrix") -> "Matrix":
        """
        Write the inverse of this matrix into ``other``.

        Uses cofactor expansion with a single reciprocal of the determinant.
        A singular matrix is not guarded against: the reciprocal becomes
        infinite and the result fills with inf/nan.

        Args:
            other: Matrix receiving the inverse; may be this matrix.

        Returns:
            This matrix.

        Raises:
            SingularMatrixError: In strict mode, when ``|det|`` is at or below
                the configured singular tolerance.
        """
        l1, l2, l3, l4, l5, l6, l7, l8, l9, l10, l11, l12, l13, l14, l15, l16 = (
            self.m.tolist()
        )

        l17 = (l11 * l16) - (l12 * l15)
        l18 = (l10 * l16) - (l12 * l14)
        l19 = (l10 * l15) - (l11 * l14)
        l20 = (l9 * l16) - (l12 * l13)
        l21 = (l9 * l15) - (l11 * l13)
        l22 = (l9 * l14) - (l10 * l13)
        l23 = ((l6 * l17) - (l7 * l18)) + (l8 * l19)
        l24 = -(((l5 * l17) - (l7 * l20)) + (l8 * l21))
        l25 = ((l5 * l18) - (l6 * l20)) + (l8 * l22)
        l26 = -(((l5 * l19) - (l6 * l21)) + (l7 * l22))

        det = (l1 * l23) + (l2 * l24) + (l3 * l25) + (l4 * l26)
        if runtime.is_strict() and abs(det) <= runtime.singular_tolerance():
            raise SingularMatrixError(det)
        if det == 0.0:
            logger.debug("singular_matrix_inverted", determinant=det)
            l27 = math.copysign(math.inf, det)
        else:
            l27 = 1.0 / det

        l28 = (l7 * l16) - (l8 * l15)
        l29 = (l6 * l16) - (l8 * l14)
        l30 = (l6 * l15) - (l7 * l14)
        l31 = (l5 * l16) - (l8 * l13)
        l32 = (l5 * l15) - (l7 * l13)
        l33 = (l5 * l14) - (l6 * l13)
        l34 = (l7 * l12) - (l8 * l11)
        l35 = (l6 * l12) - (l8 * l10)
        l36 = (l6 * l11) - (l7 * l10)
        l37 = (l5 * l12) - (l8 * l9)
        l38 = (l5 * l11) - (l7 * l9)
        l39 = (l5 * l10) - (l6 * l9)

        other._set_values(
            (
                l23 * l27,
                -(((l2 * l17) - (l3 * l18)) + (l4 * l19)) * l27,
                (((l2 * l28) - (l3 * l29)) + (l4 * l30)) * l27,
                -(((l2 * l34) - (l3 * l35)) + (l4 * l36)) * l27,
                l24 * l27,
                (((l1 * l17) - (l3 * l20)) + (l4 * l21)) * l27,
                -(((l1 * l28) - (l3 * l31)) + (l4 * l32)) * l27,
                (((l1 * l34) - (l3 * l37)) + (l4 * l38)) * l27,
                l25 * l27,
                -(((l1 * l18) - (l2 * l20)) + (l4 * l22)) * l27,
                (((l1 * l29) - (l2 * l31)) + (l4 * l33)) * l27,
                -(((l1 * l35) - (l2 * l37)) + (l4 * l39)) * l27,
                l26 * l27,
                (((l1 * l19) - (l2 * l21)) + (l3 * l22)) * l27,
                -(((l1 * l30) - (l2 * l32)) + (l3 * l33)) * l27,
                (((l1 * l36) - (l2 * l38)) + (l3 * l39)) * l27,
            )
        )
        return self

    def set_translation_from_floats(self, x: float, y: float, z: float) -> "Matrix":
        self.m[12:15] = (x, y, z)
        self._mark_as_updated()
        return self

    def set_translation(self, vector: Vector3) -> "Matrix":
        return self.set_translation_from_floats(vector.x, vector.y, vector.z)

    def get_translation(self) -> Vector3:
        m = self.m.tolist()
        return Vector3(m[12], m[13], m[14])

    def get_translation_to_ref(self, result: Vector3) -> "Matrix":
        m = self.m.tolist()
        result.copy_from_floats(m[12], m[13], m[14])
        return self

    def remove_rotation_and_scaling(self) -> "Matrix":
        """Reset the upper 3x3 to identity, keeping translation and row 4."""
        self.set_row_from_floats(0, 1.0, 0.0, 0.0, 0.0)
        self.set_row_from_floats(1, 0.0, 1.0, 0.0, 0.0)
        self.set_row_from_floats(2, 0.0, 0.0, 1.0, 0.0)
        return self

    def multiply(self, other: "Matrix") -> "Matrix":
        result = Matrix()
        self.multiply_to_ref(other, result)
        return result

    def copy_from(self, other: "Matrix") -> "Matrix":
        return self._set_values(other.m)

    def multiply_to_ref(self, other: "Matrix", result: "Matrix") -> "Matrix":
        """
        Write ``self * other`` into ``result``.

        ``result`` may be ``self`` or ``other``.

        Returns:
            This matrix.
        """
        self.multiply_to_array(other, result.m, 0)
        result._mark_as_updated()
        return self

    def multiply_to_array(
        self, other: "Matrix", result: MutableSequence[float], offset: int = 0
    ) -> "Matrix":
        """
        Write the 16 components of ``self * other`` into ``result`` at ``offset``.

        ``result[r*4 + c]`` receives the sum over k of
        ``self.m[r*4 + k] * other.m[k*4 + c]``. The product is computed in
        double precision before being stored.
        """
        product = np.matmul(
            self.m.reshape(4, 4), other.m.reshape(4, 4), dtype=np.float64
        )
        result[offset : offset + 16] = product.ravel().tolist()
        return self

    def equals(self, value: Optional["Matrix"]) -> bool:
        return value is not None and self.m.tolist() == value.m.tolist()

    def clone(self) -> "Matrix":
        return from_values(*self.m.tolist())

    def get_class_name(self) -> str:
        return "Matrix"

    def get_hash_code(self) -> int:
        return hash_combine(self.m.tolist())

    def decompose(
        self,
        scale: Optional[Vector3] = None,
        rotation: Optional[Quaternion] = None,
        translation: Optional[Vector3] = None,
    ) -> bool:
        """
        Split this matrix into scale, rotation and translation.

        Scale is the length of each basis row. When the determinant is zero
        or negative, ``scale.y`` is negated so mirrored transforms keep
        positive x and z scales.

        Args:
            scale: Receives the scale, if given.
            rotation: Receives the rotation, if given.
            translation: Receives the translation, if given.

        Returns:
            True on success. False when any scale axis is exactly zero; in
            that case ``rotation`` is reset to identity and ``scale`` and
            ``translation`` are left untouched.

        Raises:
            ZeroScaleError: In strict mode, instead of returning False.
        """
        m = self.m.tolist()

        sx = math.sqrt(m[0] * m[0] + m[1] * m[1] + m[2] * m[2])
        sy = math.sqrt(m[4] * m[4] + m[5] * m[5] + m[6] * m[6])
        sz = math.sqrt(m[8] * m[8] + m[9] * m[9] + m[10] * m[10])

        if self.determinant() <= 0:
            sy *= -1

        if sx == 0 or sy == 0 or sz == 0:
            if rotation is not None:
                rotation.copy_from_floats(0.0, 0.0, 0.0, 1.0)
            logger.debug("decompose_zero_scale", scale=(sx, sy, sz))
            if runtime.is_strict():
                raise ZeroScaleError((sx, sy, sz))
            return False

        if translation is not None:
            translation.copy_from_floats(m[12], m[13], m[14])

        if scale is not None:
            scale.copy_from_floats(sx, sy, sz)

        if rotation is not None:
            rotation_matrix = from_values(
                m[0] / sx, m[1] / sx, m[2] / sx, 0.0,
                m[4] / sy, m[5] / sy, m[6] / sy, 0.0,
                m[8] / sz, m[9] / sz, m[10] / sz, 0.0,
                0.0, 0.0, 0.0, 1.0,
            )
            from_rotation_matrix_to_ref(rotation_matrix, rotation)

        return True

    def get_row(self, index: int) -> Optional[Vector4]:
        """Return row ``index`` as a Vector4, or None outside 0..3."""
        if index < 0 or index > 3:
            return None
        i = index * 4
        m = self.m.tolist()
        return Vector4(m[i], m[i + 1], m[i + 2], m[i + 3])

    def set_row(self, index: int, row: Vector4) -> "Matrix":
        """Overwrite row ``index``; out-of-range indices are ignored."""
        return self.set_row_from_floats(index, row.x, row.y, row.z, row.w)

    def set_row_from_floats(
        self, index: int, x: float, y: float, z: float, w: float
    ) -> "Matrix":
        if index < 0 or index > 3:
            return self
        i = index * 4
        self.m[i : i + 4] = (x, y, z, w)
        self._mark_as_updated()
        return self

    def transpose(self) -> "Matrix":
        """Return a new transposed matrix."""
        return transpose(self)

    def transpose_to_ref(self, result: "Matrix") -> "Matrix":
        transpose_to_ref(self, result)
        return self

    def scale(self, scale: float) -> "Matrix":
        result = Matrix()
        self.scale_to_ref(scale, result)
        return result

    def scale_to_ref(self, scale: float, result: "Matrix") -> "Matrix":
        result._set_values(np.multiply(self.m, scale, dtype=np.float64))
        return self

    def scale_and_add_to_ref(self, scale: float, result: "Matrix") -> "Matrix":
        result._set_values(result.m + np.multiply(self.m, scale, dtype=np.float64))
        return self

    def to_normal_matrix(self, ref: "Matrix") -> None:
        """
        Write the inverse-transpose of the upper 3x3 into ``ref``.

        The fourth row and column of ``ref`` are set from the identity.
        """
        self.invert_to_ref(ref)
        transpose_to_ref(ref, ref)
        m = ref.m.tolist()
        ref._set_values(
            (
                m[0], m[1], m[2], 0.0,
                m[4], m[5], m[6], 0.0,
                m[8], m[9], m[10], 0.0,
                0.0, 0.0, 0.0, 1.0,
            )
        )

    def get_rotation_matrix(self) -> "Matrix":
        result = Matrix.identity()
        self.get_rotation_matrix_to_ref(result)
        return result

    def get_rotation_matrix_to_ref(self, result: "Matrix") -> "Matrix":
        """
        Write the pure rotation of this matrix into ``result``.

        Uses the same sign convention as ``decompose``; a zero scale axis
        yields the identity.
        """
        m = self.m.tolist()

        sx = math.sqrt(m[0] * m[0] + m[1] * m[1] + m[2] * m[2])
        sy = math.sqrt(m[4] * m[4] + m[5] * m[5] + m[6] * m[6])
        sz = math.sqrt(m[8] * m[8] + m[9] * m[9] + m[10] * m[10])

        if self.determinant() <= 0:
            sy *= -1

        if sx == 0 or sy == 0 or sz == 0:
            identity_to_ref(result)
        else:
            result._set_values(
                (
                    m[0] / sx, m[1] / sx, m[2] / sx, 0.0,
                    m[4] / sy, m[5] / sy, m[6] / sy, 0.0,
                    m[8] / sz, m[9] / sz, m[10] / sz, 0.0,
                    0.0, 0.0, 0.0, 1.0,
                )
            )
        return self

    # Constructors

    @classmethod
    def identity(cls) -> "Matrix":
        return from_values(*_IDENTITY_VALUES)

    @classmethod
    def zero(cls) -> "Matrix":
        return cls()

    @classmethod
    def from_values(cls, *values: float) -> "Matrix":
        return from_values(*values)

    @classmethod
    def from_array(cls, array: Sequence[float], offset: int = 0) -> "Matrix":
        result = cls()
        from_array_to_ref(array, offset, result)
        return result

    @classmethod
    def identity_read_only(cls) -> "Matrix":
        """
        Shared identity instance.

        Its storage is flagged read-only; writing to it raises ValueError.
        """
        return _IDENTITY_READ_ONLY


_ZEROS = (0.0,) * 16


def from_values(*values: float) -> Matrix:
    """
    Create a matrix from 16 components in storage order.

    Raises:
        ValueError: If not exactly 16 values are given.
    """
    if len(values) != 16:
        raise ValueError(f"Matrix needs 16 values, got {len(values)}")
    result = Matrix()
    result._set_values(values)
    return result


def from_values_to_ref(*args: Any) -> None:
    """Write 16 components followed by the result matrix: ``(m0, ..., m15, result)``."""
    if len(args) != 17:
        raise ValueError(f"Expected 16 values and a result matrix, got {len(args)} arguments")
    result: Matrix = args[16]
    result._set_values(args[:16])


def from_array_to_ref(array: Sequence[float], offset: int, result: Matrix) -> None:
    """Copy 16 components from ``array`` at ``offset`` (not bounds checked)."""
    result._set_values([array[offset + index] for index in range(16)])


def from_float32_array_to_ref_scaled(
    array: Sequence[float], offset: int, scale: float, result: Matrix
) -> None:
    result._set_values([array[offset + index] * scale for index in range(16)])


def compose(scale: Vector3, rotation: Quaternion, translation: Vector3) -> Matrix:
    result = Matrix.identity()
    compose_to_ref(scale, rotation, translation, result)
    return result


def compose_to_ref(
    scale: Vector3, rotation: Quaternion, translation: Vector3, result: Matrix
) -> None:
    """
    Build ``scaling * rotation`` and write ``translation`` into m[12..14].

    Scale is applied first, then rotation, then translation.
    """
    scaling_matrix = scaling(scale.x, scale.y, scale.z)
    rotation_matrix = Matrix()
    rotation.to_rotation_matrix(rotation_matrix)
    scaling_matrix.multiply_to_ref(rotation_matrix, result)
    result.set_translation(translation)


def identity_to_ref(result: Matrix) -> None:
    result._set_values(_IDENTITY_VALUES)


def zero() -> Matrix:
    return Matrix()


def invert(source: Matrix) -> Matrix:
    result = Matrix()
    source.invert_to_ref(result)
    return result


def rotation_x(angle: float) -> Matrix:
    result = Matrix()
    rotation_x_to_ref(angle, result)
    return result


def rotation_x_to_ref(angle: float, result: Matrix) -> None:
    s = math.sin(angle)
    c = math.cos(angle)
    result._set_values(
        (
            1.0, 0.0, 0.0, 0.0,
            0.0, c, s, 0.0,
            0.0, -s, c, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )
    )


def rotation_y(angle: float) -> Matrix:
    result = Matrix()
    rotation_y_to_ref(angle, result)
    return result


def rotation_y_to_ref(angle: float, result: Matrix) -> None:
    s = math.sin(angle)
    c = math.cos(angle)
    result._set_values(
        (
            c, 0.0, -s, 0.0,
            0.0, 1.0, 0.0, 0.0,
            s, 0.0, c, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )
    )


def rotation_z(angle: float) -> Matrix:
    result = Matrix()
    rotation_z_to_ref(angle, result)
    return result


def rotation_z_to_ref(angle: float, result: Matrix) -> None:
    s = math.sin(angle)
    c = math.cos(angle)
    result._set_values(
        (
            c, s, 0.0, 0.0,
            -s, c, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )
    )


def rotation_axis(axis: Vector3, angle: float) -> Matrix:
    result = Matrix()
    rotation_axis_to_ref(axis, angle, result)
    return result


def rotation_axis_to_ref(axis: Vector3, angle: float, result: Matrix) -> None:
    """
    Rotation of ``angle`` radians around ``axis``.

    ``axis`` is normalized in place. The translation cells are cleared.
    """
    s = math.sin(-angle)
    c = math.cos(-angle)
    c1 = 1 - c

    axis.normalize()
    x, y, z = axis.x, axis.y, axis.z

    result._set_values(
        (
            (x * x) * c1 + c, (x * y) * c1 - (z * s), (x * z) * c1 + (y * s), 0.0,
            (y * x) * c1 + (z * s), (y * y) * c1 + c, (y * z) * c1 - (x * s), 0.0,
            (z * x) * c1 - (y * s), (z * y) * c1 + (x * s), (z * z) * c1 + c, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )
    )


def rotation_yaw_pitch_roll(yaw: float, pitch: float, roll: float) -> Matrix:
    result = Matrix()
    rotation_yaw_pitch_roll_to_ref(yaw, pitch, roll, result)
    return result


def rotation_yaw_pitch_roll_to_ref(
    yaw: float, pitch: float, roll: float, result: Matrix
) -> None:
    rotation = Quaternion()
    quaternions.rotation_yaw_pitch_roll_to_ref(yaw, pitch, roll, rotation)
    from_quaternion_to_ref(rotation, result)


def scaling(x: float, y: float, z: float) -> Matrix:
    result = Matrix()
    scaling_to_ref(x, y, z, result)
    return result


def scaling_to_ref(x: float, y: float, z: float, result: Matrix) -> None:
    result._set_values(
        (
            x, 0.0, 0.0, 0.0,
            0.0, y, 0.0, 0.0,
            0.0, 0.0, z, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )
    )


def translation(x: float, y: float, z: float) -> Matrix:
    result = Matrix()
    translation_to_ref(x, y, z, result)
    return result


def translation_to_ref(x: float, y: float, z: float, result: Matrix) -> None:
    result._set_values(
        (
            1.0, 0.0, 0.0, 0.0,
            0.0, 1.0, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            x, y, z, 1.0,
        )
    )


def lerp(start_value: Matrix, end_value: Matrix, gradient: float) -> Matrix:
    result = Matrix()
    lerp_to_ref(start_value, end_value, gradient, result)
    return result


def lerp_to_ref(
    start_value: Matrix, end_value: Matrix, gradient: float, result: Matrix
) -> None:
    """Component-wise linear interpolation."""
    start = np.asarray(start_value.m, dtype=np.float64)
    end = np.asarray(end_value.m, dtype=np.float64)
    result._set_values(start * (1.0 - gradient) + end * gradient)


def decompose_lerp(start_value: Matrix, end_value: Matrix, gradient: float) -> Matrix:
    result = Matrix()
    decompose_lerp_to_ref(start_value, end_value, gradient, result)
    return result


def decompose_lerp_to_ref(
    start_value: Matrix, end_value: Matrix, gradient: float, result: Matrix
) -> None:
    """
    Interpolate two transforms through their decomposition.

    Scale and translation are interpolated linearly and rotation by slerp,
    then the parts are recomposed into ``result``.
    """
    start_scale = Vector3()
    start_rotation = Quaternion()
    start_translation = Vector3()
    start_value.decompose(start_scale, start_rotation, start_translation)

    end_scale = Vector3()
    end_rotation = Quaternion()
    end_translation = Vector3()
    end_value.decompose(end_scale, end_rotation, end_translation)

    result_scale = Vector3()
    vec3.lerp_to_ref(start_scale, end_scale, gradient, result_scale)
    result_rotation = Quaternion()
    slerp_to_ref(start_rotation, end_rotation, gradient, result_rotation)
    result_translation = Vector3()
    vec3.lerp_to_ref(start_translation, end_translation, gradient, result_translation)

    compose_to_ref(result_scale, result_rotation, result_translation, result)


def look_at_lh(eye: Vector3, target: Vector3, up: Vector3) -> Matrix:
    result = Matrix()
    look_at_lh_to_ref(eye, target, up, result)
    return result


def look_at_lh_to_ref(eye: Vector3, target: Vector3, up: Vector3, result: Matrix) -> None:
    """
    Left-handed view matrix looking from ``eye`` toward ``target``.

    If ``up`` is parallel to the view direction the x axis falls back to
    (1, 0, 0).
    """
    _look_at_to_ref(eye, target.subtract(eye), up, result)


def look_at_rh(eye: Vector3, target: Vector3, up: Vector3) -> Matrix:
    result = Matrix()
    look_at_rh_to_ref(eye, target, up, result)
    return result


def look_at_rh_to_ref(eye: Vector3, target: Vector3, up: Vector3, result: Matrix) -> None:
    """Right-handed view matrix; the z axis points from ``target`` back to ``eye``."""
    _look_at_to_ref(eye, eye.subtract(target), up, result)


def _look_at_to_ref(eye: Vector3, z_axis: Vector3, up: Vector3, result: Matrix) -> None:
    z_axis.normalize()

    x_axis = Vector3()
    vec3.cross_to_ref(up, z_axis, x_axis)
    if x_axis.length_squared() == 0:
        x_axis.x = 1.0
    else:
        x_axis.normalize()

    y_axis = Vector3()
    vec3.cross_to_ref(z_axis, x_axis, y_axis)
    y_axis.normalize()

    ex = -vec3.dot(x_axis, eye)
    ey = -vec3.dot(y_axis, eye)
    ez = -vec3.dot(z_axis, eye)

    result._set_values(
        (
            x_axis.x, y_axis.x, z_axis.x, 0.0,
            x_axis.y, y_axis.y, z_axis.y, 0.0,
            x_axis.z, y_axis.z, z_axis.z, 0.0,
            ex, ey, ez, 1.0,
        )
    )


def ortho_lh(width: float, height: float, znear: float, zfar: float) -> Matrix:
    result = Matrix()
    ortho_lh_to_ref(width, height, znear, zfar, result)
    return result


def ortho_lh_to_ref(
    width: float, height: float, znear: float, zfar: float, result: Matrix
) -> None:
    n = znear
    f = zfar

    a = 2.0 / width
    b = 2.0 / height
    c = 2.0 / (f - n)
    d = -(f + n) / (f - n)

    result._set_values(
        (
            a, 0.0, 0.0, 0.0,
            0.0, b, 0.0, 0.0,
            0.0, 0.0, c, 0.0,
            0.0, 0.0, d, 1.0,
        )
    )


def ortho_off_center_lh(
    left: float, right: float, bottom: float, top: float, znear: float, zfar: float
) -> Matrix:
    result = Matrix()
    ortho_off_center_lh_to_ref(left, right, bottom, top, znear, zfar, result)
    return result


def ortho_off_center_lh_to_ref(
    left: float,
    right: float,
    bottom: float,
    top: float,
    znear: float,
    zfar: float,
    result: Matrix,
) -> None:
    n = znear
    f = zfar

    a = 2.0 / (right - left)
    b = 2.0 / (top - bottom)
    c = 2.0 / (f - n)
    d = -(f + n) / (f - n)
    i0 = (left + right) / (left - right)
    i1 = (top + bottom) / (bottom - top)

    result._set_values(
        (
            a, 0.0, 0.0, 0.0,
            0.0, b, 0.0, 0.0,
            0.0, 0.0, c, 0.0,
            i0, i1, d, 1.0,
        )
    )


def ortho_off_center_rh(
    left: float, right: float, bottom: float, top: float, znear: float, zfar: float
) -> Matrix:
    result = Matrix()
    ortho_off_center_rh_to_ref(left, right, bottom, top, znear, zfar, result)
    return result


def ortho_off_center_rh_to_ref(
    left: float,
    right: float,
    bottom: float,
    top: float,
    znear: float,
    zfar: float,
    result: Matrix,
) -> None:
    """Left-handed off-center projection with the z scale negated."""
    ortho_off_center_lh_to_ref(left, right, bottom, top, znear, zfar, result)
    result.m[10] *= -1.0
    result._mark_as_updated()


def perspective_lh(width: float, height: float, znear: float, zfar: float) -> Matrix:
    """Left-handed perspective projection from the near-plane size."""
    n = znear
    f = zfar

    a = 2.0 * n / width
    b = 2.0 * n / height
    c = (f + n) / (f - n)
    d = -2.0 * f * n / (f - n)

    return from_values(
        a, 0.0, 0.0, 0.0,
        0.0, b, 0.0, 0.0,
        0.0, 0.0, c, 1.0,
        0.0, 0.0, d, 0.0,
    )


def perspective_fov_lh(fov: float, aspect: float, znear: float, zfar: float) -> Matrix:
    result = Matrix()
    perspective_fov_lh_to_ref(fov, aspect, znear, zfar, result)
    return result


def perspective_fov_lh_to_ref(
    fov: float,
    aspect: float,
    znear: float,
    zfar: float,
    result: Matrix,
    is_vertical_fov_fixed: bool = True,
) -> None:
    """
    Left-handed perspective projection from a field of view.

    Args:
        fov: Field of view in radians.
        aspect: Width over height.
        znear: Near clip distance.
        zfar: Far clip distance.
        result: Matrix receiving the projection.
        is_vertical_fov_fixed: ``fov`` is vertical when True, horizontal otherwise.
    """
    n = znear
    f = zfar

    t = 1.0 / math.tan(fov * 0.5)
    a = t / aspect if is_vertical_fov_fixed else t
    b = t if is_vertical_fov_fixed else t * aspect
    c = (f + n) / (f - n)
    d = -2.0 * f * n / (f - n)

    result._set_values(
        (
            a, 0.0, 0.0, 0.0,
            0.0, b, 0.0, 0.0,
            0.0, 0.0, c, 1.0,
            0.0, 0.0, d, 0.0,
        )
    )


def perspective_fov_rh(fov: float, aspect: float, znear: float, zfar: float) -> Matrix:
    result = Matrix()
    perspective_fov_rh_to_ref(fov, aspect, znear, zfar, result)
    return result


def perspective_fov_rh_to_ref(
    fov: float,
    aspect: float,
    znear: float,
    zfar: float,
    result: Matrix,
    is_vertical_fov_fixed: bool = True,
) -> None:
    """Right-handed counterpart of ``perspective_fov_lh_to_ref``: z terms are negated."""
    n = znear
    f = zfar

    t = 1.0 / math.tan(fov * 0.5)
    a = t / aspect if is_vertical_fov_fixed else t
    b = t if is_vertical_fov_fixed else t * aspect
    c = -(f + n) / (f - n)
    d = -2 * f * n / (f - n)

    result._set_values(
        (
            a, 0.0, 0.0, 0.0,
            0.0, b, 0.0, 0.0,
            0.0, 0.0, c, -1.0,
            0.0, 0.0, d, 0.0,
        )
    )


def perspective_fov_web_vr_to_ref(
    fov: Any,
    znear: float,
    zfar: float,
    result: Matrix,
    right_handed: bool = False,
) -> None:
    """
    Asymmetric perspective projection from per-side field of view angles.

    Args:
        fov: Mapping or object with ``up_degrees``, ``down_degrees``,
            ``left_degrees`` and ``right_degrees``.
        znear: Near clip distance.
        zfar: Far clip distance.
        result: Matrix receiving the projection.
        right_handed: Use the right-handed w sign.
    """
    right_handed_factor = -1 if right_handed else 1

    up_tan = math.tan(math.radians(_fov_field(fov, "up_degrees")))
    down_tan = math.tan(math.radians(_fov_field(fov, "down_degrees")))
    left_tan = math.tan(math.radians(_fov_field(fov, "left_degrees")))
    right_tan = math.tan(math.radians(_fov_field(fov, "right_degrees")))
    x_scale = 2.0 / (left_tan + right_tan)
    y_scale = 2.0 / (up_tan + down_tan)

    result._set_values(
        (
            x_scale, 0.0, 0.0, 0.0,
            0.0, y_scale, 0.0, 0.0,
            (left_tan - right_tan) * x_scale * 0.5,
            -((up_tan - down_tan) * y_scale * 0.5),
            -zfar / (znear - zfar),
            1.0 * right_handed_factor,
            0.0, 0.0, -(2.0 * zfar * znear) / (zfar - znear), 0.0,
        )
    )


def _fov_field(fov: Any, name: str) -> float:
    if isinstance(fov, dict):
        return float(fov[name])
    return float(getattr(fov, name))


def get_final_matrix(
    viewport: Any,
    world: Matrix,
    view: Matrix,
    projection: Matrix,
    zmin: float,
    zmax: float,
) -> Matrix:
    """
    Full transform from object space to viewport pixels.

    Args:
        viewport: Object with ``x``, ``y``, ``width`` and ``height``.
        world: World matrix.
        view: View matrix.
        projection: Projection matrix.
        zmin: Depth mapped from the near plane.
        zmax: Depth mapped from the far plane.

    Returns:
        ``world * view * projection * viewport_matrix``.
    """
    cw = viewport.width
    ch = viewport.height
    cx = viewport.x
    cy = viewport.y

    viewport_matrix = from_values(
        cw / 2.0, 0.0, 0.0, 0.0,
        0.0, -ch / 2.0, 0.0, 0.0,
        0.0, 0.0, zmax - zmin, 0.0,
        cx + cw / 2.0, ch / 2.0 + cy, zmin, 1.0,
    )
    return world.multiply(view).multiply(projection).multiply(viewport_matrix)


def get_as_matrix2x2(matrix: Matrix) -> NDArray[np.float32]:
    m = matrix.m
    return np.array([m[0], m[1], m[4], m[5]], dtype=np.float32)


def get_as_matrix3x3(matrix: Matrix) -> NDArray[np.float32]:
    m = matrix.m
    return np.array(
        [m[0], m[1], m[2], m[4], m[5], m[6], m[8], m[9], m[10]], dtype=np.float32
    )


def transpose(matrix: Matrix) -> Matrix:
    result = Matrix()
    transpose_to_ref(matrix, result)
    return result


def transpose_to_ref(matrix: Matrix, result: Matrix) -> None:
    """Write the transpose of ``matrix`` into ``result`` (which may be ``matrix``)."""
    result._set_values(matrix.m.reshape(4, 4).T.ravel().tolist())


def reflection(plane: "Plane") -> Matrix:
    result = Matrix()
    reflection_to_ref(plane, result)
    return result


def reflection_to_ref(plane: "Plane", result: Matrix) -> None:
    """
    Mirror transform across ``plane``.

    ``plane`` is normalized in place.
    """
    plane.normalize()
    x = plane.normal.x
    y = plane.normal.y
    z = plane.normal.z
    temp = -2 * x
    temp2 = -2 * y
    temp3 = -2 * z

    result._set_values(
        (
            (temp * x) + 1, temp2 * x, temp3 * x, 0.0,
            temp * y, (temp2 * y) + 1, temp3 * y, 0.0,
            temp * z, temp2 * z, (temp3 * z) + 1, 0.0,
            temp * plane.d, temp2 * plane.d, temp3 * plane.d, 1.0,
        )
    )


def from_xyz_axes_to_ref(
    xaxis: Vector3, yaxis: Vector3, zaxis: Vector3, result: Matrix
) -> None:
    """Matrix whose first three rows are the given axes."""
    result._set_values(
        (
            xaxis.x, xaxis.y, xaxis.z, 0.0,
            yaxis.x, yaxis.y, yaxis.z, 0.0,
            zaxis.x, zaxis.y, zaxis.z, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )
    )


def from_quaternion_to_ref(quat: Quaternion, result: Matrix) -> None:
    """Rotation matrix of ``quat``; translation cells are cleared."""
    xx = quat.x * quat.x
    yy = quat.y * quat.y
    zz = quat.z * quat.z
    xy = quat.x * quat.y
    zw = quat.z * quat.w
    zx = quat.z * quat.x
    yw = quat.y * quat.w
    yz = quat.y * quat.z
    xw = quat.x * quat.w

    result._set_values(
        (
            1.0 - (2.0 * (yy + zz)), 2.0 * (xy + zw), 2.0 * (zx - yw), 0.0,
            2.0 * (xy - zw), 1.0 - (2.0 * (zz + xx)), 2.0 * (yz + xw), 0.0,
            2.0 * (zx + yw), 2.0 * (yz - xw), 1.0 - (2.0 * (yy + xx)), 0.0,
            0.0, 0.0, 0.0, 1.0,
        )
    )


_IDENTITY_READ_ONLY = Matrix.identity()
_IDENTITY_READ_ONLY.m.flags.writeable = False
