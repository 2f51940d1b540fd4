"""Core value types: vectors, quaternions and matrices."""

from rendermath.core.errors import (
    DegenerateVectorError,
    RenderMathError,
    SingularMatrixError,
    ZeroScaleError,
)
from rendermath.core.vector2 import Vector2
from rendermath.core.vector3 import Vector3
from rendermath.core.vector4 import Vector4
from rendermath.core.quaternion import Quaternion
from rendermath.core.matrix import Matrix

__all__ = [
    "DegenerateVectorError",
    "RenderMathError",
    "SingularMatrixError",
    "ZeroScaleError",
    "Vector2",
    "Vector3",
    "Vector4",
    "Quaternion",
    "Matrix",
]
