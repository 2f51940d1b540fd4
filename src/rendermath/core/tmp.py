"""
Preallocated scratch instances for engine code.

Library routines never claim these slots; they work on locals. The pools
are exposed so render-loop callers can reuse instances instead of
allocating per frame. Each thread gets its own pools, so slots are never
shared across threads. Within a thread, a slot's contents are valid only
until the next code that claims the same slot.

Usage:
    scratch = get_tmp()
    view_projection = scratch.matrix[0]
    view.multiply_to_ref(projection, view_projection)
"""

import threading

from rendermath.color.color3 import Color3
from rendermath.core.matrix import Matrix
from rendermath.core.quaternion import Quaternion
from rendermath.core.vector2 import Vector2
from rendermath.core.vector3 import Vector3
from rendermath.core.vector4 import Vector4

POOL_SIZES = {
    "color3": 3,
    "vector2": 3,
    "vector3": 9,
    "vector4": 3,
    "quaternion": 2,
    "matrix": 8,
}


class Tmp(threading.local):
    """
    Per-thread scratch pools.

    Attributes:
        color3: Black Color3 instances.
        vector2: Zero Vector2 instances.
        vector3: Zero Vector3 instances.
        vector4: Zero Vector4 instances.
        quaternion: Zero quaternions (all four components 0).
        matrix: Zero matrices.
    """

    def __init__(self) -> None:
        self.color3 = [Color3.black() for _ in range(POOL_SIZES["color3"])]
        self.vector2 = [Vector2.zero() for _ in range(POOL_SIZES["vector2"])]
        self.vector3 = [Vector3.zero() for _ in range(POOL_SIZES["vector3"])]
        self.vector4 = [Vector4.zero() for _ in range(POOL_SIZES["vector4"])]
        self.quaternion = [Quaternion.zero() for _ in range(POOL_SIZES["quaternion"])]
        self.matrix = [Matrix.zero() for _ in range(POOL_SIZES["matrix"])]


_tmp = Tmp()


def get_tmp() -> Tmp:
    """Return the calling thread's scratch pools."""
    return _tmp
