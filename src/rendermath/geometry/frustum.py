"""
View frustum plane extraction.

Planes are read directly from the rows of a combined view-projection
matrix and normalized. The order is fixed: near, far, left, right, top,
bottom.
"""

from rendermath.core.matrix import Matrix
from rendermath.geometry.plane import Plane

NEAR, FAR, LEFT, RIGHT, TOP, BOTTOM = range(6)


def get_planes(transform: Matrix) -> list[Plane]:
    """
    Extract the six clip planes of ``transform``.

    Args:
        transform: Combined view-projection matrix.

    Returns:
        Normalized planes in near, far, left, right, top, bottom order.
    """
    planes = [Plane(0.0, 0.0, 0.0, 0.0) for _ in range(6)]
    get_planes_to_ref(transform, planes)
    return planes


def _set_plane(plane: Plane, x: float, y: float, z: float, d: float) -> None:
    plane.normal.x = x
    plane.normal.y = y
    plane.normal.z = z
    plane.d = d
    plane.normalize()


def get_near_plane_to_ref(transform: Matrix, frustum_plane: Plane) -> None:
    m = transform.m.tolist()
    _set_plane(frustum_plane, m[3] + m[2], m[7] + m[6], m[11] + m[10], m[15] + m[14])


def get_far_plane_to_ref(transform: Matrix, frustum_plane: Plane) -> None:
    m = transform.m.tolist()
    _set_plane(frustum_plane, m[3] - m[2], m[7] - m[6], m[11] - m[10], m[15] - m[14])


def get_left_plane_to_ref(transform: Matrix, frustum_plane: Plane) -> None:
    m = transform.m.tolist()
    _set_plane(frustum_plane, m[3] + m[0], m[7] + m[4], m[11] + m[8], m[15] + m[12])


def get_right_plane_to_ref(transform: Matrix, frustum_plane: Plane) -> None:
    m = transform.m.tolist()
    _set_plane(frustum_plane, m[3] - m[0], m[7] - m[4], m[11] - m[8], m[15] - m[12])


def get_top_plane_to_ref(transform: Matrix, frustum_plane: Plane) -> None:
    m = transform.m.tolist()
    _set_plane(frustum_plane, m[3] - m[1], m[7] - m[5], m[11] - m[9], m[15] - m[13])


def get_bottom_plane_to_ref(transform: Matrix, frustum_plane: Plane) -> None:
    m = transform.m.tolist()
    _set_plane(frustum_plane, m[3] + m[1], m[7] + m[5], m[11] + m[9], m[15] + m[13])


def get_planes_to_ref(transform: Matrix, frustum_planes: list[Plane]) -> None:
    """Fill ``frustum_planes`` (at least six) in near, far, left, right, top, bottom order."""
    get_near_plane_to_ref(transform, frustum_planes[NEAR])
    get_far_plane_to_ref(transform, frustum_planes[FAR])
    get_left_plane_to_ref(transform, frustum_planes[LEFT])
    get_right_plane_to_ref(transform, frustum_planes[RIGHT])
    get_top_plane_to_ref(transform, frustum_planes[TOP])
    get_bottom_plane_to_ref(transform, frustum_planes[BOTTOM])
