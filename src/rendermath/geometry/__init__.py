"""Geometry types: sizes, planes, viewports, frustums and vertex formats."""

from rendermath.geometry.axis import Axis, Space
from rendermath.geometry.plane import Plane
from rendermath.geometry.size import Size
from rendermath.geometry.vertex import PositionNormalTextureVertex, PositionNormalVertex
from rendermath.geometry.viewport import Viewport

__all__ = [
    "Axis",
    "Space",
    "Plane",
    "Size",
    "PositionNormalTextureVertex",
    "PositionNormalVertex",
    "Viewport",
]
