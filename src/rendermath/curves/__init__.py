"""Curve helpers: easing, arcs, 2D paths, 3D frames and sampled splines."""

from rendermath.curves.angle import Angle, Arc2, Orientation
from rendermath.curves.curve3 import Curve3
from rendermath.curves.path2 import Path2
from rendermath.curves.path3d import Path3D

__all__ = ["Angle", "Arc2", "Orientation", "Curve3", "Path2", "Path3D"]
