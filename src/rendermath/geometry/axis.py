"""
Coordinate space selector and unit axes.
"""

from enum import IntEnum

from rendermath.core.vector3 import Vector3


class Space(IntEnum):
    """Space in which a transform is expressed."""

    LOCAL = 0
    WORLD = 1
    BONE = 2


class Axis:
    """
    Unit axes.

    These are shared instances; clone before mutating.
    """

    X = Vector3(1.0, 0.0, 0.0)
    Y = Vector3(0.0, 1.0, 0.0)
    Z = Vector3(0.0, 0.0, 1.0)
