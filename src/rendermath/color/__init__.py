"""Color types."""

from rendermath.color.color3 import Color3
from rendermath.color.color4 import Color4

__all__ = ["Color3", "Color4"]
