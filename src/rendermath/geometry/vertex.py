"""
Simple vertex formats.
"""

from dataclasses import dataclass, field

from rendermath.core.vector2 import Vector2
from rendermath.core.vector3 import Vector3


@dataclass
class PositionNormalVertex:
    """Vertex with position and normal (normal defaults to +Y)."""

    position: Vector3 = field(default_factory=Vector3.zero)
    normal: Vector3 = field(default_factory=Vector3.up)

    def clone(self) -> "PositionNormalVertex":
        return PositionNormalVertex(self.position.clone(), self.normal.clone())


@dataclass
class PositionNormalTextureVertex:
    """Vertex with position, normal and texture coordinates."""

    position: Vector3 = field(default_factory=Vector3.zero)
    normal: Vector3 = field(default_factory=Vector3.up)
    uv: Vector2 = field(default_factory=Vector2.zero)

    def clone(self) -> "PositionNormalTextureVertex":
        return PositionNormalTextureVertex(
            self.position.clone(), self.normal.clone(), self.uv.clone()
        )
