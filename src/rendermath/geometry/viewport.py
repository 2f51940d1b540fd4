"""
Normalized viewport rectangle.
"""

from dataclasses import dataclass
from typing import Any, Optional, Protocol, Union


class RenderTarget(Protocol):
    """Anything that reports its render size in pixels."""

    def get_render_width(self) -> int: ...

    def get_render_height(self) -> int: ...


@dataclass
class Viewport:
    """
    Viewport in fractions of the render target.

    Attributes:
        x: Left edge.
        y: Top edge.
        width: Width.
        height: Height.
    """

    x: float
    y: float
    width: float
    height: float

    def to_global(
        self,
        render_width_or_engine: Union[float, RenderTarget, Any],
        render_height: Optional[float] = None,
    ) -> "Viewport":
        """
        Convert to pixel coordinates.

        Args:
            render_width_or_engine: Render width in pixels, or an object with
                ``get_render_width()`` and ``get_render_height()``.
            render_height: Render height in pixels when a width is given.

        Returns:
            New viewport in pixels.

        Raises:
            ValueError: If a width is given without a height.
        """
        if hasattr(render_width_or_engine, "get_render_width"):
            engine = render_width_or_engine
            return self.to_global(engine.get_render_width(), engine.get_render_height())

        if render_height is None:
            raise ValueError("render_height is required when passing a render width")

        render_width = render_width_or_engine
        return Viewport(
            self.x * render_width,
            self.y * render_height,
            self.width * render_width,
            self.height * render_height,
        )

    def clone(self) -> "Viewport":
        return Viewport(self.x, self.y, self.width, self.height)
