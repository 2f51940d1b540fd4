"""
Error types for rendermath numerics.

Degenerate inputs fall back silently by default. These errors are only
raised when strict mode is enabled through the numerics configuration.
"""


class RenderMathError(ValueError):
    """Base class for numeric errors raised in strict mode."""

    pass


class SingularMatrixError(RenderMathError):
    """Matrix inversion was requested for a singular matrix."""

    def __init__(self, determinant: float) -> None:
        super().__init__(f"Matrix is singular (determinant={determinant})")
        self.determinant = determinant


class DegenerateVectorError(RenderMathError):
    """A zero-length vector was normalized."""

    pass


class ZeroScaleError(RenderMathError):
    """A matrix with a zero scale axis was decomposed."""

    def __init__(self, scale: tuple[float, float, float]) -> None:
        super().__init__(f"Cannot decompose matrix with zero scale axis {scale}")
        self.scale = scale
