"""
Process-wide active configuration for rendermath.

The math types consult this module for the matrix storage type and for
strict-mode checks. Settings are cached in module globals so the hot path
reads a plain attribute instead of walking the pydantic model.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

from rendermath.config.schema import NumericsConfig, RenderMathConfig
from rendermath.logging.setup import get_logger

logger = get_logger(__name__)

_active: Optional[RenderMathConfig] = None
_strict: bool = False
_matrix_dtype: str = "float32"
_singular_tolerance: float = 0.0


def configure(config: RenderMathConfig) -> None:
    """
    Install ``config`` as the active configuration.

    Matrices created before this call keep their storage type.

    Args:
        config: Configuration to activate.
    """
    global _active
    _active = config
    _apply_numerics(config.numerics)
    logger.info(
        "numerics_configured",
        strict=_strict,
        matrix_dtype=_matrix_dtype,
        singular_tolerance=_singular_tolerance,
    )


def get_active_config() -> RenderMathConfig:
    """Return the active configuration, creating defaults on first use."""
    global _active
    if _active is None:
        _active = RenderMathConfig()
        _apply_numerics(_active.numerics)
    return _active


def reset_active_config() -> None:
    """Drop the active configuration and restore default numerics."""
    global _active
    _active = None
    _apply_numerics(NumericsConfig())


def is_strict() -> bool:
    """Whether degenerate inputs raise instead of falling back."""
    return _strict


def matrix_dtype() -> str:
    """Storage type name for newly created matrices."""
    return _matrix_dtype


def singular_tolerance() -> float:
    """Determinant magnitude treated as singular in strict mode."""
    return _singular_tolerance


@contextmanager
def strict_mode(enabled: bool = True) -> Iterator[None]:
    """
    Temporarily enable or disable strict numerics.

    Args:
        enabled: Strict flag for the duration of the block.

    Example:
        with strict_mode():
            matrix.invert(m)  # raises SingularMatrixError when m is singular
    """
    global _strict
    previous = _strict
    _strict = enabled
    try:
        yield
    finally:
        _strict = previous


def _apply_numerics(numerics: NumericsConfig) -> None:
    global _strict, _matrix_dtype, _singular_tolerance
    _strict = numerics.strict
    _matrix_dtype = numerics.matrix_dtype.value
    _singular_tolerance = numerics.singular_tolerance
