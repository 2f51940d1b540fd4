"""
Configuration validation for rendermath.

Provides cross-field checks beyond Pydantic schema validation.
"""

from rendermath.config.schema import MatrixDtype, RenderMathConfig

# Smallest determinant float32 storage can resolve around unit-scale matrices
_FLOAT32_RESOLUTION = 1e-7


class ConfigurationError(Exception):
    """Configuration validation error."""

    pass


def validate_config(config: RenderMathConfig) -> None:
    """
    Perform cross-field validation on configuration.

    Args:
        config: RenderMathConfig instance to validate.

    Raises:
        ConfigurationError: If validation fails.
    """
    errors: list[str] = []

    errors.extend(_validate_logging(config))
    errors.extend(_validate_numerics(config))

    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(
            f"  - {e}" for e in errors
        )
        raise ConfigurationError(error_msg)


def _validate_logging(config: RenderMathConfig) -> list[str]:
    """Validate logging configuration."""
    errors: list[str] = []

    if not config.logging.run_id.strip():
        errors.append("logging.run_id must not be empty")

    return errors


def _validate_numerics(config: RenderMathConfig) -> list[str]:
    """Validate numerics configuration."""
    errors: list[str] = []

    numerics = config.numerics

    if numerics.singular_tolerance > 0.0 and not numerics.strict:
        errors.append("numerics.singular_tolerance only applies when numerics.strict is true")

    if numerics.singular_tolerance >= 1.0:
        errors.append("numerics.singular_tolerance must be less than 1.0")

    if (
        numerics.matrix_dtype == MatrixDtype.FLOAT32
        and 0.0 < numerics.singular_tolerance < _FLOAT32_RESOLUTION
    ):
        errors.append(
            "numerics.singular_tolerance is below float32 resolution, use matrix_dtype float64"
        )

    return errors
