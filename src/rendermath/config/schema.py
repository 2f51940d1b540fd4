"""
Pydantic configuration schema for rendermath.

This module defines the configuration models for logging and numerics with
strict validation, enum fields and default values.
"""

from enum import Enum
import uuid

from pydantic import BaseModel, Field, field_validator


class LogLevel(str, Enum):
    """Log level enumeration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class MatrixDtype(str, Enum):
    """Storage type for matrix components."""

    FLOAT32 = "float32"
    FLOAT64 = "float64"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(default=LogLevel.INFO, description="Logging level")
    json_format: bool = Field(
        default=False, description="Emit JSON log lines instead of console output"
    )
    run_id: str = Field(
        default="auto",
        description="Run identifier, 'auto' generates a UUID prefix",
    )

    @field_validator("run_id", mode="before")
    @classmethod
    def generate_run_id(cls, v: str) -> str:
        """Generate run ID if set to 'auto'."""
        if v == "auto":
            return str(uuid.uuid4())[:8]
        return v


class NumericsConfig(BaseModel):
    """Numeric behavior of the math types."""

    strict: bool = Field(
        default=False,
        description="Raise on degenerate inputs instead of silent fallback",
    )
    matrix_dtype: MatrixDtype = Field(
        default=MatrixDtype.FLOAT32,
        description="Storage type of newly created matrices",
    )
    singular_tolerance: float = Field(
        default=0.0,
        ge=0.0,
        description="Determinant magnitude at or below which a matrix is singular",
    )


class RenderMathConfig(BaseModel):
    """Root configuration model for rendermath."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    numerics: NumericsConfig = Field(default_factory=NumericsConfig)

    model_config = {"extra": "forbid"}
