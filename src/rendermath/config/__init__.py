"""Configuration module for rendermath."""

from rendermath.config.schema import (
    LoggingConfig,
    LogLevel,
    MatrixDtype,
    NumericsConfig,
    RenderMathConfig,
)
from rendermath.config.loader import get_default_config, load_config, save_config
from rendermath.config.validation import ConfigurationError, validate_config
from rendermath.config.runtime import (
    configure,
    get_active_config,
    reset_active_config,
    strict_mode,
)

__all__ = [
    "LoggingConfig",
    "LogLevel",
    "MatrixDtype",
    "NumericsConfig",
    "RenderMathConfig",
    "get_default_config",
    "load_config",
    "save_config",
    "ConfigurationError",
    "validate_config",
    "configure",
    "get_active_config",
    "reset_active_config",
    "strict_mode",
]
