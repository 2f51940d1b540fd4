"""
Configuration loader for rendermath.

Handles YAML loading, saving and default configuration.
"""

from pathlib import Path

from rendermath.config.schema import RenderMathConfig
from rendermath.config.validation import validate_config
from rendermath.logging.setup import get_logger
from rendermath.utils.io import load_yaml, save_yaml

logger = get_logger(__name__)


def load_config(config_path: Path) -> RenderMathConfig:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to the YAML configuration file.

    Returns:
        Validated RenderMathConfig instance.

    Raises:
        FileNotFoundError: If the configuration file does not exist.
        ValueError: If the configuration does not match the schema.
        ConfigurationError: If cross-field validation fails.
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    raw_config = load_yaml(config_path)

    config = RenderMathConfig(**raw_config)
    validate_config(config)

    logger.info("config_loaded", path=str(config_path))
    return config


def save_config(config: RenderMathConfig, output_path: Path) -> None:
    """
    Save configuration to a YAML file.

    Args:
        config: RenderMathConfig instance to save.
        output_path: Path to the output YAML file.
    """
    save_yaml(config.model_dump(mode="json"), Path(output_path))


def get_default_config() -> RenderMathConfig:
    """
    Get default configuration with all default values.

    Returns:
        RenderMathConfig instance with defaults.
    """
    return RenderMathConfig()
