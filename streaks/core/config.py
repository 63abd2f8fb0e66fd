"""
Configuration management for streaks.
"""

from pathlib import Path
from typing import Optional

from .exceptions import ConfigurationError
from .models import StreaksConfig
from .paths import get_path_manager


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    return get_path_manager().config_path


def load_config(config_path: Optional[str] = None) -> StreaksConfig:
    """
    Load configuration from file or return defaults.

    Args:
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        StreaksConfig object

    Raises:
        ConfigurationError: If the file exists but is not valid configuration
    """
    if config_path is None:
        config_path = str(get_default_config_path())
    return StreaksConfig.load_from_file(config_path)


def save_config(config: StreaksConfig, config_path: Optional[str] = None) -> None:
    """
    Save configuration to file.

    Args:
        config: StreaksConfig object to save
        config_path: Optional path to save to. Uses default if not provided.
    """
    if config_path is None:
        config_path = str(get_default_config_path())

    if not config.save_to_file(config_path):
        raise ConfigurationError(f"Could not save configuration to {config_path}")


def resolve_state_path(config: StreaksConfig, override: Optional[str] = None) -> Path:
    """
    Pick the state file for this invocation.

    Priority: explicit override, then ``state_path`` from config, then the
    default file in the working directory.
    """
    if override:
        return Path(override).expanduser().resolve()
    if config.state_path:
        return Path(config.state_path)
    return get_path_manager().state_path
