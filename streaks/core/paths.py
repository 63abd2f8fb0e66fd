"""
Centralized path management for streaks.

Resolves the per-user data directory that holds the configuration and the
state file.
"""

import os
import sys
from pathlib import Path
from typing import Optional
import logging


class PathManager:
    """Manages streaks file paths."""
    
    # Directory names
    DATA_DIR_NAME = "streaks"
    HOME_ENV_VAR = "STREAKS_HOME"
    
    # File names
    CONFIG_FILE = "config.json"
    STATE_FILE = "state.txt"
    
    def __init__(self, logger: Optional[logging.Logger] = None):
        """Initialize path manager."""
        self.logger = logger or logging.getLogger(__name__)
        self._working_dir: Optional[Path] = None
    
    def _default_user_dir(self) -> Path:
        """Platform-appropriate per-user data directory."""
        if sys.platform == "darwin":
            return Path.home() / "Library" / "Application Support" / self.DATA_DIR_NAME
        if sys.platform.startswith("win"):
            appdata = os.environ.get("APPDATA")
            if appdata:
                return Path(appdata) / self.DATA_DIR_NAME
            return Path.home() / "AppData" / "Roaming" / self.DATA_DIR_NAME
        xdg_data = os.environ.get("XDG_DATA_HOME")
        if xdg_data:
            return Path(xdg_data).expanduser() / self.DATA_DIR_NAME
        return Path.home() / ".local" / "share" / self.DATA_DIR_NAME

    @property
    def working_dir(self) -> Path:
        """
        Get the working directory for streaks data.

        Priority order:
        1. STREAKS_HOME environment variable (explicit override)
        2. The platform data directory (XDG_DATA_HOME on Linux)
        """
        if self._working_dir is not None:
            return self._working_dir
            
        env_override = os.environ.get(self.HOME_ENV_VAR)
        if env_override:
            self._working_dir = Path(env_override).expanduser().resolve()
            self.logger.debug(f"Using {self.HOME_ENV_VAR} override: {self._working_dir}")
        else:
            self._working_dir = self._default_user_dir()
            self.logger.debug(f"Using user data directory: {self._working_dir}")

        return self._working_dir
    
    def ensure_directories(self) -> None:
        """Ensure the working directory exists."""
        self.working_dir.mkdir(parents=True, exist_ok=True)
        self.logger.debug(f"Ensured directory exists: {self.working_dir}")
    
    @property
    def config_path(self) -> Path:
        """Get the configuration file path."""
        return self.working_dir / self.CONFIG_FILE
    
    @property
    def state_path(self) -> Path:
        """Get the default state file path."""
        return self.working_dir / self.STATE_FILE


# Global instance for convenience
_path_manager = None


def get_path_manager() -> PathManager:
    """Get or create the global PathManager instance."""
    global _path_manager
    if _path_manager is None:
        _path_manager = PathManager()
    return _path_manager


def reset_path_manager() -> None:
    """Forget the cached PathManager so environment changes are picked up."""
    global _path_manager
    _path_manager = None
