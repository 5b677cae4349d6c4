"""
Configuration service for catalog settings.

Provides a single source of truth for service configuration loaded
from a JSON file.
"""

import json
from pathlib import Path
from typing import Dict, Any, Optional

from starcatalog.env_config import CONFIG_PATH

DEFAULT_MIN_NAME_LENGTH = 3


class ConfigService:
    """Service for loading and providing catalog configuration."""

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize the configuration service.

        Args:
            config_path: Path to configuration JSON file.
                        Defaults to starcatalog/config/service_config.json
        """
        if config_path is None:
            if CONFIG_PATH:
                config_path = Path(CONFIG_PATH)
            else:
                package_dir = Path(__file__).parent.parent
                config_path = package_dir / "config" / "service_config.json"

        self.config_path = config_path
        self._config = None

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from JSON file.

        Returns:
            Dictionary containing all configuration

        Raises:
            FileNotFoundError: If config file doesn't exist
            json.JSONDecodeError: If config file is invalid JSON
        """
        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        with open(self.config_path, 'r', encoding='utf-8') as f:
            return json.load(f)

    @property
    def config(self) -> Dict[str, Any]:
        """Get the full configuration (cached)."""
        if self._config is None:
            self._config = self._load_config()
        return self._config

    def get_min_name_length(self) -> int:
        """Minimum length of a star name accepted by add_star."""
        return int(self.config.get("validation", {}).get("minNameLength", DEFAULT_MIN_NAME_LENGTH))

    def get_server_config(self) -> Dict[str, Any]:
        """Get server host/port settings.

        Returns:
            Dictionary with server settings
        """
        return self.config.get("server", {})


# Global instance for easy import
_config_service = None

def get_config_service() -> ConfigService:
    """Get the global configuration service instance.

    Returns:
        ConfigService instance
    """
    global _config_service
    if _config_service is None:
        _config_service = ConfigService()
    return _config_service
