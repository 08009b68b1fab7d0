"""Configuration Service using domain models."""

import json
from pathlib import Path

from domain.config import Config, ConfigError
from services.base import BaseService
from services.interfaces import IConfigService


class ConfigService(BaseService, IConfigService):
    """Service for loading and saving gallery configuration."""

    DEFAULT_CONFIG = Config().to_dict()

    def __init__(self, config_file: Path | None = None) -> None:
        """Initialize configuration service.

        Args:
            config_file: Path to config file (defaults to ~/.config/wallpaper-gallery/config.json)
        """
        super().__init__()
        self.config_file = (
            config_file or Path.home() / ".config" / "wallpaper-gallery" / "config.json"
        )
        self.config_dir = self.config_file.parent
        self._config: Config | None = None

    def _ensure_config_exists(self) -> None:
        """Create config directory and default config if they don't exist."""
        self.config_dir.mkdir(parents=True, exist_ok=True)

        if not self.config_file.exists():
            self.log_info(f"Creating default config at {self.config_file}")
            with open(self.config_file, "w") as f:
                json.dump(self.DEFAULT_CONFIG, f, indent=4)

    def load_config(self) -> Config:
        """Load configuration from file, creating defaults on first use.

        Returns:
            Config domain model

        Raises:
            ServiceError: If config file cannot be read
        """
        try:
            self._ensure_config_exists()
            with open(self.config_file) as f:
                config_data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            raise self.service_error(f"Failed to load config from {self.config_file}", e) from e

        self._config = Config.from_dict(config_data)
        self.log_debug(f"Loaded config from {self.config_file}")
        return self._config

    def save_config(self, config: Config) -> None:
        """Validate and save configuration to file.

        Raises:
            ServiceError: If config is invalid or the file cannot be written
        """
        try:
            config.validate()
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(self.config_file, "w") as f:
                json.dump(config.to_dict(), f, indent=4)
        except (ConfigError, OSError) as e:
            raise self.service_error(f"Failed to save config to {self.config_file}", e) from e

        self._config = config
        self.log_info(f"Saved config to {self.config_file}")

    def get_config(self) -> Config:
        """Get current configuration, loading if necessary."""
        if self._config is None:
            return self.load_config()
        return self._config
