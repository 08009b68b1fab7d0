"""Config domain model with validation."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .exceptions import ConfigError

DEFAULT_BASE_URL = "http://localhost:3001"


@dataclass
class Config:
    """Application configuration domain model."""

    data_dir: Optional[Path] = None
    download_dir: Optional[Path] = None
    base_url: str = DEFAULT_BASE_URL
    admin_secret_key: Optional[str] = None

    def validate(self) -> None:
        """Validate configuration state."""
        if self.data_dir:
            if not isinstance(self.data_dir, Path):
                raise ConfigError("data_dir must be a Path object")
            if not self.data_dir.exists():
                raise ConfigError(f"Directory does not exist: {self.data_dir}")
            if not self.data_dir.is_dir():
                raise ConfigError(f"Path is not a directory: {self.data_dir}")
        if self.download_dir and self.download_dir.exists() and not self.download_dir.is_dir():
            raise ConfigError(f"Path is not a directory: {self.download_dir}")
        if not self.base_url.startswith(("http://", "https://")):
            raise ConfigError(f"base_url must be an http(s) URL: {self.base_url}")

    @property
    def wallpapers_file(self) -> Path:
        """Wallpaper catalog file inside the data directory."""
        return self.resolved_data_dir / "wallpapers.json"

    @property
    def themes_file(self) -> Path:
        """Theme catalog file inside the data directory."""
        return self.resolved_data_dir / "themes.json"

    @property
    def resolved_data_dir(self) -> Path:
        """Get data directory, fallback to the per-user data dir."""
        return self.data_dir or Path.home() / ".local" / "share" / "wallpaper-gallery"

    @property
    def resolved_download_dir(self) -> Path:
        """Get download directory, fallback to user Pictures."""
        return self.download_dir or Path.home() / "Pictures" / "Wallpapers"

    def to_dict(self) -> dict:
        """Convert to dict for JSON serialization."""
        return {
            "data_dir": str(self.data_dir) if self.data_dir else None,
            "download_dir": str(self.download_dir) if self.download_dir else None,
            "base_url": self.base_url,
            "admin_secret_key": self.admin_secret_key,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """Create from dict for JSON deserialization."""
        data_dir = data.get("data_dir")
        download_dir = data.get("download_dir")
        return cls(
            data_dir=Path(data_dir) if data_dir else None,
            download_dir=Path(download_dir) if download_dir else None,
            base_url=data.get("base_url") or DEFAULT_BASE_URL,
            admin_secret_key=data.get("admin_secret_key"),
        )

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> "Config":
        """Build config from GALLERY_* and ADMIN_SECRET_KEY variables."""
        env = os.environ if environ is None else environ
        return cls.from_dict(
            {
                "data_dir": env.get("GALLERY_DATA_DIR"),
                "download_dir": env.get("GALLERY_DOWNLOAD_DIR"),
                "base_url": env.get("GALLERY_BASE_URL"),
                "admin_secret_key": env.get("ADMIN_SECRET_KEY"),
            }
        )
