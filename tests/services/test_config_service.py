"""Tests for ConfigService."""

import json
from pathlib import Path

import pytest

from domain.config import DEFAULT_BASE_URL, Config
from domain.exceptions import ServiceError
from services.config_service import ConfigService


@pytest.fixture
def config_service(temp_dir: Path) -> ConfigService:
    """Create ConfigService with temporary config file."""
    return ConfigService(config_file=temp_dir / "settings" / "config.json")


def test_config_service_init(config_service: ConfigService):
    """Test ConfigService initialization does not touch disk."""
    assert config_service.config_dir == config_service.config_file.parent
    assert not config_service.config_file.exists()


def test_default_config_location():
    """Test default config path."""
    service = ConfigService()
    assert service.config_file == Path.home() / ".config" / "wallpaper-gallery" / "config.json"


def test_load_default_config(config_service: ConfigService):
    """Test loading creates a default configuration file."""
    config = config_service.load_config()

    assert config.data_dir is None
    assert config.base_url == DEFAULT_BASE_URL
    assert config.admin_secret_key is None
    assert config_service.config_file.exists()


def test_load_existing_config(config_service: ConfigService, temp_dir: Path):
    """Test loading existing configuration."""
    config_service.config_dir.mkdir(parents=True)
    with open(config_service.config_file, "w") as f:
        json.dump(
            {
                "data_dir": str(temp_dir),
                "base_url": "https://wallpapers.example.com",
                "admin_secret_key": "admin-key",
            },
            f,
        )

    config = config_service.load_config()
    assert config.data_dir == temp_dir
    assert config.base_url == "https://wallpapers.example.com"
    assert config.admin_secret_key == "admin-key"


def test_load_corrupt_config(config_service: ConfigService):
    """Test corrupt config file raises ServiceError."""
    config_service.config_dir.mkdir(parents=True)
    config_service.config_file.write_text("{broken")

    with pytest.raises(ServiceError, match="Failed to load config"):
        config_service.load_config()


def test_save_config(config_service: ConfigService, temp_dir: Path):
    """Test saving configuration."""
    config = Config(data_dir=temp_dir, admin_secret_key="admin-key")

    config_service.save_config(config)

    with open(config_service.config_file) as f:
        saved_data = json.load(f)

    assert saved_data["data_dir"] == str(temp_dir)
    assert saved_data["admin_secret_key"] == "admin-key"
    assert config_service.get_config() is config


def test_save_config_validation(config_service: ConfigService):
    """Test saving config with invalid data."""
    config = Config(data_dir=Path("/nonexistent/gallery/path"))

    with pytest.raises(ServiceError, match="Failed to save config"):
        config_service.save_config(config)
    assert not config_service.config_file.exists()


def test_get_config_loads_once(config_service: ConfigService):
    """Test get_config caches the loaded config."""
    first = config_service.get_config()
    assert config_service.get_config() is first


def test_config_persistence(config_service: ConfigService, temp_dir: Path):
    """Test config persists across service instances."""
    config_service.save_config(Config(data_dir=temp_dir, base_url="https://example.com"))

    reloaded = ConfigService(config_file=config_service.config_file).load_config()
    assert reloaded.data_dir == temp_dir
    assert reloaded.base_url == "https://example.com"
