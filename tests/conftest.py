"""Pytest configuration and fixtures."""

import json
import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """Create temporary directory for tests."""
    test_dir = tmp_path / "gallery_test"
    test_dir.mkdir(parents=True, exist_ok=True)
    yield test_dir


@pytest.fixture
def wallpaper_records() -> list[dict]:
    """Wallpaper records in the stored JSON format."""
    return [
        {
            "id": "wp-mountain",
            "title": "Mountain Sunrise",
            "description": "Golden light over snowy peaks",
            "themeId": "nature",
            "tags": ["mountain", "sunrise", "snow"],
            "resolutions": [
                {"width": 1920, "height": 1080, "fileUrl": "/uploads/mountain-1080.jpg", "fileSize": 524288},
                {"width": 2560, "height": 1440, "fileUrl": "/uploads/mountain-1440.jpg", "fileSize": 1048576},
                {"width": 1366, "height": 768, "fileUrl": "/uploads/mountain-768.jpg", "fileSize": 262144},
            ],
            "thumbnailUrl": "/uploads/thumbs/mountain.jpg",
            "originalUrl": "/uploads/mountain.jpg",
            "likeCount": 5,
            "downloadCount": 40,
            "createdAt": "2024-01-10T08:00:00.000Z",
            "updatedAt": "2024-01-10T08:00:00.000Z",
        },
        {
            "id": "wp-city",
            "title": "Neon City",
            "themeId": "urban",
            "tags": ["city", "night", "neon"],
            "resolutions": [
                {"width": 3840, "height": 2160, "fileUrl": "https://cdn.example.com/city-4k.jpg", "fileSize": 4194304},
            ],
            "thumbnailUrl": "/uploads/thumbs/city.jpg",
            "originalUrl": "/uploads/city.jpg",
            "likeCount": 12,
            "downloadCount": 3,
            "createdAt": "2024-03-02T12:30:00.000Z",
            "updatedAt": "2024-03-02T12:30:00.000Z",
        },
        {
            "id": "wp-forest",
            "title": "Misty Forest",
            "description": "Pine trees in the fog",
            "themeId": "nature",
            "tags": ["forest", "fog"],
            "resolutions": [],
            "thumbnailUrl": "/uploads/thumbs/forest.jpg",
            "originalUrl": "/uploads/forest.jpg",
            "likeCount": 5,
            "downloadCount": 0,
            "createdAt": "2024-02-15T09:00:00.000Z",
            "updatedAt": "2024-02-15T09:00:00.000Z",
        },
    ]


@pytest.fixture
def wallpapers_file(temp_dir: Path, wallpaper_records: list[dict]) -> Path:
    """wallpapers.json populated with the sample records."""
    path = temp_dir / "wallpapers.json"
    with open(path, "w", encoding="utf-8") as f:
        json.dump(wallpaper_records, f, indent=2)
    return path


@pytest.fixture
def theme_records() -> list[dict]:
    """Theme records in the stored JSON format."""
    return [
        {
            "id": "urban",
            "name": "Urban",
            "description": "Cities and streets",
            "wallpaperCount": 1,
            "isActive": True,
            "sortOrder": 2,
            "createdAt": "2024-01-01T00:00:00.000Z",
        },
        {
            "id": "nature",
            "name": "Nature",
            "description": "Landscapes and forests",
            "iconUrl": "/uploads/icons/nature.svg",
            "wallpaperCount": 2,
            "isActive": True,
            "sortOrder": 1,
            "createdAt": "2024-01-01T00:00:00.000Z",
        },
        {
            "id": "retro",
            "name": "Retro",
            "description": "Archived pixel art",
            "wallpaperCount": 0,
            "isActive": False,
            "sortOrder": 2,
            "createdAt": "2023-06-01T00:00:00.000Z",
        },
    ]


@pytest.fixture
def themes_file(temp_dir: Path, theme_records: list[dict]) -> Path:
    """themes.json populated with the sample records."""
    path = temp_dir / "themes.json"
    with open(path, "w", encoding="utf-8") as f:
        json.dump(theme_records, f, indent=2)
    return path


@pytest.fixture
def service_config(temp_dir: Path) -> object:
    """ServiceConfig pointing at the temporary directory."""
    from core.container import ServiceConfig

    return ServiceConfig(
        data_dir=temp_dir,
        download_dir=temp_dir / "downloads",
        config_file=temp_dir / "config.json",
    )
