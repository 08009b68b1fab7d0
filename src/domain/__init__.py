"""Domain models for the wallpaper gallery."""

from .config import Config
from .exceptions import (
    ConfigError,
    GalleryError,
    ResolutionFormatError,
    ResolutionUnavailableError,
    ServiceError,
    ThemeError,
    ValidationError,
    WallpaperError,
    WallpaperNotFoundError,
)
from .matching import find_best_match, resolution_distance
from .theme import Theme
from .wallpaper import (
    COMMON_RESOLUTIONS,
    AvailableResolution,
    DownloadInfo,
    Resolution,
    ResolutionTarget,
    SearchResult,
    Wallpaper,
    format_resolution,
    parse_resolution,
    resolution_label,
)

__all__ = [
    "Wallpaper",
    "Resolution",
    "ResolutionTarget",
    "SearchResult",
    "AvailableResolution",
    "DownloadInfo",
    "Theme",
    "COMMON_RESOLUTIONS",
    "parse_resolution",
    "format_resolution",
    "resolution_label",
    "find_best_match",
    "resolution_distance",
    "Config",
    "ConfigError",
    "GalleryError",
    "WallpaperError",
    "ThemeError",
    "ServiceError",
    "ValidationError",
    "ResolutionFormatError",
    "WallpaperNotFoundError",
    "ResolutionUnavailableError",
]
