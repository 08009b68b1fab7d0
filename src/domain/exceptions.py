"""Custom exceptions for the gallery domain."""


class GalleryError(Exception):
    """Base exception for gallery domain errors."""

    error_code = "INTERNAL_SERVER_ERROR"
    status = 500


class ConfigError(GalleryError):
    """Configuration-related errors."""

    error_code = "CONFIG_ERROR"


class WallpaperError(GalleryError):
    """Wallpaper-related errors."""

    error_code = "INVALID_WALLPAPER"


class ThemeError(GalleryError):
    """Theme-related errors."""

    error_code = "INVALID_THEME"


class ServiceError(GalleryError):
    """Service layer errors."""

    pass


class ValidationError(GalleryError):
    """Invalid input supplied by a caller."""

    error_code = "VALIDATION_ERROR"
    status = 400


class ResolutionFormatError(ValidationError):
    """Resolution string is not of the form <width>x<height>."""

    error_code = "INVALID_RESOLUTION_FORMAT"

    def __init__(self, resolution: str) -> None:
        super().__init__(
            f"Invalid resolution format: {resolution!r} (expected e.g. 1920x1080)"
        )
        self.resolution = resolution


class WallpaperNotFoundError(GalleryError):
    """Requested wallpaper does not exist in the catalog."""

    error_code = "WALLPAPER_NOT_FOUND"
    status = 404

    def __init__(self, wallpaper_id: str) -> None:
        super().__init__(f"Wallpaper not found: {wallpaper_id}")
        self.wallpaper_id = wallpaper_id


class ResolutionUnavailableError(GalleryError):
    """Wallpaper has no resolution to offer."""

    error_code = "NO_AVAILABLE_RESOLUTION"
    status = 404

    def __init__(self, wallpaper_id: str) -> None:
        super().__init__(f"No resolution available for wallpaper {wallpaper_id}")
        self.wallpaper_id = wallpaper_id
