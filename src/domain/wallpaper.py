"""Wallpaper domain models and value objects."""

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone

from .exceptions import WallpaperError

RESOLUTION_PATTERN = re.compile(r"([0-9]+)x([0-9]+)")

# stands in for a missing timestamp so such records sort oldest
MISSING_TIMESTAMP = datetime.min

COMMON_RESOLUTIONS = {
    "Full HD": (1920, 1080),
    "2K QHD": (2560, 1440),
    "4K UHD": (3840, 2160),
    "HD": (1366, 768),
    "HD 720p": (1280, 720),
}


@dataclass(frozen=True)
class ResolutionTarget:
    """Requested pixel dimensions parsed from a client string."""

    width: int
    height: int

    def __str__(self) -> str:
        return format_resolution(self.width, self.height)


@dataclass(frozen=True)
class Resolution:
    """Value object for one downloadable variant of a wallpaper."""

    width: int
    height: int
    file_url: str
    file_size: int

    def __str__(self) -> str:
        """String representation."""
        return format_resolution(self.width, self.height)

    def validate(self) -> None:
        """Validate field ranges.

        Raises:
            WallpaperError: If a dimension or the file size is not positive,
                or the file URL is empty
        """
        if not isinstance(self.width, int) or self.width <= 0:
            raise WallpaperError(f"Resolution width must be positive: {self.width}")
        if not isinstance(self.height, int) or self.height <= 0:
            raise WallpaperError(f"Resolution height must be positive: {self.height}")
        if not self.file_url:
            raise WallpaperError("Resolution file URL must not be empty")
        if not isinstance(self.file_size, int) or self.file_size <= 0:
            raise WallpaperError(f"Resolution file size must be positive: {self.file_size}")

    def to_dict(self) -> dict:
        """Convert to dict for JSON serialization."""
        return {
            "width": self.width,
            "height": self.height,
            "fileUrl": self.file_url,
            "fileSize": self.file_size,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Resolution":
        """Create from dict for JSON deserialization.

        Raises:
            WallpaperError: If the stored values are missing or out of range
        """
        resolution = cls(
            width=data.get("width", 0),
            height=data.get("height", 0),
            file_url=data.get("fileUrl", ""),
            file_size=data.get("fileSize", 0),
        )
        resolution.validate()
        return resolution


def parse_resolution(text: str) -> ResolutionTarget | None:
    """Parse a ``"<width>x<height>"`` string.

    Only ASCII digits are accepted and the whole string must match.
    Returns None when the string does not match or a dimension is zero.
    """
    match = RESOLUTION_PATTERN.fullmatch(text or "")
    if not match:
        return None

    try:
        width, height = int(match.group(1)), int(match.group(2))
    except ValueError:
        # beyond the interpreter's int string-conversion limit
        return None
    if width <= 0 or height <= 0:
        return None
    return ResolutionTarget(width=width, height=height)


def format_resolution(width: int, height: int) -> str:
    return f"{width}x{height}"


def parse_timestamp(value: str | None) -> datetime:
    if not value:
        return MISSING_TIMESTAMP
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _read_count(data: dict, key: str) -> int:
    value = data.get(key, 0)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise WallpaperError(f"{key} must be a non-negative integer, got {value!r}")
    return value


@dataclass
class Wallpaper:
    """Domain entity representing a wallpaper and its resolution variants."""

    id: str
    title: str
    theme_id: str
    resolutions: list[Resolution] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    description: str | None = None
    thumbnail_url: str = ""
    original_url: str = ""
    like_count: int = 0
    download_count: int = 0
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def matches_query(self, query: str) -> bool:
        """Check if title, description or any tag contains the query."""
        query_lower = query.lower()
        return (
            query_lower in self.title.lower()
            or query_lower in (self.description or "").lower()
            or any(query_lower in tag.lower() for tag in self.tags)
        )

    @property
    def search_text(self) -> str:
        """Searchable text used for fuzzy matching."""
        return " ".join([self.title, self.description or "", *self.tags])

    def to_dict(self) -> dict:
        """Convert to dict for JSON serialization."""
        data = {
            "id": self.id,
            "title": self.title,
            "themeId": self.theme_id,
            "tags": self.tags,
            "resolutions": [r.to_dict() for r in self.resolutions],
            "thumbnailUrl": self.thumbnail_url,
            "originalUrl": self.original_url,
            "likeCount": self.like_count,
            "downloadCount": self.download_count,
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }
        if self.description is not None:
            data["description"] = self.description
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Wallpaper":
        """Create from dict for JSON deserialization.

        Raises:
            WallpaperError: If id, title or theme is missing, a count or the
                tag list has the wrong type, or a resolution entry is invalid
        """
        for key in ("id", "title", "themeId"):
            if not data.get(key):
                raise WallpaperError(f"Wallpaper record is missing {key!r}")

        try:
            created_at = parse_timestamp(data.get("createdAt"))
            updated_at = parse_timestamp(data.get("updatedAt"))
        except (TypeError, ValueError) as e:
            raise WallpaperError(f"Invalid timestamp in wallpaper {data['id']}: {e}") from e

        tags = data.get("tags", [])
        if not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags):
            raise WallpaperError(f"Tags of wallpaper {data['id']} must be a list of strings")
        resolutions = data.get("resolutions", [])
        if not isinstance(resolutions, list):
            raise WallpaperError(f"Resolutions of wallpaper {data['id']} must be a list")

        return cls(
            id=data["id"],
            title=data["title"],
            theme_id=data["themeId"],
            resolutions=[Resolution.from_dict(r) for r in resolutions],
            tags=tags,
            description=data.get("description"),
            thumbnail_url=data.get("thumbnailUrl", ""),
            original_url=data.get("originalUrl", ""),
            like_count=_read_count(data, "likeCount"),
            download_count=_read_count(data, "downloadCount"),
            created_at=created_at,
            updated_at=updated_at,
        )


@dataclass
class SearchResult:
    """One page of catalog search results."""

    wallpapers: list[Wallpaper]
    total_count: int
    page: int
    page_size: int
    has_more: bool

    def to_dict(self) -> dict:
        return {
            "wallpapers": [w.to_dict() for w in self.wallpapers],
            "totalCount": self.total_count,
            "page": self.page,
            "pageSize": self.page_size,
            "hasMore": self.has_more,
        }


def resolution_label(width: int, height: int) -> str | None:
    """Display name of a common preset, e.g. ``"Full HD"`` for 1920x1080."""
    for label, size in COMMON_RESOLUTIONS.items():
        if size == (width, height):
            return label
    return None


@dataclass(frozen=True)
class AvailableResolution:
    """One downloadable variant as listed to clients."""

    width: int
    height: int
    file_size: int
    download_url: str
    file_url: str
    label: str | None = None

    @property
    def resolution(self) -> str:
        return format_resolution(self.width, self.height)

    def to_dict(self) -> dict:
        return {
            "resolution": self.resolution,
            "width": self.width,
            "height": self.height,
            "fileSize": self.file_size,
            "downloadUrl": self.download_url,
            "fileUrl": self.file_url,
            "label": self.label,
        }


@dataclass
class DownloadInfo:
    """Resolutions a wallpaper can be downloaded in."""

    wallpaper_id: str
    title: str
    available_resolutions: list[AvailableResolution] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "wallpaperId": self.wallpaper_id,
            "title": self.title,
            "availableResolutions": [r.to_dict() for r in self.available_resolutions],
        }
