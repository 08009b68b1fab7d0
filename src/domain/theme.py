"""Theme domain model."""

from dataclasses import dataclass
from datetime import datetime

from .exceptions import ThemeError
from .wallpaper import MISSING_TIMESTAMP, parse_timestamp


@dataclass
class Theme:
    """A wallpaper category such as "Nature" or "Urban"."""

    id: str
    name: str
    description: str = ""
    icon_url: str | None = None
    wallpaper_count: int = 0
    is_active: bool = True
    sort_order: int = 0
    created_at: datetime = MISSING_TIMESTAMP

    def to_dict(self) -> dict:
        """Convert to dict for JSON serialization."""
        data = {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "wallpaperCount": self.wallpaper_count,
            "isActive": self.is_active,
            "sortOrder": self.sort_order,
            "createdAt": self.created_at.isoformat(),
        }
        if self.icon_url is not None:
            data["iconUrl"] = self.icon_url
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Theme":
        """Create from dict for JSON deserialization.

        Raises:
            ThemeError: If id or name is missing, or a field has the wrong type
        """
        for key in ("id", "name"):
            if not data.get(key):
                raise ThemeError(f"Theme record is missing {key!r}")

        wallpaper_count = data.get("wallpaperCount", 0)
        if isinstance(wallpaper_count, bool) or not isinstance(wallpaper_count, int) or wallpaper_count < 0:
            raise ThemeError(f"wallpaperCount must be a non-negative integer, got {wallpaper_count!r}")
        sort_order = data.get("sortOrder", 0)
        if isinstance(sort_order, bool) or not isinstance(sort_order, int):
            raise ThemeError(f"sortOrder must be an integer, got {sort_order!r}")
        is_active = data.get("isActive", True)
        if not isinstance(is_active, bool):
            raise ThemeError(f"isActive must be a boolean, got {is_active!r}")

        try:
            created_at = parse_timestamp(data.get("createdAt"))
        except (TypeError, ValueError) as e:
            raise ThemeError(f"Invalid timestamp in theme {data['id']}: {e}") from e

        return cls(
            id=data["id"],
            name=data["name"],
            description=data.get("description") or "",
            icon_url=data.get("iconUrl"),
            wallpaper_count=wallpaper_count,
            is_active=is_active,
            sort_order=sort_order,
            created_at=created_at,
        )
