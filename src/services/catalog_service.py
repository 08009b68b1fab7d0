"""Read-only wallpaper catalog backed by a JSON file."""

import json
from pathlib import Path

from rapidfuzz import process, utils

from domain.exceptions import ValidationError, WallpaperError
from domain.wallpaper import SearchResult, Wallpaper
from services.base import BaseService
from services.interfaces import IWallpaperCatalog

MAX_PAGE_SIZE = 100
MAX_QUERY_LENGTH = 200


class CatalogService(BaseService, IWallpaperCatalog):
    """Service for browsing and searching wallpapers stored in wallpapers.json.

    The file is re-read on every call so edits made by other processes are
    picked up; the last writer wins.
    """

    FUZZY_THRESHOLD = 60

    def __init__(self, wallpapers_file: Path) -> None:
        """Initialize catalog service.

        Args:
            wallpapers_file: Path to the JSON array of wallpaper records
        """
        super().__init__()
        self.wallpapers_file = wallpapers_file

    def _load_wallpapers(self) -> list[Wallpaper]:
        """Load wallpapers from file.

        Returns:
            List of Wallpaper domain models, empty if the file does not exist

        Raises:
            ServiceError: If the file cannot be read or is not valid JSON
        """
        if not self.wallpapers_file.exists():
            self.log_debug(f"No catalog at {self.wallpapers_file}, treating as empty")
            return []

        try:
            with open(self.wallpapers_file, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            raise self.service_error(
                f"Failed to load wallpapers from {self.wallpapers_file}", e
            ) from e

        if not isinstance(data, list):
            self.log_warning(f"Catalog {self.wallpapers_file} is not a JSON array")
            return []

        wallpapers: list[Wallpaper] = []
        for item in data:
            try:
                wallpapers.append(Wallpaper.from_dict(item))
            except (WallpaperError, AttributeError, TypeError) as e:
                self.log_warning(f"Skipping malformed wallpaper record: {e}")

        self.log_debug(f"Loaded {len(wallpapers)} wallpapers")
        return wallpapers

    def get_wallpapers(self) -> list[Wallpaper]:
        return self._load_wallpapers()

    def get_wallpaper(self, wallpaper_id: str) -> Wallpaper | None:
        """Get wallpaper by ID.

        Args:
            wallpaper_id: ID of wallpaper to look up

        Returns:
            First wallpaper with that ID, or None
        """
        for wallpaper in self._load_wallpapers():
            if wallpaper.id == wallpaper_id:
                return wallpaper
        return None

    def get_wallpapers_by_theme(self, theme_id: str) -> list[Wallpaper]:
        return [w for w in self._load_wallpapers() if w.theme_id == theme_id]

    def search(self, query: str, page: int = 1, page_size: int = 20) -> SearchResult:
        """Search title, description and tags by case-insensitive substring.

        Args:
            query: Search query string
            page: Page number, 1-indexed
            page_size: Results per page, at most 100

        Returns:
            SearchResult for the requested page

        Raises:
            ValidationError: If the query is blank or too long, or paging is out of range
        """
        if not query or not query.strip():
            raise ValidationError("Search query must not be empty")
        if len(query) > MAX_QUERY_LENGTH:
            raise ValidationError(f"Search query must be at most {MAX_QUERY_LENGTH} characters")
        if page < 1 or not 1 <= page_size <= MAX_PAGE_SIZE:
            raise ValidationError(
                f"Invalid pagination: page={page}, page_size={page_size}"
            )

        matches = [w for w in self._load_wallpapers() if w.matches_query(query)]
        start = (page - 1) * page_size
        end = start + page_size

        self.log_debug(f"Search {query!r} matched {len(matches)} wallpapers")
        return SearchResult(
            wallpapers=matches[start:end],
            total_count=len(matches),
            page=page,
            page_size=page_size,
            has_more=end < len(matches),
        )

    def fuzzy_search(self, query: str, threshold: int | None = None) -> list[Wallpaper]:
        """Search wallpapers using fuzzy matching.

        Args:
            query: Search query string, typos tolerated
            threshold: Minimum rapidfuzz score (0-100) for a match

        Returns:
            Matching wallpapers, best match first
        """
        wallpapers = self._load_wallpapers()

        if not query:
            return wallpapers
        if not wallpapers:
            return []

        cutoff = self.FUZZY_THRESHOLD if threshold is None else threshold
        search_strings = [w.search_text for w in wallpapers]
        results = process.extract(
            query,
            search_strings,
            processor=utils.default_process,
            limit=len(wallpapers),
        )
        return [wallpapers[index] for _, score, index in results if score >= cutoff]

    def get_popular(self, limit: int = 10) -> list[Wallpaper]:
        """Most liked wallpapers first."""
        wallpapers = self._load_wallpapers()
        return sorted(wallpapers, key=lambda w: w.like_count, reverse=True)[:limit]

    def get_latest(self, limit: int = 10) -> list[Wallpaper]:
        """Most recently created wallpapers first."""
        wallpapers = self._load_wallpapers()
        return sorted(wallpapers, key=lambda w: w.created_at, reverse=True)[:limit]
