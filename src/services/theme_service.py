"""Read-only theme catalog backed by a JSON file."""

import json
from pathlib import Path

from domain.exceptions import ThemeError
from domain.theme import Theme
from services.base import BaseService
from services.interfaces import IThemeCatalog


class ThemeService(BaseService, IThemeCatalog):
    """Service for listing the themes stored in themes.json."""

    def __init__(self, themes_file: Path) -> None:
        """Initialize theme service.

        Args:
            themes_file: Path to the JSON array of theme records
        """
        super().__init__()
        self.themes_file = themes_file

    def _load_themes(self) -> list[Theme]:
        """Load themes from file.

        Raises:
            ServiceError: If the file cannot be read or is not valid JSON
        """
        if not self.themes_file.exists():
            self.log_debug(f"No themes at {self.themes_file}, treating as empty")
            return []

        try:
            with open(self.themes_file, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            raise self.service_error(f"Failed to load themes from {self.themes_file}", e) from e

        if not isinstance(data, list):
            self.log_warning(f"Theme file {self.themes_file} is not a JSON array")
            return []

        themes: list[Theme] = []
        for item in data:
            try:
                themes.append(Theme.from_dict(item))
            except (ThemeError, AttributeError, TypeError) as e:
                self.log_warning(f"Skipping malformed theme record: {e}")
        return themes

    def get_themes(self) -> list[Theme]:
        """All themes ordered by sort order; equal orders keep stored order."""
        return sorted(self._load_themes(), key=lambda t: t.sort_order)

    def get_active_themes(self) -> list[Theme]:
        return [t for t in self.get_themes() if t.is_active]

    def get_theme(self, theme_id: str) -> Theme | None:
        for theme in self._load_themes():
            if theme.id == theme_id:
                return theme
        return None

    def theme_exists(self, theme_id: str) -> bool:
        return self.get_theme(theme_id) is not None

    def count(self) -> int:
        return len(self._load_themes())
