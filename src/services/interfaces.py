"""Service interfaces for abstraction and testing."""

from abc import ABC, abstractmethod

from domain.config import Config
from domain.theme import Theme
from domain.wallpaper import SearchResult, Wallpaper


class IWallpaperCatalog(ABC):
    """Interface for read access to the wallpaper catalog."""

    @abstractmethod
    def get_wallpaper(self, wallpaper_id: str) -> Wallpaper | None:
        """Get a wallpaper by ID, or None if it does not exist."""
        pass

    @abstractmethod
    def get_wallpapers(self) -> list[Wallpaper]:
        """Get all wallpapers in stored order."""
        pass

    @abstractmethod
    def search(self, query: str, page: int = 1, page_size: int = 20) -> SearchResult:
        """Search wallpapers.

        Args:
            query: Search query string
            page: Page number, 1-indexed
            page_size: Results per page

        Returns:
            SearchResult for the requested page
        """
        pass


class IThemeCatalog(ABC):
    """Interface for read access to wallpaper themes."""

    @abstractmethod
    def get_themes(self) -> list[Theme]:
        """Get all themes ordered for display."""
        pass

    @abstractmethod
    def get_theme(self, theme_id: str) -> Theme | None:
        """Get a theme by ID, or None if it does not exist."""
        pass


class IConfigService(ABC):
    """Interface for configuration management."""

    @abstractmethod
    def load_config(self) -> Config:
        """Load configuration from file."""
        pass

    @abstractmethod
    def save_config(self, config: Config) -> None:
        """Save configuration to file."""
        pass
