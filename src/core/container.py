"""Dependency injection container for service management."""

from collections.abc import Callable
from dataclasses import dataclass
from logging import getLogger
from pathlib import Path
from typing import Any, TypeVar

from domain.config import DEFAULT_BASE_URL, Config

T = TypeVar("T")


@dataclass
class ServiceConfig:
    """Settings handed to services at construction time."""

    data_dir: Path | None = None
    download_dir: Path | None = None
    base_url: str = DEFAULT_BASE_URL
    admin_secret_key: str | None = None
    config_file: Path | None = None

    @classmethod
    def from_config(cls, config: Config, config_file: Path | None = None) -> "ServiceConfig":
        return cls(
            data_dir=config.resolved_data_dir,
            download_dir=config.resolved_download_dir,
            base_url=config.base_url,
            admin_secret_key=config.admin_secret_key,
            config_file=config_file,
        )

    @property
    def wallpapers_file(self) -> Path:
        return Config(data_dir=self.data_dir).wallpapers_file

    @property
    def themes_file(self) -> Path:
        return Config(data_dir=self.data_dir).themes_file


class ServiceContainer:
    """Dependency injection container for managing service lifecycles."""

    def __init__(self, config: ServiceConfig) -> None:
        self._config = config
        self._services: dict[type, object] = {}
        self._factories: dict[type, Callable[[], Any]] = {}
        self._logger = getLogger(__name__)

    @property
    def config(self) -> ServiceConfig:
        return self._config

    def register(self, service_class: type[T], factory: Callable[[], T]) -> None:
        """Register a service factory for lazy instantiation."""
        self._factories[service_class] = factory
        self._logger.debug(f"Registered factory for {service_class.__name__}")

    def register_instance(self, service_class: type[T], instance: T) -> None:
        """Register a pre-instantiated service instance."""
        self._services[service_class] = instance
        self._logger.debug(f"Registered instance of {service_class.__name__}")

    def get(self, service_class: type[T]) -> T:
        """Get or create service instance."""
        if service_class not in self._services:
            self._create_service(service_class)
        return self._services[service_class]

    def _create_service(self, service_class: type[T]) -> T:
        if service_class not in self._factories:
            raise KeyError(f"No factory registered for {service_class.__name__}")

        instance = self._factories[service_class]()
        self._services[service_class] = instance
        self._logger.debug(f"Created instance of {service_class.__name__}")
        return instance

    def reset(self) -> None:
        """Drop created instances; factories stay registered."""
        self._services.clear()
        self._logger.debug("Container reset")


def build_container(config: ServiceConfig) -> ServiceContainer:
    """Create a container with the gallery services wired to ``config``."""
    from services.catalog_service import CatalogService
    from services.config_service import ConfigService
    from services.download_service import DownloadService
    from services.theme_service import ThemeService

    container = ServiceContainer(config)
    container.register(ConfigService, lambda: ConfigService(config_file=config.config_file))
    container.register(CatalogService, lambda: CatalogService(config.wallpapers_file))
    container.register(ThemeService, lambda: ThemeService(config.themes_file))
    container.register(
        DownloadService,
        lambda: DownloadService(container.get(CatalogService), base_url=config.base_url),
    )
    return container
