"""Base service class with common functionality."""

from abc import ABC
from logging import Logger, getLogger

from domain.exceptions import ServiceError


class BaseService(ABC):
    """Base class for gallery services with logging support."""

    LOGGER_PREFIX = "gallery"

    def __init__(self) -> None:
        self._logger: Logger = getLogger(f"{self.LOGGER_PREFIX}.{self.__class__.__name__}")

    @property
    def logger(self) -> Logger:
        return self._logger

    def log_debug(self, message: str) -> None:
        self._logger.debug(message)

    def log_info(self, message: str) -> None:
        self._logger.info(message)

    def log_warning(self, message: str) -> None:
        self._logger.warning(message)

    def log_error(self, message: str, exc_info: bool = False) -> None:
        self._logger.error(message, exc_info=exc_info)

    def service_error(self, message: str, cause: Exception) -> ServiceError:
        """Log a failure with traceback and build the ServiceError to raise.

        Args:
            message: Human readable description of what failed
            cause: Underlying exception

        Returns:
            ServiceError to be raised ``from cause`` by the caller
        """
        self.log_error(f"{message}: {cause}", exc_info=True)
        return ServiceError(f"{message}: {cause}")
