"""Download service: resolution lookup and file streaming."""

import asyncio
from collections.abc import Callable
from pathlib import Path
from urllib.parse import urljoin

import aiohttp

from domain.config import DEFAULT_BASE_URL
from domain.exceptions import (
    ResolutionFormatError,
    ResolutionUnavailableError,
    WallpaperNotFoundError,
)
from domain.matching import find_best_match
from domain.wallpaper import (
    AvailableResolution,
    DownloadInfo,
    Resolution,
    format_resolution,
    parse_resolution,
    resolution_label,
)
from services.base import BaseService
from services.interfaces import IWallpaperCatalog


class DownloadService(BaseService):
    """Resolves download requests to a stored resolution and fetches the file."""

    CHUNK_SIZE = 8192

    def __init__(self, catalog: IWallpaperCatalog, base_url: str = DEFAULT_BASE_URL) -> None:
        """Initialize download service.

        Args:
            catalog: Catalog used to look wallpapers up by ID
            base_url: Server URL that relative file URLs are resolved against
        """
        super().__init__()
        self.catalog = catalog
        self.base_url = base_url
        self._session: aiohttp.ClientSession | None = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
        return self._session

    def resolve(self, wallpaper_id: str, resolution: str) -> Resolution:
        """Find the stored resolution to serve for a request.

        Args:
            wallpaper_id: ID of the wallpaper to download
            resolution: Requested size as ``"<width>x<height>"``

        Returns:
            The exact match if one exists, otherwise the nearest resolution

        Raises:
            ResolutionFormatError: If the resolution string is malformed
            WallpaperNotFoundError: If no wallpaper has that ID
            ResolutionUnavailableError: If the wallpaper lists no resolutions
        """
        target = parse_resolution(resolution)
        if target is None:
            self.log_warning(f"Rejected resolution {resolution!r} for {wallpaper_id}")
            raise ResolutionFormatError(resolution)

        wallpaper = self.catalog.get_wallpaper(wallpaper_id)
        if wallpaper is None:
            raise WallpaperNotFoundError(wallpaper_id)

        match = find_best_match(wallpaper.resolutions, target.width, target.height)
        if match is None:
            raise ResolutionUnavailableError(wallpaper_id)

        if (match.width, match.height) != (target.width, target.height):
            self.log_info(f"Serving {match} for {wallpaper_id} (requested {target})")
        return match

    def info(self, wallpaper_id: str) -> DownloadInfo:
        """List the resolutions a wallpaper can be downloaded in.

        Raises:
            WallpaperNotFoundError: If no wallpaper has that ID
        """
        wallpaper = self.catalog.get_wallpaper(wallpaper_id)
        if wallpaper is None:
            raise WallpaperNotFoundError(wallpaper_id)

        available = []
        for res in wallpaper.resolutions:
            size = format_resolution(res.width, res.height)
            available.append(
                AvailableResolution(
                    width=res.width,
                    height=res.height,
                    file_size=res.file_size,
                    download_url=f"/api/download/{wallpaper_id}/{size}",
                    file_url=self.file_url_for(res),
                    label=resolution_label(res.width, res.height),
                )
            )
        return DownloadInfo(
            wallpaper_id=wallpaper.id, title=wallpaper.title, available_resolutions=available
        )

    def file_url_for(self, resolution: Resolution) -> str:
        """Absolute URL for a resolution's file."""
        if resolution.file_url.startswith(("http://", "https://")):
            return resolution.file_url
        path = resolution.file_url.lstrip("/")
        return urljoin(self.base_url.rstrip("/") + "/", path)

    async def download(
        self,
        wallpaper_id: str,
        resolution: str,
        dest: Path,
        progress_callback: "Callable[[int, int], None] | None" = None,
    ) -> Resolution:
        """Resolve a request and stream the matched file to ``dest``.

        Args:
            wallpaper_id: ID of the wallpaper to download
            resolution: Requested size as ``"<width>x<height>"``
            dest: Destination path
            progress_callback: Optional callback receiving (downloaded, total) bytes

        Returns:
            The resolution that was downloaded

        Raises:
            ServiceError: If the transfer fails

        A partial file is removed whenever the transfer does not complete,
        including on cancellation.
        """
        match = self.resolve(wallpaper_id, resolution)
        url = self.file_url_for(match)
        session = await self._get_session()
        writing = completed = False

        try:
            self.log_info(f"Downloading {wallpaper_id} at {match} from {url}")
            dest.parent.mkdir(parents=True, exist_ok=True)

            async with session.get(url) as response:
                response.raise_for_status()
                total_size = int(response.headers.get("content-length", match.file_size))
                downloaded = 0

                writing = True
                with open(dest, "wb") as f:
                    async for chunk in response.content.iter_chunked(self.CHUNK_SIZE):
                        f.write(chunk)
                        downloaded += len(chunk)

                        if progress_callback and total_size > 0:
                            progress_callback(downloaded, total_size)

            completed = True
            self.log_debug(f"Downloaded {downloaded} bytes to {dest}")
            return match
        except (aiohttp.ClientError, asyncio.TimeoutError, OSError) as e:
            raise self.service_error(f"Failed to download wallpaper {wallpaper_id}", e) from e
        finally:
            if writing and not completed:
                dest.unlink(missing_ok=True)

    async def close(self) -> None:
        """Close aiohttp session."""
        if self._session and not self._session.closed:
            await self._session.close()
            self.log_debug("Closed aiohttp session")
