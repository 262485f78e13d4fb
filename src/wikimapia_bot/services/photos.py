"""Download place photos to local files for upload."""

import logging
import os
import tempfile
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Protocol
from urllib.parse import urlsplit

from wikimapia_bot.domain.places import PlacePhoto

DEFAULT_PHOTO_LIMIT = 3

_logger = logging.getLogger(__name__)


class PhotoDownloader(Protocol):
    """Interface for fetching a remote file."""

    async def download(self, url: str, destination: Path) -> None:
        """Write the resource at ``url`` into ``destination``."""


@dataclass
class PhotoFetchPipeline:
    """Fetch up to ``limit`` photos, skipping any that fail."""

    downloader: PhotoDownloader
    limit: int = DEFAULT_PHOTO_LIMIT
    temp_dir: str | None = None

    async def fetch_up_to(
        self, photos: Sequence[PlacePhoto], limit: int | None = None
    ) -> list[Path]:
        """Return local files for the first photos that download successfully."""
        wanted = self.limit if limit is None else limit
        fetched: list[Path] = []
        for photo in photos:
            if len(fetched) >= wanted:
                break
            try:
                fetched.append(await self._fetch(photo.big_url))
            except Exception:
                _logger.warning("Skipping photo %s", photo.big_url, exc_info=True)
        return fetched

    async def _fetch(self, url: str) -> Path:
        if not url:
            raise ValueError("Photo has no URL")
        extension = PurePosixPath(urlsplit(url).path).suffix
        handle, name = tempfile.mkstemp(prefix="wiki", dir=self.temp_dir)
        os.close(handle)
        downloaded = Path(name)
        try:
            await self.downloader.download(url, downloaded)
            # Telegram sniffs the upload type from the file name.
            return downloaded.rename(downloaded.with_name(downloaded.name + extension))
        except Exception:
            downloaded.unlink(missing_ok=True)
            raise


def remove_files(paths: Sequence[Path]) -> None:
    """Delete local files, ignoring ones already gone."""
    for path in paths:
        try:
            path.unlink(missing_ok=True)
        except OSError:
            _logger.warning("Failed to remove %s", path, exc_info=True)
