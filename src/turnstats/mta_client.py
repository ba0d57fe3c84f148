"""Fetches the MTA weekly turnstile export."""

import logging
from datetime import date, timedelta
from pathlib import Path
from typing import Optional, Union

import requests

from .config import (
    DATA_DIR,
    DOWNLOAD_CHUNK_SIZE,
    DOWNLOAD_TIMEOUT,
    FILENAME_FORMAT,
    MTA_TURNSTILE_URL,
)
from .errors import DownloadError

logger = logging.getLogger(__name__)


def last_saturday(today: Optional[date] = None) -> date:
    """
    Get the date of the most recent Saturday.

    The MTA publishes one file per week, named for the Saturday it ends on.
    If today is a Saturday, today is returned.
    """
    if today is None:
        today = date.today()
    # weekday(): Monday=0 ... Saturday=5, Sunday=6
    return today - timedelta(days=(today.weekday() + 2) % 7)


def turnstile_filename(day: date) -> str:
    """File name of the weekly export for a given Saturday, e.g. turnstile_230617.txt."""
    return FILENAME_FORMAT.format(day)


class TurnstileFileClient:
    """Downloads weekly turnstile files into a local data directory."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        data_dir: Union[str, Path, None] = None,
        timeout: int = DOWNLOAD_TIMEOUT,
    ):
        """
        Initialize the client.

        Args:
            base_url: Directory URL the weekly files are published under.
            data_dir: Local directory downloaded files are written to.
            timeout: Request timeout in seconds.
        """
        self.base_url = base_url or MTA_TURNSTILE_URL
        if not self.base_url.endswith("/"):
            self.base_url += "/"
        self.data_dir = Path(data_dir or DATA_DIR)
        self.timeout = timeout

    def ensure_file(self, filename: str) -> Path:
        """
        Return the local path of a weekly file, downloading it if missing.

        Args:
            filename: File name such as "turnstile_230617.txt".

        Returns:
            Path to the complete local file.

        Raises:
            DownloadError: If the file could not be fetched.
        """
        dest = self.data_dir / filename
        if dest.exists():
            logger.debug(f"Using existing {dest}")
            return dest

        logger.info(f"Getting {filename}...")
        self._download(self.base_url + filename, dest)
        return dest

    def ensure_latest(self, today: Optional[date] = None) -> Path:
        """Fetch the file for the most recent Saturday."""
        return self.ensure_file(turnstile_filename(last_saturday(today)))

    def _download(self, url: str, dest: Path) -> int:
        """Stream url into dest, only moving it into place once complete."""
        dest.parent.mkdir(parents=True, exist_ok=True)
        partial = dest.with_name(dest.name + ".part")

        logger.info(f"Downloading {url}")
        written = 0
        try:
            with requests.get(url, stream=True, timeout=self.timeout) as r:
                r.raise_for_status()
                with partial.open("wb") as f:
                    for chunk in r.iter_content(chunk_size=DOWNLOAD_CHUNK_SIZE):
                        if chunk:
                            f.write(chunk)
                            written += len(chunk)
            partial.replace(dest)
        except (requests.RequestException, OSError) as e:
            logger.error(f"Failed to download {url}: {e}")
            partial.unlink(missing_ok=True)
            raise DownloadError(f"Could not download {url}: {e}") from e

        logger.info(f"Saved {written} bytes to {dest}")
        return written
