"""Deployer release manifest and downloads."""

import logging
from pathlib import Path

import httpx
from pydantic import TypeAdapter, ValidationError

from deployer_action.core.constants import MANIFEST_URL
from deployer_action.core.types import ManifestEntry
from deployer_action.errors import DownloadError

logger = logging.getLogger(__name__)

_MANIFEST_ADAPTER = TypeAdapter(list[ManifestEntry])


def build_client(timeout: float = 30.0) -> httpx.Client:
    """Create an ``httpx.Client`` that follows redirects."""
    return httpx.Client(timeout=httpx.Timeout(timeout), follow_redirects=True)


class ManifestClient:
    """Fetches the Deployer manifest and release artifacts."""

    def __init__(
        self,
        client: httpx.Client | None = None,
        manifest_url: str = MANIFEST_URL,
    ) -> None:
        """Initialize manifest client.

        Args:
            client: HTTP client. A default one is built if None.
            manifest_url: URL of the JSON manifest.
        """
        self._client = client or build_client()
        self._manifest_url = manifest_url

    @property
    def manifest_url(self) -> str:
        """Get manifest URL."""
        return self._manifest_url

    def fetch_manifest(self) -> list[ManifestEntry]:
        """Fetch and parse the manifest.

        Returns:
            Manifest entries in document order.

        Raises:
            DownloadError: On network, HTTP or format errors.
        """
        try:
            response = self._client.get(self._manifest_url)
            response.raise_for_status()
            return _MANIFEST_ADAPTER.validate_json(response.content)
        except httpx.HTTPError as e:
            raise DownloadError(f'Cannot fetch "{self._manifest_url}": {e}') from e
        except ValidationError as e:
            raise DownloadError(f'Malformed manifest "{self._manifest_url}": {e}') from e

    def find_url(self, version: str) -> str:
        """Find the download URL for an exact version.

        Args:
            version: Version string, already stripped of any ``v`` prefix.

        Returns:
            Download URL.

        Raises:
            DownloadError: If the version is not listed.
        """
        for entry in self.fetch_manifest():
            if entry.version == version:
                return entry.url
        raise DownloadError(
            f'The version "{version}" does not exist in the "{self._manifest_url}" file.'
        )

    def download(self, url: str, destination: Path) -> Path:
        """Download a file.

        Args:
            url: Source URL.
            destination: Target file path, overwritten if present.

        Returns:
            The destination path.

        Raises:
            DownloadError: On network, HTTP or filesystem errors.
        """
        logger.info(f'Downloading "{url}".')
        try:
            with self._client.stream("GET", url) as response:
                response.raise_for_status()
                with open(destination, "wb") as f:
                    for chunk in response.iter_bytes():
                        f.write(chunk)
        except httpx.HTTPError as e:
            raise DownloadError(f'Cannot download "{url}": {e}') from e
        except OSError as e:
            raise DownloadError(f"Cannot write {destination}: {e}") from e
        return destination
