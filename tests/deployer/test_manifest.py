"""Tests for deployer_action.deployer.manifest module."""

from pathlib import Path

import httpx
import pytest

from deployer_action.core.constants import MANIFEST_URL
from deployer_action.deployer.manifest import ManifestClient
from deployer_action.errors import DownloadError

MANIFEST = [
    {
        "name": "deployer.phar",
        "sha1": "1111",
        "url": "https://deployer.org/releases/v7.3.1/deployer.phar",
        "version": "7.3.1",
    },
    {
        "name": "deployer.phar",
        "sha1": "2222",
        "url": "https://deployer.org/releases/v2.1.0/deployer.phar",
        "version": "v2.1.0",
    },
]


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler), follow_redirects=True)


def _serve_manifest(request: httpx.Request) -> httpx.Response:
    if str(request.url) == MANIFEST_URL:
        return httpx.Response(200, json=MANIFEST)
    return httpx.Response(200, content=b"<?php phar")


class TestManifestClient:
    """Tests for ManifestClient class."""

    def test_fetch_manifest(self) -> None:
        """Test parsing the manifest."""
        client = ManifestClient(_client(_serve_manifest))
        entries = client.fetch_manifest()

        assert [e.version for e in entries] == ["7.3.1", "v2.1.0"]
        assert entries[0].url == MANIFEST[0]["url"]

    def test_find_url(self) -> None:
        """Test exact version lookup."""
        client = ManifestClient(_client(_serve_manifest))
        assert client.find_url("7.3.1") == MANIFEST[0]["url"]

    def test_find_url_does_not_normalize_manifest(self) -> None:
        """Test that manifest versions are compared literally."""
        client = ManifestClient(_client(_serve_manifest))

        with pytest.raises(DownloadError, match='"2.1.0"') as exc_info:
            client.find_url("2.1.0")

        assert MANIFEST_URL in str(exc_info.value)

    def test_fetch_manifest_http_error(self) -> None:
        """Test that HTTP errors become DownloadError."""
        client = ManifestClient(_client(lambda request: httpx.Response(503)))

        with pytest.raises(DownloadError, match="Cannot fetch"):
            client.fetch_manifest()

    def test_fetch_manifest_network_error(self) -> None:
        """Test that transport errors become DownloadError."""

        def _fail(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = ManifestClient(_client(_fail))

        with pytest.raises(DownloadError):
            client.fetch_manifest()

    def test_fetch_manifest_malformed(self) -> None:
        """Test that a non-list payload becomes DownloadError."""
        client = ManifestClient(_client(lambda request: httpx.Response(200, json={"a": 1})))

        with pytest.raises(DownloadError, match="Malformed manifest"):
            client.fetch_manifest()

    def test_follows_redirects(self) -> None:
        """Test that the manifest URL may redirect."""

        def _handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/manifest.json":
                return httpx.Response(302, headers={"Location": "https://cdn.example.com/m.json"})
            return httpx.Response(200, json=MANIFEST)

        client = ManifestClient(_client(_handler))
        assert len(client.fetch_manifest()) == 2

    def test_download(self, temp_dir: Path) -> None:
        """Test downloading to a destination file."""
        client = ManifestClient(_client(_serve_manifest))
        destination = temp_dir / "deployer.phar"

        result = client.download(MANIFEST[0]["url"], destination)

        assert result == destination
        assert destination.read_bytes() == b"<?php phar"

    def test_download_http_error(self, temp_dir: Path) -> None:
        """Test that a missing artifact becomes DownloadError."""
        client = ManifestClient(_client(lambda request: httpx.Response(404)))

        with pytest.raises(DownloadError, match="Cannot download"):
            client.download("https://example.com/missing.phar", temp_dir / "deployer.phar")

    def test_download_unwritable(self, temp_dir: Path) -> None:
        """Test that filesystem errors become DownloadError."""
        client = ManifestClient(_client(_serve_manifest))

        with pytest.raises(DownloadError, match="Cannot write"):
            client.download(MANIFEST[0]["url"], temp_dir / "missing" / "deployer.phar")

    def test_manifest_url(self) -> None:
        """Test the default manifest URL."""
        client = ManifestClient(_client(_serve_manifest))
        assert client.manifest_url == "https://deployer.org/manifest.json"
