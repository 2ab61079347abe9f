"""
Media acquisition: search a provider, download the first result, write it atomically.
The fallback resolver is the only place in the pipeline where errors are recovered.
"""

import os
import tempfile
from typing import Dict, Iterable, Optional

import requests

from summary_shorts.domain.models import Fetched, FetchOutcome, MediaAsset, MediaKind, Recovered
from summary_shorts.errors import DownloadError, ProviderError
from summary_shorts.ports.interfaces import IMediaProvider

CHUNK_SIZE = 64 * 1024


class MediaFetcher:
    """
    Fetches one media file per call from the provider registered for its kind.
    Exactly one file write per successful call; zero on failure.
    """

    def __init__(
        self,
        providers: Iterable[IMediaProvider],
        session: Optional[requests.Session] = None,
        timeout: float = 30,
    ):
        self._providers: Dict[MediaKind, IMediaProvider] = {p.kind: p for p in providers}
        self._session = session if session is not None else requests.Session()
        self._timeout = timeout

    def fetch(self, kind: MediaKind, keyword: str, destination_path: str) -> MediaAsset:
        """Search, download and persist. Raises NotFoundError, ProviderError or DownloadError."""
        kind = MediaKind(kind)
        provider = self._providers.get(kind)
        if provider is None:
            raise ProviderError(f"No provider registered for {kind.value}")

        asset_url = provider.search(self._session, keyword)
        print(f"  🔗 {kind.value} URL: {asset_url}")
        self._download(asset_url, destination_path)
        return MediaAsset(kind=kind, source_url=asset_url, local_path=destination_path)

    def _download(self, url: str, destination_path: str) -> None:
        try:
            response = self._session.get(url, stream=True, timeout=self._timeout)
        except requests.RequestException as e:
            raise DownloadError(f"Download failed: {e}") from e

        try:
            if not response.ok:
                raise DownloadError(
                    f"Download failed with HTTP {response.status_code}: {url}",
                    status_code=response.status_code,
                )
            self._write_atomically(response.iter_content(chunk_size=CHUNK_SIZE), destination_path)
        finally:
            response.close()

    def _write_atomically(self, chunks: Iterable[bytes], destination_path: str) -> None:
        """Stream into a temp file beside the destination, then rename over it."""
        directory = os.path.dirname(os.path.abspath(destination_path))
        os.makedirs(directory, exist_ok=True)
        fd, temp_path = tempfile.mkstemp(
            prefix=f".{os.path.basename(destination_path)}.", suffix=".part", dir=directory
        )
        try:
            with os.fdopen(fd, "wb") as f:
                for chunk in chunks:
                    if chunk:
                        f.write(chunk)
            os.replace(temp_path, destination_path)
        except requests.RequestException as e:
            os.unlink(temp_path)
            raise DownloadError(f"Download interrupted: {e}") from e
        except BaseException:
            os.unlink(temp_path)
            raise


class FallbackResolver:
    """Wraps MediaFetcher; any failure becomes a Recovered outcome pointing at the default file."""

    def __init__(self, fetcher: MediaFetcher):
        self._fetcher = fetcher

    def resolve(
        self,
        kind: MediaKind,
        keyword: str,
        destination_path: str,
        default_path: str,
    ) -> FetchOutcome:
        try:
            kind = MediaKind(kind)
            asset = self._fetcher.fetch(kind, keyword, destination_path)
        except Exception as e:
            label = getattr(kind, "value", kind)
            print(f"  ⚠️  {label} fetch failed ({type(e).__name__}: {e}). Using default: {default_path}")
            fallback = MediaAsset(
                kind=kind,
                source_url="",
                local_path=default_path,
                is_fallback=True,
            )
            return Recovered(asset=fallback, error=e)

        print(f"  ✅ {asset.kind.value} saved to: {asset.local_path}")
        return Fetched(asset=asset)
