"""IMediaProvider adapters: Unsplash (image) and Jamendo (music)."""

from typing import Any, Dict

import requests

from summary_shorts.domain.models import MediaKind
from summary_shorts.errors import NotFoundError, ProviderError
from summary_shorts.ports.interfaces import IMediaProvider


def _get(session, url: str, params: Dict[str, Any], timeout: float, provider: str):
    """GET the search endpoint; transport failures become ProviderError, status is left to the caller."""
    try:
        response = session.get(url, params=params, timeout=timeout)
    except requests.RequestException as e:
        raise ProviderError(f"{provider} request failed: {e}") from e
    return response


def _parse_json(response, provider: str):
    try:
        return response.json()
    except ValueError as e:
        raise ProviderError(f"{provider} returned invalid JSON: {e}", status_code=response.status_code) from e


class UnsplashImageProvider(IMediaProvider):
    """Random photo matching the keyword; Unsplash answers 404 when nothing matches."""

    kind = MediaKind.IMAGE

    def __init__(self, access_key: str, api_url: str = "https://api.unsplash.com/photos/random", timeout: float = 30):
        self.access_key = access_key
        self.api_url = api_url
        self.timeout = timeout

    def search(self, session, keyword: str) -> str:
        params = {"query": keyword, "client_id": self.access_key}
        response = _get(session, self.api_url, params, self.timeout, "Unsplash")

        if response.status_code == 404:
            raise NotFoundError(f"Unsplash found no photo for '{keyword}'", status_code=404)
        if not response.ok:
            raise ProviderError(
                f"Unsplash API error (HTTP {response.status_code}): {response.text[:200]}",
                status_code=response.status_code,
            )

        data = _parse_json(response, "Unsplash")
        if isinstance(data, list):
            if not data:
                raise NotFoundError(f"Unsplash found no photo for '{keyword}'")
            data = data[0]
        try:
            return data["urls"]["regular"]
        except (KeyError, TypeError) as e:
            raise ProviderError(f"Unsplash response has no urls.regular: {e}") from e


class JamendoMusicProvider(IMediaProvider):
    """First track of a size-1 Jamendo search."""

    kind = MediaKind.MUSIC

    def __init__(self, client_id: str, api_url: str = "https://api.jamendo.com/v3.0/tracks/", timeout: float = 30):
        self.client_id = client_id
        self.api_url = api_url
        self.timeout = timeout

    def search(self, session, keyword: str) -> str:
        params = {
            "client_id": self.client_id,
            "format": "json",
            "limit": 1,
            "search": keyword,
        }
        response = _get(session, self.api_url, params, self.timeout, "Jamendo")
        if not response.ok:
            raise ProviderError(
                f"Jamendo API error (HTTP {response.status_code}): {response.text[:200]}",
                status_code=response.status_code,
            )

        data = _parse_json(response, "Jamendo")
        if not isinstance(data, dict):
            raise ProviderError("Jamendo response is not a JSON object")

        # Jamendo reports API errors inside a 200 body
        headers = data.get("headers") or {}
        if headers.get("status") == "failed":
            raise ProviderError(
                f"Jamendo API error {headers.get('code')}: {headers.get('error_message', '')}"
            )

        results = data.get("results") or []
        if not results:
            raise NotFoundError(f"Jamendo found no track for '{keyword}'")
        audio_url = results[0].get("audio")
        if not audio_url:
            raise NotFoundError(f"Jamendo track for '{keyword}' has no audio URL")
        return audio_url
