"""Client for the PokéAPI with a response cache."""

from __future__ import annotations

import json
import urllib.request
from typing import Any, Callable, TypeVar

from .cache import Cache
from .models import LocationArea, LocationPage, Pokemon

BASE_URL = "https://pokeapi.co/api/v2"

Fetch = Callable[[str, float], bytes]
_T = TypeVar("_T")


class ApiError(Exception):
    """A request to the API failed or returned an unreadable document."""


def _http_fetch(url: str, timeout: float) -> bytes:
    with urllib.request.urlopen(url, timeout=timeout) as resp:
        return resp.read()


class Client:
    """Fetches API documents, caching raw responses by URL."""

    def __init__(
        self,
        timeout: float = 5.0,
        cache_interval: float = 300.0,
        fetch: Fetch | None = None,
    ) -> None:
        self.timeout = timeout
        self._fetch = fetch or _http_fetch
        self._cache = Cache(cache_interval)

    def _get_json(self, url: str) -> Any:
        data = self._cache.get(url)
        if data is None:
            try:
                data = self._fetch(url, self.timeout)
            except OSError as exc:
                raise ApiError(f"request to {url} failed: {exc}") from exc
            self._cache.add(url, data)
        try:
            return json.loads(data)
        except (ValueError, UnicodeDecodeError) as exc:
            raise ApiError(f"invalid response from {url}: {exc}") from exc

    def _load(self, url: str, parse: Callable[[Any], _T]) -> _T:
        document = self._get_json(url)
        try:
            return parse(document)
        except ValueError as exc:
            raise ApiError(f"unexpected response from {url}: {exc}") from exc

    def list_locations(self, page_url: str | None = None) -> LocationPage:
        """Return a page of location areas; the first page if no URL is given."""
        url = page_url if page_url is not None else f"{BASE_URL}/location-area?offset=0&limit=20"
        return self._load(url, LocationPage.from_dict)

    def get_location(self, area: str) -> LocationArea:
        """Return the named location area."""
        return self._load(f"{BASE_URL}/location-area/{area}", LocationArea.from_dict)

    def get_pokemon(self, name: str) -> Pokemon:
        """Return the named Pokémon."""
        return self._load(f"{BASE_URL}/pokemon/{name}", Pokemon.from_dict)

    def close(self) -> None:
        """Stop the cache's background reaper."""
        self._cache.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()