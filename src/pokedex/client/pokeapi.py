"""Asynchronous cache-aside client for the PokeAPI.

:class:`PokeAPIClient` wraps :class:`httpx.AsyncClient` and exposes the three
read operations the CLI needs.  Every operation follows the same steps:

1. Build the request URL from the operation's logical key.
2. Look the URL up in the :class:`~pokedex.cache.TTLCache`; a hit returns
   the cached model without network I/O.
3. On a miss, ``GET`` the URL.  Transport failures raise
   :class:`~pokedex.exceptions.NetworkFailure`, non-2xx statuses raise
   :class:`~pokedex.exceptions.RemoteError`.
4. Decode the body into the operation's Pydantic model
   (:class:`~pokedex.exceptions.DecodeError` on mismatch).
5. Store the model under the URL and return it.

Failures are never cached, nothing is retried, and a failed refresh never
falls back to stale data.  Two concurrent fetches of the same URL both miss
and both hit the network; the later write wins.

See Also:
    :mod:`pokedex.client.response` for status mapping and decoding.
"""

from __future__ import annotations

from typing import Optional, TypeVar

import httpx

from pokedex.cache import TTLCache
from pokedex.client.response import decode_response, raise_for_status
from pokedex.exceptions import InvalidUsageError, NetworkFailure
from pokedex.models import (
    DEFAULT_BASE_URL,
    LocationArea,
    LocationAreaPage,
    Pokemon,
    PokedexConfig,
    Resource,
)
from pokedex.output import get_output

R = TypeVar("R", LocationAreaPage, LocationArea, Pokemon)


class PokeAPIClient:
    """Cache-aside PokeAPI client.  Must be used as an async context manager.

    Args:
        base_url: PokeAPI root, e.g. ``https://pokeapi.co/api/v2``.
        page_size: Number of location areas on the first page.
        cache: Cache shared with the caller.  When ``None`` the client
            creates its own from *ttl_seconds* and stops it on close; a
            cache passed in is left running for its owner to stop.
        ttl_seconds: TTL of the client-owned cache.
        timeout: Request timeout in seconds.
        verify_ssl: Verify SSL certificates.
        transport: Optional :mod:`httpx` transport (tests use
            :class:`httpx.MockTransport`).

    Example::

        async with PokeAPIClient() as api:
            page = await api.fetch_locations()
            area = await api.fetch_location(page.results[0].name)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        page_size: int = 20,
        cache: Optional[TTLCache[Resource]] = None,
        ttl_seconds: float = 300,
        timeout: float = 30,
        verify_ssl: bool = True,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._page_size = page_size
        self._owns_cache = cache is None
        self._cache: TTLCache[Resource] = cache if cache is not None else TTLCache(ttl_seconds)
        self._timeout = timeout
        self._verify_ssl = verify_ssl
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @classmethod
    def from_config(
        cls,
        config: PokedexConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> PokeAPIClient:
        """Build a client (with its own cache) from resolved configuration."""
        return cls(
            base_url=config.base_url,
            page_size=config.page_size,
            ttl_seconds=config.cache.ttl_seconds,
            timeout=config.request.timeout,
            verify_ssl=config.request.verify_ssl,
            transport=transport,
        )

    # ------------------------------------------------------------------ #
    # Async context manager
    # ------------------------------------------------------------------ #

    async def __aenter__(self) -> PokeAPIClient:
        self._client = httpx.AsyncClient(
            timeout=self._timeout,
            verify=self._verify_ssl,
            follow_redirects=True,
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP connection pool and stop the cache if this client owns it."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
        if self._owns_cache:
            self._cache.stop()

    @property
    def cache(self) -> TTLCache[Resource]:
        return self._cache

    # ------------------------------------------------------------------ #
    # URL construction
    # ------------------------------------------------------------------ #

    def first_page_url(self) -> str:
        """Canonical URL of the first location-area page."""
        return f"{self._base_url}/location-area?offset=0&limit={self._page_size}"

    def location_url(self, name: str) -> str:
        return f"{self._base_url}/location-area/{_slug(name)}"

    def pokemon_url(self, name: str) -> str:
        return f"{self._base_url}/pokemon/{_slug(name)}"

    # ------------------------------------------------------------------ #
    # Read operations
    # ------------------------------------------------------------------ #

    async def fetch_locations(self, page_url: Optional[str] = None) -> LocationAreaPage:
        """Fetch a page of location areas.

        Args:
            page_url: A ``next``/``previous`` URL from an earlier page, or
                ``None`` for the first page.
        """
        url = page_url or self.first_page_url()
        return await self._fetch(url, LocationAreaPage)

    async def fetch_location(self, name: str) -> LocationArea:
        """Fetch one location area by name."""
        return await self._fetch(self.location_url(name), LocationArea)

    async def fetch_pokemon(self, name: str) -> Pokemon:
        """Fetch one pokemon by name."""
        return await self._fetch(self.pokemon_url(name), Pokemon)

    # ------------------------------------------------------------------ #
    # Private helpers
    # ------------------------------------------------------------------ #

    async def _fetch(self, url: str, model: type[R]) -> R:
        output = get_output()

        cached = self._cache.get(url)
        if isinstance(cached, model):
            output.debug(f"Cache hit for: {url}")
            return cached

        output.debug(f"Cache miss, fetching: {url}")
        response = await self._get(url)
        raise_for_status(response)
        data = decode_response(response, model)

        self._cache.put(url, data)
        return data

    async def _get(self, url: str) -> httpx.Response:
        assert self._client is not None, "Client not initialised -- use as async context manager"
        try:
            return await self._client.get(url)
        except httpx.RequestError as exc:
            raise NetworkFailure(f"Request to {url} failed: {exc}") from exc


def _slug(name: str) -> str:
    """Normalise a resource name into a PokeAPI path segment."""
    slug = name.strip().lower()
    if not slug:
        raise InvalidUsageError("A resource name is required")
    return slug
