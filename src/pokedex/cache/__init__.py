"""In-memory response caching for pokedex.

This package provides :class:`TTLCache`, a time-expiring cache swept by a
background thread.  The cache-aside client
(:class:`~pokedex.client.pokeapi.PokeAPIClient`) keys it by request URL and
its lifetime is controlled by the ``cache`` section of
:class:`~pokedex.models.PokedexConfig`.
"""

from pokedex.cache.ttl_cache import CacheEntry, TTLCache, is_expired

__all__ = ["CacheEntry", "TTLCache", "is_expired"]
