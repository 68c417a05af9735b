"""HTTP client module for pokedex.

Provides :class:`PokeAPIClient`, an :mod:`httpx`-based async client that
puts a :class:`~pokedex.cache.TTLCache` in front of every read.

Example::

    from pokedex.client import PokeAPIClient

    async with PokeAPIClient() as api:
        pikachu = await api.fetch_pokemon("pikachu")
"""

from pokedex.client.pokeapi import PokeAPIClient

__all__ = ["PokeAPIClient"]
