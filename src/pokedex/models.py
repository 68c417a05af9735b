"""Canonical Pydantic models shared across all pokedex modules.

The models fall into two groups:

**Configuration models** -- serialised as JSON in the user's config directory:
    :class:`CacheConfig`, :class:`RequestConfig`, and :class:`PokedexConfig`.

**Resource models** -- decoded from PokeAPI responses by the client:
    :class:`NamedResource`, :class:`LocationAreaPage`, :class:`LocationArea`,
    and :class:`Pokemon` (plus their nested association records).

Resource models only declare the subset of fields the CLI consumes.  Unknown
keys in a response are ignored so that schema additions on the remote side
never break decoding.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_BASE_URL = "https://pokeapi.co/api/v2"


# --- Configuration ---


class CacheConfig(BaseModel):
    """In-memory response cache settings."""

    ttl_seconds: float = Field(
        default=300,
        gt=0,
        allow_inf_nan=False,
        description="Cache TTL (and sweep interval) in seconds",
    )


class RequestConfig(BaseModel):
    """HTTP request settings applied to every outbound call."""

    timeout: float = Field(default=30, description="Request timeout in seconds")
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")


class PokedexConfig(BaseModel):
    """User-wide configuration persisted at ``~/.config/pokedex/config.json``.

    Loaded by :func:`~pokedex.config.load_config` and layered with
    environment variables and CLI flags by
    :func:`~pokedex.config.resolve_config`.
    """

    base_url: str = Field(default=DEFAULT_BASE_URL, description="PokeAPI root URL")
    page_size: int = Field(default=20, gt=0, description="Location areas per page")
    prompt: str = "Pokedex > "
    cache: CacheConfig = Field(default_factory=CacheConfig)
    request: RequestConfig = Field(default_factory=RequestConfig)


# --- PokeAPI resources ---


class _Resource(BaseModel):
    model_config = ConfigDict(extra="ignore")


class NamedResource(_Resource):
    """A ``{name, url}`` pointer to another PokeAPI resource."""

    name: str
    url: str = ""


class LocationAreaPage(_Resource):
    """One page of the ``/location-area`` listing.

    ``next`` and ``previous`` hold the absolute URLs of the neighbouring
    pages, or ``None`` at either end of the listing.
    """

    count: int
    next: Optional[str] = None
    previous: Optional[str] = None
    results: list[NamedResource] = Field(default_factory=list)


class LanguageName(_Resource):
    name: str
    language: NamedResource


class PokemonEncounter(_Resource):
    pokemon: NamedResource
    version_details: list[Any] = Field(default_factory=list)


class LocationArea(_Resource):
    """A single location area and the pokemon that can be encountered there."""

    id: int
    name: str
    game_index: int = 0
    encounter_method_rates: list[Any] = Field(default_factory=list)
    location: Optional[NamedResource] = None
    names: list[LanguageName] = Field(default_factory=list)
    pokemon_encounters: list[PokemonEncounter] = Field(default_factory=list)


class PokemonAbility(_Resource):
    ability: NamedResource
    is_hidden: bool = False
    slot: int = 0


class PokemonStat(_Resource):
    base_stat: int
    effort: int = 0
    stat: NamedResource


class PokemonType(_Resource):
    slot: int = 0
    type: NamedResource


class Pokemon(_Resource):
    """A pokemon record as returned by ``/pokemon/{name}``.

    ``base_experience`` is ``null`` for a handful of entries upstream, so it
    is optional here.
    """

    id: int
    name: str
    base_experience: Optional[int] = None
    height: int = 0
    weight: int = 0
    abilities: list[PokemonAbility] = Field(default_factory=list)
    stats: list[PokemonStat] = Field(default_factory=list)
    types: list[PokemonType] = Field(default_factory=list)


Resource = Union[LocationAreaPage, LocationArea, Pokemon]
"""Closed union of every shape the client stores in its cache."""
