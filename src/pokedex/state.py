"""Session state shared by every REPL command."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Optional

from pokedex.client import PokeAPIClient
from pokedex.models import Pokemon

CommandCallback = Callable[..., Awaitable[None]]


@dataclass
class CLICommand:
    """An entry in the REPL command table."""

    name: str
    description: str
    callback: CommandCallback
    usage: str = ""


@dataclass
class State:
    """Everything a command callback may read or change.

    ``next_locations_url`` and ``prev_locations_url`` track the location-area
    paging cursor; ``pokedex`` holds the pokemon caught this session, keyed
    by name.  ``running`` is cleared by the ``exit`` command.
    """

    pokeapi: PokeAPIClient
    commands: dict[str, CLICommand] = field(default_factory=dict)
    next_locations_url: Optional[str] = None
    prev_locations_url: Optional[str] = None
    pokedex: dict[str, Pokemon] = field(default_factory=dict)
    rng: random.Random = field(default_factory=random.Random)
    running: bool = True
