"""``inspect <pokemon>`` and ``pokedex`` -- look at what has been caught.

Both commands only read the session Pokedex; neither touches the network.
"""

from __future__ import annotations

from pokedex.output import print_data
from pokedex.state import State


async def command_inspect(state: State, *args: str) -> None:
    if not args:
        print_data("Usage: inspect <pokemon-name>")
        return

    pokemon = state.pokedex.get(args[0])
    if pokemon is None:
        print_data("you have not caught that pokemon")
        return

    print_data(f"Name: {pokemon.name}")
    print_data(f"Height: {pokemon.height}")
    print_data(f"Weight: {pokemon.weight}")
    print_data("Stats:")
    for stat in pokemon.stats:
        print_data(f"  -{stat.stat.name}: {stat.base_stat}")
    print_data("Types:")
    for slot in pokemon.types:
        print_data(f"  - {slot.type.name}")


async def command_pokedex(state: State, *args: str) -> None:
    """List every pokemon caught this session."""
    if not state.pokedex:
        print_data("Your Pokedex is empty. Go catch some pokemon!")
        return

    print_data("Your Pokedex:")
    for name in state.pokedex:
        print_data(f" - {name}")
