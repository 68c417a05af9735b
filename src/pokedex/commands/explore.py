"""``explore <area>`` -- list the pokemon that can be found in a location area."""

from __future__ import annotations

from pokedex.output import print_data
from pokedex.state import State


async def command_explore(state: State, *args: str) -> None:
    if not args:
        print_data("Usage: explore <location-area-name>")
        return

    area_name = args[0]
    print_data(f"Exploring {area_name}...")

    area = await state.pokeapi.fetch_location(area_name)

    print_data("Found Pokemon:")
    for encounter in area.pokemon_encounters:
        print_data(f" - {encounter.pokemon.name}")
