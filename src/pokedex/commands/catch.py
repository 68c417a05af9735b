"""``catch <pokemon>`` -- throw a Pokeball and maybe add the pokemon to the Pokedex.

The odds depend on the pokemon's base experience: the higher it is, the
harder the catch.  A throw succeeds when a uniform random draw exceeds
``min(base_experience / 300, 0.9)``, so even the rarest pokemon keep a 10%
chance.
"""

from __future__ import annotations

from pokedex.exceptions import PokedexError
from pokedex.models import Pokemon
from pokedex.output import error, print_data
from pokedex.state import State

MAX_CATCH_DIFFICULTY = 0.9
BASE_EXPERIENCE_SCALE = 300


def catch_threshold(pokemon: Pokemon) -> float:
    """Return the value a random draw in ``[0, 1)`` must exceed to catch *pokemon*."""
    experience = pokemon.base_experience or 0
    return min(experience / BASE_EXPERIENCE_SCALE, MAX_CATCH_DIFFICULTY)


async def command_catch(state: State, *args: str) -> None:
    if not args:
        print_data("Usage: catch <pokemon-name>")
        return

    name = args[0]
    if name in state.pokedex:
        print_data(f"You already have {name} in your Pokedex!")
        return

    print_data(f"Throwing a Pokeball at {name}...")

    try:
        pokemon = await state.pokeapi.fetch_pokemon(name)
    except PokedexError as exc:
        error(f"Failed to catch {name}: {exc}")
        return

    if state.rng.random() > catch_threshold(pokemon):
        state.pokedex[name] = pokemon
        print_data(f"{name} was caught!")
        print_data("You may now inspect it with the inspect command.")
    else:
        print_data(f"{name} escaped!")
