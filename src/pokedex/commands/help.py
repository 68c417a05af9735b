"""``help`` and ``exit`` -- REPL housekeeping commands."""

from __future__ import annotations

from pokedex.output import print_data
from pokedex.state import State


async def command_help(state: State, *args: str) -> None:
    """List every registered command with its description."""
    print_data("Welcome to the Pokedex!")
    print_data("Usage:")
    print_data("")
    for command in state.commands.values():
        label = f"{command.name} {command.usage}".strip()
        print_data(f"{label}: {command.description}")
    print_data("")


async def command_exit(state: State, *args: str) -> None:
    print_data("Closing the Pokedex... Goodbye!")
    state.running = False
