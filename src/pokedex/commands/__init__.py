"""REPL commands for pokedex.

Each command is an ``async`` callback taking the session
:class:`~pokedex.state.State` followed by the words typed after the command
name.  :func:`get_commands` returns the command table the REPL dispatches on.

Modules:
    help: ``help`` and ``exit``.
    map: ``map`` and ``mapb`` (location-area paging).
    explore: ``explore <area>``.
    catch: ``catch <pokemon>``.
    inspect: ``inspect <pokemon>`` and ``pokedex``.
"""

from __future__ import annotations

from pokedex.commands.catch import command_catch
from pokedex.commands.explore import command_explore
from pokedex.commands.help import command_exit, command_help
from pokedex.commands.inspect import command_inspect, command_pokedex
from pokedex.commands.map import command_map, command_mapb
from pokedex.state import CLICommand


def get_commands() -> dict[str, CLICommand]:
    """Return the REPL command table, keyed by command name."""
    return {
        "help": CLICommand("help", "Displays a help message", command_help),
        "exit": CLICommand("exit", "Exit the Pokedex", command_exit),
        "map": CLICommand("map", "Displays the next page of location areas", command_map),
        "mapb": CLICommand("mapb", "Displays the previous page of location areas", command_mapb),
        "explore": CLICommand(
            "explore", "Explore a location area to find Pokemon", command_explore, "<area>"
        ),
        "catch": CLICommand("catch", "Attempt to catch a Pokemon", command_catch, "<pokemon>"),
        "inspect": CLICommand("inspect", "Inspect a caught Pokemon", command_inspect, "<pokemon>"),
        "pokedex": CLICommand("pokedex", "List all caught Pokemon", command_pokedex),
    }
