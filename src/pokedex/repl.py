"""Interactive read-eval-print loop.

:func:`run_repl` reads one line at a time, splits it into a command name and
arguments with :func:`clean_input`, and awaits the matching callback from
the command table.  A failing command is reported on stderr and the loop
carries on; only ``exit`` or end-of-input stop it.

Lines are read on a daemon thread so the event loop that owns the HTTP
client stays free while waiting for input.  The thread is never joined: on
Ctrl-C the loop is cancelled and the client closed, while a reader still
blocked in :func:`input` is left to interpreter shutdown.
"""

from __future__ import annotations

import asyncio
import threading
from typing import Callable, Optional

from pokedex.client import PokeAPIClient
from pokedex.commands import get_commands
from pokedex.exceptions import PokedexError
from pokedex.models import PokedexConfig
from pokedex.output import error, info, print_data
from pokedex.state import State

ReadLine = Callable[[str], str]


def clean_input(text: str) -> list[str]:
    """Lower-case *text* and split it into words."""
    return text.lower().split()


async def _read_in_thread(read_line: ReadLine, prompt: str) -> str:
    """Call *read_line* on a daemon thread and await its result."""
    loop = asyncio.get_running_loop()
    future: asyncio.Future[str] = loop.create_future()

    def _resolve(result: str) -> None:
        if not future.done():
            future.set_result(result)

    def _fail(exc: BaseException) -> None:
        if not future.done():
            future.set_exception(exc)

    def _deliver(callback: Callable[..., None], value: object) -> None:
        try:
            loop.call_soon_threadsafe(callback, value)
        except RuntimeError:
            # Loop already closed; nobody is waiting for this line any more.
            return

    def _worker() -> None:
        try:
            line = read_line(prompt)
        except Exception as exc:
            _deliver(_fail, exc)
        else:
            _deliver(_resolve, line)

    threading.Thread(target=_worker, name="pokedex-input", daemon=True).start()
    return await future


async def dispatch(state: State, line: str) -> None:
    """Run the command on *line*.  Blank lines are ignored."""
    words = clean_input(line)
    if not words:
        return

    name, args = words[0], words[1:]
    command = state.commands.get(name)
    if command is None:
        print_data("Unknown command")
        return

    try:
        await command.callback(state, *args)
    except PokedexError as exc:
        error(str(exc))


async def run_repl(state: State, prompt: str = "Pokedex > ", read_line: ReadLine = input) -> None:
    """Read and dispatch commands until ``exit`` or end-of-input."""
    while state.running:
        try:
            line = await _read_in_thread(read_line, prompt)
        except EOFError:
            print_data("")
            break
        await dispatch(state, line)


async def start_repl(
    config: PokedexConfig,
    read_line: ReadLine = input,
    client: Optional[PokeAPIClient] = None,
) -> State:
    """Open a client for *config*, run the REPL, and close everything on the way out."""
    api = client if client is not None else PokeAPIClient.from_config(config)
    async with api:
        state = State(pokeapi=api, commands=get_commands())
        info("Welcome to the Pokedex! Type 'help' for a list of commands.")
        await run_repl(state, prompt=config.prompt, read_line=read_line)
    return state
