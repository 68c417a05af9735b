"""pokedex -- an interactive command-line explorer for the PokeAPI.

Every read goes through a cache-aside client: responses are kept in an
in-memory TTL cache keyed by request URL, so paging back and forth or
re-exploring an area does not hit the network again until the entry
expires.

Typical session::

    $ pokedex
    Pokedex > map
    Pokedex > explore canalave-city-area
    Pokedex > catch pikachu
    Pokedex > inspect pikachu

Modules:
    app: Typer application and CLI entry point.
    cache: In-memory TTL cache with a background sweep.
    client: Cache-aside PokeAPI client built on httpx.
    commands: REPL command table.
    config: XDG-aware configuration and precedence resolution.
    exceptions: Exception hierarchy with exit-code mapping.
    models: Pydantic configuration and resource models.
    output: stdout/stderr formatting system with Rich support.
    repl: The interactive loop.
"""

__version__ = "0.1.0"
