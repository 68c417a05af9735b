"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant is referenced by the matching
:class:`~pokedex.exceptions.PokedexError` subclass so shell wrappers can
tell failure classes apart without parsing stderr.
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments."""

EXIT_NOT_FOUND = 4
"""The requested resource does not exist on the remote API (HTTP 404)."""

EXIT_REMOTE_ERROR = 5
"""The remote API answered with a non-success status code."""

EXIT_NETWORK_FAILURE = 6
"""The request never completed (timeout, DNS failure, connection refused)."""

EXIT_DECODE_ERROR = 7
"""The remote API answered with a body that could not be decoded."""
