"""Exception hierarchy for pokedex.

All exceptions inherit from :class:`PokedexError`, which carries an
``exit_code`` taken from :mod:`pokedex.exit_codes`.  The client raises the
network-facing members of the family and never recovers from them; the REPL
reports them and keeps going, while :func:`pokedex.app.main` turns them into
a process exit code.

Subclass hierarchy::

    PokedexError (exit 1)
    +-- InvalidUsageError   (exit 2)
    +-- ConfigError         (exit 1)
    +-- NetworkFailure      (exit 6)
    +-- RemoteError         (exit 5)
    |   +-- NotFoundError   (exit 4)
    +-- DecodeError         (exit 7)
"""

from __future__ import annotations

from pokedex.exit_codes import (
    EXIT_DECODE_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_NETWORK_FAILURE,
    EXIT_NOT_FOUND,
    EXIT_REMOTE_ERROR,
)


class PokedexError(Exception):
    """Base exception for all pokedex errors.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidUsageError(PokedexError):
    """Raised for invalid arguments, e.g. an empty resource name."""

    exit_code = EXIT_INVALID_USAGE


class ConfigError(PokedexError):
    """Raised when the config file is unreadable or fails validation."""

    exit_code = EXIT_GENERIC_FAILURE


class NetworkFailure(PokedexError):
    """Raised on transport-level failures (timeout, DNS, connection refused)."""

    exit_code = EXIT_NETWORK_FAILURE


class RemoteError(PokedexError):
    """Raised when the remote API answers with a non-2xx status.

    Args:
        status: The HTTP status code of the response.
        url: The request URL, kept for diagnostics.
        message: Optional detail extracted from the response body.
    """

    exit_code = EXIT_REMOTE_ERROR

    def __init__(self, status: int, url: str = "", message: str = ""):
        text = f"HTTP {status}"
        if url:
            text = f"{text} for {url}"
        if message:
            text = f"{text}: {message}"
        super().__init__(text)
        self.status = status
        self.url = url


class NotFoundError(RemoteError):
    """Raised when the remote API answers 404 (unknown area or pokemon)."""

    exit_code = EXIT_NOT_FOUND


class DecodeError(PokedexError):
    """Raised when a successful response body is not the expected JSON shape."""

    exit_code = EXIT_DECODE_ERROR
