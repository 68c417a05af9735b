"""Shared test fixtures for pokedex.

Provides PokeAPI payloads, a recording :class:`httpx.MockTransport`,
isolated config directories, and output-state management.  These fixtures
are discovered by pytest and available to all test modules.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import httpx
import pytest

from pokedex.output import OutputFormat, OutputManager, reset_output, set_output


BASE_URL = "https://pokeapi.test/api/v2"


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _plain_output() -> None:
    """Install a plain, colourless, verbose OutputManager for every test.

    The manager binds sys.stdout/sys.stderr at creation time, so it is
    created per test (after capsys has swapped the streams) and reset
    afterwards.
    """
    set_output(OutputManager(format=OutputFormat.PLAIN, no_color=True, verbose=True))
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Clock double
# ---------------------------------------------------------------------------


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


# ---------------------------------------------------------------------------
# PokeAPI payloads
# ---------------------------------------------------------------------------


def location_page_payload(offset: int = 0, limit: int = 2, count: int = 6) -> dict[str, Any]:
    """A ``/location-area`` page in the shape PokeAPI returns."""
    nxt = f"{BASE_URL}/location-area?offset={offset + limit}&limit={limit}"
    prev = f"{BASE_URL}/location-area?offset={offset - limit}&limit={limit}"
    return {
        "count": count,
        "next": nxt if offset + limit < count else None,
        "previous": prev if offset > 0 else None,
        "results": [
            {"name": f"area-{i}", "url": f"{BASE_URL}/location-area/{i + 1}/"}
            for i in range(offset, min(offset + limit, count))
        ],
    }


def location_area_payload(name: str = "canalave-city-area") -> dict[str, Any]:
    return {
        "id": 1,
        "name": name,
        "game_index": 1,
        "encounter_method_rates": [],
        "location": {"name": "canalave-city", "url": f"{BASE_URL}/location/1/"},
        "names": [
            {"name": "Canalave City", "language": {"name": "en", "url": f"{BASE_URL}/language/9/"}}
        ],
        "pokemon_encounters": [
            {"pokemon": {"name": "tentacool", "url": f"{BASE_URL}/pokemon/72/"}, "version_details": []},
            {"pokemon": {"name": "tentacruel", "url": f"{BASE_URL}/pokemon/73/"}, "version_details": []},
        ],
        "unknown_upstream_field": {"ignored": True},
    }


def pokemon_payload(name: str = "pikachu", base_experience: int | None = 112) -> dict[str, Any]:
    return {
        "id": 25,
        "name": name,
        "base_experience": base_experience,
        "height": 4,
        "weight": 60,
        "abilities": [
            {"ability": {"name": "static", "url": f"{BASE_URL}/ability/9/"}, "is_hidden": False, "slot": 1},
        ],
        "stats": [
            {"base_stat": 35, "effort": 0, "stat": {"name": "hp", "url": f"{BASE_URL}/stat/1/"}},
            {"base_stat": 55, "effort": 0, "stat": {"name": "attack", "url": f"{BASE_URL}/stat/2/"}},
        ],
        "types": [
            {"slot": 1, "type": {"name": "electric", "url": f"{BASE_URL}/type/13/"}},
        ],
        "sprites": {"front_default": None},
    }


# ---------------------------------------------------------------------------
# Network double
# ---------------------------------------------------------------------------


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every URL it was asked for."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[str] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(str(request.url))
            return handler(request)

        super().__init__(_record)


def pokeapi_handler(request: httpx.Request) -> httpx.Response:
    """Route requests the way PokeAPI would for the payloads above."""
    path = request.url.path.removeprefix("/api/v2")
    if path == "/location-area":
        offset = int(request.url.params.get("offset", 0))
        limit = int(request.url.params.get("limit", 20))
        return httpx.Response(200, json=location_page_payload(offset, limit))
    if path.startswith("/location-area/"):
        return httpx.Response(200, json=location_area_payload(path.rsplit("/", 1)[-1]))
    if path.startswith("/pokemon/"):
        name = path.rsplit("/", 1)[-1]
        if name == "missingno":
            return httpx.Response(404, text="Not Found")
        experience = 608 if name == "arceus" else 112
        return httpx.Response(200, json=pokemon_payload(name, experience))
    return httpx.Response(404, text="Not Found")


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport(pokeapi_handler)


# ---------------------------------------------------------------------------
# Config isolation fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point every XDG directory at tmp_path and clear POKEDEX_* variables."""
    monkeypatch.setattr("pokedex.config._is_xdg_platform", lambda: True)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    for var in ["POKEDEX_BASE_URL", "POKEDEX_CACHE_TTL"]:
        monkeypatch.delenv(var, raising=False)
    return tmp_path
