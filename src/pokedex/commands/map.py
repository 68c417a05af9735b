"""``map`` and ``mapb`` -- page forwards and backwards through location areas.

Both commands move the paging cursor stored on
:class:`~pokedex.state.State`.  The URLs they follow come straight from the
``next``/``previous`` pointers of the last page, so every page visited is
cached under exactly the URL the next navigation will ask for.
"""

from __future__ import annotations

from pokedex.models import LocationAreaPage
from pokedex.output import print_data
from pokedex.state import State


async def command_map(state: State, *args: str) -> None:
    """Show the next page of location areas (the first page on first use)."""
    if state.next_locations_url is None and state.prev_locations_url is not None:
        print_data("you're on the last page")
        return

    page = await state.pokeapi.fetch_locations(state.next_locations_url)
    _show_page(state, page)


async def command_mapb(state: State, *args: str) -> None:
    """Show the previous page of location areas."""
    if not state.prev_locations_url:
        print_data("you're on the first page")
        return

    page = await state.pokeapi.fetch_locations(state.prev_locations_url)
    _show_page(state, page)


def _show_page(state: State, page: LocationAreaPage) -> None:
    for location in page.results:
        print_data(location.name)

    state.next_locations_url = page.next
    state.prev_locations_url = page.previous
