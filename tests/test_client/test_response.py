"""Tests for response status mapping and decoding."""

from __future__ import annotations

import httpx
import pytest

from conftest import location_area_payload
from pokedex.client.response import decode_response, raise_for_status
from pokedex.exceptions import DecodeError, NotFoundError, RemoteError
from pokedex.models import LocationArea, Pokemon


def _response(status_code: int = 200, **kwargs) -> httpx.Response:
    return httpx.Response(
        status_code,
        request=httpx.Request("GET", "https://pokeapi.test/api/v2/pokemon/pikachu"),
        **kwargs,
    )


class TestRaiseForStatus:
    @pytest.mark.parametrize("status", [200, 201, 204, 299])
    def test_2xx_passes(self, status: int) -> None:
        raise_for_status(_response(status))

    def test_404_is_not_found(self) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            raise_for_status(_response(404, text="Not Found"))
        assert exc_info.value.status == 404
        assert "pokemon/pikachu" in str(exc_info.value)
        assert "Not Found" in str(exc_info.value)

    @pytest.mark.parametrize("status", [400, 429, 500, 502, 503])
    def test_other_statuses_are_remote_errors(self, status: int) -> None:
        with pytest.raises(RemoteError) as exc_info:
            raise_for_status(_response(status))
        assert exc_info.value.status == status
        assert not isinstance(exc_info.value, NotFoundError)

    def test_detail_taken_from_json_body(self) -> None:
        with pytest.raises(RemoteError, match="rate limited"):
            raise_for_status(_response(429, json={"detail": "rate limited"}))

    def test_redirect_status_is_an_error(self) -> None:
        with pytest.raises(RemoteError):
            raise_for_status(_response(304))


class TestDecodeResponse:
    def test_decodes_and_ignores_unknown_fields(self) -> None:
        area = decode_response(_response(json=location_area_payload()), LocationArea)
        assert area.name == "canalave-city-area"
        assert area.location is not None and area.location.name == "canalave-city"
        assert not hasattr(area, "unknown_upstream_field")

    def test_invalid_json(self) -> None:
        with pytest.raises(DecodeError, match="not valid JSON"):
            decode_response(_response(text="{not json"), Pokemon)

    def test_empty_body(self) -> None:
        with pytest.raises(DecodeError):
            decode_response(_response(content=b""), Pokemon)

    def test_missing_required_fields(self) -> None:
        with pytest.raises(DecodeError, match="Pokemon"):
            decode_response(_response(json={"name": "pikachu"}), Pokemon)

    def test_wrong_top_level_type(self) -> None:
        with pytest.raises(DecodeError):
            decode_response(_response(json=[1, 2, 3]), LocationArea)
