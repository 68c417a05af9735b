"""Response handling -- maps :class:`httpx.Response` objects to resource models.

After a request completes, :func:`raise_for_status` turns a non-2xx status
into a :class:`~pokedex.exceptions.RemoteError` and :func:`decode_response`
validates the JSON body against the expected Pydantic model.  The two
failure classes are kept distinct so callers can tell "the server said no"
from "the server said something we cannot read".
"""

from __future__ import annotations

from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from pokedex.exceptions import DecodeError, NotFoundError, RemoteError

M = TypeVar("M", bound=BaseModel)


def raise_for_status(response: httpx.Response) -> None:
    """Raise a typed exception unless *response* has a 2xx status.

    Raises:
        NotFoundError: On 404.
        RemoteError: On any other non-2xx status.
    """
    status = response.status_code
    if 200 <= status < 300:
        return

    try:
        url = str(response.request.url)
    except RuntimeError:
        url = ""
    detail = _error_detail(response)
    if status == 404:
        raise NotFoundError(status, url, detail)
    raise RemoteError(status, url, detail)


def decode_response(response: httpx.Response, model: type[M]) -> M:
    """Decode the JSON body of *response* into *model*.

    Raises:
        DecodeError: If the body is not JSON or does not match *model*.
    """
    try:
        payload = response.json()
    except ValueError as exc:
        raise DecodeError(f"Response is not valid JSON: {exc}") from exc
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise DecodeError(
            f"Unexpected {model.__name__} payload: {exc.error_count()} validation error(s)"
        ) from exc


def _error_detail(response: httpx.Response) -> str:
    """Best-effort short description taken from an error body."""
    try:
        detail = response.json()
    except ValueError:
        return response.text[:200].strip()
    if isinstance(detail, dict):
        return str(detail.get("detail") or detail.get("message") or detail.get("error") or "")
    return str(detail)[:200]
