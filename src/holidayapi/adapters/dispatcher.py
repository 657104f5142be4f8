"""Dispatcher: query parameters in, decoded response out.

Responsibilities:
- Issue the GET against `{base_url}/v{version}/{endpoint}` with the key and
  the query parameters in the query string.
- Map every failure to exactly one library error (no retries).
- Decode success bodies into the response envelope models.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, TypeVar

import httpx
from loguru import logger
from pydantic import ValidationError as PydanticValidationError

from holidayapi.adapters.http_client import build_async_client
from holidayapi.core.domain.models import ApiResponse
from holidayapi.core.errors import (
    ApiError,
    DecodeError,
    InvalidOrExpiredKeyError,
    TransportError,
)

if TYPE_CHECKING:
    from holidayapi.client import HolidayAPI

ResponseT = TypeVar("ResponseT", bound=ApiResponse)

_NO_JSON = object()


async def send(*, api: HolidayAPI, endpoint: str, params: dict[str, str]) -> httpx.Response:
    """GET `endpoint` and return the complete response.

    Uses the client's injected `httpx.AsyncClient` when there is one (and
    leaves it open), otherwise a short-lived client per call.
    """

    url = api.base_url + endpoint
    logger.debug(f"GET {url} params={params}")
    query = {"key": api.key, **params}

    try:
        if api.http_client is not None:
            response = await api.http_client.get(url, params=query)
        else:
            async with build_async_client(api.settings) as client:
                response = await client.get(url, params=query)
    except httpx.RequestError as exc:
        logger.debug(f"GET {url} failed: {exc!r}")
        raise TransportError(f"Request to {url} failed: {exc}") from exc

    logger.debug(f"GET {url} -> HTTP {response.status_code}")
    return response


def _load_json(response: httpx.Response) -> Any:
    try:
        return json.loads(response.text)
    except (ValueError, RecursionError):
        return _NO_JSON


def _body_status(value: Any) -> int | None:
    """Body `status` as an int, accepting numeric strings."""

    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None


def _api_error(code: int, message: str) -> ApiError:
    if code == 401:
        return InvalidOrExpiredKeyError(code, message)
    return ApiError(code, message)


def raise_for_api_error(response: httpx.Response) -> Any:
    """Raise `ApiError` for error statuses or error bodies.

    Returns the decoded JSON payload, or `_NO_JSON` when the body is not JSON.
    """

    payload = _load_json(response)
    body = payload if isinstance(payload, dict) else {}

    error = body.get("error")
    if not response.is_success:
        message = error if isinstance(error, str) and error else response.reason_phrase
        raise _api_error(response.status_code, message or response.text)

    status = _body_status(body.get("status"))
    if error or (status is not None and status >= 400):
        code = status if status is not None else response.status_code
        raise _api_error(code, str(error or response.reason_phrase))

    return payload


def decode(response: httpx.Response, model: type[ResponseT]) -> ResponseT:
    """Validate a response body against `model`."""

    payload = raise_for_api_error(response)
    if payload is _NO_JSON:
        raise DecodeError(f"Response body is not valid JSON (HTTP {response.status_code})")

    try:
        parsed = model.model_validate(payload)
    except PydanticValidationError as exc:
        raise DecodeError(f"Unexpected {model.__name__} body: {exc}") from exc

    if parsed.warning:
        logger.warning(parsed.warning)
    if parsed.requests is not None:
        logger.debug(f"Quota: {parsed.requests.used} used, {parsed.requests.available} available")
    return parsed
