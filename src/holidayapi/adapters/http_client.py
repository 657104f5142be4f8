"""httpx wrapper.

- Standardizes headers and timeouts for every Holiday API call.
- Tests swap the transport for an `httpx.MockTransport`.
"""

from __future__ import annotations

from typing import Any

import httpx

from holidayapi.core.config import ClientSettings


def build_async_client(
    settings: ClientSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the library defaults.

    No timeout is forced unless `http_timeout_seconds` is configured; the
    httpx default applies otherwise.
    """

    settings = settings or ClientSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }

    kwargs: dict[str, Any] = {"headers": headers, "follow_redirects": True}
    if settings.http_timeout_seconds is not None:
        kwargs["timeout"] = httpx.Timeout(settings.http_timeout_seconds)
    if transport is not None:
        kwargs["transport"] = transport
    return httpx.AsyncClient(**kwargs)
