"""Shared fixtures: a recording httpx transport double and a client built on it."""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from holidayapi import HolidayAPI
from holidayapi.adapters.http_client import build_async_client
from holidayapi.core.config import ClientSettings

VALID_KEY = "daaaaaab-aaaa-aaaa-aaaa-2aaaada37e14"


class Recorder:
    """Answers every request with the configured response and keeps the requests."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.responder: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(
            200, json={"status": 200}
        )

    def reply(self, status: int = 200, body: Any = None, *, text: str | None = None) -> None:
        if text is not None:
            self.responder = lambda request: httpx.Response(status, text=text)
        else:
            content = json.dumps(body)
            self.responder = lambda request: httpx.Response(
                status, text=content, headers={"Content-Type": "application/json"}
            )

    def fail(self, exc_type: type[httpx.RequestError] = httpx.ConnectError) -> None:
        def _raise(request: httpx.Request) -> httpx.Response:
            raise exc_type("connection refused", request=request)

        self.responder = _raise

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    @property
    def last_params(self) -> dict[str, str]:
        return dict(self.requests[-1].url.params)


@pytest.fixture
def settings() -> ClientSettings:
    return ClientSettings(_env_file=None)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
async def api(recorder: Recorder, settings: ClientSettings):
    async with build_async_client(settings, transport=httpx.MockTransport(recorder)) as client:
        yield HolidayAPI(VALID_KEY, settings=settings, http_client=client)


@pytest.fixture
def short_lived_api(recorder: Recorder, settings: ClientSettings, monkeypatch) -> HolidayAPI:
    """Client without an injected httpx client; each call opens and closes its own."""

    from holidayapi.adapters import dispatcher

    monkeypatch.setattr(
        dispatcher,
        "build_async_client",
        lambda s: build_async_client(s, transport=httpx.MockTransport(recorder)),
    )
    return HolidayAPI(VALID_KEY, settings=settings)
