"""holidayapi.client

`HolidayAPI` holds the validated credential and hands out request builders.
It is read-only after construction and may be shared between tasks.
"""

from __future__ import annotations

import re
from datetime import date

import httpx

from holidayapi.adapters.builders import (
    CountriesRequest,
    HolidaysRequest,
    LanguagesRequest,
    WorkdayRequest,
    WorkdaysRequest,
)
from holidayapi.core.config import SUPPORTED_VERSIONS, ClientSettings
from holidayapi.core.errors import InvalidCredentialError, InvalidVersionError

_KEY_RE = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.IGNORECASE,
)


class HolidayAPI:
    """Entry point of the library.

    Construction only checks the key syntactically; nothing is sent until a
    builder is dispatched.

        api = HolidayAPI("00000000-0000-0000-0000-000000000000")
        holidays = await api.holidays("us", 2020).month(12).get()

    Pass `http_client` to reuse one `httpx.AsyncClient` across requests; it is
    never closed by the library.
    """

    __slots__ = ("_key", "_version", "_settings", "_http_client")

    def __init__(
        self,
        key: str,
        *,
        version: int = 1,
        settings: ClientSettings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.is_valid_key(key)
        self.is_valid_version(version)

        self._key = key
        self._version = version
        self._settings = settings or ClientSettings()
        self._http_client = http_client

    @classmethod
    def from_settings(
        cls,
        settings: ClientSettings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> HolidayAPI:
        """Build a client from `HOLIDAYAPI_API_KEY` / `HOLIDAYAPI_VERSION`."""

        settings = settings or ClientSettings()
        return cls(
            settings.api_key or "",
            version=settings.version,
            settings=settings,
            http_client=http_client,
        )

    @staticmethod
    def is_valid_key(key: str) -> None:
        if not isinstance(key, str) or not _KEY_RE.fullmatch(key):
            raise InvalidCredentialError(key)

    @staticmethod
    def is_valid_version(version: int) -> None:
        if version not in SUPPORTED_VERSIONS:
            raise InvalidVersionError(version, SUPPORTED_VERSIONS)

    @property
    def key(self) -> str:
        return self._key

    @property
    def version(self) -> int:
        return self._version

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    @property
    def http_client(self) -> httpx.AsyncClient | None:
        return self._http_client

    @property
    def base_url(self) -> str:
        return f"{self._settings.base_url.rstrip('/')}/v{self._version}/"

    def __repr__(self) -> str:
        return f"HolidayAPI(base_url={self.base_url!r}, key='***')"

    def countries(self) -> CountriesRequest:
        """Minimal `countries` request; narrow it with `.search()`, `.country()`, `.public()`."""

        return CountriesRequest(self)

    def languages(self) -> LanguagesRequest:
        return LanguagesRequest(self)

    def holidays(self, country: str, year: int) -> HolidaysRequest:
        """Minimal `holidays` request for `country` and `year`.

        `api.holidays("us", 2020).month(12).upcoming(True)` narrows it further.
        """

        return HolidaysRequest(self, country, year)

    def workday(self, country: str, start: str | date, days: int) -> WorkdayRequest:
        return WorkdayRequest(self, country, start, days)

    def workdays(self, country: str, start: str | date, end: str | date) -> WorkdaysRequest:
        return WorkdaysRequest(self, country, start, end)
