"""Request builders, one per endpoint.

Each builder accumulates the fields the caller set, in a plain mapping, and
only validates them when dispatched (`get`, `get_full`, `get_raw`, `params`).
Setters never raise and return the same builder, so calls chain:

    api.holidays("us", 2020).month(12).upcoming(True)

A builder is dispatched at most once.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Any, ClassVar, Generic

from pydantic import ValidationError as PydanticValidationError

from holidayapi.adapters.dispatcher import ResponseT, decode, raise_for_api_error, send
from holidayapi.core.domain.models import (
    CountriesResponse,
    Country,
    Holiday,
    HolidaysResponse,
    Language,
    LanguagesResponse,
    Workday,
    WorkdayResponse,
    WorkdaysResponse,
)
from holidayapi.core.domain.queries import (
    BaseQuery,
    CountryQuery,
    HolidayQuery,
    LanguageQuery,
    WorkdayQuery,
    WorkdaysQuery,
)
from holidayapi.core.errors import ValidationError

if TYPE_CHECKING:
    from holidayapi.client import HolidayAPI


def _describe_problems(exc: PydanticValidationError) -> list[str]:
    problems: list[str] = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()))
        msg = err.get("msg", "invalid value")
        problems.append(f"{loc}: {msg}" if loc else msg)
    return problems


class BaseRequest(Generic[ResponseT]):
    query_model: ClassVar[type[BaseQuery]]
    response_model: ClassVar[type[Any]]

    def __init__(self, api: HolidayAPI, **required: Any) -> None:
        self._api = api
        self._fields: dict[str, Any] = dict(required)
        self._dispatched = False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._fields!r})"

    @property
    def endpoint(self) -> str:
        return self.query_model.endpoint

    def _set(self, name: str, value: Any):
        self._fields[name] = value
        return self

    def pretty(self, pretty: bool):
        return self._set("pretty", pretty)

    def build_query(self) -> BaseQuery:
        """Validate the accumulated fields; raise `ValidationError` on failure."""

        try:
            return self.query_model.model_validate(self._fields)
        except PydanticValidationError as exc:
            raise ValidationError(self.endpoint, _describe_problems(exc)) from exc

    def params(self) -> dict[str, str]:
        """Query parameters this builder sends, without the key."""

        return self.build_query().to_params()

    async def _send(self):
        if self._dispatched:
            raise ValidationError(self.endpoint, ["request was already dispatched"])
        params = self.params()
        self._dispatched = True
        return await send(api=self._api, endpoint=self.endpoint, params=params)

    async def get_raw(self) -> str:
        """Return the raw JSON text of a successful response."""

        response = await self._send()
        raise_for_api_error(response)
        return response.text

    async def get_full(self) -> ResponseT:
        """Return the full response envelope (quota, warning, results)."""

        response = await self._send()
        return decode(response, self.response_model)


class CountriesRequest(BaseRequest[CountriesResponse]):
    query_model = CountryQuery
    response_model = CountriesResponse

    def search(self, search: str) -> CountriesRequest:
        return self._set("search", search)

    def country(self, country: str) -> CountriesRequest:
        return self._set("country", country)

    def public(self, public: bool) -> CountriesRequest:
        return self._set("public", public)

    async def get(self) -> list[Country]:
        return (await self.get_full()).countries


class LanguagesRequest(BaseRequest[LanguagesResponse]):
    query_model = LanguageQuery
    response_model = LanguagesResponse

    def search(self, search: str) -> LanguagesRequest:
        return self._set("search", search)

    def language(self, language: str) -> LanguagesRequest:
        return self._set("language", language)

    async def get(self) -> list[Language]:
        return (await self.get_full()).languages


class HolidaysRequest(BaseRequest[HolidaysResponse]):
    query_model = HolidayQuery
    response_model = HolidaysResponse

    def __init__(self, api: HolidayAPI, country: str, year: int) -> None:
        super().__init__(api, country=country, year=year)

    def month(self, month: int) -> HolidaysRequest:
        return self._set("month", month)

    def day(self, day: int) -> HolidaysRequest:
        return self._set("day", day)

    def language(self, language: str) -> HolidaysRequest:
        return self._set("language", language)

    def search(self, search: str) -> HolidaysRequest:
        return self._set("search", search)

    def public(self, public: bool) -> HolidaysRequest:
        return self._set("public", public)

    def subdivisions(self, subdivisions: bool) -> HolidaysRequest:
        return self._set("subdivisions", subdivisions)

    def previous(self, previous: bool) -> HolidaysRequest:
        return self._set("previous", previous)

    def upcoming(self, upcoming: bool) -> HolidaysRequest:
        return self._set("upcoming", upcoming)

    async def get(self) -> list[Holiday]:
        return (await self.get_full()).holidays


class WorkdayRequest(BaseRequest[WorkdayResponse]):
    """Date that falls `days` working days after (or before) `start`."""

    query_model = WorkdayQuery
    response_model = WorkdayResponse

    def __init__(self, api: HolidayAPI, country: str, start: str | date, days: int) -> None:
        super().__init__(api, country=country, start=start, days=days)

    async def get(self) -> Workday:
        return (await self.get_full()).workday


class WorkdaysRequest(BaseRequest[WorkdaysResponse]):
    """Number of working days between `start` and `end`."""

    query_model = WorkdaysQuery
    response_model = WorkdaysResponse

    def __init__(self, api: HolidayAPI, country: str, start: str | date, end: str | date) -> None:
        super().__init__(api, country=country, start=start, end=end)

    async def get(self) -> int:
        return (await self.get_full()).workdays
