"""Result records and response envelopes (Pydantic v2).

These models mirror the Holiday API JSON schema. They are frozen value
objects, produced only by decoding a response body; unknown keys are ignored
so additive API changes do not break decoding.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class _Record(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)


class RequestQuota(_Record):
    """The `requests` block returned with every response."""

    available: int = Field(..., description="Requests left in the current period.")
    used: int = Field(..., description="Requests used in the current period.")
    resets: str = Field(..., description="Timestamp at which the quota resets.")


class Codes(_Record):
    alpha_2: str = Field(..., alias="alpha-2")
    alpha_3: str = Field(..., alias="alpha-3")
    numeric: str


class Subdivision(_Record):
    code: str
    name: str
    languages: list[str] = Field(default_factory=list)


class Country(_Record):
    code: str
    name: str
    languages: list[str] = Field(default_factory=list)
    codes: Codes | None = None
    flag: str | None = None
    subdivisions: list[Subdivision] = Field(default_factory=list)


class Language(_Record):
    code: str
    name: str


class DayName(_Record):
    name: str
    numeric: str


class HolidayWeekday(_Record):
    date: DayName
    observed: DayName


class Holiday(_Record):
    name: str = Field(..., description="Holiday name in the requested language.")
    date: str = Field(..., description="Calendar date, YYYY-MM-DD.")
    observed: str = Field(..., description="Observed date, YYYY-MM-DD.")
    public: bool = Field(..., description="Whether the holiday is a public one.")
    country: str = Field(..., description="Country (or subdivision) code.")
    uuid: str | None = None
    weekday: HolidayWeekday | None = None
    subdivisions: list[str] | None = Field(
        default=None,
        description="Subdivision codes, present when requested with `subdivisions`.",
    )


class Workday(_Record):
    date: str
    weekday: DayName


class ApiResponse(_Record):
    """Fields shared by every response envelope."""

    status: int
    requests: RequestQuota | None = None
    warning: str | None = None
    error: str | None = None


class CountriesResponse(ApiResponse):
    countries: list[Country]


class LanguagesResponse(ApiResponse):
    languages: list[Language]


class HolidaysResponse(ApiResponse):
    holidays: list[Holiday]


class WorkdayResponse(ApiResponse):
    workday: Workday


class WorkdaysResponse(ApiResponse):
    workdays: int
