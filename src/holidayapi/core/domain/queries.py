"""Query models, one per endpoint.

Builders accumulate only the fields the caller set; at dispatch the
accumulated mapping is validated against these models. `model_fields_set`
is what distinguishes "not provided" from "provided", and only those fields
reach the wire.
"""

from __future__ import annotations

import calendar
from datetime import date
from typing import Any, ClassVar

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict

MIN_YEAR = 1970
MAX_YEAR = 9999

COUNTRY_PATTERN = r"^[A-Za-z]{2}(-[A-Za-z0-9]{1,3})?$"
LANGUAGE_PATTERN = r"^[A-Za-z]{2,3}([-_][A-Za-z0-9]{2,8})?$"


class BaseQuery(BaseModel):
    """Common behaviour: strict field set and wire serialization."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    endpoint: ClassVar[str]

    pretty: bool | None = Field(default=None, description="Pretty-print the JSON response.")

    def to_params(self) -> dict[str, str]:
        """Serialize explicitly set fields to query-string values."""

        out: dict[str, str] = {}
        for name, value in self.model_dump(exclude_unset=True).items():
            if value is None:
                continue
            if isinstance(value, bool):
                out[name] = "true" if value else "false"
            else:
                out[name] = str(value)
        return out

    @classmethod
    def from_params(cls, params: dict[str, Any]):
        """Parse query-string values back into a query (lax mode coercion)."""

        return cls.model_validate(dict(params))


class CountryQuery(BaseQuery):
    endpoint: ClassVar[str] = "countries"

    search: str | None = Field(default=None, min_length=1)
    country: str | None = Field(default=None, pattern=COUNTRY_PATTERN)
    public: bool | None = None


class LanguageQuery(BaseQuery):
    endpoint: ClassVar[str] = "languages"

    search: str | None = Field(default=None, min_length=1)
    language: str | None = Field(default=None, pattern=LANGUAGE_PATTERN)


class HolidayQuery(BaseQuery):
    endpoint: ClassVar[str] = "holidays"

    country: str = Field(..., pattern=COUNTRY_PATTERN)
    year: int = Field(..., ge=MIN_YEAR, le=MAX_YEAR)
    month: int | None = Field(default=None, ge=1, le=12)
    day: int | None = Field(default=None, ge=1, le=31)
    language: str | None = Field(default=None, pattern=LANGUAGE_PATTERN)
    search: str | None = Field(default=None, min_length=1)
    public: bool | None = None
    subdivisions: bool | None = None
    previous: bool | None = None
    upcoming: bool | None = None

    @model_validator(mode="after")
    def _check_date_parts(self) -> "HolidayQuery":
        if self.day is not None and self.month is None:
            raise ValueError("day requires month")
        if self.day is not None and self.month is not None:
            last_day = calendar.monthrange(self.year, self.month)[1]
            if self.day > last_day:
                raise ValueError(f"day {self.day} is out of range for {self.year}-{self.month:02d}")

        for flag in ("previous", "upcoming"):
            if getattr(self, flag) and (self.month is None or self.day is None):
                raise ValueError(f"{flag} requires month and day")
        if self.previous and self.upcoming:
            raise ValueError("previous and upcoming cannot be combined")
        return self


class WorkdayQuery(BaseQuery):
    endpoint: ClassVar[str] = "workday"

    country: str = Field(..., pattern=COUNTRY_PATTERN)
    start: date
    days: int

    @model_validator(mode="after")
    def _check_days(self) -> "WorkdayQuery":
        if self.days == 0:
            raise ValueError("days must be non-zero")
        return self


class WorkdaysQuery(BaseQuery):
    endpoint: ClassVar[str] = "workdays"

    country: str = Field(..., pattern=COUNTRY_PATTERN)
    start: date
    end: date

    @model_validator(mode="after")
    def _check_range(self) -> "WorkdaysQuery":
        if self.end < self.start:
            raise ValueError("end must not be before start")
        return self
