"""Typed, chainable client for the Holiday API (https://holidayapi.com)."""

from __future__ import annotations

from loguru import logger

from holidayapi.adapters.builders import (
    CountriesRequest,
    HolidaysRequest,
    LanguagesRequest,
    WorkdayRequest,
    WorkdaysRequest,
)
from holidayapi.client import HolidayAPI
from holidayapi.core.config import ClientSettings
from holidayapi.core.domain.models import Country, Holiday, Language, Workday
from holidayapi.core.errors import (
    ApiError,
    DecodeError,
    HolidayAPIError,
    InvalidCredentialError,
    InvalidOrExpiredKeyError,
    InvalidVersionError,
    TransportError,
    ValidationError,
)

__version__ = "0.1.0"

# Library code stays silent unless the application opts in.
logger.disable("holidayapi")

__all__ = [
    "ApiError",
    "ClientSettings",
    "CountriesRequest",
    "Country",
    "DecodeError",
    "Holiday",
    "HolidayAPI",
    "HolidayAPIError",
    "HolidaysRequest",
    "InvalidCredentialError",
    "InvalidOrExpiredKeyError",
    "InvalidVersionError",
    "Language",
    "LanguagesRequest",
    "TransportError",
    "ValidationError",
    "Workday",
    "WorkdayRequest",
    "WorkdaysRequest",
]
