import json

import httpx
import pytest
from pydantic import ValidationError as PydanticValidationError

from holidayapi import (
    ApiError,
    DecodeError,
    Holiday,
    HolidayAPI,
    InvalidOrExpiredKeyError,
    TransportError,
    ValidationError,
)
from holidayapi.core.domain.models import HolidaysResponse

from .conftest import VALID_KEY

NEW_YEAR = {
    "name": "New Year's Day",
    "date": "2020-01-01",
    "observed": "2020-01-01",
    "public": True,
    "country": "US",
}

QUOTA = {"available": 9999, "used": 1, "resets": "2020-02-01 00:00:00"}


async def test_holidays_success_decodes_records(api, recorder):
    recorder.reply(200, {"status": 200, "holidays": [NEW_YEAR]})

    holidays = await api.holidays("US", 2020).get()

    assert holidays == [Holiday(**NEW_YEAR)]
    holiday = holidays[0]
    assert holiday.name == "New Year's Day"
    assert holiday.date == "2020-01-01"
    assert holiday.observed == "2020-01-01"
    assert holiday.public is True
    assert holiday.country == "US"


async def test_request_targets_endpoint_with_key(api, recorder):
    recorder.reply(200, {"status": 200, "holidays": []})

    await api.holidays("US", 2020).month(1).get()

    request = recorder.requests[0]
    assert request.method == "GET"
    assert request.url.path == "/v1/holidays"
    assert recorder.last_params == {"key": VALID_KEY, "country": "US", "year": "2020", "month": "1"}


async def test_unset_fields_absent_from_query_string(api, recorder):
    recorder.reply(200, {"status": 200, "countries": []})

    await api.countries().get()

    query = recorder.requests[0].url.query.decode()
    assert query == f"key={VALID_KEY}"


async def test_day_without_month_never_hits_network(api, recorder):
    with pytest.raises(ValidationError):
        await api.holidays("US", 2020).day(1).get()
    assert recorder.requests == []


async def test_api_error_body_is_surfaced_verbatim(api, recorder):
    recorder.reply(401, {"status": 401, "error": "Invalid API key."})

    with pytest.raises(ApiError) as excinfo:
        await api.holidays("US", 2020).get()

    assert isinstance(excinfo.value, InvalidOrExpiredKeyError)
    assert excinfo.value.code == 401
    assert excinfo.value.message == "Invalid API key."


async def test_error_field_on_success_status_is_api_error(api, recorder):
    recorder.reply(200, {"status": 429, "error": "Rate limit exceeded."})

    with pytest.raises(ApiError) as excinfo:
        await api.languages().get()

    assert excinfo.value.code == 429
    assert excinfo.value.message == "Rate limit exceeded."


async def test_non_json_error_uses_reason_phrase(api, recorder):
    recorder.reply(500, text="<html>oops</html>")

    with pytest.raises(ApiError) as excinfo:
        await api.countries().get()

    assert excinfo.value.code == 500
    assert excinfo.value.message == "Internal Server Error"


async def test_malformed_json_is_decode_error(api, recorder):
    recorder.reply(200, text='{"status": 200, "holidays": [')

    with pytest.raises(DecodeError):
        await api.holidays("US", 2020).get()


async def test_deeply_nested_json_is_decode_error(api, recorder):
    depth = 200_000
    recorder.reply(200, text="[" * depth + "]" * depth)

    with pytest.raises(DecodeError):
        await api.holidays("US", 2020).get()


async def test_numeric_string_status_is_api_error(api, recorder):
    recorder.reply(200, {"status": "401", "holidays": []})

    with pytest.raises(InvalidOrExpiredKeyError) as excinfo:
        await api.holidays("US", 2020).get()

    assert excinfo.value.code == 401


async def test_missing_resource_key_is_decode_error(api, recorder):
    recorder.reply(200, {"status": 200})

    with pytest.raises(DecodeError):
        await api.holidays("US", 2020).get()


async def test_wrong_record_shape_is_decode_error(api, recorder):
    recorder.reply(200, {"status": 200, "holidays": [{"name": "No date"}]})

    with pytest.raises(DecodeError):
        await api.holidays("US", 2020).get()


async def test_transport_failure_chains_cause(api, recorder):
    recorder.fail(httpx.ConnectError)

    with pytest.raises(TransportError) as excinfo:
        await api.countries().get()

    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)


async def test_timeout_is_transport_error(api, recorder):
    recorder.fail(httpx.ReadTimeout)

    with pytest.raises(TransportError):
        await api.languages().get()


async def test_builder_dispatches_once(api, recorder):
    recorder.reply(200, {"status": 200, "languages": []})
    request = api.languages()

    await request.get()
    with pytest.raises(ValidationError):
        await request.get()
    assert len(recorder.requests) == 1


async def test_get_full_exposes_quota_and_warning(api, recorder):
    recorder.reply(
        200,
        {
            "status": 200,
            "warning": "These results do not include state and province holidays.",
            "requests": QUOTA,
            "holidays": [NEW_YEAR],
        },
    )

    response = await api.holidays("US", 2020).get_full()

    assert isinstance(response, HolidaysResponse)
    assert response.requests.available == 9999
    assert response.warning.startswith("These results")
    assert len(response.holidays) == 1


async def test_get_raw_returns_body_text(api, recorder):
    body = {"status": 200, "languages": [{"code": "en", "name": "English"}]}
    recorder.reply(200, body)

    raw = await api.languages().search("eng").get_raw()

    assert json.loads(raw) == body


async def test_countries_decode_nested_codes(api, recorder):
    recorder.reply(
        200,
        {
            "status": 200,
            "countries": [
                {
                    "code": "US",
                    "name": "United States",
                    "languages": ["en"],
                    "codes": {"alpha-2": "US", "alpha-3": "USA", "numeric": "840"},
                    "flag": "https://flagsapi.com/US/flat/64.png",
                    "subdivisions": [{"code": "US-CA", "name": "California", "languages": ["en"]}],
                }
            ],
        },
    )

    countries = await api.countries().country("US").get()

    assert countries[0].codes.alpha_3 == "USA"
    assert countries[0].subdivisions[0].code == "US-CA"


async def test_workday_endpoints(api, recorder):
    recorder.reply(
        200,
        {"status": 200, "workday": {"date": "2020-01-15", "weekday": {"name": "Wednesday", "numeric": "3"}}},
    )
    workday = await api.workday("US", "2020-01-01", 10).get()
    assert workday.date == "2020-01-15"
    assert workday.weekday.name == "Wednesday"

    recorder.reply(200, {"status": 200, "workdays": 21})
    assert await api.workdays("US", "2020-01-01", "2020-01-31").get() == 21
    assert recorder.requests[-1].url.path == "/v1/workdays"


async def test_records_are_immutable(api, recorder):
    recorder.reply(200, {"status": 200, "holidays": [NEW_YEAR]})
    holiday = (await api.holidays("US", 2020).get())[0]

    with pytest.raises(PydanticValidationError):
        holiday.name = "Changed"


async def test_short_lived_client_used_without_injection(short_lived_api, recorder):
    recorder.reply(200, {"status": 200, "languages": []})

    assert await short_lived_api.languages().get() == []
    assert len(recorder.requests) == 1
    assert recorder.requests[0].headers["User-Agent"] == short_lived_api.settings.user_agent
