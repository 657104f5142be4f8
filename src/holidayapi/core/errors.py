"""Error taxonomy.

Every error raised by the library derives from `HolidayAPIError`:

- InvalidCredentialError: malformed API key at client construction
- InvalidVersionError: unsupported API version at client construction
- ValidationError: query parameters rejected locally, no request sent
- TransportError: network/TLS failure talking to the API
- ApiError: the API answered with an error status or message
- DecodeError: a success response did not match the expected schema
"""

from __future__ import annotations


class HolidayAPIError(Exception):
    """Base exception for all client errors."""


class InvalidCredentialError(HolidayAPIError, ValueError):
    """The API key is empty or not UUID shaped."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Invalid key: {key!r}")


class InvalidVersionError(HolidayAPIError, ValueError):
    def __init__(self, version: int, supported: tuple[int, ...]) -> None:
        self.version = version
        self.supported = supported
        super().__init__(f"Invalid version: {version}, please choose: {list(supported)}")


class ValidationError(HolidayAPIError, ValueError):
    """Query parameters failed local validation.

    `problems` holds one human readable entry per offending field.
    """

    def __init__(self, endpoint: str, problems: list[str]) -> None:
        self.endpoint = endpoint
        self.problems = problems
        super().__init__(f"Invalid {endpoint} request: " + "; ".join(problems))


class TransportError(HolidayAPIError):
    """The request never produced an HTTP response. The cause is chained."""


class ApiError(HolidayAPIError):
    def __init__(self, code: int, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"HTTP {code}: {message}")


class InvalidOrExpiredKeyError(ApiError):
    """HTTP 401: the key is well formed but rejected by the API."""


class DecodeError(HolidayAPIError):
    """Response body is not JSON or does not match the response model."""
