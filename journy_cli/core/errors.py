"""Error kinds returned by the API client and raised by local checks."""

from __future__ import annotations


class JournyError(Exception):
    """Base class for every classified CLI failure."""

    kind: str = "error"

    def __init__(self, message: str, status_code: int = 0):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        return self.message


class PreconditionError(JournyError):
    """Local failure caught before anything is sent over the wire."""

    kind = "precondition"


class TransportError(JournyError):
    """The request never produced an HTTP response."""

    kind = "transport"


class UnauthorizedError(JournyError):
    kind = "unauthorized"


class RateLimitedError(JournyError):
    kind = "rate_limited"


class ApiError(JournyError):
    """The API rejected the request and explained why."""

    kind = "api"


class RequestFailedError(JournyError):
    kind = "request_failed"
