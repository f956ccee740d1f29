"""Error taxonomy for the HTTP-facing core.

Every error that can reach a client is an ApiError.  The API layer renders
them as ``{"error": message}`` with the carried status code.
"""

from __future__ import annotations


class ApiError(Exception):
    """Base class for errors that map directly onto an HTTP response."""

    status_code: int = 500
    default_message: str = "Internal error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(ApiError):
    status_code = 404
    default_message = "Not found"


class JourneyNotFoundError(NotFoundError):
    default_message = "Journey not found"

    def __init__(self, journey_id: str) -> None:
        self.journey_id = journey_id
        super().__init__()


class BadRequestError(ApiError):
    status_code = 400
    default_message = "Invalid request body"


class SensoryRangeError(BadRequestError):
    """Raised only when strict sensory-level checking is enabled."""

    default_message = "Sensory levels must be integers between 0 and 10"
