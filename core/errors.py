# core/errors.py

from typing import Optional

import requests
from google.api_core import exceptions as google_exceptions

GENERIC_MESSAGE = "Error generating travel plan. Please try again."

_STATUS_MESSAGES = {
    429: "Too many requests. Please try again later.",
    401: "API key invalid. Please check your configuration.",
    403: "API access denied. Please check your API keys.",
}


class TravelPlannerError(RuntimeError):
    """Base class for every error raised by the planner."""


class ConfigError(TravelPlannerError):
    """Missing or invalid configuration; the server must not start."""


# ──────────────────────────────────────────────────────────────────────────────
# User-correctable input errors
# ──────────────────────────────────────────────────────────────────────────────
class ValidationError(TravelPlannerError):
    user_message = "Please check your input and try again."

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.user_message = message
        super().__init__(self.user_message)


class EmptyCity(ValidationError):
    user_message = "Please provide a city name"


class EmptyInterests(ValidationError):
    user_message = "Please provide your travel interests"


class InputTooLong(ValidationError):
    user_message = "Input too long. Please shorten your city name or interests."


class TooManyDays(ValidationError):
    def __init__(self, max_days: int):
        self.max_days = max_days
        super().__init__(f"Trips are limited to {max_days} days.")


# ──────────────────────────────────────────────────────────────────────────────
# Outbound failures, recovered locally
# ──────────────────────────────────────────────────────────────────────────────
class SourceFailure(TravelPlannerError):
    """The itinerary provider was unreachable or returned unusable data."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class ImageLookupFailure(TravelPlannerError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def _status_code(exc: BaseException) -> Optional[int]:
    if isinstance(exc, requests.HTTPError) and exc.response is not None:
        return exc.response.status_code
    if isinstance(exc, google_exceptions.GoogleAPICallError):
        return exc.code
    return getattr(exc, "status_code", None)


def user_message_for(exc: BaseException) -> str:
    """Map an unexpected exception to the text shown on the error page."""
    if isinstance(exc, ValidationError):
        return exc.user_message
    if isinstance(exc, (requests.Timeout, google_exceptions.DeadlineExceeded, TimeoutError)):
        return "Request timed out. Please try again."
    return _STATUS_MESSAGES.get(_status_code(exc), GENERIC_MESSAGE)
