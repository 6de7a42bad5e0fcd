# core/normalizer.py
"""
Turns the loosely-typed fields of the plan form (strings, repeated fields,
JSON numbers or nothing at all) into a TripRequest.
"""

from typing import Any, Mapping

from core.errors import EmptyCity, EmptyInterests, InputTooLong, TooManyDays
from core.models import TripRequest

DEFAULT_INTERESTS = "general sightseeing"
DEFAULT_DAYS = 3
MAX_CITY_LENGTH = 100
MAX_INTERESTS_LENGTH = 200


def _sanitize(text: str) -> str:
    return text.strip().replace("<", "").replace(">", "").strip()


def _checked(text: str, limit: int, empty_error) -> str:
    # the length limit applies to the text as submitted, before trimming or stripping
    if not text.strip():
        raise empty_error()
    if len(text) > limit:
        raise InputTooLong()
    cleaned = _sanitize(text)
    if not cleaned:
        raise empty_error()
    return cleaned


def normalize_city(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    if value is None:
        raise EmptyCity()
    return _checked(value if isinstance(value, str) else str(value), MAX_CITY_LENGTH, EmptyCity)


def normalize_interests(value: Any) -> str:
    if value is None:
        return DEFAULT_INTERESTS
    if isinstance(value, (list, tuple)):
        value = ", ".join(str(v) for v in value)
    elif not isinstance(value, str):
        value = str(value)
    return _checked(value, MAX_INTERESTS_LENGTH, EmptyInterests)


def normalize_days(value: Any, max_days: int = 30) -> int:
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    try:
        days = int(str(value).strip())
    except (TypeError, ValueError):
        return DEFAULT_DAYS
    if days < 1:
        return DEFAULT_DAYS
    if days > max_days:
        raise TooManyDays(max_days)
    return days


def normalize_trip_request(raw: Mapping[str, Any], max_days: int = 30) -> TripRequest:
    """Validate raw form data; raises a ValidationError subclass on bad input."""
    return TripRequest(
        city=normalize_city(raw.get("city")),
        interests=normalize_interests(raw.get("interests")),
        days=normalize_days(raw.get("days"), max_days=max_days),
    )
