"""Semantic pattern detection for string values."""

import re
from datetime import datetime
from typing import Callable

from json_typegen.analysis.base import StringPattern

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)
ISO_DATE_PATTERN = re.compile(
    r"^\d{4}-\d{2}-\d{2}"
    r"(?:[T ]\d{2}:\d{2}(?::\d{2}(?:\.\d{3}(?:\d{3})?)?)?(?:Z|[+-]\d{2}:\d{2})?)?$"
)
URL_PATTERN = re.compile(r"^https?://.+")


def is_email(value: str) -> bool:
    return EMAIL_PATTERN.match(value) is not None


def is_uuid(value: str) -> bool:
    return UUID_PATTERN.match(value) is not None


def is_iso_date(value: str) -> bool:
    """Check for an ISO-8601 date or date-time that actually parses."""
    if ISO_DATE_PATTERN.match(value) is None:
        return False
    try:
        datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return False
    return True


def is_url(value: str) -> bool:
    return URL_PATTERN.match(value) is not None


# Checked in order; the first rule matched by every value wins.
PATTERN_RULES: list[tuple[StringPattern, Callable[[str], bool]]] = [
    (StringPattern.EMAIL, is_email),
    (StringPattern.UUID, is_uuid),
    (StringPattern.DATE, is_iso_date),
    (StringPattern.URL, is_url),
]


def detect_pattern(values: list[str]) -> StringPattern | None:
    """Find the semantic pattern shared by all values.

    Args:
        values: Non-empty list of strings

    Returns:
        The first pattern in priority order that every value matches, or None
    """
    if not values:
        return None

    for pattern, matches in PATTERN_RULES:
        if all(matches(value) for value in values):
            return pattern
    return None
