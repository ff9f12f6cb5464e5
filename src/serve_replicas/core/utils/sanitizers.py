"""Sanitizers for interactive filter and pagination input.

Values typed into the page's filter pickers and page-size box are never
rejected. They are normalized to something usable instead.
"""

import math
import sys
from enum import Enum
from typing import Any

from serve_replicas.core.utils.constants import (
    DEFAULT_PAGE_NO,
    DEFAULT_PAGE_SIZE,
    FILTER_PLACEHOLDER,
    MAX_PAGE_SIZE,
    MIN_PAGE_SIZE,
)


def _parse_number(value: Any) -> float | int | None:
    """Parse ``value`` as a number, returning None for anything non-numeric."""
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, int):
        return value

    if isinstance(value, str):
        value = value.strip()

    try:
        number = float(value)
    except (TypeError, ValueError):
        return None

    if math.isnan(number):
        return None
    return number


def normalize_filter_value(value: str | Enum | None) -> str:
    """Trim a filter value; blank and placeholder values mean "no filter".

    Enum members (e.g. a replica's own ``ReplicaState``) reduce to their value.
    """
    if value is None:
        return ""

    if isinstance(value, Enum):
        value = value.value

    trimmed = str(value).strip()
    if trimmed == FILTER_PLACEHOLDER:
        return ""
    return trimmed


def parse_page_size(value: Any, default: int = DEFAULT_PAGE_SIZE) -> int:
    """Sanitize a requested page size.

    Anything that does not parse as a positive number falls back to
    ``default``. Positive numbers are floored and clamped into
    [MIN_PAGE_SIZE, MAX_PAGE_SIZE].

    Example:
        parse_page_size("abc")   -> 10
        parse_page_size("99999") -> 500
        parse_page_size("0")     -> 10
    """
    number = _parse_number(value)
    if number is None or number <= 0:
        return default

    if isinstance(number, float) and math.isinf(number):
        return MAX_PAGE_SIZE

    return min(max(math.floor(number), MIN_PAGE_SIZE), MAX_PAGE_SIZE)


def coerce_page_no(value: Any) -> int:
    """Turn a requested page number into an int without range checking.

    Fractional numbers are floored, infinities map to the extreme ints and
    non-numbers fall back to the first page. Range clamping is left to the
    page slicer, which knows how many pages exist.
    """
    number = _parse_number(value)
    if number is None:
        return DEFAULT_PAGE_NO

    if isinstance(number, float) and math.isinf(number):
        return sys.maxsize if number > 0 else -sys.maxsize

    return math.floor(number)
