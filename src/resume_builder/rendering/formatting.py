"""Formatting helpers shared by the section builders and template filters.

Every helper here is permissive: malformed or missing input yields an empty
string, never an exception.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import date, datetime
from typing import Any

__all__ = [
    "PRESENT",
    "as_items",
    "as_mapping",
    "clean_text",
    "format_date",
    "format_date_range",
    "join_present",
    "parse_date",
    "text_list",
]

PRESENT = "Present"

_MONTH_ABBR = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

# Tried in order after ISO-8601 parsing fails.
_FALLBACK_FORMATS = ("%Y-%m", "%Y/%m/%d", "%Y/%m", "%m/%d/%Y", "%b %Y", "%B %Y", "%Y")


def parse_date(value: Any) -> date | None:
    """Interpret *value* as a calendar date, or return ``None``.

    Accepts ``date``/``datetime`` objects, ISO-8601 strings (``2023-01-15``,
    ``2023-01-15T00:00:00Z``) and a few common month-precision forms
    (``2023-01``, ``01/15/2023``, ``Jan 2023``). A bare year reads as January.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None

    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass

    for fmt in _FALLBACK_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def format_date(value: Any) -> str:
    """Return ``Mon YYYY`` (e.g. ``Jan 2023``) for *value*, or ``""``."""
    parsed = parse_date(value)
    if parsed is None:
        return ""
    return f"{_MONTH_ABBR[parsed.month - 1]} {parsed.year:04d}"


def format_date_range(
    start: Any,
    end: Any,
    current: bool = False,
    separator: str = " - ",
) -> str:
    """Return a formatted range like ``Jan 2022 - Present``.

    ``current`` replaces the end side with ``Present`` whatever *end* holds.
    When only one side is known it is returned alone.
    """
    start_str = format_date(start)
    end_str = PRESENT if current else format_date(end)

    if start_str and end_str:
        return f"{start_str}{separator}{end_str}"
    return start_str or end_str


def clean_text(value: Any) -> str:
    """Return a scalar field as stripped text, mapping ``None`` and containers to ``""``."""
    if value is None or isinstance(value, (bool, Mapping, list, tuple, set)):
        return ""
    return str(value).strip()


def join_present(parts: Iterable[str], separator: str) -> str:
    """Join the non-empty strings in *parts* with *separator*."""
    return separator.join(part for part in parts if part)


def as_mapping(value: Any) -> Mapping[str, Any]:
    """Return *value* if it is a mapping, else an empty dict."""
    return value if isinstance(value, Mapping) else {}


def as_items(value: Any) -> list[Mapping[str, Any]]:
    """Return the mapping elements of a list-like *value*."""
    if not isinstance(value, (list, tuple)):
        return []
    return [item for item in value if isinstance(item, Mapping)]


def text_list(value: Any) -> list[str]:
    """Return the non-empty strings of a list-like *value*."""
    if not isinstance(value, (list, tuple)):
        return []
    cleaned = (clean_text(item) for item in value)
    return [item for item in cleaned if item]
