"""
Date-range parsing shared by the education, experience and patent interpreters.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from .text import split_separator

PRESENT = "Present"
_PRESENT_ALIASES = {"present", "current", "now", "ongoing"}
_MONTH = re.compile(r"\b(jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)[a-z]*\.?\s+\d", re.IGNORECASE)
_YEAR = re.compile(r"\b(19|20)\d{2}\b")


@dataclass(slots=True, frozen=True)
class DateRange:
    from_date: Optional[str] = None
    to_date: Optional[str] = None
    duration: Optional[str] = None


def _normalize_to(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return PRESENT if value.lower() in _PRESENT_ALIASES else value


def parse_date_range(value: Optional[str], *, include_duration: bool = False) -> DateRange:
    """Parse ``"Jan 2020 - Present · 4 yrs"`` style strings.

    Without ``include_duration`` (education mode) the text after ``·`` is
    ignored and a single token is reused as both ends of the range. With it
    (experience mode) the duration is returned and a single token only sets
    ``from_date``.
    """
    if not value or not value.strip():
        return DateRange()

    parts = split_separator(value)
    times = parts[0]
    duration = parts[1] if include_duration and len(parts) > 1 else None

    if " - " in times:
        start, _, end = times.partition(" - ")
        from_date = start.strip() or None
        to_date = _normalize_to(end.strip() or None)
    elif include_duration:
        from_date, to_date = times or None, None
    else:
        from_date = to_date = times or None

    return DateRange(from_date=from_date, to_date=to_date, duration=duration)


def looks_like_date(value: str) -> bool:
    """True for lines such as ``"Jan 2024"`` or ``"2019 - 2021"``."""
    return bool(_MONTH.search(value) or _YEAR.search(value))


def looks_like_date_range(value: str) -> bool:
    times = split_separator(value)[0]
    return " - " in times and looks_like_date(times)
