"""
Experience interpreter.

Two markup shapes are supported. A single-position entry reads positionally
(title, "Company · Employment type", date range, location, description). A
grouped entry has the company on top and one sub-record per position.
"""

from __future__ import annotations

import re
from typing import Any, List, Mapping, Optional

from ..extraction.confidence import field_present, item_confidence
from ..models import Experience, ExtractionRecord, Position
from .base import BaseInterpreter, first_link
from .dates import looks_like_date, parse_date_range
from .text import split_separator

EMPLOYMENT_TYPES = frozenset(
    {
        "full-time",
        "part-time",
        "self-employed",
        "freelance",
        "contract",
        "internship",
        "apprenticeship",
        "seasonal",
        "temporary",
    }
)

_WORKPLACE = re.compile(r"\b(remote|on-site|hybrid)\b", re.IGNORECASE)

POSITION_OPTIONAL_FIELDS = ("employment_type", "from_date", "to_date", "duration", "location", "description")


def _is_employment_type(line: str) -> bool:
    return split_separator(line)[0].lower() in EMPLOYMENT_TYPES


def _looks_like_location(line: str) -> bool:
    return "," in line or bool(_WORKPLACE.search(line))


def _parse_position(record: ExtractionRecord) -> Optional[Position]:
    """Classify the lines of one grouped position by pattern."""
    title = record.text_at(0)
    if not title:
        return None

    employment_type: Optional[str] = None
    location: Optional[str] = None
    date_text: Optional[str] = None
    description: List[str] = []

    for line in record.texts[1:]:
        if date_text is None and looks_like_date(split_separator(line)[0]):
            date_text = line
        elif employment_type is None and _is_employment_type(line):
            employment_type = split_separator(line)[0]
        elif location is None and _looks_like_location(line):
            location = line
        else:
            description.append(line)

    date_range = parse_date_range(date_text, include_duration=True)
    return Position(
        title=title,
        employment_type=employment_type,
        from_date=date_range.from_date,
        to_date=date_range.to_date,
        duration=date_range.duration,
        location=location,
        description="\n".join(description) or None,
    )


class ExperienceInterpreter(BaseInterpreter[Experience]):
    name = "experience"
    required_fields = ("company", "positions")
    optional_fields = ("linkedin_url",) + POSITION_OPTIONAL_FIELDS

    def parse(self, record: ExtractionRecord) -> Optional[Experience]:
        if record.has_sub_items:
            return self._parse_grouped(record)
        return self._parse_single(record)

    def _parse_grouped(self, record: ExtractionRecord) -> Optional[Experience]:
        company = record.text_at(0)
        if not company:
            return None
        positions = tuple(p for p in (_parse_position(sub) for sub in record.sub_items) if p is not None)
        if not positions:
            return None
        return Experience(company=company, positions=positions, linkedin_url=self._company_url(record))

    def _parse_single(self, record: ExtractionRecord) -> Optional[Experience]:
        title = record.text_at(0)
        company_line = record.text_at(1)
        if not title or not company_line:
            return None

        company_parts = split_separator(company_line)
        company = company_parts[0]
        if not company:
            return None
        employment_type = company_parts[1] if len(company_parts) > 1 and company_parts[1] else None

        date_range = parse_date_range(record.text_at(2), include_duration=True)
        position = Position(
            title=title,
            employment_type=employment_type,
            from_date=date_range.from_date,
            to_date=date_range.to_date,
            duration=date_range.duration,
            location=record.text_at(3),
            description="\n".join(record.texts[4:]) or None,
        )
        return Experience(company=company, positions=(position,), linkedin_url=self._company_url(record))

    @staticmethod
    def _company_url(record: ExtractionRecord) -> Optional[str]:
        link = first_link(record, internal_only=True)
        return link.url if link else None

    def validate(self, entity: Any) -> bool:
        if not isinstance(entity, Experience):
            return False
        return bool(entity.company) and all(position.title for position in entity.positions)

    def field_values(self, entity: Experience) -> Mapping[str, Any]:
        return {"company": entity.company, "positions": entity.positions, "linkedin_url": entity.linkedin_url}

    def confidence(self, entity: Experience) -> float:
        """Optional-field presence averaged over every position plus the company link."""
        present = 1 if field_present(entity.linkedin_url) else 0
        total = 1
        for position in entity.positions:
            present += sum(1 for name in POSITION_OPTIONAL_FIELDS if field_present(getattr(position, name)))
            total += len(POSITION_OPTIONAL_FIELDS)
        return item_confidence(present, total)
