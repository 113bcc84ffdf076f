"""Patent interpreter."""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from ..models import ExtractionRecord, Link, Patent
from .base import BaseInterpreter, usable_href
from .text import decode_redirect_url, normalize_plain_text_lines, split_separator, strip_prefix, to_plain_text

PATENTS_HEADING = "Patents"
EMPTY_STATE_MARKER = "adds will appear here"

_ISSUED = re.compile(r"\bissued\b", re.IGNORECASE)
_OFFICE_AND_NUMBER = re.compile(r"^[A-Z]{2}\s+[A-Z0-9,\-]+(?:\s+[A-Z0-9,\-]+)*$")
_DIGIT = re.compile(r"\d")
_ISSUER_PREFIX = re.compile(r"^([A-Z]{2})\s+(.+)$")


def looks_like_patent_metadata(line: str) -> bool:
    """``"US US10424882B2 · Issued Sep 24, 2019"``, ``"Issued Jan 2020"`` or ``"EP 1234567"``."""
    if _ISSUED.search(line):
        return True
    return bool(_OFFICE_AND_NUMBER.match(line) and _DIGIT.search(line))


def parse_patent_subtitle(line: str) -> Tuple[Optional[str], Optional[str], Optional[str]]:
    """Split a metadata line into ``(issuer, number, issued_date)``."""
    parts = split_separator(line)
    head = parts[0]
    tail = parts[1] if len(parts) > 1 else None

    if head.lower().startswith("issued"):
        return None, None, strip_prefix(head, "issued") or None

    issuer: Optional[str] = None
    number: Optional[str] = head or None
    match = _ISSUER_PREFIX.match(head)
    if match:
        issuer, number = match.group(1), match.group(2).strip()

    issued_date = (strip_prefix(tail, "issued") or None) if tail else None
    return issuer, number, issued_date


def _patent_link(links: Tuple[Link, ...]) -> Optional[str]:
    for link in links:
        if not usable_href(link.url):
            continue
        if "show patent" in link.anchor_text.lower() or "patent" in link.url.lower():
            return decode_redirect_url(link.url)
    return None


class PatentInterpreter(BaseInterpreter[Patent]):
    name = "patent"
    required_fields = ("title",)
    optional_fields = ("issuer", "number", "issued_date", "url", "description")

    def parse(self, record: ExtractionRecord) -> Optional[Patent]:
        title = record.text_at(0)
        if not title:
            return None
        if len(record.texts) == 1 and title == PATENTS_HEADING:
            return None
        if any(EMPTY_STATE_MARKER in line.lower() for line in record.texts):
            return None

        issuer = number = issued_date = None
        metadata_index: Optional[int] = None
        for index, line in enumerate(record.texts[1:], start=1):
            if looks_like_patent_metadata(line):
                metadata_index = index
                issuer, number, issued_date = parse_patent_subtitle(line)
                break

        remaining: List[str] = [
            line
            for index, line in enumerate(record.texts[1:], start=1)
            if index != metadata_index and not looks_like_patent_metadata(line)
        ]
        description_lines = normalize_plain_text_lines(remaining)

        return Patent(
            title=title,
            issuer=issuer,
            number=number,
            issued_date=issued_date,
            url=_patent_link(record.links),
            description="\n".join(description_lines) or None,
            plain_text=to_plain_text(record.texts),
        )
