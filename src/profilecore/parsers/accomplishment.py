"""Accomplishment interpreter (certifications, honors, publications, ...)."""

from __future__ import annotations

import re
from typing import Optional

from ..models import Accomplishment, ExtractionRecord
from .base import BaseInterpreter, usable_href
from .dates import looks_like_date
from .text import fix_separator, split_separator, strip_prefix

MAX_TITLE_LENGTH = 200
# Only the first few lines after the title carry metadata.
MAX_METADATA_LINES = 5

_ISSUED_BY = re.compile(r"^Issued by\s+(.+?)(?:\s*·\s*(.+))?$", re.IGNORECASE)
_ISSUED = re.compile(r"^Issued\s+(.+)$", re.IGNORECASE)
_CREDENTIAL_ID = re.compile(r"^Credential ID\s+(.+)$", re.IGNORECASE)


class AccomplishmentInterpreter(BaseInterpreter[Accomplishment]):
    name = "accomplishment"
    required_fields = ("category", "title")
    optional_fields = ("issuer", "issued_date", "credential_id", "credential_url")

    def parse(self, record: ExtractionRecord) -> Optional[Accomplishment]:
        title = record.text_at(0)
        category = record.context.get("category")
        if not title or not category or len(title) > MAX_TITLE_LENGTH:
            return None

        issuer: Optional[str] = None
        issued_date: Optional[str] = None
        credential_id: Optional[str] = None

        for index, raw_line in enumerate(record.texts[1 : MAX_METADATA_LINES + 1], start=1):
            line = fix_separator(raw_line)

            match = _ISSUED_BY.match(line)
            if match:
                issuer = match.group(1).strip()
                if match.group(2):
                    issued_date = match.group(2).strip()
                continue

            match = _ISSUED.match(line)
            if match and issued_date is None:
                issued_date = match.group(1).strip()
                continue

            match = _CREDENTIAL_ID.match(line)
            if match:
                credential_id = match.group(1).strip()
                continue

            if issued_date is None and looks_like_date(line):
                dated = next((part for part in split_separator(line) if looks_like_date(part)), line)
                issued_date = strip_prefix(dated, "issued") or None
                continue

            if issuer is None and index == 1:
                issuer = line

        credential_url = next(
            (
                link.url
                for link in record.links
                if usable_href(link.url) and ("credential" in link.url.lower() or "verify" in link.url.lower())
            ),
            None,
        )

        return Accomplishment(
            category=category,
            title=title,
            issuer=issuer,
            issued_date=issued_date,
            credential_id=credential_id,
            credential_url=credential_url,
        )
