"""
Contact interpreter.

Unlike the other interpreters this one reads the whole contact dialog at once:
a collection of labeled raw sections (heading, text, labels, anchors).
"""

from __future__ import annotations

import re
from typing import Any, List, Mapping, Optional, Sequence

import structlog

from ..dedup import contact_key, dedupe
from ..models import Contact, ContactType, ExtractionRecord, RawAnchor, RawSection
from .base import BaseInterpreter
from .text import normalize_whitespace

logger = structlog.get_logger(__name__)

PLAIN_VALUE_TYPES = frozenset({ContactType.BIRTHDAY, ContactType.PHONE, ContactType.ADDRESS})

_LEADING_COLON = re.compile(r"^:\s*")


def map_contact_heading_to_type(heading: str) -> Optional[ContactType]:
    lower = heading.lower()
    if "profile" in lower:
        return ContactType.LINKEDIN
    if "website" in lower:
        return ContactType.WEBSITE
    if "email" in lower:
        return ContactType.EMAIL
    if "phone" in lower:
        return ContactType.PHONE
    if "twitter" in lower or "x.com" in lower:
        return ContactType.TWITTER
    if "birthday" in lower:
        return ContactType.BIRTHDAY
    if "address" in lower:
        return ContactType.ADDRESS
    return None


def _plain_value(text: str, heading: str, label: Optional[str]) -> Optional[str]:
    cleaned = normalize_whitespace(text)
    if not cleaned:
        return None
    cleaned = re.sub(rf"^{re.escape(heading)}\s*", "", cleaned, flags=re.IGNORECASE).strip()
    cleaned = _LEADING_COLON.sub("", cleaned).strip()
    if label:
        cleaned = re.sub(rf"\s*\({re.escape(label)}\)$", "", cleaned).strip()
    return cleaned or None


def _normalize_anchor(anchor: RawAnchor) -> Optional[RawAnchor]:
    href = normalize_whitespace(anchor.href) or None
    text = normalize_whitespace(anchor.text) or None
    if not href and not text:
        return None
    return RawAnchor(href=href, text=text)


def _anchor_value(contact_type: ContactType, anchor: RawAnchor) -> Optional[str]:
    if contact_type is ContactType.EMAIL:
        if anchor.href and anchor.href.startswith("mailto:"):
            return anchor.href[len("mailto:") :]
        return anchor.text
    if contact_type is ContactType.LINKEDIN:
        return anchor.href
    return anchor.href or anchor.text


class ContactInterpreter(BaseInterpreter[Contact]):
    name = "contact"
    required_fields = ("type", "value")
    # Labels are presentational, so a typed value is a complete contact.
    optional_fields = ()

    def parse_raw(self, sections: Sequence[RawSection]) -> List[Contact]:
        """Turn dialog sections into contacts, first occurrence of ``type|value`` wins."""
        contacts: List[Contact] = []
        for section in sections:
            contact_type = map_contact_heading_to_type(section.heading)
            if contact_type is None:
                logger.debug("Skipping unknown contact heading", heading=section.heading)
                continue

            label = section.labels[0] if section.labels else None

            if contact_type in PLAIN_VALUE_TYPES:
                value = _plain_value(section.text, section.heading, label)
                if value:
                    contacts.append(Contact(type=contact_type, value=value, label=label))
                continue

            for raw_anchor in section.anchors:
                anchor = _normalize_anchor(raw_anchor)
                if anchor is None:
                    continue
                value = _anchor_value(contact_type, anchor)
                if value:
                    contacts.append(Contact(type=contact_type, value=value, label=label))

        return dedupe(contacts, contact_key)

    def parse(self, record: ExtractionRecord) -> Optional[Contact]:
        """Read a record as a single section: heading first, anchors from links."""
        heading = record.text_at(0)
        if not heading:
            return None
        section = RawSection(
            heading=heading.lower(),
            text=" ".join(record.texts),
            anchors=tuple(RawAnchor(href=link.url, text=link.anchor_text) for link in record.links),
        )
        contacts = self.parse_raw([section])
        return contacts[0] if contacts else None

    def field_values(self, entity: Contact) -> Mapping[str, Any]:
        return {"type": entity.type, "value": entity.value}
