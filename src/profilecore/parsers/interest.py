"""Interest interpreter."""

from __future__ import annotations

from typing import Optional

from ..models import ExtractionRecord, Interest
from .base import BaseInterpreter, usable_href
from .text import to_plain_text


def map_interest_tab_to_category(tab_name: str) -> str:
    """Map an interests tab label onto the fixed category vocabulary."""
    lower = tab_name.strip().lower()
    if "compan" in lower:
        return "company"
    if "group" in lower:
        return "group"
    if "school" in lower:
        return "school"
    if "newsletter" in lower:
        return "newsletter"
    if "voice" in lower or "influencer" in lower:
        return "influencer"
    return lower


class InterestInterpreter(BaseInterpreter[Interest]):
    """An interest without a linked target is rejected."""

    name = "interest"
    required_fields = ("name", "category", "linkedin_url")
    optional_fields = ("plain_text",)

    def parse(self, record: ExtractionRecord) -> Optional[Interest]:
        name = record.text_at(0)
        category = map_interest_tab_to_category(record.context.get("category", ""))
        if not name or not category:
            return None

        link = next((link for link in record.links if usable_href(link.url)), None)
        if link is None:
            return None

        return Interest(
            name=name,
            category=category,
            linkedin_url=link.url,
            plain_text=to_plain_text(record.texts),
        )
