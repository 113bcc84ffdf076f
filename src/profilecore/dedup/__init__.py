"""
Deduplication of extracted entities by caller-supplied composite keys.
"""

from .keyed import SECTION_KEYS, contact_key, dedupe, dedupe_section

__all__ = ["SECTION_KEYS", "contact_key", "dedupe", "dedupe_section"]
