"""
Key-based deduplication of extracted entities.

The deduplicator knows nothing about entity shapes; callers supply the key.
``SECTION_KEYS`` holds the composite keys used for each profile section.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Hashable, Iterable, List, Set, TypeVar

import structlog

T = TypeVar("T")

logger = structlog.get_logger(__name__)


def dedupe(items: Iterable[T], key_fn: Callable[[T], Hashable]) -> List[T]:
    """Drop items whose key was already seen; first occurrence wins, order is kept."""
    seen: Set[Hashable] = set()
    unique: List[T] = []
    for item in items:
        key = key_fn(item)
        if key in seen:
            continue
        seen.add(key)
        unique.append(item)
    return unique


def experience_key(item: Any) -> str:
    first_title = item.positions[0].title if item.positions else ""
    return f"{item.company}|{first_title}"


def education_key(item: Any) -> str:
    return f"{item.institution_name}|{item.degree or ''}"


def patent_key(item: Any) -> str:
    return f"{item.title}|{item.number or ''}"


def accomplishment_key(item: Any) -> str:
    return f"{item.category}|{item.title}"


def interest_key(item: Any) -> str:
    return f"{item.category}|{item.name}"


def contact_key(item: Any) -> str:
    contact_type = getattr(item.type, "value", item.type)
    return f"{contact_type}|{item.value}"


SECTION_KEYS: Dict[str, Callable[[Any], Hashable]] = {
    "experience": experience_key,
    "education": education_key,
    "patents": patent_key,
    "accomplishments": accomplishment_key,
    "interests": interest_key,
    "contact": contact_key,
}


def dedupe_section(section: str, items: Iterable[T]) -> List[T]:
    """Apply the section's composite key; sections without one pass through unchanged."""
    materialized = list(items)
    key_fn = SECTION_KEYS.get(section)
    if key_fn is None:
        return materialized
    unique = dedupe(materialized, key_fn)
    dropped = len(materialized) - len(unique)
    if dropped:
        logger.debug("Dropped duplicate entities", section=section, dropped=dropped)
    return unique
