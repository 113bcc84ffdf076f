"""
Per-item confidence scoring.

A parse that satisfies its required fields scores a 0.5 baseline; the other
half is earned by populating optional fields. The weighting is a tunable,
not a contract: the pipeline threshold (0.3) accepts minimally valid
extraction while the health reporter's 0.65 bar asks for richer records.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence

BASELINE_CONFIDENCE = 0.5
RICHNESS_WEIGHT = 0.5


def field_present(value: Any) -> bool:
    """A field counts as present when it is neither None nor empty."""
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, (list, tuple, dict, set)):
        return len(value) > 0
    return True


def item_confidence(optional_present: int, optional_total: int) -> float:
    """Confidence of a valid item given how many optional fields it filled."""
    if optional_total <= 0:
        return 1.0
    ratio = min(max(optional_present, 0), optional_total) / optional_total
    return round(BASELINE_CONFIDENCE + RICHNESS_WEIGHT * ratio, 6)


def presence_confidence(values: Sequence[Any]) -> float:
    return item_confidence(sum(1 for value in values if field_present(value)), len(values))


def average_confidence(scores: Iterable[float]) -> float:
    """Mean of ``scores``; 0.0 for an empty collection."""
    values = list(scores)
    if not values:
        return 0.0
    return round(sum(values) / len(values), 6)
