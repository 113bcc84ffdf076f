"""
Base class for entity interpreters.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, Mapping, Optional, Tuple, TypeVar

import structlog

from ..extraction.confidence import field_present, presence_confidence
from ..models import ExtractionRecord, Link
from ..protocols import ParseOutcome

T = TypeVar("T")

logger = structlog.get_logger(__name__)


class BaseInterpreter(ABC, Generic[T]):
    """
    Turns one extraction record into a typed entity or rejects it.

    Subclasses declare ``required_fields`` (absence means ``parse`` returns
    None) and ``optional_fields`` (used only for confidence).
    """

    name: str = ""
    required_fields: Tuple[str, ...] = ()
    optional_fields: Tuple[str, ...] = ()

    @abstractmethod
    def parse(self, record: ExtractionRecord) -> Optional[T]:
        """Return the entity described by ``record`` or None."""

    def field_values(self, entity: T) -> Mapping[str, Any]:
        names = self.required_fields + self.optional_fields
        return {name: getattr(entity, name, None) for name in names}

    def validate(self, entity: Any) -> bool:
        if entity is None:
            return False
        values = self.field_values(entity)
        return all(field_present(values.get(name)) for name in self.required_fields)

    def confidence(self, entity: T) -> float:
        values = self.field_values(entity)
        return presence_confidence([values.get(name) for name in self.optional_fields])

    def interpret(self, record: ExtractionRecord) -> ParseOutcome[T]:
        """Parse ``record`` into an explicit outcome; never raises."""
        try:
            entity = self.parse(record)
        except Exception as e:
            logger.debug("Interpreter raised", interpreter=self.name, error=str(e), error_type=type(e).__name__)
            return ParseOutcome.rejected(f"{type(e).__name__}: {e}")

        if entity is None:
            return ParseOutcome.rejected("required fields missing")
        if not self.validate(entity):
            return ParseOutcome.rejected("validation failed")
        return ParseOutcome(entity=entity, confidence=self.confidence(entity))


def first_link(record: ExtractionRecord, *, internal_only: bool = False) -> Optional[Link]:
    for link in record.links:
        if not link.url:
            continue
        if internal_only and link.is_external:
            continue
        return link
    return None


def usable_href(href: Optional[str]) -> bool:
    """Anchors pointing at ``#`` fragments or ``javascript:void(0)`` carry no target."""
    return bool(href) and "#" not in href and "void(0)" not in href  # type: ignore[operator]
