"""
Protocols for the pluggable pieces of the extraction core.

The Page Driver is an external collaborator; strategies and interpreters are
the two polymorphic seams of the pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Generic, List, Mapping, Optional, Protocol, Sequence, Tuple, TypeVar, runtime_checkable

from .models import ExtractionRecord, RawSection

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

# Opaque handle to a DOM area; only the driver that produced it understands it.
Region = Any


@runtime_checkable
class PageDriver(Protocol):
    """Minimal document access needed by the extraction core.

    Every call may raise ``DriverError`` on a transient failure.
    """

    async def goto(self, url: str) -> bool:
        """Navigate to ``url``; return True when the document is ready."""
        ...

    def current_url(self) -> str:
        ...

    async def locate(self, selector: str, scope: Optional[Region] = None) -> List[Region]:
        """Return zero or more regions matching ``selector`` (document order)."""
        ...

    async def region_text(self, region: Region) -> str:
        """Visible text of the region with structural line breaks preserved."""
        ...

    async def region_links(self, region: Region) -> List[Dict[str, str]]:
        """Anchors inside the region as ``{"url": ..., "text": ...}`` dicts."""
        ...

    async def region_children(self, region: Region, selector: str) -> List[Region]:
        ...

    async def region_html(self, region: Region) -> str:
        """Outer markup of the region."""
        ...

    async def region_tag(self, region: Region) -> str:
        """Lower-case element name of the region, e.g. ``"li"``."""
        ...

    async def click(self, region: Region) -> None:
        ...


class RegionKind(str, Enum):
    SINGLE = "single"
    LIST = "list"
    RAW = "raw"


@dataclass(slots=True, frozen=True)
class TaggedRegion:
    """A region plus free-form context tags (e.g. the interest tab category)."""

    handle: Region
    context: Mapping[str, str] = field(default_factory=dict)


@dataclass(slots=True, frozen=True)
class RegionSet:
    """Regions resolved for one logical section.

    ``SINGLE`` and ``LIST`` sets carry ``regions``; ``RAW`` sets carry
    already-materialised ``raw`` sections (contact dialog).
    """

    section: str
    kind: RegionKind
    regions: Tuple[TaggedRegion, ...] = ()
    raw: Tuple[RawSection, ...] = ()
    source_selector: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.regions and not self.raw

    def __len__(self) -> int:
        return len(self.raw) if self.kind is RegionKind.RAW else len(self.regions)


@runtime_checkable
class ExtractionStrategy(Protocol):
    """One technique for turning regions into extraction records."""

    name: str

    async def attempt(self, regions: Sequence[TaggedRegion]) -> List[ExtractionRecord]:
        """Return one record per region that yielded text, in input order."""
        ...


@dataclass(slots=True, frozen=True)
class ParseOutcome(Generic[T]):
    """Explicit result of interpreting one record: an entity or a reason."""

    entity: Optional[T] = None
    reason: Optional[str] = None
    confidence: float = 0.0

    @property
    def ok(self) -> bool:
        return self.entity is not None

    @classmethod
    def rejected(cls, reason: str) -> "ParseOutcome[T]":
        return cls(entity=None, reason=reason, confidence=0.0)


@runtime_checkable
class Interpreter(Protocol[T_co]):
    """Entity-specific reading of an extraction record."""

    name: str
    required_fields: Tuple[str, ...]
    optional_fields: Tuple[str, ...]

    def parse(self, record: ExtractionRecord) -> Optional[T_co]:
        ...

    def validate(self, entity: Any) -> bool:
        ...

    def confidence(self, entity: Any) -> float:
        ...

    def interpret(self, record: ExtractionRecord) -> ParseOutcome[Any]:
        ...
