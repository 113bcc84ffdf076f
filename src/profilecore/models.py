"""
Data models for profile extraction.

Extraction records are the strategy-neutral intermediate form produced by
strategies; domain entities are the typed results produced by interpreters.
All of them are immutable once constructed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, List, Mapping, Optional, Tuple, TypeVar

T = TypeVar("T")


# --- Extraction records ---


@dataclass(slots=True, frozen=True)
class Link:
    """An anchor found inside a region."""

    url: str
    anchor_text: str = ""
    is_external: bool = False


@dataclass(slots=True, frozen=True)
class ExtractionRecord:
    """Strategy-neutral reading of one region.

    ``texts`` order is meaningful: position 0 is conventionally the
    title or name of the item.
    """

    texts: Tuple[str, ...] = ()
    links: Tuple[Link, ...] = ()
    context: Mapping[str, str] = field(default_factory=dict)
    sub_items: Tuple["ExtractionRecord", ...] = ()

    def __post_init__(self) -> None:
        for idx, text in enumerate(self.texts):
            if not text:
                raise ValueError("Record texts must not contain empty strings")
            if idx > 0 and self.texts[idx - 1] == text:
                raise ValueError("Record texts must not repeat adjacently")

    @property
    def has_sub_items(self) -> bool:
        return len(self.sub_items) > 0

    def text_at(self, index: int) -> Optional[str]:
        return self.texts[index] if index < len(self.texts) else None


@dataclass(slots=True, frozen=True)
class RawAnchor:
    href: Optional[str] = None
    text: Optional[str] = None


@dataclass(slots=True, frozen=True)
class RawSection:
    """Labeled section of the contact dialog (heading + text + labels + anchors)."""

    heading: str
    text: str
    labels: Tuple[str, ...] = ()
    anchors: Tuple[RawAnchor, ...] = ()


# --- Domain entities ---


@dataclass(slots=True, frozen=True)
class TopCardInfo:
    name: str
    headline: Optional[str] = None
    origin: Optional[str] = None


About = str


@dataclass(slots=True, frozen=True)
class Education:
    institution_name: str
    degree: Optional[str] = None
    linkedin_url: Optional[str] = None
    from_date: Optional[str] = None
    to_date: Optional[str] = None
    description: Optional[str] = None


@dataclass(slots=True, frozen=True)
class Position:
    title: str
    employment_type: Optional[str] = None
    from_date: Optional[str] = None
    to_date: Optional[str] = None
    duration: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None


@dataclass(slots=True, frozen=True)
class Experience:
    company: str
    positions: Tuple[Position, ...]
    linkedin_url: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.positions:
            raise ValueError("Experience requires at least one position")


@dataclass(slots=True, frozen=True)
class Interest:
    name: str
    category: str
    linkedin_url: Optional[str] = None
    plain_text: Optional[str] = None


@dataclass(slots=True, frozen=True)
class Patent:
    title: str
    issuer: Optional[str] = None
    number: Optional[str] = None
    issued_date: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None
    plain_text: Optional[str] = None


@dataclass(slots=True, frozen=True)
class Accomplishment:
    category: str
    title: str
    issuer: Optional[str] = None
    issued_date: Optional[str] = None
    credential_id: Optional[str] = None
    credential_url: Optional[str] = None


class ContactType(str, Enum):
    LINKEDIN = "linkedin"
    EMAIL = "email"
    PHONE = "phone"
    WEBSITE = "website"
    TWITTER = "twitter"
    BIRTHDAY = "birthday"
    ADDRESS = "address"


@dataclass(slots=True, frozen=True)
class Contact:
    type: ContactType
    value: str
    label: Optional[str] = None


# --- Pipeline results ---


@dataclass(slots=True, frozen=True)
class PipelineDiagnostics:
    avg_confidence: float = 0.0
    text_extractor_used: Optional[str] = None
    strategies_attempted: Tuple[str, ...] = ()
    failure_html_sample: Optional[str] = None


@dataclass(slots=True, frozen=True)
class PipelineResult(Generic[T]):
    """Outcome of one pipeline run over a region collection."""

    items: Tuple[T, ...] = ()
    strategy: Optional[str] = None
    confidence: float = 0.0
    diagnostics: PipelineDiagnostics = field(default_factory=PipelineDiagnostics)

    def __post_init__(self) -> None:
        if not (0.0 <= self.confidence <= 1.0):
            raise ValueError("Confidence must be between 0.0 and 1.0")
        if self.items and self.strategy is None:
            raise ValueError("A result with items must name its strategy")

    @classmethod
    def empty(cls, strategies_attempted: Tuple[str, ...] = ()) -> "PipelineResult[T]":
        return cls(diagnostics=PipelineDiagnostics(strategies_attempted=strategies_attempted))


class HealthStatus(str, Enum):
    HEALTHY = "healthy"
    DEGRADED = "degraded"
    BROKEN = "broken"


@dataclass(slots=True, frozen=True)
class HealthReport:
    section: str
    status: HealthStatus
    text_extractor_used: Optional[str]
    confidence: float
    item_count: int
    message: str


# --- Profile aggregate ---


@dataclass(slots=True, frozen=True)
class Person:
    """Everything scraped from one profile, plus per-section health."""

    linkedin_url: str
    name: str
    headline: Optional[str] = None
    location: Optional[str] = None
    about: Optional[About] = None
    experiences: Tuple[Experience, ...] = ()
    educations: Tuple[Education, ...] = ()
    patents: Tuple[Patent, ...] = ()
    interests: Tuple[Interest, ...] = ()
    accomplishments: Tuple[Accomplishment, ...] = ()
    contacts: Tuple[Contact, ...] = ()
    health: Tuple[HealthReport, ...] = ()

    def health_by_section(self) -> dict[str, HealthReport]:
        return {report.section: report for report in self.health}


__all__: List[str] = [
    "Link",
    "ExtractionRecord",
    "RawAnchor",
    "RawSection",
    "TopCardInfo",
    "About",
    "Education",
    "Position",
    "Experience",
    "Interest",
    "Patent",
    "Accomplishment",
    "ContactType",
    "Contact",
    "PipelineDiagnostics",
    "PipelineResult",
    "HealthStatus",
    "HealthReport",
    "Person",
]
