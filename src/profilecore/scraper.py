"""
High-level entry point: extract sections and whole profiles.

``ProfileExtractor`` wires the region extractor, the strategy cascade and the
per-section interpreter together. Every section yields a result and a health
report; one broken section never aborts the others.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import structlog
from structlog.contextvars import bind_contextvars, bound_contextvars, unbind_contextvars

from .config.config import Config
from .dedup import dedupe_section
from .exceptions import ConfigurationError, NavigationError
from .extraction.health import build_health_report
from .extraction.pipeline import ExtractionPipeline
from .extraction.strategies import get_strategy
from .models import HealthReport, HealthStatus, Person, PipelineResult, TopCardInfo
from .parsers.registry import INTERPRETERS, get_interpreter
from .protocols import PageDriver, RegionSet, TaggedRegion
from .regions.region_extractor import PageRegionExtractor

logger = structlog.get_logger(__name__)

PROFILE_SECTIONS: Tuple[str, ...] = (
    "top_card",
    "about",
    "experience",
    "education",
    "patents",
    "interests",
    "accomplishments",
    "contact",
)

PageHandle = Union[str, RegionSet, Sequence[TaggedRegion], None]


class ProfileExtractor:
    """
    Facade over the extraction core for one Page Driver session.

    Instances are not shared across concurrent scrapes: each scrape owns its
    driver and its extractor.
    """

    def __init__(self, driver: PageDriver, config: Optional[Config] = None) -> None:
        self.driver = driver
        self.config = config or Config()
        self.regions = PageRegionExtractor(driver, self.config.selectors)
        self.logger = logger.bind(component="ProfileExtractor")

    def build_pipeline(self, section: str) -> ExtractionPipeline[Any]:
        if section not in INTERPRETERS:
            raise ConfigurationError(f"Unknown section '{section}'. Known sections: {list(PROFILE_SECTIONS)}")
        table = self.regions.table(section)
        strategies = [
            get_strategy(name, self.driver, self.config.extraction, table.nested_item_selector)
            for name in self.config.extraction.strategy_order
        ]
        return ExtractionPipeline(
            strategies,
            get_interpreter(section),
            self.config.extraction,
            driver=self.driver,
            section=section,
            metrics_enabled=self.config.monitoring.metrics_enabled,
        )

    async def extract_section(self, section: str, page_handle: PageHandle = None) -> PipelineResult[Any]:
        """
        Extract one section.

        ``page_handle`` may be a profile URL, a resolved ``RegionSet``, a
        sequence of tagged regions, or None for the current page.
        """
        pipeline = self.build_pipeline(section)

        with bound_contextvars(section=section):
            if isinstance(page_handle, RegionSet):
                regions: Union[RegionSet, Sequence[TaggedRegion]] = page_handle
            elif page_handle is None or isinstance(page_handle, str):
                regions = await self.regions.extract(section, page_handle)
            else:
                regions = list(page_handle)

            result = await pipeline.extract(regions)

        self.logger.info(
            "Section extracted",
            section=section,
            items=len(result.items),
            strategy=result.strategy,
            confidence=round(result.confidence, 2),
        )
        if not result.items:
            self.logger.debug(
                "Section extraction produced nothing",
                section=section,
                strategies_attempted=list(result.diagnostics.strategies_attempted),
            )
        return result

    def health_of(self, section: str, result: PipelineResult[Any]) -> HealthReport:
        return build_health_report(
            section,
            result,
            self.config.health,
            record_metrics=self.config.monitoring.metrics_enabled,
        )

    async def scrape_profile(self, url: str, sections: Optional[Sequence[str]] = None) -> Person:
        """
        Scrape every enabled section of the profile at ``url``.

        Raises ``NavigationError`` only when the profile itself cannot be
        loaded; section failures are reported through ``Person.health``.
        """
        enabled = list(sections) if sections is not None else list(PROFILE_SECTIONS)
        unknown = [name for name in enabled if name not in PROFILE_SECTIONS]
        if unknown:
            raise ConfigurationError(f"Unknown sections {unknown}. Known sections: {list(PROFILE_SECTIONS)}")

        bind_contextvars(profile_url=url)
        try:
            if not await self.driver.goto(url):
                raise NavigationError(f"Could not load profile {url}", url=url)

            items: Dict[str, List[Any]] = {}
            health: List[HealthReport] = []
            # The top card is always read: it carries the name.
            for section in ["top_card"] + [name for name in enabled if name != "top_card"]:
                result = await self.extract_section(section, url)
                items[section] = dedupe_section(section, result.items)
                health.append(self.health_of(section, result))
        finally:
            unbind_contextvars("profile_url")

        top_card: Optional[TopCardInfo] = items["top_card"][0] if items["top_card"] else None
        about = items.get("about") or []

        person = Person(
            linkedin_url=url,
            name=top_card.name if top_card else "",
            headline=top_card.headline if top_card else None,
            location=top_card.origin if top_card else None,
            about=about[0] if about else None,
            experiences=tuple(items.get("experience", ())),
            educations=tuple(items.get("education", ())),
            patents=tuple(items.get("patents", ())),
            interests=tuple(items.get("interests", ())),
            accomplishments=tuple(items.get("accomplishments", ())),
            contacts=tuple(items.get("contact", ())),
            health=tuple(health),
        )
        self.logger.info(
            "Profile scraped",
            name=person.name,
            broken_sections=[report.section for report in health if report.status is HealthStatus.BROKEN],
        )
        return person
