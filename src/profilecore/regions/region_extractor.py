"""
Page Region Extractor: resolves a logical section to raw page regions.

Selector tables are injected as an immutable ``SelectorSettings`` value. Each
section resolves to a single region, a list of tagged regions or, for the
contact dialog, materialised raw sections. Driver failures never escape:
they resolve to an empty region set.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

import structlog

from ..config.config import SectionSelectors, SelectorSettings
from ..exceptions import ConfigurationError, DriverError
from ..parsers.interest import map_interest_tab_to_category
from ..protocols import PageDriver, Region, RegionKind, RegionSet, TaggedRegion
from .contact_dialog import parse_raw_sections

logger = structlog.get_logger(__name__)

EMPTY_STATE_SCOPES = ("main", "body")


def details_url(base_url: str, path: str) -> str:
    return f"{base_url.rstrip('/')}/details/{path.strip('/')}/"


def _same_url(left: str, right: str) -> bool:
    return left.rstrip("/") == right.rstrip("/")


class PageRegionExtractor:
    """
    Locates section regions through ordered selector-fallback tables.

    List sections prefer the main profile page; the details page is fetched
    only when the main page yields nothing.
    """

    def __init__(self, driver: PageDriver, selectors: Optional[SelectorSettings] = None) -> None:
        self.driver = driver
        self.selectors = selectors or SelectorSettings()
        self.logger = logger.bind(component="PageRegionExtractor")

    def table(self, section: str) -> SectionSelectors:
        try:
            return self.selectors.section(section)
        except KeyError as e:
            raise ConfigurationError(str(e)) from e

    async def extract(self, section: str, base_url: Optional[str] = None) -> RegionSet:
        """Resolve ``section`` to regions; ``base_url`` is the profile URL."""
        table = self.table(section)
        kind = RegionKind(table.kind)
        base_url = base_url or self.driver.current_url()

        try:
            if section == "accomplishments":
                return await self._accomplishments(table, base_url)
            if section == "interests":
                return await self._interests(table, base_url)
            if kind is RegionKind.RAW:
                return await self._raw_dialog(section, table, base_url)
            if kind is RegionKind.SINGLE:
                return await self._single(section, table, base_url)
            return await self._list(section, table, base_url)
        except DriverError as e:
            self.logger.warning(
                "Region lookup failed", section=section, error=str(e), error_type=type(e).__name__
            )
            return RegionSet(section=section, kind=kind)

    # --- single / list sections ---

    async def _single(self, section: str, table: SectionSelectors, base_url: str) -> RegionSet:
        await self._ensure_on(base_url)
        for selector in table.root_selectors:
            matches = await self.driver.locate(selector)
            if matches:
                return RegionSet(
                    section=section,
                    kind=RegionKind.SINGLE,
                    regions=(TaggedRegion(matches[0]),),
                    source_selector=selector,
                )
        self.logger.debug("Section not found", section=section, tried=list(table.root_selectors))
        return RegionSet(section=section, kind=RegionKind.SINGLE)

    async def _list(self, section: str, table: SectionSelectors, base_url: str) -> RegionSet:
        await self._ensure_on(base_url)
        items, selector = await self._scoped_items(table, table.item_selectors)

        if not items and table.details_path:
            url = details_url(base_url, table.details_path)
            self.logger.debug("Main page empty, loading details page", section=section, url=url)
            if await self.driver.goto(url) and not await self._is_empty_state():
                items, selector = await self._first_matching(table.details_item_selectors, table)

        return RegionSet(
            section=section,
            kind=RegionKind.LIST,
            regions=tuple(TaggedRegion(item) for item in items),
            source_selector=selector,
        )

    async def _scoped_items(
        self, table: SectionSelectors, item_selectors: Sequence[str]
    ) -> Tuple[List[Region], Optional[str]]:
        """Items inside the first matching section root."""
        for root_selector in table.root_selectors:
            roots = await self.driver.locate(root_selector)
            if not roots:
                continue
            items, selector = await self._first_matching(item_selectors, table, scope=roots[0])
            if items:
                return items, selector
        return [], None

    async def _first_matching(
        self, item_selectors: Sequence[str], table: SectionSelectors, scope: Optional[Region] = None
    ) -> Tuple[List[Region], Optional[str]]:
        minimum = max(table.min_items, 1)
        for selector in item_selectors:
            items = await self.driver.locate(selector, scope)
            if table.drop_nested_regions:
                items = await self._drop_nested(items)
            if len(items) >= minimum:
                return items, selector
        return [], None

    async def _drop_nested(self, regions: List[Region]) -> List[Region]:
        """Keep only regions not contained in another matched region."""
        if len(regions) < 2:
            return regions
        markup = [await self.driver.region_html(region) for region in regions]
        kept: List[Region] = []
        for index, region in enumerate(regions):
            html = markup[index]
            nested = any(
                other != index and len(markup[other]) > len(html) and html in markup[other]
                for other in range(len(regions))
            )
            if not nested:
                kept.append(region)
        return kept

    # --- accomplishments and interests ---

    async def _accomplishments(self, table: SectionSelectors, base_url: str) -> RegionSet:
        tagged: List[TaggedRegion] = []
        for category in self.selectors.accomplishment_categories:
            url = details_url(base_url, category.url_path)
            try:
                if not await self.driver.goto(url) or await self._is_empty_state():
                    continue
                items, _ = await self._scoped_items(table, table.item_selectors)
            except DriverError as e:
                self.logger.debug("Accomplishment category skipped", category=category.category, error=str(e))
                continue
            context = {"category": category.category}
            tagged.extend(TaggedRegion(item, context) for item in items)
        return RegionSet(section="accomplishments", kind=RegionKind.LIST, regions=tuple(tagged))

    async def _interests(self, table: SectionSelectors, base_url: str) -> RegionSet:
        url = details_url(base_url, table.details_path or "interests")
        if not await self.driver.goto(url) or await self._is_empty_state():
            return RegionSet(section="interests", kind=RegionKind.LIST)

        tabs = await self._locate_first(self.selectors.tab_selectors)
        panels = await self._locate_first(table.root_selectors)
        tagged: List[TaggedRegion] = []

        if tabs and len(tabs) == len(panels):
            for tab, panel in zip(tabs, panels):
                tagged.extend(await self._panel_items(table, panel, await self._tab_context(tab)))
        else:
            for tab in tabs:
                try:
                    context = await self._tab_context(tab)
                    await self.driver.click(tab)
                    current = await self._locate_first(table.root_selectors)
                    if current:
                        tagged.extend(await self._panel_items(table, current[0], context))
                except DriverError as e:
                    self.logger.debug("Interest tab skipped", error=str(e))

        return RegionSet(section="interests", kind=RegionKind.LIST, regions=tuple(tagged))

    async def _tab_context(self, tab: Region) -> Dict[str, str]:
        name = (await self.driver.region_text(tab)).strip()
        return {"category": map_interest_tab_to_category(name), "tab": name}

    async def _panel_items(self, table: SectionSelectors, panel: Region, context: Dict[str, str]) -> List[TaggedRegion]:
        items, _ = await self._first_matching(table.item_selectors, table, scope=panel)
        return [TaggedRegion(item, context) for item in items]

    # --- contact dialog ---

    async def _raw_dialog(self, section: str, table: SectionSelectors, base_url: str) -> RegionSet:
        await self._ensure_on(base_url)
        for trigger_selector in self.selectors.contact_trigger_selectors:
            triggers = await self.driver.locate(trigger_selector)
            if not triggers:
                continue
            try:
                await self.driver.click(triggers[0])
            except DriverError as e:
                self.logger.debug("Contact trigger failed", selector=trigger_selector, error=str(e))
                continue

            for dialog_selector in table.root_selectors:
                dialogs = await self.driver.locate(dialog_selector)
                if dialogs:
                    html = await self.driver.region_html(dialogs[0])
                    return RegionSet(
                        section=section,
                        kind=RegionKind.RAW,
                        raw=tuple(parse_raw_sections(html)),
                        source_selector=dialog_selector,
                    )

        self.logger.warning("Contact info trigger not found or dialog did not open")
        return RegionSet(section=section, kind=RegionKind.RAW)

    # --- helpers ---

    async def _locate_first(self, selectors: Sequence[str]) -> List[Region]:
        for selector in selectors:
            matches = await self.driver.locate(selector)
            if matches:
                return matches
        return []

    async def _ensure_on(self, base_url: str) -> None:
        if base_url and not _same_url(self.driver.current_url(), base_url):
            await self.driver.goto(base_url)

    async def _is_empty_state(self) -> bool:
        marker = self.selectors.empty_state_text.lower()
        for scope in EMPTY_STATE_SCOPES:
            matches = await self.driver.locate(scope)
            if matches:
                return marker in (await self.driver.region_text(matches[0])).lower()
        return False
