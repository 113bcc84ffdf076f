"""
Shared machinery for extraction strategies.

A strategy reads each tagged region into an ``ExtractionRecord``. Subclasses
only decide which text nodes make up the record; links, context tags and
nested sub-items are handled here.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Set, Tuple
from urllib.parse import urlparse

import structlog

from ...config.config import ExtractionSettings
from ...models import ExtractionRecord, Link
from ...protocols import PageDriver, Region, TaggedRegion
from ...parsers.text import normalize_lines, normalize_whitespace

logger = structlog.get_logger(__name__)

# Grouped entries (several roles at one company) always list at least two.
MIN_GROUPED_ITEMS = 2


def is_external_url(url: str, internal_hosts: Sequence[str]) -> bool:
    """Relative URLs and hosts under ``internal_hosts`` are internal."""
    host = (urlparse(url).hostname or "").lower()
    if not host:
        return False
    for internal in internal_hosts:
        internal = internal.lower()
        if host == internal or host.endswith(f".{internal}"):
            return False
    return True


class BaseStrategy(ABC):
    """Base class for the aria, semantic and raw-text strategies."""

    name: str = ""
    reads_sub_items: bool = True

    def __init__(
        self,
        driver: PageDriver,
        settings: Optional[ExtractionSettings] = None,
        nested_item_selector: Optional[str] = None,
    ) -> None:
        self.driver = driver
        self.settings = settings or ExtractionSettings()
        self.nested_item_selector = nested_item_selector
        self.logger = logger.bind(component=type(self).__name__)

    @abstractmethod
    async def read_texts(self, region: Region) -> List[str]:
        """Return the raw text lines of ``region`` in document order."""

    async def attempt(self, regions: Sequence[TaggedRegion]) -> List[ExtractionRecord]:
        records: List[ExtractionRecord] = []
        for index, tagged in enumerate(regions):
            try:
                record = await self.read_region(tagged)
            except Exception as e:
                self.logger.debug(
                    "Skipping region", strategy=self.name, index=index, error=str(e), error_type=type(e).__name__
                )
                continue
            if record is not None:
                records.append(record)
        return records

    async def read_region(self, tagged: TaggedRegion) -> Optional[ExtractionRecord]:
        sub_items = await self._read_sub_items(tagged.handle) if self.reads_sub_items else ()

        texts = normalize_lines(await self.read_texts(tagged.handle))
        if sub_items:
            nested: Set[str] = {text for sub in sub_items for text in sub.texts}
            texts = normalize_lines(text for text in texts if text not in nested)

        if not texts and not sub_items:
            return None

        return ExtractionRecord(
            texts=tuple(texts),
            links=await self.read_links(tagged.handle),
            context=dict(tagged.context),
            sub_items=sub_items,
        )

    async def read_links(self, region: Region) -> Tuple[Link, ...]:
        links: List[Link] = []
        for anchor in await self.driver.region_links(region):
            url = (anchor.get("url") or "").strip()
            if not url:
                continue
            links.append(
                Link(
                    url=url,
                    anchor_text=normalize_whitespace(anchor.get("text")),
                    is_external=is_external_url(url, self.settings.internal_hosts),
                )
            )
        return tuple(links)

    async def _read_sub_items(self, region: Region) -> Tuple[ExtractionRecord, ...]:
        if not self.nested_item_selector:
            return ()
        children = await self.driver.region_children(region, self.nested_item_selector)
        if len(children) < MIN_GROUPED_ITEMS:
            return ()

        sub_items: List[ExtractionRecord] = []
        for child in children:
            texts = normalize_lines(await self.read_texts(child))
            if texts:
                sub_items.append(ExtractionRecord(texts=tuple(texts), links=await self.read_links(child)))
        if len(sub_items) < MIN_GROUPED_ITEMS:
            return ()
        return tuple(sub_items)

    def _keep_first(self, texts: Sequence[str]) -> List[str]:
        """First instance of each line wins; overlong lines are dropped."""
        seen: Set[str] = set()
        kept: List[str] = []
        for raw in texts:
            text = normalize_whitespace(raw)
            if not text or text in seen or len(text) > self.settings.max_text_length:
                continue
            seen.add(text)
            kept.append(text)
        return kept
