"""
Semantic-tag strategy: headings, paragraphs, list items and time/definition
nodes, regardless of ARIA attributes.
"""

from __future__ import annotations

from typing import List

from ...protocols import Region
from .base import BaseStrategy

SEMANTIC_SELECTOR = "h1, h2, h3, h4, h5, h6, p, time, dt, dd, li"
LIST_ITEM_TAG = "li"


class SemanticStrategy(BaseStrategy):
    name = "semantic"

    async def read_texts(self, region: Region) -> List[str]:
        texts: List[str] = []
        # One combined query, so lines come back in document order.
        for node in await self.driver.region_children(region, SEMANTIC_SELECTOR):
            if await self._is_container_item(node):
                continue
            texts.append(await self.driver.region_text(node))
        return self._keep_first(texts)

    async def _is_container_item(self, node: Region) -> bool:
        """List items count only when they are leaves; containers repeat their children."""
        if await self.driver.region_tag(node) != LIST_ITEM_TAG:
            return False
        return bool(await self.driver.region_children(node, SEMANTIC_SELECTOR))
