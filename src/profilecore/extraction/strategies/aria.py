"""
Aria-labeled-span strategy.

Profile markup commonly doubles every visible string: once in a
``span[aria-hidden="true"]`` for sighted users and once in a visually hidden
span for screen readers. Reading only the aria-hidden copy yields each label
exactly once, in DOM order.
"""

from __future__ import annotations

from typing import List

from ...protocols import Region
from .base import BaseStrategy

ARIA_SELECTOR = 'span[aria-hidden="true"]'


class AriaStrategy(BaseStrategy):
    name = "aria"

    async def read_texts(self, region: Region) -> List[str]:
        spans = await self.driver.region_children(region, ARIA_SELECTOR)
        return self._keep_first([await self.driver.region_text(span) for span in spans])
