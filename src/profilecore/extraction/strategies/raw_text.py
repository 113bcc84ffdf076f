"""
Raw-text strategy: the region's visible text split on line boundaries.

The last resort of the cascade. It never reads sub-items and never drops
long lines, so it yields something whenever the region has any text.
"""

from __future__ import annotations

from typing import List

from ...protocols import Region
from .base import BaseStrategy


class RawTextStrategy(BaseStrategy):
    name = "raw_text"
    reads_sub_items = False

    async def read_texts(self, region: Region) -> List[str]:
        text = await self.driver.region_text(region)
        return text.splitlines() if text else []
