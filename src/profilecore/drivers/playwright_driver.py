"""
Page Driver over a live playwright ``Page``.

Regions are playwright ``Locator`` objects. Every wait is bounded by the
configured driver timeouts and playwright errors surface as ``DriverError``.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional

import structlog
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Locator, Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from ..config.config import DriverSettings
from ..exceptions import DriverError, DriverTimeoutError, NavigationError

logger = structlog.get_logger(__name__)

_ANCHORS_SCRIPT = """
els => els.map(a => ({
    url: a.href || a.getAttribute('href') || '',
    text: (a.textContent || '').trim(),
}))
"""


@contextmanager
def _translate_errors(operation: str, timeout_ms: Optional[float] = None) -> Iterator[None]:
    try:
        yield
    except PlaywrightTimeoutError as e:
        raise DriverTimeoutError(f"{operation} timed out: {e}", timeout_ms=timeout_ms) from e
    except PlaywrightError as e:
        raise DriverError(f"{operation} failed: {e}") from e


class PlaywrightPageDriver:
    def __init__(self, page: Page, settings: Optional[DriverSettings] = None) -> None:
        self.page = page
        self.settings = settings or DriverSettings()

    async def goto(self, url: str) -> bool:
        timeout = self.settings.navigation_timeout_ms
        try:
            response = await self.page.goto(url, timeout=timeout, wait_until="domcontentloaded")
        except PlaywrightTimeoutError as e:
            raise DriverTimeoutError(f"Navigation to {url} timed out", timeout_ms=timeout) from e
        except PlaywrightError as e:
            raise NavigationError(f"Navigation to {url} failed: {e}", url=url) from e
        if response is not None and not response.ok:
            logger.warning("Navigation returned an error status", url=url, status=response.status)
            return False
        return True

    def current_url(self) -> str:
        return self.page.url

    async def locate(self, selector: str, scope: Optional[Locator] = None) -> List[Locator]:
        base = scope if scope is not None else self.page
        with _translate_errors(f"locate({selector!r})"):
            return await base.locator(selector).all()

    async def region_text(self, region: Locator) -> str:
        timeout = self.settings.text_timeout_ms
        with _translate_errors("region_text", timeout):
            return await region.inner_text(timeout=timeout)

    async def region_links(self, region: Locator) -> List[Dict[str, str]]:
        with _translate_errors("region_links"):
            return await region.locator("a").evaluate_all(_ANCHORS_SCRIPT)

    async def region_children(self, region: Locator, selector: str) -> List[Locator]:
        with _translate_errors(f"region_children({selector!r})"):
            return await region.locator(selector).all()

    async def region_html(self, region: Locator) -> str:
        timeout = self.settings.text_timeout_ms
        with _translate_errors("region_html", timeout):
            return await region.evaluate("el => el.outerHTML", timeout=timeout)

    async def region_tag(self, region: Locator) -> str:
        timeout = self.settings.text_timeout_ms
        with _translate_errors("region_tag", timeout):
            return await region.evaluate("el => el.tagName.toLowerCase()", timeout=timeout)

    async def click(self, region: Locator) -> None:
        timeout = self.settings.action_timeout_ms
        with _translate_errors("click", timeout):
            await region.click(timeout=timeout)
