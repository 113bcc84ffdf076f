"""
Unit tests for PlaywrightPageDriver using mocked playwright objects.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from profilecore.config import DriverSettings
from profilecore.drivers import PlaywrightPageDriver
from profilecore.exceptions import DriverError, DriverTimeoutError, NavigationError
from profilecore.protocols import PageDriver


@pytest.fixture
def page():
    page = MagicMock()
    page.url = "https://www.linkedin.com/in/alex-doe/"
    page.goto = AsyncMock(return_value=MagicMock(ok=True, status=200))
    return page


@pytest.fixture
def settings():
    return DriverSettings(navigation_timeout_ms=1000, action_timeout_ms=500, text_timeout_ms=250)


@pytest.fixture
def driver(page, settings):
    return PlaywrightPageDriver(page, settings)


def test_satisfies_page_driver_protocol(driver):
    assert isinstance(driver, PageDriver)


class TestNavigation:
    @pytest.mark.asyncio
    async def test_goto_uses_navigation_timeout(self, driver, page):
        assert await driver.goto("https://www.linkedin.com/in/alex-doe/details/experience/") is True
        page.goto.assert_called_once_with(
            "https://www.linkedin.com/in/alex-doe/details/experience/", timeout=1000, wait_until="domcontentloaded"
        )

    @pytest.mark.asyncio
    async def test_error_status_returns_false(self, driver, page):
        page.goto.return_value = MagicMock(ok=False, status=404)
        assert await driver.goto("https://www.linkedin.com/in/nobody/") is False

    @pytest.mark.asyncio
    async def test_timeout_is_translated(self, driver, page):
        page.goto.side_effect = PlaywrightTimeoutError("Timeout 1000ms exceeded")

        with pytest.raises(DriverTimeoutError) as exc_info:
            await driver.goto("https://www.linkedin.com/in/alex-doe/")

        assert exc_info.value.timeout_ms == 1000

    @pytest.mark.asyncio
    async def test_navigation_error_is_translated(self, driver, page):
        page.goto.side_effect = PlaywrightError("net::ERR_NAME_NOT_RESOLVED")

        with pytest.raises(NavigationError) as exc_info:
            await driver.goto("https://www.linkedin.com/in/alex-doe/")

        assert exc_info.value.url == "https://www.linkedin.com/in/alex-doe/"

    def test_current_url(self, driver):
        assert driver.current_url() == "https://www.linkedin.com/in/alex-doe/"


class TestRegions:
    @pytest.mark.asyncio
    async def test_locate_returns_all_matches(self, driver, page):
        first, second = MagicMock(), MagicMock()
        page.locator.return_value.all = AsyncMock(return_value=[first, second])

        assert await driver.locate("main ul > li") == [first, second]
        page.locator.assert_called_once_with("main ul > li")

    @pytest.mark.asyncio
    async def test_locate_within_scope(self, driver, page):
        scope = MagicMock()
        scope.locator.return_value.all = AsyncMock(return_value=[])

        assert await driver.locate("li", scope) == []
        scope.locator.assert_called_once_with("li")
        page.locator.assert_not_called()

    @pytest.mark.asyncio
    async def test_region_text_is_bounded(self, driver):
        region = MagicMock()
        region.inner_text = AsyncMock(return_value="Senior Engineer\nExample Corp")

        assert await driver.region_text(region) == "Senior Engineer\nExample Corp"
        region.inner_text.assert_called_once_with(timeout=250)

    @pytest.mark.asyncio
    async def test_region_text_timeout_is_translated(self, driver):
        region = MagicMock()
        region.inner_text = AsyncMock(side_effect=PlaywrightTimeoutError("Timeout 250ms exceeded"))

        with pytest.raises(DriverTimeoutError):
            await driver.region_text(region)

    @pytest.mark.asyncio
    async def test_region_links(self, driver):
        region = MagicMock()
        anchors = [{"url": "https://www.linkedin.com/company/example/", "text": "Example"}]
        region.locator.return_value.evaluate_all = AsyncMock(return_value=anchors)

        assert await driver.region_links(region) == anchors
        region.locator.assert_called_once_with("a")

    @pytest.mark.asyncio
    async def test_region_html(self, driver):
        region = MagicMock()
        region.evaluate = AsyncMock(return_value="<li>x</li>")

        assert await driver.region_html(region) == "<li>x</li>"

    @pytest.mark.asyncio
    async def test_region_tag(self, driver):
        region = MagicMock()
        region.evaluate = AsyncMock(return_value="li")

        assert await driver.region_tag(region) == "li"
        region.evaluate.assert_called_once_with("el => el.tagName.toLowerCase()", timeout=250)

    @pytest.mark.asyncio
    async def test_click_failure_is_a_driver_error(self, driver):
        region = MagicMock()
        region.click = AsyncMock(side_effect=PlaywrightError("Element is not attached to the DOM"))

        with pytest.raises(DriverError):
            await driver.click(region)
        region.click.assert_called_once_with(timeout=500)
