"""
Unit tests for the static-snapshot Page Driver.
"""

import pytest
from profilecore.drivers import SelectolaxPageDriver
from profilecore.protocols import PageDriver

HTML = """
<main>
  <section id="s">
    <h2>Experience</h2>
    <ul>
      <li><a href="/company/example/">Example <b>Corp</b></a></li>
      <li>Initech</li>
    </ul>
  </section>
</main>
"""


@pytest.fixture
def driver():
    return SelectolaxPageDriver(HTML, url="https://www.linkedin.com/in/alex/", pages={"https://x.test/a/": "<p>A</p>"})


def test_satisfies_page_driver_protocol(driver):
    assert isinstance(driver, PageDriver)


@pytest.mark.asyncio
async def test_locate_and_children(driver):
    sections = await driver.locate("#s")
    items = await driver.region_children(sections[0], "li")

    assert len(sections) == 1
    assert len(items) == 2
    assert len(await driver.locate("li", sections[0])) == 2


@pytest.mark.asyncio
async def test_region_children_excludes_region_itself(driver):
    items = await driver.locate("li")
    assert await driver.region_children(items[1], "li") == []


@pytest.mark.asyncio
async def test_region_text_keeps_line_structure(driver):
    section = (await driver.locate("#s"))[0]
    lines = [line for line in (await driver.region_text(section)).splitlines() if line]

    assert lines[0] == "Experience"
    assert "Initech" in lines


@pytest.mark.asyncio
async def test_region_links(driver):
    item = (await driver.locate("li"))[0]
    assert await driver.region_links(item) == [{"url": "/company/example/", "text": "Example Corp"}]


@pytest.mark.asyncio
async def test_region_html(driver):
    item = (await driver.locate("li"))[1]
    assert await driver.region_html(item) == "<li>Initech</li>"


@pytest.mark.asyncio
async def test_goto_switches_document(driver):
    assert await driver.goto("https://x.test/a") is True
    assert driver.current_url() == "https://x.test/a"
    assert len(await driver.locate("p")) == 1
    assert await driver.locate("#s") == []


@pytest.mark.asyncio
async def test_goto_unknown_url_returns_false(driver):
    assert await driver.goto("https://x.test/missing/") is False
    assert driver.current_url() == "https://www.linkedin.com/in/alex/"


@pytest.mark.asyncio
async def test_region_text_keeps_inline_runs_together():
    driver = SelectolaxPageDriver(
        '<div id="r"><p>Senior Engineer</p><p>Built <b>core</b> platform systems.</p>'
        "<p>Remote<br>Austin, <a href='/x'>Texas</a></p><script>var x = 1;</script></div>"
    )
    region = (await driver.locate("#r"))[0]

    assert (await driver.region_text(region)).splitlines() == [
        "Senior Engineer",
        "Built core platform systems.",
        "Remote",
        "Austin, Texas",
    ]


@pytest.mark.asyncio
async def test_region_tag(driver):
    assert await driver.region_tag((await driver.locate("li"))[0]) == "li"
    assert await driver.region_tag((await driver.locate("#s"))[0]) == "section"
