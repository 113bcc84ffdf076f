"""
Page Driver over static HTML snapshots, backed by selectolax.

Used for offline replay of saved profile pages: ``pages`` maps URLs to markup
so that navigation to details pages can be served without a browser.
"""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional

import structlog
from selectolax.parser import HTMLParser, Node

from ..exceptions import DriverError
from ..parsers.text import normalize_whitespace

logger = structlog.get_logger(__name__)


# Elements rendered on their own line; everything else flows inline.
BLOCK_TAGS = frozenset(
    "address article aside blockquote body dd details dialog div dl dt fieldset figcaption figure footer form "
    "h1 h2 h3 h4 h5 h6 header hr html li main nav ol p pre section summary table tbody td tfoot th thead tr ul".split()
)
HIDDEN_TAGS = frozenset({"script", "style", "noscript", "template", "head", "-comment", "_comment"})


def _collect_text(node: Node, parts: List[str]) -> None:
    for child in node.iter(include_text=True):
        tag = child.tag
        if tag == "-text":
            parts.append(child.text(deep=False) or "")
        elif tag in HIDDEN_TAGS:
            continue
        elif tag == "br":
            parts.append("\n")
        elif tag in BLOCK_TAGS:
            parts.append("\n")
            _collect_text(child, parts)
            parts.append("\n")
        else:
            _collect_text(child, parts)


def visible_text(node: Node) -> str:
    """Text of ``node`` with line breaks only at block elements and ``<br>``."""
    parts: List[str] = []
    _collect_text(node, parts)
    lines = (normalize_whitespace(line) for line in "".join(parts).split("\n"))
    return "\n".join(line for line in lines if line)


def _url_variants(url: str) -> List[str]:
    stripped = url.rstrip("/")
    return [url, stripped, f"{stripped}/"]


class SelectolaxPageDriver:
    """Regions are selectolax ``Node`` objects. ``click`` is a no-op.

    ``region_text`` follows rendered line structure: inline runs stay on one
    line, block elements and ``<br>`` start new ones.
    """

    def __init__(
        self,
        html: str = "",
        *,
        url: str = "",
        pages: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._pages: Dict[str, str] = dict(pages or {})
        if html and url:
            self._pages.setdefault(url, html)
        self._url = url
        self._tree = HTMLParser(html)
        self.navigations: List[str] = []

    async def goto(self, url: str) -> bool:
        self.navigations.append(url)
        for candidate in _url_variants(url):
            if candidate in self._pages:
                self._tree = HTMLParser(self._pages[candidate])
                self._url = url
                return True
        logger.debug("No snapshot for URL", url=url)
        return False

    def current_url(self) -> str:
        return self._url

    async def locate(self, selector: str, scope: Optional[Node] = None) -> List[Node]:
        root = scope if scope is not None else self._tree.root
        if root is None:
            return []
        return self._css(root, selector)

    async def region_text(self, region: Node) -> str:
        return visible_text(region)

    async def region_links(self, region: Node) -> List[Dict[str, str]]:
        anchors = ([region] if region.tag == "a" else []) + self._css(region, "a")
        return [
            {
                "url": anchor.attributes.get("href") or "",
                "text": normalize_whitespace(anchor.text(deep=True, separator=" ")),
            }
            for anchor in anchors
        ]

    async def region_children(self, region: Node, selector: str) -> List[Node]:
        return self._css(region, selector)

    async def region_html(self, region: Node) -> str:
        return region.html or ""

    async def region_tag(self, region: Node) -> str:
        return (region.tag or "").lower()

    async def click(self, region: Node) -> None:
        return None

    @staticmethod
    def _css(node: Node, selector: str) -> List[Node]:
        try:
            matches = node.css(selector)
        except Exception as e:
            raise DriverError(f"Selector '{selector}' failed: {e}") from e
        # Only descendants count as children of a region.
        return [match for match in matches if match.mem_id != node.mem_id]
