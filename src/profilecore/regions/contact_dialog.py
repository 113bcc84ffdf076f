"""
Raw-section parsing of the contact-info dialog markup.

Each ``h3`` heading is paired with its nearest enclosing container that holds
exactly one heading and some content (an anchor, or text beyond the heading
itself). Labels are the ``(Label)`` annotations inside that container.
"""

from __future__ import annotations

import re
from typing import List, Optional

from selectolax.parser import HTMLParser, Node

from ..models import RawAnchor, RawSection
from ..parsers.text import normalize_whitespace

HEADING_SELECTOR = "h3"
LABEL_SELECTOR = "span, p, li"

_LABEL = re.compile(r"^\(([^)]+)\)$")


def _text(node: Node) -> str:
    return normalize_whitespace(node.text(deep=True, separator=" "))


def _find_container(heading: Node, heading_text: str, boundary: Node) -> Node:
    current = heading.parent
    while current is not None and current.mem_id != boundary.mem_id:
        has_anchor = current.css_first("a") is not None
        if len(current.css(HEADING_SELECTOR)) == 1 and (has_anchor or len(_text(current)) > len(heading_text) + 2):
            return current
        current = current.parent
    return heading.parent or heading


def _labels(container: Node) -> List[str]:
    labels: List[str] = []
    for node in container.css(LABEL_SELECTOR):
        match = _LABEL.match(_text(node))
        if match and match.group(1).strip():
            labels.append(match.group(1).strip())
    return labels


def _anchors(container: Node) -> List[RawAnchor]:
    return [
        RawAnchor(
            href=normalize_whitespace(anchor.attributes.get("href")) or None,
            text=_text(anchor) or None,
        )
        for anchor in container.css("a")
    ]


def parse_raw_sections(html: str) -> List[RawSection]:
    """Split dialog markup into labeled sections; headings are lower-cased."""
    if not html or not html.strip():
        return []
    tree = HTMLParser(html)
    boundary: Optional[Node] = tree.css_first("body > *") or tree.body
    if boundary is None:
        return []

    sections: List[RawSection] = []
    for heading_node in boundary.css(HEADING_SELECTOR):
        heading = _text(heading_node)
        if not heading:
            continue
        container = _find_container(heading_node, heading, boundary)
        sections.append(
            RawSection(
                heading=heading.lower(),
                text=_text(container),
                labels=tuple(_labels(container)),
                anchors=tuple(_anchors(container)),
            )
        )
    return sections
