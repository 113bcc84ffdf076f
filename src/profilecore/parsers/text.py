"""
Shared text helpers for interpreters and strategies.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional
from urllib.parse import unquote

_WHITESPACE = re.compile(r"\s+")

# The middle dot occasionally arrives double-encoded as "Â·".
SEPARATOR = "·"
_MOJIBAKE_SEPARATOR = re.compile(r"Â\s*·")

_NOISE_LINES = re.compile(r"^(see patent|show patent|other inventors|\+\d+)$", re.IGNORECASE)

_REDIRECT_MARKER = "redirect"
_REDIRECT_TARGET = re.compile(r"[?&]url=([^&]+)")


def normalize_whitespace(value: Optional[str]) -> str:
    if not value:
        return ""
    return _WHITESPACE.sub(" ", value).strip()


def fix_separator(value: str) -> str:
    return _MOJIBAKE_SEPARATOR.sub(SEPARATOR, value)


def split_separator(value: str) -> List[str]:
    """Split on the middle dot, tolerating its mojibake form."""
    return [part.strip() for part in fix_separator(value).split(SEPARATOR)]


def dedupe_adjacent(lines: Iterable[str]) -> List[str]:
    result: List[str] = []
    for line in lines:
        if not line:
            continue
        if result and result[-1] == line:
            continue
        result.append(line)
    return result


def normalize_lines(lines: Iterable[Optional[str]]) -> List[str]:
    """Whitespace-normalize, drop empties and collapse adjacent repeats."""
    return dedupe_adjacent(normalize_whitespace(line) for line in lines)


def normalize_plain_text_lines(lines: Iterable[Optional[str]]) -> List[str]:
    """Like :func:`normalize_lines` but also removes known UI noise lines."""
    return [line for line in normalize_lines(lines) if not _NOISE_LINES.match(line)]


def to_plain_text(lines: Iterable[Optional[str]]) -> Optional[str]:
    normalized = normalize_plain_text_lines(lines)
    return "\n".join(normalized) if normalized else None


def decode_redirect_url(url: str) -> str:
    """Unwrap ``.../redirect?url=<encoded>`` links; return ``url`` unchanged otherwise."""
    if _REDIRECT_MARKER not in url:
        return url
    match = _REDIRECT_TARGET.search(url)
    if not match:
        return url
    try:
        return unquote(match.group(1), errors="strict")
    except UnicodeDecodeError:
        return url


def strip_prefix(value: str, prefix: str) -> str:
    """Case-insensitively remove ``prefix`` and any whitespace that follows it."""
    if value.lower().startswith(prefix.lower()):
        return value[len(prefix) :].strip()
    return value.strip()
