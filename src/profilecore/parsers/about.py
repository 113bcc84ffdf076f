"""About section interpreter."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..models import About, ExtractionRecord
from .base import BaseInterpreter
from .text import normalize_lines

ABOUT_HEADING = "About"


class AboutInterpreter(BaseInterpreter[About]):
    name = "about"
    required_fields = ("text",)
    optional_fields = ()

    def parse(self, record: ExtractionRecord) -> Optional[About]:
        lines = normalize_lines(record.texts)
        if lines and lines[0] == ABOUT_HEADING:
            lines = lines[1:]
        if not lines:
            return None
        return "\n".join(lines)

    def field_values(self, entity: About) -> Mapping[str, Any]:
        return {"text": entity}
