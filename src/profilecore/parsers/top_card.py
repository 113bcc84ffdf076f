"""Top card (name, headline, location) interpreter."""

from __future__ import annotations

import re
from typing import Optional

from ..models import ExtractionRecord, TopCardInfo
from .base import BaseInterpreter

_CONTACT_INFO_SUFFIX = re.compile(r"\s*Contact info$")


class TopCardInterpreter(BaseInterpreter[TopCardInfo]):
    name = "top_card"
    required_fields = ("name",)
    optional_fields = ("headline", "origin")

    def parse(self, record: ExtractionRecord) -> Optional[TopCardInfo]:
        name = record.text_at(0)
        if not name:
            return None

        origin = record.text_at(2)
        if origin is not None:
            origin = _CONTACT_INFO_SUFFIX.sub("", origin).strip() or None

        return TopCardInfo(name=name, headline=record.text_at(1), origin=origin)
