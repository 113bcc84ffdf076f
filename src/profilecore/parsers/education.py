"""Education interpreter."""

from __future__ import annotations

import re
from typing import Optional

from ..models import Education, ExtractionRecord
from .base import BaseInterpreter, first_link
from .dates import parse_date_range

_DATE_HINT = re.compile(r"[-\d]")


class EducationInterpreter(BaseInterpreter[Education]):
    """
    ``texts[0]`` is the institution. With three or more lines the second is the
    degree and the third the date range; with exactly two the second line is
    classified as a date range when it carries a dash or a digit.
    """

    name = "education"
    required_fields = ("institution_name",)
    optional_fields = ("degree", "linkedin_url", "from_date", "to_date", "description")

    def parse(self, record: ExtractionRecord) -> Optional[Education]:
        institution = record.text_at(0)
        if not institution:
            return None

        degree: Optional[str] = None
        dates: Optional[str] = None
        description: Optional[str] = None

        if len(record.texts) == 2:
            second = record.texts[1]
            if _DATE_HINT.search(second):
                dates = second
            else:
                degree = second
        elif len(record.texts) >= 3:
            degree = record.texts[1]
            dates = record.texts[2]
            if len(record.texts) > 3:
                description = "\n".join(record.texts[3:])

        date_range = parse_date_range(dates)
        link = first_link(record, internal_only=True)

        return Education(
            institution_name=institution,
            degree=degree,
            linkedin_url=link.url if link else None,
            from_date=date_range.from_date,
            to_date=date_range.to_date,
            description=description,
        )
