"""
Interpreters that turn extraction records into typed profile entities.
"""

from .about import AboutInterpreter
from .accomplishment import AccomplishmentInterpreter
from .base import BaseInterpreter
from .contact import ContactInterpreter, map_contact_heading_to_type
from .dates import DateRange, parse_date_range
from .education import EducationInterpreter
from .experience import ExperienceInterpreter
from .interest import InterestInterpreter, map_interest_tab_to_category
from .patent import PatentInterpreter, looks_like_patent_metadata, parse_patent_subtitle
from .registry import INTERPRETERS, get_interpreter
from .text import decode_redirect_url, normalize_plain_text_lines, to_plain_text
from .top_card import TopCardInterpreter

__all__ = [
    "AboutInterpreter",
    "AccomplishmentInterpreter",
    "BaseInterpreter",
    "ContactInterpreter",
    "DateRange",
    "EducationInterpreter",
    "ExperienceInterpreter",
    "INTERPRETERS",
    "InterestInterpreter",
    "PatentInterpreter",
    "TopCardInterpreter",
    "decode_redirect_url",
    "get_interpreter",
    "looks_like_patent_metadata",
    "map_contact_heading_to_type",
    "map_interest_tab_to_category",
    "normalize_plain_text_lines",
    "parse_date_range",
    "parse_patent_subtitle",
    "to_plain_text",
]
