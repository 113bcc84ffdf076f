"""
Resolution of logical profile sections to page regions.
"""

from .contact_dialog import parse_raw_sections
from .region_extractor import PageRegionExtractor, details_url

__all__ = ["PageRegionExtractor", "details_url", "parse_raw_sections"]
