"""
Page Driver implementations.
"""

from .playwright_driver import PlaywrightPageDriver
from .selectolax_driver import SelectolaxPageDriver

__all__ = ["PlaywrightPageDriver", "SelectolaxPageDriver"]
