"""
Extraction strategies and their name-keyed registry.
"""

from __future__ import annotations

from typing import Dict, Optional, Type

from ...config.config import ExtractionSettings
from ...exceptions import ConfigurationError
from ...protocols import PageDriver
from .aria import AriaStrategy
from .base import BaseStrategy, is_external_url
from .raw_text import RawTextStrategy
from .semantic import SemanticStrategy

STRATEGIES: Dict[str, Type[BaseStrategy]] = {
    AriaStrategy.name: AriaStrategy,
    SemanticStrategy.name: SemanticStrategy,
    RawTextStrategy.name: RawTextStrategy,
}


def get_strategy(
    name: str,
    driver: PageDriver,
    settings: Optional[ExtractionSettings] = None,
    nested_item_selector: Optional[str] = None,
) -> BaseStrategy:
    try:
        strategy_cls = STRATEGIES[name]
    except KeyError:
        raise ConfigurationError(f"Unknown strategy '{name}'. Available strategies: {list(STRATEGIES)}")
    return strategy_cls(driver, settings, nested_item_selector)


__all__ = [
    "STRATEGIES",
    "AriaStrategy",
    "BaseStrategy",
    "RawTextStrategy",
    "SemanticStrategy",
    "get_strategy",
    "is_external_url",
]
