"""
The multi-strategy extraction core: strategies, pipeline, confidence and health.
"""

# confidence has no package-internal imports and must load first: the
# interpreters depend on it while this package is still initialising.
from .confidence import average_confidence, field_present, item_confidence  # isort: skip
from .health import build_health_report, classify
from .pipeline import RAW_SECTIONS_STRATEGY, ExtractionPipeline, StrategyAttempt
from .strategies import STRATEGIES, AriaStrategy, BaseStrategy, RawTextStrategy, SemanticStrategy, get_strategy

__all__ = [
    "RAW_SECTIONS_STRATEGY",
    "STRATEGIES",
    "AriaStrategy",
    "BaseStrategy",
    "ExtractionPipeline",
    "RawTextStrategy",
    "SemanticStrategy",
    "StrategyAttempt",
    "average_confidence",
    "build_health_report",
    "classify",
    "field_present",
    "get_strategy",
    "item_confidence",
]
