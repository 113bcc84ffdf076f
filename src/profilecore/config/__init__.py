"""Configuration models and loaders."""

from __future__ import annotations

from .config import (
    KNOWN_STRATEGIES,
    AccomplishmentCategory,
    Config,
    DriverSettings,
    ExtractionSettings,
    HealthSettings,
    MonitoringConfig,
    SectionSelectors,
    SelectorSettings,
    find_config_file,
    load_config,
)

__all__ = [
    "KNOWN_STRATEGIES",
    "AccomplishmentCategory",
    "Config",
    "DriverSettings",
    "ExtractionSettings",
    "HealthSettings",
    "MonitoringConfig",
    "SectionSelectors",
    "SelectorSettings",
    "find_config_file",
    "load_config",
]
