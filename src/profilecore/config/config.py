"""
Configuration management for profilecore using Pydantic.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Literal, Optional, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# --- Setup Logging ---
log = logging.getLogger(__name__)

KNOWN_STRATEGIES: Tuple[str, ...] = ("aria", "semantic", "raw_text")

# --- Nested Configuration Models ---


class ExtractionSettings(BaseModel):
    """Configuration for the multi-strategy extraction pipeline."""

    strategy_order: List[str] = Field(
        default_factory=lambda: list(KNOWN_STRATEGIES),
        description="Order in which extraction strategies are attempted.",
    )
    confidence_threshold: float = Field(
        default=0.3,
        ge=0.0,
        le=1.0,
        description="Minimum average confidence to accept a strategy without trying the next one.",
    )
    capture_html_on_failure: bool = Field(
        default=True, description="Store a markup snapshot of the first region when nothing was extracted."
    )
    html_sample_max_chars: int = Field(default=5000, gt=0, description="Truncation length of the failure sample.")
    strategy_timeout_seconds: float = Field(
        default=30.0, gt=0, description="Upper bound for a single strategy attempt."
    )
    max_text_length: int = Field(
        default=500, gt=0, description="Lines longer than this are ignored by the aria and semantic strategies."
    )
    internal_hosts: List[str] = Field(
        default_factory=lambda: ["linkedin.com"],
        description="Hosts (and their subdomains) whose links are not external.",
    )

    @field_validator("strategy_order")
    @classmethod
    def validate_strategy_order(cls, v: List[str]) -> List[str]:
        """Ensure the order is non-empty and only names known strategies."""
        if not v:
            raise ValueError("strategy_order must contain at least one strategy")
        unknown = [name for name in v if name not in KNOWN_STRATEGIES]
        if unknown:
            raise ValueError(f"Unknown strategies {unknown}. Available strategies: {list(KNOWN_STRATEGIES)}")
        if len(set(v)) != len(v):
            raise ValueError("strategy_order must not repeat a strategy")
        return v


class HealthSettings(BaseModel):
    """Thresholds used by the health reporter."""

    healthy_confidence: float = Field(default=0.65, ge=0.0, le=1.0)
    degraded_confidence: float = Field(default=0.35, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def check_ordering(self) -> "HealthSettings":
        if self.degraded_confidence > self.healthy_confidence:
            raise ValueError("degraded_confidence must not exceed healthy_confidence")
        return self


class SectionSelectors(BaseModel):
    """Ordered selector-fallback table for one logical section."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["single", "list", "raw"] = "list"
    root_selectors: Tuple[str, ...] = Field(
        default=(), description="Candidates for the section container, tried in order."
    )
    item_selectors: Tuple[str, ...] = Field(default=(), description="Candidates for item regions on the main page.")
    details_path: Optional[str] = Field(
        default=None, description="Path segment of the details page, e.g. 'experience'."
    )
    details_item_selectors: Tuple[str, ...] = Field(default=(), description="Item candidates on the details page.")
    nested_item_selector: Optional[str] = Field(
        default=None, description="Selector for sub-items (grouped positions) inside one item."
    )
    drop_nested_regions: bool = Field(
        default=False, description="Discard item regions that are contained in another matched item."
    )
    min_items: int = Field(default=1, ge=0, description="Minimum matches for a candidate selector to be used.")


class AccomplishmentCategory(BaseModel):
    model_config = ConfigDict(frozen=True)

    url_path: str
    category: str


def _default_sections() -> Dict[str, SectionSelectors]:
    details_items = (
        '[componentkey^="entity-collection-item"]',
        ".pvs-list__container .pvs-list__paged-list-item",
        "main ul > li",
    )
    return {
        "top_card": SectionSelectors(
            kind="single",
            root_selectors=("section.artdeco-card[data-member-id]", "main section.artdeco-card", "main"),
        ),
        "about": SectionSelectors(
            kind="single",
            root_selectors=(
                '[data-testid="expandable-text-box"]',
                '[data-view-name="profile-card-about"]',
                '[data-view-name="profile-card"]',
                "main",
            ),
        ),
        "experience": SectionSelectors(
            root_selectors=('[data-view-name="profile-card-experience"]', "section.experience"),
            item_selectors=(".pvs-list__paged-list-item", "ul > li"),
            details_path="experience",
            details_item_selectors=details_items,
            nested_item_selector=".pvs-list__container .pvs-list__paged-list-item, ul ul > li",
            drop_nested_regions=True,
        ),
        "education": SectionSelectors(
            root_selectors=('[data-view-name="profile-card-education"]', "section.education"),
            item_selectors=(".pvs-list__paged-list-item", "ul > li"),
            details_path="education",
            details_item_selectors=details_items,
            drop_nested_regions=True,
        ),
        "patents": SectionSelectors(
            root_selectors=('[data-view-name="profile-card-patents"]', "section.patents"),
            item_selectors=(".pvs-list__paged-list-item", "ul > li"),
            details_path="patents",
            details_item_selectors=details_items,
            drop_nested_regions=True,
        ),
        "accomplishments": SectionSelectors(
            root_selectors=(".pvs-list__container", "main ul", "main ol"),
            item_selectors=(".pvs-list__paged-list-item", "li"),
            drop_nested_regions=True,
            min_items=1,
        ),
        "interests": SectionSelectors(
            root_selectors=('[role="tabpanel"]', "tabpanel"),
            item_selectors=(".pvs-list__paged-list-item", "li"),
            details_path="interests",
            drop_nested_regions=True,
        ),
        "contact": SectionSelectors(
            kind="raw",
            root_selectors=("dialog", '[role="dialog"]', ".artdeco-modal"),
        ),
    }


class SelectorSettings(BaseModel):
    """Selector-fallback tables, injected into the region extractor."""

    model_config = ConfigDict(frozen=True)

    sections: Dict[str, SectionSelectors] = Field(default_factory=_default_sections)
    accomplishment_categories: Tuple[AccomplishmentCategory, ...] = Field(
        default_factory=lambda: tuple(
            AccomplishmentCategory(url_path=path, category=category)
            for path, category in (
                ("certifications", "certification"),
                ("honors", "honor"),
                ("publications", "publication"),
                ("patents", "patent"),
                ("courses", "course"),
                ("projects", "project"),
                ("languages", "language"),
                ("organizations", "organization"),
            )
        )
    )
    tab_selectors: Tuple[str, ...] = ('[role="tab"]', "tab")
    contact_trigger_selectors: Tuple[str, ...] = (
        "#top-card-text-details-contact-info",
        'a[href*="/overlay/contact-info/"]',
    )
    empty_state_text: str = "Nothing to see for now"

    def section(self, name: str) -> SectionSelectors:
        try:
            return self.sections[name]
        except KeyError:
            raise KeyError(f"No selector table for section '{name}'. Known sections: {sorted(self.sections)}")


class DriverSettings(BaseModel):
    """Bounded waits handed to Page Driver implementations."""

    navigation_timeout_ms: float = Field(default=15000, gt=0)
    action_timeout_ms: float = Field(default=7000, gt=0)
    text_timeout_ms: float = Field(default=2000, gt=0)


class MonitoringConfig(BaseModel):
    """Configuration for logging and metrics."""

    log_level: str = Field(default="INFO", description="Logging level (e.g., DEBUG, INFO, WARNING).")
    log_file: str | None = Field(default=None, description="Path to log file. If None, logs to console.")
    metrics_enabled: bool = Field(default=True, description="Record Prometheus metrics for each pipeline run.")

    @field_validator("log_file", mode="before")
    @classmethod
    def create_parent_dir(cls, v: str | Path | None) -> str | None:
        if v is None:
            return None
        path = Path(v)
        path.parent.mkdir(parents=True, exist_ok=True)
        return str(path)


# --- Main Configuration Class ---


class Config(BaseSettings):
    project_name: str = "profilecore"
    extraction: ExtractionSettings = Field(default_factory=ExtractionSettings)
    health: HealthSettings = Field(default_factory=HealthSettings)
    selectors: SelectorSettings = Field(default_factory=SelectorSettings)
    driver: DriverSettings = Field(default_factory=DriverSettings)
    monitoring: MonitoringConfig = Field(default_factory=MonitoringConfig)

    model_config = SettingsConfigDict(env_prefix="PROFILECORE_", env_nested_delimiter="__", case_sensitive=False)

    @classmethod
    def from_yaml(cls, path: Path) -> Config:
        log.debug("Loading configuration from YAML file: %s", path)
        if not path.is_file():
            raise FileNotFoundError(f"Configuration file not found or is not a file: {path}")
        with open(path, "r", encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f)
        if not yaml_data:
            log.warning("Configuration file is empty: %s. Using default settings.", path)
            return cls.model_validate({})
        return cls.model_validate(yaml_data)


def find_config_file() -> Path | None:
    current_dir = Path.cwd()
    for name in ("profilecore.yaml", "profilecore.yml", "config.yaml", "config.yml"):
        path = current_dir / name
        if path.exists():
            return path
    return None


def load_config(path: Path | None = None) -> Config:
    """Load configuration from ``path`` (or a discovered file), falling back to defaults."""
    config_path = path or find_config_file()
    if config_path:
        try:
            log.info("Loading configuration from: %s", config_path)
            return Config.from_yaml(config_path)
        except (ValidationError, FileNotFoundError, yaml.YAMLError) as e:
            log.error(
                "Failed to load or validate configuration from '%s': %s. Falling back to default settings.",
                config_path,
                e,
            )
    else:
        log.info("No config file found. Using default settings.")
    return Config()
