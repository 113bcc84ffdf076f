"""
profilecore: resilient multi-strategy extraction of profile pages.
"""

__version__ = "0.1.0"

from .config import Config, load_config
from .exceptions import ConfigurationError, DriverError, DriverTimeoutError, NavigationError, ProfileCoreError
from .extraction import ExtractionPipeline, build_health_report
from .models import (
    About,
    Accomplishment,
    Contact,
    ContactType,
    Education,
    Experience,
    ExtractionRecord,
    HealthReport,
    HealthStatus,
    Interest,
    Link,
    Patent,
    Person,
    PipelineDiagnostics,
    PipelineResult,
    Position,
    RawAnchor,
    RawSection,
    TopCardInfo,
)
from .scraper import PROFILE_SECTIONS, ProfileExtractor

__all__ = [
    "__version__",
    "About",
    "Accomplishment",
    "Config",
    "ConfigurationError",
    "Contact",
    "ContactType",
    "DriverError",
    "DriverTimeoutError",
    "Education",
    "Experience",
    "ExtractionPipeline",
    "ExtractionRecord",
    "HealthReport",
    "HealthStatus",
    "Interest",
    "Link",
    "NavigationError",
    "PROFILE_SECTIONS",
    "Patent",
    "Person",
    "PipelineDiagnostics",
    "PipelineResult",
    "Position",
    "ProfileCoreError",
    "ProfileExtractor",
    "RawAnchor",
    "RawSection",
    "TopCardInfo",
    "build_health_report",
    "load_config",
]
