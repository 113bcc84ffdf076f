"""Logging and metrics for the extraction core."""

from __future__ import annotations

from .logging import configure_logging
from .metrics import METRICS, export_prometheus, gauge, increment, set_state

__all__ = ["configure_logging", "METRICS", "export_prometheus", "gauge", "increment", "set_state"]
