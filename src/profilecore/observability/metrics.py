"""
Defines Prometheus metrics for extraction monitoring.

Markup drift shows up as falling section confidence long before a section
returns nothing, so confidence and health are exported per section.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

from prometheus_client import REGISTRY as _PROM_REGISTRY
from prometheus_client import Counter as _OrigCounter
from prometheus_client import Gauge as _OrigGauge

# ---------------------------------------------------------------------------
# Duplicate-safe Prometheus metric wrappers
# ---------------------------------------------------------------------------
# Re-importing this module (e.g. across a test session) must reuse the
# collectors registered on first import instead of raising.


def _duplicate_safe_factory(metric_cls):
    """Return a factory that reuses an existing collector if already present."""

    def _factory(name: str, documentation: str, *args, **kwargs):  # type: ignore[override]
        existing = _PROM_REGISTRY._names_to_collectors.get(name)
        if existing is not None:
            return existing  # type: ignore[return-value]

        try:
            return metric_cls(name, documentation, *args, **kwargs)  # type: ignore[call-arg]
        except ValueError:
            # Registration lost the race; fall back to the now-existing collector.
            return _PROM_REGISTRY._names_to_collectors[name]  # type: ignore[return-value]

    return _factory


Counter = _duplicate_safe_factory(_OrigCounter)  # type: ignore[assignment]
Gauge = _duplicate_safe_factory(_OrigGauge)  # type: ignore[assignment]

# Counters are looked up by their base name (without the ``_total`` suffix).
METRICS: Dict[str, Any] = {
    "strategy_attempts": Counter(
        "profilecore_strategy_attempts_total",
        "Extraction strategy attempts by outcome",
        ["section", "strategy", "outcome"],
    ),
    "section_confidence": Gauge(
        "profilecore_section_confidence",
        "Average confidence of the last pipeline run for a section",
        ["section"],
    ),
    "section_items": Gauge(
        "profilecore_section_items",
        "Number of items produced by the last pipeline run for a section",
        ["section"],
    ),
    "section_health": Gauge(
        "profilecore_section_health",
        "1 for the current health status of a section, 0 otherwise",
        ["section", "status"],
    ),
}


def increment(name: str, value: float = 1.0, labels: Optional[Dict[str, Any]] = None) -> None:
    """Increment a counter metric."""
    if name in METRICS:
        metric = METRICS[name]
        if labels is not None:
            metric.labels(**labels).inc(value)
        else:
            metric.inc(value)


def gauge(name: str, value: float, labels: Optional[Dict[str, Any]] = None) -> None:
    """Set a gauge metric."""
    if name in METRICS:
        metric = METRICS[name]
        if labels is not None:
            metric.labels(**labels).set(value)
        else:
            metric.set(value)


def set_state(name: str, labels: Dict[str, Any], state_label: str, current: str, states: Iterable[str]) -> None:
    """Set a one-hot gauge: 1 for ``current``, 0 for every other state."""
    for state in states:
        gauge(name, 1.0 if state == current else 0.0, {**labels, state_label: state})


def export_prometheus() -> str:
    """Export metrics in Prometheus format."""
    from prometheus_client import generate_latest

    return generate_latest().decode("utf-8")
