"""
Health reporting for extraction results.

A pure projection of a pipeline result onto healthy / degraded / broken,
used to alert on silent markup drift.
"""

from __future__ import annotations

from typing import Any, Optional

from ..config.config import HealthSettings
from ..models import HealthReport, HealthStatus, PipelineResult
from ..observability.metrics import set_state


def classify(item_count: int, confidence: float, thresholds: HealthSettings) -> HealthStatus:
    if item_count == 0 or confidence <= 0:
        return HealthStatus.BROKEN
    if confidence >= thresholds.healthy_confidence:
        return HealthStatus.HEALTHY
    if confidence >= thresholds.degraded_confidence:
        return HealthStatus.DEGRADED
    return HealthStatus.BROKEN


def build_health_report(
    section: str,
    result: PipelineResult[Any],
    thresholds: Optional[HealthSettings] = None,
    *,
    record_metrics: bool = False,
) -> HealthReport:
    """
    Build the health report of ``section`` from its pipeline result.

    The verdict uses ``diagnostics.avg_confidence`` so that rejected records
    weigh on health the same way they weigh on strategy selection.
    """
    thresholds = thresholds or HealthSettings()
    item_count = len(result.items)
    confidence = result.diagnostics.avg_confidence
    extractor = result.diagnostics.text_extractor_used
    status = classify(item_count, confidence, thresholds)

    if status is HealthStatus.HEALTHY:
        message = f"{section} extraction healthy using {extractor or 'none'}"
    elif status is HealthStatus.DEGRADED:
        message = (
            f"{section} extraction degraded using {extractor or 'none'}: "
            f"{item_count} items, confidence {confidence:.2f}"
        )
    elif extractor is None:
        message = (
            f"{section} extraction broken: no reliable text extractor succeeded "
            f"({item_count} items, confidence {confidence:.2f})"
        )
    else:
        message = f"{section} extraction broken using {extractor}: {item_count} items, confidence {confidence:.2f}"

    if record_metrics:
        set_state(
            "section_health",
            {"section": section},
            "status",
            status.value,
            [member.value for member in HealthStatus],
        )

    return HealthReport(
        section=section,
        status=status,
        text_extractor_used=extractor,
        confidence=confidence,
        item_count=item_count,
        message=message,
    )
