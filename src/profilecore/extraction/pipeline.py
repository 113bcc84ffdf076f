"""
Extraction pipeline: ordered strategies, one interpreter, confidence gating.

Strategies are tried in priority order. The first whose average confidence
reaches the threshold is accepted and later strategies are never invoked;
otherwise the best-scoring attempt is returned with diagnostics.
"""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass, field
from typing import Any, Generic, List, Optional, Sequence, Tuple, TypeVar

import structlog

from ..config.config import ExtractionSettings
from ..models import PipelineDiagnostics, PipelineResult, RawSection
from ..observability.metrics import gauge, increment
from ..protocols import ExtractionStrategy, Interpreter, PageDriver, RegionKind, RegionSet, TaggedRegion
from .confidence import average_confidence

T = TypeVar("T")

logger = structlog.get_logger(__name__)

# Strategy name reported for sections read from pre-materialised raw sections.
RAW_SECTIONS_STRATEGY = "raw_sections"


@dataclass
class StrategyAttempt(Generic[T]):
    """Scored output of one strategy over the whole region collection."""

    strategy: str
    items: List[T] = field(default_factory=list)
    item_confidences: List[float] = field(default_factory=list)
    record_count: int = 0
    avg_confidence: float = 0.0
    failed: bool = False
    duration: float = 0.0

    @property
    def confidence(self) -> float:
        return average_confidence(self.item_confidences)


class ExtractionPipeline(Generic[T]):
    """
    Runs strategies against a region collection and interprets their records.

    Never raises past ``extract``: strategy exceptions and timeouts become
    failed attempts, interpreter rejections count as zero confidence.
    """

    def __init__(
        self,
        strategies: Sequence[ExtractionStrategy],
        interpreter: Interpreter[T],
        settings: Optional[ExtractionSettings] = None,
        *,
        driver: Optional[PageDriver] = None,
        section: Optional[str] = None,
        metrics_enabled: bool = True,
    ) -> None:
        self.strategies = list(strategies)
        self.interpreter = interpreter
        self.settings = settings or ExtractionSettings()
        self.driver = driver
        self.section = section or getattr(interpreter, "name", "unknown")
        self.metrics_enabled = metrics_enabled
        self.logger = logger.bind(component="ExtractionPipeline", section=self.section)

    @property
    def confidence_threshold(self) -> float:
        return self.settings.confidence_threshold

    async def extract(self, regions: RegionSet | Sequence[TaggedRegion]) -> PipelineResult[T]:
        """Extract entities from ``regions`` (a ``RegionSet`` or plain tagged regions)."""
        if isinstance(regions, RegionSet):
            if regions.kind is RegionKind.RAW:
                return self._extract_raw(regions.raw)
            tagged: Tuple[TaggedRegion, ...] = regions.regions
        else:
            tagged = tuple(regions)

        if not tagged:
            self.logger.debug("No regions to extract")
            result: PipelineResult[T] = PipelineResult.empty()
            self._record_result(result)
            return result

        attempted: List[str] = []
        best: Optional[StrategyAttempt[T]] = None

        for strategy in self.strategies:
            attempted.append(strategy.name)
            attempt = await self._run_strategy(strategy, tagged)

            if attempt.items and attempt.avg_confidence >= self.confidence_threshold:
                self._count_attempt(strategy.name, "accepted")
                self.logger.info(
                    "Pipeline accepted strategy",
                    strategy=strategy.name,
                    items=len(attempt.items),
                    avg_confidence=attempt.avg_confidence,
                    threshold=self.confidence_threshold,
                )
                return self._finish(attempt, attempted)

            self._count_attempt(strategy.name, "failed" if attempt.failed else "below_threshold")
            # Strictly greater keeps the earliest strategy on ties.
            if best is None or attempt.avg_confidence > best.avg_confidence:
                best = attempt

        self.logger.warning(
            "No strategy reached the confidence threshold",
            strategies_attempted=attempted,
            best_strategy=best.strategy if best else None,
            best_avg_confidence=best.avg_confidence if best else 0.0,
            threshold=self.confidence_threshold,
        )
        return await self._finish_exhausted(best, attempted, tagged)

    async def _run_strategy(self, strategy: ExtractionStrategy, regions: Sequence[TaggedRegion]) -> StrategyAttempt[T]:
        attempt: StrategyAttempt[T] = StrategyAttempt(strategy=strategy.name)
        start_time = time.time()
        try:
            records = await asyncio.wait_for(
                strategy.attempt(regions), timeout=self.settings.strategy_timeout_seconds
            )
        except asyncio.TimeoutError:
            attempt.failed = True
            attempt.duration = time.time() - start_time
            self.logger.warning(
                "Strategy attempt timed out",
                strategy=strategy.name,
                timeout_seconds=self.settings.strategy_timeout_seconds,
            )
            return attempt
        except Exception as e:
            attempt.failed = True
            attempt.duration = time.time() - start_time
            self.logger.warning(
                "Strategy attempt failed",
                strategy=strategy.name,
                error=str(e),
                error_type=type(e).__name__,
            )
            return attempt

        scores: List[float] = []
        for record in records:
            outcome = self.interpreter.interpret(record)
            if outcome.ok:
                attempt.items.append(outcome.entity)
                attempt.item_confidences.append(outcome.confidence)
                scores.append(outcome.confidence)
            else:
                self.logger.debug("Record rejected", strategy=strategy.name, reason=outcome.reason)
                scores.append(0.0)

        attempt.record_count = len(records)
        attempt.avg_confidence = average_confidence(scores)
        attempt.duration = time.time() - start_time
        self.logger.debug(
            "Strategy attempt scored",
            strategy=strategy.name,
            records=attempt.record_count,
            items=len(attempt.items),
            avg_confidence=attempt.avg_confidence,
            duration=attempt.duration,
        )
        return attempt

    def _finish(self, attempt: StrategyAttempt[T], attempted: List[str]) -> PipelineResult[T]:
        result: PipelineResult[T] = PipelineResult(
            items=tuple(attempt.items),
            strategy=attempt.strategy if attempt.items else None,
            confidence=attempt.confidence if attempt.items else 0.0,
            diagnostics=PipelineDiagnostics(
                avg_confidence=attempt.avg_confidence,
                text_extractor_used=attempt.strategy if attempt.items else None,
                strategies_attempted=tuple(attempted),
            ),
        )
        self._record_result(result)
        return result

    async def _finish_exhausted(
        self,
        best: Optional[StrategyAttempt[T]],
        attempted: List[str],
        regions: Sequence[TaggedRegion],
    ) -> PipelineResult[T]:
        if best is not None and best.items:
            return self._finish(best, attempted)

        sample = await self._capture_failure_html(regions)
        result: PipelineResult[T] = PipelineResult(
            diagnostics=PipelineDiagnostics(
                avg_confidence=0.0,
                text_extractor_used=None,
                strategies_attempted=tuple(attempted),
                failure_html_sample=sample,
            )
        )
        self._record_result(result)
        return result

    async def _capture_failure_html(self, regions: Sequence[TaggedRegion]) -> Optional[str]:
        if not self.settings.capture_html_on_failure or self.driver is None or not regions:
            return None
        try:
            html = await self.driver.region_html(regions[0].handle)
        except Exception as e:
            self.logger.debug("Could not capture failure markup", error=str(e))
            return None
        if not html:
            return None
        return html[: self.settings.html_sample_max_chars]

    def _extract_raw(self, sections: Sequence[RawSection]) -> PipelineResult[T]:
        """Sections already materialised by the region extractor go straight to ``parse_raw``."""
        parse_raw = getattr(self.interpreter, "parse_raw", None)
        attempted = (RAW_SECTIONS_STRATEGY,)
        if parse_raw is None or not sections:
            result: PipelineResult[T] = PipelineResult.empty(attempted)
            self._record_result(result)
            return result

        try:
            items = list(parse_raw(sections))
        except Exception as e:
            self.logger.warning("Raw section parsing failed", error=str(e), error_type=type(e).__name__)
            items = []

        entities: List[Any] = [item for item in items if self.interpreter.validate(item)]
        confidences = [self.interpreter.confidence(item) for item in entities]
        avg = average_confidence(confidences)
        outcome = "accepted" if avg >= self.confidence_threshold else "below_threshold"
        self._count_attempt(RAW_SECTIONS_STRATEGY, outcome)

        result = PipelineResult(
            items=tuple(entities),
            strategy=RAW_SECTIONS_STRATEGY if entities else None,
            confidence=avg,
            diagnostics=PipelineDiagnostics(
                avg_confidence=avg,
                text_extractor_used=RAW_SECTIONS_STRATEGY if entities else None,
                strategies_attempted=attempted,
            ),
        )
        self._record_result(result)
        return result

    def _count_attempt(self, strategy: str, outcome: str) -> None:
        if self.metrics_enabled:
            increment("strategy_attempts", labels={"section": self.section, "strategy": strategy, "outcome": outcome})

    def _record_result(self, result: PipelineResult[T]) -> None:
        if self.metrics_enabled:
            gauge("section_confidence", result.diagnostics.avg_confidence, {"section": self.section})
            gauge("section_items", float(len(result.items)), {"section": self.section})
