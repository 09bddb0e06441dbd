"""
Analytics Aggregator - Report Orchestrator.

The AnalyticsAggregator filters a snapshot and runs every enabled
aggregation over it, in a fixed order, timing each one.

The aggregations themselves are pure functions; the aggregator adds
configuration, filtering and metrics around them. It never mutates
its input and never raises for empty input.
"""

from __future__ import annotations

import logging
import time
from datetime import date, datetime
from typing import Any, Callable, Dict, Iterable, List, Optional, Protocol, Tuple

from onboarding_pipeline.analytics.activity import kpi_summary, recent_activity
from onboarding_pipeline.analytics.funnel import conversion_rate, funnel_counts
from onboarding_pipeline.analytics.geographic import (
    geographic_rollup,
    regional_comparison,
)
from onboarding_pipeline.analytics.pipeline_health import pipeline_health
from onboarding_pipeline.analytics.profile import (
    experience_breakdown,
    rating_distribution,
    role_distribution,
    skills_breakdown,
)
from onboarding_pipeline.analytics.time_to_hire import time_to_hire
from onboarding_pipeline.analytics.trends import (
    application_trend,
    overall_trend,
    weekly_comparison,
    weekly_trends,
)
from onboarding_pipeline.config.models import AGGREGATION_NAMES, OnboardingConfig
from onboarding_pipeline.domain.entities import Applicant
from onboarding_pipeline.domain.value_objects import (
    AnalyticsReport,
    HealthLevel,
    StageHealth,
)
from onboarding_pipeline.filters.applicant_filters import FilterCriteria, apply_filters

logger = logging.getLogger(__name__)

Aggregation = Callable[[List[Applicant], date], Any]


class MetricsCollectorProtocol(Protocol):
    """Protocol for metrics collectors."""

    def record_timing(
        self, name: str, duration_seconds: float, tags: Optional[Dict] = None
    ) -> None:
        ...

    def record_count(
        self, name: str, value: int, tags: Optional[Dict] = None
    ) -> None:
        ...


class AnomalyLoggerProtocol(Protocol):
    """Protocol for loggers that accept data anomalies."""

    def log_anomaly(
        self, message: str, severity: str, context: Optional[Dict] = None
    ) -> None:
        ...


class AnalyticsAggregator:
    """Builds AnalyticsReports from applicant snapshots."""

    def __init__(
        self,
        config: Optional[OnboardingConfig] = None,
        metrics_collector: Optional[MetricsCollectorProtocol] = None,
        clock: Optional[Callable[[], date]] = None,
        audit_logger: Optional[AnomalyLoggerProtocol] = None,
    ) -> None:
        """
        Initialize the aggregator.

        Args:
            config: Onboarding configuration (analytics section is used)
            metrics_collector: Receives per-aggregation timings (optional)
            clock: Returns "today" (defaults to the configured reference
                   date, else the system date)
            audit_logger: Receives an anomaly per critical stage (optional)
        """
        self.config = config or OnboardingConfig()
        self.metrics_collector = metrics_collector
        self.audit_logger = audit_logger
        self._clock = clock or self._default_clock
        self._aggregations = self._build_aggregations()

    def _default_clock(self) -> date:
        return self.config.global_settings.reference_date or date.today()

    def _build_aggregations(self) -> Dict[str, Aggregation]:
        analytics = self.config.analytics
        return {
            "funnel": lambda apps, today: funnel_counts(apps),
            "geography": lambda apps, today: geographic_rollup(apps),
            "trend": lambda apps, today: application_trend(
                apps, analytics.trend_granularity
            ),
            "conversion_rate": lambda apps, today: conversion_rate(apps),
            "time_to_hire": lambda apps, today: time_to_hire(
                apps, analytics.time_to_hire
            ),
            "pipeline_health": lambda apps, today: pipeline_health(
                apps, today, analytics.pipeline_health
            ),
            "ratings": lambda apps, today: rating_distribution(apps),
            "skills": lambda apps, today: skills_breakdown(apps),
            "experience": lambda apps, today: experience_breakdown(apps),
            "roles": lambda apps, today: role_distribution(apps),
            "regional": lambda apps, today: regional_comparison(apps),
            "weekly": weekly_comparison,
            "weekly_trends": lambda apps, today: weekly_trends(
                apps, today, analytics.weekly_trend_weeks
            ),
            "kpis": kpi_summary,
            "recent_activity": lambda apps, today: recent_activity(
                apps, today, analytics.recent_activity_limit
            ),
        }

    def build_report(
        self,
        applicants: Iterable[Applicant],
        criteria: Optional[FilterCriteria] = None,
    ) -> AnalyticsReport:
        """
        Run all enabled aggregations.

        Args:
            applicants: Snapshot (ApplicantSnapshot or any iterable)
            criteria: Optional filter selection applied first

        Returns:
            AnalyticsReport; disabled sections are None
        """
        start_time = time.perf_counter()
        today = self._clock()
        version = getattr(applicants, "version", None)

        selected = apply_filters(applicants, criteria, today)
        enabled = set(self.config.analytics.enabled)

        report = AnalyticsReport(
            generated_at=datetime.now(),
            reference_date=today,
            snapshot_version=version,
            applicant_count=len(selected),
        )

        for name in AGGREGATION_NAMES:
            if name not in enabled:
                continue
            value, duration = self._run(name, selected, today)
            setattr(report, name, value)
            report.timings[name] = duration

        if report.weekly is not None:
            report.metadata["weekly_trend"] = overall_trend(report.weekly)
        if report.pipeline_health is not None:
            self._report_critical_stages(report.pipeline_health)
        if criteria is not None:
            report.metadata["criteria"] = criteria.model_dump(
                mode="json", exclude_defaults=True
            )

        total_duration = time.perf_counter() - start_time
        if self.metrics_collector:
            self.metrics_collector.record_timing("analytics_total_seconds", total_duration)
            self.metrics_collector.record_count("analytics_applicants_total", len(selected))

        logger.info(
            f"Analytics report built: {len(selected)} applicants, "
            f"{len(report.timings)} aggregations in {total_duration:.3f}s"
        )
        return report

    def _run(self, name: str, applicants: List[Applicant], today: date) -> Tuple[Any, float]:
        """Execute a single aggregation and record its timing."""
        stage_start = time.perf_counter()
        value = self._aggregations[name](applicants, today)
        duration = time.perf_counter() - stage_start

        if self.metrics_collector:
            self.metrics_collector.record_timing(
                "aggregation_seconds", duration, {"aggregation": name}
            )
        logger.debug(f"Aggregation {name} took {duration:.4f}s")
        return value, duration

    def _report_critical_stages(self, stages: List[StageHealth]) -> None:
        for stage in stages:
            if stage.health != HealthLevel.CRITICAL:
                continue
            message = (
                f"{stage.stage.value}: {stage.count} applicants waiting "
                f"{stage.avg_days} days on average (expected {stage.expected_days})"
            )
            logger.warning(message)
            if self.audit_logger:
                self.audit_logger.log_anomaly(
                    message,
                    severity="WARNING",
                    context={"stage": stage.stage.value, "avg_days": stage.avg_days},
                )
