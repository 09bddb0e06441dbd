"""
Pipeline Health Aggregation.

For every non-terminal pipeline stage, how long applicants currently in
that stage have been waiting since their last status change, compared
against an expected number of days.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, List, Optional

from onboarding_pipeline.analytics.common import days_between, mean, round_one_decimal
from onboarding_pipeline.config.models import PipelineHealthConfig
from onboarding_pipeline.domain.entities import Applicant
from onboarding_pipeline.domain.value_objects import HealthLevel, StageHealth
from onboarding_pipeline.pipeline.transitions import ACTIVE_STAGES


def classify_health(
    avg_days: float,
    expected_days: float,
    config: Optional[PipelineHealthConfig] = None,
) -> HealthLevel:
    """Critical above critical_multiplier x expected, warning above warning_multiplier x."""
    config = config or PipelineHealthConfig()
    if avg_days > expected_days * config.critical_multiplier:
        return HealthLevel.CRITICAL
    if avg_days > expected_days * config.warning_multiplier:
        return HealthLevel.WARNING
    return HealthLevel.GOOD


def pipeline_health(
    applicants: Iterable[Applicant],
    today: date,
    config: Optional[PipelineHealthConfig] = None,
) -> List[StageHealth]:
    """
    Waiting time per stage.

    Args:
        applicants: Snapshot or filtered subset
        today: Reference date for elapsed days
        config: Expected days and multipliers

    Returns:
        One StageHealth per non-terminal pipeline stage, in pipeline
        order. Empty stages report 0 days and good health.
    """
    config = config or PipelineHealthConfig()
    applicants = list(applicants)

    report: List[StageHealth] = []
    for stage in ACTIVE_STAGES:
        waits = [
            max(days_between(a.last_status_change_date, today), 0)
            for a in applicants
            if a.status == stage
        ]
        raw_avg = mean(waits)
        expected = config.expected_days.get(stage, 1.0)
        report.append(
            StageHealth(
                stage=stage,
                count=len(waits),
                avg_days=round_one_decimal(raw_avg),
                expected_days=expected,
                health=classify_health(float(raw_avg), expected, config),
            )
        )
    return report
