"""
Time-to-Hire Aggregation.

Time-to-hire of a Go Live applicant is the number of calendar days
between its applied date and its last status change (the day it went
live).
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from onboarding_pipeline.analytics.common import days_between, mean, round_half_up
from onboarding_pipeline.config.models import TimeToHireConfig
from onboarding_pipeline.domain.entities import Applicant, OnboardingStatus
from onboarding_pipeline.domain.value_objects import (
    HistogramBucket,
    TimeToHireReport,
    TimeToHireStats,
)


def hire_durations(applicants: Iterable[Applicant]) -> List[int]:
    """Days from application to Go Live for every Go Live applicant."""
    return [
        days_between(a.applied_date, a.last_status_change_date)
        for a in applicants
        if a.status == OnboardingStatus.GO_LIVE
    ]


def build_buckets(edges: Sequence[int]) -> List[HistogramBucket]:
    """
    Empty histogram bins from inclusive upper edges.

    [7, 14, 21, 30] gives 0-7, 8-14, 15-21, 22-30 and an open 30+ bin
    that starts at 31.
    """
    buckets: List[HistogramBucket] = []
    lower = 0
    for edge in edges:
        buckets.append(
            HistogramBucket(label=f"{lower}-{edge} days", min_days=lower, max_days=edge)
        )
        lower = edge + 1
    buckets.append(
        HistogramBucket(label=f"{edges[-1]}+ days", min_days=lower, max_days=None)
    )
    return buckets


def bucket_label(days: int, edges: Sequence[int] = (7, 14, 21, 30)) -> Optional[str]:
    """Label of the bin a duration falls into (None if negative)."""
    for bucket in build_buckets(edges):
        if bucket.contains(days):
            return bucket.label
    return None


def _quantile(ordered: List[int], q: float) -> int:
    # Sorted-index rule: sorted[floor(n * q)]
    return ordered[int(len(ordered) * q)]


def duration_stats(durations: List[int]) -> TimeToHireStats:
    """Median, quartiles and rounded mean of durations (zeros when empty)."""
    if not durations:
        return TimeToHireStats()
    ordered = sorted(durations)
    return TimeToHireStats(
        median=_quantile(ordered, 0.5),
        p25=_quantile(ordered, 0.25),
        p75=_quantile(ordered, 0.75),
        average=round_half_up(mean(ordered)),
        sample_size=len(ordered),
    )


def average_time_to_hire(applicants: Iterable[Applicant]) -> int:
    """Rounded mean time-to-hire, 0 without Go Live applicants."""
    durations = hire_durations(applicants)
    if not durations:
        return 0
    return round_half_up(mean(durations))


def time_to_hire(
    applicants: Iterable[Applicant],
    config: Optional[TimeToHireConfig] = None,
) -> TimeToHireReport:
    """
    Histogram and statistics over Go Live durations.

    Args:
        applicants: Snapshot or filtered subset
        config: Bucket edges (defaults to 7/14/21/30)

    Returns:
        TimeToHireReport; every bin is present even when empty
    """
    config = config or TimeToHireConfig()
    durations = hire_durations(applicants)

    histogram = []
    for bucket in build_buckets(config.bucket_edges):
        count = sum(1 for days in durations if bucket.contains(days))
        histogram.append(bucket.model_copy(update={"count": count}))

    return TimeToHireReport(histogram=histogram, stats=duration_stats(durations))
