"""
Trend Aggregations.

Application volume over time, the current week compared with the week
before it, and a trailing multi-week series by outcome. A "week" here is
the trailing seven days ending today; week bucketing of the trend series
uses Monday-start ISO weeks.
"""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal
from typing import Callable, Iterable, List, Literal, Tuple

from onboarding_pipeline.analytics.common import count_by, round_half_up, week_start
from onboarding_pipeline.domain.entities import Applicant, OnboardingStatus
from onboarding_pipeline.domain.value_objects import (
    TrendPoint,
    WeekPoint,
    WeeklyMetric,
    WeeklyTrends,
    WeeklyTrendSummary,
)

Granularity = Literal["day", "week"]

INTERVIEW_STATUSES = frozenset(
    {OnboardingStatus.INVITED_TO_INTERVIEW, OnboardingStatus.INTERVIEW_SCHEDULED}
)


def application_trend(
    applicants: Iterable[Applicant],
    granularity: Granularity = "week",
) -> List[TrendPoint]:
    """
    Applications per day or per week, ascending by period.

    Periods without applications are omitted.

    Raises:
        ValueError: If granularity is not "day" or "week"
    """
    if granularity == "week":
        key: Callable[[Applicant], date] = lambda a: week_start(a.applied_date)
    elif granularity == "day":
        key = lambda a: a.applied_date
    else:
        raise ValueError(f"Unknown trend granularity: {granularity!r}")

    counts = count_by(applicants, key)
    return [TrendPoint(period_start=period, count=counts[period]) for period in sorted(counts)]


def week_windows(today: date) -> Tuple[Tuple[date, date], Tuple[date, date]]:
    """((this_start, this_end), (last_start, last_end)), inclusive dates."""
    this_start = today - timedelta(days=6)
    last_end = this_start - timedelta(days=1)
    return (this_start, today), (last_end - timedelta(days=6), last_end)


def change_percent(current: int, previous: int) -> int:
    """Percent change; 100 when growing from zero, 0 when both are zero."""
    if previous == 0:
        return 100 if current > 0 else 0
    return round_half_up(Decimal(current - previous) * 100 / previous)


def weekly_comparison(applicants: Iterable[Applicant], today: date) -> List[WeeklyMetric]:
    """
    This week vs last week for applications, Go Live, interviews and declines.

    Applicants are assigned to a week by applied date. For Declined a
    drop counts as positive; for every other metric a rise or no change
    does.
    """
    (this_start, this_end), (last_start, last_end) = week_windows(today)
    applicants = list(applicants)
    this_week = [a for a in applicants if this_start <= a.applied_date <= this_end]
    last_week = [a for a in applicants if last_start <= a.applied_date <= last_end]

    metrics = [
        ("Applications", lambda a: True, True),
        ("Go Live", lambda a: a.status == OnboardingStatus.GO_LIVE, True),
        ("Interviews", lambda a: a.status in INTERVIEW_STATUSES, True),
        ("Declined", lambda a: a.status == OnboardingStatus.DECLINED, False),
    ]

    result: List[WeeklyMetric] = []
    for name, matches, higher_is_better in metrics:
        current = sum(1 for a in this_week if matches(a))
        previous = sum(1 for a in last_week if matches(a))
        result.append(
            WeeklyMetric(
                metric=name,
                this_week=current,
                last_week=previous,
                change=current - previous,
                change_percent=change_percent(current, previous),
                is_positive=current >= previous if higher_is_better else current <= previous,
            )
        )
    return result


def overall_trend(metrics: List[WeeklyMetric]) -> str:
    """"up" with 3+ positive metrics, "down" with 1 or fewer, else "flat"."""
    positive = sum(1 for m in metrics if m.is_positive)
    if positive >= 3:
        return "up"
    if positive <= 1:
        return "down"
    return "flat"


# (summary name, WeekPoint field)
WEEKLY_TREND_METRICS: Tuple[Tuple[str, str], ...] = (
    ("Applications", "applications"),
    ("Go Live", "go_live"),
    ("Interviews", "interviews"),
    ("Declined", "declined"),
)


def _week_label(offset: int, start: date) -> str:
    if offset == 0:
        return "Now"
    if offset == 1:
        return "Last"
    return f"{start:%b} {start.day}"


def _summarise(metric: str, field: str, points: List[WeekPoint]) -> WeeklyTrendSummary:
    values = [getattr(p, field) for p in points]
    this_week = values[-1]
    last_week = values[-2] if len(values) > 1 else 0
    total = sum(values)
    peak = max(values)
    return WeeklyTrendSummary(
        metric=metric,
        this_week=this_week,
        last_week=last_week,
        trend_percent=change_percent(this_week, last_week),
        total=total,
        average=round_half_up(Decimal(total) / len(values)),
        peak=peak,
        peak_week_start=points[values.index(peak)].week_start,
    )


def weekly_trends(
    applicants: Iterable[Applicant],
    today: date,
    weeks: int = 8,
) -> WeeklyTrends:
    """
    Trailing seven-day windows ending today, oldest first.

    Window k (0 = current) covers today - 7k - 6 through today - 7k
    inclusive, so windows 0 and 1 are the weeks of weekly_comparison().
    Applicants are assigned by applied date and counted by their current
    status. Each metric is summarised as this week vs last week (trend
    percent as in change_percent), total, rounded average per week and
    the peak week (earliest on ties).

    Raises:
        ValueError: If weeks < 1
    """
    if weeks < 1:
        raise ValueError(f"weeks must be >= 1, got {weeks}")

    applicants = list(applicants)
    points: List[WeekPoint] = []
    for offset in range(weeks - 1, -1, -1):
        end = today - timedelta(days=7 * offset)
        start = end - timedelta(days=6)
        window = [a for a in applicants if start <= a.applied_date <= end]
        points.append(
            WeekPoint(
                week_start=start,
                week_end=end,
                label=_week_label(offset, start),
                applications=len(window),
                go_live=sum(1 for a in window if a.status == OnboardingStatus.GO_LIVE),
                interviews=sum(1 for a in window if a.status in INTERVIEW_STATUSES),
                declined=sum(1 for a in window if a.status == OnboardingStatus.DECLINED),
            )
        )

    summaries = [_summarise(metric, field, points) for metric, field in WEEKLY_TREND_METRICS]
    return WeeklyTrends(weeks=points, summaries=summaries)
