"""
Recent Activity and KPI Summary.
"""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal
from typing import Iterable, List

from onboarding_pipeline.analytics.common import days_between, round_half_up
from onboarding_pipeline.analytics.funnel import conversion_rate
from onboarding_pipeline.analytics.time_to_hire import average_time_to_hire
from onboarding_pipeline.analytics.trends import week_windows
from onboarding_pipeline.domain.entities import Applicant, OnboardingStatus
from onboarding_pipeline.domain.value_objects import ActivityItem, KPISummary

INACTIVE_STATUSES = frozenset({OnboardingStatus.GO_LIVE, OnboardingStatus.DECLINED})


def time_ago(changed_on: date, today: date) -> str:
    days = days_between(changed_on, today)
    if days <= 0:
        return "Today"
    if days == 1:
        return "1 day ago"
    return f"{days} days ago"


def recent_activity(
    applicants: Iterable[Applicant],
    today: date,
    limit: int = 6,
) -> List[ActivityItem]:
    """
    Most recent status changes, newest first.

    Applicants changed on the same day keep their input order.
    """
    ordered = sorted(applicants, key=lambda a: a.last_status_change_date, reverse=True)
    return [
        ActivityItem(
            applicant_id=a.id,
            name=a.name,
            status=a.status,
            changed_on=a.last_status_change_date,
            time_ago=time_ago(a.last_status_change_date, today),
        )
        for a in ordered[:limit]
    ]


def daily_applications(applicants: Iterable[Applicant], today: date, days: int = 7) -> List[int]:
    """Applications per day for the last `days` days, oldest first."""
    counts = [0] * days
    first = today - timedelta(days=days - 1)
    for applicant in applicants:
        offset = days_between(first, applicant.applied_date)
        if 0 <= offset < days:
            counts[offset] += 1
    return counts


def kpi_summary(applicants: Iterable[Applicant], today: date) -> KPISummary:
    """
    Headline numbers.

    Active pipeline counts everyone not yet live and not declined,
    Under Review included. The weekly change is 0 when last week had no
    applications.
    """
    applicants = list(applicants)
    (this_start, this_end), (last_start, last_end) = week_windows(today)
    this_week = sum(1 for a in applicants if this_start <= a.applied_date <= this_end)
    last_week = sum(1 for a in applicants if last_start <= a.applied_date <= last_end)

    weekly_change = 0
    if last_week:
        weekly_change = round_half_up(Decimal(this_week - last_week) * 100 / last_week)

    return KPISummary(
        total_applicants=len(applicants),
        active_pipeline=sum(1 for a in applicants if a.status not in INACTIVE_STATUSES),
        conversion_rate=conversion_rate(applicants),
        applications_this_week=this_week,
        applications_last_week=last_week,
        weekly_change_percent=weekly_change,
        avg_time_to_hire=average_time_to_hire(applicants),
        sparkline=daily_applications(applicants, today),
    )
