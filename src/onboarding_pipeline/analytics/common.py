"""
Shared numeric and grouping helpers for the aggregations.

Rounding is half-up (half away from zero), and day counts are exact
calendar-day differences between dates.
"""

from __future__ import annotations

from collections import Counter
from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Dict, Hashable, Iterable, List, TypeVar, Union

from onboarding_pipeline.domain.entities import Applicant, OnboardingStatus

K = TypeVar("K", bound=Hashable)

Number = Union[int, float, Decimal]


def _to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # str() keeps the shortest repr, so 0.145 stays 0.145
    return Decimal(str(value))


def round_half_up(value: Number) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(_to_decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def round_one_decimal(value: Number) -> float:
    """Round to one decimal place, halves away from zero."""
    return float(_to_decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def percentage(part: int, whole: int) -> int:
    """Integer percentage of part in whole; 0 when whole is 0."""
    if whole <= 0:
        return 0
    return round_half_up(Decimal(part) * 100 / Decimal(whole))


def mean(values: List[Number]) -> Decimal:
    """Exact arithmetic mean; 0 for an empty list."""
    if not values:
        return Decimal(0)
    return sum((_to_decimal(v) for v in values), Decimal(0)) / len(values)


def days_between(start: date, end: date) -> int:
    """Whole calendar days from start to end."""
    return (end - start).days


def week_start(day: date) -> date:
    """Monday of the ISO week containing day."""
    return day - timedelta(days=day.weekday())


def count_by(applicants: Iterable[Applicant], key: Callable[[Applicant], K]) -> Dict[K, int]:
    """Count applicants per key, keys in first-seen order."""
    return dict(Counter(key(a) for a in applicants))


def group_by(
    applicants: Iterable[Applicant], key: Callable[[Applicant], K]
) -> Dict[K, List[Applicant]]:
    """Group applicants per key, keys in first-seen order."""
    groups: Dict[K, List[Applicant]] = {}
    for applicant in applicants:
        groups.setdefault(key(applicant), []).append(applicant)
    return groups


def count_status(applicants: Iterable[Applicant], status: OnboardingStatus) -> int:
    return sum(1 for a in applicants if a.status == status)
