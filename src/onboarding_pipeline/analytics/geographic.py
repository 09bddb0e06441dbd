"""
Geographic Aggregations.

Rollups by country and by city, used to size and color map markers,
plus a per-country comparison of hiring outcomes.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, List, Mapping, Optional

from onboarding_pipeline.analytics.common import group_by
from onboarding_pipeline.analytics.funnel import conversion_rate
from onboarding_pipeline.analytics.time_to_hire import average_time_to_hire
from onboarding_pipeline.domain.entities import Applicant, OnboardingStatus
from onboarding_pipeline.domain.value_objects import (
    CountryComparison,
    GeoBucket,
    GeographicRollup,
)


def dominant_status(counts: Mapping[OnboardingStatus, int]) -> Optional[OnboardingStatus]:
    """
    Status with the highest count.

    Ties go to the status declared first in OnboardingStatus.
    """
    best: Optional[OnboardingStatus] = None
    for status in OnboardingStatus:
        count = counts.get(status, 0)
        if count > 0 and (best is None or count > counts[best]):
            best = status
    return best


def _bucket(name: str, members: List[Applicant], country: Optional[str] = None) -> GeoBucket:
    counts = Counter(a.status for a in members)
    return GeoBucket(
        name=name,
        count=len(members),
        status_counts={s: counts[s] for s in OnboardingStatus if counts[s]},
        dominant_status=dominant_status(counts),
        country=country,
    )


def _by_count(buckets: List[GeoBucket]) -> List[GeoBucket]:
    # sorted() is stable: equal counts keep first-seen order
    return sorted(buckets, key=lambda b: b.count, reverse=True)


def geographic_rollup(applicants: Iterable[Applicant]) -> GeographicRollup:
    """
    Count applicants per country and per city.

    Cities are keyed by (country, city) so that equally named cities in
    different countries stay apart.

    Returns:
        GeographicRollup with both lists sorted by count, descending
    """
    applicants = list(applicants)

    countries = [
        _bucket(country, members)
        for country, members in group_by(applicants, lambda a: a.location.country).items()
    ]
    cities = [
        _bucket(city, members, country=country)
        for (country, city), members in group_by(
            applicants, lambda a: (a.location.country, a.location.city)
        ).items()
    ]
    return GeographicRollup(countries=_by_count(countries), cities=_by_count(cities))


def regional_comparison(applicants: Iterable[Applicant]) -> List[CountryComparison]:
    """Total, Go Live, conversion and average time-to-hire per country."""
    rows = [
        CountryComparison(
            country=country,
            total=len(members),
            go_live=sum(1 for a in members if a.status == OnboardingStatus.GO_LIVE),
            conversion_rate=conversion_rate(members),
            avg_time_to_hire=average_time_to_hire(members),
        )
        for country, members in group_by(applicants, lambda a: a.location.country).items()
    ]
    return sorted(rows, key=lambda r: r.total, reverse=True)
