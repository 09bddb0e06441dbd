"""
Applicant Profile Aggregations.

Who is in the pipeline rather than where they are in it: ratings,
certifications, experience bands and the roles applied for.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, List, Optional, Sequence

from onboarding_pipeline.analytics.common import (
    count_by,
    mean,
    percentage,
    round_half_up,
    round_one_decimal,
)
from onboarding_pipeline.domain.entities import Applicant
from onboarding_pipeline.domain.value_objects import (
    CategoryCount,
    CoverageLevel,
    RatingDistribution,
    SkillCoverage,
    StarCount,
)

KNOWN_CERTIFICATIONS = (
    "Driver License",
    "Background Check",
    "Vehicle Owner",
    "Food Safety",
    "First Aid",
    "Bilingual",
)

EXPERIENCE_CATEGORIES = (
    "No Experience",
    "< 1 Year",
    "1-2 Years",
    "3-4 Years",
    "5+ Years",
)


# =============================================================================
# Ratings
# =============================================================================


def rating_distribution(applicants: Iterable[Applicant]) -> RatingDistribution:
    """
    Star histogram of rated applicants, 5 stars first.

    A rating counts toward the star level it rounds to (half-up).
    Bar percentages are relative to the tallest bar; the average is
    over raw ratings, to one decimal.
    """
    ratings = [a.rating for a in applicants if a.rating is not None]
    stars = Counter(round_half_up(r) for r in ratings)
    tallest = max(stars.values(), default=0) or 1

    return RatingDistribution(
        distribution=[
            StarCount(stars=level, count=stars[level], percentage=percentage(stars[level], tallest))
            for level in range(5, 0, -1)
        ],
        average=round_one_decimal(mean(ratings)),
        total_rated=len(ratings),
    )


# =============================================================================
# Skills and certifications
# =============================================================================


def coverage_level(percent: int) -> CoverageLevel:
    if percent >= 70:
        return CoverageLevel.SUCCESS
    if percent >= 40:
        return CoverageLevel.WARNING
    return CoverageLevel.ERROR


def skills_breakdown(
    applicants: Iterable[Applicant],
    certifications: Sequence[str] = KNOWN_CERTIFICATIONS,
) -> List[SkillCoverage]:
    """
    Share of applicants holding each certification.

    The known certifications are always listed; any other certification
    found on a record is appended after them. Sorted by percentage,
    descending (stable).
    """
    applicants = list(applicants)
    held = Counter(c for a in applicants for c in dict.fromkeys(a.certifications))
    names = list(certifications) + [c for c in held if c not in certifications]

    rows = []
    for name in names:
        share = percentage(held[name], len(applicants))
        rows.append(
            SkillCoverage(name=name, count=held[name], percentage=share, level=coverage_level(share))
        )
    return sorted(rows, key=lambda r: r.percentage, reverse=True)


# =============================================================================
# Experience
# =============================================================================


def experience_category(experience: Optional[str]) -> str:
    """Map a free-text experience summary onto an experience band."""
    text = (experience or "").lower()

    if "no prior" in text or "new to" in text:
        return "No Experience"
    if "6 months" in text or ("1 year" in text and "2" not in text):
        return "< 1 Year"
    if "1 year" in text or "2 year" in text:
        return "1-2 Years"
    if "3 year" in text or "4 year" in text:
        return "3-4 Years"
    if "5 year" in text or "years" in text:
        return "5+ Years"
    return "No Experience"


def experience_breakdown(applicants: Iterable[Applicant]) -> List[CategoryCount]:
    """Count per experience band, bands in fixed order."""
    applicants = list(applicants)
    counts = Counter(experience_category(a.experience) for a in applicants)
    return [
        CategoryCount(name=name, count=counts[name], percentage=percentage(counts[name], len(applicants)))
        for name in EXPERIENCE_CATEGORIES
    ]


# =============================================================================
# Roles
# =============================================================================


def role_distribution(applicants: Iterable[Applicant]) -> List[CategoryCount]:
    """Applicants per job title, most common first."""
    applicants = list(applicants)
    counts = count_by(applicants, lambda a: a.job_title)
    rows = [
        CategoryCount(name=title, count=count, percentage=percentage(count, len(applicants)))
        for title, count in counts.items()
    ]
    return sorted(rows, key=lambda r: r.count, reverse=True)
