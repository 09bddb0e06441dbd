"""
Value Objects for Domain Layer.

Immutable results produced by the analytics aggregations. None of them
has identity; each describes a derived view of one applicant snapshot.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from onboarding_pipeline.domain.entities import OnboardingStatus


# =============================================================================
# Type Aliases for improved readability
# =============================================================================

# Applicant count per status
StatusCountsDict = Dict[OnboardingStatus, int]


class HealthLevel(str, Enum):
    """Health classification of a pipeline stage."""

    GOOD = "good"
    WARNING = "warning"
    CRITICAL = "critical"


class CoverageLevel(str, Enum):
    """How widely a certification is held across applicants."""

    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class FunnelStage(BaseModel):
    """Applicants that reached or passed a pipeline stage."""

    stage: OnboardingStatus
    count: int = Field(ge=0)
    percentage: int = Field(ge=0, description="Share of all applicants")

    model_config = {"frozen": True}


class GeoBucket(BaseModel):
    """Applicant count for one country or city."""

    name: str
    count: int = Field(ge=0)
    status_counts: StatusCountsDict = Field(default_factory=dict)
    dominant_status: Optional[OnboardingStatus] = None
    country: Optional[str] = Field(
        default=None, description="Owning country, set for city buckets"
    )

    model_config = {"frozen": True}


class GeographicRollup(BaseModel):
    """Country and city breakdown used to size map markers."""

    countries: List[GeoBucket] = Field(default_factory=list)
    cities: List[GeoBucket] = Field(default_factory=list)

    model_config = {"frozen": True}


class TrendPoint(BaseModel):
    """Applications received in one day or week."""

    period_start: date
    count: int = Field(ge=0)

    model_config = {"frozen": True}


class HistogramBucket(BaseModel):
    """Time-to-hire histogram bin, inclusive bounds in days."""

    label: str
    min_days: int = Field(ge=0)
    max_days: Optional[int] = Field(default=None, description="None = open-ended")
    count: int = Field(default=0, ge=0)

    model_config = {"frozen": True}

    def contains(self, days: int) -> bool:
        if days < self.min_days:
            return False
        return self.max_days is None or days <= self.max_days


class TimeToHireStats(BaseModel):
    """Summary statistics over time-to-hire durations."""

    median: int = 0
    p25: int = 0
    p75: int = 0
    average: int = 0
    sample_size: int = 0

    model_config = {"frozen": True}


class TimeToHireReport(BaseModel):
    """Time-to-hire histogram plus statistics."""

    histogram: List[HistogramBucket] = Field(default_factory=list)
    stats: TimeToHireStats = Field(default_factory=TimeToHireStats)

    model_config = {"frozen": True}


class StageHealth(BaseModel):
    """How long applicants are sitting in one stage."""

    stage: OnboardingStatus
    count: int = Field(ge=0)
    avg_days: float = Field(ge=0)
    expected_days: float = Field(gt=0)
    health: HealthLevel = HealthLevel.GOOD

    model_config = {"frozen": True}


class StarCount(BaseModel):
    """Applicants whose rating rounds to a star level."""

    stars: int = Field(ge=1, le=5)
    count: int = Field(ge=0)
    percentage: int = Field(ge=0, description="Relative to the largest bar")

    model_config = {"frozen": True}


class RatingDistribution(BaseModel):
    """Distribution of applicant ratings."""

    distribution: List[StarCount] = Field(default_factory=list)
    average: float = 0.0
    total_rated: int = 0

    model_config = {"frozen": True}


class SkillCoverage(BaseModel):
    """How many applicants hold a certification."""

    name: str
    count: int = Field(ge=0)
    percentage: int = Field(ge=0)
    level: CoverageLevel

    model_config = {"frozen": True}


class CategoryCount(BaseModel):
    """Count and share of one category (experience band, job title)."""

    name: str
    count: int = Field(ge=0)
    percentage: int = Field(ge=0)

    model_config = {"frozen": True}


class CountryComparison(BaseModel):
    """Per-country hiring outcome."""

    country: str
    total: int = Field(ge=0)
    go_live: int = Field(ge=0)
    conversion_rate: int = Field(ge=0)
    avg_time_to_hire: int = Field(ge=0)

    model_config = {"frozen": True}


class WeeklyMetric(BaseModel):
    """One metric compared between this week and last week."""

    metric: str
    this_week: int = Field(ge=0)
    last_week: int = Field(ge=0)
    change: int
    change_percent: int
    is_positive: bool

    model_config = {"frozen": True}


class WeekPoint(BaseModel):
    """Applications received in one trailing seven-day window, by outcome."""

    week_start: date
    week_end: date
    label: str = Field(description='"Now", "Last", or "Mon D" of week_start')
    applications: int = Field(ge=0)
    go_live: int = Field(ge=0)
    interviews: int = Field(ge=0)
    declined: int = Field(ge=0)

    model_config = {"frozen": True}


class WeeklyTrendSummary(BaseModel):
    """One metric summarised across the trailing weeks."""

    metric: str
    this_week: int = Field(ge=0)
    last_week: int = Field(ge=0)
    trend_percent: int
    total: int = Field(ge=0)
    average: int = Field(ge=0)
    peak: int = Field(ge=0)
    peak_week_start: date

    model_config = {"frozen": True}


class WeeklyTrends(BaseModel):
    """Trailing weekly series (oldest first) with per-metric summaries."""

    weeks: List[WeekPoint] = Field(default_factory=list)
    summaries: List[WeeklyTrendSummary] = Field(default_factory=list)

    model_config = {"frozen": True}


class KPISummary(BaseModel):
    """Headline numbers for the dashboard."""

    total_applicants: int = 0
    active_pipeline: int = 0
    conversion_rate: int = 0
    applications_this_week: int = 0
    applications_last_week: int = 0
    weekly_change_percent: int = 0
    avg_time_to_hire: int = 0
    sparkline: List[int] = Field(
        default_factory=list, description="Applications per day, last 7 days"
    )

    model_config = {"frozen": True}


class ActivityItem(BaseModel):
    """A recent status change for the activity feed."""

    applicant_id: str
    name: str
    status: OnboardingStatus
    changed_on: date
    time_ago: str

    model_config = {"frozen": True}


class AnalyticsReport(BaseModel):
    """Complete analytics run over one snapshot.

    Sections for disabled aggregations are left as None.
    """

    generated_at: datetime
    reference_date: date
    snapshot_version: Optional[int] = None
    applicant_count: int = 0
    funnel: Optional[List[FunnelStage]] = None
    geography: Optional[GeographicRollup] = None
    trend: Optional[List[TrendPoint]] = None
    conversion_rate: Optional[int] = None
    time_to_hire: Optional[TimeToHireReport] = None
    pipeline_health: Optional[List[StageHealth]] = None
    ratings: Optional[RatingDistribution] = None
    skills: Optional[List[SkillCoverage]] = None
    experience: Optional[List[CategoryCount]] = None
    roles: Optional[List[CategoryCount]] = None
    regional: Optional[List[CountryComparison]] = None
    weekly: Optional[List[WeeklyMetric]] = None
    weekly_trends: Optional[WeeklyTrends] = None
    kpis: Optional[KPISummary] = None
    recent_activity: Optional[List[ActivityItem]] = None
    timings: Dict[str, float] = Field(default_factory=dict)
    metadata: Dict[str, Any] = Field(default_factory=dict)
