"""
Domain Layer - Core Business Entities and Value Objects.

This package contains the core domain model of the onboarding pipeline.
All entities here are pure Python with no infrastructure dependencies
(except Pydantic for validation).

Entities:
    - OnboardingStatus: Closed set of onboarding states
    - Location: City / region / country of an applicant
    - Applicant: A candidate record
    - TransitionEvent: Append-only status change record

Value Objects:
    - FunnelStage, GeographicRollup, TrendPoint, WeeklyTrends: Volume views
    - TimeToHireReport, StageHealth: Speed views
    - RatingDistribution, SkillCoverage, CategoryCount: Profile views
    - AnalyticsReport: Everything derived from one snapshot

Errors:
    - PipelineError and subclasses raised for rejected transitions

Design Principles:
    - Immutable (frozen pydantic models)
    - Invariants checked at construction
    - No infrastructure dependencies
"""

from onboarding_pipeline.domain.entities import (
    Applicant,
    Location,
    OnboardingStatus,
    TransitionEvent,
)
from onboarding_pipeline.domain.errors import (
    ApplicantNotFound,
    ImmutableFieldError,
    InvalidFieldValue,
    InvalidTransition,
    MissingRequiredField,
    PipelineError,
)
from onboarding_pipeline.domain.value_objects import (
    ActivityItem,
    AnalyticsReport,
    CategoryCount,
    CountryComparison,
    CoverageLevel,
    FunnelStage,
    GeoBucket,
    GeographicRollup,
    HealthLevel,
    HistogramBucket,
    KPISummary,
    RatingDistribution,
    SkillCoverage,
    StageHealth,
    StarCount,
    TimeToHireReport,
    TimeToHireStats,
    TrendPoint,
    WeekPoint,
    WeeklyMetric,
    WeeklyTrendSummary,
    WeeklyTrends,
)

__all__ = [
    "Applicant",
    "Location",
    "OnboardingStatus",
    "TransitionEvent",
    "ApplicantNotFound",
    "ImmutableFieldError",
    "InvalidFieldValue",
    "InvalidTransition",
    "MissingRequiredField",
    "PipelineError",
    "ActivityItem",
    "AnalyticsReport",
    "CategoryCount",
    "CountryComparison",
    "CoverageLevel",
    "FunnelStage",
    "GeoBucket",
    "GeographicRollup",
    "HealthLevel",
    "HistogramBucket",
    "KPISummary",
    "RatingDistribution",
    "SkillCoverage",
    "StageHealth",
    "StarCount",
    "TimeToHireReport",
    "TimeToHireStats",
    "TrendPoint",
    "WeekPoint",
    "WeeklyMetric",
    "WeeklyTrendSummary",
    "WeeklyTrends",
]
