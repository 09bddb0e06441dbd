"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from datetime import date
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from onboarding_pipeline.domain.entities import OnboardingStatus

# Order in which AnalyticsAggregator runs its aggregations
AGGREGATION_NAMES = [
    "funnel",
    "geography",
    "trend",
    "conversion_rate",
    "time_to_hire",
    "pipeline_health",
    "ratings",
    "skills",
    "experience",
    "roles",
    "regional",
    "weekly",
    "weekly_trends",
    "kpis",
    "recent_activity",
]

# 300-applicant status mix of the reference dataset
DEFAULT_STATUS_DISTRIBUTION: Dict[OnboardingStatus, int] = {
    OnboardingStatus.APPLIED: 59,
    OnboardingStatus.INVITED_TO_INTERVIEW: 27,
    OnboardingStatus.INTERVIEW_SCHEDULED: 21,
    OnboardingStatus.INVITED_TO_TRAINING: 11,
    OnboardingStatus.IN_TRAINING: 5,
    OnboardingStatus.GO_LIVE: 134,
    OnboardingStatus.DECLINED: 40,
    OnboardingStatus.UNDER_REVIEW: 3,
}

DEFAULT_EXPECTED_DAYS: Dict[OnboardingStatus, float] = {
    OnboardingStatus.APPLIED: 3,
    OnboardingStatus.INVITED_TO_INTERVIEW: 2,
    OnboardingStatus.INTERVIEW_SCHEDULED: 5,
    OnboardingStatus.INVITED_TO_TRAINING: 2,
    OnboardingStatus.IN_TRAINING: 7,
}


class GlobalConfig(BaseModel):
    """Global configuration settings."""

    timezone: str = Field(default="UTC")
    reference_date: Optional[date] = Field(
        default=None, description="Pin 'today' (None = system date)"
    )


class MockDataConfig(BaseModel):
    """Configuration for the mock applicant provider."""

    count: int = Field(default=300, ge=0)
    seed: int = 42
    lookback_days: int = Field(default=45, ge=1)
    status_change_window_days: int = Field(default=10, ge=1)
    rated_fraction: float = Field(default=0.6, ge=0, le=1)
    status_distribution: Dict[OnboardingStatus, int] = Field(
        default_factory=lambda: dict(DEFAULT_STATUS_DISTRIBUTION)
    )

    @field_validator("status_distribution")
    @classmethod
    def _non_negative_weights(
        cls, value: Dict[OnboardingStatus, int]
    ) -> Dict[OnboardingStatus, int]:
        if any(weight < 0 for weight in value.values()):
            raise ValueError("status_distribution weights must be >= 0")
        return value


class PipelineConfig(BaseModel):
    """Configuration for status transitions."""

    require_interview_time: bool = True
    require_training_session: bool = True
    default_resume_stage: OnboardingStatus = OnboardingStatus.APPLIED
    decline_reason_prefix: str = "Decline Reason: "
    fraud_note: str = "Marked as potential fraud"

    @field_validator("default_resume_stage")
    @classmethod
    def _resume_into_pipeline(cls, value: OnboardingStatus) -> OnboardingStatus:
        if value in (
            OnboardingStatus.GO_LIVE,
            OnboardingStatus.DECLINED,
            OnboardingStatus.UNDER_REVIEW,
        ):
            raise ValueError(f"{value.value} is not a resumable stage")
        return value


class TimeToHireConfig(BaseModel):
    """Histogram bucket edges (inclusive upper bounds, in days)."""

    bucket_edges: List[int] = Field(default_factory=lambda: [7, 14, 21, 30])

    @field_validator("bucket_edges")
    @classmethod
    def _ascending_edges(cls, value: List[int]) -> List[int]:
        if not value:
            raise ValueError("bucket_edges must not be empty")
        if any(b <= a for a, b in zip(value, value[1:])) or value[0] < 0:
            raise ValueError("bucket_edges must be non-negative and ascending")
        return value


class PipelineHealthConfig(BaseModel):
    """Thresholds for stage health classification."""

    expected_days: Dict[OnboardingStatus, float] = Field(
        default_factory=lambda: dict(DEFAULT_EXPECTED_DAYS)
    )
    warning_multiplier: float = Field(default=1.5, gt=0)
    critical_multiplier: float = Field(default=2.0, gt=0)

    @model_validator(mode="after")
    def _ordered_multipliers(self) -> "PipelineHealthConfig":
        if self.critical_multiplier < self.warning_multiplier:
            raise ValueError("critical_multiplier must be >= warning_multiplier")
        if any(days <= 0 for days in self.expected_days.values()):
            raise ValueError("expected_days must be > 0")
        return self


class AnalyticsConfig(BaseModel):
    """Configuration for the analytics aggregator."""

    enabled: List[str] = Field(default_factory=lambda: list(AGGREGATION_NAMES))
    trend_granularity: Literal["day", "week"] = "week"
    recent_activity_limit: int = Field(default=6, ge=0)
    weekly_trend_weeks: int = Field(default=8, ge=1)
    time_to_hire: TimeToHireConfig = Field(default_factory=TimeToHireConfig)
    pipeline_health: PipelineHealthConfig = Field(
        default_factory=PipelineHealthConfig
    )

    @field_validator("enabled")
    @classmethod
    def _known_aggregations(cls, value: List[str]) -> List[str]:
        unknown = [name for name in value if name not in AGGREGATION_NAMES]
        if unknown:
            raise ValueError(f"Unknown aggregations: {unknown}")
        return value


class OnboardingConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    global_settings: GlobalConfig = Field(
        default_factory=GlobalConfig,
        alias="global",
    )
    mock_data: MockDataConfig = Field(default_factory=MockDataConfig)
    pipeline: PipelineConfig = Field(default_factory=PipelineConfig)
    analytics: AnalyticsConfig = Field(default_factory=AnalyticsConfig)

    model_config = {"populate_by_name": True}
