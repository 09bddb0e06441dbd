"""
Analytics Package - Read-Only Views of a Snapshot.

Every aggregation is a pure function over an iterable of applicants.
None of them mutates its input or raises for empty input.

Aggregations:
    - funnel_counts, conversion_rate: Pipeline volume
    - geographic_rollup, regional_comparison: Country / city views
    - application_trend, weekly_comparison, weekly_trends: Volume over time
    - time_to_hire, pipeline_health: Speed
    - rating_distribution, skills_breakdown, experience_breakdown,
      role_distribution: Applicant profile
    - kpi_summary, recent_activity: Dashboard headline

Orchestration:
    - AnalyticsAggregator: runs the enabled aggregations into an
      AnalyticsReport
"""

from onboarding_pipeline.analytics.common import percentage, round_half_up, week_start
from onboarding_pipeline.analytics.funnel import conversion_rate, funnel_counts
from onboarding_pipeline.analytics.geographic import (
    dominant_status,
    geographic_rollup,
    regional_comparison,
)
from onboarding_pipeline.analytics.trends import (
    application_trend,
    change_percent,
    overall_trend,
    weekly_comparison,
    weekly_trends,
)
from onboarding_pipeline.analytics.time_to_hire import (
    average_time_to_hire,
    bucket_label,
    hire_durations,
    time_to_hire,
)
from onboarding_pipeline.analytics.pipeline_health import classify_health, pipeline_health
from onboarding_pipeline.analytics.profile import (
    experience_breakdown,
    experience_category,
    rating_distribution,
    role_distribution,
    skills_breakdown,
)
from onboarding_pipeline.analytics.activity import kpi_summary, recent_activity, time_ago
from onboarding_pipeline.analytics.aggregator import AnalyticsAggregator

__all__ = [
    "percentage",
    "round_half_up",
    "week_start",
    "conversion_rate",
    "funnel_counts",
    "dominant_status",
    "geographic_rollup",
    "regional_comparison",
    "application_trend",
    "change_percent",
    "overall_trend",
    "weekly_comparison",
    "weekly_trends",
    "average_time_to_hire",
    "bucket_label",
    "hire_durations",
    "time_to_hire",
    "classify_health",
    "pipeline_health",
    "experience_breakdown",
    "experience_category",
    "rating_distribution",
    "role_distribution",
    "skills_breakdown",
    "kpi_summary",
    "recent_activity",
    "time_ago",
    "AnalyticsAggregator",
]
