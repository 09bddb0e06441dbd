"""
Onboarding Pipeline - Applicant State Model and Recruiting Analytics.

Tracks applicants through a fixed sequence of onboarding stages and
derives read-only analytics (funnels, geography, trends, conversion,
time-to-hire, stage health) from immutable snapshots of the applicant
collection.

Architecture:
    - Single owner of the applicant collection (PipelineStateManager)
    - Copy-on-write, versioned snapshots for readers
    - Explicit transition table instead of index arithmetic
    - Pure aggregation functions, orchestrated by AnalyticsAggregator
    - Configuration-driven behavior via YAML

Main Components:
    - domain: Applicant entity, statuses, errors, analytics value objects
    - pipeline: Transition table, snapshots, state manager, notices
    - validation: Pre-transition field checks
    - filters: Snapshot filter stages (date range, country, stage, search)
    - analytics: Aggregations and the aggregator
    - adapters: Mock applicant provider, console audit logger
    - observability: structlog-based events and metrics
    - config: Configuration models and loaders

Example:
    >>> from onboarding_pipeline.adapters import MockApplicantProvider
    >>> from onboarding_pipeline.analytics import AnalyticsAggregator
    >>> from onboarding_pipeline.domain import OnboardingStatus
    >>> from onboarding_pipeline.pipeline import PipelineStateManager
    >>> manager = PipelineStateManager(MockApplicantProvider(seed=7).get_applicants())
    >>> applied = manager.snapshot().by_status(OnboardingStatus.APPLIED)[0]
    >>> applicant = manager.advance(applied.id)
    >>> report = AnalyticsAggregator().build_report(manager.snapshot())

"""

import logging

__version__ = "0.4.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for the onboarding pipeline.

    Call this at application startup to see transition and aggregation
    log messages. By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import onboarding_pipeline
        >>> onboarding_pipeline.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("onboarding_pipeline").setLevel(level)
