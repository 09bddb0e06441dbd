"""
Integration Tests for the Onboarding Flow.

Tests cover:
    - Mock data -> state manager -> analytics report
    - Reports reflecting transitions through snapshots
    - Audit trail across a full applicant journey
    - Configuration loaded from YAML driving every component
"""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from onboarding_pipeline.adapters.console_logger import ConsoleAuditLogger
from onboarding_pipeline.adapters.mock_provider import MockApplicantProvider
from onboarding_pipeline.analytics.aggregator import AnalyticsAggregator
from onboarding_pipeline.config.loader import load_config
from onboarding_pipeline.config.models import OnboardingConfig
from onboarding_pipeline.domain.entities import OnboardingStatus
from onboarding_pipeline.domain.errors import InvalidTransition
from onboarding_pipeline.filters.applicant_filters import FilterCriteria
from onboarding_pipeline.observability.observability_manager import ObservabilityManager
from onboarding_pipeline.pipeline.state_manager import PipelineStateManager

S = OnboardingStatus


@pytest.fixture
def session(default_config: OnboardingConfig, observability: ObservabilityManager):
    """Manager and aggregator over the default 300 mock applicants."""
    provider = MockApplicantProvider(
        config=default_config.mock_data,
        reference_date=default_config.global_settings.reference_date,
    )
    manager = PipelineStateManager(
        provider.get_applicants(),
        config=default_config,
        audit_logger=observability,
    )
    aggregator = AnalyticsAggregator(
        config=default_config,
        metrics_collector=observability,
        audit_logger=observability,
    )
    return manager, aggregator


class TestOnboardingFlow:
    """Integration tests across provider, manager and aggregator."""

    def test_report_over_mock_data(self, session) -> None:
        """
        SCENARIO: Analytics over the default mock collection
        EXPECTED: Funnel starts at the pipeline total; conversion matches
                  Go Live / non-declined
        """
        # Arrange
        manager, aggregator = session

        # Act
        report = aggregator.build_report(manager.snapshot())

        # Assert
        assert report.applicant_count == 300
        assert report.snapshot_version == 0
        assert report.funnel[0].count == 300 - 40 - 3
        assert report.funnel[-1].count == 134
        assert report.conversion_rate == 52
        assert sum(b.count for b in report.geography.countries) == 300
        assert sum(b.count for b in report.time_to_hire.histogram) == 134
        assert len(report.recent_activity) == 6
        assert sum(w.applications for w in report.weekly_trends.weeks) == 300

    def test_transition_visible_in_next_report(self, session) -> None:
        """
        SCENARIO: Decline an Applied applicant between two reports
        EXPECTED: Old report untouched; new report shows one more decline
        """
        # Arrange
        manager, aggregator = session
        before = aggregator.build_report(manager.snapshot())
        applied_id = manager.snapshot().by_status(S.APPLIED)[0].id

        # Act
        manager.decline(applied_id, "Position filled")
        after = aggregator.build_report(manager.snapshot())

        # Assert
        assert after.snapshot_version == before.snapshot_version + 1
        assert after.funnel[0].count == before.funnel[0].count - 1
        assert after.conversion_rate >= before.conversion_rate
        assert after.kpis.active_pipeline == before.kpis.active_pipeline - 1
        assert manager.get(applied_id).last_status_change_date == date(2024, 12, 15)

    def test_full_applicant_journey(self, session, observability: ObservabilityManager) -> None:
        """
        SCENARIO: Applied -> ... -> Go Live with a review detour
        EXPECTED: Each step audited; terminal state rejects further advances
        """
        # Arrange
        manager, _ = session
        applicant_id = manager.snapshot().by_status(S.APPLIED)[0].id

        # Act
        manager.advance(applicant_id)
        manager.set_status(applicant_id, S.UNDER_REVIEW, notes="Reference check pending")
        manager.resume(applicant_id)
        manager.advance(applicant_id, interview_time="Friday, Aug 23 at 3:00 PM")
        manager.advance(applicant_id, training_session="CX Excellence Program: Sep 2-3")
        manager.advance(applicant_id)
        final = manager.advance(applicant_id)
        with pytest.raises(InvalidTransition):
            manager.advance(applicant_id)

        # Assert
        assert final.status == S.GO_LIVE
        assert final.interview_time == "Friday, Aug 23 at 3:00 PM"
        assert final.notes == "Reference check pending"
        assert [e.to_status for e in manager.history(applicant_id)] == [
            S.INVITED_TO_INTERVIEW,
            S.UNDER_REVIEW,
            S.INVITED_TO_INTERVIEW,
            S.INTERVIEW_SCHEDULED,
            S.INVITED_TO_TRAINING,
            S.IN_TRAINING,
            S.GO_LIVE,
        ]
        assert observability.event_counts()["transition"] == 7
        assert observability.event_counts()["transition_rejected"] == 1

    def test_filtered_report(self, session) -> None:
        """
        SCENARIO: Report restricted to Mexico and the last 7 days
        EXPECTED: Every counted applicant matches both criteria
        """
        # Arrange
        manager, aggregator = session
        criteria = FilterCriteria(country="Mexico", date_range="7d")

        # Act
        report = aggregator.build_report(manager.snapshot(), criteria)

        # Assert
        expected = [
            a
            for a in manager.snapshot()
            if a.location.country == "Mexico"
            and a.applied_date >= date(2024, 12, 8)
        ]
        assert report.applicant_count == len(expected)
        assert {b.name for b in report.geography.countries} <= {"Mexico"}


class TestConfiguredFlow:
    """Flow driven by the sample YAML configuration."""

    def test_sample_config(self, sample_config_path: Path, make_applicant) -> None:
        """
        SCENARIO: Sample config (50 mock applicants plus one under review, four aggregations, no
                  training-session requirement, resume to Invited to Interview)
        EXPECTED: Components honour each setting
        """
        # Arrange
        config = load_config(sample_config_path)
        provider = MockApplicantProvider(
            config=config.mock_data,
            reference_date=config.global_settings.reference_date,
        )
        manager = PipelineStateManager(
            provider.get_applicants() + [make_applicant(id="review", status=S.UNDER_REVIEW)],
            config=config,
            audit_logger=ConsoleAuditLogger(verbose=False),
        )
        aggregator = AnalyticsAggregator(config=config)
        interview_id = manager.snapshot().by_status(S.INTERVIEW_SCHEDULED)[0].id

        # Act
        trained = manager.advance(interview_id)
        resumed = manager.resume("review")
        report = aggregator.build_report(manager.snapshot())

        # Assert
        assert len(manager) == 51
        assert trained.status == S.INVITED_TO_TRAINING
        assert resumed.status == S.INVITED_TO_INTERVIEW
        assert set(report.timings) == {
            "funnel",
            "conversion_rate",
            "time_to_hire",
            "pipeline_health",
        }
        assert report.trend is None
        assert report.reference_date == date(2024, 12, 15)
