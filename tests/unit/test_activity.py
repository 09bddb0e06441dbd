"""
Unit Tests for Recent Activity and KPI Summary.

Test Aspects Covered:
    ✅ Business Logic: Activity feed ordering, KPI numbers, sparkline
    ✅ Edge Cases: Empty input, no applications last week
"""

from __future__ import annotations

from datetime import date

import pytest

from onboarding_pipeline.analytics.activity import (
    daily_applications,
    kpi_summary,
    recent_activity,
    time_ago,
)
from onboarding_pipeline.domain.entities import OnboardingStatus

S = OnboardingStatus


class TestRecentActivity:
    """Test recent_activity()."""

    @pytest.mark.parametrize(
        "changed_on,label",
        [(date(2024, 12, 15), "Today"), (date(2024, 12, 14), "1 day ago"),
         (date(2024, 12, 10), "5 days ago")],
    )
    def test_time_ago(self, changed_on: date, label: str, reference_date: date) -> None:
        assert time_ago(changed_on, reference_date) == label

    def test_newest_first_with_limit(self, make_applicant, reference_date: date) -> None:
        """
        SCENARIO: Four applicants, limit 3, two changed on the same day
        EXPECTED: Newest first; same-day changes keep input order
        """
        # Arrange
        applicants = [
            make_applicant(id="old", changed_days_ago=9),
            make_applicant(id="a", changed_days_ago=1),
            make_applicant(id="b", changed_days_ago=1),
            make_applicant(id="new", changed_days_ago=0),
        ]

        # Act
        feed = recent_activity(applicants, reference_date, limit=3)

        # Assert
        assert [item.applicant_id for item in feed] == ["new", "a", "b"]
        assert feed[0].time_ago == "Today"

    def test_empty(self, reference_date: date) -> None:
        assert recent_activity([], reference_date) == []


class TestKPISummary:
    """Test kpi_summary()."""

    def test_sparkline(self, make_applicant, reference_date: date) -> None:
        applicants = [make_applicant(days_ago=0), make_applicant(days_ago=0), make_applicant(days_ago=6)]

        assert daily_applications(applicants, reference_date) == [1, 0, 0, 0, 0, 0, 2]

    def test_kpis(self, make_applicant, reference_date: date) -> None:
        """
        SCENARIO: 3 this week, 2 last week, one Go Live after 10 days, one Declined
        EXPECTED: Active pipeline excludes Go Live and Declined; +50% weekly change
        """
        # Arrange
        applicants = [
            make_applicant(days_ago=1),
            make_applicant(days_ago=2, status=S.UNDER_REVIEW),
            make_applicant(days_ago=3, status=S.DECLINED),
            make_applicant(days_ago=8),
            make_applicant(days_ago=12, changed_days_ago=2, status=S.GO_LIVE),
        ]

        # Act
        kpis = kpi_summary(applicants, reference_date)

        # Assert
        assert kpis.total_applicants == 5
        assert kpis.active_pipeline == 3
        assert kpis.conversion_rate == 25
        assert (kpis.applications_this_week, kpis.applications_last_week) == (3, 2)
        assert kpis.weekly_change_percent == 50
        assert kpis.avg_time_to_hire == 10
        assert len(kpis.sparkline) == 7

    def test_no_applications_last_week(self, make_applicant, reference_date: date) -> None:
        kpis = kpi_summary([make_applicant(days_ago=0)], reference_date)

        assert kpis.weekly_change_percent == 0

    def test_empty(self, reference_date: date) -> None:
        kpis = kpi_summary([], reference_date)

        assert kpis.total_applicants == 0
        assert kpis.conversion_rate == 0
        assert kpis.sparkline == [0] * 7
