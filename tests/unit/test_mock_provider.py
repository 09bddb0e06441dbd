"""
Unit Tests for MockApplicantProvider.

Test Aspects Covered:
    ✅ Business Logic: Status mix, status-specific fields
    ✅ Determinism: Same seed, same data
    ✅ Invariants: Unique ids, date ordering, lookback window
"""

from __future__ import annotations

from collections import Counter
from datetime import date, timedelta

import pytest

from onboarding_pipeline.adapters.mock_provider import MockApplicantProvider
from onboarding_pipeline.config.models import DEFAULT_STATUS_DISTRIBUTION, MockDataConfig
from onboarding_pipeline.domain.entities import OnboardingStatus

S = OnboardingStatus


class TestMockApplicantProvider:
    """Test generated data."""

    def test_default_distribution(self, mock_provider: MockApplicantProvider) -> None:
        """
        SCENARIO: Default provider
        EXPECTED: 300 applicants with the reference status mix
        """
        # Act
        applicants = mock_provider.get_applicants()

        # Assert
        assert len(applicants) == 300
        assert dict(Counter(a.status for a in applicants)) == DEFAULT_STATUS_DISTRIBUTION

    def test_ids_unique_and_sequential(self, mock_provider: MockApplicantProvider) -> None:
        ids = [a.id for a in mock_provider.get_applicants()]

        assert ids == [str(i) for i in range(1, 301)]

    def test_deterministic(self, reference_date: date) -> None:
        first = MockApplicantProvider(seed=7, reference_date=reference_date).get_applicants()
        second = MockApplicantProvider(seed=7, reference_date=reference_date).get_applicants()
        other = MockApplicantProvider(seed=8, reference_date=reference_date).get_applicants()

        assert first == second
        assert first != other

    def test_dates(self, mock_provider: MockApplicantProvider, reference_date: date) -> None:
        """
        SCENARIO: Every generated applicant
        EXPECTED: applied within 45 days; applied <= changed <= today;
                  Applied records changed on their applied date
        """
        earliest = reference_date - timedelta(days=44)

        for a in mock_provider.get_applicants():
            assert earliest <= a.applied_date <= reference_date
            assert a.applied_date <= a.last_status_change_date <= reference_date
            if a.status == S.APPLIED:
                assert a.last_status_change_date == a.applied_date

    def test_status_specific_fields(self, mock_provider: MockApplicantProvider) -> None:
        for a in mock_provider.get_applicants():
            if a.status == S.INTERVIEW_SCHEDULED:
                assert a.interview_time
            if a.status in (S.INVITED_TO_TRAINING, S.IN_TRAINING):
                assert a.training_session
            if a.status == S.DECLINED:
                assert a.notes
            if a.rating is not None:
                assert 1.0 <= a.rating <= 5.0

    def test_returns_copies(self, mock_provider: MockApplicantProvider) -> None:
        first = mock_provider.get_applicants()
        first.clear()

        assert len(mock_provider.get_applicants()) == 300

    @pytest.mark.parametrize("count", [0, 1, 50, 1000])
    def test_scaled_counts(self, count: int, reference_date: date) -> None:
        """
        SCENARIO: Counts other than 300
        EXPECTED: Exactly `count` applicants; Go Live stays the largest group
        """
        provider = MockApplicantProvider(count=count, reference_date=reference_date)

        applicants = provider.get_applicants()

        assert len(applicants) == count
        if count >= 50:
            counts = Counter(a.status for a in applicants)
            assert counts.most_common(1)[0][0] == S.GO_LIVE

    def test_config_overrides_arguments(self, reference_date: date) -> None:
        config = MockDataConfig(count=20, seed=3, status_distribution={S.DECLINED: 1})

        applicants = MockApplicantProvider(
            seed=99, count=5, reference_date=reference_date, config=config
        ).get_applicants()

        assert len(applicants) == 20
        assert {a.status for a in applicants} == {S.DECLINED}
