"""
Unit Tests for Transition Notices.

Test Aspects Covered:
    ✅ Business Logic: Title per target status
    ✅ Error Handling: Rejection notice carries the error message
"""

from __future__ import annotations

import pytest

from onboarding_pipeline.domain.entities import OnboardingStatus
from onboarding_pipeline.domain.errors import ApplicantNotFound
from onboarding_pipeline.pipeline.notices import NoticeLevel, rejection_notice, transition_notice


class TestTransitionNotice:
    """Test transition_notice()."""

    @pytest.mark.parametrize(
        "status,title",
        [
            (OnboardingStatus.INVITED_TO_INTERVIEW, "Application Approved!"),
            (OnboardingStatus.INTERVIEW_SCHEDULED, "Interview Scheduled!"),
            (OnboardingStatus.DECLINED, "Application Declined"),
            (OnboardingStatus.GO_LIVE, "Status Updated"),
            (OnboardingStatus.APPLIED, "Status Updated"),
        ],
    )
    def test_titles(self, make_applicant, status, title) -> None:
        notice = transition_notice(make_applicant(status=status), status)

        assert notice.title == title
        assert notice.level == NoticeLevel.SUCCESS

    def test_training_with_session(self, make_applicant) -> None:
        """
        SCENARIO: Entering training with a session on record
        EXPECTED: Booking confirmation
        """
        applicant = make_applicant(
            status=OnboardingStatus.INVITED_TO_TRAINING, training_session="Sep 2-3"
        )

        notice = transition_notice(applicant, OnboardingStatus.INVITED_TO_TRAINING)

        assert notice.title == "Training Session Booked!"

    def test_training_without_session(self, make_applicant) -> None:
        applicant = make_applicant(status=OnboardingStatus.IN_TRAINING, name="Dana Lee")

        notice = transition_notice(applicant, OnboardingStatus.IN_TRAINING)

        assert notice.title == "Status Updated"
        assert notice.description == 'Dana Lee has been moved to "In Training"'


class TestRejectionNotice:
    """Test rejection_notice()."""

    def test_rejection(self) -> None:
        notice = rejection_notice("move_back", ApplicantNotFound("42"))

        assert notice.level == NoticeLevel.ERROR
        assert notice.title == "Could not move back"
        assert notice.description == "Applicant '42' not found"
