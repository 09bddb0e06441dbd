"""
Unit Tests for TransitionValidator.

Test Aspects Covered:
    ✅ Business Logic: Field normalization, required slots
    ✅ Error Handling: Immutable fields, malformed values
    ✅ Configuration: Required-field switches
"""

from __future__ import annotations

import pytest

from onboarding_pipeline.config.models import PipelineConfig
from onboarding_pipeline.domain.entities import OnboardingStatus
from onboarding_pipeline.domain.errors import (
    ImmutableFieldError,
    InvalidFieldValue,
    MissingRequiredField,
)
from onboarding_pipeline.validation.transition_validator import TransitionValidator


@pytest.fixture
def validator() -> TransitionValidator:
    return TransitionValidator()


class TestNormalizeFields:
    """Test normalize_fields()."""

    def test_maps_camel_case_aliases(self, validator: TransitionValidator) -> None:
        """
        SCENARIO: interviewTime and trainingSession keys
        EXPECTED: Mapped to snake_case attribute names
        """
        # Act
        updates = validator.normalize_fields(
            "1", {"interviewTime": "Mon 9 AM", "trainingSession": "Sep 2-3"}
        )

        # Assert
        assert updates == {"interview_time": "Mon 9 AM", "training_session": "Sep 2-3"}

    def test_drops_none_values(self, validator: TransitionValidator) -> None:
        assert validator.normalize_fields("1", {"notes": None, "rating": 4}) == {"rating": 4.0}

    def test_empty_input(self, validator: TransitionValidator) -> None:
        assert validator.normalize_fields("1", None) == {}

    @pytest.mark.parametrize("field", ["name", "status", "applied_date", "id", "email"])
    def test_immutable_fields_rejected(self, validator: TransitionValidator, field: str) -> None:
        """
        SCENARIO: Caller tries to change an identity or status field
        EXPECTED: ImmutableFieldError naming the field
        """
        with pytest.raises(ImmutableFieldError) as exc_info:
            validator.normalize_fields("1", {field: "x"})

        assert exc_info.value.field == field
        assert exc_info.value.applicant_id == "1"

    @pytest.mark.parametrize("rating", [0, 5.5, -1, True, "4"])
    def test_bad_ratings(self, validator: TransitionValidator, rating) -> None:
        with pytest.raises(InvalidFieldValue):
            validator.normalize_fields("1", {"rating": rating})

    def test_text_field_must_be_text(self, validator: TransitionValidator) -> None:
        with pytest.raises(InvalidFieldValue):
            validator.normalize_fields("1", {"notes": 42})


class TestRequiredFields:
    """Test check_required_fields()."""

    def test_interview_time_required(self, validator: TransitionValidator, make_applicant) -> None:
        # Arrange
        applicant = make_applicant(status=OnboardingStatus.INVITED_TO_INTERVIEW)

        # Act & Assert
        with pytest.raises(MissingRequiredField) as exc_info:
            validator.check_required_fields(applicant, OnboardingStatus.INTERVIEW_SCHEDULED, {})

        assert exc_info.value.target_status == OnboardingStatus.INTERVIEW_SCHEDULED

    def test_update_satisfies_requirement(self, validator: TransitionValidator, make_applicant) -> None:
        applicant = make_applicant(status=OnboardingStatus.INVITED_TO_INTERVIEW)

        validator.check_required_fields(
            applicant, OnboardingStatus.INTERVIEW_SCHEDULED, {"interview_time": "Mon 9 AM"}
        )

    def test_retained_value_satisfies_requirement(
        self, validator: TransitionValidator, make_applicant
    ) -> None:
        """
        SCENARIO: Record already holds a training session
        EXPECTED: No error for In Training
        """
        applicant = make_applicant(
            status=OnboardingStatus.INVITED_TO_TRAINING, training_session="Sep 2-3"
        )

        validator.check_required_fields(applicant, OnboardingStatus.IN_TRAINING, {})

    def test_switch_disables_requirement(self, make_applicant) -> None:
        # Arrange
        validator = TransitionValidator(PipelineConfig(require_training_session=False))
        applicant = make_applicant(status=OnboardingStatus.INTERVIEW_SCHEDULED)

        # Act & Assert
        validator.check_required_fields(applicant, OnboardingStatus.INVITED_TO_TRAINING, {})
        assert validator.required_field_for(OnboardingStatus.IN_TRAINING) is None

    @pytest.mark.parametrize(
        "status",
        [
            OnboardingStatus.APPLIED,
            OnboardingStatus.INVITED_TO_INTERVIEW,
            OnboardingStatus.GO_LIVE,
            OnboardingStatus.DECLINED,
            OnboardingStatus.UNDER_REVIEW,
        ],
    )
    def test_statuses_without_slots(self, validator: TransitionValidator, status) -> None:
        assert validator.required_field_for(status) is None
