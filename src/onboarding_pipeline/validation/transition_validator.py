"""
Transition Validator - Check Field Updates Before a Transition.

Validates the supplementary data of a transition before any state is
touched:
    - Only manager-editable fields may be merged
    - Merged values are well-formed (rating range, text fields)
    - Stages that need an interview slot or training session get one

Design Notes:
    - Fail-fast principle: the first problem raises
    - camelCase keys from the presentation layer are accepted
    - A slot already retained on the record satisfies the requirement
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from onboarding_pipeline.config.models import PipelineConfig
from onboarding_pipeline.domain.entities import Applicant, OnboardingStatus
from onboarding_pipeline.domain.errors import (
    ImmutableFieldError,
    InvalidFieldValue,
    MissingRequiredField,
)

logger = logging.getLogger(__name__)

MUTABLE_FIELDS = frozenset({"notes", "interview_time", "training_session", "rating"})

FIELD_ALIASES = {
    "interviewTime": "interview_time",
    "trainingSession": "training_session",
}

TEXT_FIELDS = ("notes", "interview_time", "training_session")


class TransitionValidator:
    """
    Validates the extra fields attached to a status transition.

    Validates:
        - Field names are mutable
        - Field values are well-formed
        - Required slots are present for the target status
    """

    def __init__(self, config: Optional[PipelineConfig] = None) -> None:
        """
        Initialize transition validator.

        Args:
            config: Pipeline configuration (required-field switches)
        """
        self.config = config or PipelineConfig()

    def normalize_fields(
        self,
        applicant_id: str,
        fields: Optional[Mapping[str, Any]],
    ) -> Dict[str, Any]:
        """
        Map aliases to attribute names and validate each value.

        Args:
            applicant_id: Applicant being updated (for error context)
            fields: Extra fields supplied by the caller

        Returns:
            Field updates keyed by attribute name, None values dropped

        Raises:
            ImmutableFieldError: If a field may not be changed
            InvalidFieldValue: If a value is malformed
        """
        updates: Dict[str, Any] = {}

        for key, value in (fields or {}).items():
            name = FIELD_ALIASES.get(key, key)
            if name not in MUTABLE_FIELDS:
                logger.warning(
                    f"Rejected update of immutable field {key!r} on {applicant_id}"
                )
                raise ImmutableFieldError(key, applicant_id)
            if value is None:
                continue
            updates[name] = self._check_value(applicant_id, name, value)

        return updates

    def _check_value(self, applicant_id: str, name: str, value: Any) -> Any:
        """Validate a single field value."""
        if name in TEXT_FIELDS:
            if not isinstance(value, str):
                raise InvalidFieldValue(name, "expected text", applicant_id)
            return value

        # rating
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidFieldValue(name, "expected a number", applicant_id)
        if not 1.0 <= float(value) <= 5.0:
            raise InvalidFieldValue(
                name, f"{value} is outside 1.0-5.0", applicant_id
            )
        return float(value)

    def check_required_fields(
        self,
        applicant: Applicant,
        target: OnboardingStatus,
        updates: Mapping[str, Any],
    ) -> None:
        """
        Ensure a stage that needs a slot has one.

        Args:
            applicant: Current record
            target: Status being entered
            updates: Normalized field updates for this transition

        Raises:
            MissingRequiredField: If the slot is absent
        """
        required = self.required_field_for(target)
        if required is None:
            return

        if updates.get(required) or getattr(applicant, required):
            return

        logger.warning(
            f"Transition of {applicant.id} to {target.value!r} is missing {required}"
        )
        raise MissingRequiredField(required, target, applicant.id)

    def required_field_for(self, target: OnboardingStatus) -> Optional[str]:
        """Name of the field a status requires, if any."""
        if (
            target == OnboardingStatus.INTERVIEW_SCHEDULED
            and self.config.require_interview_time
        ):
            return "interview_time"
        if (
            target
            in (OnboardingStatus.INVITED_TO_TRAINING, OnboardingStatus.IN_TRAINING)
            and self.config.require_training_session
        ):
            return "training_session"
        return None
