"""
Domain Errors - Typed Failures of Status Transitions.

Every error is recoverable: the caller surfaces a notice and the
applicant collection is left exactly as it was.
"""

from __future__ import annotations

from typing import Optional

from onboarding_pipeline.domain.entities import OnboardingStatus


class PipelineError(Exception):
    """Base class for rejected pipeline operations."""

    def __init__(self, message: str, applicant_id: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.applicant_id = applicant_id


class ApplicantNotFound(PipelineError):
    """Raised when an applicant id is not in the collection."""

    def __init__(self, applicant_id: str) -> None:
        super().__init__(f"Applicant {applicant_id!r} not found", applicant_id)


class InvalidTransition(PipelineError):
    """Raised when a transition is not permitted from the current status."""

    def __init__(
        self,
        message: str,
        applicant_id: Optional[str] = None,
        current_status: Optional[OnboardingStatus] = None,
        target_status: Optional[object] = None,
    ) -> None:
        super().__init__(message, applicant_id)
        self.current_status = current_status
        self.target_status = target_status


class MissingRequiredField(PipelineError):
    """Raised when entering a status that needs supplementary data."""

    def __init__(
        self,
        field: str,
        target_status: OnboardingStatus,
        applicant_id: Optional[str] = None,
    ) -> None:
        super().__init__(
            f"{field} is required to enter {target_status.value!r}", applicant_id
        )
        self.field = field
        self.target_status = target_status


class ImmutableFieldError(PipelineError):
    """Raised when a transition tries to merge a field it may not change."""

    def __init__(self, field: str, applicant_id: Optional[str] = None) -> None:
        super().__init__(f"Field {field!r} cannot be changed", applicant_id)
        self.field = field


class InvalidFieldValue(PipelineError):
    """Raised when a merged field value fails validation."""

    def __init__(
        self, field: str, reason: str, applicant_id: Optional[str] = None
    ) -> None:
        super().__init__(f"Invalid value for {field!r}: {reason}", applicant_id)
        self.field = field
