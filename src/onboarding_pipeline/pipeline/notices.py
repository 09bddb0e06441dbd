"""
User-Facing Notices for Transition Outcomes.

Every accepted transition yields a positive confirmation; every rejected
one yields a non-blocking notice. The presentation layer decides how to
show them (toast, banner, log line).
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

from onboarding_pipeline.domain.entities import Applicant, OnboardingStatus
from onboarding_pipeline.domain.errors import PipelineError


class NoticeLevel(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


class Notice(BaseModel):
    """Short message describing a transition outcome."""

    level: NoticeLevel
    title: str
    description: str

    model_config = {"frozen": True}


def transition_notice(applicant: Applicant, status: OnboardingStatus) -> Notice:
    """Build the confirmation shown after an applicant enters a status."""
    name = applicant.name

    if status == OnboardingStatus.INVITED_TO_INTERVIEW:
        title, description = (
            "Application Approved!",
            f"{name} has been approved and notified",
        )
    elif status == OnboardingStatus.INTERVIEW_SCHEDULED:
        title, description = (
            "Interview Scheduled!",
            f"Interview time selected for {name}",
        )
    elif status in (
        OnboardingStatus.INVITED_TO_TRAINING,
        OnboardingStatus.IN_TRAINING,
    ) and applicant.training_session:
        title, description = (
            "Training Session Booked!",
            f"{name} has selected their training session",
        )
    elif status == OnboardingStatus.DECLINED:
        title, description = (
            "Application Declined",
            f"{name}'s application has been declined",
        )
    else:
        title, description = (
            "Status Updated",
            f'{name} has been moved to "{status.value}"',
        )

    return Notice(level=NoticeLevel.SUCCESS, title=title, description=description)


def rejection_notice(action: str, error: PipelineError) -> Notice:
    """Build the notice shown when a transition is rejected."""
    return Notice(
        level=NoticeLevel.ERROR,
        title=f"Could not {action.replace('_', ' ')}",
        description=error.message,
    )
