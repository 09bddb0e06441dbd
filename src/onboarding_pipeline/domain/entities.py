"""
Core Domain Entities.

This module defines the fundamental entities of the onboarding domain:
the closed set of onboarding statuses, the applicant record and the
transition events appended whenever an applicant changes status.
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class OnboardingStatus(str, Enum):
    """Onboarding status of an applicant.

    Declaration order is significant: it is the tie-break order for
    "dominant status" in geographic rollups.
    """

    APPLIED = "Applied"
    INVITED_TO_INTERVIEW = "Invited to Interview"
    INTERVIEW_SCHEDULED = "Interview Scheduled"
    INVITED_TO_TRAINING = "Invited to Training"
    IN_TRAINING = "In Training"
    GO_LIVE = "Go Live"
    DECLINED = "Declined"
    UNDER_REVIEW = "Under Review"


class Location(BaseModel):
    """Where an applicant is based."""

    city: str
    region: str
    country: str

    model_config = ConfigDict(frozen=True)

    @property
    def label(self) -> str:
        """City and region, as used by the location filter."""
        return f"{self.city}, {self.region}"


class Applicant(BaseModel):
    """A single candidate tracked through the onboarding pipeline."""

    id: str = Field(..., min_length=1, description="Stable unique identifier")
    name: str = Field(..., description="Full name")
    email: str = Field(..., description="Contact email")
    phone: Optional[str] = Field(default=None, description="Contact phone")
    job_title: str = Field(..., description="Role applied for")
    experience: Optional[str] = Field(
        default=None, description="Free-text experience summary"
    )
    status: OnboardingStatus = Field(default=OnboardingStatus.APPLIED)
    applied_date: date = Field(..., description="Date the application arrived")
    last_status_change_date: Optional[date] = Field(
        default=None, description="Date of the most recent status change"
    )
    interview_time: Optional[str] = Field(
        default=None, description="Chosen interview slot, kept as history"
    )
    training_session: Optional[str] = Field(
        default=None, description="Chosen training session, kept as history"
    )
    notes: Optional[str] = Field(default=None, description="Manager notes")
    rating: Optional[float] = Field(default=None, ge=1.0, le=5.0)
    location: Location
    certifications: Tuple[str, ...] = Field(
        default_factory=tuple, description="Held certifications and skills"
    )
    recently_changed: bool = Field(
        default=False, description="Transient UI highlight flag"
    )

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @model_validator(mode="after")
    def _check_dates(self) -> "Applicant":
        if self.last_status_change_date is None:
            # Frozen model: bypass the setattr guard for the default.
            object.__setattr__(self, "last_status_change_date", self.applied_date)
        elif self.last_status_change_date < self.applied_date:
            raise ValueError(
                f"last_status_change_date {self.last_status_change_date} "
                f"is before applied_date {self.applied_date}"
            )
        return self

    def days_since_change(self, today: date) -> int:
        """Whole calendar days between the last status change and today."""
        return (today - self.last_status_change_date).days


class TransitionEvent(BaseModel):
    """Append-only record of a single status change."""

    sequence: int = Field(..., ge=1)
    applicant_id: str
    from_status: OnboardingStatus
    to_status: OnboardingStatus
    occurred_on: date
    action: str = Field(..., description="Operation that caused the change")
    note: Optional[str] = None

    model_config = ConfigDict(frozen=True)
