"""
Pipeline State Manager - Sole Writer of Applicant Status.

The PipelineStateManager owns the canonical applicant collection and is
the only component allowed to change an applicant's status.

Guarantees:
    - Every transition is atomic: status, change date and extra fields
      are applied together or not at all
    - Writes replace the snapshot (copy-on-write); readers holding an
      older snapshot are never affected
    - Transitions are serialized by a single lock
"""

from __future__ import annotations

import logging
import threading
from datetime import date
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Protocol

from onboarding_pipeline.config.models import OnboardingConfig
from onboarding_pipeline.domain.entities import (
    Applicant,
    OnboardingStatus,
    TransitionEvent,
)
from onboarding_pipeline.domain.errors import (
    ApplicantNotFound,
    InvalidTransition,
    PipelineError,
)
from onboarding_pipeline.pipeline.notices import (
    Notice,
    rejection_notice,
    transition_notice,
)
from onboarding_pipeline.pipeline.snapshot import ApplicantSnapshot
from onboarding_pipeline.pipeline.transitions import (
    ACTIVE_STAGES,
    can_transition,
    next_stage,
    previous_stage,
)
from onboarding_pipeline.validation.transition_validator import TransitionValidator

logger = logging.getLogger(__name__)

TargetResolver = Callable[[Applicant], OnboardingStatus]
FieldBuilder = Callable[[Applicant], Mapping[str, Any]]


class AuditLoggerProtocol(Protocol):
    """Protocol for transition audit loggers."""

    def log_transition(self, event: TransitionEvent, notice: Notice) -> None:
        ...

    def log_rejection(
        self, applicant_id: Optional[str], action: str, notice: Notice
    ) -> None:
        ...


def _coerce_status(
    value: Any, applicant: Optional[Applicant] = None
) -> OnboardingStatus:
    """Turn a status or status string into an OnboardingStatus."""
    if isinstance(value, OnboardingStatus):
        return value
    try:
        return OnboardingStatus(value)
    except ValueError:
        raise InvalidTransition(
            f"Unknown status {value!r}",
            applicant_id=applicant.id if applicant else None,
            current_status=applicant.status if applicant else None,
            target_status=value,
        ) from None


class PipelineStateManager:
    """Owns the applicant collection and applies status transitions."""

    def __init__(
        self,
        applicants: Iterable[Applicant],
        config: Optional[OnboardingConfig] = None,
        audit_logger: Optional[AuditLoggerProtocol] = None,
        validator: Optional[TransitionValidator] = None,
        clock: Optional[Callable[[], date]] = None,
    ) -> None:
        """
        Initialize the manager with the initial collection.

        Args:
            applicants: Initial records (e.g. from MockApplicantProvider)
            config: Onboarding configuration
            audit_logger: Receives accepted/rejected transition notices
            validator: Field validator (defaults to one built from config)
            clock: Returns "today" (defaults to the configured reference
                   date, else the system date)

        Raises:
            ValueError: If applicant ids are not unique
        """
        self.config = config or OnboardingConfig()
        self.audit_logger = audit_logger
        self.validator = validator or TransitionValidator(self.config.pipeline)
        self._clock = clock or self._default_clock
        self._snapshot = ApplicantSnapshot(version=0, applicants=tuple(applicants))
        self._history: List[TransitionEvent] = []
        self._lock = threading.RLock()

        logger.debug(f"PipelineStateManager initialized with {len(self._snapshot)} applicants")

    def _default_clock(self) -> date:
        return self.config.global_settings.reference_date or date.today()

    # =========================================================================
    # Read access
    # =========================================================================

    def snapshot(self) -> ApplicantSnapshot:
        """Current immutable snapshot; re-read after every transition."""
        return self._snapshot

    @property
    def version(self) -> int:
        return self._snapshot.version

    def __len__(self) -> int:
        return len(self._snapshot)

    def get(self, applicant_id: str) -> Applicant:
        """
        Get an applicant by id.

        Raises:
            ApplicantNotFound: If the id is unknown
        """
        applicant = self._snapshot.get(applicant_id)
        if applicant is None:
            raise ApplicantNotFound(applicant_id)
        return applicant

    def history(self, applicant_id: Optional[str] = None) -> List[TransitionEvent]:
        """Transition log, oldest first, optionally for one applicant."""
        with self._lock:
            if applicant_id is None:
                return list(self._history)
            return [e for e in self._history if e.applicant_id == applicant_id]

    # =========================================================================
    # Transitions
    # =========================================================================

    def advance(
        self,
        applicant_id: str,
        *,
        interview_time: Optional[str] = None,
        training_session: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> Applicant:
        """
        Move an applicant to the next pipeline stage.

        Args:
            applicant_id: Applicant to move
            interview_time: Required when entering Interview Scheduled
            training_session: Required when entering Invited to Training
                              or In Training
            notes: Optional replacement notes

        Returns:
            The updated applicant

        Raises:
            ApplicantNotFound: Unknown id
            InvalidTransition: At Go Live or in a side state
            MissingRequiredField: Required slot not supplied
        """

        def resolve(current: Applicant) -> OnboardingStatus:
            target = next_stage(current.status)
            if target is None or not can_transition(current.status, target):
                raise InvalidTransition(
                    f"Cannot advance from {current.status.value!r}",
                    applicant_id=current.id,
                    current_status=current.status,
                    target_status=target,
                )
            return target

        fields = {
            "interview_time": interview_time,
            "training_session": training_session,
            "notes": notes,
        }
        return self._transition(
            "advance", applicant_id, resolve, lambda _: fields, check_required=True
        )

    def move_back(self, applicant_id: str) -> Applicant:
        """
        Move an applicant to the previous pipeline stage.

        Raises:
            ApplicantNotFound: Unknown id
            InvalidTransition: At Applied or outside the pipeline
        """

        def resolve(current: Applicant) -> OnboardingStatus:
            target = previous_stage(current.status)
            if target is None or not can_transition(current.status, target):
                raise InvalidTransition(
                    f"Cannot move back from {current.status.value!r}",
                    applicant_id=current.id,
                    current_status=current.status,
                    target_status=target,
                )
            return target

        return self._transition("move_back", applicant_id, resolve, lambda _: {})

    def set_status(
        self,
        applicant_id: str,
        target_status: Any,
        **extra_fields: Any,
    ) -> Applicant:
        """
        Jump directly to any status (trusted manager path).

        No transition-table check is made; only the id and the status
        value are validated. Extra fields (notes, interview_time,
        training_session, rating) are merged into the record.

        Raises:
            ApplicantNotFound: Unknown id
            InvalidTransition: target_status is not a known status
            ImmutableFieldError: An extra field may not be changed
        """
        return self._transition(
            "set_status",
            applicant_id,
            lambda current: _coerce_status(target_status, current),
            lambda _: extra_fields,
        )

    def decline(
        self,
        applicant_id: str,
        reason: Optional[str] = None,
        *,
        mark_as_fraud: bool = False,
    ) -> Applicant:
        """
        Decline an applicant, appending the reason to existing notes.

        Declining an already declined applicant is allowed; the status
        stays Declined and the notes keep accumulating.

        Args:
            applicant_id: Applicant to decline
            reason: Optional decline reason
            mark_as_fraud: Append the potential-fraud annotation

        Raises:
            ApplicantNotFound: Unknown id
        """
        pipeline_config = self.config.pipeline

        def compose(current: Applicant) -> Dict[str, Any]:
            parts = [current.notes] if current.notes else []
            if reason:
                parts.append(f"{pipeline_config.decline_reason_prefix}{reason}")
            if mark_as_fraud:
                parts.append(pipeline_config.fraud_note)
            return {"notes": "\n".join(parts) or None}

        return self._transition(
            "decline",
            applicant_id,
            lambda _: OnboardingStatus.DECLINED,
            compose,
        )

    def resume(
        self,
        applicant_id: str,
        target_status: Optional[Any] = None,
        **extra_fields: Any,
    ) -> Applicant:
        """
        Return an applicant from Under Review to the pipeline.

        The target is, in order: target_status if given; the stage held
        when the applicant was put under review; the configured
        default_resume_stage.

        Raises:
            ApplicantNotFound: Unknown id
            InvalidTransition: Not under review, or target not resumable
            MissingRequiredField: Target needs a slot the record lacks
        """

        def resolve(current: Applicant) -> OnboardingStatus:
            if current.status != OnboardingStatus.UNDER_REVIEW:
                raise InvalidTransition(
                    f"Cannot resume from {current.status.value!r}",
                    applicant_id=current.id,
                    current_status=current.status,
                )
            if target_status is not None:
                target = _coerce_status(target_status, current)
            else:
                target = (
                    self._stage_before_review(current.id)
                    or self.config.pipeline.default_resume_stage
                )
            if not can_transition(current.status, target):
                raise InvalidTransition(
                    f"Cannot resume into {target.value!r}",
                    applicant_id=current.id,
                    current_status=current.status,
                    target_status=target,
                )
            return target

        return self._transition(
            "resume",
            applicant_id,
            resolve,
            lambda _: extra_fields,
            check_required=True,
        )

    # =========================================================================
    # Internals
    # =========================================================================

    def _stage_before_review(self, applicant_id: str) -> Optional[OnboardingStatus]:
        """Stage the applicant left when last put under review."""
        for event in reversed(self._history):
            if (
                event.applicant_id == applicant_id
                and event.to_status == OnboardingStatus.UNDER_REVIEW
            ):
                return event.from_status if event.from_status in ACTIVE_STAGES else None
        return None

    def _transition(
        self,
        action: str,
        applicant_id: str,
        resolve_target: TargetResolver,
        build_fields: FieldBuilder,
        check_required: bool = False,
    ) -> Applicant:
        """Validate, build and commit one transition under the lock."""
        with self._lock:
            try:
                current = self.get(applicant_id)
                target = resolve_target(current)
                updates = self.validator.normalize_fields(
                    applicant_id, build_fields(current)
                )
                if check_required:
                    self.validator.check_required_fields(current, target, updates)
                updated = self._build_record(current, target, updates)
            except PipelineError as e:
                self._report_rejection(action, applicant_id, e)
                raise

            self._snapshot = self._snapshot.replace(updated)
            event = TransitionEvent(
                sequence=len(self._history) + 1,
                applicant_id=applicant_id,
                from_status=current.status,
                to_status=target,
                occurred_on=updated.last_status_change_date,
                action=action,
                note=updates.get("notes"),
            )
            self._history.append(event)

        logger.info(
            f"{applicant_id}: {current.status.value} -> {target.value} ({action})"
        )
        if self.audit_logger:
            # Already committed; audit failures are logged, not raised
            try:
                self.audit_logger.log_transition(event, transition_notice(updated, target))
            except Exception as e:
                logger.error(
                    f"Audit logger failed on transition {event.sequence} "
                    f"({applicant_id} -> {target.value}): {e}"
                )
        return updated

    def _build_record(
        self,
        current: Applicant,
        target: OnboardingStatus,
        updates: Mapping[str, Any],
    ) -> Applicant:
        """Create the post-transition record; the original is untouched."""
        changed_on = max(self._clock(), current.applied_date)
        data = current.model_dump()
        data.update(updates)
        data.update(
            status=target,
            last_status_change_date=changed_on,
            recently_changed=True,
        )
        return Applicant.model_validate(data)

    def _report_rejection(
        self, action: str, applicant_id: str, error: PipelineError
    ) -> None:
        logger.warning(f"Rejected {action} for {applicant_id}: {error.message}")
        if self.audit_logger:
            try:
                self.audit_logger.log_rejection(
                    applicant_id, action, rejection_notice(action, error)
                )
            except Exception as e:
                logger.error(f"Audit logger failed on rejected {action} for {applicant_id}: {e}")
