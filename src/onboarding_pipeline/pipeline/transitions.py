"""
Transition Table - Explicit Status Graph.

Statuses are connected by an explicit table rather than by index
arithmetic over the ordered stage list, so illegal moves can be
rejected (and tested) by a single membership check.

Graph:
    Applied -> Invited to Interview -> Interview Scheduled
            -> Invited to Training -> In Training -> Go Live

    Every non-terminal pipeline stage may also step back one stage, or
    branch to Declined or Under Review. Under Review may resume into any
    non-terminal pipeline stage. Go Live and Declined have no exits.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Optional, Tuple

from onboarding_pipeline.domain.entities import OnboardingStatus

PIPELINE_STAGES: Tuple[OnboardingStatus, ...] = (
    OnboardingStatus.APPLIED,
    OnboardingStatus.INVITED_TO_INTERVIEW,
    OnboardingStatus.INTERVIEW_SCHEDULED,
    OnboardingStatus.INVITED_TO_TRAINING,
    OnboardingStatus.IN_TRAINING,
    OnboardingStatus.GO_LIVE,
)

SIDE_STATES: FrozenSet[OnboardingStatus] = frozenset(
    {OnboardingStatus.DECLINED, OnboardingStatus.UNDER_REVIEW}
)

TERMINAL_STATES: FrozenSet[OnboardingStatus] = frozenset(
    {OnboardingStatus.GO_LIVE, OnboardingStatus.DECLINED}
)

# Pipeline stages an applicant can actively sit in (everything but Go Live)
ACTIVE_STAGES: Tuple[OnboardingStatus, ...] = PIPELINE_STAGES[:-1]


def _build_table() -> Dict[OnboardingStatus, FrozenSet[OnboardingStatus]]:
    table: Dict[OnboardingStatus, FrozenSet[OnboardingStatus]] = {}

    for index, stage in enumerate(ACTIVE_STAGES):
        allowed = {
            PIPELINE_STAGES[index + 1],
            OnboardingStatus.DECLINED,
            OnboardingStatus.UNDER_REVIEW,
        }
        if index > 0:
            allowed.add(PIPELINE_STAGES[index - 1])
        table[stage] = frozenset(allowed)

    table[OnboardingStatus.GO_LIVE] = frozenset()
    table[OnboardingStatus.DECLINED] = frozenset()
    table[OnboardingStatus.UNDER_REVIEW] = frozenset(ACTIVE_STAGES)
    return table


TRANSITIONS: Dict[OnboardingStatus, FrozenSet[OnboardingStatus]] = _build_table()


def can_transition(current: OnboardingStatus, target: OnboardingStatus) -> bool:
    """Check whether the table permits current -> target."""
    return target in TRANSITIONS.get(current, frozenset())


def is_pipeline_stage(status: OnboardingStatus) -> bool:
    return status in PIPELINE_STAGES


def stage_index(status: OnboardingStatus) -> int:
    """Position in the ordered pipeline, or -1 for side states."""
    try:
        return PIPELINE_STAGES.index(status)
    except ValueError:
        return -1


def next_stage(status: OnboardingStatus) -> Optional[OnboardingStatus]:
    """Following pipeline stage, or None at Go Live / outside the pipeline."""
    index = stage_index(status)
    if index < 0 or index + 1 >= len(PIPELINE_STAGES):
        return None
    return PIPELINE_STAGES[index + 1]


def previous_stage(status: OnboardingStatus) -> Optional[OnboardingStatus]:
    """Preceding pipeline stage, or None at Applied / outside the pipeline."""
    index = stage_index(status)
    if index <= 0:
        return None
    return PIPELINE_STAGES[index - 1]
