"""
Pipeline Package - Status Transitions and Snapshots.

Components:
    - TRANSITIONS: explicit status graph
    - ApplicantSnapshot: immutable, versioned collection view
    - PipelineStateManager: sole writer of applicant status
    - Notice: user-facing outcome of a transition
"""

from onboarding_pipeline.pipeline.transitions import (
    ACTIVE_STAGES,
    PIPELINE_STAGES,
    SIDE_STATES,
    TERMINAL_STATES,
    TRANSITIONS,
    can_transition,
    is_pipeline_stage,
    next_stage,
    previous_stage,
    stage_index,
)
from onboarding_pipeline.pipeline.snapshot import ApplicantSnapshot
from onboarding_pipeline.pipeline.notices import Notice, NoticeLevel
from onboarding_pipeline.pipeline.state_manager import (
    AuditLoggerProtocol,
    PipelineStateManager,
)

__all__ = [
    "ACTIVE_STAGES",
    "PIPELINE_STAGES",
    "SIDE_STATES",
    "TERMINAL_STATES",
    "TRANSITIONS",
    "can_transition",
    "is_pipeline_stage",
    "next_stage",
    "previous_stage",
    "stage_index",
    "ApplicantSnapshot",
    "Notice",
    "NoticeLevel",
    "AuditLoggerProtocol",
    "PipelineStateManager",
]
