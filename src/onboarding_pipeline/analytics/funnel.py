"""
Funnel and Conversion Aggregations.

The funnel is inferred from a single snapshot: an applicant "reached"
a stage when its current position in the ordered pipeline is at or
beyond that stage. Declined and Under Review applicants sit outside
the ordered list and are never counted.
"""

from __future__ import annotations

from typing import Iterable, List

from onboarding_pipeline.analytics.common import count_status, percentage
from onboarding_pipeline.domain.entities import Applicant, OnboardingStatus
from onboarding_pipeline.domain.value_objects import FunnelStage
from onboarding_pipeline.pipeline.transitions import PIPELINE_STAGES, stage_index


def funnel_counts(applicants: Iterable[Applicant]) -> List[FunnelStage]:
    """
    Reached-or-passed count for every pipeline stage.

    Args:
        applicants: Snapshot or filtered subset

    Returns:
        One FunnelStage per pipeline stage, in pipeline order. Counts are
        non-increasing along the list; percentages are shares of all
        input applicants, side states included.
    """
    positions = [stage_index(a.status) for a in applicants]
    total = len(positions)

    stages: List[FunnelStage] = []
    for index, stage in enumerate(PIPELINE_STAGES):
        reached = sum(1 for position in positions if position >= index)
        stages.append(
            FunnelStage(stage=stage, count=reached, percentage=percentage(reached, total))
        )
    return stages


def conversion_rate(applicants: Iterable[Applicant]) -> int:
    """
    Go Live share of all non-declined applicants, as a whole percent.

    Returns 0 when every applicant is declined or the input is empty.
    """
    applicants = list(applicants)
    go_live = count_status(applicants, OnboardingStatus.GO_LIVE)
    declined = count_status(applicants, OnboardingStatus.DECLINED)
    return percentage(go_live, len(applicants) - declined)
