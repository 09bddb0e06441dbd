"""
Applicant Filter Implementation.

Narrows a snapshot before analytics or listing:
    - Date range preset on applied date (7d, 30d, 90d, all)
    - Country (exact match)
    - Pipeline stage (reached or passed the stage)
    - Status set (current status in the set)
    - Location ("City, Region")
    - Free-text search over name, email and city
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Dict, FrozenSet, Iterable, List, Literal, Optional, Protocol

from pydantic import BaseModel, Field, field_validator

from onboarding_pipeline.domain.entities import Applicant, OnboardingStatus
from onboarding_pipeline.pipeline.transitions import stage_index

logger = logging.getLogger(__name__)

DateRangePreset = Literal["7d", "30d", "90d", "all"]

PRESET_DAYS: Dict[str, Optional[int]] = {
    "7d": 7,
    "30d": 30,
    "90d": 90,
    "all": None,
}


class ApplicantFilter(Protocol):
    """A single filter stage."""

    @property
    def name(self) -> str:
        ...

    def apply(self, applicants: List[Applicant], today: date) -> List[Applicant]:
        ...


class FilterCriteria(BaseModel):
    """Active filter selection. Unset criteria do not filter."""

    date_range: DateRangePreset = "all"
    country: Optional[str] = None
    stage: Optional[OnboardingStatus] = None
    statuses: FrozenSet[OnboardingStatus] = Field(default_factory=frozenset)
    location: Optional[str] = Field(
        default=None, description='Location label, e.g. "Toronto, ON"'
    )
    search: Optional[str] = None

    model_config = {"frozen": True}

    @field_validator("stage")
    @classmethod
    def _stage_in_pipeline(
        cls, value: Optional[OnboardingStatus]
    ) -> Optional[OnboardingStatus]:
        if value is not None and stage_index(value) < 0:
            raise ValueError(f"{value.value} is not a pipeline stage")
        return value

    @field_validator("search")
    @classmethod
    def _strip_search(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None


class DateRangeFilter:
    """Keep applicants who applied within the preset window."""

    name = "date_range"

    def __init__(self, preset: DateRangePreset = "all") -> None:
        if preset not in PRESET_DAYS:
            raise ValueError(f"Unknown date range preset: {preset!r}")
        self.preset = preset

    def start_date(self, today: date) -> Optional[date]:
        """Earliest applied date kept (inclusive), None for no bound."""
        days = PRESET_DAYS[self.preset]
        if days is None:
            return None
        return today - timedelta(days=days)

    def apply(self, applicants: List[Applicant], today: date) -> List[Applicant]:
        start = self.start_date(today)
        if start is None:
            return list(applicants)
        return [a for a in applicants if start <= a.applied_date <= today]


class CountryFilter:
    """Keep applicants located in one country."""

    name = "country"

    def __init__(self, country: str) -> None:
        self.country = country

    def apply(self, applicants: List[Applicant], today: date) -> List[Applicant]:
        return [a for a in applicants if a.location.country == self.country]


class StageFilter:
    """Keep applicants who reached or passed a pipeline stage."""

    name = "stage"

    def __init__(self, stage: OnboardingStatus) -> None:
        self.stage = stage
        self._index = stage_index(stage)

    def apply(self, applicants: List[Applicant], today: date) -> List[Applicant]:
        return [a for a in applicants if stage_index(a.status) >= self._index]


class StatusFilter:
    """Keep applicants whose current status is in a set."""

    name = "statuses"

    def __init__(self, statuses: Iterable[OnboardingStatus]) -> None:
        self.statuses = frozenset(statuses)

    def apply(self, applicants: List[Applicant], today: date) -> List[Applicant]:
        return [a for a in applicants if a.status in self.statuses]


class LocationFilter:
    """Keep applicants whose "City, Region" label matches exactly."""

    name = "location"

    def __init__(self, label: str) -> None:
        self.label = label

    def apply(self, applicants: List[Applicant], today: date) -> List[Applicant]:
        return [a for a in applicants if a.location.label == self.label]


class SearchFilter:
    """Case-insensitive substring search over name, email and city."""

    name = "search"

    def __init__(self, query: str) -> None:
        self.query = query.lower()

    def _matches(self, applicant: Applicant) -> bool:
        return (
            self.query in applicant.name.lower()
            or self.query in applicant.email.lower()
            or self.query in applicant.location.city.lower()
        )

    def apply(self, applicants: List[Applicant], today: date) -> List[Applicant]:
        return [a for a in applicants if self._matches(a)]


def build_filters(criteria: FilterCriteria) -> List[ApplicantFilter]:
    """Instantiate the filter stages for the set criteria, in fixed order."""
    stages: List[ApplicantFilter] = []

    if criteria.date_range != "all":
        stages.append(DateRangeFilter(criteria.date_range))
    if criteria.country:
        stages.append(CountryFilter(criteria.country))
    if criteria.stage is not None:
        stages.append(StageFilter(criteria.stage))
    if criteria.statuses:
        stages.append(StatusFilter(criteria.statuses))
    if criteria.location:
        stages.append(LocationFilter(criteria.location))
    if criteria.search:
        stages.append(SearchFilter(criteria.search))

    return stages


def apply_filters(
    applicants: Iterable[Applicant],
    criteria: Optional[FilterCriteria],
    today: date,
) -> List[Applicant]:
    """
    Run every set criterion over the applicants.

    Args:
        applicants: Snapshot or any iterable of applicants
        criteria: Filter selection (None keeps everything)
        today: Reference date for the date range preset

    Returns:
        Applicants passing every filter, in input order
    """
    remaining = list(applicants)
    if criteria is None:
        return remaining

    for stage in build_filters(criteria):
        before = len(remaining)
        remaining = stage.apply(remaining, today)
        logger.debug(f"Filter {stage.name}: {before} -> {len(remaining)}")

    return remaining
