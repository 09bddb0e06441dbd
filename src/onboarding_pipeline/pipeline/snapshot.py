"""
Applicant Snapshot - Immutable Point-in-Time Collection.

Readers (analytics, presentation) always work on a snapshot:
    - The applicant tuple never changes after creation
    - Every accepted transition produces a new snapshot with version + 1
    - Holding an old snapshot never observes a partial write

Design Notes:
    - Copy-on-write: only the changed record is rebuilt, others are shared
    - Lookup by id is O(1) via an index built once per snapshot
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterator, List, Optional, Tuple

from onboarding_pipeline.domain.entities import Applicant, OnboardingStatus


@dataclass(frozen=True)
class ApplicantSnapshot:
    """Immutable, versioned view of the applicant collection."""

    version: int
    applicants: Tuple[Applicant, ...]
    created_at: datetime = field(default_factory=datetime.now)
    _index: Dict[str, int] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )

    def __post_init__(self) -> None:
        index = {a.id: i for i, a in enumerate(self.applicants)}
        if len(index) != len(self.applicants):
            seen = Counter(a.id for a in self.applicants)
            duplicates = sorted(i for i, n in seen.items() if n > 1)
            raise ValueError(f"Duplicate applicant ids: {duplicates}")
        object.__setattr__(self, "_index", index)

    def __iter__(self) -> Iterator[Applicant]:
        return iter(self.applicants)

    def __len__(self) -> int:
        return len(self.applicants)

    def __contains__(self, applicant_id: object) -> bool:
        return applicant_id in self._index

    def get(self, applicant_id: str) -> Optional[Applicant]:
        """Get applicant by id, or None."""
        position = self._index.get(applicant_id)
        if position is None:
            return None
        return self.applicants[position]

    def replace(self, applicant: Applicant) -> "ApplicantSnapshot":
        """
        Build the next snapshot with one record swapped.

        Args:
            applicant: Updated record; its id must already exist

        Returns:
            New snapshot with version + 1

        Raises:
            KeyError: If the id is not part of this snapshot
        """
        position = self._index[applicant.id]
        applicants = list(self.applicants)
        applicants[position] = applicant
        return ApplicantSnapshot(
            version=self.version + 1,
            applicants=tuple(applicants),
        )

    def by_status(self, status: OnboardingStatus) -> List[Applicant]:
        """All applicants currently in a status."""
        return [a for a in self.applicants if a.status == status]

    def status_counts(self) -> Dict[OnboardingStatus, int]:
        """Applicant count per status (every status present, zero-filled)."""
        counts = Counter(a.status for a in self.applicants)
        return {status: counts.get(status, 0) for status in OnboardingStatus}

    @property
    def age_seconds(self) -> float:
        """Get snapshot age in seconds."""
        return (datetime.now() - self.created_at).total_seconds()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary in the presentation layer's field naming."""
        return {
            "version": self.version,
            "created_at": self.created_at.isoformat(),
            "applicants": [
                a.model_dump(mode="json", by_alias=True) for a in self.applicants
            ],
        }
