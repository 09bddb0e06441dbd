"""
Filters Package - Snapshot Filter Stages.

Each filter stage narrows a list of applicants and can be used on its
own or through apply_filters() with a FilterCriteria selection.

Filters:
    - DateRangeFilter: Applied date within a preset window
    - CountryFilter: Location country
    - StageFilter: Reached or passed a pipeline stage
    - StatusFilter: Current status in a set
    - LocationFilter: "City, Region" label
    - SearchFilter: Name / email / city substring

Design Principles:
    - Filters never mutate their input
    - Input order is preserved
"""

from onboarding_pipeline.filters.applicant_filters import (
    PRESET_DAYS,
    ApplicantFilter,
    CountryFilter,
    DateRangeFilter,
    FilterCriteria,
    LocationFilter,
    SearchFilter,
    StageFilter,
    StatusFilter,
    apply_filters,
    build_filters,
)

__all__ = [
    "PRESET_DAYS",
    "ApplicantFilter",
    "CountryFilter",
    "DateRangeFilter",
    "FilterCriteria",
    "LocationFilter",
    "SearchFilter",
    "StageFilter",
    "StatusFilter",
    "apply_filters",
    "build_filters",
]
