"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

import random
from datetime import date, timedelta
from pathlib import Path
from typing import Callable, List, Optional

import pytest

from onboarding_pipeline.adapters.console_logger import ConsoleAuditLogger
from onboarding_pipeline.adapters.mock_provider import MockApplicantProvider
from onboarding_pipeline.config.models import GlobalConfig, OnboardingConfig
from onboarding_pipeline.domain.entities import Applicant, Location, OnboardingStatus
from onboarding_pipeline.observability.observability_manager import ObservabilityManager
from onboarding_pipeline.pipeline.state_manager import PipelineStateManager

# Sunday; "this week" is Dec 9-15, "last week" Dec 2-8
REFERENCE_DATE = date(2024, 12, 15)

ApplicantFactory = Callable[..., Applicant]


@pytest.fixture(autouse=True)
def set_random_seed():
    """Ensure all tests are deterministic."""
    random.seed(42)
    yield


@pytest.fixture
def sample_config_path() -> Path:
    """Path to sample configuration file."""
    return Path(__file__).parent / "fixtures" / "sample_config.yaml"


@pytest.fixture
def reference_date() -> date:
    """Standard 'today' for testing."""
    return REFERENCE_DATE


@pytest.fixture
def default_config() -> OnboardingConfig:
    """Default configuration with 'today' pinned to the reference date."""
    return OnboardingConfig(global_settings=GlobalConfig(reference_date=REFERENCE_DATE))


@pytest.fixture
def make_applicant() -> ApplicantFactory:
    """
    Factory for applicants.

    Defaults to an Applied applicant in Toronto who applied 10 days
    before the reference date. Any field can be overridden;
    `days_ago` / `changed_days_ago` set dates relative to the reference
    date, `city` / `country` set the location.
    """
    counter = {"next": 1}

    def _make(
        status: OnboardingStatus = OnboardingStatus.APPLIED,
        days_ago: int = 10,
        changed_days_ago: Optional[int] = None,
        city: str = "Toronto",
        region: str = "Ontario",
        country: str = "Canada",
        **overrides,
    ) -> Applicant:
        number = counter["next"]
        counter["next"] += 1
        applied = REFERENCE_DATE - timedelta(days=days_ago)
        changed = (
            REFERENCE_DATE - timedelta(days=changed_days_ago)
            if changed_days_ago is not None
            else applied
        )
        fields = {
            "id": str(number),
            "name": f"Applicant {number}",
            "email": f"applicant{number}@email.com",
            "job_title": "Customer Service Representative",
            "experience": "2 years customer support experience",
            "status": status,
            "applied_date": applied,
            "last_status_change_date": changed,
            "location": Location(city=city, region=region, country=country),
        }
        fields.update(overrides)
        return Applicant(**fields)

    return _make


@pytest.fixture
def pipeline_applicants(make_applicant: ApplicantFactory) -> List[Applicant]:
    """One applicant per status, ids "1".."8" in status order."""
    applicants = []
    for status in OnboardingStatus:
        extra = {}
        if status in (OnboardingStatus.INVITED_TO_TRAINING, OnboardingStatus.IN_TRAINING):
            extra["training_session"] = "CX Excellence Program: Sep 2-3"
        if status == OnboardingStatus.INTERVIEW_SCHEDULED:
            extra["interview_time"] = "Monday, Aug 19 at 10:00 AM"
        applicants.append(make_applicant(status=status, changed_days_ago=2, **extra))
    return applicants


@pytest.fixture
def console_logger() -> ConsoleAuditLogger:
    """Create console logger for testing."""
    return ConsoleAuditLogger(verbose=False)


@pytest.fixture
def observability(tmp_path: Path):
    """ObservabilityManager writing JSON lines to a temp file."""
    with open(tmp_path / "events.log", "w", encoding="utf-8") as stream:
        yield ObservabilityManager(use_json=True, output=stream)


@pytest.fixture
def manager(
    pipeline_applicants: List[Applicant],
    default_config: OnboardingConfig,
    observability: ObservabilityManager,
) -> PipelineStateManager:
    """State manager over pipeline_applicants with observability attached."""
    return PipelineStateManager(
        pipeline_applicants,
        config=default_config,
        audit_logger=observability,
    )


@pytest.fixture
def mock_provider() -> MockApplicantProvider:
    """Create mock provider for testing."""
    return MockApplicantProvider(seed=42, reference_date=REFERENCE_DATE)
