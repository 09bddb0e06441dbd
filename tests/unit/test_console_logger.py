"""
Unit Tests for ConsoleAuditLogger.

Test Aspects Covered:
    ✅ Output: Line format, correlation prefix
    ✅ Configuration: Quiet mode hides accepted transitions only
"""

from __future__ import annotations

from datetime import date

from onboarding_pipeline.adapters.console_logger import ConsoleAuditLogger
from onboarding_pipeline.domain.entities import OnboardingStatus, TransitionEvent
from onboarding_pipeline.domain.errors import ApplicantNotFound
from onboarding_pipeline.pipeline.notices import rejection_notice, transition_notice


def _event() -> TransitionEvent:
    return TransitionEvent(
        sequence=1,
        applicant_id="1",
        from_status=OnboardingStatus.IN_TRAINING,
        to_status=OnboardingStatus.GO_LIVE,
        occurred_on=date(2024, 12, 15),
        action="advance",
    )


class TestConsoleAuditLogger:
    """Test console output."""

    def test_transition_line(self, make_applicant, capsys) -> None:
        """
        SCENARIO: Verbose logger with a correlation id
        EXPECTED: One line with id prefix, level and status change
        """
        # Arrange
        logger = ConsoleAuditLogger()
        logger.set_correlation_id("abcdef123456")
        applicant = make_applicant(status=OnboardingStatus.GO_LIVE, name="Dana Lee")

        # Act
        logger.log_transition(_event(), transition_notice(applicant, OnboardingStatus.GO_LIVE))

        # Assert
        out = capsys.readouterr().out
        assert "[abcdef12]" in out
        assert "[INFO ]" in out
        assert 'Dana Lee has been moved to "Go Live"' in out
        assert "[In Training -> Go Live]" in out

    def test_quiet_mode(self, console_logger: ConsoleAuditLogger, make_applicant, capsys) -> None:
        """
        SCENARIO: verbose=False
        EXPECTED: Accepted transitions silent, rejections still printed
        """
        # Act
        console_logger.log_transition(
            _event(), transition_notice(make_applicant(), OnboardingStatus.GO_LIVE)
        )
        console_logger.log_rejection(
            "9", "decline", rejection_notice("decline", ApplicantNotFound("9"))
        )

        # Assert
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 1
        assert "[--------] [WARN ] Could not decline: Applicant '9' not found" in lines[0]

    def test_anomaly(self, console_logger: ConsoleAuditLogger, capsys) -> None:
        console_logger.log_anomaly("In Training is slow", severity="ERROR")

        assert "[ERROR] ANOMALY: In Training is slow" in capsys.readouterr().out
