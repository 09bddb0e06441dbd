"""
Console Audit Logger.

Prints transition outcomes as one line each, the way a dashboard toast
would show them.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from onboarding_pipeline.domain.entities import TransitionEvent
from onboarding_pipeline.pipeline.notices import Notice


class ConsoleAuditLogger:
    """Simple console-based audit logger."""

    def __init__(self, verbose: bool = True) -> None:
        """
        Initialize console logger.

        Args:
            verbose: If False, accepted transitions are not printed
        """
        self._verbose = verbose
        self._correlation_id: Optional[str] = None

    def set_correlation_id(self, correlation_id: str) -> None:
        self._correlation_id = correlation_id

    def log_transition(self, event: TransitionEvent, notice: Notice) -> None:
        """Print an accepted transition."""
        if self._verbose:
            self._log(
                "INFO",
                f"{notice.title} {notice.description} "
                f"[{event.from_status.value} -> {event.to_status.value}]",
            )

    def log_rejection(
        self, applicant_id: Optional[str], action: str, notice: Notice
    ) -> None:
        """Print a rejected transition."""
        self._log("WARN", f"{notice.title}: {notice.description}")

    def log_anomaly(
        self,
        message: str,
        severity: str = "WARNING",
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        self._log(severity, f"ANOMALY: {message}")

    def _log(self, level: str, message: str) -> None:
        timestamp = datetime.now().strftime("%H:%M:%S")
        corr_id = self._correlation_id[:8] if self._correlation_id else "--------"
        print(f"[{timestamp}] [{corr_id}] [{level:5}] {message}")
