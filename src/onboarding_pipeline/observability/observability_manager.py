"""
Observability Manager - Structured Events and Metrics.

Provides:
    - Structured logging via structlog (JSON or console rendering)
    - Session correlation ids propagated through a ContextVar
    - In-memory event and metric store for inspection and tests

Implements both the audit logger protocol of PipelineStateManager
(accepted / rejected transitions) and the metrics collector protocol of
AnalyticsAggregator (timings, counts, gauges).
"""

from __future__ import annotations

import logging
import threading
import uuid
from collections import Counter
from contextvars import ContextVar
from datetime import datetime
from typing import IO, Any, Dict, List, Optional

import structlog

from onboarding_pipeline.domain.entities import TransitionEvent
from onboarding_pipeline.pipeline.notices import Notice

_correlation_id: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


def get_correlation_id() -> Optional[str]:
    """Get current correlation ID from context."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set correlation ID in context."""
    _correlation_id.set(correlation_id)


class ObservabilityManager:
    """Structured event log plus metric store for one dashboard session."""

    def __init__(
        self,
        service_name: str = "onboarding_pipeline",
        use_json: bool = True,
        log_level: int = logging.INFO,
        output: Optional[IO[str]] = None,
    ) -> None:
        """
        Initialize observability manager.

        Args:
            service_name: Logger name bound to every entry
            use_json: Render JSON lines instead of console output
            log_level: Minimum level written
            output: Stream to write to (default: stdout)
        """
        self.service_name = service_name
        self.use_json = use_json
        self.log_level = log_level
        self._metrics: Dict[str, List[Dict[str, Any]]] = {}
        self._events: List[Dict[str, Any]] = []
        self._lock = threading.Lock()

        self._logger = structlog.wrap_logger(
            structlog.PrintLogger(file=output),
            processors=self._processors(),
            wrapper_class=structlog.make_filtering_bound_logger(log_level),
        ).bind(service=service_name)

    def _processors(self) -> List[Any]:
        processors: List[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
        ]
        if self.use_json:
            processors.append(structlog.processors.JSONRenderer())
        else:
            processors.append(structlog.dev.ConsoleRenderer(colors=False))
        return processors

    # =========================================================================
    # Correlation
    # =========================================================================

    def set_correlation_id(self, correlation_id: str) -> None:
        """Tag subsequent events with a session or request id."""
        set_correlation_id(correlation_id)
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=correlation_id)

    def generate_correlation_id(self) -> str:
        """Generate and set a new correlation ID."""
        correlation_id = str(uuid.uuid4())
        self.set_correlation_id(correlation_id)
        return correlation_id

    # =========================================================================
    # Events
    # =========================================================================

    def log_event(
        self,
        event_type: str,
        data: Optional[Dict[str, Any]] = None,
        level: str = "info",
    ) -> None:
        """
        Store and emit a structured event.

        Args:
            event_type: e.g. "transition", "transition_rejected"
            data: Event payload
            level: debug, info, warning or error
        """
        entry = {
            "event_type": event_type,
            "timestamp": datetime.now().isoformat(),
            "correlation_id": get_correlation_id(),
            **(data or {}),
        }
        with self._lock:
            self._events.append(entry)

        log_method = getattr(self._logger, level.lower(), self._logger.info)
        log_method(event_type, **{k: v for k, v in entry.items() if k != "timestamp"})

    def log_transition(self, event: TransitionEvent, notice: Notice) -> None:
        """Record an accepted transition (audit logger protocol)."""
        self.log_event(
            "transition",
            {
                "applicant_id": event.applicant_id,
                "action": event.action,
                "from_status": event.from_status.value,
                "to_status": event.to_status.value,
                "sequence": event.sequence,
                "notice": notice.title,
            },
        )
        self.record_count("transitions_total", 1, {"to_status": event.to_status.value})

    def log_rejection(
        self, applicant_id: Optional[str], action: str, notice: Notice
    ) -> None:
        """Record a rejected transition (audit logger protocol)."""
        self.log_event(
            "transition_rejected",
            {
                "applicant_id": applicant_id,
                "action": action,
                "reason": notice.description,
            },
            level="warning",
        )
        self.record_count("transitions_rejected_total", 1, {"action": action})

    def log_anomaly(
        self,
        message: str,
        severity: str = "WARNING",
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log a data anomaly (e.g. an unhealthy stage)."""
        level = "warning" if severity.upper() == "WARNING" else "error"
        self.log_event(
            "anomaly",
            {"message": message, "severity": severity, **(context or {})},
            level=level,
        )

    # =========================================================================
    # Metrics
    # =========================================================================

    def record_metric(
        self,
        name: str,
        value: float,
        tags: Optional[Dict[str, str]] = None,
        metric_type: str = "gauge",
    ) -> None:
        """Append a metric sample."""
        sample = {
            "timestamp": datetime.now().isoformat(),
            "value": value,
            "tags": tags or {},
            "type": metric_type,
            "correlation_id": get_correlation_id(),
        }
        with self._lock:
            self._metrics.setdefault(name, []).append(sample)

    def record_timing(
        self, name: str, duration_seconds: float, tags: Optional[Dict] = None
    ) -> None:
        self.record_metric(name, duration_seconds, tags, metric_type="histogram")

    def record_count(self, name: str, value: int, tags: Optional[Dict] = None) -> None:
        self.record_metric(name, float(value), tags, metric_type="counter")

    def record_gauge(self, name: str, value: float, tags: Optional[Dict] = None) -> None:
        self.record_metric(name, value, tags, metric_type="gauge")

    # =========================================================================
    # Inspection
    # =========================================================================

    def get_metrics(self) -> Dict[str, List[Dict[str, Any]]]:
        """Get all recorded metrics."""
        with self._lock:
            return {name: list(samples) for name, samples in self._metrics.items()}

    def get_events(self, event_type: Optional[str] = None) -> List[Dict[str, Any]]:
        """Get recorded events, optionally of one type."""
        with self._lock:
            if event_type is None:
                return list(self._events)
            return [e for e in self._events if e["event_type"] == event_type]

    def event_counts(self) -> Dict[str, int]:
        """Number of recorded events per type."""
        with self._lock:
            return dict(Counter(e["event_type"] for e in self._events))

    def clear(self) -> None:
        """Clear all recorded metrics and events."""
        with self._lock:
            self._metrics.clear()
            self._events.clear()
