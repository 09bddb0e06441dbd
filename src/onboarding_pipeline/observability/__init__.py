"""
Observability Package - Structured Events and Metrics.

    - ObservabilityManager: structlog-backed audit log and metric store

Design Principles:
    - Optional: the state manager and aggregator run without it
    - Correlation ID propagation through a ContextVar
"""

from onboarding_pipeline.observability.observability_manager import (
    ObservabilityManager,
    get_correlation_id,
    set_correlation_id,
)

__all__ = [
    "ObservabilityManager",
    "get_correlation_id",
    "set_correlation_id",
]
