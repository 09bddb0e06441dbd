"""
Validation Package - Transition Input Validation.

Validates the data attached to a status transition before the state
manager touches the collection.

Components:
    - TransitionValidator: mutable-field, value and required-slot checks
"""

from onboarding_pipeline.validation.transition_validator import (
    MUTABLE_FIELDS,
    TransitionValidator,
)

__all__ = [
    "MUTABLE_FIELDS",
    "TransitionValidator",
]
