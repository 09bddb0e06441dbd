"""
Adapters Package - Infrastructure Implementations.

Concrete collaborators plugged into the core through its protocols.

Providers:
    - MockApplicantProvider: Deterministic fake applicants

Loggers:
    - ConsoleAuditLogger: Prints transition outcomes

Design Principles:
    - Adapters implement the protocols of the components they serve
    - Swappable via dependency injection
    - No business logic in adapters
"""

from onboarding_pipeline.adapters.mock_provider import MockApplicantProvider
from onboarding_pipeline.adapters.console_logger import ConsoleAuditLogger

__all__ = [
    "MockApplicantProvider",
    "ConsoleAuditLogger",
]
