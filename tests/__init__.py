"""
Test Suite for Onboarding Pipeline.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: Provider -> state manager -> analytics flows
    - fixtures/: Sample configuration

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
"""
