"""
Integration Tests - End-to-End Onboarding Flows.

These tests verify that all components work together correctly.
Integration tests use the MockApplicantProvider so the full workflow
runs against the 300-applicant reference collection.

Test Files:
    - test_onboarding_flow.py: Transitions and reports over mock data
"""
