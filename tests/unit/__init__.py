"""
Unit Tests - Testing Individual Components in Isolation.

Each component is tested in isolation with small hand-built applicant
collections from the make_applicant fixture.

Test Files:
    - test_transitions.py / test_state_manager.py: Status transitions
    - test_filters.py: Snapshot filter stages
    - test_funnel.py, test_time_to_hire.py, ...: Aggregations
    - test_config_loader.py: Configuration loading/validation
"""
