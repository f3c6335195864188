"""Test suite for demo_mocks.

Organized into:

1. core/: Unit tests for the service and its slots
2. testing/: Unit tests for the expectation recorder
3. fakes/: Test doubles installed into service slots
4. test_mocking_styles.py: The three mocking styles end to end
5. test_composition_root.py: Configuration, logging and entry point
"""
