"""Unit tests for core logic.

Fast tests with no external dependencies; substitutes come from
demo_mocks.tests.fakes.
"""
