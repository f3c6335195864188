"""Unit tests for the expectation recorder."""
