"""Prose fixtures used by the property and performance tests."""
