"""Evaluation helpers: prose fixtures, fuzzing and profiling."""
