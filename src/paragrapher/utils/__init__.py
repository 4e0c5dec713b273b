"""Shared helpers: typed exceptions and logger setup."""
