"""Readers returning file contents as ``str``."""
