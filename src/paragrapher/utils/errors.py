"""Typed exceptions raised by the configuration and I/O layers.

The formatting core never raises for any input text.  These errors only come
from the collaborators around it.
"""


class ConfigError(ValueError):
    """Raised when a configuration file cannot be read as a YAML mapping."""


class IOFormatError(ValueError):
    """Base class for I/O format related errors."""


class UnsupportedFormatError(IOFormatError):
    """Raised when no reader or writer is registered for a file format."""
