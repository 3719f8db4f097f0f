"""
Nikki exception hierarchy.

All nikki exceptions inherit from NikkiError, making it easy for consumers
to catch library-level errors while still distinguishing specific failure modes.

The analytics engines themselves never raise on malformed entry data; these are
reserved for misconfiguration and structurally invalid input documents.
"""


class NikkiError(Exception):
    """Base exception class for all nikki errors."""


class ConfigurationError(NikkiError):
    """Raised for configuration errors (missing keys, invalid values)."""


class DataProcessingError(NikkiError):
    """Raised when an input document does not have the expected shape."""
