"""Exception hierarchy for nativepath.

Decomposition, iteration and comparison never raise for missing
components; only the encoding boundary and converter configuration
produce errors.
"""


class PathError(Exception):
    """Base exception for nativepath errors."""


class EncodingError(PathError, ValueError):
    """Raised when text cannot be converted between native and encoded forms."""


class ConfigurationError(PathError):
    """Raised when the active converter cannot be constructed."""
