"""Typed exceptions for alphabet configuration and name encoding."""


class NamingError(ValueError):
    """Base class for name generation errors."""


class AlphabetError(NamingError):
    """Raised when an alphabet is empty or contains invalid symbols."""


class IndexRangeError(NamingError):
    """Raised when an index or symbol offset is outside the supported range."""


class NameDecodeError(NamingError):
    """Raised when a name cannot be mapped back to a sequence index."""
