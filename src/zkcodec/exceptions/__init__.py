"""Custom exceptions for the storage codecs."""


class CodecError(ValueError):
    """Base exception for all codec errors."""
    pass


# Hex codec errors
class FormatError(CodecError):
    """Raised when a tagged hex string is missing its prefix or has an invalid body."""
    pass


# Persisted numeric errors
class PersistedValueError(CodecError):
    """Base exception for persisted numeric conversion errors."""
    pass


class MissingValueError(PersistedValueError):
    """Raised when a persisted numeric value is absent."""
    pass


class NonIntegralError(PersistedValueError):
    """Raised when a persisted decimal has a fractional part."""
    pass


class NegativeValueError(PersistedValueError):
    """Raised when a value cannot be represented as an unsigned integer."""
    pass


class ValueOutOfRangeError(PersistedValueError):
    """Raised when a persisted decimal has more digits than a NUMERIC column holds."""
    pass
