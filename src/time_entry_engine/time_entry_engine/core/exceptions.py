class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidRangeError(ValidationError):
    """Raised when a shift ends at or before its start."""


class ParseError(ValidationError):
    """Raised when a numeric field cannot be parsed."""


class BatchUnitError(DomainError):
    """Base exception raised by batch units."""


class TransientIOError(BatchUnitError):
    """Network failure, timeout, connection reset or a 5xx answer; safe to retry."""


class PermanentError(BatchUnitError):
    """Failure that will not go away by retrying."""
