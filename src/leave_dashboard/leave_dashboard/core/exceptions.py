class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidDate(ValidationError):
    """Raised when a value cannot be read as a calendar date."""
