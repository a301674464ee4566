class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when request data is missing or malformed."""


class DuplicateOperationError(DomainError):
    """Raised when a check-in already exists for the employee and day."""


class InvalidStateError(DomainError):
    """Raised when check-out is attempted without an open check-in for the day."""
