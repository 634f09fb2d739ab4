class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a roster or a referenced student does not exist."""


class AuthorizationError(DomainError):
    """Raised when an actor lacks permission for an operation."""
