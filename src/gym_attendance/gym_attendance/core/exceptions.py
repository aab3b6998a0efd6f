class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidStateError(ValidationError):
    """Raised when the current state forbids the action (frozen member, no open session, ...)."""


class CapacityExceededError(ValidationError):
    """Raised when the gym is at or above its configured capacity."""


class NotFoundError(DomainError):
    """Raised when a referenced entity cannot be resolved."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""
