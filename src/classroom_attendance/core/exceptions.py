class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced class, student or roster entry does not exist."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class StoreIOError(DomainError):
    """Raised when the document store fails (network, permission, quota).

    Never retried by the core; callers surface it to the user.
    """
