class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class ConflictError(DomainError):
    """Raised when an operation would create a duplicate (open session, daily record)."""


class NotFoundError(DomainError):
    """Raised when the entity or record an operation needs does not exist."""


class DataIntegrityError(DomainError):
    """Raised when stored data is inconsistent, e.g. a check-out before its check-in."""


class StorageError(DomainError):
    """Raised when the underlying database call fails.

    The driver exception is chained as ``__cause__``.
    """
