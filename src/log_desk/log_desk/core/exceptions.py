class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    reason = "invalid"


class InvalidTimeFormatError(ValidationError):
    """Edited login/logout time is not a 12-hour clock string."""

    reason = "time_format"


class InvalidDateError(ValidationError):
    """Record date is malformed or outside the editable range."""

    reason = "date_range"


class LogoutBeforeLoginError(ValidationError):
    reason = "logout_before_login"


class RecordNotFoundError(ValidationError):
    reason = "not_found"


class PersistenceError(DomainError):
    """Raised when the collection could not be written back to storage."""


class StorageError(Exception):
    """Raised by key-value storage backends on any read/write failure."""


class StorageQuotaExceededError(StorageError):
    """Raised when a write would exceed the backend's size quota."""
