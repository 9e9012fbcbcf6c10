class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or a precondition is missing."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class ExportError(DomainError):
    """Raised when the spreadsheet report could not be produced."""


class StorageError(DomainError):
    """Raised when a stored value cannot be read back."""


class NotFoundError(ValidationError):
    """Raised when the requested record does not exist."""
