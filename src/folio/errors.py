# ABOUTME: Exception hierarchy for the Folio storage layer.
# ABOUTME: Every failure surfaced to callers is a FolioError carrying a readable message.


class FolioError(Exception):
    """Base exception for all Folio errors."""


class NotFoundError(FolioError):
    """Raised when a title, id, or content file is absent from its store."""


class ConstraintViolationError(FolioError):
    """Raised when an insert collides with a uniqueness constraint."""


class StorageError(FolioError):
    """Raised when a database or filesystem operation fails mid-request."""


class StartupError(FolioError):
    """Raised when the library home or database cannot be prepared."""


class SchemaInitError(StartupError):
    """Raised when base tables cannot be created or a migration fails."""
