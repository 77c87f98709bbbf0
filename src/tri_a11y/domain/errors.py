"""Domain errors — custom exceptions for the accessibility preference engine.

Caller mistakes (unknown fields, out-of-domain values) surface as
``A11yError`` subclasses.  Storage failures are raised by infrastructure
adapters and swallowed by the persistence bridge; none of them is ever
shown to the visitor.
"""


class A11yError(Exception):
    """Base exception for all accessibility preference errors."""


class InvalidPreferenceError(A11yError, ValueError):
    """Raised when a patch carries a value outside its field's domain."""


class UnknownPreferenceError(InvalidPreferenceError):
    """Raised when a patch names a field that PreferenceState does not have."""


class StorageError(A11yError):
    """Base class for client storage failures."""


class StorageUnavailableError(StorageError):
    """Raised when storage is disabled (e.g. private browsing)."""


class StorageQuotaExceededError(StorageError):
    """Raised when a write would exceed the storage quota."""
