"""Domain-level exceptions.

All catalog failures are expressed as subclasses of DomainException
so the CLI and the envelope layer can catch them uniformly and map
them to user-friendly messages.
"""

from __future__ import annotations

from dataclasses import dataclass


class DomainException(Exception):
    """Base class for all domain errors."""


@dataclass(frozen=True)
class FieldError:
    """A single rejected input field with a human-readable reason."""

    field: str
    message: str


class ValidationError(DomainException):
    """A business rule or invariant was violated.

    Carries every field-level failure found, not just the first one.
    """

    def __init__(self, message: str, errors: list[FieldError] | None = None) -> None:
        super().__init__(message)
        self.errors: list[FieldError] = list(errors or [])

    @classmethod
    def from_errors(cls, errors: list[FieldError]) -> ValidationError:
        summary = "; ".join(f"{e.field}: {e.message}" for e in errors)
        return cls(f"Validation failed ({summary})", errors)


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class AuthorizationError(DomainException):
    """The acting user is not allowed to perform an operation."""


# ---------------------------------------------------------------------------
# Storage errors
# ---------------------------------------------------------------------------


class StorageError(DomainException):
    """Base class for failures of the file-backed document store."""


class StorageNotFoundError(StorageError):
    """The data file is absent and could not be bootstrapped."""


class StoragePermissionError(StorageError):
    """The data file or its directory cannot be accessed."""


class LockTimeoutError(StorageError):
    """The advisory lock was not acquired within the configured timeout."""


class CorruptStoreError(StorageError):
    """The document is not valid JSON or fails structural validation."""


class StorageWriteError(StorageError):
    """Writing the temporary file or renaming it over the target failed."""
