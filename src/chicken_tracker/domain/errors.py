"""Domain error kinds and exceptions."""

from dataclasses import dataclass
from enum import StrEnum


class ErrorKind(StrEnum):
    """Machine-readable error kinds surfaced to callers."""

    DATE_REQUIRED = "DateRequired"
    DATE_INVALID = "DateInvalid"
    DATE_IN_FUTURE = "DateInFuture"
    COUNT_REQUIRED = "CountRequired"
    COUNT_NOT_NUMBER = "CountNotNumber"
    COUNT_NOT_INTEGER = "CountNotInteger"
    COUNT_NEGATIVE = "CountNegative"
    COUNT_TOO_LARGE = "CountTooLarge"
    NAME_REQUIRED = "NameRequired"
    TOO_LONG = "TooLong"
    SEX_INVALID = "SexInvalid"
    DEATH_BEFORE_BIRTH = "DeathBeforeBirth"
    DUPLICATE_DATE_ENTRY = "DuplicateDateEntry"
    NOT_FOUND = "NotFound"
    FORBIDDEN = "Forbidden"


@dataclass(frozen=True)
class ValidationIssue:
    """A single rule violation addressed to one input field."""

    field: str
    kind: ErrorKind
    message: str


class ChickenTrackerError(Exception):
    """Base class for errors the API layer maps to client responses."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationFailedError(ChickenTrackerError):
    """Input failed one or more validation rules."""

    def __init__(self, issues: list[ValidationIssue]) -> None:
        super().__init__("Validation failed")
        self.issues = issues

    @property
    def kinds(self) -> list[ErrorKind]:
        """Return the kinds of every collected issue."""
        return [issue.kind for issue in self.issues]


class DuplicateDateEntryError(ChickenTrackerError):
    """An owner already has an egg production entry for the date."""

    kind = ErrorKind.DUPLICATE_DATE_ENTRY
    field = "date"


class RecordNotFoundError(ChickenTrackerError):
    """The targeted record does not exist."""

    kind = ErrorKind.NOT_FOUND


class ForbiddenError(ChickenTrackerError):
    """The record exists but belongs to another user."""

    kind = ErrorKind.FORBIDDEN


class UniqueViolationError(Exception):
    """Raised by repositories when a write hits a unique constraint."""
