from __future__ import annotations

from typing import Optional, Sequence


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules.

    When raised for a whole edit batch, ``errors`` holds every per-entry error
    that was collected; the message is the first one.
    """

    def __init__(self, message: str = "", errors: Sequence["EntryError"] = ()):
        self.errors = tuple(errors)
        if not message and self.errors:
            message = str(self.errors[0])
        super().__init__(message)


class EntryError(ValidationError):
    """A single session/break entry failed one rule."""

    kind = "invalid_entry"

    def __init__(self, message: str, *, label: Optional[str] = None, position: Optional[int] = None):
        self.label = label
        self.position = position
        super().__init__(message)


class MalformedEntryError(EntryError):
    kind = "malformed_entry"


class MissingFieldError(EntryError):
    kind = "missing_field"


class InvalidTimeError(EntryError):
    kind = "invalid_time"


class NonPositiveDurationError(EntryError):
    kind = "non_positive_duration"


class DurationExceedsMaxError(EntryError):
    kind = "duration_exceeds_max"


class InvalidBreakTypeError(EntryError):
    kind = "invalid_break_type"
