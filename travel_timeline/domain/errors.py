"""Typed domain errors for the Travel Timeline.

Every failure surfaces as one of these types instead of a silently
degraded value. The host (CLI) is the only layer that catches them
and turns them into a message for the user.

All errors inherit from TravelTimelineError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class TravelTimelineError(Exception):
    """Base error for the travel timeline domain.

    All domain-specific errors inherit from this class.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class ParseError(TravelTimelineError):
    """A date string on an entry is not a valid ISO calendar date.

    Attributes:
        entry_id: Identifier of the offending entry
        value: The raw string that failed to parse
    """

    entry_id: str = ""
    value: str = ""


@dataclass
class InvariantViolation(TravelTimelineError):
    """A caller broke a contract of the timeline core.

    Raised when an exit date is resolved for an entry that is not part
    of the entry set it is resolved against.

    Attributes:
        entry_id: Identifier of the entry that was not found
    """

    entry_id: str = ""


@dataclass
class EntryNotFoundError(TravelTimelineError):
    """No stored entry carries the requested identifier.

    Attributes:
        entry_id: The identifier that was looked up
    """

    entry_id: str = ""


@dataclass
class EntryValidationError(TravelTimelineError):
    """An entry was rejected before being stored.

    Attributes:
        entry_id: Identifier of the rejected entry
        field_name: Name of the field that failed validation
    """

    entry_id: str = ""
    field_name: str = ""


@dataclass
class ImportFormatError(TravelTimelineError):
    """An import payload could not be read as timeline data.

    Attributes:
        detail: Validation detail from the schema layer
    """

    detail: str = ""


@dataclass
class StorageError(TravelTimelineError):
    """Reading from or writing to a storage backend failed.

    Attributes:
        backend: Name of the storage backend that failed
    """

    backend: str = ""


@dataclass
class ConfigurationError(TravelTimelineError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
