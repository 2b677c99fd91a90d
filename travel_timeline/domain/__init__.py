"""Domain layer - Core business models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    EntryNotFoundError,
    EntryValidationError,
    ImportFormatError,
    InvariantViolation,
    ParseError,
    StorageError,
    TravelTimelineError,
)
from .models import (
    EntryTimeline,
    ExportBundle,
    HomeLocation,
    Journey,
    JourneyTimeline,
    Theme,
    TimelineView,
    TravelEntry,
    UserProfile,
)

__all__ = [
    # Models
    "TravelEntry",
    "Journey",
    "HomeLocation",
    "UserProfile",
    "Theme",
    "ExportBundle",
    "EntryTimeline",
    "JourneyTimeline",
    "TimelineView",
    # Errors
    "TravelTimelineError",
    "ParseError",
    "InvariantViolation",
    "EntryNotFoundError",
    "EntryValidationError",
    "ImportFormatError",
    "StorageError",
    "ConfigurationError",
]
