"""Services layer - Application orchestration.

This module contains the application services that orchestrate
storage, the timeline core and the import/export format.

Available services:
- TimelineService: Main service for recording travels and deriving journeys
- import_export: JSON import and export of timeline data
"""

from .import_export import export_bundle, export_entries, parse_import
from .timeline_service import TimelineService
from .validation import validate_entry

__all__ = [
    "TimelineService",
    "parse_import",
    "export_entries",
    "export_bundle",
    "validate_entry",
]
