"""JSON import and export of timeline data.

Two file shapes are understood:
- a bare list of entries, as written by "Export Timeline"
- an object ``{"profile": {...}, "travels": [...]}`` with the profile

Dates in imported files are normalized to ``YYYY-MM-DD``. ISO dates and
ISO timestamps from a database dump keep their calendar date and are
rejected when it does not exist; anything else ("15 Jan 2023") goes
through dateparser, day first.
"""

from __future__ import annotations

import dataclasses
import json
import logging
import re
from typing import Any, Sequence

import dateparser
from pydantic import ValidationError

from ..domain.errors import EntryValidationError, ImportFormatError, ParseError
from ..domain.models import ExportBundle, TravelEntry
from ..schemas import BundleRecord, TravelEntryRecord
from ..timeline.dates import parse_entry_date
from .validation import validate_entry

EXPORT_FILENAME = "travel-timeline.json"

_ISO_PREFIX = re.compile(r"^\d{4}-\d{2}-\d{2}")

_logger = logging.getLogger(__name__)


def _iso_calendar_date(value: str, entry_id: str) -> str:
    try:
        day = parse_entry_date(value[:10], entry_id)
    except ParseError as e:
        raise ImportFormatError(
            f"Entry {entry_id} has an invalid date {value!r}",
            detail=value,
            cause=e,
        )
    if value[10:11] not in ("", "T", " "):
        raise ImportFormatError(
            f"Entry {entry_id} has a malformed date {value!r}",
            detail=value,
        )
    return day.isoformat()


def normalize_date(value: str, entry_id: str) -> str:
    """Return ``value`` as a ``YYYY-MM-DD`` string.

    Values starting with ``YYYY-MM-DD`` keep that calendar date and any
    time part is dropped. Other values are read day first.

    Raises:
        ImportFormatError: If the value cannot be read as a date.
    """
    if _ISO_PREFIX.match(value):
        return _iso_calendar_date(value, entry_id)

    parsed = dateparser.parse(
        value,
        languages=["en"],
        settings={
            "DATE_ORDER": "DMY",
            "STRICT_PARSING": True,
            "REQUIRE_PARTS": ["day", "month", "year"],
        },
    )
    if parsed is None:
        raise ImportFormatError(
            f"Entry {entry_id} has an unreadable date {value!r}",
            detail=value,
        )
    _logger.debug(
        "Imported date normalized",
        extra={"entry_id": entry_id, "raw": value, "normalized": parsed.date().isoformat()},
    )
    return parsed.date().isoformat()


def _normalize_entry(entry: TravelEntry) -> TravelEntry:
    return dataclasses.replace(
        entry,
        entry_date=normalize_date(entry.entry_date, entry.id),
        exit_date=normalize_date(entry.exit_date, entry.id) if entry.exit_date else None,
    )


def parse_import(text: str) -> ExportBundle:
    """Read an import file into a bundle of validated entries.

    Args:
        text: Raw file content.

    Returns:
        Bundle with the profile (if the file has one) and the entries.

    Raises:
        ImportFormatError: If the content is not valid timeline data.
    """
    try:
        raw: Any = json.loads(text)
    except ValueError as e:
        raise ImportFormatError("Invalid JSON file format", detail=str(e), cause=e)

    try:
        if isinstance(raw, list):
            bundle = ExportBundle(
                travels=tuple(TravelEntryRecord.model_validate(item).to_domain() for item in raw)
            )
        elif isinstance(raw, dict):
            bundle = BundleRecord.model_validate(raw).to_domain()
        else:
            raise ImportFormatError(
                "Expected a list of entries or an object with travels",
                detail=type(raw).__name__,
            )
    except ValidationError as e:
        raise ImportFormatError("Invalid timeline data", detail=str(e), cause=e)

    travels = tuple(_normalize_entry(t) for t in bundle.travels)

    seen: set[str] = set()
    for entry in travels:
        if entry.id in seen:
            raise ImportFormatError(
                f"Duplicate entry id {entry.id}", detail=entry.id
            )
        seen.add(entry.id)
        try:
            validate_entry(entry)
        except EntryValidationError as e:
            raise ImportFormatError(e.message, detail=e.field_name, cause=e)

    _logger.info(
        "Import parsed",
        extra={"entries": len(travels), "has_profile": bundle.profile is not None},
    )
    return dataclasses.replace(bundle, travels=travels)


def export_entries(entries: Sequence[TravelEntry]) -> str:
    """Serialize entries as the pretty-printed list written by export."""
    return json.dumps(
        [TravelEntryRecord.from_domain(e).to_wire() for e in entries],
        indent=2,
    )


def export_bundle(bundle: ExportBundle) -> str:
    """Serialize a profile-and-travels bundle."""
    return json.dumps(BundleRecord.from_domain(bundle).to_wire(), indent=2)


def export_text(bundle: ExportBundle, include_profile: bool = False) -> str:
    """Serialize ``bundle`` as an entry list or, with the profile, a bundle."""
    if include_profile:
        return export_bundle(bundle)
    return export_entries(bundle.travels)
