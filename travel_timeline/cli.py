"""Travel Timeline command line interface.

Run it like:

    python -m travel_timeline show
    python -m travel_timeline add --country Japan --city Tokyo --entry-date 2023-02-02
    python -m travel_timeline export travel-timeline.json

The storage backend comes from configuration (TRAVEL_STORAGE_BACKEND,
TRAVEL_STORAGE_DATA_DIR...). Errors are reported on stderr with exit
status 1.
"""

from __future__ import annotations

import argparse
import dataclasses
import sys
from pathlib import Path
from typing import Optional, Sequence

from .adapters.clock import FixedClock
from .config import configure_logging, get_config
from .container import Container
from .domain.errors import TravelTimelineError
from .domain.models import HomeLocation, Theme
from .ports.clock import ClockPort
from .ports.rendering import TimelineRendererPort
from .services import TimelineService
from .services.import_export import EXPORT_FILENAME


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="travel-timeline",
        description="Record travels and view them grouped into journeys.",
    )
    parser.add_argument(
        "--today",
        metavar="YYYY-MM-DD",
        help="Pretend today is this date (ends the ongoing stay)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("show", help="Show the timeline grouped into journeys")
    sub.add_parser("journeys", help="List journeys with their date ranges")

    add = sub.add_parser("add", help="Record a new entry")
    add.add_argument("--country", default="")
    add.add_argument("--city", default="")
    add.add_argument("--entry-date", required=True)
    add.add_argument("--exit-date")
    add.add_argument("--flag", default="", help="Two-letter flag code")
    add.add_argument("--home", action="store_true", help="Mark as a return home")

    edit = sub.add_parser("edit", help="Change an existing entry")
    edit.add_argument("entry_id")
    edit.add_argument("--country")
    edit.add_argument("--city")
    edit.add_argument("--entry-date")
    edit.add_argument("--exit-date")
    edit.add_argument("--clear-exit", action="store_true", help="Remove the exit date")
    edit.add_argument("--flag")
    home_flag = edit.add_mutually_exclusive_group()
    home_flag.add_argument("--home", dest="is_home", action="store_true", default=None)
    home_flag.add_argument("--not-home", dest="is_home", action="store_false")

    delete = sub.add_parser("delete", help="Delete an entry")
    delete.add_argument("entry_id")

    home = sub.add_parser("home", help="Set the home location")
    home.add_argument("--country", required=True)
    home.add_argument("--city", required=True)
    home.add_argument("--flag", required=True)

    theme = sub.add_parser("theme", help="Set the display theme")
    theme.add_argument("theme", choices=[t.value for t in Theme])

    profile = sub.add_parser("profile", help="Set the profile name and e-mail")
    profile.add_argument("--name")
    profile.add_argument("--email")

    imp = sub.add_parser("import", help="Import a timeline JSON file")
    imp.add_argument("file", type=Path)

    exp = sub.add_parser("export", help="Export the timeline to a JSON file")
    exp.add_argument("file", type=Path, nargs="?", default=Path(EXPORT_FILENAME))
    exp.add_argument("--bundle", action="store_true", help="Include the profile")

    return parser


def _run(args: argparse.Namespace, service: TimelineService, renderer: TimelineRendererPort) -> None:
    if args.command == "show":
        print(renderer.render(service.timeline()))

    elif args.command == "journeys":
        for journey in service.journeys():
            state = "open" if journey.is_open else "closed"
            print(
                f"{journey.id}  {journey.start_date} -> {journey.end_date}  "
                f"{len(journey.trips)} trips  ({state})"
            )

    elif args.command == "add":
        entry = service.add_entry(
            country=args.country,
            city=args.city,
            entry_date=args.entry_date,
            exit_date=args.exit_date,
            is_home=args.home,
            flag_code=args.flag,
        )
        print(f"Added {entry.city}, {entry.country} #{entry.id}")

    elif args.command == "edit":
        entry = service.get_entry(args.entry_id)
        changes = {
            name: value
            for name, value in (
                ("country", args.country),
                ("city", args.city),
                ("entry_date", args.entry_date),
                ("exit_date", args.exit_date),
                ("flag_code", args.flag),
                ("is_home", args.is_home),
            )
            if value is not None
        }
        if args.clear_exit:
            changes["exit_date"] = None
        entry = service.update_entry(dataclasses.replace(entry, **changes))
        print(f"Updated {entry.city}, {entry.country} #{entry.id}")

    elif args.command == "delete":
        service.delete_entry(args.entry_id)
        print(f"Deleted #{args.entry_id}")

    elif args.command == "home":
        profile = service.set_home_location(
            HomeLocation(country=args.country, city=args.city, flag_code=args.flag.lower())
        )
        print(f"Home set to {profile.home_location.city}, {profile.home_location.country}")

    elif args.command == "theme":
        service.set_theme(Theme(args.theme))
        print(f"Theme set to {args.theme}")

    elif args.command == "profile":
        profile = service.update_profile(name=args.name, email=args.email)
        print(f"Profile: {profile.name or '-'} <{profile.email or '-'}>")

    elif args.command == "import":
        count = service.import_text(args.file.read_text(encoding="utf-8"))
        print(f"Imported {count} entries from {args.file}")

    elif args.command == "export":
        args.file.write_text(service.export_text(include_profile=args.bundle), encoding="utf-8")
        print(f"Exported timeline to {args.file}")


def main(argv: Optional[Sequence[str]] = None, container: Optional[Container] = None) -> int:
    args = build_parser().parse_args(argv)

    if container is None:
        config = get_config()
        configure_logging(config.observability)
        container = Container.create_default(config)

    try:
        if args.today:
            clock = FixedClock.from_iso(args.today)
            container.register(ClockPort, lambda: clock)

        service = container.resolve(TimelineService)
        service.load()
        _run(args, service, container.resolve(TimelineRendererPort))
    except (TravelTimelineError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
