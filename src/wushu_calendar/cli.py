from __future__ import annotations

import argparse
import logging
from datetime import date
from typing import Optional, Sequence

from .bootstrap import configure_logging
from .domain import InvalidDateKeyError, Recurrence, format_date_key, parse_date_key
from .services import CalendarService, ServiceContext, describe_event


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Wushu Calendar command line interface.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("gui", help="Launch the desktop calendar.")

    day_parser = subparsers.add_parser("day", help="List the events of a day.")
    day_parser.add_argument("date", nargs="?", help="YYYY-MM-DD, defaults to today.")

    month_parser = subparsers.add_parser("month", help="List the days of a month that have events.")
    month_parser.add_argument("month", nargs="?", help="YYYY-MM, defaults to the current month.")

    add_parser = subparsers.add_parser("add", help="Add an event.")
    add_parser.add_argument("title")
    add_parser.add_argument("date", help="Anchor date, YYYY-MM-DD.")
    add_parser.add_argument("--time")
    add_parser.add_argument("--duration", help="Duration in minutes.")
    add_parser.add_argument(
        "--recurrence",
        choices=[recurrence.value for recurrence in Recurrence],
        default=Recurrence.NONE.value,
    )
    add_parser.add_argument("--until", help="Last possible occurrence, YYYY-MM-DD.")

    remove_parser = subparsers.add_parser("remove", help="Remove an event by id.")
    remove_parser.add_argument("event_id")

    return parser


def _print_day(calendar: CalendarService, day: date) -> None:
    events = calendar.occurrences_on(day)
    print(day.strftime("%A, %B %d, %Y"))
    if not events:
        print("  No events yet.")
        return
    for event in events:
        print(f"  {event.id}  {event.title}  ({describe_event(event)})")


def _print_month(calendar: CalendarService) -> None:
    print(calendar.current_month.strftime("%B %Y"))
    for cell in calendar.month_cells():
        if cell.has_events:
            titles = ", ".join(event.title for event in calendar.occurrences_on(cell.day))
            print(f"  {cell.key}  {titles}")


def main(argv: Optional[Sequence[str]] = None, *, context: Optional[ServiceContext] = None) -> int:
    configure_logging()
    logging.getLogger(__name__).info("Wushu Calendar CLI starting")
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "gui":
        from .ui.app import run_gui

        run_gui(context)
        return 0

    calendar = CalendarService(context or ServiceContext())
    try:
        if args.command == "day":
            day = parse_date_key(args.date) if args.date else calendar.today()
            _print_day(calendar, day)
        elif args.command == "month":
            if args.month:
                target = parse_date_key(f"{args.month}-1")
                current = calendar.current_month
                calendar.shift_month((target.year - current.year) * 12 + target.month - current.month)
            _print_month(calendar)
        elif args.command == "add":
            parse_date_key(args.date)
            if args.until:
                parse_date_key(args.until)
            event = calendar.add_event(
                args.title,
                args.date,
                time=args.time,
                duration=args.duration,
                recurrence=args.recurrence,
                until=args.until,
            )
            if event is None:
                parser.error("title and date must not be empty")
            print(event.id)
        elif args.command == "remove":
            if not calendar.remove_event(args.event_id):
                print(f"No event with id {args.event_id}")
                return 1
        else:  # pragma: no cover - argparse enforces choices
            parser.print_help()
    except InvalidDateKeyError as exc:
        parser.error(str(exc))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
