"""CLI entrypoint for the birthday record queries.

Usage examples
--------------
# Names from the built-in sample list:
python main.py names

# Who still has a birthday coming this year, as of a given date:
python main.py upcoming --today 2026-06-01

# Oldest person from your own CSV, also written to a results file:
python main.py oldest --people friends.csv --output oldest.csv

# Earliest birth timestamp / primality check:
python main.py earliest
python main.py prime 97
"""

from __future__ import annotations

import argparse
import logging
import os
from collections.abc import Sequence
from datetime import UTC, date, datetime, time, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

from csv_sink import write_people
from models import Person
from numeric import is_prime
from people_source import SAMPLE_PEOPLE, load_people
from queries import earliest_timestamp, names_of, oldest, still_to_celebrate

EXIT_OK = 0
EXIT_BAD_CONFIG = 2


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line flags."""
    source = argparse.ArgumentParser(add_help=False)
    source.add_argument(
        "--people",
        default=None,
        help="CSV file with name,birth_timestamp (or birthdate) columns. "
             "Defaults to PEOPLE_CSV_PATH, else the built-in sample list.",
    )
    source.add_argument(
        "--tz",
        default=None,
        help="IANA time zone used for day-of-year and printed dates (default: BIRTHDAY_TZ or UTC)",
    )
    output = argparse.ArgumentParser(add_help=False)
    output.add_argument("--output", default=None, help="Also write the selected people to this CSV file")

    parser = argparse.ArgumentParser(description="Query a list of people by name and birthday")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("names", parents=[source, output], help="List every name in input order")
    upcoming = sub.add_parser(
        "upcoming",
        parents=[source, output],
        help="People whose birthday has not passed yet this year",
    )
    upcoming.add_argument("--today", default=None, help="Reference date YYYY-MM-DD (default: now)")
    sub.add_parser("oldest", parents=[source, output], help="The person with the earliest birth instant")
    sub.add_parser("earliest", parents=[source], help="The earliest birth timestamp (epoch seconds)")
    prime = sub.add_parser("prime", help="Check whether an integer is prime")
    prime.add_argument("number", type=int)

    return parser.parse_args(argv)


def _log_level(name: str | None) -> tuple[int, bool]:
    """Map a LOG_LEVEL name to a level; unknown names fall back to WARNING."""
    level = logging.getLevelName((name or "WARNING").strip().upper())
    if isinstance(level, int):
        return level, True
    return logging.WARNING, False


def _now() -> datetime:
    return datetime.now(UTC)


def _resolve_tz(name: str | None) -> tzinfo:
    name = name or os.getenv("BIRTHDAY_TZ", "UTC")
    # Fixed UTC needs no tz database on the host.
    if name.upper() == "UTC":
        return UTC
    return ZoneInfo(name)


def _reference_instant(today: str | None, tz: tzinfo) -> datetime:
    """Midnight of ``today`` in ``tz``, or the current instant when not given."""
    if today is None:
        return _now()
    return datetime.combine(date.fromisoformat(today), time(), tzinfo=tz)


def _load(people_path: str | None) -> list[Person]:
    path = people_path or os.getenv("PEOPLE_CSV_PATH")
    if not path:
        logging.info("No people CSV configured, using the built-in sample list")
        return list(SAMPLE_PEOPLE)
    return load_people(path)


def _describe(person: Person, tz: tzinfo) -> str:
    """Name and birth date, the date taken in the zone the query ran in."""
    return f"{person.name}\t{person.birthdate.astimezone(tz).date().isoformat()}"


def run(args: argparse.Namespace) -> int:
    """Execute one command and return its exit code."""
    if args.command == "prime":
        verdict = "is prime" if is_prime(args.number) else "is not prime"
        print(f"{args.number} {verdict}")
        return EXIT_OK

    try:
        tz = _resolve_tz(args.tz)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        logging.error("Unknown time zone %r: %s", args.tz or os.getenv("BIRTHDAY_TZ"), exc)
        return EXIT_BAD_CONFIG

    try:
        people = _load(args.people)
    except (OSError, ValueError) as exc:
        logging.error("Cannot load people from %r: %s", args.people or os.getenv("PEOPLE_CSV_PATH"), exc)
        return EXIT_BAD_CONFIG
    logging.info("Running %s over %s people", args.command, len(people))

    selected: list[Person] = people
    if args.command == "names":
        for name in names_of(people):
            print(name)
    elif args.command == "upcoming":
        try:
            reference = _reference_instant(args.today, tz)
        except ValueError as exc:
            logging.error("Invalid --today value %r: %s", args.today, exc)
            return EXIT_BAD_CONFIG
        selected = still_to_celebrate(people, reference, tz)
        logging.info("Upcoming: total=%s still_to_celebrate=%s", len(people), len(selected))
        for person in selected:
            print(_describe(person, tz))
    elif args.command == "oldest":
        found = oldest(people)
        selected = [found] if found is not None else []
        print(_describe(found, tz) if found is not None else "(none)")
    elif args.command == "earliest":
        stamp = earliest_timestamp(people)
        print("(none)" if stamp is None else stamp)

    if getattr(args, "output", None):
        write_people(selected, args.output, tz)

    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    """Initialize config and execute the requested query."""
    load_dotenv()
    level, known = _log_level(os.getenv("LOG_LEVEL"))
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s")
    if not known:
        logging.warning("Unknown LOG_LEVEL %r, using WARNING", os.getenv("LOG_LEVEL"))
    return run(parse_args(argv))


if __name__ == "__main__":
    raise SystemExit(main())
