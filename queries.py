"""Pure queries over a sequence of Person records (no clock, no I/O)."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime, tzinfo
from functools import reduce

from models import Person


def day_of_year(moment: datetime | int, tz: tzinfo = UTC) -> int:
    """Return the 1-based Gregorian day-of-year of ``moment`` in zone ``tz``.

    Ints are read as epoch seconds and naive datetimes as UTC. The ordinal is
    taken in the instant's own year, so Dec 31 is 366 in a leap year and
    Feb 29 pushes every later date of that year one day further.
    """
    if isinstance(moment, datetime):
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=UTC)
        local = moment.astimezone(tz)
    else:
        local = datetime.fromtimestamp(moment, tz=tz)
    return local.timetuple().tm_yday


def names_of(people: Sequence[Person]) -> list[str]:
    """Return every person's name, in input order."""
    return [person.name for person in people]


def still_to_celebrate(
    people: Sequence[Person],
    reference: datetime,
    tz: tzinfo = UTC,
) -> list[Person]:
    """Return people whose birthday has not passed yet in the reference year.

    A person is kept when the day-of-year of their birth instant is greater
    than or equal to the day-of-year of ``reference``. Equality counts as
    "today, not yet celebrated". Input order is preserved.
    """
    today = day_of_year(reference, tz)
    return [p for p in people if day_of_year(p.birth_timestamp, tz) >= today]


def earlier_of(current: Person, candidate: Person) -> Person:
    """Return whichever record was born first; ties keep ``current``."""
    if candidate.birth_timestamp < current.birth_timestamp:
        return candidate
    return current


def oldest(people: Sequence[Person]) -> Person | None:
    """Return the person with the smallest birth timestamp, or None if empty.

    On equal timestamps the record encountered first wins.
    """
    if not people:
        return None
    return reduce(earlier_of, people)


def _earlier_timestamp(current: int | None, person: Person) -> int | None:
    if current is None or person.birth_timestamp < current:
        return person.birth_timestamp
    return current


def earliest_timestamp(people: Sequence[Person]) -> int | None:
    """Return the smallest birth timestamp, or None for an empty sequence."""
    return reduce(_earlier_timestamp, people, None)
