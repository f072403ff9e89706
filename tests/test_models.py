from dataclasses import FrozenInstanceError
from datetime import UTC, datetime, timedelta, timezone

import pytest

from models import Person


def test_birthdate_is_utc_datetime() -> None:
    person = Person(name="Epoch", birth_timestamp=0)
    assert person.birthdate == datetime(1970, 1, 1, tzinfo=UTC)
    assert person.birthdate.tzinfo == UTC


def test_birthdate_before_epoch() -> None:
    carol = Person(name="Carol", birth_timestamp=-211478400)
    assert carol.birthdate == datetime(1963, 4, 20, 8, 0, tzinfo=UTC)


def test_from_datetime_naive_is_utc() -> None:
    person = Person.from_datetime("Alice", datetime(1988, 4, 21))
    assert person.birth_timestamp == 577584000


def test_from_datetime_aware_converts_offset() -> None:
    moment = datetime(1970, 1, 1, 2, 0, tzinfo=timezone(timedelta(hours=2)))
    assert Person.from_datetime("Zero", moment).birth_timestamp == 0


def test_person_is_immutable_value() -> None:
    person = Person(name="Bob", birth_timestamp=690397200)
    assert person == Person(name="Bob", birth_timestamp=690397200)
    with pytest.raises(FrozenInstanceError):
        person.name = "Robert"  # type: ignore[misc]
