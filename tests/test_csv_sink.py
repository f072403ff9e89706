from __future__ import annotations

import csv
from datetime import timedelta, timezone
from pathlib import Path

from csv_sink import CSV_COLUMNS, write_people
from models import Person
from people_source import SAMPLE_PEOPLE


def _read_rows(path: Path) -> list[dict[str, str]]:
    with path.open(newline="", encoding="utf-8") as fh:
        return list(csv.DictReader(fh))


def test_write_people_header_and_rows(tmp_path: Path) -> None:
    output = tmp_path / "out.csv"
    assert write_people(SAMPLE_PEOPLE, output) == 3

    with output.open(newline="", encoding="utf-8") as fh:
        header = next(csv.reader(fh))
    assert header == CSV_COLUMNS

    rows = _read_rows(output)
    assert [r["name"] for r in rows] == ["Alice", "Bob", "Carol"]
    assert rows[2] == {
        "name": "Carol",
        "birth_timestamp": "-211478400",
        "birthdate": "1963-04-20T08:00:00+00:00",
        "day_of_year": "110",
    }


def test_write_people_empty_writes_header_only(tmp_path: Path) -> None:
    output = tmp_path / "out.csv"
    assert write_people([], output) == 0
    assert output.read_text(encoding="utf-8").splitlines() == [",".join(CSV_COLUMNS)]


def test_write_people_overwrites_existing_file(tmp_path: Path) -> None:
    output = tmp_path / "out.csv"
    write_people(SAMPLE_PEOPLE, output)
    write_people([SAMPLE_PEOPLE[1]], output)
    assert [r["name"] for r in _read_rows(output)] == ["Bob"]


def test_write_people_day_of_year_uses_time_zone(tmp_path: Path) -> None:
    # 1988-12-31T20:00Z is already Jan 1 at UTC+9.
    person = Person(name="NYE", birth_timestamp=599601600)
    output = tmp_path / "out.csv"
    write_people([person], output, tz=timezone(timedelta(hours=9)))
    row = _read_rows(output)[0]
    assert row["birthdate"] == "1988-12-31T20:00:00+00:00"
    assert row["day_of_year"] == "1"
