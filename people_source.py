"""Person record sources: the built-in sample list and a CSV loader."""

from __future__ import annotations

import csv
import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from models import Person

LOGGER = logging.getLogger(__name__)

SAMPLE_PEOPLE: tuple[Person, ...] = (
    Person(name="Alice", birth_timestamp=577209600),
    Person(name="Bob", birth_timestamp=690397200),
    Person(name="Carol", birth_timestamp=-211478400),
)


def load_people(csv_path: str | Path) -> list[Person]:
    """Read Person records from a CSV file with a header row.

    The ``name`` column is required. The birth instant comes from
    ``birth_timestamp`` (epoch seconds) or, when that is blank, ``birthdate``
    (ISO-8601 date or datetime, naive values read as UTC). Rows without a
    usable name or birth instant are logged and skipped.

    Raises:
        ValueError: the header has no ``name`` column.
    """
    path = Path(csv_path)
    people: list[Person] = []
    skipped = 0

    with path.open(newline="", encoding="utf-8") as fh:
        reader = csv.DictReader(fh)
        if reader.fieldnames is None or "name" not in reader.fieldnames:
            raise ValueError(f"People CSV {path} has no 'name' column")

        # Header is line 1, so data rows start at 2.
        for line_no, row in enumerate(reader, start=2):
            name = _as_str(row.get("name"))
            timestamp = _parse_birth(row)
            if not name or timestamp is None:
                skipped += 1
                LOGGER.warning("People CSV %s line %s: missing name or birth instant, skipping", path, line_no)
                continue
            people.append(Person(name=name, birth_timestamp=timestamp))

    LOGGER.info("Loaded %s people from %s (skipped=%s)", len(people), path, skipped)
    return people


def _parse_birth(row: dict[str, Any]) -> int | None:
    raw_ts = _as_str(row.get("birth_timestamp"))
    if raw_ts is not None:
        try:
            return int(raw_ts)
        except ValueError:
            return None

    raw_date = _as_str(row.get("birthdate"))
    if raw_date is None:
        return None

    try:
        parsed = datetime.fromisoformat(raw_date.replace("Z", "+00:00"))
    except ValueError:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return int(parsed.timestamp())


def _as_str(value: Any) -> str | None:
    return value.strip() if isinstance(value, str) and value.strip() else None
