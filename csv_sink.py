"""CSV file sink for query results."""

from __future__ import annotations

import csv
import logging
from collections.abc import Sequence
from datetime import UTC, tzinfo
from pathlib import Path

from models import Person
from queries import day_of_year

LOGGER = logging.getLogger(__name__)

CSV_COLUMNS = [
    "name",
    "birth_timestamp",
    "birthdate",    # ISO-8601, UTC
    "day_of_year",  # 1-366, in the zone passed to write_people
]


def write_people(people: Sequence[Person], csv_path: str | Path, tz: tzinfo = UTC) -> int:
    """Write people to ``csv_path`` (replacing it) and return the row count."""
    path = Path(csv_path)

    with path.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.DictWriter(fh, fieldnames=CSV_COLUMNS)
        writer.writeheader()
        for person in people:
            writer.writerow({
                "name": person.name,
                "birth_timestamp": person.birth_timestamp,
                "birthdate": person.birthdate.isoformat(),
                "day_of_year": day_of_year(person.birth_timestamp, tz),
            })

    LOGGER.info("Wrote %s people to %s", len(people), path)
    return len(people)
