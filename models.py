"""Shared typed models for the birthday queries."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime


@dataclass(frozen=True, slots=True)
class Person:
    """Immutable person record: a name and a birth instant in epoch seconds."""

    name: str
    birth_timestamp: int

    @property
    def birthdate(self) -> datetime:
        return datetime.fromtimestamp(self.birth_timestamp, tz=UTC)

    @classmethod
    def from_datetime(cls, name: str, moment: datetime) -> Person:
        """Build a record from a datetime; naive values are taken as UTC."""
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=UTC)
        return cls(name=name, birth_timestamp=int(moment.timestamp()))
