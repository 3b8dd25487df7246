"""Domain models for chicken profiles."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum
from uuid import UUID


class Sex(StrEnum):
    """Recorded sex of a chicken."""

    HEN = "HEN"
    ROOSTER = "ROOSTER"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class ChickenProfile:
    """Validated chicken profile fields."""

    name: str
    breed: str | None = None
    sex: Sex | None = None
    birth_date: date | None = None
    death_date: date | None = None
    notes: str | None = None


@dataclass(frozen=True)
class Chicken:
    """Chicken profile stored for a user."""

    id: UUID
    user_id: UUID
    name: str
    breed: str | None
    sex: Sex | None
    birth_date: date | None
    death_date: date | None
    notes: str | None
    created_at: datetime
    updated_at: datetime

    @property
    def is_deceased(self) -> bool:
        """Return whether a death date has been recorded."""
        return self.death_date is not None
