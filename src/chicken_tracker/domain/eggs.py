"""Domain models for egg production."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID


@dataclass(frozen=True)
class EggEntry:
    """Validated egg production input."""

    date: date
    count: int


@dataclass(frozen=True)
class EggProductionRecord:
    """Daily egg count stored for a user.

    A record with ``count == 0`` means the day was recorded as zero eggs;
    a missing record means the day has not been recorded yet.
    """

    id: UUID
    user_id: UUID
    date: date
    count: int
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class MonthlyAggregate:
    """Egg totals for one calendar month."""

    month_key: str
    total_count: int
    days_recorded: int
