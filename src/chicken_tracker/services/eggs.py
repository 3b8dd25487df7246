"""Egg production logging and monthly summaries."""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from typing import Protocol
from uuid import UUID

from chicken_tracker.domain.eggs import EggProductionRecord, MonthlyAggregate
from chicken_tracker.domain.errors import (
    DuplicateDateEntryError,
    ForbiddenError,
    RecordNotFoundError,
    UniqueViolationError,
)
from chicken_tracker.services.validation import local_today, validate_egg_entry

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_MONTHS = 6
MONTHS_PER_YEAR = 12

DUPLICATE_ON_CREATE = (
    "You already have an entry for this date. "
    "Please edit the existing entry instead."
)
DUPLICATE_ON_UPDATE = (
    "You already have an entry for this date. "
    "Please select a different date or edit the existing entry."
)


class EggProductionRepository(Protocol):
    """Persistence interface for egg production records.

    Writes that collide with an existing ``(user_id, date)`` pair raise
    ``UniqueViolationError``.
    """

    def create_record(
        self, user_id: UUID, entry_date: date, count: int
    ) -> EggProductionRecord:
        """Insert a record and return it with generated id and timestamps."""

    def get_record(self, record_id: UUID) -> EggProductionRecord | None:
        """Return a record by id, if present."""

    def update_record(
        self, record_id: UUID, entry_date: date, count: int, updated_at: datetime
    ) -> EggProductionRecord:
        """Update date and count and return the stored record."""

    def delete_record(self, record_id: UUID) -> None:
        """Permanently delete a record."""

    def list_records(
        self, user_id: UUID, start: date | None, end: date | None
    ) -> list[EggProductionRecord]:
        """Return a user's records within an inclusive date range."""


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class EggProductionService:
    """Application service for daily egg counts."""

    repository: EggProductionRepository
    timezone: str = "UTC"
    window_months: int = DEFAULT_WINDOW_MONTHS
    clock: Callable[[], datetime] = field(default=_utcnow)

    def today(self) -> date:
        """Return today's date in the configured timezone."""
        return local_today(self.timezone, self.clock())

    def create(
        self, user_id: UUID, entry_date: object, count: object
    ) -> EggProductionRecord:
        """Validate and store a new daily count."""
        entry = validate_egg_entry(entry_date, count, self.today())
        try:
            return self.repository.create_record(user_id, entry.date, entry.count)
        except UniqueViolationError as exc:
            logger.info(
                "Duplicate egg production entry",
                extra={"user_id": str(user_id), "date": entry.date.isoformat()},
            )
            raise DuplicateDateEntryError(DUPLICATE_ON_CREATE) from exc

    def get(self, record_id: UUID, requester_id: UUID) -> EggProductionRecord:
        """Return a record owned by the requester."""
        return self._load_owned(record_id, requester_id)

    def update(
        self,
        record_id: UUID,
        requester_id: UUID,
        entry_date: object,
        count: object,
    ) -> EggProductionRecord:
        """Replace the date and count of an owned record."""
        self._load_owned(record_id, requester_id)
        entry = validate_egg_entry(entry_date, count, self.today())
        try:
            return self.repository.update_record(
                record_id, entry.date, entry.count, updated_at=self.clock()
            )
        except UniqueViolationError as exc:
            logger.info(
                "Egg production update collides with existing date",
                extra={"record_id": str(record_id), "date": entry.date.isoformat()},
            )
            raise DuplicateDateEntryError(DUPLICATE_ON_UPDATE) from exc

    def delete(self, record_id: UUID, requester_id: UUID) -> None:
        """Delete an owned record."""
        self._load_owned(record_id, requester_id)
        self.repository.delete_record(record_id)

    def list_records(
        self,
        user_id: UUID,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[EggProductionRecord]:
        """Return the user's records, newest first."""
        records = self.repository.list_records(user_id, start_date, end_date)
        return sorted(records, key=lambda record: record.date, reverse=True)

    def monthly_summary(self, user_id: UUID) -> list[MonthlyAggregate]:
        """Return monthly totals over the trailing window."""
        start = window_start(self.today(), self.window_months)
        records = self.repository.list_records(user_id, start, None)
        return aggregate_monthly(records, start)

    def _load_owned(self, record_id: UUID, requester_id: UUID) -> EggProductionRecord:
        record = self.repository.get_record(record_id)
        if record is None:
            raise RecordNotFoundError("Entry not found.")
        if record.user_id != requester_id:
            logger.warning(
                "Rejected access to another user's egg production entry",
                extra={"record_id": str(record_id)},
            )
            raise ForbiddenError(
                "Forbidden. You don't have permission to access this entry."
            )
        return record


def window_start(today: date, months: int = DEFAULT_WINDOW_MONTHS) -> date:
    """Return the first day of the month ``months`` months before ``today``."""
    index = today.year * MONTHS_PER_YEAR + (today.month - 1) - months
    return date(index // MONTHS_PER_YEAR, index % MONTHS_PER_YEAR + 1, 1)


def month_key(day: date) -> str:
    """Return the ``YYYY-MM`` key of a calendar date."""
    return f"{day.year:04d}-{day.month:02d}"


def aggregate_monthly(
    records: Iterable[EggProductionRecord], start: date | None = None
) -> list[MonthlyAggregate]:
    """Group records by calendar month, most recent month first.

    Records dated before ``start`` are ignored. Months without records are
    omitted rather than zero-filled.
    """
    totals: dict[str, tuple[int, int]] = {}
    for record in records:
        if start is not None and record.date < start:
            continue
        key = month_key(record.date)
        total_count, days_recorded = totals.get(key, (0, 0))
        totals[key] = (total_count + record.count, days_recorded + 1)
    return [
        MonthlyAggregate(month_key=key, total_count=total, days_recorded=days)
        for key, (total, days) in sorted(totals.items(), reverse=True)
    ]
