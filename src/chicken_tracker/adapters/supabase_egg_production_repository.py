"""Supabase repository for egg production records."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client, PostgrestAPIError

from chicken_tracker.domain.eggs import EggProductionRecord
from chicken_tracker.domain.errors import RecordNotFoundError, UniqueViolationError
from chicken_tracker.services.eggs import EggProductionRepository

UNIQUE_VIOLATION = "23505"

_COLUMNS = "id, user_id, date, count, created_at, updated_at"


@dataclass
class SupabaseEggProductionRepository(EggProductionRepository):
    """Supabase implementation for the ``egg_production`` table."""

    client: Client

    def create_record(
        self, user_id: UUID, entry_date: date, count: int
    ) -> EggProductionRecord:
        """Insert a record row and return it."""
        try:
            response = (
                self.client.table("egg_production")
                .insert(
                    {
                        "user_id": str(user_id),
                        "date": entry_date.isoformat(),
                        "count": count,
                    }
                )
                .execute()
            )
        except PostgrestAPIError as exc:
            raise_for_unique_violation(exc)
            raise
        if not response.data:
            raise RuntimeError("Failed to create egg production record")
        return _parse_row(response.data[0])

    def get_record(self, record_id: UUID) -> EggProductionRecord | None:
        """Return a record by id."""
        response = (
            self.client.table("egg_production")
            .select(_COLUMNS)
            .eq("id", str(record_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def update_record(
        self, record_id: UUID, entry_date: date, count: int, updated_at: datetime
    ) -> EggProductionRecord:
        """Update a record row and return the stored values."""
        try:
            response = (
                self.client.table("egg_production")
                .update(
                    {
                        "date": entry_date.isoformat(),
                        "count": count,
                        "updated_at": updated_at.isoformat(),
                    }
                )
                .eq("id", str(record_id))
                .execute()
            )
        except PostgrestAPIError as exc:
            raise_for_unique_violation(exc)
            raise
        if not response.data:
            raise RecordNotFoundError("Entry not found.")
        return _parse_row(response.data[0])

    def delete_record(self, record_id: UUID) -> None:
        """Delete a record row."""
        self.client.table("egg_production").delete().eq("id", str(record_id)).execute()

    def list_records(
        self, user_id: UUID, start: date | None, end: date | None
    ) -> list[EggProductionRecord]:
        """Return a user's records in an inclusive date range, newest first."""
        query = (
            self.client.table("egg_production")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
        )
        if start is not None:
            query = query.gte("date", start.isoformat())
        if end is not None:
            query = query.lte("date", end.isoformat())
        response = query.order("date", desc=True).execute()
        return [_parse_row(row) for row in response.data or []]


def raise_for_unique_violation(exc: PostgrestAPIError) -> None:
    """Re-raise a PostgREST unique constraint failure as a domain error."""
    if exc.code == UNIQUE_VIOLATION:
        raise UniqueViolationError(exc.message or "Unique constraint failed") from exc


def _parse_row(row: dict[str, object]) -> EggProductionRecord:
    return EggProductionRecord(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        date=date.fromisoformat(str(row["date"])),
        count=int(row["count"]),
        created_at=datetime.fromisoformat(str(row["created_at"])),
        updated_at=datetime.fromisoformat(str(row["updated_at"])),
    )
