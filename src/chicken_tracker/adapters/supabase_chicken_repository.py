"""Supabase repository for chicken profiles."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client

from chicken_tracker.domain.chickens import Chicken, ChickenProfile, Sex
from chicken_tracker.domain.errors import RecordNotFoundError
from chicken_tracker.services.chickens import ChickenRepository, ChickenStatus

_COLUMNS = (
    "id, user_id, name, breed, sex, birth_date, death_date, notes, "
    "created_at, updated_at"
)


@dataclass
class SupabaseChickenRepository(ChickenRepository):
    """Supabase implementation for the ``chickens`` table."""

    client: Client

    def create_chicken(self, user_id: UUID, profile: ChickenProfile) -> Chicken:
        """Insert a chicken row and return it."""
        payload = _profile_payload(profile)
        payload["user_id"] = str(user_id)
        response = self.client.table("chickens").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create chicken")
        return _parse_row(response.data[0])

    def get_chicken(self, chicken_id: UUID) -> Chicken | None:
        """Return a chicken by id."""
        response = (
            self.client.table("chickens")
            .select(_COLUMNS)
            .eq("id", str(chicken_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def list_chickens(self, user_id: UUID, status: ChickenStatus) -> list[Chicken]:
        """Return a user's chickens filtered by status."""
        query = (
            self.client.table("chickens").select(_COLUMNS).eq("user_id", str(user_id))
        )
        if status == ChickenStatus.ACTIVE:
            query = query.is_("death_date", "null")
        elif status == ChickenStatus.DECEASED:
            query = query.not_.is_("death_date", "null")
        response = query.order("created_at", desc=True).execute()
        return [_parse_row(row) for row in response.data or []]

    def update_chicken(
        self, chicken_id: UUID, profile: ChickenProfile, updated_at: datetime
    ) -> Chicken:
        """Update a chicken row and return it."""
        payload = _profile_payload(profile)
        payload["updated_at"] = updated_at.isoformat()
        return self._update(chicken_id, payload)

    def set_death_date(
        self, chicken_id: UUID, death_date: date, updated_at: datetime
    ) -> Chicken:
        """Set the death date on a chicken row."""
        return self._update(
            chicken_id,
            {
                "death_date": death_date.isoformat(),
                "updated_at": updated_at.isoformat(),
            },
        )

    def delete_chicken(self, chicken_id: UUID) -> None:
        """Delete a chicken row."""
        self.client.table("chickens").delete().eq("id", str(chicken_id)).execute()

    def _update(self, chicken_id: UUID, payload: dict[str, object]) -> Chicken:
        response = (
            self.client.table("chickens")
            .update(payload)
            .eq("id", str(chicken_id))
            .execute()
        )
        if not response.data:
            raise RecordNotFoundError("Chicken not found.")
        return _parse_row(response.data[0])


def _profile_payload(profile: ChickenProfile) -> dict[str, object]:
    return {
        "name": profile.name,
        "breed": profile.breed,
        "sex": profile.sex.value if profile.sex else None,
        "birth_date": profile.birth_date.isoformat() if profile.birth_date else None,
        "death_date": profile.death_date.isoformat() if profile.death_date else None,
        "notes": profile.notes,
    }


def _optional_date(value: object) -> date | None:
    if isinstance(value, str) and value:
        return date.fromisoformat(value[:10])
    return None


def _parse_row(row: dict[str, object]) -> Chicken:
    sex = row.get("sex")
    return Chicken(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        name=str(row.get("name", "")),
        breed=row.get("breed"),
        sex=Sex(sex) if sex else None,
        birth_date=_optional_date(row.get("birth_date")),
        death_date=_optional_date(row.get("death_date")),
        notes=row.get("notes"),
        created_at=datetime.fromisoformat(str(row["created_at"])),
        updated_at=datetime.fromisoformat(str(row["updated_at"])),
    )
