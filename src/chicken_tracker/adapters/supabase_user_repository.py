"""Supabase-backed user repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from chicken_tracker.domain.models import UserRecord
from chicken_tracker.services.users import UserRepository


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return the user with the given id, if present."""
        response = (
            self.client.table("users")
            .select("id, email, name")
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_row(response.data[0])
        return None

    def list_users(self) -> list[UserRecord]:
        """Return all users."""
        response = (
            self.client.table("users")
            .select("id, email, name")
            .order("email", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def delete_user(self, user_id: UUID) -> None:
        """Delete the user row; owned rows go with it via ON DELETE CASCADE."""
        self.client.table("users").delete().eq("id", str(user_id)).execute()


def _parse_row(row: dict[str, object]) -> UserRecord:
    return UserRecord(
        id=UUID(str(row["id"])),
        email=str(row.get("email", "")),
        name=row.get("name"),
    )
