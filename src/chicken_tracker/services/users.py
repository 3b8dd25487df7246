"""User-related business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from chicken_tracker.domain.errors import RecordNotFoundError
from chicken_tracker.domain.models import UserRecord

logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return a user by id, if present."""

    def list_users(self) -> list[UserRecord]:
        """Return all users."""

    def delete_user(self, user_id: UUID) -> None:
        """Delete a user together with every record the user owns."""


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository

    def get(self, user_id: UUID) -> UserRecord | None:
        """Return a user by id, if present."""
        return self.repository.get_user(user_id)

    def list_users(self) -> list[UserRecord]:
        """Return all users ordered by email."""
        return sorted(self.repository.list_users(), key=lambda user: user.email)

    def delete_account(self, user_id: UUID) -> None:
        """Delete a user account and, by cascade, all of its records."""
        if self.repository.get_user(user_id) is None:
            raise RecordNotFoundError("User not found.")
        self.repository.delete_user(user_id)
        logger.info("Deleted user account", extra={"user_id": str(user_id)})
