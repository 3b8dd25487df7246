"""Chicken profile management."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from enum import StrEnum
from typing import Protocol
from uuid import UUID

from chicken_tracker.domain.chickens import Chicken, ChickenProfile
from chicken_tracker.domain.errors import ForbiddenError, RecordNotFoundError
from chicken_tracker.services.validation import (
    local_today,
    validate_chicken,
    validate_death_date,
)

logger = logging.getLogger(__name__)


class ChickenStatus(StrEnum):
    """List filter for chicken profiles."""

    ALL = "all"
    ACTIVE = "active"
    DECEASED = "deceased"


class ChickenRepository(Protocol):
    """Persistence interface for chicken profiles."""

    def create_chicken(self, user_id: UUID, profile: ChickenProfile) -> Chicken:
        """Insert a chicken and return it."""

    def get_chicken(self, chicken_id: UUID) -> Chicken | None:
        """Return a chicken by id, if present."""

    def list_chickens(self, user_id: UUID, status: ChickenStatus) -> list[Chicken]:
        """Return a user's chickens filtered by status."""

    def update_chicken(
        self, chicken_id: UUID, profile: ChickenProfile, updated_at: datetime
    ) -> Chicken:
        """Replace a chicken's profile fields and return it."""

    def set_death_date(
        self, chicken_id: UUID, death_date: date, updated_at: datetime
    ) -> Chicken:
        """Record a death date and return the chicken."""

    def delete_chicken(self, chicken_id: UUID) -> None:
        """Permanently delete a chicken."""


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class ChickenService:
    """Application service for chicken profiles."""

    repository: ChickenRepository
    timezone: str = "UTC"
    clock: Callable[[], datetime] = field(default=_utcnow)

    def today(self) -> date:
        """Return today's date in the configured timezone."""
        return local_today(self.timezone, self.clock())

    def create(self, user_id: UUID, fields: dict[str, object]) -> Chicken:
        """Validate and store a new chicken."""
        profile = validate_chicken(**fields, today=self.today())
        return self.repository.create_chicken(user_id, profile)

    def get(self, chicken_id: UUID, requester_id: UUID) -> Chicken:
        """Return a chicken, reporting foreign chickens as missing."""
        chicken = self.repository.get_chicken(chicken_id)
        if chicken is None or chicken.user_id != requester_id:
            raise RecordNotFoundError("Chicken not found.")
        return chicken

    def list_chickens(
        self, user_id: UUID, status: ChickenStatus = ChickenStatus.ALL
    ) -> list[Chicken]:
        """Return the user's chickens, newest first."""
        chickens = self.repository.list_chickens(user_id, status)
        return sorted(chickens, key=lambda chicken: chicken.created_at, reverse=True)

    def update(
        self, chicken_id: UUID, requester_id: UUID, fields: dict[str, object]
    ) -> Chicken:
        """Replace the profile of an owned chicken."""
        self._load_owned(chicken_id, requester_id, "update")
        profile = validate_chicken(**fields, today=self.today())
        return self.repository.update_chicken(
            chicken_id, profile, updated_at=self.clock()
        )

    def mark_deceased(
        self, chicken_id: UUID, requester_id: UUID, death_date: object
    ) -> Chicken:
        """Record the death date of an owned chicken."""
        chicken = self._load_owned(chicken_id, requester_id, "mark as deceased")
        parsed = validate_death_date(death_date, chicken.birth_date, self.today())
        return self.repository.set_death_date(
            chicken_id, parsed, updated_at=self.clock()
        )

    def delete(self, chicken_id: UUID, requester_id: UUID) -> None:
        """Delete an owned chicken."""
        self._load_owned(chicken_id, requester_id, "delete")
        self.repository.delete_chicken(chicken_id)

    def _load_owned(self, chicken_id: UUID, requester_id: UUID, action: str) -> Chicken:
        chicken = self.repository.get_chicken(chicken_id)
        if chicken is None:
            raise RecordNotFoundError("Chicken not found.")
        if chicken.user_id != requester_id:
            logger.warning(
                "Rejected change to another user's chicken",
                extra={"chicken_id": str(chicken_id), "action": action},
            )
            raise ForbiddenError(f"Forbidden. You can only {action} your own chickens.")
        return chicken
