"""Pydantic request bodies and response serializers.

Request fields are left untyped so that raw client values reach the shared
validation rules unchanged.
"""

from typing import Any

from pydantic import BaseModel

from chicken_tracker.domain.chickens import Chicken
from chicken_tracker.domain.eggs import (
    EggEntry,
    EggProductionRecord,
    MonthlyAggregate,
)
from chicken_tracker.domain.models import UserRecord


class EggProductionPayload(BaseModel):
    """Body for creating, updating or pre-checking an egg count."""

    date: Any = None
    count: Any = None


class ChickenPayload(BaseModel):
    """Body for creating or updating a chicken profile."""

    name: Any = None
    breed: Any = None
    sex: Any = None
    birth_date: Any = None
    death_date: Any = None
    notes: Any = None


class MarkDeceasedPayload(BaseModel):
    """Body for marking a chicken as deceased."""

    death_date: Any = None


def serialize_record(record: EggProductionRecord) -> dict[str, object]:
    return {
        "id": str(record.id),
        "user_id": str(record.user_id),
        "date": record.date.isoformat(),
        "count": record.count,
        "created_at": record.created_at.isoformat(),
        "updated_at": record.updated_at.isoformat(),
    }


def serialize_entry(entry: EggEntry) -> dict[str, object]:
    return {"valid": True, "date": entry.date.isoformat(), "count": entry.count}


def serialize_aggregate(aggregate: MonthlyAggregate) -> dict[str, object]:
    return {
        "month_key": aggregate.month_key,
        "total_count": aggregate.total_count,
        "days_recorded": aggregate.days_recorded,
    }


def serialize_chicken(chicken: Chicken) -> dict[str, object]:
    return {
        "id": str(chicken.id),
        "user_id": str(chicken.user_id),
        "name": chicken.name,
        "breed": chicken.breed,
        "sex": chicken.sex.value if chicken.sex else None,
        "birth_date": chicken.birth_date.isoformat() if chicken.birth_date else None,
        "death_date": chicken.death_date.isoformat() if chicken.death_date else None,
        "notes": chicken.notes,
        "created_at": chicken.created_at.isoformat(),
        "updated_at": chicken.updated_at.isoformat(),
    }


def serialize_user(user: UserRecord) -> dict[str, object]:
    return {"id": str(user.id), "email": user.email, "name": user.name}
