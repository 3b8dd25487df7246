"""Egg production API endpoints."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request, Response, status

from chicken_tracker.api.auth import get_container, require_user
from chicken_tracker.api.schemas import (
    EggProductionPayload,
    serialize_aggregate,
    serialize_entry,
    serialize_record,
)
from chicken_tracker.services.validation import validate_egg_entry

if TYPE_CHECKING:
    from chicken_tracker.containers import AppContainer

router = APIRouter(prefix="/api/egg-production", tags=["egg-production"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_entry(
    payload: EggProductionPayload,
    request: Request,
    user_id: UUID = Depends(require_user),
) -> dict[str, object]:
    """Log the egg count for a date."""
    container: AppContainer = get_container(request)
    record = container.egg_production_service.create(
        user_id, payload.date, payload.count
    )
    return serialize_record(record)


@router.get("")
async def list_entries(
    request: Request,
    start_date: date | None = None,
    end_date: date | None = None,
    user_id: UUID = Depends(require_user),
) -> list[dict[str, object]]:
    """List the caller's entries, optionally within an inclusive date range."""
    container: AppContainer = get_container(request)
    records = container.egg_production_service.list_records(
        user_id, start_date=start_date, end_date=end_date
    )
    return [serialize_record(record) for record in records]


@router.post("/validate")
async def validate_entry(
    payload: EggProductionPayload,
    request: Request,
    user_id: UUID = Depends(require_user),
) -> dict[str, object]:
    """Check an entry with the same rules used when saving, without saving."""
    container: AppContainer = get_container(request)
    entry = validate_egg_entry(
        payload.date, payload.count, container.egg_production_service.today()
    )
    return serialize_entry(entry)


@router.get("/monthly")
async def monthly_summary(
    request: Request, user_id: UUID = Depends(require_user)
) -> list[dict[str, object]]:
    """Return monthly totals for the trailing window, newest month first."""
    container: AppContainer = get_container(request)
    aggregates = container.egg_production_service.monthly_summary(user_id)
    return [serialize_aggregate(aggregate) for aggregate in aggregates]


@router.get("/{record_id}")
async def get_entry(
    record_id: UUID, request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Return one of the caller's entries."""
    container: AppContainer = get_container(request)
    return serialize_record(container.egg_production_service.get(record_id, user_id))


@router.put("/{record_id}")
async def update_entry(
    record_id: UUID,
    payload: EggProductionPayload,
    request: Request,
    user_id: UUID = Depends(require_user),
) -> dict[str, object]:
    """Replace the date and count of one of the caller's entries."""
    container: AppContainer = get_container(request)
    record = container.egg_production_service.update(
        record_id, user_id, payload.date, payload.count
    )
    return serialize_record(record)


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_entry(
    record_id: UUID, request: Request, user_id: UUID = Depends(require_user)
) -> Response:
    """Delete one of the caller's entries."""
    container: AppContainer = get_container(request)
    container.egg_production_service.delete(record_id, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
