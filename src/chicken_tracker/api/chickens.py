"""Chicken profile API endpoints.

Reads of a chicken owned by someone else answer 404 so ids cannot be probed;
mutations answer 403.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Query, Request, Response, status

from chicken_tracker.api.auth import get_container, require_user
from chicken_tracker.api.schemas import (
    ChickenPayload,
    MarkDeceasedPayload,
    serialize_chicken,
)
from chicken_tracker.services.chickens import ChickenStatus

if TYPE_CHECKING:
    from chicken_tracker.containers import AppContainer

router = APIRouter(prefix="/api/chickens", tags=["chickens"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_chicken(
    payload: ChickenPayload,
    request: Request,
    user_id: UUID = Depends(require_user),
) -> dict[str, object]:
    """Create a chicken profile."""
    container: AppContainer = get_container(request)
    chicken = container.chicken_service.create(user_id, payload.model_dump())
    return serialize_chicken(chicken)


@router.get("")
async def list_chickens(
    request: Request,
    chicken_status: ChickenStatus = Query(ChickenStatus.ALL, alias="status"),
    user_id: UUID = Depends(require_user),
) -> list[dict[str, object]]:
    """List the caller's chickens filtered by ``all``, ``active`` or ``deceased``."""
    container: AppContainer = get_container(request)
    chickens = container.chicken_service.list_chickens(user_id, chicken_status)
    return [serialize_chicken(chicken) for chicken in chickens]


@router.get("/{chicken_id}")
async def get_chicken(
    chicken_id: UUID, request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Return one of the caller's chickens."""
    container: AppContainer = get_container(request)
    return serialize_chicken(container.chicken_service.get(chicken_id, user_id))


@router.put("/{chicken_id}")
async def update_chicken(
    chicken_id: UUID,
    payload: ChickenPayload,
    request: Request,
    user_id: UUID = Depends(require_user),
) -> dict[str, object]:
    """Replace the profile of one of the caller's chickens."""
    container: AppContainer = get_container(request)
    chicken = container.chicken_service.update(
        chicken_id, user_id, payload.model_dump()
    )
    return serialize_chicken(chicken)


@router.post("/{chicken_id}/mark-deceased")
async def mark_deceased(
    chicken_id: UUID,
    payload: MarkDeceasedPayload,
    request: Request,
    user_id: UUID = Depends(require_user),
) -> dict[str, object]:
    """Record the death date of one of the caller's chickens."""
    container: AppContainer = get_container(request)
    chicken = container.chicken_service.mark_deceased(
        chicken_id, user_id, payload.death_date
    )
    return serialize_chicken(chicken)


@router.delete("/{chicken_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_chicken(
    chicken_id: UUID, request: Request, user_id: UUID = Depends(require_user)
) -> Response:
    """Delete one of the caller's chickens."""
    container: AppContainer = get_container(request)
    container.chicken_service.delete(chicken_id, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
