"""Admin API endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Header, HTTPException, Request, Response, status

from chicken_tracker.api.schemas import serialize_user

if TYPE_CHECKING:
    from chicken_tracker.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/health", dependencies=[Depends(require_admin)])
async def admin_health() -> dict[str, str]:
    """Admin health check endpoint."""
    return {"status": "ok"}


@router.get("/users", dependencies=[Depends(require_admin)])
async def list_users(request: Request) -> dict[str, object]:
    """Return all user accounts."""
    container: AppContainer = request.app.state.container
    users = container.user_service.list_users()
    return {"users": [serialize_user(user) for user in users]}


@router.delete(
    "/users/{user_id}",
    dependencies=[Depends(require_admin)],
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_user(user_id: UUID, request: Request) -> Response:
    """Delete a user account together with its chickens and egg records."""
    container: AppContainer = request.app.state.container
    container.user_service.delete_account(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
