"""Request authentication dependencies."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import Header, HTTPException, Request, status

if TYPE_CHECKING:
    from chicken_tracker.containers import AppContainer

UNAUTHORIZED_MESSAGE = "Unauthorized. Please sign in."


def get_container(request: Request) -> AppContainer:
    """Return the dependency container attached to the app."""
    return request.app.state.container


async def require_user(
    request: Request,
    authorization: str | None = Header(default=None),
) -> UUID:
    """Return the verified id of the calling user or reject with 401."""
    container = get_container(request)
    user_id = container.identity_service.authenticate(authorization)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail=UNAUTHORIZED_MESSAGE
        )
    return user_id
