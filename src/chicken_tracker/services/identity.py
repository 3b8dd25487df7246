"""Resolution of bearer tokens to user ids."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID


class IdentityProvider(Protocol):
    """Verifies access tokens issued by the authentication service."""

    def resolve_user_id(self, access_token: str) -> UUID | None:
        """Return the user id for a valid token, or ``None``."""


@dataclass
class IdentityService:
    """Turns an ``Authorization`` header into a verified user id."""

    provider: IdentityProvider

    def authenticate(self, authorization: str | None) -> UUID | None:
        """Return the user id for a ``Bearer`` header, or ``None``."""
        if not authorization:
            return None
        scheme, _, token = authorization.partition(" ")
        if scheme.lower() != "bearer" or not token.strip():
            return None
        return self.provider.resolve_user_id(token.strip())
