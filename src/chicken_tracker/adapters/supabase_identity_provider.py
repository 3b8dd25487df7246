"""Access token verification against Supabase Auth."""

import logging
from dataclasses import dataclass
from uuid import UUID

from supabase import AuthApiError, Client

from chicken_tracker.services.identity import IdentityProvider

logger = logging.getLogger(__name__)


@dataclass
class SupabaseIdentityProvider(IdentityProvider):
    """Resolves Supabase JWTs to user ids via the Auth API."""

    client: Client

    def resolve_user_id(self, access_token: str) -> UUID | None:
        """Return the user id for a valid token, or ``None``."""
        try:
            response = self.client.auth.get_user(access_token)
        except AuthApiError as exc:
            logger.info("Rejected access token", extra={"status": exc.status})
            return None
        if response is None or response.user is None:
            return None
        return UUID(str(response.user.id))
