"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from chicken_tracker.adapters.supabase_chicken_repository import (
    SupabaseChickenRepository,
)
from chicken_tracker.adapters.supabase_egg_production_repository import (
    SupabaseEggProductionRepository,
)
from chicken_tracker.adapters.supabase_identity_provider import (
    SupabaseIdentityProvider,
)
from chicken_tracker.adapters.supabase_user_repository import SupabaseUserRepository
from chicken_tracker.config import Settings
from chicken_tracker.services.chickens import ChickenService
from chicken_tracker.services.eggs import EggProductionService
from chicken_tracker.services.identity import IdentityService
from chicken_tracker.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    identity_service: IdentityService
    user_service: UserService
    egg_production_service: EggProductionService
    chicken_service: ChickenService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    identity_service = IdentityService(SupabaseIdentityProvider(supabase_client))
    user_service = UserService(SupabaseUserRepository(supabase_client))
    egg_production_service = EggProductionService(
        repository=SupabaseEggProductionRepository(supabase_client),
        timezone=resolved_settings.timezone,
        window_months=resolved_settings.monthly_window_months,
    )
    chicken_service = ChickenService(
        repository=SupabaseChickenRepository(supabase_client),
        timezone=resolved_settings.timezone,
    )

    async def close_resources() -> None:
        supabase_client.postgrest.aclose()

    return AppContainer(
        settings=resolved_settings,
        identity_service=identity_service,
        user_service=user_service,
        egg_production_service=egg_production_service,
        chicken_service=chicken_service,
        close_resources=close_resources,
    )
