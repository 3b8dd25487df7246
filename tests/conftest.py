"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import UTC, date, datetime, timedelta
from uuid import UUID, uuid4

import pytest

from chicken_tracker.config import Settings
from chicken_tracker.containers import AppContainer
from chicken_tracker.domain.chickens import Chicken, ChickenProfile
from chicken_tracker.domain.eggs import EggProductionRecord
from chicken_tracker.domain.errors import UniqueViolationError
from chicken_tracker.domain.models import UserRecord
from chicken_tracker.services.chickens import (
    ChickenRepository,
    ChickenService,
    ChickenStatus,
)
from chicken_tracker.services.eggs import EggProductionRepository, EggProductionService
from chicken_tracker.services.identity import IdentityProvider, IdentityService
from chicken_tracker.services.users import UserRepository, UserService

NOW = datetime(2025, 10, 20, 12, 0, tzinfo=UTC)


@dataclass
class FakeClock:
    """Clock that only moves when told to."""

    now: datetime = NOW

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now = self.now + timedelta(**kwargs)


@dataclass
class InMemoryDatabase:
    """Tables shared by the in-memory repositories."""

    users: dict[UUID, UserRecord] = field(default_factory=dict)
    egg_production: dict[UUID, EggProductionRecord] = field(default_factory=dict)
    chickens: dict[UUID, Chicken] = field(default_factory=dict)

    def add_user(self, email: str, name: str | None = None) -> UserRecord:
        user = UserRecord(id=uuid4(), email=email, name=name)
        self.users[user.id] = user
        return user


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    database: InMemoryDatabase = field(default_factory=InMemoryDatabase)

    def get_user(self, user_id: UUID) -> UserRecord | None:
        return self.database.users.get(user_id)

    def list_users(self) -> list[UserRecord]:
        return list(self.database.users.values())

    def delete_user(self, user_id: UUID) -> None:
        self.database.users.pop(user_id, None)
        self.database.egg_production = {
            record_id: record
            for record_id, record in self.database.egg_production.items()
            if record.user_id != user_id
        }
        self.database.chickens = {
            chicken_id: chicken
            for chicken_id, chicken in self.database.chickens.items()
            if chicken.user_id != user_id
        }


@dataclass
class InMemoryEggProductionRepository(EggProductionRepository):
    """In-memory egg production repository enforcing ``(user_id, date)``."""

    database: InMemoryDatabase = field(default_factory=InMemoryDatabase)
    clock: FakeClock = field(default_factory=FakeClock)

    def create_record(
        self, user_id: UUID, entry_date: date, count: int
    ) -> EggProductionRecord:
        self._check_unique(user_id, entry_date, exclude=None)
        now = self.clock()
        record = EggProductionRecord(
            id=uuid4(),
            user_id=user_id,
            date=entry_date,
            count=count,
            created_at=now,
            updated_at=now,
        )
        self.database.egg_production[record.id] = record
        return record

    def get_record(self, record_id: UUID) -> EggProductionRecord | None:
        return self.database.egg_production.get(record_id)

    def update_record(
        self, record_id: UUID, entry_date: date, count: int, updated_at: datetime
    ) -> EggProductionRecord:
        current = self.database.egg_production[record_id]
        self._check_unique(current.user_id, entry_date, exclude=record_id)
        updated = replace(current, date=entry_date, count=count, updated_at=updated_at)
        self.database.egg_production[record_id] = updated
        return updated

    def delete_record(self, record_id: UUID) -> None:
        self.database.egg_production.pop(record_id, None)

    def list_records(
        self, user_id: UUID, start: date | None, end: date | None
    ) -> list[EggProductionRecord]:
        return [
            record
            for record in self.database.egg_production.values()
            if record.user_id == user_id
            and (start is None or record.date >= start)
            and (end is None or record.date <= end)
        ]

    def _check_unique(
        self, user_id: UUID, entry_date: date, exclude: UUID | None
    ) -> None:
        for record in self.database.egg_production.values():
            if (
                record.id != exclude
                and record.user_id == user_id
                and record.date == entry_date
            ):
                raise UniqueViolationError("egg_production_user_id_date_key")


@dataclass
class InMemoryChickenRepository(ChickenRepository):
    """In-memory chicken repository for tests."""

    database: InMemoryDatabase = field(default_factory=InMemoryDatabase)
    clock: FakeClock = field(default_factory=FakeClock)

    def create_chicken(self, user_id: UUID, profile: ChickenProfile) -> Chicken:
        now = self.clock()
        chicken = Chicken(
            id=uuid4(),
            user_id=user_id,
            name=profile.name,
            breed=profile.breed,
            sex=profile.sex,
            birth_date=profile.birth_date,
            death_date=profile.death_date,
            notes=profile.notes,
            created_at=now,
            updated_at=now,
        )
        self.database.chickens[chicken.id] = chicken
        return chicken

    def get_chicken(self, chicken_id: UUID) -> Chicken | None:
        return self.database.chickens.get(chicken_id)

    def list_chickens(self, user_id: UUID, status: ChickenStatus) -> list[Chicken]:
        chickens = [
            chicken
            for chicken in self.database.chickens.values()
            if chicken.user_id == user_id
        ]
        if status == ChickenStatus.ACTIVE:
            return [chicken for chicken in chickens if not chicken.is_deceased]
        if status == ChickenStatus.DECEASED:
            return [chicken for chicken in chickens if chicken.is_deceased]
        return chickens

    def update_chicken(
        self, chicken_id: UUID, profile: ChickenProfile, updated_at: datetime
    ) -> Chicken:
        updated = replace(
            self.database.chickens[chicken_id],
            name=profile.name,
            breed=profile.breed,
            sex=profile.sex,
            birth_date=profile.birth_date,
            death_date=profile.death_date,
            notes=profile.notes,
            updated_at=updated_at,
        )
        self.database.chickens[chicken_id] = updated
        return updated

    def set_death_date(
        self, chicken_id: UUID, death_date: date, updated_at: datetime
    ) -> Chicken:
        updated = replace(
            self.database.chickens[chicken_id],
            death_date=death_date,
            updated_at=updated_at,
        )
        self.database.chickens[chicken_id] = updated
        return updated

    def delete_chicken(self, chicken_id: UUID) -> None:
        self.database.chickens.pop(chicken_id, None)


@dataclass
class FakeIdentityProvider(IdentityProvider):
    """Identity provider backed by a token table."""

    tokens: dict[str, UUID] = field(default_factory=dict)

    def resolve_user_id(self, access_token: str) -> UUID | None:
        return self.tokens.get(access_token)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service-key",
        admin_token="admin-token",
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def database() -> InMemoryDatabase:
    return InMemoryDatabase()


@pytest.fixture
def egg_repository(
    database: InMemoryDatabase, clock: FakeClock
) -> InMemoryEggProductionRepository:
    return InMemoryEggProductionRepository(database=database, clock=clock)


@pytest.fixture
def egg_service(
    egg_repository: InMemoryEggProductionRepository, clock: FakeClock
) -> EggProductionService:
    return EggProductionService(repository=egg_repository, clock=clock)


@pytest.fixture
def chicken_service(database: InMemoryDatabase, clock: FakeClock) -> ChickenService:
    return ChickenService(
        repository=InMemoryChickenRepository(database=database, clock=clock),
        clock=clock,
    )


@pytest.fixture
def identity_provider() -> FakeIdentityProvider:
    return FakeIdentityProvider()


@pytest.fixture
def alice(
    database: InMemoryDatabase, identity_provider: FakeIdentityProvider
) -> UserRecord:
    user = database.add_user("alice@example.com", "Alice")
    identity_provider.tokens["alice-token"] = user.id
    return user


@pytest.fixture
def bob(
    database: InMemoryDatabase, identity_provider: FakeIdentityProvider
) -> UserRecord:
    user = database.add_user("bob@example.com", "Bob")
    identity_provider.tokens["bob-token"] = user.id
    return user


@pytest.fixture
def container(
    settings: Settings,
    database: InMemoryDatabase,
    identity_provider: FakeIdentityProvider,
    egg_service: EggProductionService,
    chicken_service: ChickenService,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        identity_service=IdentityService(identity_provider),
        user_service=UserService(InMemoryUserRepository(database=database)),
        egg_production_service=egg_service,
        chicken_service=chicken_service,
        close_resources=close_resources,
    )


def auth_headers(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
