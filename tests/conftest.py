"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

import pytest

from smoke_tracker.config import Settings
from smoke_tracker.containers import AppContainer
from smoke_tracker.domain.errors import StorageError
from smoke_tracker.domain.logs import SmokeLog, SmokeLogDraft
from smoke_tracker.domain.models import UserRecord
from smoke_tracker.domain.profile import SmokingProfile
from smoke_tracker.formatting import DISPLAY_TIMEZONE
from smoke_tracker.services.logs import (
    SaveCooldown,
    SmokeLogRepository,
    SmokeLogService,
)
from smoke_tracker.services.profiles import ProfileRepository, ProfileService
from smoke_tracker.services.stats import StatsService
from smoke_tracker.services.users import UserRepository, UserService

# 2024-01-15 10:00 IST
FIXED_NOW = datetime(2024, 1, 15, 4, 30, tzinfo=UTC)


@dataclass
class FakeClock:
    """Clock returning a settable instant."""

    now: datetime = FIXED_NOW

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now = self.now + timedelta(seconds=seconds)


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: dict[int, UserRecord] = field(default_factory=dict)

    def upsert_user(self, user_id: int) -> UserRecord:
        return self.users.setdefault(user_id, UserRecord(id=user_id))


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    profiles: dict[int, SmokingProfile] = field(default_factory=dict)
    fail: bool = False

    def get_profile(self, user_id: int) -> SmokingProfile | None:
        if self.fail:
            raise StorageError("Failed to load profile")
        return self.profiles.get(user_id)

    def save_profile(self, user_id: int, profile: SmokingProfile) -> None:
        if self.fail:
            raise StorageError("Failed to save profile")
        self.profiles[user_id] = profile


@dataclass
class InMemorySmokeLogRepository(SmokeLogRepository):
    """In-memory smoke log repository for tests."""

    logs: dict[int, list[SmokeLog]] = field(default_factory=dict)

    def create_log(
        self, user_id: int, timestamp: datetime, draft: SmokeLogDraft
    ) -> SmokeLog:
        log = SmokeLog(
            id=uuid4(),
            timestamp=timestamp,
            count=draft.count,
            location=draft.location,
            triggers=draft.triggers,
            mood_before=draft.mood_before,
            notes=draft.notes,
        )
        self.logs.setdefault(user_id, []).append(log)
        return log

    def list_logs(self, user_id: int) -> list[SmokeLog]:
        return sorted(
            self.logs.get(user_id, []), key=lambda log: log.timestamp, reverse=True
        )

    def delete_log(self, user_id: int, log_id: UUID) -> bool:
        entries = self.logs.get(user_id, [])
        remaining = [log for log in entries if log.id != log_id]
        self.logs[user_id] = remaining
        return len(remaining) != len(entries)

    def add(  # noqa: ANN003
        self, user_id: int, timestamp: datetime, count: int = 1, **kwargs
    ) -> SmokeLog:
        draft = SmokeLogDraft(count=count, **kwargs)
        return self.create_log(user_id, timestamp, draft)


def make_log(timestamp: datetime, count: int = 1, **kwargs) -> SmokeLog:  # noqa: ANN003
    """Build a stored log entry with a fresh id."""
    return SmokeLog(id=uuid4(), timestamp=timestamp, count=count, **kwargs)


def ist(year: int, month: int, day: int, hour: int = 12, minute: int = 0) -> datetime:
    """Return an aware datetime in the display time zone."""
    return datetime(year, month, day, hour, minute, tzinfo=DISPLAY_TIMEZONE)


@pytest.fixture
def profile() -> SmokingProfile:
    return SmokingProfile(
        start_month=0,
        start_year=2020,
        avg_per_day=10,
        per_pack=20,
        nicotine_mg=0.8,
        tar_mg=8,
        brand="Gold Flake Kings",
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        api_token="api-token",
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def log_repository() -> InMemorySmokeLogRepository:
    return InMemorySmokeLogRepository()


@pytest.fixture
def container(
    settings: Settings,
    clock: FakeClock,
    profile_repository: InMemoryProfileRepository,
    log_repository: InMemorySmokeLogRepository,
) -> AppContainer:
    tz = settings.timezone
    return AppContainer(
        settings=settings,
        user_service=UserService(InMemoryUserRepository()),
        profile_service=ProfileService(profile_repository, tz=tz, clock=clock),
        smoke_log_service=SmokeLogService(
            repository=log_repository,
            cooldown=SaveCooldown(seconds=settings.save_cooldown_seconds),
            tz=tz,
            clock=clock,
        ),
        stats_service=StatsService(
            profile_repository=profile_repository,
            log_repository=log_repository,
            tz=tz,
            default_average=settings.default_avg_per_day,
            clock=clock,
        ),
    )
