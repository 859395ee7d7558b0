"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from smoke_tracker.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from smoke_tracker.adapters.supabase_smoke_log_repository import (
    SupabaseSmokeLogRepository,
)
from smoke_tracker.adapters.supabase_user_repository import SupabaseUserRepository
from smoke_tracker.config import Settings
from smoke_tracker.services.logs import SaveCooldown, SmokeLogService
from smoke_tracker.services.profiles import ProfileService
from smoke_tracker.services.stats import StatsService
from smoke_tracker.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    profile_service: ProfileService
    smoke_log_service: SmokeLogService
    stats_service: StatsService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_repository = SupabaseUserRepository(supabase_client)
    profile_repository = SupabaseProfileRepository(supabase_client)
    smoke_log_repository = SupabaseSmokeLogRepository(supabase_client)
    tz = resolved_settings.timezone
    smoke_log_service = SmokeLogService(
        repository=smoke_log_repository,
        cooldown=SaveCooldown(seconds=resolved_settings.save_cooldown_seconds),
        tz=tz,
    )
    stats_service = StatsService(
        profile_repository=profile_repository,
        log_repository=smoke_log_repository,
        tz=tz,
        default_average=resolved_settings.default_avg_per_day,
        health_fact_interval_seconds=resolved_settings.health_fact_interval_seconds,
    )
    return AppContainer(
        settings=resolved_settings,
        user_service=UserService(user_repository),
        profile_service=ProfileService(profile_repository, tz=tz),
        smoke_log_service=smoke_log_service,
        stats_service=stats_service,
    )
