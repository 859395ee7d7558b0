"""Statistics service for the home dashboard."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, tzinfo

from smoke_tracker.domain.logs import SmokeLog
from smoke_tracker.domain.reference import health_fact_at
from smoke_tracker.domain.stats import Dashboard, DayCount, WindowSummary
from smoke_tracker.formatting import DISPLAY_TIMEZONE
from smoke_tracker.services.engine import (
    DEFAULT_AVERAGE_PER_DAY,
    DEFAULT_WINDOW_DAYS,
    cumulative_totals,
    duration_since_start,
    summarize_window,
    today_snapshot,
    trailing_window,
)
from smoke_tracker.services.logs import SmokeLogRepository
from smoke_tracker.services.profiles import ProfileRepository


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class StatsService:
    """Loads source data and recomputes every displayed figure."""

    profile_repository: ProfileRepository
    log_repository: SmokeLogRepository
    tz: tzinfo = DISPLAY_TIMEZONE
    default_average: float = DEFAULT_AVERAGE_PER_DAY
    window_days: int = DEFAULT_WINDOW_DAYS
    health_fact_interval_seconds: int = 8
    clock: Callable[[], datetime] = _utc_now

    def dashboard(self, user_id: int, now: datetime | None = None) -> Dashboard:
        """Return today's snapshot, lifetime estimates and the 7-day window."""
        moment = now or self.clock()
        profile = self.profile_repository.get_profile(user_id)
        logs = self.log_repository.list_logs(user_id)

        duration = (
            duration_since_start(profile, moment, self.tz) if profile else None
        )
        cumulative = cumulative_totals(
            profile, duration.total_months if duration else None
        )
        week, summary = self._window(logs, moment)
        return Dashboard(
            duration=duration,
            cumulative=cumulative,
            today=today_snapshot(
                logs, profile, moment, self.tz, default_average=self.default_average
            ),
            week=week,
            week_summary=summary,
            health_fact=health_fact_at(
                moment, self.health_fact_interval_seconds, self.tz
            ),
        )

    def week(
        self, user_id: int, now: datetime | None = None
    ) -> tuple[list[DayCount], WindowSummary]:
        """Return the trailing window and its summary."""
        moment = now or self.clock()
        return self._window(self.log_repository.list_logs(user_id), moment)

    def _window(
        self, logs: list[SmokeLog], moment: datetime
    ) -> tuple[list[DayCount], WindowSummary]:
        window = trailing_window(logs, moment, self.window_days, self.tz)
        return window, summarize_window(window)
