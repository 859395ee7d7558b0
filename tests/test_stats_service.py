"""Tests for the dashboard statistics service."""

from dataclasses import replace
from datetime import date

from smoke_tracker.domain.reference import HEALTH_FACTS
from smoke_tracker.domain.stats import BaselineState
from smoke_tracker.services.stats import StatsService
from tests.conftest import (
    FakeClock,
    InMemoryProfileRepository,
    InMemorySmokeLogRepository,
    ist,
)


def test_dashboard_recomputes_from_repositories(profile) -> None:
    profiles = InMemoryProfileRepository(profiles={1: profile})
    logs = InMemorySmokeLogRepository()
    logs.add(1, ist(2024, 1, 15, 8), count=3)
    logs.add(1, ist(2024, 1, 14, 22), count=5)
    service = StatsService(profiles, logs, clock=FakeClock())

    dashboard = service.dashboard(1)

    assert dashboard.duration is not None
    assert (dashboard.duration.years, dashboard.duration.months) == (4, 0)
    assert dashboard.cumulative.total_cigarettes == 14611
    assert dashboard.today.total_today == 3
    assert dashboard.today.state is BaselineState.WELL_BELOW
    assert [day.count for day in dashboard.week][-2:] == [5, 3]
    assert dashboard.week[-1].day == date(2024, 1, 15)
    assert dashboard.week_summary.maximum == 5
    assert dashboard.health_fact in HEALTH_FACTS

    logs.add(1, ist(2024, 1, 15, 9), count=4)

    assert service.dashboard(1).today.total_today == 7


def test_dashboard_without_profile() -> None:
    logs = InMemorySmokeLogRepository()
    logs.add(1, ist(2024, 1, 15, 8), count=2)
    service = StatsService(
        InMemoryProfileRepository(), logs, default_average=12, clock=FakeClock()
    )

    dashboard = service.dashboard(1)

    assert dashboard.duration is None
    assert dashboard.cumulative.known is False
    assert dashboard.today.average_baseline == 12
    assert dashboard.today.delta == -10


def test_dashboard_with_future_start_reports_unknown_totals(profile) -> None:
    future = replace(profile, start_year=2024, start_month=6)
    service = StatsService(
        InMemoryProfileRepository(profiles={1: future}),
        InMemorySmokeLogRepository(),
        clock=FakeClock(),
    )

    dashboard = service.dashboard(1)

    assert dashboard.duration is None
    assert dashboard.cumulative.known is False
    assert dashboard.today.average_baseline == 10


def test_week_uses_explicit_now() -> None:
    logs = InMemorySmokeLogRepository()
    logs.add(1, ist(2024, 2, 29, 23, 30), count=2)
    service = StatsService(InMemoryProfileRepository(), logs, clock=FakeClock())

    week, summary = service.week(1, now=ist(2024, 3, 1, 0, 15))

    assert week[-1].day == date(2024, 3, 1)
    assert week[-2].count == 2
    assert summary.maximum == 2
