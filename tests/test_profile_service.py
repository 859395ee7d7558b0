"""Tests for the profile service."""

from dataclasses import replace
from datetime import UTC, datetime

import pytest

from smoke_tracker.domain.errors import InvalidInputError
from smoke_tracker.services.profiles import ProfileService
from tests.conftest import FakeClock, InMemoryProfileRepository


def test_save_profile_replaces_existing(profile) -> None:
    repository = InMemoryProfileRepository()
    service = ProfileService(repository)

    service.save_profile(1, profile)
    updated = service.save_profile(1, replace(profile, avg_per_day=6))

    assert service.get_profile(1) == updated
    assert len(repository.profiles) == 1


def test_profile_is_set_after_first_save(profile) -> None:
    service = ProfileService(InMemoryProfileRepository())

    assert service.is_profile_set(7) is False
    service.save_profile(7, profile)
    assert service.is_profile_set(7) is True


@pytest.mark.parametrize(
    "changes",
    [
        {"start_month": 12},
        {"start_month": -1},
        {"start_year": 1969},
        {"avg_per_day": 0},
        {"per_pack": 15},
        {"nicotine_mg": 0},
        {"tar_mg": -1},
        {"avg_per_day": float("inf")},
        {"avg_per_day": 1e25},
        {"nicotine_mg": float("nan")},
        {"tar_mg": float("inf")},
    ],
)
def test_save_profile_rejects_invalid_values(profile, changes) -> None:
    repository = InMemoryProfileRepository()
    service = ProfileService(repository)

    with pytest.raises(InvalidInputError):
        service.save_profile(1, replace(profile, **changes))

    assert repository.profiles == {}


def test_start_year_uses_display_zone_calendar(profile) -> None:
    # 2025-12-31 20:00 UTC is already 1 January 2026 in IST
    clock = FakeClock(datetime(2025, 12, 31, 20, 0, tzinfo=UTC))
    new_year = replace(profile, start_year=2026, start_month=0)

    service = ProfileService(InMemoryProfileRepository(), clock=clock)
    assert service.save_profile(1, new_year) == new_year

    utc_service = ProfileService(InMemoryProfileRepository(), tz=UTC, clock=clock)
    with pytest.raises(InvalidInputError, match="start_year"):
        utc_service.save_profile(1, new_year)
