"""Baseline profile service."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, tzinfo
from typing import Protocol

from smoke_tracker.domain.profile import SmokingProfile, validate_profile
from smoke_tracker.formatting import DISPLAY_TIMEZONE, calendar_day

_logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


class ProfileRepository(Protocol):
    """Persistence interface for smoking profiles."""

    def get_profile(self, user_id: int) -> SmokingProfile | None:
        """Return the user's profile, if one was saved."""

    def save_profile(self, user_id: int, profile: SmokingProfile) -> None:
        """Insert or replace the user's profile."""


@dataclass
class ProfileService:
    """Service for reading and saving the baseline profile."""

    repository: ProfileRepository
    tz: tzinfo = DISPLAY_TIMEZONE
    clock: Callable[[], datetime] = _utc_now

    def get_profile(self, user_id: int) -> SmokingProfile | None:
        """Return the saved profile or None."""
        return self.repository.get_profile(user_id)

    def is_profile_set(self, user_id: int) -> bool:
        """Return True when the user has saved a baseline."""
        return self.repository.get_profile(user_id) is not None

    def save_profile(self, user_id: int, profile: SmokingProfile) -> SmokingProfile:
        """Validate and persist the profile, replacing any previous one.

        The start year may not be later than the current year in ``tz``.
        """
        current_year = calendar_day(self.clock(), self.tz).year
        validate_profile(profile, current_year)
        self.repository.save_profile(user_id, profile)
        _logger.info("Profile saved: user_id=%s", user_id)
        return profile
