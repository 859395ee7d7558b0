"""Smoke log recording and history service."""

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta, tzinfo
from typing import Protocol
from uuid import UUID

from smoke_tracker.domain.errors import CooldownActiveError
from smoke_tracker.domain.logs import SmokeLog, SmokeLogDraft, validate_draft
from smoke_tracker.formatting import DISPLAY_TIMEZONE
from smoke_tracker.services.engine import (
    export_summary,
    filter_logs,
    group_by_day,
    recent_logs,
)

DEFAULT_COOLDOWN_SECONDS = 10

_logger = logging.getLogger(__name__)


class SmokeLogRepository(Protocol):
    """Persistence interface for smoke logs."""

    def create_log(
        self, user_id: int, timestamp: datetime, draft: SmokeLogDraft
    ) -> SmokeLog:
        """Insert a log entry and return it with its assigned id."""

    def list_logs(self, user_id: int) -> list[SmokeLog]:
        """Return the user's log entries, newest first."""

    def delete_log(self, user_id: int, log_id: UUID) -> bool:
        """Delete a log entry, returning False when it did not exist."""


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class SaveCooldown:
    """Per-user "disabled until" window applied after each save."""

    seconds: int = DEFAULT_COOLDOWN_SECONDS
    disabled_until: dict[int, datetime] = field(default_factory=dict)

    def remaining(self, user_id: int, now: datetime) -> int:
        """Return whole seconds left before the user may save again."""
        until = self.disabled_until.get(user_id)
        if until is None:
            return 0
        if now >= until:
            del self.disabled_until[user_id]
            return 0
        return math.ceil((until - now).total_seconds())

    def check(self, user_id: int, now: datetime) -> None:
        """Raise ``CooldownActiveError`` while the window is open."""
        remaining = self.remaining(user_id, now)
        if remaining > 0:
            raise CooldownActiveError(remaining)

    def start(self, user_id: int, now: datetime) -> None:
        """Open the window starting at ``now``."""
        if self.seconds > 0:
            self.disabled_until[user_id] = now + timedelta(seconds=self.seconds)


@dataclass
class SmokeLogService:
    """Records entries and serves the history views."""

    repository: SmokeLogRepository
    cooldown: SaveCooldown = field(default_factory=SaveCooldown)
    tz: tzinfo = DISPLAY_TIMEZONE
    clock: Callable[[], datetime] = _utc_now

    def record(self, user_id: int, draft: SmokeLogDraft) -> SmokeLog:
        """Persist a new entry stamped with the current time."""
        now = self.clock()
        self.cooldown.check(user_id, now)
        validate_draft(draft)
        log = self.repository.create_log(user_id, now, draft)
        self.cooldown.start(user_id, now)
        _logger.info(
            "Smoke log saved: user_id=%s log_id=%s count=%s",
            user_id,
            log.id,
            log.count,
        )
        return log

    def list_logs(self, user_id: int, query: str | None = None) -> list[SmokeLog]:
        """Return entries newest first, optionally filtered."""
        return filter_logs(self.repository.list_logs(user_id), query)

    def history(
        self, user_id: int, query: str | None = None
    ) -> list[tuple[str, list[SmokeLog]]]:
        """Return filtered entries grouped by calendar day."""
        return group_by_day(self.list_logs(user_id, query), self.tz)

    def recent(self, user_id: int, limit: int = 5) -> list[SmokeLog]:
        """Return the latest entries for the recent-entries card."""
        return recent_logs(self.repository.list_logs(user_id), limit, self.tz)

    def delete(self, user_id: int, log_id: UUID) -> bool:
        """Remove a single entry by id."""
        deleted = self.repository.delete_log(user_id, log_id)
        if deleted:
            _logger.info("Smoke log removed: user_id=%s log_id=%s", user_id, log_id)
        return deleted

    def export(self, user_id: int) -> str:
        """Return the plain-text summary of every entry."""
        return export_summary(self.repository.list_logs(user_id), self.tz)

    def cooldown_remaining(self, user_id: int) -> int:
        """Return seconds until the user may save again."""
        return self.cooldown.remaining(user_id, self.clock())
