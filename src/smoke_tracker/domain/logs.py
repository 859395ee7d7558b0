"""Domain models for recorded smoking events."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from smoke_tracker.domain.errors import InvalidInputError
from smoke_tracker.domain.reference import LOCATIONS, MOOD_VALUES, TRIGGERS


@dataclass(frozen=True)
class SmokeLogDraft:
    """User input for a log entry that has not been stored yet."""

    count: int = 1
    location: str = ""
    triggers: tuple[str, ...] = ()
    mood_before: str = ""
    notes: str = ""


@dataclass(frozen=True)
class SmokeLog:
    """A stored smoking event. Entries are never updated, only deleted."""

    id: UUID
    timestamp: datetime
    count: int
    location: str = ""
    triggers: tuple[str, ...] = ()
    mood_before: str = ""
    notes: str = ""


def validate_draft(draft: SmokeLogDraft) -> SmokeLogDraft:
    """Return the draft unchanged or raise ``InvalidInputError``."""
    _check_count(draft.count)
    if draft.location and draft.location not in LOCATIONS:
        raise InvalidInputError(f"Unknown location: {draft.location!r}")
    for trigger in draft.triggers:
        if trigger not in TRIGGERS:
            raise InvalidInputError(f"Unknown trigger: {trigger!r}")
    if len(set(draft.triggers)) != len(draft.triggers):
        raise InvalidInputError("Triggers must not repeat")
    if draft.mood_before and draft.mood_before not in MOOD_VALUES:
        raise InvalidInputError(f"Unknown mood: {draft.mood_before!r}")
    return draft


def validate_log(log: SmokeLog) -> SmokeLog:
    """Check the invariants the statistics rely on."""
    _check_count(log.count)
    return log


def _check_count(count: int) -> None:
    if isinstance(count, bool) or not isinstance(count, int) or count < 1:
        raise InvalidInputError(f"count must be a positive integer, got {count!r}")
