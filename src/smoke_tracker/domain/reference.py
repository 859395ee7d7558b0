"""Static vocabularies shown by the tracker."""

from dataclasses import dataclass
from datetime import datetime, tzinfo

from smoke_tracker.formatting import DISPLAY_TIMEZONE, localize

LOCATIONS: tuple[str, ...] = (
    "Home",
    "Workplace",
    "Commute",
    "Social setting",
    "Outdoors",
    "Other",
)

TRIGGERS: tuple[str, ...] = (
    "Work stress",
    "Deadline",
    "Boredom",
    "After meal",
    "With tea/coffee",
    "Habit",
    "Social",
    "Conflict",
    "Other",
)


@dataclass(frozen=True)
class Mood:
    """One point on the five-point mood scale."""

    value: str
    label: str
    emoji: str


MOODS: tuple[Mood, ...] = (
    Mood(value="very-low", label="Very Low", emoji="😣"),
    Mood(value="low", label="Low", emoji="😟"),
    Mood(value="neutral", label="Neutral", emoji="😐"),
    Mood(value="good", label="Good", emoji="🙂"),
    Mood(value="high", label="High", emoji="😄"),
)

MOOD_VALUES: frozenset[str] = frozenset(mood.value for mood in MOODS)

MONTHS: tuple[str, ...] = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

# Monday-first regardless of locale.
WEEKDAYS: tuple[str, ...] = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

PACK_SIZES: tuple[int, ...] = (10, 20)

EARLIEST_START_YEAR = 1970

HEALTH_FACTS: tuple[str, ...] = (
    "Tobacco use accounts for approximately 1.35 million deaths annually in "
    "India. — WHO, 2023",
    "Tar from smoke accumulates in lung tissue and contributes to chronic "
    "obstruction. — ICMR",
    "Nicotine reaches the brain within 10 seconds of inhalation. — NHS",
    "Tobacco is the leading preventable cause of cancer in India. — ICMR, 2022",
    "Lung function begins recovering within weeks of cessation. — NHS Stop Smoking",
)


def health_fact_at(
    now: datetime, interval_seconds: int = 8, tz: tzinfo = DISPLAY_TIMEZONE
) -> str:
    """Return the health fact on display at ``now`` for a fixed rotation.

    A naive ``now`` is read as wall-clock time in ``tz``.
    """
    if interval_seconds <= 0:
        raise ValueError("interval_seconds must be positive")
    elapsed = localize(now, tz).timestamp()
    index = int(elapsed // interval_seconds) % len(HEALTH_FACTS)
    return HEALTH_FACTS[index]
