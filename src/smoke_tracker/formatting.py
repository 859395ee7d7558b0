"""Display formatting and calendar-day helpers."""

from datetime import date, datetime, tzinfo
from decimal import ROUND_HALF_UP, Decimal
from zoneinfo import ZoneInfo

from smoke_tracker.domain.errors import InvalidInputError
from smoke_tracker.domain.stats import Duration

DISPLAY_TIMEZONE = ZoneInfo("Asia/Kolkata")

_NOON = 12


def round_half_up(value: float, places: int = 0) -> float:
    """Round halves away from zero, like ``Math.round`` for positive values."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def format_indian_number(value: float) -> str:
    """Format a number with Indian digit grouping (12,34,567)."""
    if value < 0:
        raise InvalidInputError(f"Cannot group a negative number: {value}")
    digits = str(int(round_half_up(value)))
    if len(digits) <= 3:  # noqa: PLR2004
        return digits
    groups = [digits[-3:]]
    remaining = digits[:-3]
    while len(remaining) > 2:  # noqa: PLR2004
        groups.insert(0, remaining[-2:])
        remaining = remaining[:-2]
    if remaining:
        groups.insert(0, remaining)
    return ",".join(groups)


def localize(moment: datetime, tz: tzinfo = DISPLAY_TIMEZONE) -> datetime:
    """Convert to ``tz``, reading naive values as wall-clock time there."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=tz)
    return moment.astimezone(tz)


def calendar_day(moment: datetime | date, tz: tzinfo = DISPLAY_TIMEZONE) -> date:
    """Return the calendar day of an instant in the canonical time zone."""
    if not isinstance(moment, datetime):
        return moment
    return localize(moment, tz).date()


def format_day_key(moment: datetime | date, tz: tzinfo = DISPLAY_TIMEZONE) -> str:
    """Return the ``DD/MM/YYYY`` key used for grouping and display."""
    return calendar_day(moment, tz).strftime("%d/%m/%Y")


def format_time_of_day(moment: datetime, tz: tzinfo = DISPLAY_TIMEZONE) -> str:
    """Return a 12-hour clock time such as ``9:05 PM``. Display only."""
    local = localize(moment, tz)
    hour = local.hour % _NOON or _NOON
    marker = "AM" if local.hour < _NOON else "PM"
    return f"{hour}:{local.minute:02d} {marker}"


def format_duration(duration: Duration) -> str:
    """Return the profile card label, e.g. ``4 years, 2 months``."""
    return f"{duration.years} years, {duration.months} months"
