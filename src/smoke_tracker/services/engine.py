"""Pure derived-statistics calculations.

Every function takes its inputs (profile, logs and the current instant)
explicitly and returns new values. Calendar days are resolved in a single
time zone, ``DISPLAY_TIMEZONE`` unless the caller passes another one.
"""

from collections import Counter
from collections.abc import Iterable, Sequence
from datetime import date, datetime, timedelta, tzinfo

from smoke_tracker.domain.errors import InvalidInputError
from smoke_tracker.domain.logs import SmokeLog, validate_log
from smoke_tracker.domain.profile import SmokingProfile, validate_profile
from smoke_tracker.domain.reference import WEEKDAYS
from smoke_tracker.domain.stats import (
    BaselineState,
    CumulativeTotals,
    DayCount,
    Duration,
    TodaySnapshot,
    WindowSummary,
)
from smoke_tracker.formatting import (
    DISPLAY_TIMEZONE,
    calendar_day,
    format_day_key,
    format_time_of_day,
    localize,
    round_half_up,
)

AVERAGE_DAYS_PER_MONTH = 30.44
DEFAULT_AVERAGE_PER_DAY = 10.0
DEFAULT_WINDOW_DAYS = 7
MONTHS_PER_YEAR = 12
MG_PER_GRAM = 1000


def duration_since_start(
    profile: SmokingProfile, now: datetime, tz: tzinfo = DISPLAY_TIMEZONE
) -> Duration | None:
    """Return elapsed whole months since the start month, or None if in future."""
    validate_profile(profile)
    today = calendar_day(now, tz)
    total_months = (today.year - profile.start_year) * MONTHS_PER_YEAR + (
        today.month - 1 - profile.start_month
    )
    if total_months < 0:
        return None
    return Duration(
        years=total_months // MONTHS_PER_YEAR,
        months=total_months % MONTHS_PER_YEAR,
        total_months=total_months,
    )


def cumulative_totals(
    profile: SmokingProfile, total_months: int | None
) -> CumulativeTotals:
    """Estimate lifetime consumption from the baseline.

    A month is approximated as 30.44 days. ``None`` or a negative month count
    means the duration is unknown and yields ``CumulativeTotals.unknown()``.
    """
    if total_months is None or total_months < 0:
        return CumulativeTotals.unknown()
    validate_profile(profile)
    total_days = total_months * AVERAGE_DAYS_PER_MONTH
    total_cigarettes = int(round_half_up(total_days * profile.avg_per_day))
    nicotine_g = total_cigarettes * profile.nicotine_mg / MG_PER_GRAM
    tar_g = total_cigarettes * profile.tar_mg / MG_PER_GRAM
    return CumulativeTotals(
        total_cigarettes=total_cigarettes,
        pack_equivalents=int(round_half_up(total_cigarettes / profile.per_pack)),
        nicotine_g=round_half_up(nicotine_g, 1),
        tar_g=round_half_up(tar_g, 1),
    )


def daily_aggregate(
    logs: Iterable[SmokeLog], day: date | datetime, tz: tzinfo = DISPLAY_TIMEZONE
) -> int:
    """Sum counts of entries on the same calendar day as ``day``."""
    target = calendar_day(day, tz)
    return _counts_by_day(logs, tz)[target]


def trailing_window(
    logs: Iterable[SmokeLog],
    now: datetime,
    days: int = DEFAULT_WINDOW_DAYS,
    tz: tzinfo = DISPLAY_TIMEZONE,
) -> list[DayCount]:
    """Return one entry per calendar day, oldest first, ending today."""
    if days < 1:
        raise InvalidInputError(f"days must be at least 1, got {days}")
    today = calendar_day(now, tz)
    counts = _counts_by_day(logs, tz)
    window = []
    for offset in range(days - 1, -1, -1):
        day = today - timedelta(days=offset)
        window.append(
            DayCount(
                day=day,
                weekday=WEEKDAYS[day.weekday()],
                count=counts[day],
                is_today=offset == 0,
            )
        )
    return window


def summarize_window(window: Sequence[DayCount]) -> WindowSummary:
    """Return average, lowest and highest counts over a window."""
    if not window:
        raise InvalidInputError("Cannot summarize an empty window")
    counts = [entry.count for entry in window]
    return WindowSummary(
        average=round_half_up(sum(counts) / len(counts), 1),
        minimum=min(counts),
        maximum=max(counts),
        scale_max=max(max(counts), 1),
    )


def classify_delta(delta: float) -> BaselineState:
    """Classify today's difference from the daily average."""
    if delta >= 0:
        return BaselineState.AT_OR_ABOVE
    if delta >= -1:
        return BaselineState.MARGINALLY_BELOW
    return BaselineState.WELL_BELOW


def today_snapshot(
    logs: Iterable[SmokeLog],
    profile: SmokingProfile | None,
    now: datetime,
    tz: tzinfo = DISPLAY_TIMEZONE,
    default_average: float = DEFAULT_AVERAGE_PER_DAY,
) -> TodaySnapshot:
    """Return today's totals and how they compare with the baseline."""
    total_today = daily_aggregate(logs, now, tz)
    if profile is None:
        nicotine_mg = tar_mg = pack_equivalent = 0.0
        average = default_average
    else:
        validate_profile(profile)
        nicotine_mg = round_half_up(total_today * profile.nicotine_mg, 1)
        tar_mg = round_half_up(total_today * profile.tar_mg, 1)
        pack_equivalent = round_half_up(total_today / profile.per_pack, 1)
        average = profile.avg_per_day
    delta = total_today - average
    return TodaySnapshot(
        total_today=total_today,
        nicotine_mg=nicotine_mg,
        tar_mg=tar_mg,
        pack_equivalent=pack_equivalent,
        average_baseline=average,
        delta=delta,
        state=classify_delta(delta),
        progress_percent=min(100.0, total_today / max(average, 1) * 100),
        comparison=_describe_delta(delta),
    )


def filter_logs(logs: Sequence[SmokeLog], query: str | None) -> list[SmokeLog]:
    """Case-insensitive match on location, triggers or notes, order preserved."""
    if not query:
        return list(logs)
    needle = query.lower()
    return [
        log
        for log in logs
        if needle in log.location.lower()
        or any(needle in trigger.lower() for trigger in log.triggers)
        or needle in log.notes.lower()
    ]


def group_by_day(
    logs: Iterable[SmokeLog], tz: tzinfo = DISPLAY_TIMEZONE
) -> list[tuple[str, list[SmokeLog]]]:
    """Group entries by ``DD/MM/YYYY`` key in first-occurrence order."""
    groups: dict[str, list[SmokeLog]] = {}
    for log in logs:
        groups.setdefault(format_day_key(log.timestamp, tz), []).append(log)
    return list(groups.items())


def recent_logs(
    logs: Iterable[SmokeLog], limit: int = 5, tz: tzinfo = DISPLAY_TIMEZONE
) -> list[SmokeLog]:
    """Return the newest ``limit`` entries, newest first."""
    ordered = sorted(logs, key=lambda log: localize(log.timestamp, tz), reverse=True)
    return ordered[: max(limit, 0)]


def export_summary(logs: Iterable[SmokeLog], tz: tzinfo = DISPLAY_TIMEZONE) -> str:
    """Render one plain-text line per entry for sharing."""
    lines = []
    for log in logs:
        lines.append(
            f"{format_day_key(log.timestamp, tz)} "
            f"{format_time_of_day(log.timestamp, tz)} | "
            f"{log.count} cigarette(s) | {log.location} | "
            f"{', '.join(log.triggers)} | {log.notes or '-'}"
        )
    return "\n".join(lines)


def _counts_by_day(logs: Iterable[SmokeLog], tz: tzinfo) -> Counter[date]:
    counts: Counter[date] = Counter()
    for log in logs:
        validate_log(log)
        counts[calendar_day(log.timestamp, tz)] += log.count
    return counts


def _describe_delta(delta: float) -> str:
    if delta <= 0:
        return f"{_plain(abs(delta))} fewer than your daily average"
    return f"{_plain(delta)} above your daily average"


def _plain(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.1f}"
