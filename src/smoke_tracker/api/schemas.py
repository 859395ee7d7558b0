"""Pydantic request and response models for the tracker API."""

from datetime import date, datetime, tzinfo
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from smoke_tracker.domain.logs import SmokeLog, SmokeLogDraft
from smoke_tracker.domain.profile import (
    DEFAULT_PROFILE,
    MAX_AVG_PER_DAY,
    MAX_NICOTINE_MG,
    MAX_TAR_MG,
    SmokingProfile,
)
from smoke_tracker.domain.reference import (
    EARLIEST_START_YEAR,
    HEALTH_FACTS,
    LOCATIONS,
    MONTHS,
    MOODS,
    PACK_SIZES,
    TRIGGERS,
    WEEKDAYS,
)
from smoke_tracker.domain.stats import (
    CumulativeTotals,
    Dashboard,
    DayCount,
    Duration,
    TodaySnapshot,
    WindowSummary,
)
from smoke_tracker.formatting import (
    format_day_key,
    format_duration,
    format_indian_number,
    format_time_of_day,
)


class ProfilePayload(BaseModel):
    """Baseline profile as submitted by the client."""

    start_month: int = Field(default=DEFAULT_PROFILE.start_month, ge=0, le=11)
    start_year: int = Field(default=DEFAULT_PROFILE.start_year, ge=EARLIEST_START_YEAR)
    avg_per_day: float = Field(
        default=DEFAULT_PROFILE.avg_per_day,
        gt=0,
        le=MAX_AVG_PER_DAY,
        allow_inf_nan=False,
    )
    brand: str = ""
    per_pack: int = DEFAULT_PROFILE.per_pack
    nicotine_mg: float = Field(
        default=DEFAULT_PROFILE.nicotine_mg,
        gt=0,
        le=MAX_NICOTINE_MG,
        allow_inf_nan=False,
    )
    tar_mg: float = Field(
        default=DEFAULT_PROFILE.tar_mg, gt=0, le=MAX_TAR_MG, allow_inf_nan=False
    )

    @field_validator("per_pack")
    @classmethod
    def _known_pack_size(cls, value: int) -> int:
        if value not in PACK_SIZES:
            raise ValueError(f"per_pack must be one of {list(PACK_SIZES)}")
        return value

    def to_domain(self) -> SmokingProfile:
        """Convert to the domain profile."""
        return SmokingProfile(**self.model_dump())


class DurationOut(BaseModel):
    """Elapsed time since the user started smoking."""

    years: int
    months: int
    total_months: int
    label: str

    @classmethod
    def from_domain(cls, duration: Duration) -> "DurationOut":
        return cls(
            years=duration.years,
            months=duration.months,
            total_months=duration.total_months,
            label=format_duration(duration),
        )


class ProfileOut(BaseModel):
    """Stored profile with its computed duration."""

    start_month: int
    start_year: int
    avg_per_day: float
    brand: str
    per_pack: int
    nicotine_mg: float
    tar_mg: float
    duration: DurationOut | None = None

    @classmethod
    def from_domain(
        cls, profile: SmokingProfile, duration: Duration | None
    ) -> "ProfileOut":
        return cls(
            start_month=profile.start_month,
            start_year=profile.start_year,
            avg_per_day=profile.avg_per_day,
            brand=profile.brand,
            per_pack=profile.per_pack,
            nicotine_mg=profile.nicotine_mg,
            tar_mg=profile.tar_mg,
            duration=DurationOut.from_domain(duration) if duration else None,
        )


class LogPayload(BaseModel):
    """A new smoke log entry."""

    count: int = Field(default=1, ge=1)
    location: str = ""
    triggers: list[str] = Field(default_factory=list)
    mood_before: str = ""
    notes: str = ""

    def to_draft(self) -> SmokeLogDraft:
        """Convert to a domain draft, keeping trigger selection order."""
        return SmokeLogDraft(
            count=self.count,
            location=self.location,
            triggers=tuple(self.triggers),
            mood_before=self.mood_before,
            notes=self.notes,
        )


class LogOut(BaseModel):
    """A stored smoke log entry with display labels."""

    id: UUID
    timestamp: datetime
    count: int
    location: str
    triggers: list[str]
    mood_before: str
    notes: str
    day_key: str
    time_label: str

    @classmethod
    def from_domain(cls, log: SmokeLog, tz: tzinfo) -> "LogOut":
        return cls(
            id=log.id,
            timestamp=log.timestamp,
            count=log.count,
            location=log.location,
            triggers=list(log.triggers),
            mood_before=log.mood_before,
            notes=log.notes,
            day_key=format_day_key(log.timestamp, tz),
            time_label=format_time_of_day(log.timestamp, tz),
        )


class DayCountOut(BaseModel):
    """One bar of the history chart."""

    day: date
    weekday: str
    count: int
    is_today: bool

    @classmethod
    def from_domain(cls, entry: DayCount) -> "DayCountOut":
        return cls(
            day=entry.day,
            weekday=entry.weekday,
            count=entry.count,
            is_today=entry.is_today,
        )


class WindowSummaryOut(BaseModel):
    """Average, lowest and highest daily counts in the window."""

    average: float
    minimum: int
    maximum: int
    scale_max: int

    @classmethod
    def from_domain(cls, summary: WindowSummary) -> "WindowSummaryOut":
        return cls(
            average=summary.average,
            minimum=summary.minimum,
            maximum=summary.maximum,
            scale_max=summary.scale_max,
        )


class HistoryGroupOut(BaseModel):
    """Entries recorded on one calendar day."""

    day_key: str
    entries: list[LogOut]


class HistoryOut(BaseModel):
    """History drawer contents."""

    week: list[DayCountOut]
    summary: WindowSummaryOut
    groups: list[HistoryGroupOut]


class CumulativeOut(BaseModel):
    """Lifetime estimates with grouped display strings."""

    known: bool
    total_cigarettes: int
    pack_equivalents: int
    nicotine_g: float
    tar_g: float
    total_cigarettes_label: str
    pack_equivalents_label: str

    @classmethod
    def from_domain(cls, totals: CumulativeTotals) -> "CumulativeOut":
        return cls(
            known=totals.known,
            total_cigarettes=totals.total_cigarettes,
            pack_equivalents=totals.pack_equivalents,
            nicotine_g=totals.nicotine_g,
            tar_g=totals.tar_g,
            total_cigarettes_label=format_indian_number(totals.total_cigarettes),
            pack_equivalents_label=format_indian_number(totals.pack_equivalents),
        )


class TodayOut(BaseModel):
    """Today's snapshot card."""

    total_today: int
    nicotine_mg: float
    tar_mg: float
    pack_equivalent: float
    average_baseline: float
    delta: float
    state: str
    progress_percent: float
    comparison: str

    @classmethod
    def from_domain(cls, snapshot: TodaySnapshot) -> "TodayOut":
        return cls(
            total_today=snapshot.total_today,
            nicotine_mg=snapshot.nicotine_mg,
            tar_mg=snapshot.tar_mg,
            pack_equivalent=snapshot.pack_equivalent,
            average_baseline=snapshot.average_baseline,
            delta=snapshot.delta,
            state=snapshot.state.value,
            progress_percent=snapshot.progress_percent,
            comparison=snapshot.comparison,
        )


class DashboardOut(BaseModel):
    """Home screen figures."""

    duration: DurationOut | None
    cumulative: CumulativeOut
    today: TodayOut
    week: list[DayCountOut]
    week_summary: WindowSummaryOut
    health_fact: str

    @classmethod
    def from_domain(cls, dashboard: Dashboard) -> "DashboardOut":
        return cls(
            duration=DurationOut.from_domain(dashboard.duration)
            if dashboard.duration
            else None,
            cumulative=CumulativeOut.from_domain(dashboard.cumulative),
            today=TodayOut.from_domain(dashboard.today),
            week=[DayCountOut.from_domain(entry) for entry in dashboard.week],
            week_summary=WindowSummaryOut.from_domain(dashboard.week_summary),
            health_fact=dashboard.health_fact,
        )


class MoodOut(BaseModel):
    """Mood scale option."""

    value: str
    label: str
    emoji: str


class ReferenceOut(BaseModel):
    """Vocabularies used by the entry form."""

    locations: list[str] = Field(default_factory=lambda: list(LOCATIONS))
    triggers: list[str] = Field(default_factory=lambda: list(TRIGGERS))
    moods: list[MoodOut] = Field(
        default_factory=lambda: [
            MoodOut(value=mood.value, label=mood.label, emoji=mood.emoji)
            for mood in MOODS
        ]
    )
    months: list[str] = Field(default_factory=lambda: list(MONTHS))
    weekdays: list[str] = Field(default_factory=lambda: list(WEEKDAYS))
    pack_sizes: list[int] = Field(default_factory=lambda: list(PACK_SIZES))
    health_facts: list[str] = Field(default_factory=lambda: list(HEALTH_FACTS))
