"""Domain models for derived statistics."""

from dataclasses import dataclass
from datetime import date
from enum import Enum


@dataclass(frozen=True)
class Duration:
    """Elapsed whole months since the profile's start month."""

    years: int
    months: int
    total_months: int


@dataclass(frozen=True)
class CumulativeTotals:
    """Lifetime estimates derived from the baseline profile."""

    total_cigarettes: int
    pack_equivalents: int
    nicotine_g: float
    tar_g: float
    known: bool = True

    @classmethod
    def unknown(cls) -> "CumulativeTotals":
        """Totals for a profile whose duration cannot be computed."""
        return cls(
            total_cigarettes=0,
            pack_equivalents=0,
            nicotine_g=0.0,
            tar_g=0.0,
            known=False,
        )


@dataclass(frozen=True)
class DayCount:
    """Aggregate count for one calendar day."""

    day: date
    weekday: str
    count: int
    is_today: bool = False


@dataclass(frozen=True)
class WindowSummary:
    """Summary figures over a trailing window."""

    average: float
    minimum: int
    maximum: int
    scale_max: int


class BaselineState(Enum):
    """How today's count compares to the declared daily average."""

    AT_OR_ABOVE = "at_or_above"
    MARGINALLY_BELOW = "marginally_below"
    WELL_BELOW = "well_below"


@dataclass(frozen=True)
class TodaySnapshot:
    """Today's totals compared with the baseline."""

    total_today: int
    nicotine_mg: float
    tar_mg: float
    pack_equivalent: float
    average_baseline: float
    delta: float
    state: BaselineState
    progress_percent: float
    comparison: str


@dataclass(frozen=True)
class Dashboard:
    """Everything the home screen shows, recomputed on every request."""

    duration: Duration | None
    cumulative: CumulativeTotals
    today: TodaySnapshot
    week: list[DayCount]
    week_summary: WindowSummary
    health_fact: str
