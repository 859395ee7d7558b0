"""Domain model for the smoking baseline profile."""

import math
from dataclasses import dataclass

from smoke_tracker.domain.errors import InvalidInputError
from smoke_tracker.domain.reference import EARLIEST_START_YEAR, PACK_SIZES

LAST_MONTH_INDEX = 11
MAX_AVG_PER_DAY = 200
MAX_NICOTINE_MG = 50
MAX_TAR_MG = 100


@dataclass(frozen=True)
class SmokingProfile:
    """A user's declared smoking baseline.

    ``start_month`` is a 0-based month index (0 = January).
    """

    start_month: int
    start_year: int
    avg_per_day: float
    per_pack: int
    nicotine_mg: float
    tar_mg: float
    brand: str = ""


DEFAULT_PROFILE = SmokingProfile(
    start_month=0,
    start_year=2015,
    avg_per_day=10,
    per_pack=20,
    nicotine_mg=0.8,
    tar_mg=8,
)


def validate_profile(
    profile: SmokingProfile, current_year: int | None = None
) -> SmokingProfile:
    """Return the profile unchanged or raise ``InvalidInputError``.

    ``current_year`` is the calendar year in the display time zone; when
    given, a start year after it is rejected.
    """
    if not 0 <= profile.start_month <= LAST_MONTH_INDEX:
        raise InvalidInputError(
            f"start_month must be between 0 and 11, got {profile.start_month}"
        )
    if profile.start_year < EARLIEST_START_YEAR:
        raise InvalidInputError(
            f"start_year must be {EARLIEST_START_YEAR} or later, "
            f"got {profile.start_year}"
        )
    if current_year is not None and profile.start_year > current_year:
        raise InvalidInputError(
            f"start_year must not be after {current_year}, got {profile.start_year}"
        )
    _check_amount("avg_per_day", profile.avg_per_day, MAX_AVG_PER_DAY)
    if profile.per_pack not in PACK_SIZES:
        allowed = ", ".join(str(size) for size in PACK_SIZES)
        raise InvalidInputError(
            f"per_pack must be one of {allowed}, got {profile.per_pack}"
        )
    _check_amount("nicotine_mg", profile.nicotine_mg, MAX_NICOTINE_MG)
    _check_amount("tar_mg", profile.tar_mg, MAX_TAR_MG)
    return profile


def _check_amount(name: str, value: float, upper: float) -> None:
    if not math.isfinite(value):
        raise InvalidInputError(f"{name} must be a finite number")
    if not 0 < value <= upper:
        raise InvalidInputError(f"{name} must be greater than 0 and at most {upper}")
