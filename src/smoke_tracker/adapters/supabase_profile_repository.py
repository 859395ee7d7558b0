"""Supabase repository for smoking profiles."""

from dataclasses import dataclass

from supabase import Client

from smoke_tracker.adapters.supabase_errors import execute
from smoke_tracker.domain.profile import SmokingProfile
from smoke_tracker.services.profiles import ProfileRepository

_COLUMNS = "start_month, start_year, avg_per_day, brand, per_pack, nicotine_mg, tar_mg"


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for the one-per-user profile."""

    client: Client

    def get_profile(self, user_id: int) -> SmokingProfile | None:
        """Return the user's profile, if present."""
        response = execute(
            self.client.table("smoking_profiles")
            .select(_COLUMNS)
            .eq("user_id", user_id)
            .limit(1),
            "load profile",
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def save_profile(self, user_id: int, profile: SmokingProfile) -> None:
        """Upsert the profile keyed by user id."""
        execute(
            self.client.table("smoking_profiles").upsert(
                {
                    "user_id": user_id,
                    "start_month": profile.start_month,
                    "start_year": profile.start_year,
                    "avg_per_day": profile.avg_per_day,
                    "brand": profile.brand,
                    "per_pack": profile.per_pack,
                    "nicotine_mg": profile.nicotine_mg,
                    "tar_mg": profile.tar_mg,
                },
                on_conflict="user_id",
            ),
            "save profile",
        )


def _parse_row(row: dict[str, object]) -> SmokingProfile:
    # numeric columns come back as strings
    return SmokingProfile(
        start_month=int(row["start_month"]),
        start_year=int(row["start_year"]),
        avg_per_day=float(row["avg_per_day"]),
        brand=str(row.get("brand") or ""),
        per_pack=int(row["per_pack"]),
        nicotine_mg=float(row["nicotine_mg"]),
        tar_mg=float(row["tar_mg"]),
    )
