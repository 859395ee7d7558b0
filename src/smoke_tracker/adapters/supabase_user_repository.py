"""Supabase-backed user repository."""

from dataclasses import dataclass

from supabase import Client

from smoke_tracker.adapters.supabase_errors import execute
from smoke_tracker.domain.models import UserRecord
from smoke_tracker.services.users import UserRepository


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def upsert_user(self, user_id: int) -> UserRecord:
        """Create the user row if missing and return it."""
        execute(
            self.client.table("users").upsert({"id": user_id}, on_conflict="id"),
            "upsert user",
        )
        return UserRecord(id=user_id)
