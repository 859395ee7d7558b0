"""Supabase repository for smoke logs."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from smoke_tracker.adapters.supabase_errors import execute
from smoke_tracker.domain.errors import StorageError
from smoke_tracker.domain.logs import SmokeLog, SmokeLogDraft
from smoke_tracker.services.logs import SmokeLogRepository

_COLUMNS = "id, logged_at, count, location, triggers, mood_before, notes"


@dataclass
class SupabaseSmokeLogRepository(SmokeLogRepository):
    """Supabase implementation for smoke logs."""

    client: Client

    def create_log(
        self, user_id: int, timestamp: datetime, draft: SmokeLogDraft
    ) -> SmokeLog:
        """Insert a log row and return it."""
        response = execute(
            self.client.table("smoke_logs").insert(
                {
                    "user_id": user_id,
                    "logged_at": timestamp.isoformat(),
                    "count": draft.count,
                    "location": draft.location,
                    "triggers": list(draft.triggers),
                    "mood_before": draft.mood_before,
                    "notes": draft.notes,
                }
            ),
            "save smoke log",
        )
        if not response.data:
            raise StorageError("Failed to save smoke log")
        return _parse_row(response.data[0])

    def list_logs(self, user_id: int) -> list[SmokeLog]:
        """Return all logs for a user, newest first."""
        response = execute(
            self.client.table("smoke_logs")
            .select(_COLUMNS)
            .eq("user_id", user_id)
            .order("logged_at", desc=True),
            "load smoke logs",
        )
        return [_parse_row(row) for row in response.data or []]

    def delete_log(self, user_id: int, log_id: UUID) -> bool:
        """Delete one of the user's logs by id."""
        response = execute(
            self.client.table("smoke_logs")
            .delete()
            .eq("id", str(log_id))
            .eq("user_id", user_id),
            "delete smoke log",
        )
        return bool(response.data)


def _parse_row(row: dict[str, object]) -> SmokeLog:
    triggers = row.get("triggers") or []
    return SmokeLog(
        id=UUID(str(row["id"])),
        timestamp=datetime.fromisoformat(str(row["logged_at"])),
        count=int(row["count"]),
        location=str(row.get("location") or ""),
        triggers=tuple(str(trigger) for trigger in triggers),
        mood_before=str(row.get("mood_before") or ""),
        notes=str(row.get("notes") or ""),
    )
