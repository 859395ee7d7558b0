"""User-related business logic."""

from dataclasses import dataclass
from typing import Protocol

from smoke_tracker.domain.models import UserRecord


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def upsert_user(self, user_id: int) -> UserRecord:
        """Create the user row if missing and return it."""


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository

    def ensure_user(self, user_id: int) -> UserRecord:
        """Ensure a user row exists for the id and return it."""
        return self.repository.upsert_user(user_id)
