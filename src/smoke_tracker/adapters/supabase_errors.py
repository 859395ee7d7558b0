"""Shared error handling for Supabase queries."""

import logging
from typing import Any

from smoke_tracker.domain.errors import StorageError

_logger = logging.getLogger(__name__)


def execute(query: Any, action: str) -> Any:  # noqa: ANN401
    """Execute a Supabase query builder, wrapping client failures."""
    try:
        return query.execute()
    except Exception as exc:
        _logger.warning("Supabase %s failed: %s", action, exc)
        raise StorageError(f"Failed to {action}") from exc
