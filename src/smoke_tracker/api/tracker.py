"""Tracker API endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status
from fastapi.responses import PlainTextResponse

from smoke_tracker.api.schemas import (
    DashboardOut,
    DayCountOut,
    HistoryGroupOut,
    HistoryOut,
    LogOut,
    LogPayload,
    ProfileOut,
    ProfilePayload,
    WindowSummaryOut,
)
from smoke_tracker.services.engine import duration_since_start

if TYPE_CHECKING:
    from smoke_tracker.containers import AppContainer

router = APIRouter(prefix="/users/{user_id}", tags=["tracker"])


def _get_api_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.api_token


async def require_api_token(
    x_api_token: str | None = Header(default=None),
    api_token: str = Depends(_get_api_token),
) -> None:
    """Ensure requests include a valid API token."""
    if not x_api_token or x_api_token != api_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.get("/profile", dependencies=[Depends(require_api_token)])
async def get_profile(user_id: int, request: Request) -> ProfileOut:
    """Return the saved baseline profile."""
    container = _container(request)
    profile = container.profile_service.get_profile(user_id)
    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    now = container.stats_service.clock()
    duration = duration_since_start(profile, now, container.settings.timezone)
    return ProfileOut.from_domain(profile, duration)


@router.put("/profile", dependencies=[Depends(require_api_token)])
async def save_profile(
    user_id: int, payload: ProfilePayload, request: Request
) -> ProfileOut:
    """Create or replace the baseline profile."""
    container = _container(request)
    container.user_service.ensure_user(user_id)
    profile = container.profile_service.save_profile(user_id, payload.to_domain())
    now = container.stats_service.clock()
    duration = duration_since_start(profile, now, container.settings.timezone)
    return ProfileOut.from_domain(profile, duration)


@router.get("/logs", dependencies=[Depends(require_api_token)])
async def list_logs(
    user_id: int, request: Request, q: str | None = None
) -> list[LogOut]:
    """Return entries newest first, optionally filtered by a search query."""
    container = _container(request)
    tz = container.settings.timezone
    logs = container.smoke_log_service.list_logs(user_id, q)
    return [LogOut.from_domain(log, tz) for log in logs]


@router.post(
    "/logs",
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_api_token)],
)
async def create_log(user_id: int, payload: LogPayload, request: Request) -> LogOut:
    """Record a new entry at the current time."""
    container = _container(request)
    container.user_service.ensure_user(user_id)
    log = container.smoke_log_service.record(user_id, payload.to_draft())
    return LogOut.from_domain(log, container.settings.timezone)


@router.get("/logs/recent", dependencies=[Depends(require_api_token)])
async def recent_logs(
    user_id: int, request: Request, limit: int | None = None
) -> list[LogOut]:
    """Return the latest entries."""
    container = _container(request)
    if limit is None:
        limit = container.settings.recent_entries_limit
    logs = container.smoke_log_service.recent(user_id, limit)
    return [LogOut.from_domain(log, container.settings.timezone) for log in logs]


@router.delete("/logs/{log_id}", dependencies=[Depends(require_api_token)])
async def delete_log(user_id: int, log_id: UUID, request: Request) -> dict[str, str]:
    """Remove a single entry."""
    container = _container(request)
    if not container.smoke_log_service.delete(user_id, log_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {"status": "deleted"}


@router.get("/cooldown", dependencies=[Depends(require_api_token)])
async def cooldown(user_id: int, request: Request) -> dict[str, int]:
    """Return seconds left before another entry may be saved."""
    container = _container(request)
    remaining = container.smoke_log_service.cooldown_remaining(user_id)
    return {"remaining_seconds": remaining}


@router.get("/history", dependencies=[Depends(require_api_token)])
async def history(user_id: int, request: Request, q: str | None = None) -> HistoryOut:
    """Return the 7-day chart and entries grouped by day."""
    container = _container(request)
    tz = container.settings.timezone
    week, summary = container.stats_service.week(user_id)
    groups = container.smoke_log_service.history(user_id, q)
    return HistoryOut(
        week=[DayCountOut.from_domain(entry) for entry in week],
        summary=WindowSummaryOut.from_domain(summary),
        groups=[
            HistoryGroupOut(
                day_key=day_key,
                entries=[LogOut.from_domain(log, tz) for log in entries],
            )
            for day_key, entries in groups
        ],
    )


@router.get(
    "/export",
    response_class=PlainTextResponse,
    dependencies=[Depends(require_api_token)],
)
async def export(user_id: int, request: Request) -> PlainTextResponse:
    """Return a plain-text summary of every entry."""
    container = _container(request)
    return PlainTextResponse(container.smoke_log_service.export(user_id))


@router.get("/dashboard", dependencies=[Depends(require_api_token)])
async def dashboard(user_id: int, request: Request) -> DashboardOut:
    """Return every figure shown on the home screen."""
    container = _container(request)
    return DashboardOut.from_domain(container.stats_service.dashboard(user_id))
