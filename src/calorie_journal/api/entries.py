"""Journal entry endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

from fastapi import APIRouter, HTTPException, Request, Response, status

from calorie_journal.api.models import EntryBatchIn  # noqa: TC001
from calorie_journal.api.payloads import entry_payload

if TYPE_CHECKING:
    from calorie_journal.containers import AppContainer

router = APIRouter(prefix="/entries", tags=["entries"])


@router.get("")
async def list_entries(request: Request) -> dict[str, object]:
    """Return every entry, newest first."""
    container: AppContainer = request.app.state.container
    entries = container.entry_service.list_entries()
    return {"entries": [entry_payload(entry) for entry in entries]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_entries(body: EntryBatchIn, request: Request) -> dict[str, object]:
    """Log one entry per non-empty meal row."""
    container: AppContainer = request.app.state.container
    logged_at = _resolve_logged_at(body.date, container.settings.timezone)
    created = container.entry_service.add_entries(
        [row.to_draft() for row in body.rows], logged_at
    )
    return {"entries": [entry_payload(entry) for entry in created]}


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_entry(entry_id: str, request: Request) -> Response:
    """Delete an entry by id."""
    container: AppContainer = request.app.state.container
    if not container.entry_service.delete_entry(entry_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def _resolve_logged_at(value: datetime | None, timezone_name: str) -> datetime:
    tz = ZoneInfo(timezone_name)
    if value is None:
        return datetime.now(tz=tz)
    if value.tzinfo is None:
        return value.replace(tzinfo=tz)
    return value
