"""Daily goal endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from calorie_journal.api.models import GoalsIn  # noqa: TC001
from calorie_journal.api.payloads import goals_payload

if TYPE_CHECKING:
    from calorie_journal.containers import AppContainer

router = APIRouter(prefix="/goals", tags=["goals"])


@router.get("")
async def get_goals(request: Request) -> dict[str, float]:
    """Return the active goals."""
    container: AppContainer = request.app.state.container
    return goals_payload(container.goal_service.get_goals())


@router.put("")
async def save_goals(body: GoalsIn, request: Request) -> dict[str, float]:
    """Replace the goal set."""
    container: AppContainer = request.app.state.container
    return goals_payload(container.goal_service.save_goals(body.to_goals()))


@router.post("/reset")
async def reset_goals(request: Request) -> dict[str, float]:
    """Restore the default goals."""
    container: AppContainer = request.app.state.container
    return goals_payload(container.goal_service.reset_goals())
