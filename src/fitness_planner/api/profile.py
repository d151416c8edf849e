"""User profile endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Request

from fitness_planner.api.models import PreferencesUpdate
from fitness_planner.api.serializers import serialize_user

if TYPE_CHECKING:
    from fitness_planner.containers import AppContainer

router = APIRouter(prefix="/users", tags=["profile"])


@router.get("/{user_id}/profile")
async def get_profile(user_id: UUID, request: Request) -> dict[str, object]:
    """Return the stored profile and nutrition goals."""
    container: AppContainer = request.app.state.container
    user = container.user_service.get_user(user_id)
    return {"ok": True, "profile": serialize_user(user)}


@router.patch("/{user_id}/preferences")
async def update_preferences(
    user_id: UUID, payload: PreferencesUpdate, request: Request
) -> dict[str, object]:
    """Update diet and training preferences."""
    container: AppContainer = request.app.state.container
    user = container.user_service.update_preferences(
        user_id, payload.model_dump(exclude_none=True)
    )
    return {"ok": True, "profile": serialize_user(user)}
