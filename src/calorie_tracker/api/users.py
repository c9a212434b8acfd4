"""User profile endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from calorie_tracker.api.schemas import UserModel, UserUpdateRequest

if TYPE_CHECKING:
    from calorie_tracker.containers import AppContainer

router = APIRouter(prefix="/user", tags=["users"])


@router.get("/{user_id}")
def get_user(user_id: str, request: Request) -> dict[str, object]:
    """Return the user's profile, creating it on first access."""
    container: AppContainer = request.app.state.container
    user = container.user_profile_service.get_or_create(user_id)
    return {"success": True, "user": UserModel.from_domain(user).to_json()}


@router.post("/{user_id}")
def update_user(
    user_id: str, payload: UserUpdateRequest, request: Request
) -> dict[str, object]:
    """Update the user's display name or daily limit."""
    container: AppContainer = request.app.state.container
    user = container.user_profile_service.update(user_id, payload.to_domain())
    return {"success": True, "user": UserModel.from_domain(user).to_json()}
