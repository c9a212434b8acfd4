"""Meal ledger endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from calorie_tracker.api.schemas import DailySummaryModel, MealModel

if TYPE_CHECKING:
    from calorie_tracker.containers import AppContainer

router = APIRouter(prefix="/meals", tags=["meals"])


@router.get("/{user_id}/{meal_date}")
def list_meals(user_id: str, meal_date: str, request: Request) -> dict[str, object]:
    """Return the user's meals on a date."""
    container: AppContainer = request.app.state.container
    meals = container.meal_ledger_service.list_for_date(user_id, meal_date)
    return {
        "success": True,
        "meals": [MealModel.from_domain(meal).to_json() for meal in meals],
    }


@router.post("")
def save_meal(payload: MealModel, request: Request) -> dict[str, object]:
    """Create or replace a meal and return the refreshed daily summary."""
    container: AppContainer = request.app.state.container
    result = container.meal_ledger_service.save_meal(payload.to_domain())
    return {
        "success": True,
        "meal": MealModel.from_domain(result.meal).to_json(),
        "summary": DailySummaryModel.from_domain(result.summary).to_json(),
    }


@router.delete("/{user_id}/{meal_date}/{meal_id}")
def delete_meal(
    user_id: str, meal_date: str, meal_id: str, request: Request
) -> dict[str, object]:
    """Remove a meal and return the refreshed daily summary."""
    container: AppContainer = request.app.state.container
    summary = container.meal_ledger_service.delete_meal(user_id, meal_date, meal_id)
    return {
        "success": True,
        "summary": DailySummaryModel.from_domain(summary).to_json(),
    }
