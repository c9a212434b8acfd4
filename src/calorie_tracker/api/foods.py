"""Food catalog endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Body, Request

from calorie_tracker.api.schemas import FoodItemModel, NewFoodRequest, parse_food_items

if TYPE_CHECKING:
    from calorie_tracker.containers import AppContainer

router = APIRouter(prefix="/food-items", tags=["foods"])


@router.get("")
def list_food_items(request: Request) -> dict[str, object]:
    """Return the food catalog."""
    container: AppContainer = request.app.state.container
    foods = container.food_catalog_service.list_foods()
    return {
        "success": True,
        "foodItems": [FoodItemModel.from_domain(food).to_json() for food in foods],
    }


@router.post("/add")
def add_food_item(payload: NewFoodRequest, request: Request) -> dict[str, object]:
    """Add a food whose id is derived from its name."""
    container: AppContainer = request.app.state.container
    food = container.food_catalog_service.add_food(payload.to_domain())
    return {"success": True, "foodItem": FoodItemModel.from_domain(food).to_json()}


@router.post("/update")
def replace_food_items(
    request: Request, payload: dict[str, Any] = Body(...)
) -> dict[str, object]:
    """Overwrite the whole catalog with an edited copy."""
    container: AppContainer = request.app.state.container
    container.food_catalog_service.replace_all(
        parse_food_items(payload.get("foodItems"))
    )
    return {"success": True}


@router.delete("/{food_id}")
def delete_food_item(food_id: str, request: Request) -> dict[str, object]:
    """Remove a food from the catalog."""
    container: AppContainer = request.app.state.container
    container.food_catalog_service.remove_food(food_id)
    return {"success": True}
