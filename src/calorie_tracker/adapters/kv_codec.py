"""JSON codecs for records kept in the key-value store.

Records are stored with camelCase field names so they stay readable by the
browser client and by data written before this service existed.
"""

from calorie_tracker.domain.errors import InvalidPayloadError
from calorie_tracker.domain.foods import AMOUNT_TYPES, FoodItem
from calorie_tracker.domain.meals import Meal, MealItem
from calorie_tracker.domain.models import UserProfile
from calorie_tracker.domain.summaries import DailySummary


def dump_food(food: FoodItem) -> dict[str, object]:
    payload: dict[str, object] = {
        "foodId": food.food_id,
        "name": food.name,
        "category": food.category,
        "amountType": food.amount_type,
    }
    if food.calories_per_gram is not None:
        payload["caloriesPerGram"] = food.calories_per_gram
    if food.calories_per_unit is not None:
        payload["caloriesPerUnit"] = food.calories_per_unit
    return payload


def parse_food(row: object) -> FoodItem:
    """Parse a stored catalog entry, rejecting entries without an id."""
    if not isinstance(row, dict) or not row.get("foodId"):
        raise InvalidPayloadError("Invalid food items data")
    amount_type = str(row.get("amountType") or "")
    if amount_type not in AMOUNT_TYPES:
        raise InvalidPayloadError(f"Invalid amount type for {row['foodId']}")
    try:
        return FoodItem(
            food_id=str(row["foodId"]),
            name=str(row.get("name", "")),
            category=str(row.get("category") or "custom"),
            amount_type=amount_type,
            calories_per_gram=_optional_float(row.get("caloriesPerGram")),
            calories_per_unit=_optional_float(row.get("caloriesPerUnit")),
        )
    except (TypeError, ValueError) as exc:
        raise InvalidPayloadError(f"Invalid calories for {row['foodId']}") from exc


def dump_meal(meal: Meal) -> dict[str, object]:
    return {
        "mealId": meal.meal_id,
        "userId": meal.user_id,
        "mealDate": meal.meal_date,
        "mealType": meal.meal_type,
        "items": [_dump_meal_item(item) for item in meal.items],
    }


def parse_meal(row: dict[str, object]) -> Meal:
    items = row.get("items")
    return Meal(
        meal_id=str(row["mealId"]),
        user_id=str(row["userId"]),
        meal_date=str(row["mealDate"]),
        meal_type=str(row["mealType"]),
        items=[_parse_meal_item(item) for item in items or []],
    )


def dump_summary(summary: DailySummary) -> dict[str, object]:
    return {
        "summaryId": summary.summary_id,
        "userId": summary.user_id,
        "summaryDate": summary.summary_date,
        "totalKcal": summary.total_kcal,
        "exceedsLimit": summary.exceeds_limit,
    }


def parse_summary(row: dict[str, object]) -> DailySummary:
    return DailySummary(
        summary_id=str(row["summaryId"]),
        user_id=str(row["userId"]),
        summary_date=str(row["summaryDate"]),
        total_kcal=float(row.get("totalKcal", 0.0)),
        exceeds_limit=bool(row.get("exceedsLimit", False)),
    )


def dump_user(user: UserProfile) -> dict[str, object]:
    return {
        "userId": user.user_id,
        "username": user.username,
        "dailyLimitKcal": user.daily_limit_kcal,
    }


def parse_user(row: dict[str, object], defaults: UserProfile) -> UserProfile:
    """Parse a stored profile, filling fields missing from older records."""
    return UserProfile(
        user_id=defaults.user_id,
        username=str(row.get("username") or defaults.username),
        daily_limit_kcal=int(row.get("dailyLimitKcal", defaults.daily_limit_kcal)),
    )


def _dump_meal_item(item: MealItem) -> dict[str, object]:
    payload: dict[str, object] = {"foodId": item.food_id}
    if item.amount_grams is not None:
        payload["amountGrams"] = item.amount_grams
    if item.amount_count is not None:
        payload["amountCount"] = item.amount_count
    if item.variant_name is not None:
        payload["variantName"] = item.variant_name
    payload["calories"] = item.calories
    return payload


def _parse_meal_item(row: dict[str, object]) -> MealItem:
    return MealItem(
        food_id=str(row.get("foodId", "")),
        calories=float(row.get("calories", 0.0)),
        amount_grams=_optional_float(row.get("amountGrams")),
        amount_count=_optional_float(row.get("amountCount")),
        variant_name=row.get("variantName"),
    )


def _optional_float(value: object) -> float | None:
    if value is None:
        return None
    return float(value)

