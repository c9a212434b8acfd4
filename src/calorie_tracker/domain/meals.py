"""Domain models for meal logging."""

from dataclasses import dataclass, field

MEAL_TYPES = ("breakfast", "lunch", "snacks", "dinner")


@dataclass(frozen=True)
class MealItem:
    """Line item of a meal with calories computed at entry time."""

    food_id: str
    calories: float
    amount_grams: float | None = None
    amount_count: float | None = None
    variant_name: str | None = None


@dataclass(frozen=True)
class Meal:
    """All items eaten by a user for one meal type on one date."""

    meal_id: str
    user_id: str
    meal_date: str
    meal_type: str
    items: list[MealItem] = field(default_factory=list)

    @property
    def total_calories(self) -> float:
        return sum(item.calories for item in self.items)


def meal_id_for(user_id: str, meal_date: str, meal_type: str) -> str:
    """Return the deterministic id for a user's meal on a date."""
    return f"{user_id}_{meal_date}_{meal_type}"
