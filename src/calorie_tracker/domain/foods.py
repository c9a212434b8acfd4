"""Domain models for the food catalog."""

import re
from dataclasses import dataclass

AMOUNT_GRAMS = "grams"
AMOUNT_COUNT = "count"
AMOUNT_TYPES = frozenset({AMOUNT_GRAMS, AMOUNT_COUNT})

_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]+")


@dataclass(frozen=True)
class FoodItem:
    """A catalog entry with its calorie density."""

    food_id: str
    name: str
    category: str
    amount_type: str
    calories_per_gram: float | None = None
    calories_per_unit: float | None = None


def derive_food_id(name: str) -> str:
    """Derive a catalog id from a display name.

    Runs of non-alphanumeric characters collapse to a single underscore and
    are kept at either end, so "Orange Juice!" becomes "orange_juice_".
    """
    return _NON_ALPHANUMERIC.sub("_", name.lower())


DEFAULT_FOODS: tuple[FoodItem, ...] = (
    FoodItem("chapati", "Chapati", "grains", AMOUNT_COUNT, calories_per_unit=120),
    FoodItem("rice", "Rice (Cooked)", "grains", AMOUNT_GRAMS, calories_per_gram=1.3),
    FoodItem(
        "mixed_sabji", "Mixed Sabji", "vegetables", AMOUNT_GRAMS, calories_per_gram=0.9
    ),
    FoodItem(
        "paneer_sabji", "Paneer Sabji", "vegetables", AMOUNT_GRAMS, calories_per_gram=2
    ),
    FoodItem("banana", "Banana", "fruits", AMOUNT_GRAMS, calories_per_gram=0.89),
    FoodItem("apple", "Apple", "fruits", AMOUNT_GRAMS, calories_per_gram=0.52),
    FoodItem("milk", "Milk", "dairy", AMOUNT_GRAMS, calories_per_gram=0.42),
    FoodItem("egg", "Egg (Boiled)", "protein", AMOUNT_COUNT, calories_per_unit=78),
    FoodItem("dal", "Dal (Cooked)", "protein", AMOUNT_GRAMS, calories_per_gram=1.16),
)
