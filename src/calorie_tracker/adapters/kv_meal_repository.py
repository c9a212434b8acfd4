"""Key-value repository for meals, one key per meal."""

import logging
from dataclasses import dataclass

from calorie_tracker.adapters.kv_codec import dump_meal, parse_meal
from calorie_tracker.domain.meals import Meal
from calorie_tracker.services.meals import MealRepository
from calorie_tracker.services.store import KeyValueStore

logger = logging.getLogger(__name__)


def day_key(user_id: str, meal_date: str) -> str:
    """Key of the older per-day array holding all of a date's meals."""
    return f"meals:{user_id}:{meal_date}"


def meals_prefix(user_id: str, meal_date: str) -> str:
    return f"{day_key(user_id, meal_date)}:"


def meal_key(user_id: str, meal_date: str, meal_id: str) -> str:
    return f"{meals_prefix(user_id, meal_date)}{meal_id}"


@dataclass
class KeyValueMealRepository(MealRepository):
    """Stores each meal under its own key so saves on one date don't clobber.

    Dates written as a single per-day array are still read, and are moved to
    per-meal keys on the first write to that date.
    """

    store: KeyValueStore

    def list_meals(self, user_id: str, meal_date: str) -> list[Meal]:
        """Return meals owned by the user on the date."""
        legacy = self._load_day_array(user_id, meal_date)
        meals = {meal.meal_id: meal for meal in legacy or []}
        for row in self.store.get_by_prefix(meals_prefix(user_id, meal_date)):
            if not isinstance(row, dict):
                continue
            meal = parse_meal(row)
            # User ids may contain ":", so the prefix can match other owners.
            if meal.user_id == user_id and meal.meal_date == meal_date:
                meals[meal.meal_id] = meal
        return list(meals.values())

    def save_meal(self, meal: Meal) -> None:
        """Create or replace a meal."""
        self._migrate_day_array(meal.user_id, meal.meal_date)
        self.store.set(
            meal_key(meal.user_id, meal.meal_date, meal.meal_id), dump_meal(meal)
        )

    def delete_meal(self, user_id: str, meal_date: str, meal_id: str) -> None:
        """Delete a meal key."""
        self._migrate_day_array(user_id, meal_date)
        self.store.delete(meal_key(user_id, meal_date, meal_id))

    def _load_day_array(self, user_id: str, meal_date: str) -> list[Meal] | None:
        """Return meals from the per-day array, or None when no array is stored."""
        rows = self.store.get(day_key(user_id, meal_date))
        if rows is None:
            return None
        if not isinstance(rows, list):
            return []
        return [
            meal
            for meal in (parse_meal(row) for row in rows if isinstance(row, dict))
            if meal.user_id == user_id and meal.meal_date == meal_date
        ]

    def _migrate_day_array(self, user_id: str, meal_date: str) -> None:
        legacy = self._load_day_array(user_id, meal_date)
        if legacy is None:
            return
        for meal in legacy:
            key = meal_key(user_id, meal_date, meal.meal_id)
            if self.store.get(key) is None:
                self.store.set(key, dump_meal(meal))
        self.store.delete(day_key(user_id, meal_date))
        logger.info(
            "Moved per-day meals to per-meal keys",
            extra={"user_id": user_id, "date": meal_date, "count": len(legacy)},
        )
