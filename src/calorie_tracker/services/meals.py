"""Meal ledger service."""

from dataclasses import dataclass
from typing import Protocol

from calorie_tracker.domain.errors import InvalidPayloadError
from calorie_tracker.domain.meals import MEAL_TYPES, Meal, meal_id_for
from calorie_tracker.domain.summaries import DailySummary
from calorie_tracker.services.summaries import DailySummaryService, ensure_iso_date


class MealRepository(Protocol):
    """Persistence interface for meals."""

    def list_meals(self, user_id: str, meal_date: str) -> list[Meal]:
        """Return meals stored for a user on a date."""

    def save_meal(self, meal: Meal) -> None:
        """Create or replace a meal by id."""

    def delete_meal(self, user_id: str, meal_date: str, meal_id: str) -> None:
        """Remove a meal; missing meals are ignored."""


@dataclass(frozen=True)
class MealSaveResult:
    """A saved meal along with the refreshed summary for its date."""

    meal: Meal
    summary: DailySummary


@dataclass
class MealLedgerService:
    """Stores meals per user and date and keeps daily summaries current.

    Item calories are taken as sent by the client; later catalog edits do not
    change what was already logged.
    """

    repository: MealRepository
    daily_summary_service: DailySummaryService

    def list_for_date(self, user_id: str, meal_date: str) -> list[Meal]:
        """Return all meals stored for the user on a date."""
        ensure_iso_date(meal_date)
        return self.repository.list_meals(user_id, meal_date)

    def save_meal(self, meal: Meal) -> MealSaveResult:
        """Upsert a meal by id, then recompute the day's summary."""
        ensure_iso_date(meal.meal_date)
        if meal.meal_type not in MEAL_TYPES:
            raise InvalidPayloadError(f"Invalid meal type: {meal.meal_type}")
        expected_id = meal_id_for(meal.user_id, meal.meal_date, meal.meal_type)
        if meal.meal_id != expected_id:
            raise InvalidPayloadError(f"Meal id must be {expected_id}")

        self.repository.save_meal(meal)
        summary = self.daily_summary_service.recompute(meal.user_id, meal.meal_date)
        return MealSaveResult(meal=meal, summary=summary)

    def delete_meal(self, user_id: str, meal_date: str, meal_id: str) -> DailySummary:
        """Remove a meal if present and return the recomputed summary."""
        ensure_iso_date(meal_date)
        self.repository.delete_meal(user_id, meal_date, meal_id)
        return self.daily_summary_service.recompute(user_id, meal_date)
