"""Daily and monthly calorie summaries."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol

from calorie_tracker.domain.errors import InvalidPayloadError
from calorie_tracker.domain.meals import Meal
from calorie_tracker.domain.summaries import DailySummary, summary_id_for
from calorie_tracker.services.users import UserProfileService

logger = logging.getLogger(__name__)

DECEMBER = 12
YEAR_DIGITS = 4


class DayMealSource(Protocol):
    """Read access to the meals logged on a date."""

    def list_meals(self, user_id: str, meal_date: str) -> list[Meal]:
        """Return meals stored for a user on a date."""


class SummaryRepository(Protocol):
    """Persistence interface for daily summaries."""

    def get_summary(self, user_id: str, summary_date: str) -> DailySummary | None:
        """Return the stored summary for a date, if present."""

    def save_summary(self, summary: DailySummary) -> None:
        """Create or replace a daily summary."""

    def list_summaries(self, user_id: str, month_prefix: str) -> list[DailySummary]:
        """Return summaries whose date starts with a YYYY-MM prefix."""


@dataclass
class DailySummaryService:
    """Derives a day's calorie total from its meals."""

    meal_repository: DayMealSource
    summary_repository: SummaryRepository
    user_service: UserProfileService

    def recompute(self, user_id: str, summary_date: str) -> DailySummary:
        """Sum all meals on a date, compare with the user's limit and persist."""
        meals = self.meal_repository.list_meals(user_id, summary_date)
        total_kcal = sum(meal.total_calories for meal in meals)
        user = self.user_service.get_or_create(user_id)
        summary = DailySummary(
            summary_id=summary_id_for(user_id, summary_date),
            user_id=user_id,
            summary_date=summary_date,
            total_kcal=total_kcal,
            exceeds_limit=total_kcal > user.daily_limit_kcal,
        )
        self.summary_repository.save_summary(summary)
        logger.info(
            "Recomputed daily summary",
            extra={"user_id": user_id, "date": summary_date, "total": total_kcal},
        )
        return summary

    def get_daily(self, user_id: str, summary_date: str) -> DailySummary:
        """Return the stored summary, or a zero summary when none is stored.

        Reading a day registers the user with default settings if they are
        new. The zero summary itself is not persisted.
        """
        ensure_iso_date(summary_date)
        stored = self.summary_repository.get_summary(user_id, summary_date)
        if stored:
            return stored
        self.user_service.get_or_create(user_id)
        return DailySummary.empty(user_id, summary_date)


@dataclass
class MonthlySummaryService:
    """Collects the daily summaries recorded in a calendar month."""

    summary_repository: SummaryRepository

    def get_monthly(self, user_id: str, year: str, month: str) -> list[DailySummary]:
        """Return summaries for days in the month that have saved meals."""
        prefix = month_prefix(year, month)
        summaries = self.summary_repository.list_summaries(user_id, prefix)
        return sorted(summaries, key=lambda summary: summary.summary_date)


def month_prefix(year: str, month: str) -> str:
    """Return the zero-padded YYYY-MM prefix for a year and month."""
    if not (year.isdigit() and len(year) == YEAR_DIGITS):
        raise InvalidPayloadError(f"Invalid year: {year}")
    if not month.isdigit() or not 1 <= int(month) <= DECEMBER:
        raise InvalidPayloadError(f"Invalid month: {month}")
    return f"{year}-{int(month):02d}"


def ensure_iso_date(value: str) -> str:
    """Validate a YYYY-MM-DD date string and return it unchanged."""
    try:
        parsed = date.fromisoformat(value)
    except ValueError as exc:
        raise InvalidPayloadError(f"Invalid date: {value}") from exc
    if parsed.isoformat() != value:
        raise InvalidPayloadError(f"Invalid date: {value}")
    return value
