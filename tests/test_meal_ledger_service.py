"""Tests for the meal ledger service."""

import pytest

from calorie_tracker.containers import AppContainer
from calorie_tracker.domain.errors import InvalidPayloadError
from calorie_tracker.domain.meals import Meal
from calorie_tracker.domain.models import UserUpdate
from tests.conftest import InMemoryKeyValueStore, make_meal

USER = "u1"
DAY = "2024-01-01"


def _log_day(container: AppContainer) -> None:
    container.user_profile_service.update(USER, UserUpdate(daily_limit_kcal=900))
    ledger = container.meal_ledger_service
    ledger.save_meal(make_meal(USER, DAY, "breakfast", [100, 200]))
    ledger.save_meal(make_meal(USER, DAY, "lunch", [450]))
    ledger.save_meal(make_meal(USER, DAY, "snacks", []))
    ledger.save_meal(make_meal(USER, DAY, "dinner", [200]))


def test_list_for_date_is_empty_without_meals(container: AppContainer) -> None:
    assert container.meal_ledger_service.list_for_date(USER, DAY) == []


def test_save_meal_upserts_by_meal_id(container: AppContainer) -> None:
    ledger = container.meal_ledger_service

    ledger.save_meal(make_meal(USER, DAY, "breakfast", [300]))
    result = ledger.save_meal(make_meal(USER, DAY, "breakfast", [250, 250]))

    meals = ledger.list_for_date(USER, DAY)
    assert len(meals) == 1
    assert meals[0].meal_id == "u1_2024-01-01_breakfast"
    assert meals[0].total_calories == 500
    assert result.summary.total_kcal == 500


def test_save_meal_keeps_meals_on_other_dates_separate(
    container: AppContainer,
) -> None:
    ledger = container.meal_ledger_service

    ledger.save_meal(make_meal(USER, DAY, "lunch", [300]))
    ledger.save_meal(make_meal(USER, "2024-01-02", "lunch", [700]))

    assert [meal.total_calories for meal in ledger.list_for_date(USER, DAY)] == [300]


def test_daily_total_sums_all_meals(container: AppContainer) -> None:
    _log_day(container)

    summary = container.daily_summary_service.get_daily(USER, DAY)

    assert summary.total_kcal == 950
    assert summary.exceeds_limit is True
    assert summary.summary_id == "summary_u1_2024-01-01"


def test_delete_meal_recomputes_summary(container: AppContainer) -> None:
    _log_day(container)

    summary = container.meal_ledger_service.delete_meal(
        USER, DAY, "u1_2024-01-01_lunch"
    )

    assert summary.total_kcal == 500
    assert summary.exceeds_limit is False
    assert container.daily_summary_service.get_daily(USER, DAY) == summary
    assert len(container.meal_ledger_service.list_for_date(USER, DAY)) == 3


def test_delete_missing_meal_still_writes_summary(
    container: AppContainer, store: InMemoryKeyValueStore
) -> None:
    summary = container.meal_ledger_service.delete_meal(USER, DAY, "missing")

    assert summary.total_kcal == 0
    assert "daily_summary:u1:2024-01-01" in store.values


def test_save_meal_trusts_client_calories(container: AppContainer) -> None:
    container.food_catalog_service.ensure_seeded()
    meal = make_meal(USER, DAY, "breakfast", [999])

    result = container.meal_ledger_service.save_meal(meal)

    assert result.meal == meal
    assert result.summary.total_kcal == 999


def test_save_meal_rejects_mismatched_meal_id(container: AppContainer) -> None:
    meal = Meal(
        meal_id="someone_else",
        user_id=USER,
        meal_date=DAY,
        meal_type="dinner",
    )

    with pytest.raises(InvalidPayloadError):
        container.meal_ledger_service.save_meal(meal)


def test_save_meal_rejects_bad_date(container: AppContainer) -> None:
    with pytest.raises(InvalidPayloadError):
        container.meal_ledger_service.save_meal(
            make_meal(USER, "2024-13-01", "dinner", [100])
        )


def test_meals_stored_one_key_per_meal(
    container: AppContainer, store: InMemoryKeyValueStore
) -> None:
    _log_day(container)

    meal_keys = sorted(key for key in store.values if key.startswith("meals:"))

    assert meal_keys == [
        "meals:u1:2024-01-01:u1_2024-01-01_breakfast",
        "meals:u1:2024-01-01:u1_2024-01-01_dinner",
        "meals:u1:2024-01-01:u1_2024-01-01_lunch",
        "meals:u1:2024-01-01:u1_2024-01-01_snacks",
    ]


def test_daily_total_ignores_user_ids_containing_colons(
    container: AppContainer,
) -> None:
    ledger = container.meal_ledger_service
    ledger.save_meal(make_meal("a:2024-01-01", "2024-01-02", "lunch", [700]))

    summary = ledger.save_meal(make_meal("a", "2024-01-01", "lunch", [100])).summary

    assert summary.total_kcal == 100
    assert [meal.user_id for meal in ledger.list_for_date("a", "2024-01-01")] == ["a"]


def test_recompute_counts_meals_from_per_day_array(
    container: AppContainer, store: InMemoryKeyValueStore
) -> None:
    store.values["meals:u1:2024-01-01"] = [
        {
            "mealId": "u1_2024-01-01_lunch",
            "userId": "u1",
            "mealDate": "2024-01-01",
            "mealType": "lunch",
            "items": [{"foodId": "rice", "amountGrams": 100, "calories": 600}],
        }
    ]

    summary = container.meal_ledger_service.save_meal(
        make_meal(USER, DAY, "dinner", [100])
    ).summary

    assert summary.total_kcal == 700
