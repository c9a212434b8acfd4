"""Tests for key-value repositories and their stored layout."""

from calorie_tracker.adapters.kv_food_catalog_repository import (
    KeyValueFoodCatalogRepository,
)
from calorie_tracker.adapters.kv_meal_repository import KeyValueMealRepository
from calorie_tracker.adapters.kv_summary_repository import KeyValueSummaryRepository
from calorie_tracker.domain.summaries import DailySummary
from tests.conftest import InMemoryKeyValueStore, make_meal


def test_catalog_skips_malformed_entries() -> None:
    store = InMemoryKeyValueStore(
        values={
            "food_items": [
                {
                    "foodId": "egg",
                    "name": "Egg",
                    "amountType": "count",
                    "caloriesPerUnit": 78,
                },
                {"name": "No id"},
                "not a food",
            ]
        }
    )

    foods = KeyValueFoodCatalogRepository(store).load_catalog()

    assert foods is not None
    assert [food.food_id for food in foods] == ["egg"]
    assert foods[0].category == "custom"


def test_catalog_missing_vs_non_list() -> None:
    empty = KeyValueFoodCatalogRepository(InMemoryKeyValueStore())
    assert empty.load_catalog() is None
    store = InMemoryKeyValueStore(values={"food_items": {"oops": True}})
    assert KeyValueFoodCatalogRepository(store).load_catalog() == []


def test_meal_repository_writes_camel_case_records() -> None:
    store = InMemoryKeyValueStore()
    repository = KeyValueMealRepository(store)

    repository.save_meal(make_meal("u1", "2024-01-01", "lunch", [150]))

    assert store.values["meals:u1:2024-01-01:u1_2024-01-01_lunch"] == {
        "mealId": "u1_2024-01-01_lunch",
        "userId": "u1",
        "mealDate": "2024-01-01",
        "mealType": "lunch",
        "items": [{"foodId": "food_0", "amountGrams": 100, "calories": 150}],
    }


def test_meal_listing_excludes_user_ids_sharing_the_prefix() -> None:
    store = InMemoryKeyValueStore()
    repository = KeyValueMealRepository(store)
    repository.save_meal(make_meal("a", "2024-01-01", "lunch", [100]))
    repository.save_meal(make_meal("a:2024-01-01", "2024-01-02", "dinner", [700]))

    meals = repository.list_meals("a", "2024-01-01")

    assert [meal.meal_id for meal in meals] == ["a_2024-01-01_lunch"]


def _day_array_row(meal_type: str, calories: float) -> dict[str, object]:
    return {
        "mealId": f"u1_2024-01-01_{meal_type}",
        "userId": "u1",
        "mealDate": "2024-01-01",
        "mealType": meal_type,
        "items": [{"foodId": "rice", "amountGrams": 100, "calories": calories}],
    }


def test_meal_listing_merges_per_day_array() -> None:
    store = InMemoryKeyValueStore(
        values={
            "meals:u1:2024-01-01": [
                _day_array_row("lunch", 600),
                _day_array_row("dinner", 50),
            ],
            "meals:u1:2024-01-01:u1_2024-01-01_dinner": _day_array_row("dinner", 100),
        }
    )

    meals = KeyValueMealRepository(store).list_meals("u1", "2024-01-01")

    totals = {meal.meal_type: meal.total_calories for meal in meals}
    assert totals == {"lunch": 600, "dinner": 100}


def test_meal_save_moves_per_day_array_to_meal_keys() -> None:
    store = InMemoryKeyValueStore(
        values={"meals:u1:2024-01-01": [_day_array_row("lunch", 600)]}
    )
    repository = KeyValueMealRepository(store)

    repository.save_meal(make_meal("u1", "2024-01-01", "dinner", [100]))

    assert "meals:u1:2024-01-01" not in store.values
    assert store.values["meals:u1:2024-01-01:u1_2024-01-01_lunch"] == (
        _day_array_row("lunch", 600)
    )
    totals = sorted(
        meal.total_calories for meal in repository.list_meals("u1", "2024-01-01")
    )
    assert totals == [100, 600]


def test_meal_delete_removes_meal_from_per_day_array() -> None:
    store = InMemoryKeyValueStore(
        values={
            "meals:u1:2024-01-01": [
                _day_array_row("lunch", 600),
                _day_array_row("dinner", 200),
            ]
        }
    )
    repository = KeyValueMealRepository(store)

    repository.delete_meal("u1", "2024-01-01", "u1_2024-01-01_lunch")

    meals = repository.list_meals("u1", "2024-01-01")
    assert [meal.meal_type for meal in meals] == ["dinner"]
    assert "meals:u1:2024-01-01" not in store.values


def test_summary_repository_round_trip_by_month() -> None:
    store = InMemoryKeyValueStore()
    repository = KeyValueSummaryRepository(store)
    summary = DailySummary("summary_u1_2024-03-05", "u1", "2024-03-05", 300, False)

    repository.save_summary(summary)

    assert repository.get_summary("u1", "2024-03-05") == summary
    assert repository.list_summaries("u1", "2024-03") == [summary]
    assert repository.list_summaries("u1", "2024-04") == []


def test_monthly_listing_excludes_user_ids_sharing_the_prefix() -> None:
    store = InMemoryKeyValueStore()
    repository = KeyValueSummaryRepository(store)
    own = DailySummary("summary_u1_2024-03-05", "u1", "2024-03-05", 300, False)
    other = DailySummary(
        "summary_u1:2024-03_2024-05-01", "u1:2024-03", "2024-05-01", 900, False
    )
    repository.save_summary(own)
    repository.save_summary(other)

    assert repository.list_summaries("u1", "2024-03") == [own]
