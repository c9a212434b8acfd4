"""Shared test fixtures."""

from copy import deepcopy
from dataclasses import dataclass, field

import pytest

from calorie_tracker.config import Settings
from calorie_tracker.containers import AppContainer, build_services
from calorie_tracker.domain.errors import StoreFailureError
from calorie_tracker.domain.meals import Meal, MealItem, meal_id_for
from calorie_tracker.services.store import KeyValueStore


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    """In-memory key-value store for tests."""

    values: dict[str, object] = field(default_factory=dict)
    writes: list[str] = field(default_factory=list)

    def get(self, key: str) -> object | None:
        return deepcopy(self.values.get(key))

    def set(self, key: str, value: object) -> None:
        self.writes.append(key)
        self.values[key] = deepcopy(value)

    def delete(self, key: str) -> None:
        self.values.pop(key, None)

    def get_by_prefix(self, prefix: str) -> list[object]:
        return [
            deepcopy(value)
            for key, value in self.values.items()
            if key.startswith(prefix)
        ]


@dataclass
class FailingKeyValueStore(KeyValueStore):
    """Store whose every operation fails like an unreachable backend."""

    message: str = "connection refused"

    def get(self, key: str) -> object | None:
        raise StoreFailureError(self.message)

    def set(self, key: str, value: object) -> None:
        raise StoreFailureError(self.message)

    def delete(self, key: str) -> None:
        raise StoreFailureError(self.message)

    def get_by_prefix(self, prefix: str) -> list[object]:
        raise StoreFailureError(self.message)


def make_meal(
    user_id: str, meal_date: str, meal_type: str, calories: list[float]
) -> Meal:
    """Build a meal with one item per calorie value."""
    return Meal(
        meal_id=meal_id_for(user_id, meal_date, meal_type),
        user_id=user_id,
        meal_date=meal_date,
        meal_type=meal_type,
        items=[
            MealItem(food_id=f"food_{index}", calories=value, amount_grams=100)
            for index, value in enumerate(calories)
        ],
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service-key",
    )


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def container(settings: Settings, store: InMemoryKeyValueStore) -> AppContainer:
    return build_services(settings, store)
