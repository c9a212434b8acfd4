"""Services for managing the shared food catalog."""

import logging
from dataclasses import dataclass, field
from typing import Protocol

from calorie_tracker.domain.errors import DuplicateFoodError, InvalidPayloadError
from calorie_tracker.domain.foods import DEFAULT_FOODS, FoodItem, derive_food_id

logger = logging.getLogger(__name__)


class FoodCatalogRepository(Protocol):
    """Persistence interface for the food catalog."""

    def load_catalog(self) -> list[FoodItem] | None:
        """Return the stored catalog, or None when it was never written."""

    def save_catalog(self, foods: list[FoodItem]) -> None:
        """Replace the stored catalog."""


@dataclass(frozen=True)
class NewFood:
    """User-supplied fields for a catalog addition."""

    name: str
    amount_type: str
    category: str | None = None
    calories_per_gram: float | None = None
    calories_per_unit: float | None = None


@dataclass
class FoodCatalogService:
    """Application service for catalog operations."""

    repository: FoodCatalogRepository
    _seeded: bool = field(default=False, init=False, repr=False)

    def ensure_seeded(self) -> list[FoodItem]:
        """Write default foods if missing and collapse duplicate ids."""
        stored = self.repository.load_catalog()
        if stored is None:
            foods = list(DEFAULT_FOODS)
            self.repository.save_catalog(foods)
            logger.info("Seeded food catalog", extra={"count": len(foods)})
        else:
            foods = _dedupe(stored)
            if len(foods) != len(stored):
                logger.info(
                    "Deduplicated food items: %s -> %s", len(stored), len(foods)
                )
                self.repository.save_catalog(foods)
        self._seeded = True
        return foods

    def list_foods(self) -> list[FoodItem]:
        """Return the catalog, bootstrapping it once per process if needed."""
        if not self._seeded:
            return self.ensure_seeded()
        return self.repository.load_catalog() or []

    def add_food(self, new_food: NewFood) -> FoodItem:
        """Append a food whose id is derived from its name."""
        foods = self.list_foods()
        food_id = derive_food_id(new_food.name)
        if any(food.food_id == food_id for food in foods):
            raise DuplicateFoodError(food_id)

        food = FoodItem(
            food_id=food_id,
            name=new_food.name,
            category=new_food.category or "custom",
            amount_type=new_food.amount_type,
            calories_per_gram=new_food.calories_per_gram,
            calories_per_unit=new_food.calories_per_unit,
        )
        self.repository.save_catalog([*foods, food])
        return food

    def remove_food(self, food_id: str) -> None:
        """Remove a food by id; unknown ids are ignored."""
        foods = self.repository.load_catalog() or []
        self.repository.save_catalog([food for food in foods if food.food_id != food_id])

    def replace_all(self, foods: object) -> None:
        """Overwrite the whole catalog, keeping the first food for each id."""
        if not isinstance(foods, list):
            raise InvalidPayloadError("Invalid food items data")
        if not all(isinstance(food, FoodItem) for food in foods):
            raise InvalidPayloadError("Invalid food items data")
        unique = _dedupe(foods)
        if len(unique) != len(foods):
            logger.warning(
                "Dropped duplicate food ids from catalog update",
                extra={"dropped": len(foods) - len(unique)},
            )
        self.repository.save_catalog(unique)


def _dedupe(foods: list[FoodItem]) -> list[FoodItem]:
    """Keep the first food for each id."""
    seen: set[str] = set()
    unique = []
    for food in foods:
        if food.food_id in seen:
            continue
        seen.add(food.food_id)
        unique.append(food)
    return unique
