"""Key-value repository for the food catalog."""

import logging
from dataclasses import dataclass

from calorie_tracker.adapters.kv_codec import dump_food, parse_food
from calorie_tracker.domain.errors import InvalidPayloadError
from calorie_tracker.domain.foods import FoodItem
from calorie_tracker.services.foods import FoodCatalogRepository
from calorie_tracker.services.store import KeyValueStore

logger = logging.getLogger(__name__)

FOOD_ITEMS_KEY = "food_items"


@dataclass
class KeyValueFoodCatalogRepository(FoodCatalogRepository):
    """Keeps the whole catalog as one JSON array."""

    store: KeyValueStore

    def load_catalog(self) -> list[FoodItem] | None:
        """Return the stored catalog, skipping entries that cannot be parsed."""
        raw = self.store.get(FOOD_ITEMS_KEY)
        if raw is None:
            return None
        if not isinstance(raw, list):
            logger.warning("Stored food catalog is not a list; treating as empty")
            return []
        foods = []
        for row in raw:
            try:
                foods.append(parse_food(row))
            except InvalidPayloadError:
                logger.warning("Skipping malformed catalog entry", extra={"row": row})
        return foods

    def save_catalog(self, foods: list[FoodItem]) -> None:
        """Write the catalog array."""
        self.store.set(FOOD_ITEMS_KEY, [dump_food(food) for food in foods])
