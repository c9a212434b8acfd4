"""Pydantic models for API request and response bodies."""

from dataclasses import asdict
from typing import Annotated, Any, Literal, Self

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StringConstraints,
    ValidationError,
    model_validator,
)
from pydantic.alias_generators import to_camel

from calorie_tracker.domain.errors import InvalidPayloadError
from calorie_tracker.domain.foods import FoodItem
from calorie_tracker.domain.meals import Meal, MealItem, meal_id_for
from calorie_tracker.domain.models import UserUpdate
from calorie_tracker.services.foods import NewFood

AmountType = Literal["grams", "count"]
MealType = Literal["breakfast", "lunch", "snacks", "dinner"]


class CamelModel(BaseModel):
    """Base model exchanging camelCase JSON with the browser client."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def from_domain(cls, value: object) -> Self:
        return cls.model_validate(asdict(value))

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class FoodItemModel(CamelModel):
    """Catalog entry payload."""

    food_id: str = Field(min_length=1)
    name: str
    category: str = "custom"
    amount_type: AmountType
    calories_per_gram: float | None = None
    calories_per_unit: float | None = None

    def to_domain(self) -> FoodItem:
        return FoodItem(
            food_id=self.food_id,
            name=self.name,
            category=self.category,
            amount_type=self.amount_type,
            calories_per_gram=self.calories_per_gram,
            calories_per_unit=self.calories_per_unit,
        )


class NewFoodRequest(CamelModel):
    """Payload for adding a food; the id is derived from the name."""

    name: str = Field(min_length=1)
    category: str | None = None
    amount_type: AmountType
    calories_per_gram: float | None = Field(default=None, ge=0)
    calories_per_unit: float | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _require_matching_calories(self) -> "NewFoodRequest":
        if self.amount_type == "grams" and self.calories_per_gram is None:
            raise ValueError("caloriesPerGram is required for gram-based foods")
        if self.amount_type == "count" and self.calories_per_unit is None:
            raise ValueError("caloriesPerUnit is required for count-based foods")
        return self

    def to_domain(self) -> NewFood:
        grams = self.amount_type == "grams"
        return NewFood(
            name=self.name,
            category=self.category,
            amount_type=self.amount_type,
            calories_per_gram=self.calories_per_gram if grams else None,
            calories_per_unit=None if grams else self.calories_per_unit,
        )


class MealItemModel(CamelModel):
    """Meal line item payload."""

    food_id: str
    amount_grams: float | None = None
    amount_count: float | None = None
    variant_name: str | None = None
    calories: float

    def to_domain(self) -> MealItem:
        return MealItem(
            food_id=self.food_id,
            calories=self.calories,
            amount_grams=self.amount_grams,
            amount_count=self.amount_count,
            variant_name=self.variant_name,
        )


class MealModel(CamelModel):
    """Meal payload; a missing mealId is derived from user, date and type."""

    meal_id: str | None = None
    user_id: str = Field(min_length=1)
    meal_date: str
    meal_type: MealType
    items: list[MealItemModel] = Field(default_factory=list)

    def to_domain(self) -> Meal:
        return Meal(
            meal_id=self.meal_id
            or meal_id_for(self.user_id, self.meal_date, self.meal_type),
            user_id=self.user_id,
            meal_date=self.meal_date,
            meal_type=self.meal_type,
            items=[item.to_domain() for item in self.items],
        )


class DailySummaryModel(CamelModel):
    """Daily summary payload."""

    summary_id: str
    user_id: str
    summary_date: str
    total_kcal: float
    exceeds_limit: bool


class UserModel(CamelModel):
    """User profile payload."""

    user_id: str
    username: str
    daily_limit_kcal: int


Username = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class UserUpdateRequest(CamelModel):
    """Profile fields a client may change."""

    model_config = ConfigDict(extra="forbid")

    username: Username | None = None
    daily_limit_kcal: int | None = None

    def to_domain(self) -> UserUpdate:
        return UserUpdate(
            username=self.username,
            daily_limit_kcal=self.daily_limit_kcal,
        )


def parse_food_items(raw: object) -> object:
    """Convert a bulk-update payload to foods; non-lists pass through as-is."""
    if not isinstance(raw, list):
        return raw
    try:
        return [FoodItemModel.model_validate(item).to_domain() for item in raw]
    except ValidationError as exc:
        raise InvalidPayloadError("Invalid food items data") from exc
