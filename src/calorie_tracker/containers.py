"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from calorie_tracker.adapters.kv_food_catalog_repository import (
    KeyValueFoodCatalogRepository,
)
from calorie_tracker.adapters.kv_meal_repository import KeyValueMealRepository
from calorie_tracker.adapters.kv_summary_repository import KeyValueSummaryRepository
from calorie_tracker.adapters.kv_user_repository import KeyValueUserRepository
from calorie_tracker.adapters.supabase_kv_store import SupabaseKeyValueStore
from calorie_tracker.config import Settings
from calorie_tracker.services.foods import FoodCatalogService
from calorie_tracker.services.meals import MealLedgerService
from calorie_tracker.services.store import KeyValueStore
from calorie_tracker.services.summaries import (
    DailySummaryService,
    MonthlySummaryService,
)
from calorie_tracker.services.users import UserProfileService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    store: KeyValueStore
    food_catalog_service: FoodCatalogService
    user_profile_service: UserProfileService
    meal_ledger_service: MealLedgerService
    daily_summary_service: DailySummaryService
    monthly_summary_service: MonthlySummaryService
    close_resources: Callable[[], Awaitable[None]]


def build_services(settings: Settings, store: KeyValueStore) -> AppContainer:
    """Wire repositories and services around a key-value store."""
    user_repository = KeyValueUserRepository(
        store,
        default_username=settings.default_username,
        default_daily_limit_kcal=settings.default_daily_limit_kcal,
    )
    meal_repository = KeyValueMealRepository(store)
    summary_repository = KeyValueSummaryRepository(store)
    user_profile_service = UserProfileService(
        user_repository,
        default_username=settings.default_username,
        default_daily_limit_kcal=settings.default_daily_limit_kcal,
    )
    daily_summary_service = DailySummaryService(
        meal_repository=meal_repository,
        summary_repository=summary_repository,
        user_service=user_profile_service,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        store=store,
        food_catalog_service=FoodCatalogService(KeyValueFoodCatalogRepository(store)),
        user_profile_service=user_profile_service,
        meal_ledger_service=MealLedgerService(
            repository=meal_repository,
            daily_summary_service=daily_summary_service,
        ),
        daily_summary_service=daily_summary_service,
        monthly_summary_service=MonthlySummaryService(summary_repository),
        close_resources=close_resources,
    )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    store = SupabaseKeyValueStore(supabase_client, table=resolved_settings.kv_table)
    return build_services(resolved_settings, store)
