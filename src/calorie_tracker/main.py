"""Command-line bootstrap for the food catalog."""

from calorie_tracker.app_logging import configure_logging
from calorie_tracker.containers import build_container


def main() -> None:
    """Seed or deduplicate the shared food catalog and report its size."""
    container = build_container()
    configure_logging(container.settings.log_level)
    foods = container.food_catalog_service.ensure_seeded()
    print(f"Calorie Tracker catalog ready: {len(foods)} food items")


if __name__ == "__main__":
    main()
