"""Application errors mapped to HTTP failure responses."""


class CalorieTrackerError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = 500


class DuplicateFoodError(CalorieTrackerError):
    """Raised when a new food collides with an existing food id."""

    status_code = 400

    def __init__(self, food_id: str) -> None:
        super().__init__("A food item with this name already exists")
        self.food_id = food_id


class InvalidPayloadError(CalorieTrackerError):
    """Raised when request data cannot be accepted."""

    status_code = 400


class StoreFailureError(CalorieTrackerError):
    """Raised when the key-value store rejects or fails an operation."""

    status_code = 500
