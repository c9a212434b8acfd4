"""Domain models for user profiles."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserProfile:
    """Per-user settings."""

    user_id: str
    username: str
    daily_limit_kcal: int


@dataclass(frozen=True)
class UserUpdate:
    """Mutable profile fields; None leaves the stored value untouched."""

    username: str | None = None
    daily_limit_kcal: int | None = None
