"""User profile business logic."""

from dataclasses import dataclass
from typing import Protocol

from calorie_tracker.domain.models import UserProfile, UserUpdate


class UserProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def get_user(self, user_id: str) -> UserProfile | None:
        """Return the profile for a user id, if present."""

    def save_user(self, user: UserProfile) -> None:
        """Create or replace a profile."""


@dataclass
class UserProfileService:
    """Application service for user profiles."""

    repository: UserProfileRepository
    default_username: str = "User"
    default_daily_limit_kcal: int = 2000

    def get_or_create(self, user_id: str) -> UserProfile:
        """Return the user's profile, creating the default one if missing."""
        existing = self.repository.get_user(user_id)
        if existing:
            return existing

        created = self._default_profile(user_id)
        self.repository.save_user(created)
        return created

    def update(self, user_id: str, changes: UserUpdate) -> UserProfile:
        """Apply supplied fields onto the stored profile and persist it."""
        current = self.repository.get_user(user_id) or self._default_profile(user_id)
        updated = UserProfile(
            user_id=user_id,
            username=(
                changes.username if changes.username is not None else current.username
            ),
            daily_limit_kcal=(
                changes.daily_limit_kcal
                if changes.daily_limit_kcal is not None
                else current.daily_limit_kcal
            ),
        )
        self.repository.save_user(updated)
        return updated

    def _default_profile(self, user_id: str) -> UserProfile:
        return UserProfile(
            user_id=user_id,
            username=self.default_username,
            daily_limit_kcal=self.default_daily_limit_kcal,
        )
