"""Key-value repository for user profiles."""

from dataclasses import dataclass

from calorie_tracker.adapters.kv_codec import dump_user, parse_user
from calorie_tracker.domain.models import UserProfile
from calorie_tracker.services.store import KeyValueStore
from calorie_tracker.services.users import UserProfileRepository


def user_key(user_id: str) -> str:
    return f"user:{user_id}"


@dataclass
class KeyValueUserRepository(UserProfileRepository):
    """Stores one profile per user id."""

    store: KeyValueStore
    default_username: str = "User"
    default_daily_limit_kcal: int = 2000

    def get_user(self, user_id: str) -> UserProfile | None:
        """Return the stored profile, if any."""
        row = self.store.get(user_key(user_id))
        if not isinstance(row, dict):
            return None
        defaults = UserProfile(
            user_id=user_id,
            username=self.default_username,
            daily_limit_kcal=self.default_daily_limit_kcal,
        )
        return parse_user(row, defaults)

    def save_user(self, user: UserProfile) -> None:
        """Write a profile."""
        self.store.set(user_key(user.user_id), dump_user(user))
