"""Domain models for calorie summaries."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DailySummary:
    """Calories eaten on a date compared against the user's limit."""

    summary_id: str
    user_id: str
    summary_date: str
    total_kcal: float
    exceeds_limit: bool

    @classmethod
    def empty(cls, user_id: str, summary_date: str) -> "DailySummary":
        """Return the zero-valued summary for a day with no meals."""
        return cls(
            summary_id=summary_id_for(user_id, summary_date),
            user_id=user_id,
            summary_date=summary_date,
            total_kcal=0,
            exceeds_limit=False,
        )


def summary_id_for(user_id: str, summary_date: str) -> str:
    return f"summary_{user_id}_{summary_date}"
