"""Key-value repository for daily summaries."""

from dataclasses import dataclass

from calorie_tracker.adapters.kv_codec import dump_summary, parse_summary
from calorie_tracker.domain.summaries import DailySummary
from calorie_tracker.services.store import KeyValueStore
from calorie_tracker.services.summaries import SummaryRepository


def summary_key(user_id: str, summary_date: str) -> str:
    return f"daily_summary:{user_id}:{summary_date}"


@dataclass
class KeyValueSummaryRepository(SummaryRepository):
    """Stores one summary per user and date."""

    store: KeyValueStore

    def get_summary(self, user_id: str, summary_date: str) -> DailySummary | None:
        """Return the summary for a date, if one was computed."""
        row = self.store.get(summary_key(user_id, summary_date))
        if not isinstance(row, dict):
            return None
        return parse_summary(row)

    def save_summary(self, summary: DailySummary) -> None:
        """Write a summary."""
        self.store.set(
            summary_key(summary.user_id, summary.summary_date), dump_summary(summary)
        )

    def list_summaries(self, user_id: str, month_prefix: str) -> list[DailySummary]:
        """Return the user's summaries whose date starts with month_prefix."""
        rows = self.store.get_by_prefix(summary_key(user_id, month_prefix))
        summaries = [parse_summary(row) for row in rows if isinstance(row, dict)]
        # User ids may contain ":", so the prefix can match other owners.
        return [
            summary
            for summary in summaries
            if summary.user_id == user_id
            and summary.summary_date.startswith(f"{month_prefix}-")
        ]
