"""Supabase-backed key-value store."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from supabase import Client

from calorie_tracker.domain.errors import StoreFailureError
from calorie_tracker.services.store import KeyValueStore

logger = logging.getLogger(__name__)

DEFAULT_TABLE = "kv_store_f5688a74"


@dataclass
class SupabaseKeyValueStore(KeyValueStore):
    """Stores JSON values in a Supabase table with key and value columns."""

    client: Client
    table: str = DEFAULT_TABLE

    def get(self, key: str) -> object | None:
        """Return the value stored under key, if present."""
        response = self._execute(
            "get",
            key,
            lambda: self.client.table(self.table)
            .select("value")
            .eq("key", key)
            .limit(1)
            .execute(),
        )
        if not response.data:
            return None
        return response.data[0].get("value")

    def set(self, key: str, value: object) -> None:
        """Upsert value under key."""
        self._execute(
            "set",
            key,
            lambda: self.client.table(self.table)
            .upsert({"key": key, "value": value})
            .execute(),
        )

    def delete(self, key: str) -> None:
        """Delete key if present."""
        self._execute(
            "delete",
            key,
            lambda: self.client.table(self.table).delete().eq("key", key).execute(),
        )

    def get_by_prefix(self, prefix: str) -> list[object]:
        """Return values whose key starts with prefix."""
        response = self._execute(
            "get_by_prefix",
            prefix,
            lambda: self.client.table(self.table)
            .select("key, value")
            .like("key", f"{prefix}%")
            .execute(),
        )
        # LIKE treats "_" as a wildcard, so re-check the literal prefix.
        return [
            row.get("value")
            for row in response.data or []
            if str(row.get("key", "")).startswith(prefix)
        ]

    def _execute(self, operation: str, key: str, run: Callable[[], Any]) -> Any:
        try:
            return run()
        except Exception as exc:
            logger.exception(
                "Key-value store operation failed",
                extra={"operation": operation, "key": key},
            )
            raise StoreFailureError(str(exc)) from exc
