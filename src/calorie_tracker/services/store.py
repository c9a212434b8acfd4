"""Key-value store interface shared by the repositories."""

from typing import Protocol


class KeyValueStore(Protocol):
    """Opaque JSON store addressed by string keys."""

    def get(self, key: str) -> object | None:
        """Return the value stored under key, if present."""

    def set(self, key: str, value: object) -> None:
        """Store value under key, replacing any previous value."""

    def delete(self, key: str) -> None:
        """Remove key; missing keys are ignored."""

    def get_by_prefix(self, prefix: str) -> list[object]:
        """Return values whose key starts with prefix."""
