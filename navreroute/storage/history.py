"""
History storage for reroute attempts.
In-memory storage; attempts are dropped oldest-first beyond max_entries.
"""

from typing import Optional
from datetime import datetime
from collections import OrderedDict

from ..models.history import RerouteAttempt


class RerouteHistoryStore:
    """
    In-memory store of recent reroute attempts.

    Keeps the diagnostics of abandoned reroutes next to the realigned requests
    of successful ones, so a recurring bounds fault can be inspected after
    the fact.
    """

    def __init__(self, max_entries: int = 100):
        """
        Initialize history store.

        Args:
            max_entries: Maximum number of attempts to keep (oldest are dropped)
        """
        self.max_entries = max_entries
        self._store: OrderedDict[str, RerouteAttempt] = OrderedDict()

    def add_entry(self, entry: RerouteAttempt) -> None:
        """Add an attempt, replacing any earlier one with the same ID."""
        self._store[entry.request_id] = entry

        # Move to end (most recent)
        self._store.move_to_end(entry.request_id)

        while len(self._store) > self.max_entries:
            self._store.popitem(last=False)

    def get_entry(self, request_id: str) -> Optional[RerouteAttempt]:
        return self._store.get(request_id)

    def list_entries(
        self,
        limit: int = 50,
        offset: int = 0,
        since: Optional[datetime] = None,
        failed_only: bool = False,
    ) -> list[RerouteAttempt]:
        """
        List attempts (newest first).

        Args:
            limit: Maximum number of entries to return
            offset: Number of entries to skip
            since: Only return entries at or after this timestamp
            failed_only: Only return abandoned reroutes

        Returns:
            List of reroute attempts
        """
        entries = list(reversed(self._store.values()))

        if since:
            entries = [e for e in entries if e.timestamp >= since]
        if failed_only:
            entries = [e for e in entries if not e.succeeded]

        return entries[offset : offset + limit]

    def count(self, since: Optional[datetime] = None) -> int:
        """Count stored attempts, optionally only those at or after `since`."""
        if since is None:
            return len(self._store)

        return sum(1 for e in self._store.values() if e.timestamp >= since)

    def clear(self) -> None:
        """Clear all entries (useful for testing)."""
        self._store.clear()


# Global singleton instance
_history_store: Optional[RerouteHistoryStore] = None


def get_history_store() -> RerouteHistoryStore:
    """Get the global history store instance."""
    global _history_store
    if _history_store is None:
        from ..config import get_yaml_setting

        _history_store = RerouteHistoryStore(
            max_entries=int(get_yaml_setting("history", "max_entries", default=100))
        )
    return _history_store
