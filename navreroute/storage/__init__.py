"""Reroute attempt storage."""

from .history import RerouteHistoryStore, get_history_store

__all__ = [
    "RerouteHistoryStore",
    "get_history_store",
]
