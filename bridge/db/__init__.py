"""
Database module - in-memory record store.
"""
from bridge.db.memory import MemoryStore, get_store, reset_store

__all__ = [
    "MemoryStore",
    "get_store",
    "reset_store"
]
