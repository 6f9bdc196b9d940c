"""Storage backends behind one protocol."""

from src.tracker.storage.base import Storage, WorkItemFilters, conflict_for
from src.tracker.storage.database import DatabaseStorage
from src.tracker.storage.memory import MemoryStorage

__all__ = [
    "DatabaseStorage",
    "MemoryStorage",
    "Storage",
    "WorkItemFilters",
    "conflict_for",
]
