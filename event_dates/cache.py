"""Request-scoped memoization of rendered schedule strings."""

import logging
from typing import NamedTuple

logger = logging.getLogger(__name__)


class ScheduleKey(NamedTuple):
    event_id: int
    before: str
    after: str
    html: bool


class ScheduleCache:
    """
    Holds rendered schedules for the lifetime of one request.
    
    Entries never expire and are never evicted. Create a new cache for each
    request so that rendering in one request cannot leak into another.
    Changing display settings after an entry has been stored does not
    affect that entry.
    """
    
    def __init__(self, name: str = "schedule_details"):
        self.name = name
        self._entries: dict[ScheduleKey, str] = {}
        self.hits = 0
        self.misses = 0
    
    def get(self, key: ScheduleKey) -> str | None:
        value = self._entries.get(key)
        if value is None:
            self.misses += 1
            return None
        self.hits += 1
        return value
    
    def set(self, key: ScheduleKey, value: str) -> None:
        self._entries[key] = value
    
    def clear(self) -> None:
        logger.debug("Clearing %s cache (%d entries)", self.name, len(self._entries))
        self._entries.clear()
        self.hits = 0
        self.misses = 0
    
    def stats(self) -> dict:
        total = self.hits + self.misses
        return {
            'name': self.name,
            'size': len(self._entries),
            'hits': self.hits,
            'misses': self.misses,
            'hit_rate': self.hits / total if total else 0.0,
        }
    
    def __contains__(self, key: ScheduleKey) -> bool:
        return key in self._entries
    
    def __len__(self) -> int:
        return len(self._entries)
