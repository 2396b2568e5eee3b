"""Earliest and latest known event dates across the whole event collection."""

import logging

from .date_utils import DB_DATETIME_FORMAT, reformat, to_db_datetime
from .models import Event
from .stores import EventStore, OptionStore

logger = logging.getLogger(__name__)

EARLIEST_DATE_OPTION = 'earliest_date'
LATEST_DATE_OPTION = 'latest_date'


class KnownRange:
    """
    Resolves the earliest event start and latest event end.
    
    Both boundaries are kept in the option store in ``Y-m-d H:i:s`` form and
    are only recomputed, from a single scan of every event, when missing.
    None means the boundary is unavailable, for example because there are no
    events yet.
    """
    
    def __init__(self, events: EventStore, options: OptionStore):
        self.events = events
        self.options = options
    
    def get_earliest(self, fmt: str = DB_DATETIME_FORMAT) -> str | None:
        return self._lookup(EARLIEST_DATE_OPTION, fmt)
    
    def get_latest(self, fmt: str = DB_DATETIME_FORMAT) -> str | None:
        return self._lookup(LATEST_DATE_OPTION, fmt)
    
    def _lookup(self, option: str, fmt: str) -> str | None:
        stored = self.options.get(option)
        if stored is None:
            self.rebuild_known_range()
            stored = self.options.get(option)
            if stored is None:
                return None
        
        value = reformat(stored, fmt)
        if value is None:
            logger.warning("Ignoring unparsable %s option value %r", option, stored)
        return value
    
    def rebuild_known_range(self) -> bool:
        """
        Recompute both boundaries from one pass over all events.
        
        Returns:
            True if a range was stored, False if there are no events
        """
        earliest = None
        latest = None
        
        # Compared as stored wall time text, which sorts chronologically
        for event in self.events.all_events():
            start = to_db_datetime(event.start_at)
            end = to_db_datetime(event.end_at)
            if earliest is None or start < earliest:
                earliest = start
            if latest is None or end > latest:
                latest = end
        
        if earliest is None or latest is None:
            logger.debug("No events found, clearing known range")
            self.options.delete(EARLIEST_DATE_OPTION)
            self.options.delete(LATEST_DATE_OPTION)
            return False
        
        self.options.set(EARLIEST_DATE_OPTION, earliest)
        self.options.set(LATEST_DATE_OPTION, latest)
        logger.debug("Rebuilt known range: %s to %s", earliest, latest)
        return True
    
    def update_known_range(self, event: Event) -> None:
        """
        Widen the stored range so that it covers a newly saved event.
        
        If no range is stored yet the event's own dates become the range.
        """
        earliest = self.options.get(EARLIEST_DATE_OPTION)
        latest = self.options.get(LATEST_DATE_OPTION)
        start = to_db_datetime(event.start_at)
        end = to_db_datetime(event.end_at)
        
        if earliest is None or latest is None:
            self.options.set(EARLIEST_DATE_OPTION, start)
            self.options.set(LATEST_DATE_OPTION, end)
            return
        
        # The canonical format sorts chronologically as text
        if start < earliest:
            self.options.set(EARLIEST_DATE_OPTION, start)
        if end > latest:
            self.options.set(LATEST_DATE_OPTION, end)
