#!/usr/bin/env python3
"""
Simple example rendering schedule details for a handful of events
and resolving the known date range of the calendar.
"""

from datetime import datetime, timezone
import sys
import os

# Add parent directory to path so we can import event_dates
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from event_dates import (
    Event,
    InMemoryEventStore,
    InMemoryOptionStore,
    KnownRange,
    ScheduleCache,
    format_schedule,
)
import json


def main():
    now = datetime(2024, 5, 20, 12, 0, tzinfo=timezone.utc)
    
    events = [
        # Meetup with no end time
        Event(
            id=1,
            title="Meetup",
            start_at=datetime(2024, 6, 1, 9, 0, tzinfo=timezone.utc),
            end_at=datetime(2024, 6, 1, 9, 0, tzinfo=timezone.utc)
        ),
        # Late show running past midnight
        Event(
            id=2,
            title="Late show",
            start_at=datetime(2024, 6, 1, 22, 0, tzinfo=timezone.utc),
            end_at=datetime(2024, 6, 2, 0, 0, tzinfo=timezone.utc)
        ),
        # Weekend festival, all day
        Event(
            id=3,
            title="Festival",
            start_at=datetime(2024, 6, 1, 0, 0, tzinfo=timezone.utc),
            end_at=datetime(2024, 6, 3, 0, 0, tzinfo=timezone.utc),
            all_day=True
        ),
        # Workshop next year
        Event(
            id=4,
            title="Workshop",
            start_at=datetime(2025, 1, 15, 13, 0, tzinfo=timezone.utc),
            end_at=datetime(2025, 1, 15, 16, 30, tzinfo=timezone.utc)
        ),
    ]
    
    store = InMemoryEventStore(events)
    cache = ScheduleCache()
    
    for event in events:
        text = format_schedule(event.id, html=False, store=store, cache=cache, now=now)
        print(f"{event.title:10} | {text}")
    
    print()
    print(format_schedule(1, '<div class="schedule">', '</div>', store=store, cache=cache, now=now))
    
    known_range = KnownRange(store, InMemoryOptionStore())
    output = {
        'earliest': known_range.get_earliest(),
        'latest': known_range.get_latest(),
        'latest_display': known_range.get_latest("F j, Y"),
        'cache': cache.stats(),
    }
    
    print(json.dumps(output, indent=2))


if __name__ == '__main__':
    main()
