"""Schedule details and known date range for calendar events."""

from .cache import ScheduleCache, ScheduleKey
from .date_utils import DB_DATETIME_FORMAT, format_date, reformat
from .known_range import KnownRange
from .models import Event, FormatSettings
from .schedule_utils import (
    event_is_all_day,
    event_is_multiday,
    format_schedule,
    is_past_event,
    render_schedule_inner,
    resolve_format_settings,
    use_yearless_format,
)
from .settings import DisplaySettings, get_display_settings
from .stores import EventStore, InMemoryEventStore, InMemoryOptionStore, OptionStore

__all__ = [
    'DB_DATETIME_FORMAT',
    'DisplaySettings',
    'Event',
    'EventStore',
    'FormatSettings',
    'InMemoryEventStore',
    'InMemoryOptionStore',
    'KnownRange',
    'OptionStore',
    'ScheduleCache',
    'ScheduleKey',
    'event_is_all_day',
    'event_is_multiday',
    'format_date',
    'format_schedule',
    'get_display_settings',
    'is_past_event',
    'reformat',
    'render_schedule_inner',
    'resolve_format_settings',
    'use_yearless_format',
]
