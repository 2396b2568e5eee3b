"""Utility functions for rendering an event's schedule details."""

import logging
from datetime import datetime, time, timedelta
from typing import Any, Callable

from .cache import ScheduleCache, ScheduleKey
from .date_utils import beginning_of_day, end_of_day, format_date
from .models import Event, FormatSettings
from .settings import DisplaySettings, get_display_settings
from .stores import EventStore

logger = logging.getLogger(__name__)

# Receives the date format chosen for the event and the event itself, returns
# the format to use for the second date of a multi-day range
SecondDayFormat = Callable[[str, Event], str]

DATE_START_OPEN = '<span class="event-date-start">'
DATE_END_OPEN = '<span class="event-date-end">'
TIME_OPEN = '<span class="event-time">'
CLOSE = '</span>'


def event_is_all_day(event: Event) -> bool:
    return event.all_day


def event_is_multiday(event: Event, cutoff: time = time(0, 0)) -> bool:
    """True if the event ends after the end of its first event day."""
    # Compared in whole seconds
    return event.end_at.replace(microsecond=0) > end_of_day(event.start_at, cutoff)


def is_past_event(event: Event, now: datetime | None = None) -> bool:
    """
    True if the event has already ended.
    
    A naive ``now`` is read as wall time in the timezone of the event end.
    """
    if now is None:
        now = datetime.now(event.end_at.tzinfo)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=event.end_at.tzinfo)
    return now > event.end_at


def resolve_format_settings(overrides: dict[str, Any] | None = None) -> FormatSettings:
    """
    Merge formatting overrides over the defaults.
    
    Keys in ``overrides`` replace the defaults and unknown keys are ignored.
    Turning ``show_time`` off also turns ``show_end_time`` off.
    """
    return FormatSettings(**(overrides or {}))


def use_yearless_format(event: Event, now: datetime | None = None) -> bool:
    """
    Decide once per event whether dates are shown without the year.
    
    The year is left out of both dates only when the event starts and ends in
    the current year; otherwise it is shown on both.
    """
    if now is None:
        now = datetime.now(event.start_at.tzinfo)
    return event.start_at.year == now.year and event.end_at.year == now.year


def render_schedule_inner(
    event: Event,
    display: DisplaySettings,
    settings: FormatSettings,
    html: bool = True,
    now: datetime | None = None,
    second_day_format: SecondDayFormat | None = None,
) -> str:
    """
    Render the schedule text for an event, without the before/after wrapping.
    
    Picks one of four layouts:
    1. Multi-day all-day: start date and end date
    2. Multi-day timed: start date and time, end date and time
    3. Single-day all-day: start date only
    4. Single-day timed: date with a start time, plus an end time unless it
       matches the start time to the minute
    
    Args:
        event: The event to render
        display: Date/time formats and separators
        settings: Which parts of the schedule to show
        html: Whether to wrap the date segments in spans
        now: Reference time for the current year, defaults to now
        second_day_format: Optional chooser for the second date's format
        
    Returns:
        The inner schedule text
    """
    show_date = settings.show_date
    show_time = settings.show_time
    time_format = display.time_format
    datetime_sep = display.datetime_separator
    range_sep = display.time_range_separator
    start, end = event.start_at, event.end_at
    
    if use_yearless_format(event, now):
        date_format = display.date_without_year_format
    else:
        date_format = display.date_with_year_format
    
    parts = [DATE_START_OPEN if html else '']
    
    if event_is_multiday(event, display.cutoff):
        end_date_format = date_format
        if second_day_format is not None:
            end_date_format = second_day_format(date_format, event)
        
        if event_is_all_day(event):
            # An end at or before the start of its day belongs to the day before
            if end.replace(microsecond=0) <= beginning_of_day(end, display.cutoff):
                end_date = format_date(end - timedelta(days=1), end_date_format)
            else:
                end_date = format_date(end, end_date_format)
            
            parts += [
                format_date(start, date_format) if show_date else '',
                CLOSE if html else '',
                range_sep if show_date else '',
                DATE_END_OPEN if html else '',
                end_date if show_date else '',
            ]
        else:
            parts += [
                format_date(start, date_format) if show_date else '',
                datetime_sep if show_date and show_time else '',
                format_date(start, time_format) if show_time else '',
                CLOSE if html else '',
                range_sep if show_date and show_time else '',
                DATE_END_OPEN if html else '',
                format_date(end, end_date_format) if show_date else '',
                datetime_sep if show_date and show_time else '',
                format_date(end, time_format) if show_time else '',
            ]
    elif event_is_all_day(event):
        parts.append(format_date(start, date_format) if show_date else '')
    else:
        parts += [
            format_date(start, date_format) if show_date else '',
            datetime_sep if show_date and show_time else '',
            format_date(start, time_format) if show_time else '',
        ]
        # Identical start and end times are shown once
        if format_date(start, 'g:i A') != format_date(end, 'g:i A'):
            parts += [
                CLOSE if html else '',
                range_sep if settings.show_end_time else '',
                TIME_OPEN if html else '',
                format_date(end, time_format) if settings.show_end_time else '',
            ]
    
    parts.append(CLOSE if html else '')
    
    return ''.join(parts)


def resolve_event(event: Event | int | None, store: EventStore | None = None) -> Event | None:
    if isinstance(event, Event):
        return event
    if event is None or store is None:
        return None
    return store.get_event(event)


def format_schedule(
    event: Event | int | None,
    before: str = '',
    after: str = '',
    html: bool = True,
    *,
    store: EventStore | None = None,
    cache: ScheduleCache | None = None,
    display: DisplaySettings | None = None,
    overrides: dict[str, Any] | None = None,
    now: datetime | None = None,
    second_day_format: SecondDayFormat | None = None,
) -> str:
    """
    Return the human-readable schedule details for an event.
    
    The result is memoized in ``cache`` under ``(event id, before, after,
    html)``; later calls with the same key return the stored string as is,
    even if display settings or overrides have changed since.
    
    Never raises: an event that cannot be resolved, a password protected
    event, or a failure while rendering all produce an empty string.
    
    Args:
        event: An Event, or the id of an event to look up in ``store``
        before: Text to prepend to the schedule
        after: Text to append to the schedule
        html: Whether to wrap the date segments in spans
        store: Event store used to resolve an event id
        cache: Request-scoped cache of rendered schedules
        display: Display settings, defaults to the configured ones
        overrides: Format setting overrides, see resolve_format_settings
        now: Reference time for the current year, defaults to now
        second_day_format: Optional chooser for the second date's format
        
    Returns:
        The wrapped schedule text
    """
    resolved = resolve_event(event, store)
    if resolved is None:
        logger.debug("Could not resolve event %r", event)
        return ''
    
    if resolved.password_required:
        return ''
    
    key = ScheduleKey(resolved.id, before, after, html)
    if cache is not None:
        cached = cache.get(key)
        if cached is not None:
            return cached
    
    try:
        inner = render_schedule_inner(
            resolved,
            display if display is not None else get_display_settings(),
            resolve_format_settings(overrides),
            html=html,
            now=now,
            second_day_format=second_day_format,
        )
    except Exception:
        logger.exception("Failed to render schedule for event %s", resolved.id)
        return ''
    
    schedule = before + inner + after
    
    if cache is not None:
        cache.set(key, schedule)
    
    return schedule
