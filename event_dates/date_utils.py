"""Date and time primitives used when rendering event dates."""

import calendar
from datetime import datetime, time, timedelta

DB_DATETIME_FORMAT = "Y-m-d H:i:s"
_DB_STRPTIME_FORMAT = "%Y-%m-%d %H:%M:%S"

_MONTH_NAMES = [
    "", "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]
_DAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


def _ordinal_suffix(day: int) -> str:
    if 11 <= day % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def _utc_offset(value: datetime, colon: bool) -> str:
    offset = value.utcoffset() or timedelta(0)
    minutes = int(offset.total_seconds() // 60)
    sign = "+" if minutes >= 0 else "-"
    hours, minutes = divmod(abs(minutes), 60)
    separator = ":" if colon else ""
    return f"{sign}{hours:02d}{separator}{minutes:02d}"


def _twelve_hour(value: datetime) -> int:
    return value.hour % 12 or 12


_TOKENS = {
    # Day
    'd': lambda v: f"{v.day:02d}",
    'D': lambda v: _DAY_NAMES[v.weekday()][:3],
    'j': lambda v: str(v.day),
    'l': lambda v: _DAY_NAMES[v.weekday()],
    'N': lambda v: str(v.isoweekday()),
    'S': lambda v: _ordinal_suffix(v.day),
    'w': lambda v: str(v.isoweekday() % 7),
    'z': lambda v: str(v.timetuple().tm_yday - 1),
    # Week
    'W': lambda v: f"{v.isocalendar()[1]:02d}",
    # Month
    'F': lambda v: _MONTH_NAMES[v.month],
    'm': lambda v: f"{v.month:02d}",
    'M': lambda v: _MONTH_NAMES[v.month][:3],
    'n': lambda v: str(v.month),
    't': lambda v: str(calendar.monthrange(v.year, v.month)[1]),
    # Year
    'L': lambda v: "1" if calendar.isleap(v.year) else "0",
    'Y': lambda v: str(v.year),
    'y': lambda v: f"{v.year % 100:02d}",
    # Time
    'a': lambda v: "am" if v.hour < 12 else "pm",
    'A': lambda v: "AM" if v.hour < 12 else "PM",
    'g': lambda v: str(_twelve_hour(v)),
    'G': lambda v: str(v.hour),
    'h': lambda v: f"{_twelve_hour(v):02d}",
    'H': lambda v: f"{v.hour:02d}",
    'i': lambda v: f"{v.minute:02d}",
    's': lambda v: f"{v.second:02d}",
    'u': lambda v: f"{v.microsecond:06d}",
    # Timezone
    'e': lambda v: str(v.tzinfo) if v.tzinfo else "UTC",
    'T': lambda v: v.tzname() or "UTC",
    'P': lambda v: _utc_offset(v, colon=True),
    'O': lambda v: _utc_offset(v, colon=False),
    # Full date/time
    'c': lambda v: format_date(v, "Y-m-d\\TH:i:sP"),
    'r': lambda v: format_date(v, "D, d M Y H:i:s O"),
    'U': lambda v: str(int(v.timestamp())),
}


def format_date(value: datetime, fmt: str) -> str:
    """
    Render a datetime using a PHP ``date()`` style format string.
    
    Display formats for events are configured in this notation (for example
    ``"F j, Y"`` or ``"g:ia"``), so it is used everywhere a date is shown.
    A backslash escapes the following character; characters that are not
    format tokens are copied through unchanged.
    
    Args:
        value: The datetime to render
        fmt: The format string
        
    Returns:
        The formatted text
    """
    output = []
    escaped = False
    
    for char in fmt:
        if escaped:
            output.append(char)
            escaped = False
        elif char == '\\':
            escaped = True
        elif char in _TOKENS:
            output.append(_TOKENS[char](value))
        else:
            output.append(char)
    
    return ''.join(output)


def parse_cutoff(value: str) -> time:
    """Parse an ``HH:MM`` multi-day cutoff into a time."""
    try:
        hours, minutes = value.split(':')
        return time(int(hours), int(minutes))
    except (ValueError, AttributeError) as exc:
        raise ValueError(f"invalid multi-day cutoff: {value!r}") from exc


def beginning_of_day(value: datetime, cutoff: time = time(0, 0)) -> datetime:
    """
    Return the instant at which the event day of ``value`` begins.

    The event day starts at ``cutoff`` on the calendar day of ``value`` in
    its own timezone, even when ``value`` is earlier than the cutoff.
    """
    return value.replace(hour=cutoff.hour, minute=cutoff.minute, second=0, microsecond=0)


def end_of_day(value: datetime, cutoff: time = time(0, 0)) -> datetime:
    """Return the last whole second of the event day of ``value``."""
    return beginning_of_day(value, cutoff) + timedelta(days=1, seconds=-1)


def to_db_datetime(value: datetime) -> str:
    """Render a datetime in the canonical storage format."""
    return format_date(value, DB_DATETIME_FORMAT)


def reformat(text: str, fmt: str) -> str | None:
    """
    Reformat canonical ``Y-m-d H:i:s`` text using another display format.
    
    Returns None when the text cannot be parsed.
    """
    try:
        value = datetime.strptime(text, _DB_STRPTIME_FORMAT)
    except (TypeError, ValueError):
        return None
    return format_date(value, fmt)
