"""
Tests for the date and time primitives.

- Format tokens and escaping
- Event day boundaries with and without a cutoff
- Reformatting canonical datetime text
"""

import pytest
from datetime import datetime, time, timedelta, timezone
import sys
import os

# Add parent directory to path to import modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from event_dates.date_utils import (
    DB_DATETIME_FORMAT,
    beginning_of_day,
    end_of_day,
    format_date,
    parse_cutoff,
    reformat,
    to_db_datetime,
)


class TestFormatDate:
    """Test rendering datetimes with display formats."""
    
    def test_default_display_formats(self):
        """Test the formats used for dates and times by default."""
        value = datetime(2024, 6, 1, 21, 5, 0, tzinfo=timezone.utc)
        
        assert format_date(value, "F j") == "June 1"
        assert format_date(value, "F j, Y") == "June 1, 2024"
        assert format_date(value, "g:i a") == "9:05 pm"
    
    def test_twelve_hour_clock(self):
        """Test midnight and noon on the twelve hour clock."""
        midnight = datetime(2024, 6, 1, 0, 0, 0, tzinfo=timezone.utc)
        noon = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)
        
        assert format_date(midnight, "g:i A") == "12:00 AM"
        assert format_date(noon, "g:i A") == "12:00 PM"
        assert format_date(noon, "h:i") == "12:00"
    
    def test_day_and_month_tokens(self):
        """Test padded, unpadded and named day and month tokens."""
        value = datetime(2024, 2, 3, 4, 5, 6, tzinfo=timezone.utc)
        
        assert format_date(value, "d/m/y") == "03/02/24"
        assert format_date(value, "D l M") == "Sat Saturday Feb"
        assert format_date(value, "jS n t L") == "3rd 2 29 1"
    
    def test_ordinal_suffixes(self):
        """Test English ordinal suffixes including the teens."""
        suffixes = [
            format_date(datetime(2024, 1, day, tzinfo=timezone.utc), "jS")
            for day in (1, 2, 3, 4, 11, 12, 13, 21, 22, 23)
        ]
        
        assert suffixes == ["1st", "2nd", "3rd", "4th", "11th", "12th", "13th", "21st", "22nd", "23rd"]
    
    def test_timezone_offset(self):
        """Test offset tokens for a non-UTC timezone."""
        value = datetime(2024, 6, 1, 9, 0, 0, tzinfo=timezone(timedelta(hours=-5, minutes=-30)))
        
        assert format_date(value, "P") == "-05:30"
        assert format_date(value, "O") == "-0530"
        assert format_date(value, "c") == "2024-06-01T09:00:00-05:30"
    
    def test_escaped_characters(self):
        """Test that backslash escaped characters are kept literally."""
        value = datetime(2024, 6, 1, 9, 0, 0, tzinfo=timezone.utc)
        
        assert format_date(value, "j \\o\\f F") == "1 of June"
    
    def test_canonical_format(self):
        """Test the canonical storage format."""
        value = datetime(2024, 6, 1, 9, 3, 7, tzinfo=timezone.utc)
        
        assert format_date(value, DB_DATETIME_FORMAT) == "2024-06-01 09:03:07"
        assert to_db_datetime(value) == "2024-06-01 09:03:07"


class TestDayBoundaries:
    """Test beginning and end of an event day."""
    
    def test_midnight_cutoff(self):
        """Test boundaries with the default cutoff."""
        value = datetime(2024, 6, 1, 15, 30, 0, tzinfo=timezone.utc)
        
        assert beginning_of_day(value) == datetime(2024, 6, 1, 0, 0, 0, tzinfo=timezone.utc)
        assert end_of_day(value) == datetime(2024, 6, 1, 23, 59, 59, tzinfo=timezone.utc)
    
    def test_midnight_is_its_own_beginning(self):
        """Test that midnight is the beginning of its own day."""
        value = datetime(2024, 6, 3, 0, 0, 0, tzinfo=timezone.utc)
        
        assert beginning_of_day(value) == value
    
    def test_cutoff_uses_calendar_date(self):
        """Test that boundaries use the calendar date even before the cutoff."""
        value = datetime(2024, 6, 2, 3, 0, 0, tzinfo=timezone.utc)
        cutoff = time(6, 0)
        
        assert beginning_of_day(value, cutoff) == datetime(2024, 6, 2, 6, 0, 0, tzinfo=timezone.utc)
        assert end_of_day(value, cutoff) == datetime(2024, 6, 3, 5, 59, 59, tzinfo=timezone.utc)
    
    def test_after_cutoff(self):
        """Test boundaries for a time after the cutoff."""
        value = datetime(2024, 6, 2, 15, 0, 0, tzinfo=timezone.utc)
        cutoff = time(6, 0)
        
        assert beginning_of_day(value, cutoff) == datetime(2024, 6, 2, 6, 0, 0, tzinfo=timezone.utc)
        assert end_of_day(value, cutoff) == datetime(2024, 6, 3, 5, 59, 59, tzinfo=timezone.utc)
    
    def test_boundaries_keep_timezone(self):
        """Test that boundaries are in the value's own timezone."""
        tz = timezone(timedelta(hours=9))
        value = datetime(2024, 6, 1, 1, 0, 0, tzinfo=tz)
        
        assert end_of_day(value).tzinfo is tz
        assert end_of_day(value) == datetime(2024, 6, 1, 23, 59, 59, tzinfo=tz)
    
    def test_parse_cutoff(self):
        """Test parsing cutoff times."""
        assert parse_cutoff("06:30") == time(6, 30)
        
        with pytest.raises(ValueError, match="invalid multi-day cutoff"):
            parse_cutoff("6am")
        
        with pytest.raises(ValueError, match="invalid multi-day cutoff"):
            parse_cutoff("24:00")


class TestReformat:
    """Test reformatting canonical datetime text."""
    
    def test_reformat(self):
        """Test converting canonical text to a display format."""
        assert reformat("2024-06-01 09:00:00", "F j, Y") == "June 1, 2024"
        assert reformat("2024-06-01 09:00:00", DB_DATETIME_FORMAT) == "2024-06-01 09:00:00"
    
    def test_reformat_invalid(self):
        """Test that unparsable text gives None."""
        assert reformat("not a date", "F j") is None
        assert reformat("", "F j") is None
