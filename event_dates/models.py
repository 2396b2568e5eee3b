"""Data models for events and schedule formatting."""

from datetime import datetime
import pydantic


class Event(pydantic.BaseModel):
    id: int
    start_at: datetime
    end_at: datetime
    all_day: bool = False
    password_required: bool = False
    title: str = ""
    
    @pydantic.field_validator('start_at', 'end_at')
    @classmethod
    def validate_timezone_aware(cls, v: datetime) -> datetime:
        if v.tzinfo is None or v.utcoffset() is None:
            raise ValueError('event dates must be timezone aware')
        return v
    
    @pydantic.model_validator(mode='after')
    def validate_time_order(self) -> 'Event':
        if self.end_at < self.start_at:
            raise ValueError('end_at must not be before start_at')
        return self


class FormatSettings(pydantic.BaseModel):
    """
    Which parts of a schedule are shown.
    
    Hiding the time also hides the end time; there is no way to show the
    end time on its own.
    """
    model_config = pydantic.ConfigDict(extra='ignore')
    
    show_end_time: bool = True
    show_date: bool = True
    show_time: bool = True
    
    @pydantic.model_validator(mode='after')
    def suppress_end_time_without_time(self) -> 'FormatSettings':
        if not self.show_time:
            self.show_end_time = False
        return self
