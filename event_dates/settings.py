"""Display configuration for rendered event dates."""

from datetime import time
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .date_utils import parse_cutoff


class DisplaySettings(BaseSettings):
    # Date and time formats use PHP date() notation, see date_utils.format_date
    date_without_year_format: str = "F j"
    date_with_year_format: str = "F j, Y"
    time_format: str = "g:ia"
    
    datetime_separator: str = " @ "
    time_range_separator: str = " - "
    
    # Time of day at which one event day ends and the next begins
    multiday_cutoff: str = "00:00"
    
    model_config = SettingsConfigDict(
        env_prefix="EVENT_DATES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
    
    @field_validator('multiday_cutoff')
    @classmethod
    def validate_multiday_cutoff(cls, v: str) -> str:
        parse_cutoff(v)
        return v
    
    @property
    def cutoff(self) -> time:
        return parse_cutoff(self.multiday_cutoff)


@lru_cache
def get_display_settings() -> DisplaySettings:
    return DisplaySettings()
