"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

import re
from datetime import timedelta, timezone
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings


_UTC_OFFSET_PATTERN = re.compile(r"^([+-])(\d{2}):(\d{2})$")


class BankAccountConfig(BaseSettings):
    """Bank account ledger configuration"""
    
    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text
    log_file: Optional[str] = None  # If None, logs to stderr
    
    # Statement rendering (French short date-time in GMT+1 by default)
    statement_utc_offset: str = "+01:00"
    statement_date_format: str = "%d/%m/%y %H:%M"
    statement_line_separator: str = "\r\n"
    
    class Config:
        env_prefix = "BANK_ACCOUNT_"
        env_file = ".env"
        case_sensitive = False
    
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return value
    
    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, value: str) -> str:
        value = value.lower()
        if value not in ("json", "text"):
            raise ValueError(f"Log format must be 'json' or 'text', got {value!r}")
        return value
    
    @field_validator("statement_utc_offset")
    @classmethod
    def validate_utc_offset(cls, value: str) -> str:
        parse_utc_offset(value)
        return value
    
    @property
    def statement_timezone(self) -> timezone:
        """Fixed-offset timezone used to display operation dates"""
        return parse_utc_offset(self.statement_utc_offset)


def parse_utc_offset(value: str) -> timezone:
    """
    Parse a fixed UTC offset such as "+01:00" or "-05:30".
    
    Raises:
        ValueError: If the offset is malformed or out of range
    """
    match = _UTC_OFFSET_PATTERN.match(value)
    if not match:
        raise ValueError(f"UTC offset must look like +HH:MM, got {value!r}")
    
    sign, hours, minutes = match.groups()
    if int(hours) > 23 or int(minutes) > 59:
        raise ValueError(f"UTC offset out of range: {value}")
    
    offset = timedelta(hours=int(hours), minutes=int(minutes))
    if sign == "-":
        offset = -offset
    return timezone(offset)


# Global configuration instance
config = BankAccountConfig()


def get_config() -> BankAccountConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> BankAccountConfig:
    """Reload configuration from environment"""
    global config
    config = BankAccountConfig()
    return config
