"""
Date Provider Module

Source of the current instant used to stamp operations. Injected into the
account service so tests can supply deterministic dates.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone


class DateProvider(ABC):
    """Abstract source of the current instant"""

    @abstractmethod
    def get_date(self) -> datetime:
        """Get the current instant as a timezone-aware UTC datetime"""
        pass


class SystemDateProvider(DateProvider):
    """Date provider backed by the system clock"""

    def get_date(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedDateProvider(DateProvider):
    """Date provider returning a settable instant"""

    def __init__(self, date: datetime):
        self.set_date(date)

    def set_date(self, date: datetime) -> None:
        if date.tzinfo is None:
            date = date.replace(tzinfo=timezone.utc)
        self._date = date

    def get_date(self) -> datetime:
        return self._date
