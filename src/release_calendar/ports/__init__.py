"""Ports - interfaces/protocols for external dependencies."""

from .calendar_feed import CalendarFeed

__all__ = [
    "CalendarFeed",
]
