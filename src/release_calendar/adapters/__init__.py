"""Adapters - I/O implementations of ports."""

from .ical_feed import ICalFeedAdapter

__all__ = [
    "ICalFeedAdapter",
]
