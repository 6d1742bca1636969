"""Calendar feed interface."""

from typing import Protocol

from release_calendar.core.releases import CalendarEvent


class CalendarFeed(Protocol):
    """Interface for reading the events of a calendar feed."""

    def fetch_events(self, url: str) -> list[CalendarEvent]:
        """Fetch and parse the feed at url. Returns its events in feed order."""
        ...
