"""iCalendar feed adapter - HTTP client for release calendars."""

import logging

import requests
from icalendar import Calendar

from release_calendar.config import DEFAULT_TIMEOUT
from release_calendar.core.releases import CalendarEvent
from release_calendar.errors import FeedError

logger = logging.getLogger(__name__)


class ICalFeedAdapter:
    """
    iCalendar over HTTP adapter.

    Implements CalendarFeed protocol. Downloads a feed, parses every
    calendar object in it and returns the VEVENTs. No business logic - just I/O.
    """

    def __init__(
        self,
        timeout: int = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ):
        self.timeout = timeout
        self._session = session or requests.Session()

    def fetch_events(self, url: str) -> list[CalendarEvent]:
        """Fetch the feed at url and return the events of all its calendars."""
        events = []
        for calendar in self._parse_calendars(url):
            events.extend(self._parse_events(calendar))
        logger.debug(f"Read {len(events)} events from {url}")
        return events

    def _parse_calendars(self, url: str) -> list[Calendar]:
        """Download and parse the feed. The response is always closed."""
        response = None
        try:
            response = self._session.get(url, stream=True, timeout=self.timeout)
            response.raise_for_status()
            data = response.content
            if not data.strip():
                return []
            return Calendar.from_ical(data, multiple=True)
        except requests.RequestException as e:
            raise FeedError(f"Failed to fetch calendar {url}: {e}") from e
        except OSError as e:
            raise FeedError(f"Failed to read calendar {url}: {e}") from e
        except ValueError as e:
            raise FeedError(f"Failed to parse calendar {url}: {e}") from e
        finally:
            if response is not None:
                self._close(response, url)

    def _close(self, response: requests.Response, url: str) -> None:
        try:
            response.close()
        except Exception as e:
            # Must not replace an error raised while reading
            logger.debug(f"Ignoring error closing calendar stream for {url}: {e}")

    def _parse_events(self, calendar: Calendar) -> list[CalendarEvent]:
        """Read summary and start of each VEVENT, in the order they appear."""
        events = []
        for component in calendar.walk("VEVENT"):
            events.append(
                CalendarEvent(
                    summary=self._read_property(component, "SUMMARY", str),
                    start=self._read_property(component, "DTSTART", lambda p: p.dt),
                )
            )
        return events

    def _read_property(self, component, name: str, read):
        """Read a property value, or None if it is missing or unparseable."""
        prop = component.get(name)
        if prop is None:
            return None
        try:
            return read(prop)
        except ValueError as e:
            # icalendar keeps unparseable values as broken properties
            logger.debug(f"Ignoring unreadable {name} in calendar event: {e}")
            return None
