"""Exceptions raised by release-calendar."""


class ReleaseCalendarError(Exception):
    """Base class for release-calendar errors."""

    pass


class ConfigurationError(ReleaseCalendarError):
    """Raised when the configured project list is invalid."""

    pass


class FeedError(ReleaseCalendarError, IOError):
    """Raised when a calendar feed can't be fetched or parsed."""

    pass


class MalformedEventError(ReleaseCalendarError, ValueError):
    """Raised when a calendar event lacks its summary or start date."""

    pass
