"""Shared workflow layer between the CLI and library callers."""

from .adapters.ical_feed import ICalFeedAdapter
from .config import Config, ProjectRegistry, load_config
from .core.releases import ProjectReleases
from .fetcher import ReleaseFetcher


def build_fetcher(config: Config) -> ReleaseFetcher:
    """Wire the registry and the iCalendar adapter from config."""
    registry = ProjectRegistry.from_config(config)
    return ReleaseFetcher(registry, ICalFeedAdapter(timeout=config.timeout))


def fetch_releases(config: Config | None = None) -> list[ProjectReleases]:
    """Load config, fetch all project calendars and return their releases."""
    config = config or load_config()
    return build_fetcher(config).get()
