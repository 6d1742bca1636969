"""Release fetcher - turns every registered project's calendar into releases."""

import logging

from .config import Project, ProjectRegistry
from .core.releases import ProjectReleases, create_project_releases
from .ports.calendar_feed import CalendarFeed

logger = logging.getLogger(__name__)


class ReleaseFetcher:
    """
    Supplies the releases of all projects in a registry.

    Projects are fetched one after another in registry order. Any feed or
    event error aborts the whole fetch; no partial results are returned.
    """

    def __init__(self, registry: ProjectRegistry, feed: CalendarFeed):
        self.registry = registry
        self.feed = feed

    def get(self) -> list[ProjectReleases]:
        """Fetch every project's calendar and map its events to releases."""
        return [self._fetch_project(project) for project in self.registry]

    def _fetch_project(self, project: Project) -> ProjectReleases:
        logger.debug(f"Fetching release calendar for {project.name}")
        events = self.feed.fetch_events(project.calendar_url)
        project_releases = create_project_releases(project.name, events)
        logger.info(f"Found {len(project_releases.releases)} releases for {project.name}")
        return project_releases
