"""Pure release domain logic - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from release_calendar.errors import MalformedEventError

RELEASE_DATE_FORMAT = "%Y-%m-%d"


class ReleaseStatus(Enum):
    """Status of a release as tracked by the release dashboard."""

    OPEN = "open"
    CLOSED = "closed"
    OVERDUE = "overdue"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class CalendarEvent:
    """A single VEVENT as read from a calendar feed."""

    summary: str | None
    start: date | None


@dataclass(frozen=True)
class Release:
    """A release of a tracked project."""

    project: str
    name: str
    date: str
    status: ReleaseStatus = ReleaseStatus.UNKNOWN
    additional_info: str | None = None

    def to_dict(self) -> dict:
        return {
            "project": self.project,
            "name": self.name,
            "date": self.date,
            "status": self.status.value,
            "additional_info": self.additional_info,
        }


@dataclass(frozen=True)
class ProjectReleases:
    """All releases found in one project's calendar, in feed order."""

    project_name: str
    releases: tuple[Release, ...] = ()

    def to_dict(self) -> dict:
        return {
            "project": self.project_name,
            "releases": [r.to_dict() for r in self.releases],
        }


def strip_project_prefix(name: str, project_name: str) -> str:
    """Drop a leading project name from an event summary.

    "Spring Data 2021.0.0" for project "Spring Data" becomes "2021.0.0".
    Summaries that don't start with the project name are returned as-is.
    """
    if name.startswith(project_name):
        return name[len(project_name):].strip()
    return name


def format_release_date(start: date) -> str:
    """Format an event start as YYYY-MM-DD, dropping any time of day."""
    return start.strftime(RELEASE_DATE_FORMAT)


def create_release(project_name: str, event: CalendarEvent) -> Release:
    """
    Map a calendar event to a release of the given project.

    Pure function - no I/O.

    Raises:
        MalformedEventError: if the event has no summary or no start date
    """
    if event.summary is None:
        raise MalformedEventError(f"Event in '{project_name}' calendar has no summary")
    if event.start is None:
        raise MalformedEventError(
            f"Event '{event.summary}' in '{project_name}' calendar has no start date"
        )

    return Release(
        project=project_name,
        name=strip_project_prefix(event.summary, project_name),
        date=format_release_date(event.start),
        status=ReleaseStatus.UNKNOWN,
        additional_info=None,
    )


def create_project_releases(
    project_name: str,
    events: list[CalendarEvent],
) -> ProjectReleases:
    """Map every event of a project, keeping the order they were read in."""
    return ProjectReleases(
        project_name=project_name,
        releases=tuple(create_release(project_name, e) for e in events),
    )
