"""Functional core - pure business logic with no I/O."""

from .releases import (
    CalendarEvent,
    ProjectReleases,
    Release,
    ReleaseStatus,
    create_project_releases,
    create_release,
    format_release_date,
    strip_project_prefix,
)

__all__ = [
    "CalendarEvent",
    "ProjectReleases",
    "Release",
    "ReleaseStatus",
    "create_project_releases",
    "create_release",
    "format_release_date",
    "strip_project_prefix",
]
