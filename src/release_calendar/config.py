"""Configuration management for release-calendar."""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator
from urllib.parse import urlsplit

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

RELEASE_CALENDAR_HOME = Path(
    os.environ.get("RELEASE_CALENDAR_HOME", Path.home() / "release-calendar")
)
CONFIG_FILE = RELEASE_CALENDAR_HOME / "config" / "release-calendar.conf"

DEFAULT_TIMEOUT = 30

SPRING_DATA_CALENDAR_URL = (
    "https://outlook.office365.com/owa/calendar/"
    "9d3cecb6098e4d7d884561cf288d70b7@vmware.com/"
    "4f8a123268f047d0b0b9319040506e2a3791298319254920500/calendar.ics"
)


@dataclass(frozen=True)
class Project:
    """A tracked project and the calendar feed its releases are published in."""

    name: str
    calendar_url: str

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ConfigurationError("Project name must not be empty")
        if not _is_valid_url(self.calendar_url):
            raise ConfigurationError(
                f"Invalid calendar URL for project '{self.name}': {self.calendar_url!r}"
            )


def _is_valid_url(url: str) -> bool:
    try:
        parts = urlsplit(url)
        # Raises ValueError for a port that isn't a number in range
        parts.port
    except (TypeError, ValueError, AttributeError):
        return False
    return parts.scheme in ("http", "https") and bool(parts.hostname)


DEFAULT_PROJECTS = (Project("Spring Data", SPRING_DATA_CALENDAR_URL),)


@dataclass
class ProjectEntry:
    """A project as listed in the config file, before validation."""

    name: str
    url: str


@dataclass
class Config:
    """release-calendar configuration."""

    projects: list[ProjectEntry] = field(default_factory=list)
    timeout: int = DEFAULT_TIMEOUT


class ProjectRegistry:
    """
    Ordered, read-only list of tracked projects.

    Every entry is validated on construction; one bad entry fails the
    whole registry.
    """

    def __init__(self, projects: list[Project] | tuple[Project, ...]):
        self._projects = tuple(projects)

    @classmethod
    def from_entries(cls, entries: list[ProjectEntry]) -> "ProjectRegistry":
        return cls([Project(e.name, e.url) for e in entries])

    @classmethod
    def from_config(cls, config: Config) -> "ProjectRegistry":
        """Build the registry from config, falling back to the built-in projects."""
        if not config.projects:
            return cls(DEFAULT_PROJECTS)
        return cls.from_entries(config.projects)

    @property
    def projects(self) -> tuple[Project, ...]:
        return self._projects

    def names(self) -> list[str]:
        return [p.name for p in self._projects]

    def __iter__(self) -> Iterator[Project]:
        return iter(self._projects)

    def __len__(self) -> int:
        return len(self._projects)


def _parse_projects(value: str) -> list[ProjectEntry]:
    """
    Parse the PROJECTS setting.

    JSON format: [{"name": "...", "url": "..."}]
    Simple format: "Name|url,Other Name|url"
    """
    entries = []
    if value.startswith("["):
        try:
            data = json.loads(value)
            for item in data:
                entries.append(ProjectEntry(name=item["name"], url=item["url"]))
        except (json.JSONDecodeError, KeyError, TypeError) as e:
            raise ConfigurationError(f"Failed to parse PROJECTS JSON: {e}") from e
        return entries

    for entry in value.split(","):
        entry = entry.strip()
        if not entry:
            continue
        if "|" not in entry:
            raise ConfigurationError(f"PROJECTS entry must be 'name|url': {entry!r}")
        name, url = entry.split("|", 1)
        entries.append(ProjectEntry(name.strip(), url.strip()))
    return entries


def load_config(config_file: Path | None = None) -> Config:
    """Load configuration from release-calendar.conf file."""
    config = Config()
    config_file = config_file or CONFIG_FILE

    if not config_file.exists():
        logger.debug(f"No config file at {config_file}, using defaults")
        return config

    for line in config_file.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = value.strip()

        # Handle quoted values with inline comments: "value" # comment
        if value.startswith('"') or value.startswith("'"):
            quote = value[0]
            end_quote = value.find(quote, 1)
            value = value[1:end_quote] if end_quote != -1 else value[1:]
        elif "#" in value:
            value = value.split("#")[0].strip()

        match key:
            case "projects":
                config.projects = _parse_projects(value)
            case "timeout":
                try:
                    config.timeout = int(value)
                except ValueError as e:
                    raise ConfigurationError(f"TIMEOUT must be a number of seconds: {value!r}") from e
            case _:
                logger.warning(f"Ignoring unknown config key: {key}")

    return config
