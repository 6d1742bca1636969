"""Tests for configuration and the project registry."""

from unittest.mock import patch

import pytest

from release_calendar.config import (
    DEFAULT_PROJECTS,
    DEFAULT_TIMEOUT,
    Config,
    Project,
    ProjectEntry,
    ProjectRegistry,
    load_config,
)
from release_calendar.errors import ConfigurationError

DATA_URL = "https://example.com/spring-data.ics"
BOOT_URL = "https://example.com/spring-boot.ics"


class TestProject:
    def test_valid_project(self):
        project = Project("Spring Data", DATA_URL)
        assert project.name == "Spring Data"
        assert project.calendar_url == DATA_URL

    @pytest.mark.parametrize(
        "url",
        [
            "not a url",
            "calendar.ics",
            "ftp://example.com/calendar.ics",
            "https://",
            "",
            "https://example.com:abc/cal.ics",
            "https://example.com:99999/cal.ics",
        ],
    )
    def test_invalid_url_raises(self, url):
        with pytest.raises(ConfigurationError, match="Invalid calendar URL"):
            Project("Spring Data", url)

    def test_empty_name_raises(self):
        with pytest.raises(ConfigurationError, match="name"):
            Project("  ", DATA_URL)

    def test_is_immutable(self):
        project = Project("Spring Data", DATA_URL)
        with pytest.raises(AttributeError):
            project.name = "Spring Boot"


class TestProjectRegistry:
    def test_keeps_order(self):
        registry = ProjectRegistry.from_entries(
            [ProjectEntry("Spring Data", DATA_URL), ProjectEntry("Spring Boot", BOOT_URL)]
        )
        assert registry.names() == ["Spring Data", "Spring Boot"]
        assert len(registry) == 2
        assert [p.calendar_url for p in registry] == [DATA_URL, BOOT_URL]

    def test_one_bad_entry_fails_registry(self):
        with pytest.raises(ConfigurationError):
            ProjectRegistry.from_entries(
                [ProjectEntry("Spring Data", DATA_URL), ProjectEntry("Broken", "nope")]
            )

    def test_defaults_when_no_projects_configured(self):
        registry = ProjectRegistry.from_config(Config())
        assert registry.projects == DEFAULT_PROJECTS
        assert registry.names() == ["Spring Data"]

    def test_from_config(self):
        registry = ProjectRegistry.from_config(
            Config(projects=[ProjectEntry("Spring Boot", BOOT_URL)])
        )
        assert registry.projects == (Project("Spring Boot", BOOT_URL),)

    def test_projects_is_a_tuple(self):
        registry = ProjectRegistry([Project("Spring Data", DATA_URL)])
        assert isinstance(registry.projects, tuple)


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(tmp_path / "missing.conf")
        assert config.projects == []
        assert config.timeout == DEFAULT_TIMEOUT

    def test_default_config_file(self, tmp_path):
        config_file = tmp_path / "release-calendar.conf"
        config_file.write_text("TIMEOUT=5\n")

        with patch("release_calendar.config.CONFIG_FILE", config_file):
            config = load_config()

        assert config.timeout == 5

    def test_parse_simple_projects(self, tmp_path):
        config_file = tmp_path / "release-calendar.conf"
        config_file.write_text(f'PROJECTS="Spring Data|{DATA_URL}, Spring Boot|{BOOT_URL}"\n')

        config = load_config(config_file)

        assert config.projects == [
            ProjectEntry("Spring Data", DATA_URL),
            ProjectEntry("Spring Boot", BOOT_URL),
        ]

    def test_parse_json_projects(self, tmp_path):
        config_file = tmp_path / "release-calendar.conf"
        config_file.write_text(
            f'projects=[{{"name": "Spring Data", "url": "{DATA_URL}"}}]\n'
        )

        config = load_config(config_file)

        assert config.projects == [ProjectEntry("Spring Data", DATA_URL)]

    def test_comments_and_blank_lines(self, tmp_path):
        config_file = tmp_path / "release-calendar.conf"
        config_file.write_text(
            "# Release calendar settings\n"
            "\n"
            "TIMEOUT=10 # seconds\n"
            f"PROJECTS='Spring Data|{DATA_URL}' # the only one\n"
        )

        config = load_config(config_file)

        assert config.timeout == 10
        assert config.projects == [ProjectEntry("Spring Data", DATA_URL)]

    def test_bad_json_raises(self, tmp_path):
        config_file = tmp_path / "release-calendar.conf"
        config_file.write_text('PROJECTS=[{"name": "Spring Data"}]\n')

        with pytest.raises(ConfigurationError, match="PROJECTS"):
            load_config(config_file)

    def test_simple_entry_without_url_raises(self, tmp_path):
        config_file = tmp_path / "release-calendar.conf"
        config_file.write_text('PROJECTS="Spring Data"\n')

        with pytest.raises(ConfigurationError, match="name\\|url"):
            load_config(config_file)

    def test_bad_timeout_raises(self, tmp_path):
        config_file = tmp_path / "release-calendar.conf"
        config_file.write_text("TIMEOUT=soon\n")

        with pytest.raises(ConfigurationError, match="TIMEOUT"):
            load_config(config_file)

    def test_invalid_url_is_caught_when_building_registry(self, tmp_path):
        config_file = tmp_path / "release-calendar.conf"
        config_file.write_text('PROJECTS="Spring Data|not-a-url"\n')

        config = load_config(config_file)

        with pytest.raises(ConfigurationError, match="Invalid calendar URL"):
            ProjectRegistry.from_config(config)
