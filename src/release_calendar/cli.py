"""release-calendar CLI - project release dates from calendar feeds."""

import json
import logging
import sys

import click

from .config import ProjectRegistry, load_config
from .core.releases import ProjectReleases
from .errors import ReleaseCalendarError
from .workflows import fetch_releases


@click.group()
@click.version_option(package_name="release-calendar")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """release-calendar - Release dates of tracked projects."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


def _show_releases(all_releases: list[ProjectReleases], as_json: bool) -> None:
    """Shared release display logic."""
    if as_json:
        click.echo(json.dumps([pr.to_dict() for pr in all_releases], indent=2))
        return

    for i, project_releases in enumerate(all_releases):
        if i:
            click.echo()
        click.echo(f"### {project_releases.project_name}")
        if not project_releases.releases:
            click.echo("  No releases scheduled.")
            continue
        for release in project_releases.releases:
            click.echo(f"  {release.date}  {release.name}")


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def releases(as_json: bool):
    """List the releases of every tracked project."""
    try:
        all_releases = fetch_releases(load_config())
    except ReleaseCalendarError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    _show_releases(all_releases, as_json)


@main.command()
def projects():
    """List tracked projects and their calendar URLs."""
    try:
        registry = ProjectRegistry.from_config(load_config())
    except ReleaseCalendarError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    for project in registry:
        click.echo(f"{project.name}: {project.calendar_url}")
