"""CLI commands for version parsing and comparison"""

import sys
from typing import List

import click

from manifestkit.cli.utils.logging import logger
from manifestkit.config import get_version_policy
from manifestkit.versioning import (
    Version,
    VersionParseError,
    VersionPolicy,
    sort_versions,
)

policy_option = click.option(
    "--policy",
    type=click.Choice([p.value for p in VersionPolicy]),
    default=None,
    help="Ordering policy. Defaults to the configured policy.",
)


def _policy(value) -> VersionPolicy:
    return VersionPolicy(value) if value else get_version_policy()


def _parse_all(raw_versions, policy: VersionPolicy) -> List[Version]:
    versions = []
    for raw in raw_versions:
        try:
            versions.append(Version.from_string(raw, policy))
        except VersionParseError as e:
            logger.error(f"Error: {e}")
            sys.exit(1)
    return versions


@click.group(name="version")
def version():
    """Parse, compare and bump versions."""
    pass


@version.command("parse")
@click.argument("raw")
@policy_option
def parse(raw: str, policy):
    """Show how a version string is parsed."""
    (v,) = _parse_all([raw], _policy(policy))

    click.echo(f"value:                {v.value}")
    click.echo(f"canonical:            {v.canonical}")
    click.echo(f"segments:             {'.'.join(str(s) for s in v.segments)}")
    click.echo(f"pre-release:          {v.pre_release or ''}")
    click.echo(f"build metadata:       {v.build_metadata or ''}")
    click.echo(f"pre-release segments: {' '.join(v.pre_release_segments)}")
    click.echo(f"clean:                {'yes' if v.is_clean else 'no'}")


@version.command("compare")
@click.argument("first")
@click.argument("second")
@policy_option
def compare(first: str, second: str, policy):
    """Print '<', '=' or '>' for FIRST compared to SECOND."""
    v1, v2 = _parse_all([first, second], _policy(policy))

    if v1 < v2:
        click.echo("<")
    elif v1 > v2:
        click.echo(">")
    else:
        click.echo("=")


@version.command("sort")
@click.argument("raw_versions", nargs=-1, required=True)
@click.option("--reverse", "-r", is_flag=True, help="Sort in descending order")
@policy_option
def sort(raw_versions, reverse: bool, policy):
    """Print versions in ascending order, one per line."""
    versions = _parse_all(raw_versions, _policy(policy))
    for v in sort_versions(versions, reverse=reverse):
        click.echo(v)


@version.command("bump")
@click.argument("raw")
@click.option(
    "--component",
    "-c",
    type=click.Choice(["segment", "minor", "major"]),
    default="segment",
    show_default=True,
    help="Segment to increment",
)
def bump(raw: str, component: str):
    """Print the next version after RAW."""
    (v,) = _parse_all([raw], VersionPolicy.STRICT)

    if component == "major":
        new_v = v.bump_major()
    elif component == "minor":
        new_v = v.bump_minor()
    else:
        new_v = v.bump()

    logger.debug(f"Bumped {v} to {new_v}")
    click.echo(new_v)
