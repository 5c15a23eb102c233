"""CLI commands for syntactic path operations"""

import sys

import click

from manifestkit.cli.utils.logging import logger
from manifestkit.paths import InvalidPath, Path, PathOperandError


@click.group(name="path")
def path():
    """Normalize and relate manifest paths."""
    pass


@path.command("normalize")
@click.argument("raw_paths", nargs=-1, required=True)
def normalize(raw_paths):
    """Print the canonical form of each path.

    Example:

      mkit path normalize /a/./b/../c a/../../b
    """
    failed = False
    for raw in raw_paths:
        try:
            click.echo(Path(raw))
        except InvalidPath as e:
            logger.error(f"Error: {e}")
            failed = True

    if failed:
        sys.exit(1)


@path.command("relative")
@click.argument("target")
@click.argument("base")
def relative(target: str, base: str):
    """Print TARGET relative to BASE; both must be absolute paths."""
    try:
        result = Path.absolute(target).relative_to(Path.absolute(base))
    except (InvalidPath, PathOperandError) as e:
        logger.error(f"Error: {e}")
        sys.exit(1)

    click.echo(result)


@path.command("info")
@click.argument("raw")
def info(raw: str):
    """Describe a path: kind, directory, basename, extension and components."""
    try:
        p = Path(raw)
    except InvalidPath as e:
        logger.error(f"Error: {e}")
        sys.exit(1)

    click.echo(f"path:       {p}")
    click.echo(f"type:       {p.path_type.value}")
    click.echo(f"dirname:    {p.dirname}")
    click.echo(f"basename:   {p.basename}")
    click.echo(f"extension:  {p.extension or ''}")
    click.echo(f"components: {', '.join(p.components)}")
