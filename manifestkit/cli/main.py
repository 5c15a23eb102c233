"""manifestkit CLI"""

import click

from manifestkit import __version__
from manifestkit.cli.config import config
from manifestkit.cli.path import path
from manifestkit.cli.version import version

from .debug import add_debug_option


@click.group()
@click.version_option(__version__, prog_name="manifestkit")
@click.pass_context
def cli(ctx):
    """
    Path and version tools for build manifests.
    """
    ctx.ensure_object(dict)


cli.add_command(add_debug_option(path))
cli.add_command(add_debug_option(version))
cli.add_command(add_debug_option(config))

add_debug_option(cli)


if __name__ == "__main__":
    cli()
