"""CLI commands for the user configuration"""

import os
import sys

import click

from manifestkit.cli.utils.logging import logger
from manifestkit.config import (
    POLICY_ENV_VAR,
    ConfigAccessor,
    get_version_policy,
    set_version_policy,
)
from manifestkit.versioning import VersionPolicy


@click.group(name="config")
def config():
    """Show or change the user configuration."""
    pass


@config.command("policy")
@click.argument(
    "value", required=False, type=click.Choice([p.value for p in VersionPolicy])
)
def policy(value):
    """Print the default version policy, or store VALUE as the new default.

    Example:

      mkit config policy legacy
    """
    accessor = ConfigAccessor()

    if value is None:
        click.echo(get_version_policy(accessor).value)
        return

    if not set_version_policy(value, accessor):
        sys.exit(1)

    click.echo(f"Saved version policy '{value}' to {accessor.config_path}")
    if os.environ.get(POLICY_ENV_VAR):
        logger.warning(
            f"{POLICY_ENV_VAR} is set and takes precedence over the saved policy"
        )
