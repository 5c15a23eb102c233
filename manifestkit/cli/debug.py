"""The ``--debug/--no-debug`` switch accepted by ``mkit`` and its groups."""

import click

from .utils.logging import configure_logging

DEBUG_KEY = "DEBUG"


def _debug_callback(ctx: click.Context, param: click.Parameter, value: bool) -> bool:
    # ``mkit --debug version sort ...`` and ``mkit version --debug sort ...``
    # both switch debug output on; a later --no-debug does not switch it off.
    root = ctx.find_root()
    root.ensure_object(dict)
    enabled = root.obj.get(DEBUG_KEY, False) or value
    root.obj[DEBUG_KEY] = enabled
    configure_logging(enabled)
    return enabled


def add_debug_option(cmd: click.Command) -> click.Command:
    """Add ``--debug/--no-debug`` to a command or group, once."""
    if any(param.name == "debug" for param in cmd.params):
        return cmd

    cmd.params.insert(
        0,
        click.Option(
            ["--debug/--no-debug"],
            default=False,
            is_eager=True,
            expose_value=False,
            callback=_debug_callback,
            help="Log debug messages to stderr.",
        ),
    )
    return cmd
