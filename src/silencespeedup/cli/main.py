"""Root CLI group for silencespeedup."""

from __future__ import annotations

import click

from silencespeedup import __version__


@click.group()
@click.version_option(version=__version__, prog_name="silencespeedup")
def cli() -> None:
    """silencespeedup — play silences faster, or skip them."""


# Import and register subcommands
from silencespeedup.cli.init_cmd import init_cmd  # noqa: E402
from silencespeedup.cli.inspect_cmd import inspect_cmd  # noqa: E402
from silencespeedup.cli.estimate_cmd import estimate_cmd  # noqa: E402
from silencespeedup.cli.simulate_cmd import simulate_cmd  # noqa: E402

cli.add_command(init_cmd, "init")
cli.add_command(inspect_cmd, "inspect")
cli.add_command(estimate_cmd, "estimate")
cli.add_command(simulate_cmd, "simulate")
