"""silencespeedup init — write a default options file."""

from __future__ import annotations

from pathlib import Path

import click

from silencespeedup.models.config import SpeedUpOptions
from silencespeedup.utils.io import write_yaml
from silencespeedup.utils.progress import log_error, log_success


@click.command()
@click.option(
    "--output", "-o",
    default="silencespeedup.yaml",
    type=click.Path(),
    help="Where to write the options file",
)
@click.option("--force", is_flag=True, help="Overwrite an existing file")
def init_cmd(output: str, force: bool) -> None:
    """Write an options file with the default settings."""
    output_path = Path(output).resolve()
    if output_path.exists() and not force:
        log_error(f"Refusing to overwrite {output_path} (use --force)")
        raise SystemExit(1)

    options = SpeedUpOptions()
    data = options.model_dump(mode="json", by_alias=True)
    write_yaml(output_path, data)

    log_success(f"Options written: {output_path}")
    click.echo(f"\nNext: silencespeedup simulate TIMESTAMPS --duration SECONDS -c {output}")
