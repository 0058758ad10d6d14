"""silencespeedup estimate — real remaining time at a position."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from silencespeedup.cli.common import config_option, load_options, load_timestamps, speed_options
from silencespeedup.estimate.remaining import breakdown, format_hms
from silencespeedup.intervals.margin import ProportionalMargin
from silencespeedup.intervals.store import IntervalStore

console = Console()


@click.command()
@click.argument("timestamps", type=click.Path())
@click.option("--duration", "-d", required=True, type=float, help="Media duration in seconds")
@click.option("--position", "-p", default=0.0, type=float, help="Playhead position in seconds")
@config_option
@speed_options
def estimate_cmd(
    timestamps: str,
    duration: float,
    position: float,
    config: str | None,
    playback_speed: float | None,
    silence_speed: float | None,
) -> None:
    """Print the real remaining time from POSITION to the end."""
    options = load_options(config, playback_speed=playback_speed, silence_speed=silence_speed)
    raw = load_timestamps(timestamps)

    store = IntervalStore(
        ProportionalMargin(options.margin_start_factor, options.margin_end_factor)
    )
    store.rebuild(raw, options.playback_speed, options.silence_speed)

    remaining = breakdown(
        store.intervals, position, duration, options.playback_speed, options.silence_speed
    )

    table = Table(title="Remaining Time", show_lines=True)
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")
    table.add_row("Silence ahead", f"{remaining.silence_seconds:.2f}s")
    table.add_row("Speech ahead", f"{remaining.spoken_seconds:.2f}s")
    table.add_row("At 1x", format_hms(remaining.plain_seconds))
    table.add_row("Real", format_hms(remaining.real_seconds))
    table.add_row("Saved", format_hms(remaining.saved_seconds))
    console.print(table)

    click.echo(format_hms(remaining.real_seconds))
