"""silencespeedup inspect — show normalized silences."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from silencespeedup.cli.common import config_option, load_options, load_timestamps, speed_options
from silencespeedup.estimate.remaining import format_hms
from silencespeedup.intervals.margin import ProportionalMargin
from silencespeedup.intervals.store import IntervalStore, parse_pairs
from silencespeedup.utils.progress import log_step

console = Console()


@click.command()
@click.argument("timestamps", type=click.Path())
@config_option
@speed_options
def inspect_cmd(
    timestamps: str,
    config: str | None,
    playback_speed: float | None,
    silence_speed: float | None,
) -> None:
    """Normalize TIMESTAMPS and list the silences that survive."""
    options = load_options(config, playback_speed=playback_speed, silence_speed=silence_speed)
    raw = load_timestamps(timestamps)

    store = IntervalStore(
        ProportionalMargin(options.margin_start_factor, options.margin_end_factor)
    )
    store.rebuild(raw, options.playback_speed, options.silence_speed)

    try:
        raw_count = len(parse_pairs(raw))
    except ValueError:
        raw_count = 0
    log_step("Inspect", f"{len(store)} of {raw_count} silences kept after margins")

    table = Table(title="Silences", show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Start", justify="right")
    table.add_column("End", justify="right")
    table.add_column("Duration", justify="right")

    for i, interval in enumerate(store, start=1):
        table.add_row(
            str(i),
            f"{interval.start:.2f}",
            f"{interval.end:.2f}",
            f"{interval.duration:.2f}s",
        )

    console.print(table)
    console.print(
        f"Total silence: [bold]{store.total_silence:.2f}s[/bold] "
        f"({format_hms(store.total_silence)}) at "
        f"{options.playback_speed}x / {options.silence_speed}x"
    )
