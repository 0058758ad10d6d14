"""silencespeedup simulate — play a timeline through the simulated player."""

from __future__ import annotations

from pathlib import Path

import click

from silencespeedup.cli.common import config_option, load_options, load_timestamps, speed_options
from silencespeedup.estimate.remaining import format_hms
from silencespeedup.models.report import SimulationReport, SkipEvent
from silencespeedup.playback.host import SILENCE_SKIPPED
from silencespeedup.playback.simulator import SimulatedPlayer
from silencespeedup.plugin import SilenceSpeedUp
from silencespeedup.utils.io import write_json
from silencespeedup.utils.progress import log, log_error, log_step, log_success, show_summary


@click.command()
@click.argument("timestamps", type=click.Path())
@click.option("--duration", "-d", required=True, type=float, help="Media duration in seconds")
@click.option(
    "--tick",
    default=0.25,
    type=float,
    show_default=True,
    help="Wall-clock seconds between time updates",
)
@click.option("--skip/--no-skip", "skip_silences", default=None, help="Skip silences instead of speeding them up")
@click.option("--report", default=None, type=click.Path(), help="Write a JSON report here")
@click.option("--verbose", "-v", is_flag=True, help="Log every skip")
@config_option
@speed_options
def simulate_cmd(
    timestamps: str,
    duration: float,
    tick: float,
    skip_silences: bool | None,
    report: str | None,
    verbose: bool,
    config: str | None,
    playback_speed: float | None,
    silence_speed: float | None,
) -> None:
    """Play TIMESTAMPS' media from start to end and report the time saved."""
    if tick <= 0:
        log_error(f"--tick must be positive, got {tick}")
        raise SystemExit(1)
    if duration < 0:
        log_error(f"--duration must not be negative, got {duration}")
        raise SystemExit(1)

    options = load_options(
        config,
        playback_speed=playback_speed,
        silence_speed=silence_speed,
        skip_silences=skip_silences,
    )
    options.timestamps = load_timestamps(timestamps)

    player = SimulatedPlayer(duration)
    plugin = SilenceSpeedUp(player, options)
    estimated = plugin.real_remaining_time(0.0)

    skips: list[SkipEvent] = []

    def on_skipped(payload: dict) -> None:
        skipped_to = float(payload["skippedTo"])
        silence = next((i for i in plugin.get_silence_timestamps() if i.end == skipped_to), None)
        skips.append(SkipEvent(
            silence_start=silence.start if silence is not None else None,
            skipped_to=skipped_to,
        ))
        if verbose:
            log(f"Skipped to {format_hms(skipped_to)} ({skipped_to:.2f}s)")

    player.on(SILENCE_SKIPPED, on_skipped)

    log_step(
        "Simulate",
        f"{len(plugin.get_silence_timestamps())} silences, "
        f"{plugin.get_playback_speed()}x / {plugin.get_silence_speed()}x"
        f"{', skipping' if plugin.skip_silences else ''}",
    )
    wall, ticks = player.play_through(tick)
    plugin.dispose()

    result = SimulationReport(
        media_duration_seconds=duration,
        wall_seconds=wall,
        estimated_seconds=estimated,
        playback_speed=plugin.get_playback_speed(),
        silence_speed=plugin.get_silence_speed(),
        skip_silences=plugin.skip_silences,
        interval_count=len(plugin.get_silence_timestamps()),
        silence_seconds=sum(i.duration for i in plugin.get_silence_timestamps()),
        ticks=ticks,
        skips=skips,
    )

    show_summary("Simulation", {
        "Media": format_hms(result.media_duration_seconds),
        "Played in": format_hms(result.wall_seconds),
        "Estimated": format_hms(result.estimated_seconds),
        "Saved": format_hms(result.saved_seconds),
        "Silences": result.interval_count,
        "Skips": len(result.skips),
        "Ticks": result.ticks,
    })

    if report:
        report_path = Path(report).resolve()
        write_json(report_path, result.model_dump(mode="json"))
        log_success(f"Report: {report_path}")
