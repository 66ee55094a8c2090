"""Define a command-line interface for trimming and sequencing path segments."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click
from rich.table import Table

from toolpath_utils.io.logging import configure_logging, console
from toolpath_utils.io.path_io import export_segments, load_segments
from toolpath_utils.paths import apply_margins, sequence

if TYPE_CHECKING:
    from collections.abc import Sequence

    from toolpath_utils.paths import PathSegment


def _render_segments_table(title: str, segments: Sequence[PathSegment]) -> Table:
    """Render a table summarizing each path segment."""
    table = Table(title=title, show_lines=False)
    table.add_column("#", justify="right", style="cyan", no_wrap=True)
    table.add_column("Poses", justify="right")
    table.add_column("Arc Length (m)", justify="right", style="magenta")
    table.add_column("Start (x, y, z)")
    table.add_column("End (x, y, z)")

    for idx, segment in enumerate(segments):
        start = ", ".join(f"{v:.3f}" for v in segment.first.position)
        end = ", ".join(f"{v:.3f}" for v in segment.last.position)
        table.add_row(str(idx), str(len(segment)), f"{segment.arc_length_m:.4f}", start, end)
    return table


def _load_or_fail(input_path: Path) -> list[PathSegment]:
    """Load path segments from the given file, reporting bad input as a CLI error."""
    try:
        return load_segments(input_path)
    except (FileNotFoundError, KeyError, RuntimeError, TypeError, ValueError) as err:
        message = f"Could not load path segments from {input_path}: {err}"
        raise click.ClickException(message) from err


def _output(segments: Sequence[PathSegment], title: str, output_path: Path | None) -> None:
    """Display the resulting segments and export them if an output file was given."""
    console.print(_render_segments_table(title, segments))
    if output_path is not None:
        export_segments(segments, output_path)
        console.print(f"[green]Exported {len(segments)} path segments to {output_path}.[/]")


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log debugging messages.")
def cli(verbose: bool) -> None:
    """Trim and sequence tool path segments planned over a surface."""
    configure_logging(verbose)


@cli.command(name="sequence")
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--output", "-o", "output_path", type=click.Path(path_type=Path), default=None)
@click.option("--margin-m", type=click.FloatRange(min=0.0), help="Trim each end by this margin.")
def sequence_command(input_path: Path, output_path: Path | None, margin_m: float | None) -> None:
    """Order the path segments in INPUT_PATH left to right, optionally trimming them first."""
    segments = _load_or_fail(input_path)
    if margin_m is not None:
        segments = apply_margins(segments, margin_m)

    _output(sequence(segments), "Sequenced Path Segments", output_path)


@cli.command(name="trim")
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--margin-m", type=click.FloatRange(min=0.0), required=True, help="Margin per end.")
@click.option("--output", "-o", "output_path", type=click.Path(path_type=Path), default=None)
def trim_command(input_path: Path, margin_m: float, output_path: Path | None) -> None:
    """Trim a margin from both ends of each path segment in INPUT_PATH."""
    segments = _load_or_fail(input_path)
    _output(apply_margins(segments, margin_m), "Trimmed Path Segments", output_path)
