"""Demonstrate trimming and sequencing raster paths planned over the top of a box mesh.

The raster lines are generated directly from the mesh's bounding box, in shuffled order and
    with random travel directions, so that the planner has some work to do.

To run this script, use the commands:

    uv venv --clear && uv sync
    uv run scripts/surface_paths_demo.py --tool blend --margin-m 0.01

"""

from __future__ import annotations

from pathlib import Path

import click
import numpy as np
import trimesh

from toolpath_utils.io import console
from toolpath_utils.io.logging import configure_logging
from toolpath_utils.io.path_io import export_segments
from toolpath_utils.paths import PathSegment
from toolpath_utils.planning import (
    PlannerConfig,
    RasterPathGenerator,
    SurfacePathPlanner,
    ToolParameters,
)
from toolpath_utils.spatial import Point3D, Pose3D, Quaternion

BOX_EXTENTS_M = (0.4, 0.3, 0.1)
"""Dimensions (x, y, z) of the demo box mesh (meters)."""


class BoundingBoxRasterGenerator(RasterPathGenerator):
    """Cuts parallel lines along x over the top of a mesh's axis-aligned bounding box."""

    def __init__(self, seed: int) -> None:
        """Initialize the generator's random number generator (used to scramble the lines)."""
        self.rng = np.random.default_rng(seed)

    def generate_paths(self, mesh: trimesh.Trimesh, tool: ToolParameters) -> list[PathSegment]:
        """Generate one raster line per line spacing across the top of the mesh."""
        (min_x, min_y, _), (max_x, max_y, max_z) = mesh.bounds
        top_z = max_z + tool.tool_offset_m
        xs = np.arange(min_x, max_x + 1e-9, tool.pt_spacing_m)
        tool_down = Quaternion(1.0, 0.0, 0.0, 0.0)  # Tool z-axis points into the surface

        segments = []
        for y in np.arange(min_y, max_y + 1e-9, tool.line_spacing_m):
            line_xs = xs[::-1] if self.rng.random() < 0.5 else xs
            poses = (Pose3D(Point3D(x, y, top_z), tool_down) for x in line_xs)
            segments.append(PathSegment.from_poses(poses))

        self.rng.shuffle(segments)
        return segments


@click.command()
@click.option("--tool", type=click.Choice(["default", "blend", "scan"]), default="default")
@click.option("--margin-m", type=click.FloatRange(min=0.0), default=0.00635)
@click.option("--seed", type=int, default=0, help="Seed used to scramble the raster lines.")
@click.option("--output", "-o", "output_path", type=click.Path(path_type=Path), default=None)
def main(tool: str, margin_m: float, seed: int, output_path: Path | None) -> None:
    """Plan, trim, and sequence raster paths over a box."""
    configure_logging()
    mesh = trimesh.creation.box(extents=BOX_EXTENTS_M)

    config = PlannerConfig(tool=tool, margin_m=margin_m)
    planner = SurfacePathPlanner(BoundingBoxRasterGenerator(seed), config)
    planner.init(mesh)
    segments = planner.generate_path()

    total_length_m = sum(segment.arc_length_m for segment in segments)
    console.print(f"Planned {len(segments)} segments with total length {total_length_m:.3f} m.")
    for idx, segment in enumerate(segments):
        start, end = segment.first.position, segment.last.position
        console.print(f"  {idx}: ({start.x:.3f}, {start.y:.3f}) -> ({end.x:.3f}, {end.y:.3f})")

    if output_path is not None:
        export_segments(segments, output_path)
        console.print(f"[green]Exported the sequenced segments to {output_path}.[/]")


if __name__ == "__main__":
    main()
