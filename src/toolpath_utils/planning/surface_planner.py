"""Define a planner producing sequenced, trimmed tool paths over a surface mesh."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from toolpath_utils.io.logging import log_info, log_warning
from toolpath_utils.paths import apply_margins, sequence
from toolpath_utils.planning.tool_params import PlannerConfig

if TYPE_CHECKING:
    import trimesh

    from toolpath_utils.paths import PathSegment
    from toolpath_utils.planning.tool_params import ToolParameters


class RasterPathGenerator(ABC):
    """An interface for a planner that cuts raster path segments over a surface mesh."""

    @abstractmethod
    def generate_paths(self, mesh: trimesh.Trimesh, tool: ToolParameters) -> list[PathSegment]:
        """Generate unordered path segments covering the given mesh.

        :param mesh: Surface mesh (with normals) over which paths are planned
        :param tool: Parameters of the tool following the paths
        :return: Raw path segments, each traveled in an arbitrary direction
        """
        ...


class SurfacePathPlanner:
    """Plans raster paths over a surface, then trims and sequences them for execution."""

    def __init__(self, generator: RasterPathGenerator, config: PlannerConfig | None = None) -> None:
        """Initialize the planner with a raw path generator and an optional configuration."""
        self.generator = generator
        self.config = PlannerConfig() if config is None else config
        self.mesh: trimesh.Trimesh | None = None

    def init(self, mesh: trimesh.Trimesh) -> None:
        """Set the surface mesh over which paths are planned."""
        self.mesh = mesh

    def load_tool(self) -> ToolParameters:
        """Derive the tool parameters used by the raster path generator."""
        tool = self.config.tool_parameters()
        if self.config.tool == "default":
            log_info(f"Planning paths with the default {tool}")
        else:  # Blend and scan tools are reported at warning level
            log_warning(f"Planning {self.config.tool.upper()} paths with {tool}")
        return tool

    def generate_path(self) -> list[PathSegment]:
        """Plan sequenced path segments over the planner's mesh.

        :return: Trimmed path segments in travel order
        :raises RuntimeError: If no mesh was given to the planner
        """
        if self.mesh is None:
            raise RuntimeError("Cannot generate paths before a mesh is given to the planner.")

        log_info("Starting surface path planning...")
        raw_segments = self.generator.generate_paths(self.mesh, self.load_tool())
        log_info(f"Generated {len(raw_segments)} raw path segments.")

        trimmed = apply_margins(raw_segments, self.config.margin_m)
        result = sequence(trimmed)

        log_info("Finished surface path planning.")
        return result
