"""Define Pydantic models for validating tool and path planner parameters."""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from toolpath_utils.io.logging import log_warning
from toolpath_utils.io.yaml_utils import load_yaml_data

MIN_LINE_SPACING_M = 0.01
"""Smallest spacing (meters) allowed between adjacent raster lines."""

DEFAULT_MARGIN_M = 0.25 * 0.0254
"""Default margin (meters) trimmed from both ends of each path segment (a quarter inch)."""

ToolKind = Literal["default", "blend", "scan"]
"""Kinds of process for which the planner can derive tool parameters."""


class ToolParameters(BaseModel):
    """Parameters passed to a raster path generator; they don't affect sequencing or trimming."""

    pt_spacing_m: float = Field(default=0.01, gt=0, description="Spacing between path points")
    line_spacing_m: float = Field(default=0.025, gt=0, description="Spacing between raster lines")
    tool_offset_m: float = Field(default=0.0, ge=0, description="Offset of the cutting tool")
    intersecting_plane_height_m: float = Field(
        default=0.05,
        gt=0,
        description="Height of the planes intersected with the surface to create raster lines",
    )
    nearest_neighbors: int = Field(default=5, ge=1, description="Neighbors used per point")
    min_hole_size_m: float = Field(default=0.01, gt=0, description="Smallest hole to path around")

    model_config = ConfigDict(extra="forbid", frozen=True)

    def __str__(self) -> str:
        """Return a concise human-readable summary of the tool parameters."""
        return f"Tool:[line_spacing:={self.line_spacing_m}, pt_spacing:={self.pt_spacing_m}]"


class BlendToolSettings(BaseModel):
    """Settings for a blending (surface finishing) tool."""

    tool_radius_m: float = Field(default=0.025, gt=0, description="Radius of the blending tool")
    overlap_m: float = Field(default=0.0, ge=0, description="Overlap between adjacent passes")
    discretization_m: float = Field(default=0.01, gt=0, description="Spacing between path points")

    model_config = ConfigDict(extra="forbid")

    @property
    def line_spacing_m(self) -> float:
        """Compute the spacing between passes so that the tool's footprints overlap as required."""
        return max(MIN_LINE_SPACING_M, self.tool_radius_m * 2.0 - self.overlap_m)

    def to_tool_parameters(self) -> ToolParameters:
        """Override the default tool parameters using these blending settings."""
        return ToolParameters(
            line_spacing_m=self.line_spacing_m,
            pt_spacing_m=self.discretization_m,
        )


class ScanToolSettings(BaseModel):
    """Settings for a surface scanning sensor."""

    scan_width_m: float = Field(default=0.025, gt=0, description="Width of the scanned strip")
    overlap_m: float = Field(default=0.0, ge=0, description="Overlap between adjacent scans")
    discretization_m: float = Field(default=0.01, gt=0, description="Spacing between path points")

    model_config = ConfigDict(extra="forbid")

    @property
    def line_spacing_m(self) -> float:
        """Compute the spacing between adjacent scan lines."""
        return max(MIN_LINE_SPACING_M, self.scan_width_m - self.overlap_m)

    def to_tool_parameters(self) -> ToolParameters:
        """Override the default tool parameters using these scanning settings."""
        return ToolParameters(
            line_spacing_m=self.line_spacing_m,
            pt_spacing_m=self.discretization_m,
        )


class PlannerConfig(BaseModel):
    """Configuration of the surface path planner."""

    tool: ToolKind = "default"
    margin_m: float = Field(default=DEFAULT_MARGIN_M, ge=0, description="Margin trimmed per end")
    blend: Optional[BlendToolSettings] = None
    scan: Optional[ScanToolSettings] = None

    model_config = ConfigDict(extra="forbid")

    def tool_parameters(self) -> ToolParameters:
        """Derive the tool parameters for the configured kind of tool.

        Missing blend or scan settings fall back to their defaults, with a warning.
        """
        if self.tool == "blend":
            if self.blend is None:
                log_warning("Could not load blend tool settings; using the default settings.")
            return (self.blend or BlendToolSettings()).to_tool_parameters()

        if self.tool == "scan":
            if self.scan is None:
                log_warning("Could not load scan tool settings; using the default settings.")
            return (self.scan or ScanToolSettings()).to_tool_parameters()

        return ToolParameters()

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> PlannerConfig:
        """Load and validate a planner configuration from a YAML file.

        :param yaml_path: Path to a YAML file containing a `planner` section
        :return: Validated PlannerConfig instance
        """
        yaml_data = load_yaml_data(yaml_path, required_keys={"planner"})

        try:
            return PlannerConfig.model_validate(yaml_data["planner"] or {})
        except ValidationError as v_err:
            raise RuntimeError(f"Validation error in {yaml_path}: {v_err}") from v_err
