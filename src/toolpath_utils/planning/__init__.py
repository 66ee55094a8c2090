"""Import classes for configuring and running surface path planning."""

from .surface_planner import RasterPathGenerator as RasterPathGenerator
from .surface_planner import SurfacePathPlanner as SurfacePathPlanner
from .tool_params import DEFAULT_MARGIN_M as DEFAULT_MARGIN_M
from .tool_params import BlendToolSettings as BlendToolSettings
from .tool_params import PlannerConfig as PlannerConfig
from .tool_params import ScanToolSettings as ScanToolSettings
from .tool_params import ToolParameters as ToolParameters
