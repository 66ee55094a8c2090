"""Define functions to import and export path segments using YAML files."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from toolpath_utils.io.yaml_utils import export_yaml_data, load_yaml_data
from toolpath_utils.paths import PathSegment
from toolpath_utils.spatial import DEFAULT_FRAME

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


def load_segments(yaml_path: Path) -> list[PathSegment]:
    """Load a list of path segments from the given YAML file.

    Each pose is given as [x, y, z, qx, qy, qz, qw] (expressed in the file's `default_frame`)
        or as a dictionary with `xyz_xyzw` and `frame` keys.

    :param yaml_path: Path to a YAML file containing a `segments` list
    :return: List of imported path segments, in file order
    """
    yaml_data = load_yaml_data(yaml_path, required_keys={"segments"})
    default_frame = yaml_data.get("default_frame", DEFAULT_FRAME)
    segments_data: list[Any] = yaml_data["segments"] or []

    return [PathSegment.from_yaml_data(data, default_frame) for data in segments_data]


def segments_to_yaml_data(
    segments: Sequence[PathSegment],
    default_frame: str = DEFAULT_FRAME,
) -> dict[str, Any]:
    """Convert path segments into a dictionary suitable for export to YAML."""
    return {
        "default_frame": default_frame,
        "segments": [segment.to_yaml_data(default_frame) for segment in segments],
    }


def export_segments(
    segments: Sequence[PathSegment],
    yaml_path: Path,
    default_frame: str = DEFAULT_FRAME,
) -> None:
    """Export path segments to the given YAML file."""
    export_yaml_data(segments_to_yaml_data(segments, default_frame), yaml_path)
