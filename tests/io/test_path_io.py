"""Unit tests for importing and exporting path segments using YAML files."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from toolpath_utils.io.path_io import export_segments, load_segments, segments_to_yaml_data
from toolpath_utils.paths import PathSegment
from toolpath_utils.spatial import Point3D, Pose3D, Quaternion

from ..paths.raster_layouts import line_segment


def test_export_then_load_segments(tmp_path: Path) -> None:
    """Verify that path segments exported to YAML are loaded back bit-for-bit unchanged."""
    # Arrange - Two segments, one of which contains a pose in a non-default frame
    odd_pose = Pose3D(Point3D(0.5, 0.25, 0.1), Quaternion(0.0, 0.0, 1.0, 1.0), "tool0")
    segments = [
        line_segment(num_poses=4, spacing_m=0.1, yaw_rad=0.3),
        PathSegment((Pose3D.identity(), odd_pose)),
    ]
    yaml_path = tmp_path / "segments.yaml"

    # Act
    export_segments(segments, yaml_path)
    loaded = load_segments(yaml_path)

    # Assert
    assert loaded == segments
    assert loaded[1].last.ref_frame == "tool0"


def test_segments_to_yaml_data_uses_compact_poses() -> None:
    """Verify that poses in the default frame are exported as plain 7-element lists."""
    # Arrange
    segment = line_segment(num_poses=2, spacing_m=0.5)

    # Act
    yaml_data = segments_to_yaml_data([segment], default_frame="map")

    # Assert
    assert yaml_data["default_frame"] == "map"
    assert yaml_data["segments"] == [
        [[0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 1.0], [0.5, 0.0, 0.0, 0.0, 0.0, 0.0, 1.0]],
    ]


def test_load_segments_applies_default_frame(tmp_path: Path) -> None:
    """Verify that list-form poses take on the frame named at the top of the file."""
    # Arrange
    yaml_path = tmp_path / "segments.yaml"
    data = {"default_frame": "part", "segments": [[[1, 2, 3, 0, 0, 0, 1]]]}
    yaml_path.write_text(yaml.dump(data))

    # Act
    (segment,) = load_segments(yaml_path)

    # Assert
    assert segment.first.ref_frame == "part"
    assert segment.first.position == Point3D(1.0, 2.0, 3.0)


def test_load_segments_requires_segments_key(tmp_path: Path) -> None:
    """Verify that a YAML file without a `segments` list is rejected."""
    # Arrange
    yaml_path = tmp_path / "segments.yaml"
    yaml_path.write_text(yaml.dump({"default_frame": "map"}))

    # Act/Assert
    with pytest.raises(KeyError, match="segments"):
        load_segments(yaml_path)


def test_load_segments_rejects_empty_segment(tmp_path: Path) -> None:
    """Verify that a segment listed without any poses is rejected."""
    # Arrange
    yaml_path = tmp_path / "segments.yaml"
    yaml_path.write_text(yaml.dump({"segments": [[]]}))

    # Act/Assert
    with pytest.raises(ValueError, match="without any poses"):
        load_segments(yaml_path)


def test_load_segments_from_missing_file(tmp_path: Path) -> None:
    """Verify that loading from a nonexistent file raises a FileNotFoundError."""
    # Arrange/Act/Assert
    with pytest.raises(FileNotFoundError):
        load_segments(tmp_path / "missing.yaml")
