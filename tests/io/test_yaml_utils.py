"""Unit tests for reading and writing YAML documents."""

from __future__ import annotations

from pathlib import Path

import pytest

from toolpath_utils.io.yaml_utils import export_yaml_data, load_yaml_data


def test_export_creates_directory_and_keeps_key_order(tmp_path: Path) -> None:
    """Verify that exported documents keep their keys in insertion order."""
    # Arrange - Target a file inside a directory that doesn't exist yet
    yaml_path = tmp_path / "paths" / "out.yaml"
    data = {"segments": [[[1.0, 2.0, 3.0, 0.0, 0.0, 0.0, 1.0]]], "default_frame": "map"}

    # Act
    export_yaml_data(data, yaml_path)
    loaded = load_yaml_data(yaml_path)

    # Assert - Expect the same data, with each pose written on one line
    assert loaded == data
    assert list(loaded) == ["segments", "default_frame"]
    assert "[1.0, 2.0, 3.0, 0.0, 0.0, 0.0, 1.0]" in yaml_path.read_text()


def test_load_empty_file_raises_value_error(tmp_path: Path) -> None:
    """Verify that an empty YAML file is reported as a ValueError naming the file."""
    # Arrange
    yaml_path = tmp_path / "empty.yaml"
    yaml_path.write_text("")

    # Act/Assert
    with pytest.raises(ValueError, match="empty document") as exc_info:
        load_yaml_data(yaml_path, required_keys={"segments"})
    assert "empty.yaml" in str(exc_info.value)


def test_load_top_level_list_raises_value_error(tmp_path: Path) -> None:
    """Verify that a YAML document whose top level is a list is rejected."""
    # Arrange
    yaml_path = tmp_path / "list.yaml"
    yaml_path.write_text("- [0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 1.0]\n")

    # Act/Assert
    with pytest.raises(ValueError, match="found list"):
        load_yaml_data(yaml_path)


def test_load_invalid_yaml_raises_runtime_error(tmp_path: Path) -> None:
    """Verify that unparsable YAML is reported as a RuntimeError."""
    # Arrange
    yaml_path = tmp_path / "broken.yaml"
    yaml_path.write_text("segments: [[0.0, 1.0\n")

    # Act/Assert
    with pytest.raises(RuntimeError, match="Failed to parse"):
        load_yaml_data(yaml_path)


def test_load_reports_missing_keys(tmp_path: Path) -> None:
    """Verify that missing required keys are listed in the raised KeyError."""
    # Arrange
    yaml_path = tmp_path / "partial.yaml"
    yaml_path.write_text("default_frame: map\n")

    # Act/Assert
    with pytest.raises(KeyError, match="segments"):
        load_yaml_data(yaml_path, required_keys=["default_frame", "segments"])
