"""Define functions to read and write the YAML documents used for paths and planner settings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import yaml

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from pathlib import Path


def export_yaml_data(data: Mapping[str, Any], filepath: Path) -> None:
    """Write a YAML document to the given file, creating its parent directory if needed.

    Keys are written in insertion order and innermost lists (e.g., pose coordinates) are
        kept on a single line.
    """
    filepath.parent.mkdir(parents=True, exist_ok=True)
    with filepath.open("w") as yaml_file:
        yaml.safe_dump(dict(data), yaml_file, sort_keys=False, default_flow_style=None)


def load_yaml_data(yaml_path: Path, required_keys: Iterable[str] = ()) -> dict[str, Any]:
    """Load a YAML document whose top level is a mapping.

    :param yaml_path: Path to the YAML file to be imported
    :param required_keys: Keys that must appear at the top level of the document
    :return: Dictionary holding the document's top-level entries
    :raises FileNotFoundError: If the file doesn't exist
    :raises RuntimeError: If the file isn't valid YAML
    :raises ValueError: If the document is empty or its top level isn't a mapping
    :raises KeyError: If a required key is missing from the document
    """
    if not yaml_path.exists():
        raise FileNotFoundError(f"Cannot load data from nonexistent YAML file: {yaml_path}")

    try:
        with yaml_path.open() as yaml_file:
            yaml_data = yaml.safe_load(yaml_file)
    except yaml.YAMLError as error:
        raise RuntimeError(f"Failed to parse YAML file: {yaml_path}") from error

    if not isinstance(yaml_data, dict):
        found = "an empty document" if yaml_data is None else type(yaml_data).__name__
        raise ValueError(f"Expected a mapping at the top level of {yaml_path}, found {found}.")

    missing = [key for key in required_keys if key not in yaml_data]
    if missing:
        raise KeyError(f"Required keys {missing} are missing from YAML file {yaml_path}")

    return yaml_data
