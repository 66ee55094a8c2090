"""Define a class to represent one continuous tool stroke over a surface."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

import numpy as np

from toolpath_utils.spatial import DEFAULT_FRAME, Pose3D, Quaternion, euclidean_distance_3d_m

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from numpy.typing import NDArray

HALF_TURN_ABOUT_Z = Quaternion(0.0, 0.0, 1.0, 0.0)
"""Rotation of 180 degrees about the z-axis (the tool axis of each path pose)."""


@dataclass(frozen=True)
class PathSegment:
    """A non-empty ordered sequence of 3D poses traversed as one continuous stroke.

    Segments are never split or merged; they are only reordered, reversed, or trimmed.
    """

    poses: tuple[Pose3D, ...]

    def __post_init__(self) -> None:
        """Verify that the segment contains at least one pose."""
        if not self.poses:
            raise ValueError("Cannot construct a PathSegment without any poses.")

    @classmethod
    def from_poses(cls, poses: Iterable[Pose3D]) -> PathSegment:
        """Construct a PathSegment from any iterable of poses."""
        return cls(tuple(poses))

    def __len__(self) -> int:
        """Return the number of poses in the segment."""
        return len(self.poses)

    def __iter__(self) -> Iterator[Pose3D]:
        """Provide an iterator over the poses of the segment, in travel order."""
        yield from self.poses

    def __getitem__(self, idx: int) -> Pose3D:
        """Retrieve the pose at the given index."""
        return self.poses[idx]

    @property
    def first(self) -> Pose3D:
        """Retrieve the first pose of the segment."""
        return self.poses[0]

    @property
    def last(self) -> Pose3D:
        """Retrieve the last pose of the segment."""
        return self.poses[-1]

    def positions_array(self) -> NDArray[np.float64]:
        """Convert the positions of the segment's poses into an (N, 3) NumPy array."""
        return np.vstack([pose.position.to_array() for pose in self.poses])

    def arclength_per_step_m(self) -> NDArray[np.float64]:
        """Compute the distance (m) between each pair of consecutive poses; shape (N-1,)."""
        diffs_m = np.diff(self.positions_array(), axis=0)  # (N-1, 3)
        return np.linalg.norm(diffs_m, axis=1)

    @property
    def arc_length_m(self) -> float:
        """Compute the total arc length (m) along the segment's positions."""
        if len(self) <= 1:
            return 0.0

        return float(np.sum(self.arclength_per_step_m()))

    @property
    def displacement_m(self) -> float:
        """Compute the straight-line distance (m) between the segment's first and last positions."""
        return euclidean_distance_3d_m(self.first, self.last)

    def reversed(self) -> PathSegment:
        """Return the segment walked in the opposite direction.

        Pose order is reversed and each orientation is turned by 180 degrees about its local
            z-axis, so the tool still approaches the surface from the same side while its
            heading flips to match the new direction of travel.
        """
        return PathSegment(
            tuple(
                replace(pose, orientation=pose.orientation * HALF_TURN_ABOUT_Z)
                for pose in reversed(self.poses)
            ),
        )

    @classmethod
    def from_yaml_data(cls, segment_data: list, default_frame: str = DEFAULT_FRAME) -> PathSegment:
        """Construct a PathSegment from a list of pose data imported from YAML."""
        if not isinstance(segment_data, list):
            raise TypeError(f"Cannot load PathSegment from YAML data of type {type(segment_data)}")

        poses = (Pose3D.from_yaml_data(pose_data, default_frame) for pose_data in segment_data)
        return cls(tuple(poses))

    def to_yaml_data(self, default_frame: str | None = None) -> list[Any]:
        """Convert the segment into a list of pose data suitable for export to YAML."""
        return [pose.to_yaml_data(default_frame) for pose in self.poses]

    def approx_equal(self, other: PathSegment, rtol: float = 1e-05, atol: float = 1e-08) -> bool:
        """Evaluate whether another PathSegment has approximately equal poses, in the same order."""
        return len(self) == len(other) and all(
            mine.approx_equal(theirs, rtol=rtol, atol=atol)
            for mine, theirs in zip(self.poses, other.poses, strict=True)
        )
