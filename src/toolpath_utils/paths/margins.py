"""Trim a fixed arc-length margin from both ends of path segments."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from toolpath_utils.io.logging import log_debug
from toolpath_utils.paths.segments import PathSegment
from toolpath_utils.spatial import Point3D, Pose3D

if TYPE_CHECKING:
    from collections.abc import Sequence

SNAP_TOLERANCE_M = 1e-3
"""A cut this close (m) to an existing pose is placed exactly on that pose."""


class MarginInvariantError(RuntimeError):
    """Raised when no cut point can be found along a segment that is long enough to trim."""


def interpolate_pose(start: Pose3D, end: Pose3D, distance_m: float) -> Pose3D:
    """Create a pose the given distance from `start` toward `end`.

    Only the position is interpolated; the orientation is copied from `start`.
    """
    direction = end.position.to_array() - start.position.to_array()
    direction /= np.linalg.norm(direction)
    position = Point3D.from_array(start.position.to_array() + direction * distance_m)
    return Pose3D(position, start.orientation, start.ref_frame)


def _find_cut(step_lengths_m: Sequence[float], offset_m: float) -> tuple[int, float] | None:
    """Walk the given step lengths until `offset_m` is used up.

    :return: Tuple of (step index, distance along that step), or None if no cut was found
    """
    distance_to_go_m = offset_m
    for idx, step_m in enumerate(step_lengths_m):
        if abs(step_m - distance_to_go_m) < SNAP_TOLERANCE_M:
            log_debug(f"Margin cut snapped to the end of step {idx} (length {step_m:.4f} m).")
            return idx, 0.0  # Snap to the far vertex of this step
        if distance_to_go_m > step_m:
            distance_to_go_m -= step_m
        else:
            log_debug(f"Margin cut interpolated {distance_to_go_m:.4f} m into step {idx}.")
            return idx, distance_to_go_m

    return None


def trim_segment(segment: PathSegment, offset_m: float) -> PathSegment:
    """Shorten both ends of a path segment by the given arc length.

    Segments shorter than twice the offset are returned unmodified, as are all segments when
        the offset is zero.

    :param segment: Path segment to be trimmed
    :param offset_m: Arc length (m) removed from each end of the segment
    :return: Trimmed path segment (or `segment` itself, if it wasn't trimmed)
    :raises MarginInvariantError: If either cut point can't be located
    """
    if offset_m < 0.0:
        raise ValueError(f"Cannot trim a negative margin from a path segment: {offset_m}.")

    if offset_m == 0.0 or segment.arc_length_m < 2.0 * offset_m:
        return segment

    step_lengths_m = segment.arclength_per_step_m().tolist()  # step i joins poses i and i+1
    last_idx = len(segment) - 1

    forward_cut = _find_cut(step_lengths_m, offset_m)
    if forward_cut is None:
        raise MarginInvariantError(f"Could not find the forward margin cut for offset {offset_m}.")
    forward_step, forward_dist_m = forward_cut
    forward_idx = forward_step + 1  # First pose kept after the forward cut

    reverse_cut = _find_cut(step_lengths_m[::-1], offset_m)
    if reverse_cut is None:
        raise MarginInvariantError(f"Could not find the reverse margin cut for offset {offset_m}.")
    reverse_step, reverse_dist_m = reverse_cut
    reverse_idx = last_idx - reverse_step - 1  # Last pose kept before the reverse cut

    poses: list[Pose3D] = []
    if forward_dist_m != 0.0:
        start = interpolate_pose(segment[forward_idx - 1], segment[forward_idx], forward_dist_m)
        poses.append(start)

    poses.extend(segment[idx] for idx in range(forward_idx, reverse_idx + 1))

    if reverse_dist_m != 0.0:
        end = interpolate_pose(segment[reverse_idx + 1], segment[reverse_idx], reverse_dist_m)
        poses.append(end)

    return PathSegment(tuple(poses))


def apply_margins(segments: Sequence[PathSegment], offset_m: float) -> list[PathSegment]:
    """Trim the given margin (m) from both ends of each path segment, independently."""
    return [trim_segment(segment, offset_m) for segment in segments]
