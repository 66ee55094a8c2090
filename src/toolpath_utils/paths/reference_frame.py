"""Estimate the nominal cut-direction frame shared by a set of raster path segments."""

from __future__ import annotations

from typing import TYPE_CHECKING

from toolpath_utils.spatial import Quaternion, average_quaternions

if TYPE_CHECKING:
    from collections.abc import Sequence

    from toolpath_utils.paths.segments import PathSegment


def longest_segment_index(segments: Sequence[PathSegment]) -> int:
    """Find the index of the segment with the largest first-to-last displacement.

    Ties keep the earliest segment. If every segment has zero displacement, returns 0.

    :param segments: Non-empty sequence of path segments
    :return: Index into `segments` of the longest segment
    """
    max_idx = 0
    max_dist_m = 0.0

    for idx, segment in enumerate(segments):
        dist_m = segment.displacement_m
        if dist_m > max_dist_m:
            max_idx = idx
            max_dist_m = dist_m

    return max_idx


def average_orientation(segment: PathSegment) -> Quaternion:
    """Compute the average orientation of the poses in a path segment."""
    return average_quaternions([pose.orientation for pose in segment])


def estimate_reference_frame(segments: Sequence[PathSegment]) -> Quaternion:
    """Estimate the nominal 'cut' frame of the given raster path segments.

    The longest segment is taken as representative and its average orientation is used, such
        that paths run roughly along the frame's x-axis and are spaced out along its y-axis.

    :param segments: Non-empty sequence of path segments
    :return: Orientation of the reference frame w.r.t. the frame of the segments' poses
    """
    if not segments:
        raise ValueError("Cannot estimate a reference frame from zero path segments.")

    return average_orientation(segments[longest_segment_index(segments)])
