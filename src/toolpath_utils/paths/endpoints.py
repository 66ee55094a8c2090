"""Define the end points of path segments, as used to decide their order and direction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from toolpath_utils.spatial import Point3D, Pose3D

if TYPE_CHECKING:
    from collections.abc import Sequence

    from toolpath_utils.paths.segments import PathSegment
    from toolpath_utils.spatial import Quaternion

REFERENCE_FRAME = "cut_reference"
"""Name given to the frame in which projected end points are expressed."""


@dataclass(frozen=True)
class SegmentEndpoints:
    """The first and last positions of a path segment, expressed in a reference frame.

    As segments are indivisible, their extremes are all we need to decide their order.
        The `a` and `b` fields don't imply any spatial relationship (i.e., not "start" and
        "end"); they only identify the segment's two extremities.

    The `segment_id` field stores the index of the corresponding input segment, so that
        the input can be reconstructed after the end points are sorted.
    """

    a: Point3D
    b: Point3D
    segment_id: int

    @property
    def min_secondary(self) -> float:
        """Retrieve the smaller of the two end points' coordinates along the secondary (y) axis."""
        return min(self.a.y, self.b.y)


def project_endpoints(segments: Sequence[PathSegment], frame: Quaternion) -> list[SegmentEndpoints]:
    """Express the end points of each path segment in the given reference frame.

    :param segments: Path segments whose poses are expressed w.r.t. the origin frame
    :param frame: Rotation of the reference frame w.r.t. the origin (no translation)
    :return: One SegmentEndpoints per segment, in the same order as `segments`
    """
    # The points are all w.r.t. the origin, so we pre-multiply by the inverse of the frame
    frame_inv = Pose3D(Point3D.identity(), frame).inverse(REFERENCE_FRAME)

    return [
        SegmentEndpoints(
            a=(frame_inv @ segment.first).position,
            b=(frame_inv @ segment.last).position,
            segment_id=idx,
        )
        for idx, segment in enumerate(segments)
    ]
