"""Build a tour visiting path segments in a fixed left-to-right order."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from toolpath_utils.paths.endpoints import SegmentEndpoints
    from toolpath_utils.spatial import Point3D


@dataclass(frozen=True)
class TourStep:
    """A visit to one path segment, along with the direction in which it's traveled.

    The `endpoint_idx` field indexes into the sorted sequence of SegmentEndpoints that the
        tour was built over. A true `from_a` means the segment is traveled from A to B.
    """

    endpoint_idx: int
    from_a: bool


def sort_endpoints(endpoints: Sequence[SegmentEndpoints]) -> list[SegmentEndpoints]:
    """Sort end points from -y to +y by the smaller secondary-axis coordinate of each pair.

    The sort is stable, so end points with equal keys keep their input order.
    """
    return sorted(endpoints, key=lambda e: e.min_secondary)


def exit_position(step: TourStep, endpoints: Sequence[SegmentEndpoints]) -> Point3D:
    """Find where the tool ends up after taking the given step."""
    if step.from_a:  # If we came from A, we're now at B
        return endpoints[step.endpoint_idx].b
    return endpoints[step.endpoint_idx].a  # If we came from B, we're now at A


def build_tour(
    endpoints: Sequence[SegmentEndpoints],
) -> tuple[list[TourStep], list[SegmentEndpoints]]:
    """Order the given segment end points left to right and pick each segment's direction.

    This is a greedy choice of direction over a fixed visiting order, not a shortest-path
        solver: once the end points are sorted along the secondary axis they're never
        reordered, and each segment is entered from whichever extremity is closer to the
        exit position of the previous segment.

    :param endpoints: End points of the segments, expressed in the reference frame
    :return: Tuple of (tour steps, sorted end points that the steps index into)
    """
    sorted_endpoints = sort_endpoints(endpoints)
    if not sorted_endpoints:
        return [], sorted_endpoints

    # We always start at the first end point, position A
    steps = [TourStep(0, from_a=True)]

    for idx in range(1, len(sorted_endpoints)):
        current = exit_position(steps[-1], sorted_endpoints)

        dist_a = current.squared_distance_to(sorted_endpoints[idx].a)
        dist_b = current.squared_distance_to(sorted_endpoints[idx].b)

        steps.append(TourStep(idx, from_a=dist_a < dist_b))

    return steps, sorted_endpoints
