"""Sequence raster path segments so that a tool can traverse them left to right."""

from __future__ import annotations

from typing import TYPE_CHECKING

from toolpath_utils.io.logging import log_debug
from toolpath_utils.paths.endpoints import project_endpoints
from toolpath_utils.paths.reference_frame import estimate_reference_frame
from toolpath_utils.paths.tours import build_tour

if TYPE_CHECKING:
    from collections.abc import Sequence

    from toolpath_utils.paths.endpoints import SegmentEndpoints
    from toolpath_utils.paths.segments import PathSegment
    from toolpath_utils.paths.tours import TourStep


def reconstruct_sequence(
    segments: Sequence[PathSegment],
    tour: Sequence[TourStep],
    endpoints: Sequence[SegmentEndpoints],
) -> list[PathSegment]:
    """Reorder the original segments as specified by the given tour.

    :param segments: Original path segments, each traveled from its A end to its B end
    :param tour: Tour steps whose `endpoint_idx` fields index into `endpoints`
    :param endpoints: End points whose `segment_id` fields index into `segments`
    :return: New list of segments in tour order, reversed wherever a step starts from B
    """
    if not len(segments) == len(tour) == len(endpoints):
        raise ValueError(
            f"Expected equal numbers of segments ({len(segments)}), tour steps ({len(tour)}), "
            f"and end points ({len(endpoints)}).",
        )

    result: list[PathSegment] = []
    for step in tour:
        segment = segments[endpoints[step.endpoint_idx].segment_id]
        result.append(segment if step.from_a else segment.reversed())

    return result


def sequence(segments: Sequence[PathSegment]) -> list[PathSegment]:
    """Re-order path segments left to right relative to their nominal 'cut' direction.

    :param segments: Unordered path segments (e.g., from a raster path planner)
    :return: The same segments in travel order, some possibly reversed
    """
    if not segments:
        return []

    # Find the nominal cut direction from the average rotation of the longest segment
    frame = estimate_reference_frame(segments)

    # Get the end points in that frame, such that paths run along x and are spaced out in y
    endpoints = project_endpoints(segments, frame)
    tour, sorted_endpoints = build_tour(endpoints)

    num_reversed = sum(not step.from_a for step in tour)
    log_debug(f"Sequenced {len(segments)} path segments ({num_reversed} reversed).")

    return reconstruct_sequence(segments, tour, sorted_endpoints)
