"""Unit tests for building a tour over segment end points."""

from toolpath_utils.paths import SegmentEndpoints, TourStep, build_tour
from toolpath_utils.spatial import Point3D


def endpoints(a: tuple[float, float], b: tuple[float, float], segment_id: int) -> SegmentEndpoints:
    """Create end points on the z = 0 plane."""
    return SegmentEndpoints(Point3D(a[0], a[1], 0.0), Point3D(b[0], b[1], 0.0), segment_id)


def test_tour_of_zero_endpoints_is_empty() -> None:
    """Verify that no end points produce an empty tour."""
    # Arrange/Act/Assert - Expect no tour steps
    assert build_tour([]) == ([], [])


def test_tour_sorts_by_smaller_secondary_coordinate() -> None:
    """Verify that end points are visited in ascending order of their smaller y-coordinate."""
    # Arrange - Create end points whose smaller y-values are 0.5, -1.0, and 0.2
    unsorted = [
        endpoints((0.0, 0.5), (1.0, 0.9), segment_id=0),
        endpoints((0.0, 3.0), (1.0, -1.0), segment_id=1),
        endpoints((0.0, 0.2), (1.0, 0.2), segment_id=2),
    ]

    # Act - Build a tour over the end points
    steps, sorted_endpoints = build_tour(unsorted)

    # Assert - Expect sorted order, with steps indexing into the sorted end points
    assert [e.segment_id for e in sorted_endpoints] == [1, 2, 0]
    assert [step.endpoint_idx for step in steps] == [0, 1, 2]


def test_tour_starts_from_a_and_alternates_for_boustrophedon_layout() -> None:
    """Verify that each segment is entered from the end nearest the previous exit point."""
    # Arrange - Three parallel lines whose A ends all lie at x = 0
    unsorted = [endpoints((0.0, y), (1.0, y), segment_id=i) for i, y in enumerate([0.0, 0.1, 0.2])]

    # Act - Build a tour over the end points
    steps, _ = build_tour(unsorted)

    # Assert - Expect a zig-zag: A to B, then B to A, then A to B
    assert steps == [TourStep(0, True), TourStep(1, False), TourStep(2, True)]


def test_tour_keeps_direction_when_ends_are_swapped_in_space() -> None:
    """Verify that lines whose A ends alternate sides are all traveled from A."""
    # Arrange - The middle line's A end lies at x = 1, next to the first line's exit
    unsorted = [
        endpoints((0.0, 0.0), (1.0, 0.0), segment_id=0),
        endpoints((1.0, 0.1), (0.0, 0.1), segment_id=1),
        endpoints((0.0, 0.2), (1.0, 0.2), segment_id=2),
    ]

    # Act - Build a tour over the end points
    steps, _ = build_tour(unsorted)

    # Assert - Expect every line to be traveled from A to B
    assert all(step.from_a for step in steps)


def test_tour_never_reorders_after_sorting() -> None:
    """Verify that direction choices never change the sorted visiting order."""
    # Arrange - The second-sorted line is far away along x, while the third is close by
    unsorted = [
        endpoints((0.0, 0.0), (1.0, 0.0), segment_id=0),
        endpoints((50.0, 0.1), (51.0, 0.1), segment_id=1),
        endpoints((1.0, 0.2), (0.0, 0.2), segment_id=2),
    ]

    # Act - Build a tour over the end points
    steps, sorted_endpoints = build_tour(unsorted)

    # Assert - Expect the sorted order to be kept despite the long detour
    assert [sorted_endpoints[s.endpoint_idx].segment_id for s in steps] == [0, 1, 2]


def test_tour_breaks_distance_ties_toward_b() -> None:
    """Verify that a segment equally close at both ends is entered from B."""
    # Arrange - The second line is centered on the first line's exit point
    unsorted = [
        endpoints((0.0, 0.0), (1.0, 0.0), segment_id=0),
        endpoints((0.5, 0.1), (1.5, 0.1), segment_id=1),
    ]

    # Act - Build a tour over the end points
    steps, _ = build_tour(unsorted)

    # Assert - Expect the tied second line to be entered from B
    assert steps == [TourStep(0, True), TourStep(1, False)]


def test_tour_sort_is_stable_for_equal_keys() -> None:
    """Verify that end points with equal sort keys keep their input order."""
    # Arrange - Two lines sharing the same y-coordinate
    unsorted = [
        endpoints((5.0, 0.0), (6.0, 0.0), segment_id=0),
        endpoints((0.0, 0.0), (1.0, 0.0), segment_id=1),
    ]

    # Act - Build a tour over the end points
    _, sorted_endpoints = build_tour(unsorted)

    # Assert - Expect the input order to be kept
    assert [e.segment_id for e in sorted_endpoints] == [0, 1]
