"""Unit tests for the eigen-decomposition average of quaternions."""

import hypothesis.strategies as st
import pytest
from hypothesis import given

from toolpath_utils.spatial import Quaternion, angle_between_quaternions_deg, average_quaternions

from ..strategies.spatial_strategies import quaternions


@given(quaternions())
def test_average_of_one_quaternion_is_unchanged(quat: Quaternion) -> None:
    """Verify that averaging a single quaternion returns exactly that quaternion."""
    # Arrange/Act - Average a collection containing only one quaternion
    result = average_quaternions([quat])

    # Assert - Expect the exact same coefficients, without any sign flip
    assert result == quat


@given(quaternions(), st.integers(min_value=2, max_value=10))
def test_average_of_identical_quaternions(quat: Quaternion, count: int) -> None:
    """Verify that averaging copies of one quaternion gives back the same rotation."""
    # Arrange/Act - Average several copies of the same quaternion
    result = average_quaternions([quat] * count)

    # Assert - Expect the same rotation (modulo negation)
    assert quat.approx_equal(result, atol=1e-07)


@given(quaternions())
def test_average_is_insensitive_to_quaternion_signs(quat: Quaternion) -> None:
    """Verify that negated quaternions (i.e., the same rotation) don't change the average."""
    # Arrange - Create a collection mixing a quaternion and its negation
    negated = Quaternion.from_array(-quat.to_array())

    # Act - Average the mixed collection
    result = average_quaternions([quat, negated, quat, negated])

    # Assert - Expect that the average expresses the original rotation
    assert quat.approx_equal(result, atol=1e-07)


def test_average_of_nearby_yaws_lies_between_them() -> None:
    """Verify that the average of two yaw rotations is the rotation halfway between them."""
    # Arrange - Create rotations of 10 and 30 degrees about the z-axis
    q_10 = Quaternion.from_axis_angle((0.0, 0.0, 1.0), 0.17453292519943295)
    q_30 = Quaternion.from_axis_angle((0.0, 0.0, 1.0), 0.5235987755982988)
    q_20 = Quaternion.from_axis_angle((0.0, 0.0, 1.0), 0.3490658503988659)

    # Act - Average the two rotations
    result = average_quaternions([q_10, q_30])

    # Assert - Expect the 20 degree rotation
    assert angle_between_quaternions_deg(result, q_20) == pytest.approx(0.0, abs=1e-04)


def test_weighted_average_leans_toward_heavier_weights() -> None:
    """Verify that a heavily weighted quaternion dominates the average."""
    # Arrange - Weight the identity rotation far more than a 90 degree yaw
    identity = Quaternion.identity()
    yaw_90 = Quaternion.from_axis_angle((0.0, 0.0, 1.0), 1.5707963267948966)

    # Act - Compute the weighted average
    result = average_quaternions([identity, yaw_90], weights=[1000.0, 1.0])

    # Assert - Expect that the result is much closer to the identity than to the 90 degree yaw
    assert angle_between_quaternions_deg(result, identity) < 1.0


def test_average_of_zero_quaternions_raises_error() -> None:
    """Verify that averaging an empty collection of quaternions raises a ValueError."""
    # Arrange/Act/Assert - Expect a ValueError for the empty collection
    with pytest.raises(ValueError, match="zero quaternions"):
        average_quaternions([])


def test_average_with_mismatched_weights_raises_error() -> None:
    """Verify that weights must match the number of averaged quaternions."""
    # Arrange/Act/Assert - Expect a ValueError for two quaternions but one weight
    with pytest.raises(ValueError, match="same length"):
        average_quaternions([Quaternion.identity(), Quaternion.identity()], weights=[1.0])
