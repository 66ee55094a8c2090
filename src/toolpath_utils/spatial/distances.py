"""Define utility functions to compute various distance metrics."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from toolpath_utils.spatial.poses import Pose3D
    from toolpath_utils.spatial.rotations import Quaternion


def euclidean_distance_3d_m(pose_a: Pose3D, pose_b: Pose3D) -> float:
    """Compute the Euclidean distance (meters) between the positions of two 3D poses."""
    return float(np.linalg.norm(pose_a.position.to_array() - pose_b.position.to_array()))


def angle_between_quaternions_deg(q1: Quaternion, q2: Quaternion) -> float:
    """Compute the angle (degrees) between two unit quaternions representing 3D rotations.

    Reference: https://math.stackexchange.com/a/167828
    """
    product = q1 * q2.conjugate()
    w = float(np.clip(abs(product.w), 0.0, 1.0))  # q and -q give the same rotation
    angle_rad = 2.0 * np.arccos(w)
    return float(np.rad2deg(angle_rad))
