"""Utility functions for computing weighted averages of 3D rotations."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from toolpath_utils.spatial.rotations import Quaternion

OptionalWeights = Sequence[float] | None


def average_quaternions(qs: Sequence[Quaternion], weights: OptionalWeights = None) -> Quaternion:
    """Compute a maximum-likelihood average of quaternions.

    Uses eigen-decomposition of the weighted sum of outer products, which makes the result
        insensitive to the sign of each input (q and -q express the same rotation).
        Reference: Method 2 from this answer: https://math.stackexchange.com/a/3435296/614782
        See also: http://www.acsu.buffalo.edu/~johnc/ave_quat07.pdf

    The result isn't meaningful for rotations spread evenly through rotation space; no attempt
        is made to detect that case.

    :param qs: Collection of unit quaternions representing 3D rotations
    :param weights: Optional sequence of per-quaternion weights (defaults to uniform weighting)
    :return: Quaternion result of the weighted average
    """
    if not qs:
        raise ValueError(f"Cannot compute average of zero quaternions: {qs}.")

    if weights is None:
        weights = [1.0] * len(qs)
    if len(qs) != len(weights):
        lq = len(qs)
        lw = len(weights)
        raise ValueError(f"Quaternions and weights must have the same length, got {lq} and {lw}.")

    if len(qs) == 1:
        return qs[0]

    # Accumulate weighted outer products
    matrix = np.zeros((4, 4))
    for q, w in zip(qs, weights, strict=True):
        v = q.to_array().reshape(4, 1)
        matrix += w * (v @ v.T)  # Sum of weighted outer products

    # Compute the principal eigenvector of the symmetric matrix
    eigenvalues, eigenvectors = np.linalg.eigh(matrix)
    largest_idx = int(np.argmax(eigenvalues))
    principal = eigenvectors[:, largest_idx]
    return Quaternion.from_array(principal)
