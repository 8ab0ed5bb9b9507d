"""Landmark set scoring.

Two point sets are compared point by point: the Euclidean distance between
the i-th points of each set is averaged over all landmarks, and the mean is
classified against a fixed threshold expressed in canvas units.
"""

import logging
from typing import Sequence

import numpy as np

from ..config import SAME_PERSON_THRESHOLD
from ..models.types import AbsolutePoint, Classification, ComparisonResult
from .errors import EmptyPointSetError, InvalidPointSetError, LengthMismatchError

logger = logging.getLogger(__name__)

def validate_threshold(threshold: float) -> float:
    """Return threshold as a float, rejecting negative or non-finite values."""
    threshold = float(threshold)
    if not np.isfinite(threshold) or threshold < 0:
        raise ValueError(f"Threshold must be a non-negative number, got {threshold}")
    return threshold

def _as_point_array(points: Sequence[AbsolutePoint], label: str) -> np.ndarray:
    try:
        arr = np.asarray(points, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidPointSetError(f"{label} points are malformed: {str(e)}")

    if arr.shape != (len(points), 2):
        raise InvalidPointSetError(
            f"{label} points must be (x, y) pairs, got array of shape {arr.shape}"
        )
    if not np.isfinite(arr).all():
        raise InvalidPointSetError(f"{label} points contain NaN or infinite coordinates")
    return arr

def point_distances(a: Sequence[AbsolutePoint], b: Sequence[AbsolutePoint]) -> np.ndarray:
    """Compute the distance between each pair of corresponding points.

    Args:
        a: Reference points.
        b: Candidate points, same length and landmark order as a.

    Returns:
        Array of shape (n,) with one distance per landmark.

    Raises:
        LengthMismatchError: If a and b differ in length.
        EmptyPointSetError: If both sets are empty.
        InvalidPointSetError: If a point is not a finite (x, y) pair.
    """
    if len(a) != len(b):
        raise LengthMismatchError(len(a), len(b))
    if len(a) == 0:
        raise EmptyPointSetError("Cannot score empty point sets")

    pts_a = _as_point_array(a, "Reference")
    pts_b = _as_point_array(b, "Candidate")
    diff = pts_a - pts_b
    return np.hypot(diff[:, 0], diff[:, 1])

def analyze_distance(mean_distance: float, threshold: float, point_count: int) -> ComparisonResult:
    """Classify a mean landmark distance.

    Args:
        mean_distance: Mean per-point distance in canvas units.
        threshold: Distances strictly below this are classified as SAME.
        point_count: Number of landmarks the mean was taken over.

    Returns:
        Comparison result with classification and description.
    """
    if mean_distance < threshold:
        classification = Classification.SAME
        analysis = "Same person - landmark geometry matches within threshold"
    else:
        classification = Classification.DIFFERENT
        analysis = "Different person - landmark geometry differs beyond threshold"

    return {
        'meanDistance': float(mean_distance),
        'classification': classification,
        'match': classification is Classification.SAME,
        'threshold': float(threshold),
        'pointCount': int(point_count),
        'analysis': f"{analysis} (mean distance {mean_distance:.4f}, threshold {threshold})."
    }

def score(
    a: Sequence[AbsolutePoint],
    b: Sequence[AbsolutePoint],
    threshold: float = SAME_PERSON_THRESHOLD
) -> ComparisonResult:
    """Score two canvas point sets against each other.

    Args:
        a: Reference points.
        b: Candidate points.
        threshold: Mean distance below which the faces count as the same.

    Returns:
        Comparison result holding the mean distance and classification.

    Raises:
        LengthMismatchError: If a and b differ in length.
        EmptyPointSetError: If both sets are empty.
        InvalidPointSetError: If a point is not a finite (x, y) pair.
        ValueError: If threshold is negative or not finite.
    """
    threshold = validate_threshold(threshold)
    distances = point_distances(a, b)

    logger.debug(f"Reference points: {len(a)}, candidate points: {len(b)}")
    if logger.isEnabledFor(logging.DEBUG):
        for i, distance in enumerate(distances):
            logger.debug(f"Point {i} distance: {distance:.4f}")

    mean_distance = float(distances.mean())
    result = analyze_distance(mean_distance, threshold, len(distances))
    logger.info(
        f"Mean landmark distance {mean_distance:.4f} over {len(distances)} points: "
        f"{result['classification'].value}"
    )
    return result
