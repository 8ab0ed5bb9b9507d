"""End-to-end landmark comparison of two images."""

import logging
from typing import List, Optional, Tuple

import numpy as np

from ..config import MatchSettings, default_settings
from ..models.types import AbsoluteBox, AbsolutePoint, ComparisonResult
from ..utils.image import resize_to_canvas
from .comparator import CANDIDATE, REFERENCE, FaceComparator
from .coordinates import map_box, map_points
from .errors import NoFaceDetectedError, NoLandmarksDetectedError
from .landmarks import LandmarkExtractor

logger = logging.getLogger(__name__)

def extract_canvas_points(
    image: np.ndarray,
    extractor: LandmarkExtractor,
    settings: Optional[MatchSettings] = None,
    prefix: str = ""
) -> Tuple[AbsoluteBox, List[AbsolutePoint]]:
    """Extract landmarks from an image and map them onto the canvas.

    The image is resized to the canvas first. When several faces are found,
    the first one is used.

    Args:
        image: Input image in BGR format.
        extractor: Detection backend.
        settings: Canvas and threshold settings.
        prefix: Prefix for logging messages.

    Returns:
        The face box and its landmark points, both in canvas coordinates.

    Raises:
        ValueError: If the image is None.
        NoFaceDetectedError: If the extractor finds no face.
        NoLandmarksDetectedError: If the extractor returns no landmarks for the face.
    """
    if image is None:
        raise ValueError("Input image is None")
    settings = settings or default_settings()

    canvas_image = resize_to_canvas(image, settings.canvas_pixels)
    logger.info(f"{prefix}Image resized from {image.shape[:2]} to {canvas_image.shape[:2]}")

    faces = list(extractor.detect_faces(canvas_image))
    if not faces:
        raise NoFaceDetectedError(f"{prefix}No faces detected in image")
    logger.info(f"{prefix}Detected {len(faces)} faces")

    face = faces[0]
    landmark_sets = list(extractor.detect_landmarks(canvas_image, [face]))
    if not landmark_sets or not landmark_sets[0]:
        raise NoLandmarksDetectedError(f"{prefix}No landmarks detected for face")

    box = map_box(face, settings.canvas_size)
    points = map_points(landmark_sets[0], box)
    logger.info(f"{prefix}Face box on canvas: {tuple(round(v, 2) for v in box)}, {len(points)} points")
    return box, points

def compare_images(
    reference_image: np.ndarray,
    candidate_image: np.ndarray,
    extractor: LandmarkExtractor,
    settings: Optional[MatchSettings] = None
) -> Tuple[ComparisonResult, AbsoluteBox, AbsoluteBox]:
    """Compare the faces in two images by landmark geometry.

    Args:
        reference_image: Reference image in BGR format.
        candidate_image: Candidate image in BGR format.
        extractor: Detection backend.
        settings: Canvas and threshold settings, shared by both images.

    Returns:
        The comparison result and the canvas face boxes of the reference and
        candidate images.

    Raises:
        FaceMatchError: If either image has no usable face, or the landmark
            sets cannot be scored.
    """
    settings = settings or default_settings()
    comparator = FaceComparator(threshold=settings.threshold)

    reference_box, reference_points = extract_canvas_points(
        reference_image, extractor, settings, "Reference: "
    )
    comparator.set_slot(REFERENCE, reference_points)

    candidate_box, candidate_points = extract_canvas_points(
        candidate_image, extractor, settings, "Candidate: "
    )
    result = comparator.set_slot(CANDIDATE, candidate_points)

    return result, reference_box, candidate_box
