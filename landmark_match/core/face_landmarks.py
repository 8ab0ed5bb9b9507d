"""Landmark extraction backed by the face_recognition library.

Faces are located with dlib's HOG (or CNN) detector and landmarks with its
shape predictor. Boxes are normalized to the image and landmark points to
their face box so the output plugs into the coordinate mapper.
"""

import logging
from typing import Dict, List, Sequence, Tuple

import cv2
import numpy as np
import face_recognition

from ..config import DETECTION_MODEL, LANDMARK_MODEL, UPSAMPLE_TIMES
from ..models.types import LandmarkSet, NormalizedBox, NormalizedPoint

logger = logging.getLogger(__name__)

class FaceRecognitionExtractor:
    """Detects faces and landmark points using face_recognition."""

    # Fixed feature order, so index i is the same landmark in every face
    FEATURE_ORDER = {
        "large": (
            "chin",
            "left_eyebrow",
            "right_eyebrow",
            "nose_bridge",
            "nose_tip",
            "left_eye",
            "right_eye",
            "top_lip",
            "bottom_lip",
        ),
        "small": (
            "nose_tip",
            "left_eye",
            "right_eye",
        ),
    }

    def __init__(
        self,
        detection_model: str = DETECTION_MODEL,
        landmark_model: str = LANDMARK_MODEL,
        upsample_times: int = UPSAMPLE_TIMES
    ):
        if landmark_model not in self.FEATURE_ORDER:
            raise ValueError(f"Unsupported landmark model: {landmark_model}")
        self.detection_model = detection_model
        self.landmark_model = landmark_model
        self.upsample_times = upsample_times

    def detect_faces(self, image: np.ndarray) -> List[NormalizedBox]:
        """Detect faces in a BGR image.

        Args:
            image: Input image in BGR format.

        Returns:
            Face boxes normalized to the image extent. Empty if no face is found.
        """
        # face_recognition expects RGB
        rgb_image = cv2.cvtColor(image, cv2.COLOR_BGR2RGB)
        height, width = image.shape[:2]

        face_locations = face_recognition.face_locations(
            rgb_image,
            number_of_times_to_upsample=self.upsample_times,
            model=self.detection_model
        )
        logger.info(f"Found {len(face_locations)} faces")

        return [
            NormalizedBox(
                x=left / width,
                y=top / height,
                width=(right - left) / width,
                height=(bottom - top) / height
            )
            for (top, right, bottom, left) in face_locations
        ]

    def detect_landmarks(self, image: np.ndarray, faces: Sequence[NormalizedBox]) -> List[LandmarkSet]:
        """Detect landmarks for the given faces.

        Args:
            image: Input image in BGR format.
            faces: Boxes returned by detect_faces for the same image.

        Returns:
            One landmark set per face, normalized within its box.
        """
        if not faces:
            return []

        rgb_image = cv2.cvtColor(image, cv2.COLOR_BGR2RGB)
        height, width = image.shape[:2]
        locations = [self._to_location(face, width, height) for face in faces]

        raw_landmarks = face_recognition.face_landmarks(
            rgb_image,
            face_locations=locations,
            model=self.landmark_model
        )

        results: List[LandmarkSet] = []
        for location, features in zip(locations, raw_landmarks):
            points = self._normalize_features(features, location)
            logger.info(f"Extracted {len(points)} landmark points")
            results.append(points)
        return results

    @staticmethod
    def _to_location(face: NormalizedBox, width: int, height: int) -> Tuple[int, int, int, int]:
        """Convert a normalized box to a (top, right, bottom, left) pixel location."""
        left = int(round(face.x * width))
        top = int(round(face.y * height))
        right = int(round((face.x + face.width) * width))
        bottom = int(round((face.y + face.height) * height))
        return top, right, bottom, left

    def _normalize_features(
        self,
        features: Dict[str, List[Tuple[int, int]]],
        location: Tuple[int, int, int, int]
    ) -> List[NormalizedPoint]:
        top, right, bottom, left = location
        box_width = max(right - left, 1)
        box_height = max(bottom - top, 1)

        points = []
        for name in self.FEATURE_ORDER[self.landmark_model]:
            for (x, y) in features.get(name, []):
                points.append(NormalizedPoint(
                    x=(x - left) / box_width,
                    y=(y - top) / box_height
                ))
        return points
