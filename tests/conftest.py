from __future__ import annotations

from typing import List, Sequence

import numpy as np
import pytest

from landmark_match.models.types import LandmarkSet, NormalizedBox, NormalizedPoint


class FakeExtractor:
    """Returns canned faces and landmarks, recording what it was asked."""

    def __init__(self, faces: Sequence[NormalizedBox], landmarks: Sequence[LandmarkSet]):
        self.faces = list(faces)
        self.landmarks = list(landmarks)
        self.face_calls: List[tuple] = []
        self.landmark_calls: List[list] = []

    def detect_faces(self, image: np.ndarray) -> List[NormalizedBox]:
        self.face_calls.append(image.shape)
        return list(self.faces)

    def detect_landmarks(self, image: np.ndarray, faces: Sequence[NormalizedBox]) -> List[LandmarkSet]:
        self.landmark_calls.append(list(faces))
        return list(self.landmarks[:len(faces)])


@pytest.fixture
def face_box() -> NormalizedBox:
    return NormalizedBox(0.1, 0.1, 0.5, 0.5)


@pytest.fixture
def landmark_set() -> List[NormalizedPoint]:
    return [
        NormalizedPoint(0.3, 0.4),
        NormalizedPoint(0.7, 0.4),
        NormalizedPoint(0.5, 0.6),
        NormalizedPoint(0.5, 0.8),
    ]


@pytest.fixture
def extractor(face_box, landmark_set) -> FakeExtractor:
    return FakeExtractor([face_box], [landmark_set])


@pytest.fixture
def image() -> np.ndarray:
    return np.zeros((480, 640, 3), dtype=np.uint8)
