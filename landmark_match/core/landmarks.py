"""Landmark extractor interface.

An extractor is the detection engine behind the comparison: given an image
it finds face boxes, then landmark points for the boxes it is handed. It
keeps no state between calls; faces found by detect_faces are passed
explicitly to detect_landmarks.
"""

from typing import Protocol, Sequence, runtime_checkable

import numpy as np

from ..models.types import LandmarkSet, NormalizedBox

@runtime_checkable
class LandmarkExtractor(Protocol):
    def detect_faces(self, image: np.ndarray) -> Sequence[NormalizedBox]:
        """Return face boxes normalized to the image extent, possibly empty."""
        ...

    def detect_landmarks(self, image: np.ndarray, faces: Sequence[NormalizedBox]) -> Sequence[LandmarkSet]:
        """Return one landmark set per face, in the order of faces.

        Points are normalized within their face box. Index i of every set
        must name the same landmark.
        """
        ...
