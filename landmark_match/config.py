"""Shared comparison configuration.

All landmark points are mapped into one canvas before scoring, so the
threshold is expressed in canvas units. Changing CANVAS_SIZE changes what a
given threshold means; tune both together.
"""

import math
from dataclasses import dataclass
from typing import Tuple

from .models.types import CanvasSize

# Canvas
CANVAS_SIZE = (750, 750)        # Both images are resized and mapped to this frame

# Scoring
SAME_PERSON_THRESHOLD = 0.13    # Mean landmark distance below this means "same"

# face_recognition backend
DETECTION_MODEL = "hog"         # "hog" (CPU) or "cnn" (CUDA build of dlib)
LANDMARK_MODEL = "large"        # "large" = 68-point model, "small" = 5-point model
UPSAMPLE_TIMES = 1              # Upsampling passes when looking for small faces

# Server
HOST = "0.0.0.0"
PORT = 3002


@dataclass(frozen=True)
class MatchSettings:
    """Canvas and threshold used for one comparison."""

    canvas_size: CanvasSize = CanvasSize(*CANVAS_SIZE)
    threshold: float = SAME_PERSON_THRESHOLD

    def __post_init__(self):
        width, height = self.canvas_size
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        if not math.isfinite(self.threshold) or self.threshold < 0:
            raise ValueError(f"Threshold must be a non-negative number, got {self.threshold}")
        object.__setattr__(self, 'canvas_size', CanvasSize(float(width), float(height)))

    @property
    def canvas_pixels(self) -> Tuple[int, int]:
        """Canvas size rounded to whole pixels, for image resizing."""
        return int(round(self.canvas_size.width)), int(round(self.canvas_size.height))


def default_settings() -> MatchSettings:
    return MatchSettings(CanvasSize(*CANVAS_SIZE), SAME_PERSON_THRESHOLD)
