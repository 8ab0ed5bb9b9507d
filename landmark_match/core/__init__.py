"""Core landmark mapping and comparison functionality"""
from .coordinates import map_box, map_points
from .scoring import score, analyze_distance
from .comparator import FaceComparator, transition
from .pipeline import extract_canvas_points, compare_images
from .errors import (
    FaceMatchError,
    NoFaceDetectedError,
    NoLandmarksDetectedError,
    LengthMismatchError,
    EmptyPointSetError,
    InvalidPointSetError
)

__all__ = [
    'map_box',
    'map_points',
    'score',
    'analyze_distance',
    'FaceComparator',
    'transition',
    'extract_canvas_points',
    'compare_images',
    'FaceMatchError',
    'NoFaceDetectedError',
    'NoLandmarksDetectedError',
    'LengthMismatchError',
    'EmptyPointSetError',
    'InvalidPointSetError'
]
