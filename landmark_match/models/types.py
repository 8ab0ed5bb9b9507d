"""Data models and type definitions"""
from enum import Enum
from typing import List, NamedTuple, Optional, Sequence
from typing_extensions import TypedDict

class NormalizedPoint(NamedTuple):
    x: float
    y: float

class NormalizedBox(NamedTuple):
    x: float
    y: float
    width: float
    height: float

class AbsolutePoint(NamedTuple):
    x: float
    y: float

class AbsoluteBox(NamedTuple):
    x: float
    y: float
    width: float
    height: float

class CanvasSize(NamedTuple):
    width: float
    height: float

# Position i must name the same anatomical landmark in every set
LandmarkSet = Sequence[NormalizedPoint]

class Classification(str, Enum):
    SAME = "SAME"
    DIFFERENT = "DIFFERENT"

class Box(TypedDict):
    x: float
    y: float
    width: float
    height: float

class ComparisonResult(TypedDict):
    meanDistance: float
    classification: Classification
    match: bool
    threshold: float
    pointCount: int
    analysis: str

class FaceComparisonResponse(ComparisonResult):
    referenceFace: dict[str, Box]
    candidateFace: dict[str, Box]

class FaceMatchRequest(TypedDict):
    referenceImage: str
    candidateImage: str

class PointMatchRequest(TypedDict):
    referencePoints: List[List[float]]
    candidatePoints: List[List[float]]

class SettingsResponse(TypedDict):
    canvasWidth: float
    canvasHeight: float
    threshold: float

class ErrorResponse(TypedDict):
    error: str
    traceback: Optional[str]
