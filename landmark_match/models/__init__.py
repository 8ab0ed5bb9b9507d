"""Data models and type definitions"""
from .types import (
    NormalizedPoint,
    NormalizedBox,
    AbsolutePoint,
    AbsoluteBox,
    CanvasSize,
    LandmarkSet,
    Classification,
    Box,
    ComparisonResult,
    FaceComparisonResponse,
    FaceMatchRequest,
    PointMatchRequest,
    SettingsResponse,
    ErrorResponse
)

__all__ = [
    'NormalizedPoint',
    'NormalizedBox',
    'AbsolutePoint',
    'AbsoluteBox',
    'CanvasSize',
    'LandmarkSet',
    'Classification',
    'Box',
    'ComparisonResult',
    'FaceComparisonResponse',
    'FaceMatchRequest',
    'PointMatchRequest',
    'SettingsResponse',
    'ErrorResponse'
]
