"""Landmark comparison API routes.

This module provides the API endpoints for landmark-based face comparison,
handling image uploads, landmark extraction, and point set scoring.
"""

import logging
import traceback
from functools import lru_cache
from fastapi import APIRouter, Depends, HTTPException, status
from typing import Dict
from ..config import MatchSettings, default_settings
from ..core.coordinates import to_absolute_points
from ..core.errors import FaceDetectionError, ScoringError
from ..core.landmarks import LandmarkExtractor
from ..core.pipeline import compare_images
from ..core.scoring import score
from ..utils.image import decode_base64_image, ImageProcessingError
from ..models.types import (
    ComparisonResult,
    ErrorResponse,
    FaceComparisonResponse,
    FaceMatchRequest,
    PointMatchRequest,
    SettingsResponse
)

# Configure logging
logger = logging.getLogger(__name__)

router = APIRouter()

@lru_cache(maxsize=None)
def get_extractor() -> LandmarkExtractor:
    """Return the shared face_recognition extractor, created on first use."""
    from ..core.face_landmarks import FaceRecognitionExtractor
    return FaceRecognitionExtractor()

def get_settings() -> MatchSettings:
    return default_settings()

def _internal_error(e: Exception) -> HTTPException:
    error_details: ErrorResponse = {
        'error': str(e),
        'traceback': traceback.format_exc()
    }
    logger.error("Error details:", extra=error_details)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=error_details
    )

@router.post("/compare-faces", response_model=FaceComparisonResponse)
def compare_faces(
    request_data: FaceMatchRequest,
    extractor: LandmarkExtractor = Depends(get_extractor),
    settings: MatchSettings = Depends(get_settings)
) -> Dict:
    """Compare the faces in a reference and a candidate photo.

    Args:
        request_data: Dictionary containing base64-encoded images.
            - referenceImage: Base64 string of reference photo
            - candidateImage: Base64 string of candidate photo

    Returns:
        Dictionary containing the comparison result:
            - meanDistance: Mean landmark distance in canvas units
            - classification: SAME or DIFFERENT
            - match: Boolean indicating if faces match
            - threshold, pointCount, analysis
            - referenceFace: Face box in reference image, canvas units
            - candidateFace: Face box in candidate image, canvas units

    Raises:
        HTTPException: If image decoding, face detection or scoring fails
    """
    try:
        logger.info("Decoding reference image...")
        reference_image = decode_base64_image(request_data['referenceImage'])

        logger.info("Decoding candidate image...")
        candidate_image = decode_base64_image(request_data['candidateImage'])

        result, reference_box, candidate_box = compare_images(
            reference_image, candidate_image, extractor, settings
        )

        response = dict(result)
        response['referenceFace'] = {'box': reference_box._asdict()}
        response['candidateFace'] = {'box': candidate_box._asdict()}
        return response

    except FaceDetectionError as e:
        logger.warning(f"Face detection error: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except ScoringError as e:
        logger.warning(f"Scoring error: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except (ImageProcessingError, ValueError) as e:
        logger.warning(f"Validation error: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except Exception as e:
        raise _internal_error(e)

@router.post("/compare-points", response_model=ComparisonResult)
def compare_points(
    request_data: PointMatchRequest,
    settings: MatchSettings = Depends(get_settings)
) -> Dict:
    """Score two landmark point sets already expressed in canvas units.

    Args:
        request_data: Dictionary containing point lists.
            - referencePoints: List of [x, y] pairs
            - candidatePoints: List of [x, y] pairs, same landmark order

    Raises:
        HTTPException: If the point sets are malformed or cannot be scored
    """
    try:
        reference_points = to_absolute_points(request_data['referencePoints'])
        candidate_points = to_absolute_points(request_data['candidatePoints'])
        return score(reference_points, candidate_points, settings.threshold)

    except ScoringError as e:
        logger.warning(f"Scoring error: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except ValueError as e:
        logger.warning(f"Validation error: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except Exception as e:
        raise _internal_error(e)

@router.get("/settings", response_model=SettingsResponse)
def read_settings(settings: MatchSettings = Depends(get_settings)) -> Dict:
    """Return the canvas size and threshold used for comparisons."""
    return {
        'canvasWidth': settings.canvas_size.width,
        'canvasHeight': settings.canvas_size.height,
        'threshold': settings.threshold
    }
