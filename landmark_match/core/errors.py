"""Errors raised while extracting and comparing landmark sets."""


class FaceMatchError(Exception):
    """Base exception for recoverable comparison failures."""
    pass

class FaceDetectionError(FaceMatchError):
    """Base exception for face detection errors."""
    pass

class NoFaceDetectedError(FaceDetectionError):
    """Exception raised when no face is detected in an image."""
    pass

class NoLandmarksDetectedError(FaceDetectionError):
    """Exception raised when a face is found but no landmarks are returned for it."""
    pass

class ScoringError(FaceMatchError):
    """Base exception for point set scoring errors."""
    pass

class LengthMismatchError(ScoringError):
    """Exception raised when two point sets differ in length."""

    def __init__(self, reference_count: int, candidate_count: int):
        self.reference_count = reference_count
        self.candidate_count = candidate_count
        super().__init__(
            f"Point sets differ in length: reference has {reference_count}, "
            f"candidate has {candidate_count}"
        )

class EmptyPointSetError(ScoringError):
    """Exception raised when both point sets are empty."""
    pass

class InvalidPointSetError(ScoringError):
    """Exception raised when points are not finite (x, y) pairs."""
    pass
