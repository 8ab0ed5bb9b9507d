from __future__ import annotations

import numpy as np
import pytest

from conftest import FakeExtractor
from landmark_match.config import MatchSettings
from landmark_match.core.errors import LengthMismatchError, NoFaceDetectedError, NoLandmarksDetectedError
from landmark_match.core.pipeline import compare_images, extract_canvas_points
from landmark_match.models.types import AbsoluteBox, CanvasSize, Classification, NormalizedBox, NormalizedPoint


def test_extract_canvas_points_maps_first_face(extractor, image, landmark_set) -> None:
    box, points = extract_canvas_points(image, extractor)

    assert box == pytest.approx(AbsoluteBox(75, 75, 375, 375))
    assert len(points) == len(landmark_set)
    assert points[0].x == pytest.approx(0.3 * 375 + 75)
    assert points[0].y == pytest.approx(0.4 * 375 + 75)


def test_image_is_resized_to_canvas_before_detection(extractor, image) -> None:
    extract_canvas_points(image, extractor, MatchSettings(CanvasSize(300, 200), 0.13))

    assert extractor.face_calls == [(200, 300, 3)]


def test_only_first_face_is_passed_to_landmark_detection(face_box, landmark_set, image) -> None:
    second = NormalizedBox(0.6, 0.6, 0.2, 0.2)
    extractor = FakeExtractor([face_box, second], [landmark_set, landmark_set])

    extract_canvas_points(image, extractor)

    assert extractor.landmark_calls == [[face_box]]


def test_no_face_is_reported(image) -> None:
    with pytest.raises(NoFaceDetectedError):
        extract_canvas_points(image, FakeExtractor([], []))


@pytest.mark.parametrize("landmarks", [[], [[]]])
def test_no_landmarks_is_reported(face_box, image, landmarks) -> None:
    with pytest.raises(NoLandmarksDetectedError):
        extract_canvas_points(image, FakeExtractor([face_box], landmarks))


def test_none_image_is_rejected(extractor) -> None:
    with pytest.raises(ValueError):
        extract_canvas_points(None, extractor)


def test_compare_images_with_same_landmarks_is_same(extractor, image) -> None:
    result, reference_box, candidate_box = compare_images(image, image.copy(), extractor)

    assert result['meanDistance'] == 0
    assert result['classification'] is Classification.SAME
    assert reference_box == candidate_box


class SequencedExtractor:
    """Returns a different landmark set on each call."""

    def __init__(self, box, landmark_sets):
        self.box = box
        self.landmark_sets = list(landmark_sets)

    def detect_faces(self, image):
        return [self.box]

    def detect_landmarks(self, image, faces):
        return [self.landmark_sets.pop(0)]


def test_compare_images_with_shifted_landmarks_is_different(image) -> None:
    box = NormalizedBox(0.0, 0.0, 1.0, 1.0)
    extractor = SequencedExtractor(box, [
        [NormalizedPoint(0.5, 0.5)],
        [NormalizedPoint(0.5, 0.51)],
    ])

    result, _, _ = compare_images(image, image, extractor, MatchSettings(CanvasSize(750, 750), 0.13))

    assert result['meanDistance'] == pytest.approx(7.5)
    assert result['classification'] is Classification.DIFFERENT


def test_compare_images_reports_landmark_count_mismatch(image) -> None:
    box = NormalizedBox(0.0, 0.0, 1.0, 1.0)
    extractor = SequencedExtractor(box, [
        [NormalizedPoint(0.5, 0.5), NormalizedPoint(0.2, 0.2)],
        [NormalizedPoint(0.5, 0.5)],
    ])

    with pytest.raises(LengthMismatchError):
        compare_images(image, image, extractor)


def test_settings_validate_values() -> None:
    with pytest.raises(ValueError):
        MatchSettings(CanvasSize(0, 750), 0.13)
    with pytest.raises(ValueError):
        MatchSettings(CanvasSize(750, 750), -1.0)
    with pytest.raises(ValueError):
        MatchSettings(CanvasSize(750, 750), float("nan"))

    assert MatchSettings(CanvasSize(640.4, 480), 0.2).canvas_pixels == (640, 480)


def test_candidate_is_skipped_when_reference_has_no_face(image) -> None:
    extractor = FakeExtractor([], [])

    with pytest.raises(NoFaceDetectedError):
        compare_images(image, np.ones_like(image), extractor)

    assert len(extractor.face_calls) == 1
