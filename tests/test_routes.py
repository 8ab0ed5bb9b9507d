from __future__ import annotations

import base64

import cv2
import numpy as np
import pytest
from fastapi.testclient import TestClient

from conftest import FakeExtractor
from landmark_match.api.routes import get_extractor, get_settings
from landmark_match.config import MatchSettings
from landmark_match.main import app
from landmark_match.models.types import CanvasSize


def _image_payload() -> str:
    ok, buffer = cv2.imencode(".png", np.full((64, 48, 3), 200, dtype=np.uint8))
    assert ok
    return "data:image/png;base64," + base64.b64encode(buffer.tobytes()).decode("ascii")


@pytest.fixture
def client(extractor):
    app.dependency_overrides[get_extractor] = lambda: extractor
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_compare_faces_returns_result_and_boxes(client) -> None:
    response = client.post("/api/compare-faces", json={
        "referenceImage": _image_payload(),
        "candidateImage": _image_payload(),
    })

    assert response.status_code == 200
    body = response.json()
    assert body["meanDistance"] == 0
    assert body["classification"] == "SAME"
    assert body["match"] is True
    assert body["pointCount"] == 4
    assert body["referenceFace"]["box"]["x"] == pytest.approx(75)
    assert body["candidateFace"]["box"]["width"] == pytest.approx(375)


def test_compare_faces_without_face_is_bad_request() -> None:
    app.dependency_overrides[get_extractor] = lambda: FakeExtractor([], [])
    try:
        response = TestClient(app).post("/api/compare-faces", json={
            "referenceImage": _image_payload(),
            "candidateImage": _image_payload(),
        })
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 400
    assert "No faces detected" in response.json()["detail"]


def test_compare_faces_with_bad_image_is_bad_request(client) -> None:
    response = client.post("/api/compare-faces", json={
        "referenceImage": "not base64 !!",
        "candidateImage": _image_payload(),
    })

    assert response.status_code == 400


def test_compare_faces_requires_both_images(client) -> None:
    response = client.post("/api/compare-faces", json={"referenceImage": _image_payload()})

    assert response.status_code == 422


def test_compare_points_different(client) -> None:
    response = client.post("/api/compare-points", json={
        "referencePoints": [[100, 100]],
        "candidatePoints": [[100, 100.5]],
    })

    assert response.status_code == 200
    body = response.json()
    assert body["meanDistance"] == pytest.approx(0.5)
    assert body["classification"] == "DIFFERENT"
    assert body["match"] is False


def test_compare_points_empty_sets_are_bad_request(client) -> None:
    response = client.post("/api/compare-points", json={
        "referencePoints": [],
        "candidatePoints": [],
    })

    assert response.status_code == 400
    assert "empty" in response.json()["detail"]


def test_compare_points_length_mismatch_is_bad_request(client) -> None:
    response = client.post("/api/compare-points", json={
        "referencePoints": [[1, 1], [2, 2]],
        "candidatePoints": [[1, 1]],
    })

    assert response.status_code == 400
    assert "differ in length" in response.json()["detail"]


def test_compare_points_uses_configured_threshold(client) -> None:
    app.dependency_overrides[get_settings] = lambda: MatchSettings(CanvasSize(750, 750), 1.0)

    response = client.post("/api/compare-points", json={
        "referencePoints": [[100, 100]],
        "candidatePoints": [[100, 100.5]],
    })

    assert response.json()["classification"] == "SAME"


def test_read_settings(client) -> None:
    response = client.get("/api/settings")

    assert response.status_code == 200
    assert response.json() == {"canvasWidth": 750.0, "canvasHeight": 750.0, "threshold": 0.13}


@pytest.mark.parametrize("token", ["NaN", "Infinity"])
def test_compare_points_non_finite_is_bad_request(client, token) -> None:
    # Python's json parser accepts these tokens, so the body reaches scoring
    body = '{"referencePoints": [[%s, 1]], "candidatePoints": [[0, 1]]}' % token
    response = client.post(
        "/api/compare-points",
        content=body,
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert "NaN or infinite" in response.json()["detail"]


def test_compare_points_rejects_triples(client) -> None:
    response = client.post("/api/compare-points", json={
        "referencePoints": [[1, 2, 3]],
        "candidatePoints": [[1, 2, 3]],
    })

    assert response.status_code == 400
