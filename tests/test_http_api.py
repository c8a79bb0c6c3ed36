import pytest
import requests
from fastapi.testclient import TestClient

from fitroom.api.http_api import app, get_client

from conftest import FakeClient


MODEL_URL = "data:image/png;base64,TU9ERUw="


@pytest.fixture
def api():
    fake = FakeClient()
    app.dependency_overrides[get_client] = lambda: fake
    with TestClient(app) as test_client:
        test_client.fake = fake
        yield test_client
    app.dependency_overrides.clear()


def test_list_wardrobe(api):
    response = api.get("/v1/wardrobe")
    assert response.status_code == 200
    items = response.json()
    assert [item["id"] for item in items] == ["gemini-sweat", "gemini-tee"]
    assert [item["dateAdded"] for item in items] == [1, 2]


def test_list_poses(api):
    response = api.get("/v1/poses")
    assert response.status_code == 200
    assert "Side profile view" in response.json()


def test_model_image(api):
    response = api.post("/v1/model-image", json={"image": MODEL_URL})
    assert response.status_code == 200
    assert response.json() == {"imageUrl": "data:image/png;base64,UkVTVUxU"}
    assert len(api.fake.calls) == 1


def test_try_on(api):
    response = api.post("/v1/try-on", json={"modelImage": MODEL_URL, "garmentImage": MODEL_URL})
    assert response.status_code == 200
    assert len(api.fake.calls[0]) == 3


def test_pose(api):
    response = api.post("/v1/pose", json={"tryOnImage": MODEL_URL, "poseInstruction": "Walking towards camera"})
    assert response.status_code == 200
    assert "Walking towards camera" in api.fake.calls[0][1]["text"]


def test_image_must_be_a_data_url(api):
    response = api.post("/v1/model-image", json={"image": "/etc/passwd"})
    assert response.status_code == 400
    assert api.fake.calls == []


def test_empty_pose_instruction_rejected(api):
    response = api.post("/v1/pose", json={"tryOnImage": MODEL_URL, "poseInstruction": ""})
    assert response.status_code == 422


def test_blocked_request(api):
    api.fake.response = {"promptFeedback": {"blockReason": "SAFETY", "blockReasonMessage": "nope"}}
    response = api.post("/v1/model-image", json={"image": MODEL_URL})
    assert response.status_code == 422
    assert response.json()["blockReason"] == "SAFETY"
    assert "nope" in response.json()["error"]


def test_no_image(api):
    api.fake.response = {"candidates": [{"content": {"parts": [{"text": "hello"}]}, "finishReason": "STOP"}]}
    response = api.post("/v1/model-image", json={"image": MODEL_URL})
    assert response.status_code == 502
    assert "hello" in response.json()["error"]


def test_transport_failure(api):
    api.fake.error = requests.ConnectionError("down")
    response = api.post("/v1/model-image", json={"image": MODEL_URL})
    assert response.status_code == 502
