import pytest
import requests


PNG_BYTES = b"\x89PNG\r\n\x1a\nfake"


def image_response(mime_type="image/png", data="UkVTVUxU"):
    return {
        "candidates": [
            {
                "content": {"parts": [{"inlineData": {"mimeType": mime_type, "data": data}}]},
                "finishReason": "STOP",
            }
        ]
    }


class FakeClient:
    """Stands in for GeminiImageClient; records every parts list it receives."""

    def __init__(self, response=None, error=None):
        self.response = response if response is not None else image_response()
        self.error = error
        self.calls = []

    def generate_content(self, parts):
        self.calls.append(parts)
        if self.error is not None:
            raise self.error
        return self.response


class FakeHTTPResponse:
    def __init__(self, payload=None, status_code=200, content=b"", headers=None):
        self.payload = payload
        self.status_code = status_code
        self.content = content
        self.headers = headers or {}

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def json(self):
        return self.payload


class FakeSession:
    def __init__(self, response):
        self.response = response
        self.requests = []

    def post(self, url, **kwargs):
        self.requests.append(("POST", url, kwargs))
        return self.response

    def get(self, url, **kwargs):
        self.requests.append(("GET", url, kwargs))
        return self.response


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture
def png_file(tmp_path):
    path = tmp_path / "person.png"
    path.write_bytes(PNG_BYTES)
    return path
