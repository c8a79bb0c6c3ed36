"""Gemini transport client for image-generation requests.

Architectural role:
    Executes one `generateContent` call per invocation against the configured
    Gemini image model and returns the decoded JSON response. Instances are
    constructed explicitly and passed to `fitroom.image.service` functions, so
    tests can substitute any object exposing `generate_content(parts)`.

Model invocation flow:
    task function -> `GeminiImageClient.generate_content(parts)` -> HTTP POST
    -> parsed JSON dict -> `fitroom.image.response.interpret_response`.

Retry behavior:
    No retry loop is implemented. Each call is attempted once with the
    configured transport timeout.

Failure handling model:
    Transport and HTTP status failures surface as `requests` exceptions and are
    never converted into return values.
"""

import logging

import requests

from fitroom.llm.provider_config import (
    GEMINI_KEY_FILE,
    GEMINI_URL_TEMPLATE,
    IMAGE_MODEL_NAME,
    REQUEST_TIMEOUT,
    RESPONSE_MODALITIES,
    load_key,
)

logger = logging.getLogger(__name__)


class GeminiImageClient:
    """Thin HTTP wrapper around the Gemini `generateContent` endpoint."""

    def __init__(
        self,
        api_key: str,
        model: str = IMAGE_MODEL_NAME,
        url_template: str = GEMINI_URL_TEMPLATE,
        timeout: float = REQUEST_TIMEOUT,
        session=None,
    ):
        if not api_key:
            raise ValueError("api_key must be a non-empty string")
        self.model = model
        self.url = url_template.format(model=model)
        self.timeout = timeout
        self.session = session or requests.Session()
        self._headers = {
            "x-goog-api-key": api_key,
            "Content-Type": "application/json",
        }

    def __repr__(self):
        return f"GeminiImageClient(model={self.model!r})"

    def build_payload(self, parts: list) -> dict:
        """Wrap request parts into a single-turn payload restricted to image output."""
        return {
            "contents": [{"parts": list(parts)}],
            "generationConfig": {"responseModalities": list(RESPONSE_MODALITIES)},
        }

    def generate_content(self, parts: list) -> dict:
        """Send one generation request and return the decoded JSON response.

        Args:
            parts: Ordered request parts (`{"inlineData": ...}` / `{"text": ...}`).

        Returns:
            Response dictionary as returned by the service.

        Error handling:
            - Connection/timeout failures -> `requests.RequestException`
            - Non-2xx status -> `requests.HTTPError` via `raise_for_status()`
        """
        payload = self.build_payload(parts)
        logger.debug("POST %s (%d parts)", self.url, len(payload["contents"][0]["parts"]))

        response = self.session.post(
            self.url,
            headers=self._headers,
            json=payload,
            timeout=self.timeout,
        )
        response.raise_for_status()
        return response.json()


def create_client(api_key=None, **kwargs) -> GeminiImageClient:
    """Build a client from explicit arguments or environment/key-file config.

    Raises:
        RuntimeError: no API key supplied and none configured.
    """
    api_key = api_key or load_key(GEMINI_KEY_FILE)
    if not api_key:
        raise RuntimeError(
            f"Gemini API key missing: set GEMINI_API_KEY or provide {GEMINI_KEY_FILE}"
        )
    return GeminiImageClient(api_key, **kwargs)
