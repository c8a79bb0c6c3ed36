"""Response interpretation for Gemini image generation.

Check order (first match decides):
    1. Prompt-level block -> `BlockedRequestError`.
    2. First candidate holding an inline image part -> data URL result.
    3. First candidate finished with a reason other than `STOP`
       -> `AbnormalTerminationError`.
    4. Fallback -> `NoImageProducedError` (with text commentary when present).

Determinism:
    Pure function of the response dictionary.
"""

import logging

from fitroom.image.encoding import ImagePart
from fitroom.image.errors import (
    AbnormalTerminationError,
    BlockedRequestError,
    NoImageProducedError,
)

logger = logging.getLogger(__name__)

NORMAL_FINISH_REASON = "STOP"


def _candidates(response: dict) -> list:
    return response.get("candidates") or []


def _parts(candidate: dict) -> list:
    content = candidate.get("content") or {}
    return content.get("parts") or []


def response_text(response: dict):
    """Concatenated text parts of the first candidate, or `None`."""
    candidates = _candidates(response)
    if not candidates:
        return None
    texts = [part["text"] for part in _parts(candidates[0]) if part.get("text")]
    if not texts:
        return None
    return "".join(texts)


def interpret_response(response: dict) -> str:
    """Extract the generated image as a data URL or raise a descriptive error.

    Args:
        response: Decoded `generateContent` JSON.

    Returns:
        `data:<mimeType>;base64,<data>` of the first inline image found.

    Error handling:
        - Prompt feedback block reason -> `BlockedRequestError`
        - Non-`STOP` finish reason without image -> `AbnormalTerminationError`
        - No image otherwise -> `NoImageProducedError`
    """
    feedback = response.get("promptFeedback") or {}
    block_reason = feedback.get("blockReason")
    if block_reason:
        logger.warning("Generation request blocked: %s", block_reason)
        raise BlockedRequestError(block_reason, feedback.get("blockReasonMessage"))

    for candidate in _candidates(response):
        for part in _parts(candidate):
            inline = part.get("inlineData")
            if inline:
                return ImagePart(inline["mimeType"], inline["data"]).to_data_url()

    candidates = _candidates(response)
    finish_reason = candidates[0].get("finishReason") if candidates else None
    if finish_reason and finish_reason != NORMAL_FINISH_REASON:
        logger.warning("Generation finished abnormally: %s", finish_reason)
        raise AbnormalTerminationError(finish_reason)

    text = (response_text(response) or "").strip()
    logger.warning("Generation returned no image")
    raise NoImageProducedError(text or None)
