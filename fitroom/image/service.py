"""Image task functions used by the CLI and HTTP adapters.

Role in pipeline:
    - Converts caller images into inline-data parts.
    - Appends the task prompt from `fitroom.prompting.prompt_builder`.
    - Issues exactly one request through the injected client.
    - Returns the interpreted result as a data URL.

Sequencing:
    Each function is independent and stateless. Chaining model photo ->
    try-on -> pose is left to the caller, feeding each result into the next
    call.

Error handling strategy:
    - Encoding errors (`MalformedInputError`, `OSError`) propagate.
    - Transport exceptions from the client propagate unchanged.
    - Response failures are raised by `interpret_response`.
"""

import logging

from fitroom.image.encoding import ImagePart, data_url_to_part, encode_file_to_part
from fitroom.image.response import interpret_response
from fitroom.prompting.prompt_builder import (
    MODEL_IMAGE_PROMPT,
    VIRTUAL_TRY_ON_PROMPT,
    build_pose_prompt,
    text_part,
)

logger = logging.getLogger(__name__)


def _as_part(image, mime_type=None) -> ImagePart:
    """Accept an `ImagePart`, a data URL, or a path/binary file object."""
    if isinstance(image, ImagePart):
        return image
    if isinstance(image, str) and image.startswith("data:"):
        return data_url_to_part(image)
    return encode_file_to_part(image, mime_type)


def _generate(client, task: str, image_parts, prompt: str) -> str:
    parts = [part.to_request_part() for part in image_parts]
    parts.append(text_part(prompt))

    logger.info("Requesting %s (%d image parts)", task, len(image_parts))
    response = client.generate_content(parts)
    return interpret_response(response)


def generate_model_image(client, user_image, mime_type=None) -> str:
    """Turn a user photo into a studio-style full-body model photo.

    Args:
        client: Object exposing `generate_content(parts) -> dict`.
        user_image: `ImagePart`, data URL, path or binary file object.
        mime_type: Overrides MIME detection for paths/file objects.

    Returns:
        Generated image as a data URL.
    """
    user_part = _as_part(user_image, mime_type)
    return _generate(client, "model image", [user_part], MODEL_IMAGE_PROMPT)


def generate_virtual_try_on_image(client, model_image_url, garment_image, mime_type=None) -> str:
    """Dress the person of a prior result in a new garment.

    Args:
        client: Object exposing `generate_content(parts) -> dict`.
        model_image_url: Data URL of the model photo (usually a prior result).
        garment_image: Garment as `ImagePart`, data URL, path or file object.
        mime_type: Overrides MIME detection for the garment.

    Returns:
        Generated image as a data URL.
    """
    model_part = data_url_to_part(model_image_url)
    garment_part = _as_part(garment_image, mime_type)
    return _generate(
        client,
        "virtual try-on",
        [model_part, garment_part],
        VIRTUAL_TRY_ON_PROMPT,
    )


def generate_pose_variation(client, try_on_image_url, pose_instruction: str) -> str:
    """Regenerate a try-on result from the viewpoint described by `pose_instruction`."""
    try_on_part = data_url_to_part(try_on_image_url)
    return _generate(
        client,
        "pose variation",
        [try_on_part],
        build_pose_prompt(pose_instruction),
    )
