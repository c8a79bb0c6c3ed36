"""Default wardrobe catalog.

Fixed, ordered garments offered to users before they upload their own.
Items are hosted remotely; `fetch_wardrobe_image` downloads one into an
`ImagePart` so it can be passed straight to the try-on task.
"""

import base64
import logging
from dataclasses import dataclass

import requests

from fitroom.image.encoding import ImagePart
from fitroom.image.errors import MalformedInputError
from fitroom.llm.provider_config import DOWNLOAD_TIMEOUT

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WardrobeItem:
    id: str
    name: str
    url: str
    date_added: int


# Default wardrobe items hosted for easy access
DEFAULT_WARDROBE = (
    WardrobeItem(
        id="gemini-sweat",
        name="Gemini Sweatshirt",
        url="https://raw.githubusercontent.com/ammaarreshi/app-images/refs/heads/main/gemini-sweat-2.png",
        date_added=1,
    ),
    WardrobeItem(
        id="gemini-tee",
        name="Gemini Tee",
        url="https://raw.githubusercontent.com/ammaarreshi/app-images/refs/heads/main/Gemini-tee.png",
        date_added=2,
    ),
)


def get_wardrobe_item(item_id: str) -> WardrobeItem:
    """Return the catalog entry with `item_id`; raises `KeyError` if unknown."""
    for item in DEFAULT_WARDROBE:
        if item.id == item_id:
            return item
    raise KeyError(item_id)


def fetch_wardrobe_image(item: WardrobeItem, session=None, timeout=DOWNLOAD_TIMEOUT) -> ImagePart:
    """Download a hosted garment image.

    Error handling:
        - HTTP/transport failures propagate as `requests` exceptions.
        - Non-image content types -> `MalformedInputError`.
    """
    http = session or requests
    response = http.get(item.url, timeout=timeout)
    response.raise_for_status()

    content_type = response.headers.get("content-type", "").split(";")[0].strip()
    if not content_type.startswith("image/"):
        raise MalformedInputError(f"{item.url} did not return an image ({content_type or 'no content type'})")

    logger.info("Downloaded wardrobe item %s (%d bytes)", item.id, len(response.content))
    return ImagePart(content_type, base64.b64encode(response.content).decode("ascii"))
