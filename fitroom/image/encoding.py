"""Data URL and inline-data helpers.

Processing lifecycle:
1. Read a binary resource (path or file object) fully into memory.
2. Base64-encode it into a `data:<mime>;base64,<payload>` URL.
3. Split data URLs back into MIME type and payload for request parts.

Input validation behavior:
- Data URLs must carry a `data:<type>;base64` header before the first comma.
- Read failures propagate as `OSError`.

Side effects:
- None beyond reading the supplied resource.
"""

import base64
import binascii
import mimetypes
import os
import re
from dataclasses import dataclass
from typing import Tuple

from fitroom.image.errors import MalformedInputError

DEFAULT_MIME_TYPE = "application/octet-stream"

_HEADER_PATTERN = re.compile(r"^data:([^;,]+);base64$")


@dataclass(frozen=True)
class ImagePart:
    """Image payload ready for transmission as inline data."""

    mime_type: str
    data: str

    def to_request_part(self) -> dict:
        return {"inlineData": {"mimeType": self.mime_type, "data": self.data}}

    def to_data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.data}"


# ============================================================
# ENCODING
# ============================================================

def read_file_as_data_url(source, mime_type=None) -> str:
    """
    Read a path or binary file object and return it as a base64 data URL.

    MIME type resolution:
    - explicit `mime_type`
    - guessed from the path / file object name
    - `application/octet-stream`
    """
    if isinstance(source, (str, bytes, os.PathLike)):
        name = os.fsdecode(source)
        with open(source, "rb") as f:
            content = f.read()
    else:
        name = getattr(source, "name", None)
        content = source.read()

    if not mime_type and isinstance(name, str):
        mime_type, _ = mimetypes.guess_type(name)

    encoded = base64.b64encode(content).decode("ascii")
    return f"data:{mime_type or DEFAULT_MIME_TYPE};base64,{encoded}"


def encode_file_to_part(source, mime_type=None) -> ImagePart:
    """Read a binary resource into an `ImagePart`."""
    return data_url_to_part(read_file_as_data_url(source, mime_type))


# ============================================================
# DECODING
# ============================================================

def parse_data_url(data_url: str) -> Tuple[str, str]:
    """
    Split a data URL into `(mime_type, data)`.

    Raises `MalformedInputError` when there is no comma or when the header is
    not `data:<type>;base64`.
    """
    if not isinstance(data_url, str) or "," not in data_url:
        raise MalformedInputError("Invalid data URL")

    header, data = data_url.split(",", 1)
    match = _HEADER_PATTERN.match(header)
    if not match:
        raise MalformedInputError("Could not extract the MIME type from the data URL")

    return match.group(1), data


def data_url_to_part(data_url: str) -> ImagePart:
    mime_type, data = parse_data_url(data_url)
    return ImagePart(mime_type=mime_type, data=data)


def decode_data_url(data_url: str) -> bytes:
    """Return the raw bytes carried by a data URL."""
    _, data = parse_data_url(data_url)
    try:
        return base64.b64decode(data, validate=True)
    except binascii.Error as e:
        raise MalformedInputError(f"Data URL payload is not valid base64: {e}") from e
