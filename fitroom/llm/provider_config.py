"""Provider/runtime configuration for the Gemini image client.

Architectural role:
    Centralizes model selection, endpoint templates, timeouts and credential
    lookup for `fitroom.llm.client` and `fitroom.catalog.wardrobe`.

Determinism:
    Deterministic for a fixed process environment and key file. Values are
    resolved at import time (plus runtime key-file reads in `load_key`).

Failure behavior:
    Missing key material is represented as `None`; `client.create_client`
    turns it into a `RuntimeError`.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# Image-capable multimodal model used by every generation task.
IMAGE_MODEL_NAME = os.getenv("FITROOM_IMAGE_MODEL", "gemini-2.5-flash-image")

GEMINI_URL_TEMPLATE = (
    "https://generativelanguage.googleapis.com/v1beta/models/"
    "{model}:generateContent"
)

GEMINI_KEY_FILE = os.getenv("FITROOM_KEY_FILE", "config/gemini.key")

# Seconds; handed to the transport as-is.
REQUEST_TIMEOUT = float(os.getenv("FITROOM_REQUEST_TIMEOUT", "120"))
DOWNLOAD_TIMEOUT = float(os.getenv("FITROOM_DOWNLOAD_TIMEOUT", "15"))

# Output restriction sent with every request.
RESPONSE_MODALITIES = ["IMAGE"]


def load_key(path):
    """Load API key from environment override or key file.

    Resolution order:
        1. Environment variable inferred from file stem (for example
           `config/gemini.key` -> `GEMINI_API_KEY`).
        2. Raw file contents at `path`.

    Args:
        path: Configured key file path or `None`.

    Returns:
        Key string or `None` when not available.

    Edge cases:
        - `None` path returns `None`.
        - Missing file returns `None`.
    """
    if not path:
        return None
    key_name = os.path.splitext(os.path.basename(path))[0].upper() + "_API_KEY"
    env_value = os.getenv(key_name)
    if env_value:
        return env_value
    if not os.path.exists(path):
        return None
    with open(path, "r") as f:
        return f.read().strip() or None
