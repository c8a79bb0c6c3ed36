"""Model access package.

Architectural role:
    Provides provider configuration and the HTTP transport used by the image
    task functions to reach the Gemini image model.

Module split:
    - `provider_config`: environment-driven model, endpoint and key configuration.
    - `client`: injectable `GeminiImageClient` plus the `create_client` factory.
"""

from fitroom.llm.client import GeminiImageClient, create_client

__all__ = ["GeminiImageClient", "create_client"]
