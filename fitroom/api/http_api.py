"""
HTTP API adapter for the fitroom image tasks.

Architectural role:
- Expose the three image-editing tasks and the wardrobe catalog over JSON.
- Validate request bodies with pydantic models.
- Delegate generation to `fitroom.image.service` with an injected client.
- Map library errors to HTTP status codes.

Endpoint responsibilities:
- `GET /v1/wardrobe`: list default wardrobe items ordered by `dateAdded`.
- `GET /v1/poses`: list preset pose instructions.
- `POST /v1/model-image`: `{image}` -> `{imageUrl}`.
- `POST /v1/try-on`: `{modelImage, garmentImage}` -> `{imageUrl}`.
- `POST /v1/pose`: `{tryOnImage, poseInstruction}` -> `{imageUrl}`.

Error handling strategy:
- `MalformedInputError` -> HTTP 400.
- `BlockedRequestError` -> HTTP 422.
- `AbnormalTerminationError` / `NoImageProducedError` -> HTTP 502.
- Transport failures (`requests.RequestException`) -> HTTP 502.
- Missing credentials surface from `get_client` as HTTP 500.

Side effects:
- Loads environment variables at import time via `load_dotenv()`.
- The Gemini client is created lazily once per process.
"""

from dotenv import load_dotenv

load_dotenv()

import logging
from functools import lru_cache
from typing import List

import requests
from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from fitroom.catalog.wardrobe import DEFAULT_WARDROBE
from fitroom.image.encoding import data_url_to_part
from fitroom.image.errors import (
    BlockedRequestError,
    GenerationError,
    MalformedInputError,
)
from fitroom.image.service import (
    generate_model_image,
    generate_pose_variation,
    generate_virtual_try_on_image,
)
from fitroom.llm.client import create_client
from fitroom.prompting.prompt_builder import POSE_INSTRUCTIONS

logger = logging.getLogger(__name__)

app = FastAPI(
    title="fitroom",
    description="Virtual model, try-on and pose variation images via Gemini.",
)


# ============================================================
# Client Dependency
# ============================================================

@lru_cache(maxsize=1)
def get_client():
    """Return the process-wide Gemini client (overridable in tests)."""
    return create_client()


# ============================================================
# Request / Response Schemas
# ============================================================

class ModelImageRequest(BaseModel):
    image: str = Field(..., description="User photo as a base64 data URL.")


class TryOnRequest(BaseModel):
    modelImage: str = Field(..., description="Model photo data URL (prior result).")
    garmentImage: str = Field(..., description="Garment photo as a base64 data URL.")


class PoseRequest(BaseModel):
    tryOnImage: str = Field(..., description="Try-on result data URL.")
    poseInstruction: str = Field(..., min_length=1)


class ImageResponse(BaseModel):
    imageUrl: str = Field(..., description="Generated image as a base64 data URL.")


class WardrobeItemResponse(BaseModel):
    id: str
    name: str
    url: str
    dateAdded: int


# ============================================================
# Error Mapping
# ============================================================

@app.exception_handler(MalformedInputError)
async def _malformed_input(request, exc):
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.exception_handler(BlockedRequestError)
async def _blocked(request, exc):
    return JSONResponse(
        status_code=422,
        content={"error": str(exc), "blockReason": exc.reason},
    )


@app.exception_handler(GenerationError)
async def _generation_failed(request, exc):
    return JSONResponse(status_code=502, content={"error": str(exc)})


@app.exception_handler(requests.RequestException)
async def _transport_failed(request, exc):
    logger.error("Upstream request failed: %s", exc)
    return JSONResponse(status_code=502, content={"error": "Upstream image service request failed"})


# ============================================================
# Endpoints
# ============================================================

@app.get("/v1/wardrobe", response_model=List[WardrobeItemResponse])
def list_wardrobe():
    items = sorted(DEFAULT_WARDROBE, key=lambda item: item.date_added)
    return [
        WardrobeItemResponse(id=item.id, name=item.name, url=item.url, dateAdded=item.date_added)
        for item in items
    ]


@app.get("/v1/poses", response_model=List[str])
def list_poses():
    return list(POSE_INSTRUCTIONS)


# Generation endpoints are sync so FastAPI runs the blocking HTTP call in its threadpool.
@app.post("/v1/model-image", response_model=ImageResponse)
def model_image(payload: ModelImageRequest, client=Depends(get_client)):
    return ImageResponse(imageUrl=generate_model_image(client, data_url_to_part(payload.image)))


@app.post("/v1/try-on", response_model=ImageResponse)
def try_on(payload: TryOnRequest, client=Depends(get_client)):
    image_url = generate_virtual_try_on_image(client, payload.modelImage, data_url_to_part(payload.garmentImage))
    return ImageResponse(imageUrl=image_url)


@app.post("/v1/pose", response_model=ImageResponse)
def pose(payload: PoseRequest, client=Depends(get_client)):
    image_url = generate_pose_variation(client, payload.tryOnImage, payload.poseInstruction)
    return ImageResponse(imageUrl=image_url)
