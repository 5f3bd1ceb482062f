"""POST /slice: split one document into token-bounded chunks. GET /slice/profiles: list slicer profiles."""

import asyncio

from fastapi import APIRouter, HTTPException

from semantic_slicer.config.logging import get_logger
from semantic_slicer.config.settings import get_settings
from semantic_slicer.config.slicing.static import (
    get_active_profile_name,
    load_slicer_profiles,
    resolve_slicer_config,
)
from semantic_slicer.controllers.schema.slice import (
    ProfilesResponse,
    SliceChunk,
    SliceRequest,
    SliceResponse,
)
from semantic_slicer.services.slicing.errors import SlicerError
from semantic_slicer.services.slicing.slicer import Slicer

logger = get_logger(__name__)

router = APIRouter(prefix="/slice", tags=["slicing"])

_OVERRIDE_FIELDS = ("max_chunk_token_count", "min_chunk_percentage", "strip_html", "separators")


@router.post("", response_model=SliceResponse)
async def slice_document(body: SliceRequest) -> SliceResponse:
    """
    Slice the submitted content. The profile comes from the request or settings; the listed
    fields can be overridden per request. Slicing runs off the event loop.
    """
    profile_name = body.profile or get_settings().slicer_profile
    if profile_name == "active":
        profile_name = get_active_profile_name()
    try:
        base = resolve_slicer_config(profile_name)
        overrides = {f: getattr(body, f) for f in _OVERRIDE_FIELDS if getattr(body, f) is not None}
        config = resolve_slicer_config(profile_name, {**base.model_dump(), **overrides}) if overrides else base
        slicer = Slicer(config)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    try:
        chunks = await asyncio.to_thread(
            slicer.get_document_chunks,
            body.content,
            body.metadata,
            body.chunk_header,
        )
    except SlicerError as e:
        logger.warning("Slicing failed", extra={"profile": profile_name, "error_type": type(e).__name__})
        raise HTTPException(status_code=422, detail=str(e)) from e

    return SliceResponse(
        profile=profile_name,
        total_chunks=len(chunks),
        chunks=[SliceChunk.model_validate(c.to_dict()) for c in chunks],
    )


@router.get("/profiles", response_model=ProfilesResponse)
async def list_profiles() -> ProfilesResponse:
    """Return every profile in static.json and the one marked active."""
    return ProfilesResponse(
        active=get_active_profile_name(),
        profiles=sorted(load_slicer_profiles()),
    )
