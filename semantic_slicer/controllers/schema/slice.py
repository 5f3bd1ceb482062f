"""Request/response schemas for POST /slice and GET /slice/profiles."""

from typing import Any

from pydantic import BaseModel, Field


class SliceRequest(BaseModel):
    """POST /slice request body. Profile from static.json; budget, threshold, stripping and catalog can be overridden."""

    content: str = Field(..., description="Document text, optionally HTML-bearing")
    metadata: dict[str, Any] | None = Field(default=None, description="Copied onto every chunk")
    chunk_header: str = Field(default="", description="Prepended to every chunk")
    profile: str | None = Field(default=None, min_length=1, description="Slicer profile; settings default when omitted")
    max_chunk_token_count: int | None = Field(default=None, ge=1, le=100000, description="Optional override for the token budget")
    min_chunk_percentage: float | None = Field(default=None, ge=0, le=100, description="Optional override for the split threshold")
    strip_html: bool | None = Field(default=None, description="Optional override for HTML stripping")
    separators: str | None = Field(default=None, description="Optional override for the separator catalog")


class SliceChunk(BaseModel):
    """One emitted chunk."""

    index: int = Field(..., ge=0)
    content: str
    token_count: int = Field(..., ge=0)
    metadata: dict[str, Any] | None = None


class SliceResponse(BaseModel):
    """POST /slice response body."""

    profile: str = Field(..., description="Profile the request was resolved against")
    total_chunks: int = Field(..., ge=0)
    chunks: list[SliceChunk] = Field(default_factory=list)


class ProfilesResponse(BaseModel):
    """GET /slice/profiles response body."""

    active: str
    profiles: list[str] = Field(default_factory=list)
