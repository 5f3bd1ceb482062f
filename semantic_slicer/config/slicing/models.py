"""Slicer configuration models. Read-only; no business logic."""

from pydantic import BaseModel, Field


class SlicerConfig(BaseModel):
    """Token budget, split threshold, HTML handling and separator catalog for one slicer."""

    max_chunk_token_count: int = Field(default=1000, ge=1, description="Maximum tokens per chunk, header included")
    min_chunk_percentage: float = Field(
        default=10,
        ge=0,
        le=100,
        description="Reject a split when either half falls below this percentage of the budget",
    )
    strip_html: bool = Field(default=False, description="Strip HTML tags from emitted chunks")
    encoding: str = Field(default="cl100k_base", description="tiktoken encoding or model name")
    separators: str = Field(default="text", description="text|markdown|html")
