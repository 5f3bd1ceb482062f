"""Chunk record produced by the slicer."""

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass
class DocumentChunk:
    """
    One piece of a sliced document. token_count always reflects header + content as counted
    (after HTML stripping when enabled). index is assigned once, after all splitting is done.
    metadata is shared by reference between a chunk and everything split from it.
    """

    content: str
    metadata: Mapping[str, Any] | None = None
    token_count: int = 0
    index: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "content": self.content,
            "token_count": self.token_count,
            "metadata": dict(self.metadata) if self.metadata is not None else None,
        }
