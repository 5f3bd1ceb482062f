"""
Slicer: recursively split a document at the most natural separator nearest each chunk's center
until every chunk, header included, fits the token budget.
"""

from functools import partial
from typing import Any, Callable, Iterable, Mapping, Sequence

from semantic_slicer.config.logging import get_logger
from semantic_slicer.config.slicing.models import SlicerConfig
from semantic_slicer.services.slicing.boundary import get_centermost_match
from semantic_slicer.services.slicing.cleaners import (
    normalize_chunk_header,
    normalize_line_endings,
    strip_html_tags,
)
from semantic_slicer.services.slicing.errors import HeaderTooLargeError, UnsplittableChunkError
from semantic_slicer.services.slicing.matcher import BasePatternMatcher, RegexPatternMatcher
from semantic_slicer.services.slicing.models import DocumentChunk
from semantic_slicer.services.slicing.separators import Separator, get_separators
from semantic_slicer.services.slicing.splitter import split_content
from semantic_slicer.services.slicing.tokenizer import count_tokens, get_encoding

logger = get_logger(__name__)

TokenCounter = Callable[[str], int]


class Slicer:
    """
    Splits documents into ordered, token-bounded chunks.

    separators defaults to the catalog named by config.separators; token_counter defaults to
    tiktoken under config.encoding. Both can be swapped without touching the recursion.
    """

    def __init__(
        self,
        config: SlicerConfig | None = None,
        separators: Sequence[Separator] | None = None,
        token_counter: TokenCounter | None = None,
        matcher: BasePatternMatcher | None = None,
    ):
        self.config = config or SlicerConfig()
        if separators is None:
            separators = get_separators(self.config.separators)
        self.separators: tuple[Separator, ...] = tuple(separators)
        if token_counter is None:
            # Unknown encodings fail here, before any document is sliced
            get_encoding(self.config.encoding)
            token_counter = partial(count_tokens, encoding=self.config.encoding)
        self._count_tokens = token_counter
        self._matcher = matcher or RegexPatternMatcher()

    def get_document_chunks(
        self,
        content: str,
        metadata: Mapping[str, Any] | None = None,
        chunk_header: str = "",
    ) -> list[DocumentChunk]:
        """
        Slice content into chunks of at most max_chunk_token_count tokens each, header included.
        Every chunk starts with chunk_header and shares metadata by reference.
        Raises HeaderTooLargeError before any splitting, or UnsplittableChunkError when a chunk
        cannot be brought under budget.
        """
        header = normalize_chunk_header(chunk_header)
        max_tokens = self.config.max_chunk_token_count
        header_token_count = self._count_tokens(header)
        if header_token_count >= max_tokens:
            raise HeaderTooLargeError(header_token_count, max_tokens)

        text = normalize_line_endings(content).strip()
        seed = DocumentChunk(
            content=text,
            metadata=metadata,
            token_count=self._effective_token_count(header, text),
        )
        chunks = self._split_chunk(seed, header)

        for i, chunk in enumerate(chunks):
            chunk.index = i
            # Only final chunks are stripped so split offsets stay valid during recursion
            if self.config.strip_html:
                chunk.content = strip_html_tags(chunk.content)

        logger.info(
            "Document sliced",
            extra={
                "input_chars": len(text),
                "input_tokens": seed.token_count,
                "chunks": len(chunks),
                "max_chunk_token_count": max_tokens,
            },
        )
        return chunks

    def _effective_token_count(self, header: str, content: str) -> int:
        if self.config.strip_html:
            content = strip_html_tags(content)
        return self._count_tokens(f"{header}{content}")

    def _split_chunk(self, chunk: DocumentChunk, header: str) -> list[DocumentChunk]:
        """Return chunk, or its recursively split halves, in document order with header prepended."""
        if chunk.token_count <= self.config.max_chunk_token_count:
            return [
                DocumentChunk(
                    content=f"{header}{chunk.content}",
                    metadata=chunk.metadata,
                    token_count=chunk.token_count,
                )
            ]

        for separator in self.separators:
            halves = self._split_at_separator(chunk, header, separator)
            if halves is None:
                continue
            first, second = halves
            return self._split_chunk(first, header) + self._split_chunk(second, header)

        raise UnsplittableChunkError(chunk.token_count, self.config.max_chunk_token_count, chunk.content)

    def _split_at_separator(
        self, chunk: DocumentChunk, header: str, separator: Separator
    ) -> tuple[DocumentChunk, DocumentChunk] | None:
        """Split chunk at the centermost match of separator, or None if that split is rejected."""
        matches = self._matcher.find_all(separator.regex, chunk.content)
        match = get_centermost_match(chunk.content, matches)
        if match is None:
            return None
        # Splitting at offset 0 leaves an empty first half and would never terminate
        if match.start == 0:
            return None

        first_content, second_content = split_content(chunk.content, match, separator.behavior)
        first = DocumentChunk(
            content=first_content,
            metadata=chunk.metadata,
            token_count=self._effective_token_count(header, first_content),
        )
        second = DocumentChunk(
            content=second_content,
            metadata=chunk.metadata,
            token_count=self._effective_token_count(header, second_content),
        )

        if self._is_below_threshold(first) or self._is_below_threshold(second):
            return None
        if len(first.content) >= len(chunk.content) or len(second.content) >= len(chunk.content):
            return None

        logger.debug(
            "Chunk split",
            extra={
                "separator": separator.pattern,
                "behavior": separator.behavior.value,
                "offset": match.start,
                "token_count": chunk.token_count,
                "first_token_count": first.token_count,
                "second_token_count": second.token_count,
            },
        )
        return first, second

    def _is_below_threshold(self, chunk: DocumentChunk) -> bool:
        """True if chunk's share of the budget is under min_chunk_percentage. Equal is accepted."""
        return chunk.token_count * 100 < self.config.min_chunk_percentage * self.config.max_chunk_token_count


def reassemble_chunks(chunks: Iterable[DocumentChunk], chunk_header: str = "", joiner: str = "\n") -> str:
    r"""
    Rebuild document text from chunks: order by index, drop the header from each, join.
    Separators removed or trimmed at split points are not restored; pass the joiner the document
    was split on ("\n\n" for paragraphs, " " for sentences) to get text that slices the same way again.
    """
    header = normalize_chunk_header(chunk_header)
    parts: list[str] = []
    for chunk in sorted(chunks, key=lambda c: c.index if c.index is not None else -1):
        content = chunk.content
        if header and content.startswith(header):
            content = content[len(header):]
        parts.append(content)
    return joiner.join(parts)


def get_document_chunks(
    content: str,
    metadata: Mapping[str, Any] | None = None,
    chunk_header: str = "",
    config: SlicerConfig | None = None,
) -> list[DocumentChunk]:
    """Slice content with a default Slicer for config."""
    return Slicer(config).get_document_chunks(content, metadata=metadata, chunk_header=chunk_header)
