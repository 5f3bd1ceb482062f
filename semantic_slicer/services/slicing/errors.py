"""Fatal slicing errors. Both abort the whole call; no partial results are returned."""


class SlicerError(Exception):
    """Base class for slicing failures."""


class HeaderTooLargeError(SlicerError):
    """The chunk header alone meets or exceeds the token budget."""

    def __init__(self, header_token_count: int, max_chunk_token_count: int):
        super().__init__(
            f"Chunk header token count ({header_token_count}) is greater than or equal to "
            f"max chunk token count ({max_chunk_token_count})"
        )
        self.header_token_count = header_token_count
        self.max_chunk_token_count = max_chunk_token_count


class UnsplittableChunkError(SlicerError):
    """A chunk exceeds the budget and no separator yields an acceptable split."""

    def __init__(self, token_count: int, max_chunk_token_count: int, content: str):
        preview = content[:80]
        super().__init__(
            f"Unable to subdivide chunk of {token_count} tokens (max {max_chunk_token_count}) "
            f"with the configured separators: {preview!r}"
        )
        self.token_count = token_count
        self.max_chunk_token_count = max_chunk_token_count
        self.preview = preview
