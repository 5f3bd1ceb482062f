"""Token counting for slicing. Backed by tiktoken; accepts encoding or model names."""

from functools import lru_cache

import tiktoken

from semantic_slicer.config.logging import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=16)
def get_encoding(name: str) -> tiktoken.Encoding:
    """
    Return the tiktoken encoding for an encoding name (cl100k_base) or a model name (gpt-4o).
    Raises ValueError if neither resolves.
    """
    if name in tiktoken.list_encoding_names():
        return tiktoken.get_encoding(name)
    try:
        enc = tiktoken.encoding_for_model(name)
    except KeyError as e:
        raise ValueError(f"Unknown tiktoken encoding or model: {name!r}") from e
    logger.debug("Resolved model to encoding", extra={"model": name, "encoding": enc.name})
    return enc


def count_tokens(text: str, encoding: str = "cl100k_base") -> int:
    """Return token count for text under the given encoding."""
    if not text:
        return 0
    return len(get_encoding(encoding).encode(text, disallowed_special=()))
