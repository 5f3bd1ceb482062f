"""Chunk splitting at a separator match."""

from semantic_slicer.services.slicing.matcher import SeparatorMatch
from semantic_slicer.services.slicing.separators import SeparatorBehavior


def split_offsets(match: SeparatorMatch, behavior: SeparatorBehavior) -> tuple[int, int]:
    """
    Return (end of first half, start of second half) for a match.
    prefix keeps the match with the second half, suffix with the first, remove drops it.
    """
    if behavior == SeparatorBehavior.PREFIX:
        return match.start, match.start
    if behavior == SeparatorBehavior.SUFFIX:
        return match.end, match.end
    if behavior == SeparatorBehavior.REMOVE:
        return match.start, match.end
    raise ValueError(f"Unknown separator behavior: {behavior!r}")


def split_content(content: str, match: SeparatorMatch, behavior: SeparatorBehavior) -> tuple[str, str]:
    """Split content at match and trim both halves."""
    first_end, second_start = split_offsets(match, behavior)
    return content[:first_end].strip(), content[second_start:].strip()
