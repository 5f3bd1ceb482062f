"""Boundary selection: the separator match closest to the middle of a chunk."""

from typing import Sequence

from semantic_slicer.services.slicing.matcher import SeparatorMatch


def get_centermost_match(content: str, matches: Sequence[SeparatorMatch]) -> SeparatorMatch | None:
    """
    Return the match whose start offset is nearest len(content) // 2, or None when there are no matches.
    Ties go to the earlier match. When HTML stripping is on, offsets still refer to the markup-laden
    text; the stripped center is only approximated.
    """
    center = len(content) // 2
    best: SeparatorMatch | None = None
    best_distance = -1
    for match in matches:
        distance = abs(center - match.start)
        if best is None or distance < best_distance:
            best = match
            best_distance = distance
    return best
