"""Separator catalogs: ordered (pattern, behavior) pairs, most preferred boundary first."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Sequence


class SeparatorBehavior(str, Enum):
    """Where the split falls relative to a separator match."""

    PREFIX = "prefix"  # match starts the second half
    SUFFIX = "suffix"  # match ends the first half
    REMOVE = "remove"  # match is dropped


@dataclass(frozen=True)
class Separator:
    """Compiled pattern plus split behavior."""

    regex: re.Pattern[str]
    behavior: SeparatorBehavior = SeparatorBehavior.REMOVE

    @classmethod
    def of(cls, pattern: str, behavior: SeparatorBehavior = SeparatorBehavior.REMOVE, flags: int = 0) -> "Separator":
        return cls(regex=re.compile(pattern, flags), behavior=behavior)

    @property
    def pattern(self) -> str:
        return self.regex.pattern


TEXT_SEPARATORS: tuple[Separator, ...] = (
    Separator.of(r"\n\n+"),
    Separator.of(r"\. ", SeparatorBehavior.SUFFIX),
    Separator.of(r"! ", SeparatorBehavior.SUFFIX),
    Separator.of(r"\? ", SeparatorBehavior.SUFFIX),
    Separator.of(r"; ", SeparatorBehavior.SUFFIX),
    Separator.of(r": ", SeparatorBehavior.SUFFIX),
    Separator.of(r"\n"),
    Separator.of(r"\s+"),
)

MARKDOWN_SEPARATORS: tuple[Separator, ...] = (
    Separator.of(r"\n# ", SeparatorBehavior.PREFIX),
    Separator.of(r"\n## ", SeparatorBehavior.PREFIX),
    Separator.of(r"\n### ", SeparatorBehavior.PREFIX),
    Separator.of(r"\n#### ", SeparatorBehavior.PREFIX),
    Separator.of(r"\n##### ", SeparatorBehavior.PREFIX),
    Separator.of(r"\n###### ", SeparatorBehavior.PREFIX),
    Separator.of(r"```\n", SeparatorBehavior.SUFFIX),
    Separator.of(r"\n(?:\*\*\*|---|___)\n"),
) + TEXT_SEPARATORS

# Block-level tags first, split before the tag so markup stays balanced-ish in each half
_HTML_BLOCK_TAGS = ("body", "section", "article", "div", "h1", "h2", "h3", "h4", "h5", "h6", "table", "ul", "ol", "tr", "p", "li", "br")

HTML_SEPARATORS: tuple[Separator, ...] = tuple(
    Separator.of(rf"<{tag}\b", SeparatorBehavior.PREFIX, re.IGNORECASE) for tag in _HTML_BLOCK_TAGS
) + TEXT_SEPARATORS

SEPARATOR_REGISTRY: dict[str, Sequence[Separator]] = {
    "text": TEXT_SEPARATORS,
    "markdown": MARKDOWN_SEPARATORS,
    "html": HTML_SEPARATORS,
}


def get_separators(name: str) -> Sequence[Separator]:
    """Return the separator catalog registered under name. Raises ValueError if unknown."""
    catalog = SEPARATOR_REGISTRY.get(name)
    if catalog is None:
        raise ValueError(f"Unknown separator catalog: {name!r}")
    return catalog
