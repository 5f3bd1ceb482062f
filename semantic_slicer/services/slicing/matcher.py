"""Pattern matching primitive consumed by the boundary selector."""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class SeparatorMatch:
    """One separator occurrence: character offset and the matched text."""

    start: int
    value: str

    @property
    def end(self) -> int:
        return self.start + len(self.value)


class BasePatternMatcher(ABC):
    """Finds non-overlapping matches of a pattern, left to right."""

    @abstractmethod
    def find_all(self, pattern: re.Pattern[str], text: str) -> list[SeparatorMatch]:
        ...


class RegexPatternMatcher(BasePatternMatcher):
    """Default matcher over the re module. Empty matches are skipped; they cannot delimit anything."""

    def find_all(self, pattern: re.Pattern[str], text: str) -> list[SeparatorMatch]:
        return [SeparatorMatch(m.start(), m.group()) for m in pattern.finditer(text) if m.group()]
