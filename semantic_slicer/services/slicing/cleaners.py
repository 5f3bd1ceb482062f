"""Text cleaners applied around slicing: line endings, chunk headers, HTML tags."""

import re
import warnings

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning

LINE_ENDING_RE = re.compile(r"\r\n?|\n")
LINE_ENDING = "\n"


def normalize_line_endings(text: str) -> str:
    """Canonicalize CRLF and lone CR to LF."""
    if not text:
        return ""
    return LINE_ENDING_RE.sub(LINE_ENDING, text)


def normalize_chunk_header(header: str | None) -> str:
    """A non-blank header always ends with a line break so it never runs into chunk content."""
    if not header:
        return ""
    if header.strip() and not header.endswith(LINE_ENDING):
        return f"{header}{LINE_ENDING}"
    return header


def strip_html_tags(text: str) -> str:
    """Return the plain text of an HTML fragment. Entities are decoded; no separator is added between nodes."""
    if not text:
        return ""
    # Chunks that look like a URL or filename are still markup to strip, not paths to open
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
        return BeautifulSoup(text, "html.parser").get_text()
