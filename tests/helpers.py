def word_count(text: str, encoding: str | None = None) -> int:
    """Deterministic stand-in tokenizer: one token per whitespace-separated word."""
    return len(text.split())
