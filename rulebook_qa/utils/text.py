"""Text normalization helpers."""

import re

_WHITESPACE_RE = re.compile(r"\s+")


def preprocess_text(text: str) -> str:
    """Trim and collapse whitespace before embedding."""
    return _WHITESPACE_RE.sub(" ", text.strip())
