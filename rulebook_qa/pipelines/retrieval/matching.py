"""Question tokenization and keyword matching strategies."""

import re
from typing import FrozenSet, List, Mapping, Optional, Tuple

from rulebook_qa.config.vocabulary import (
    MIN_PARTIAL_MATCH_LENGTH,
    MIN_TOKEN_LENGTH,
    STOP_WORDS,
    TERM_MAPPINGS,
)
from rulebook_qa.core.interfaces import KeywordMatcher

EXACT = "exact"
SYNONYM = "synonym"
PARTIAL = "partial"

_PUNCTUATION_RE = re.compile(r"[^\w\s]")


def tokenize_question(question: str, stop_words: FrozenSet[str] = STOP_WORDS) -> List[str]:
    """Split a question into significant lower-cased tokens.

    Punctuation is stripped, then tokens shorter than three characters and
    stop-words are dropped. Order and duplicates are preserved.
    """
    cleaned = _PUNCTUATION_RE.sub("", question.lower())
    return [
        token
        for token in cleaned.split()
        if len(token) >= MIN_TOKEN_LENGTH and token not in stop_words
    ]


class SynonymSubstringMatcher(KeywordMatcher):
    """Matches tokens verbatim, through the synonym table, or by substring.

    The substring check is a lightweight stand-in for stemming: a content word
    matches when either word contains the other.
    """

    def __init__(self, term_mappings: Mapping[str, Tuple[str, ...]] = TERM_MAPPINGS):
        self.term_mappings = term_mappings

    def match(self, token: str, content_lower: str) -> Optional[str]:
        if token in content_lower:
            return EXACT
        if self._synonym_match(token, content_lower):
            return SYNONYM
        if self._partial_match(token, content_lower):
            return PARTIAL
        return None

    def _synonym_match(self, token: str, content_lower: str) -> bool:
        return any(term in content_lower for term in self.term_mappings.get(token, ()))

    @staticmethod
    def _partial_match(token: str, content_lower: str) -> bool:
        if len(token) < MIN_PARTIAL_MATCH_LENGTH:
            return False
        for word in content_lower.split():
            clean_word = _PUNCTUATION_RE.sub("", word)
            if len(clean_word) < MIN_PARTIAL_MATCH_LENGTH:
                continue
            if token in clean_word or clean_word in token:
                return True
        return False
