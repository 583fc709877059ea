"""Core interfaces, protocols, and dataclasses."""

from rulebook_qa.core.dataclasses import (
    AnswerResult,
    Candidate,
    RankedContext,
    RetrievalResult,
    RuleMetadata,
    ScoredCandidate,
)
from rulebook_qa.core.interfaces import (
    EmbeddingProvider,
    KeywordMatcher,
    LLMProvider,
    VectorStore,
)

__all__ = [
    "RuleMetadata",
    "Candidate",
    "ScoredCandidate",
    "RankedContext",
    "RetrievalResult",
    "AnswerResult",
    "EmbeddingProvider",
    "VectorStore",
    "LLMProvider",
    "KeywordMatcher",
]
