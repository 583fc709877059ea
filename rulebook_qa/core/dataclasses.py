"""Common dataclasses for the rulebook QA core."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class RuleMetadata:
    """Metadata stored alongside each rule passage in the vector index."""
    content: str = ""
    sport: Optional[str] = None
    rule_number: Optional[str] = None
    title: Optional[str] = None
    path: Optional[str] = None


@dataclass(frozen=True)
class Candidate:
    """Candidate rule passage from a vector store query."""
    chunk_id: str
    score: float
    metadata: RuleMetadata = field(default_factory=RuleMetadata)

    @property
    def content(self) -> str:
        return self.metadata.content or ""

    @property
    def sport(self) -> Optional[str]:
        return self.metadata.sport or None


@dataclass(frozen=True)
class ScoredCandidate:
    """Candidate with its composite relevance score.

    ``boosts`` holds the additive terms applied on top of the base similarity
    score, keyed by term name ("sport", "length", "keywords", "scenario").
    """
    candidate: Candidate
    relevance_score: float
    keyword_matches: int
    boosts: Dict[str, float] = field(default_factory=dict)
    rank: int = 0

    @property
    def base_score(self) -> float:
        return self.candidate.score

    @property
    def content(self) -> str:
        return self.candidate.content

    @property
    def sport(self) -> Optional[str]:
        return self.candidate.sport


@dataclass
class RankedContext:
    """Ranked candidates and the rendered context block."""
    scored: List[ScoredCandidate]
    selected: List[ScoredCandidate]
    context_block: str


@dataclass
class RetrievalResult:
    """Raw candidates from the retrieval gateway with fallback bookkeeping."""
    candidates: List[Candidate]
    sport_filter: Optional[str] = None
    used_fallback: bool = False
    filtered_count: int = 0
    fallback_count: Optional[int] = None


@dataclass(frozen=True)
class AnswerResult:
    """Final answer returned to the caller."""
    answer: str
    detected_sport: Optional[str]
    search_results_count: int
    grounded: bool = False
    trace: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Caller-facing JSON shape."""
        return {
            "answer": self.answer,
            "sport": self.detected_sport,
            "searchResultsCount": self.search_results_count,
        }
