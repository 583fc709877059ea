"""Relevance ranker: rescoring, ordering and context block rendering."""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from rulebook_qa.config.retrieval import RankingConfig
from rulebook_qa.config.vocabulary import CONTEXT_SCENARIOS, ContextScenario
from rulebook_qa.core.dataclasses import Candidate, RankedContext, ScoredCandidate
from rulebook_qa.core.interfaces import KeywordMatcher
from rulebook_qa.pipelines.retrieval.matching import (
    PARTIAL,
    SynonymSubstringMatcher,
    tokenize_question,
)

logger = logging.getLogger(__name__)


class RelevanceRanker:
    """Combines vector similarity with sport and lexical signals.

    Each candidate's relevance score is its base similarity plus independent,
    non-negative boosts:
    - sport affinity when the candidate's sport equals the active sport
    - content length for passages longer than ``length_threshold``
    - keyword overlap, one increment per matched question token
    - contextual scenario bonuses for known disambiguation patterns
    """

    def __init__(
        self,
        config: RankingConfig = None,
        matcher: KeywordMatcher = None,
        scenarios: Sequence[ContextScenario] = CONTEXT_SCENARIOS
    ):
        """Initialize ranker.

        Args:
            config: RankingConfig (defaults to RankingConfig.from_env())
            matcher: KeywordMatcher (defaults to SynonymSubstringMatcher)
            scenarios: Contextual scenario table
        """
        self.config = config or RankingConfig.from_env()
        self.matcher = matcher or SynonymSubstringMatcher()
        self.scenarios = tuple(scenarios)

    def rank(
        self,
        candidates: Sequence[Candidate],
        sport: Optional[str],
        question: str
    ) -> RankedContext:
        """Score, sort and render candidates.

        Args:
            candidates: Raw candidates in retrieval order
            sport: Active sport label, if any
            question: User question

        Returns:
            RankedContext with the full ordering, the selected top-N and the
            rendered context block
        """
        if not candidates:
            logger.info("No matches to rank")
            return RankedContext(scored=[], selected=[], context_block="")

        tokens = tokenize_question(question)
        question_lower = question.lower()
        sport_lower = sport.lower() if sport else None

        scored = [
            self.score_candidate(candidate, sport_lower, tokens, question_lower)
            for candidate in candidates
        ]
        # sorted() is stable, so equal scores keep retrieval order
        ordered = sorted(scored, key=lambda s: s.relevance_score, reverse=True)
        ordered = [
            ScoredCandidate(
                candidate=s.candidate,
                relevance_score=s.relevance_score,
                keyword_matches=s.keyword_matches,
                boosts=s.boosts,
                rank=position,
            )
            for position, s in enumerate(ordered, start=1)
        ]

        for s in ordered:
            logger.debug(
                f"Ranked #{s.rank}: sport={s.sport} score={s.relevance_score:.3f} "
                f"base={s.base_score:.3f} keywords={s.keyword_matches}"
            )

        selected = [s for s in ordered if s.content.strip()][:self.config.top_n]
        context_block = self.render(selected)
        logger.info(f"Ranked {len(ordered)} matches, selected {len(selected)} for context")
        return RankedContext(scored=ordered, selected=selected, context_block=context_block)

    def score_candidate(
        self,
        candidate: Candidate,
        sport: Optional[str],
        tokens: List[str],
        question_lower: str
    ) -> ScoredCandidate:
        """Compute the composite relevance score for one candidate."""
        content = candidate.content
        content_lower = content.lower()
        candidate_sport = (candidate.sport or "").lower()
        boosts: Dict[str, float] = {}

        if sport and candidate_sport == sport:
            boosts["sport"] = self.config.sport_boost

        if len(content) > self.config.length_threshold:
            boosts["length"] = self.config.length_boost

        keyword_matches, keyword_boost = self._keyword_boost(tokens, content_lower)
        if keyword_matches:
            boosts["keywords"] = keyword_boost

        if self.config.contextual_boosts:
            scenario_boost = self._scenario_boost(question_lower, candidate_sport, content_lower)
            if scenario_boost:
                boosts["scenario"] = scenario_boost

        relevance_score = (candidate.score or 0.0) + sum(boosts.values())
        return ScoredCandidate(
            candidate=candidate,
            relevance_score=relevance_score,
            keyword_matches=keyword_matches,
            boosts=boosts,
        )

    def _keyword_boost(self, tokens: List[str], content_lower: str) -> Tuple[int, float]:
        matches = 0
        boost = 0.0
        for token in tokens:
            kind = self.matcher.match(token, content_lower)
            if kind is None:
                continue
            matches += 1
            boost += self.config.partial_keyword_boost if kind == PARTIAL else self.config.keyword_boost
        return matches, boost

    def _scenario_boost(self, question_lower: str, candidate_sport: str, content_lower: str) -> float:
        total = 0.0
        for scenario in self.scenarios:
            if candidate_sport != scenario.sport:
                continue
            if not any(trigger in question_lower for trigger in scenario.question_triggers):
                continue
            if any(phrase in content_lower for phrase in scenario.content_phrases):
                logger.debug(f"Scenario boost '{scenario.name}' applied (+{scenario.bonus})")
                total += scenario.bonus
        return total

    def render(self, selected: Sequence[ScoredCandidate]) -> str:
        """Render selected candidates into a labeled context block."""
        sections = []
        for s in selected:
            sport_label = (s.sport or "GENERAL").upper()
            header = f"[{sport_label}] (Score: {s.relevance_score:.3f})"
            if self.config.mark_primary and s.rank == 1:
                header = f"PRIMARY {header}"
            sections.append(f"{header}\n{s.content.strip()}")
        return self.config.separator.join(sections)
