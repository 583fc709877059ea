"""Sport classification from free-text questions."""

import logging
from typing import Dict, Mapping, Optional, Tuple

from rulebook_qa.config.vocabulary import SPORT_KEYWORDS

logger = logging.getLogger(__name__)


def sport_keyword_scores(
    question: str,
    sport_keywords: Mapping[str, Tuple[str, ...]] = SPORT_KEYWORDS
) -> Dict[str, int]:
    """Count trigger keywords per sport found in the question.

    Args:
        question: Question text
        sport_keywords: Sport label -> trigger keywords

    Returns:
        Dict of sport label to matched keyword count, in table order
    """
    question_lower = question.lower() if isinstance(question, str) else ""
    return {
        sport: sum(1 for keyword in keywords if keyword.lower() in question_lower)
        for sport, keywords in sport_keywords.items()
    }


def classify_sport(
    question: str,
    sport_keywords: Mapping[str, Tuple[str, ...]] = SPORT_KEYWORDS
) -> Optional[str]:
    """Detect the most likely sport for a question.

    An explicit sport name in the question always wins, checked in table
    order. Otherwise the sport with the most trigger keywords wins, ties
    going to the sport declared first.

    Args:
        question: Question text
        sport_keywords: Sport label -> trigger keywords

    Returns:
        Sport label, or None when nothing matched
    """
    if not isinstance(question, str) or not question.strip():
        return None

    question_lower = question.lower()

    for sport in sport_keywords:
        if sport in question_lower:
            logger.debug(f"Detected sport from explicit mention: {sport}")
            return sport

    best_sport = None
    best_score = 0
    for sport, score in sport_keyword_scores(question, sport_keywords).items():
        if score > best_score:
            best_sport, best_score = sport, score

    if best_sport:
        logger.debug(f"Detected sport from keywords: {best_sport} ({best_score} matches)")
    else:
        logger.debug("No specific sport detected")
    return best_sport


def normalize_sport(sport: Optional[str]) -> Optional[str]:
    """Normalize a caller-supplied sport label (blank -> None)."""
    if not isinstance(sport, str):
        return None
    normalized = sport.strip().lower()
    return normalized or None


def resolve_sport(question: str, sport: Optional[str] = None) -> Optional[str]:
    """Use the caller's sport when given, otherwise classify the question."""
    return normalize_sport(sport) or classify_sport(question)
