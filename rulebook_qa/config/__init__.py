"""Centralized configuration for the rulebook QA system."""

from rulebook_qa.config.prompts import (
    EMPTY_COMPLETION_MESSAGE,
    GROUNDED_ANSWER_PROMPT,
    get_grounded_prompt,
    not_found_message,
)
from rulebook_qa.config.retrieval import (
    AnswerConfig,
    EmbeddingConfig,
    PineconeConfig,
    RankingConfig,
    RetrievalConfig,
)
from rulebook_qa.config.vocabulary import (
    CONTEXT_SCENARIOS,
    KNOWN_SPORTS,
    SPORT_KEYWORDS,
    STOP_WORDS,
    TERM_MAPPINGS,
    ContextScenario,
)

__all__ = [
    # Prompts
    "GROUNDED_ANSWER_PROMPT",
    "EMPTY_COMPLETION_MESSAGE",
    "get_grounded_prompt",
    "not_found_message",
    # Retrieval config
    "RetrievalConfig",
    "EmbeddingConfig",
    "PineconeConfig",
    "RankingConfig",
    "AnswerConfig",
    # Vocabulary
    "SPORT_KEYWORDS",
    "KNOWN_SPORTS",
    "STOP_WORDS",
    "TERM_MAPPINGS",
    "ContextScenario",
    "CONTEXT_SCENARIOS",
]
