"""Utility functions for the rulebook QA system."""

from rulebook_qa.utils.env import get_openai_api_key, get_pinecone_api_key, load_env
from rulebook_qa.utils.exceptions import (
    CompletionError,
    ConfigurationError,
    EmbeddingError,
    InvalidQuestionError,
    RetrievalError,
    RulebookQAException,
)
from rulebook_qa.utils.text import preprocess_text
from rulebook_qa.utils.tokens import count_tokens

__all__ = [
    # Environment
    "load_env",
    "get_openai_api_key",
    "get_pinecone_api_key",
    # Text
    "preprocess_text",
    "count_tokens",
    # Exceptions
    "RulebookQAException",
    "ConfigurationError",
    "InvalidQuestionError",
    "EmbeddingError",
    "RetrievalError",
    "CompletionError",
]
