"""External service providers."""

from rulebook_qa.providers.embedding.openai_embedding import OpenAIEmbeddingProvider
from rulebook_qa.providers.llm.openai_llm import OpenAILLMProvider

__all__ = [
    "OpenAIEmbeddingProvider",
    "OpenAILLMProvider",
]
