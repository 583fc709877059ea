"""Protocol-based interfaces for all providers and storage."""

from typing import Any, Dict, List, Optional, Protocol

from rulebook_qa.core.dataclasses import Candidate


class EmbeddingProvider(Protocol):
    """Protocol for embedding providers."""

    def embed_query(self, query: str) -> List[float]:
        """Embed a single query string.

        Args:
            query: Query string to embed

        Returns:
            Embedding vector (list of floats)
        """
        ...


class VectorStore(Protocol):
    """Protocol for vector stores."""

    def query(
        self,
        vector: List[float],
        top_k: int,
        filters: Optional[Dict[str, Any]] = None,
        namespace: Optional[str] = None
    ) -> List[Candidate]:
        """Query the vector store.

        Args:
            vector: Query embedding vector
            top_k: Number of results to return
            filters: Optional metadata equality filters (e.g., {"sport": "Golf"})
            namespace: Optional namespace (defaults to config namespace)

        Returns:
            List of candidates ordered by descending similarity
        """
        ...


class LLMProvider(Protocol):
    """Protocol for LLM providers."""

    def generate(
        self,
        prompt: str,
        model: Optional[str] = None,
        temperature: float = 0.0,
        max_tokens: Optional[int] = None
    ) -> str:
        """Generate text from prompt.

        Args:
            prompt: Input prompt
            model: Model name (optional, uses default if not provided)
            temperature: Sampling temperature
            max_tokens: Maximum tokens to generate

        Returns:
            Generated text
        """
        ...


class KeywordMatcher(Protocol):
    """Protocol for matching a question token against passage content."""

    def match(self, token: str, content_lower: str) -> Optional[str]:
        """Match a token against lower-cased passage content.

        Args:
            token: Lower-cased question token
            content_lower: Lower-cased passage content

        Returns:
            Match kind ("exact", "synonym" or "partial") or None
        """
        ...
