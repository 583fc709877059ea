"""Retrieval gateway with sport-filtered query and unfiltered fallback."""

import logging
from typing import List, Optional

from rulebook_qa.config.retrieval import PineconeConfig
from rulebook_qa.core.dataclasses import Candidate, RetrievalResult
from rulebook_qa.core.interfaces import VectorStore
from rulebook_qa.utils.exceptions import RetrievalError

logger = logging.getLogger(__name__)


class RetrievalGateway:
    """Issues similarity queries against the vector store.

    A sport-filtered query that returns fewer than
    ``config.min_filtered_results`` candidates is followed by one unfiltered
    query; the larger of the two result sets is kept.
    """

    def __init__(self, vector_store: VectorStore, config: PineconeConfig = None):
        """Initialize gateway.

        Args:
            vector_store: VectorStore to query
            config: PineconeConfig (defaults to PineconeConfig.from_env())
        """
        self.vector_store = vector_store
        self.config = config or PineconeConfig.from_env()

    def retrieve(self, vector: List[float], sport_filter: Optional[str] = None) -> RetrievalResult:
        """Retrieve raw candidates for an embedding vector.

        Args:
            vector: Query embedding vector
            sport_filter: Optional sport label to filter on

        Returns:
            RetrievalResult with unmodified candidates

        Raises:
            RetrievalError: If the vector store query fails
        """
        top_k = self.config.top_k
        filters = None
        if sport_filter:
            filters = {"sport": self.config.format_sport(sport_filter)}
            logger.info(f"Applying sport filter: {filters['sport']}")

        candidates = self._query(vector, top_k, filters)
        logger.info(f"Vector store returned {len(candidates)} matches")

        result = RetrievalResult(
            candidates=candidates,
            sport_filter=sport_filter,
            filtered_count=len(candidates) if filters else 0,
        )

        if filters and len(candidates) < self.config.min_filtered_results:
            logger.info("Few sport-specific results, trying fallback without filter")
            fallback = self._query(vector, top_k, None)
            result.fallback_count = len(fallback)
            logger.info(f"Fallback returned {len(fallback)} matches")
            if len(fallback) > len(candidates):
                result.candidates = fallback
                result.used_fallback = True

        return result

    def _query(self, vector: List[float], top_k: int, filters) -> List[Candidate]:
        try:
            return list(self.vector_store.query(
                vector=vector,
                top_k=top_k,
                filters=filters,
                namespace=self.config.namespace,
            ))
        except RetrievalError:
            raise
        except Exception as e:
            raise RetrievalError(f"Vector store query failed: {e}") from e
