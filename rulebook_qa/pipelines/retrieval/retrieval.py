"""High-level pipeline functions for rulebook question answering."""

import logging
from typing import Any, Dict, Optional

from rulebook_qa.config.retrieval import RetrievalConfig
from rulebook_qa.core.dataclasses import AnswerResult
from rulebook_qa.core.interfaces import EmbeddingProvider, KeywordMatcher, LLMProvider, VectorStore
from rulebook_qa.pipelines.retrieval.classifier import resolve_sport, sport_keyword_scores
from rulebook_qa.pipelines.retrieval.composer import AnswerComposer
from rulebook_qa.pipelines.retrieval.gateway import RetrievalGateway
from rulebook_qa.pipelines.retrieval.matching import tokenize_question
from rulebook_qa.pipelines.retrieval.ranker import RelevanceRanker
from rulebook_qa.utils.exceptions import EmbeddingError, InvalidQuestionError
from rulebook_qa.utils.text import preprocess_text

logger = logging.getLogger(__name__)


class RulebookQA:
    """Question-answering pipeline over a sports rulebook index.

    question -> sport classification -> embedding -> retrieval (with
    fallback) -> relevance ranking -> answer composition.
    """

    def __init__(
        self,
        embedding_provider: EmbeddingProvider,
        vector_store: VectorStore,
        llm: LLMProvider,
        cfg: RetrievalConfig = None,
        matcher: KeywordMatcher = None,
    ):
        """Initialize pipeline.

        Args:
            embedding_provider: EmbeddingProvider for question vectors
            vector_store: VectorStore holding rule passages
            llm: LLMProvider for grounded answers
            cfg: RetrievalConfig (defaults to RetrievalConfig.from_env())
            matcher: Optional KeywordMatcher for the ranker
        """
        self.cfg = cfg or RetrievalConfig.from_env()
        self.embedding_provider = embedding_provider
        self.gateway = RetrievalGateway(vector_store, self.cfg.pinecone_config)
        self.ranker = RelevanceRanker(self.cfg.ranking_config, matcher=matcher)
        self.composer = AnswerComposer(llm, self.cfg.answer_config)

    @classmethod
    def from_config(cls, cfg: RetrievalConfig = None) -> "RulebookQA":
        """Build a pipeline with the OpenAI and Pinecone providers."""
        from rulebook_qa.providers.embedding.openai_embedding import OpenAIEmbeddingProvider
        from rulebook_qa.providers.llm.openai_llm import OpenAILLMProvider
        from rulebook_qa.storage.vector.pinecone import PineconeVectorStore

        cfg = cfg or RetrievalConfig.from_env()
        return cls(
            embedding_provider=OpenAIEmbeddingProvider(cfg.embedding_config),
            vector_store=PineconeVectorStore(cfg.pinecone_config),
            llm=OpenAILLMProvider(cfg.answer_config),
            cfg=cfg,
        )

    def answer_question(self, question: str, sport: Optional[str] = None) -> AnswerResult:
        """Answer a rulebook question.

        Args:
            question: User question
            sport: Optional sport hint; detected from the question when omitted

        Returns:
            AnswerResult with answer text, sport and result count

        Raises:
            InvalidQuestionError: If the question is empty
            EmbeddingError, RetrievalError, CompletionError: On upstream failures
        """
        question = _validate_question(question)

        detected_sport = resolve_sport(question, sport)
        logger.info(f"Using sport: {detected_sport or 'none'}")

        try:
            vector = self.embedding_provider.embed_query(question)
        except EmbeddingError:
            raise
        except Exception as e:
            raise EmbeddingError(f"Embedding request failed: {e}") from e
        logger.info(f"Got embedding of length {len(vector)}")

        retrieval = self.gateway.retrieve(vector, detected_sport)
        candidates = retrieval.candidates

        ranked = self.ranker.rank(candidates, detected_sport, question)

        trace: Dict[str, Any] = {
            "sport_filter": retrieval.sport_filter,
            "used_fallback": retrieval.used_fallback,
            "filtered_count": retrieval.filtered_count,
            "fallback_count": retrieval.fallback_count,
            "top_score": candidates[0].score if candidates else 0.0,
            "ranked": [
                {
                    "chunk_id": s.candidate.chunk_id,
                    "sport": s.sport,
                    "relevance_score": round(s.relevance_score, 6),
                    "base_score": s.base_score,
                    "keyword_matches": s.keyword_matches,
                }
                for s in ranked.scored
            ],
        }
        return self.composer.compose(
            question,
            ranked,
            detected_sport,
            search_results_count=len(candidates),
            trace=trace,
        )


def _validate_question(question: Any) -> str:
    if not isinstance(question, str) or not question.strip():
        raise InvalidQuestionError("Question is required")
    return question.strip()


def answer_question(
    question: str,
    sport: Optional[str] = None,
    cfg: RetrievalConfig = None
) -> AnswerResult:
    """Answer a question with providers built from configuration.

    Args:
        question: User question
        sport: Optional sport hint
        cfg: RetrievalConfig (defaults to RetrievalConfig.from_env())

    Returns:
        AnswerResult
    """
    return RulebookQA.from_config(cfg).answer_question(question, sport)


def describe_query(
    question: str,
    sport: Optional[str] = None,
    embedding_provider: Optional[EmbeddingProvider] = None
) -> Dict[str, Any]:
    """Diagnostics for a question without calling the completion service.

    Args:
        question: User question
        sport: Optional sport hint
        embedding_provider: When given, the question is embedded and the
            vector length is reported

    Returns:
        Dict with the detected sport, per-sport keyword scores, the text sent
        to the embedding service, the significant question tokens and the
        embedding length (None without a provider)
    """
    question = _validate_question(question)
    embedding_length = None
    if embedding_provider is not None:
        try:
            embedding_length = len(embedding_provider.embed_query(question))
        except EmbeddingError:
            raise
        except Exception as e:
            raise EmbeddingError(f"Embedding request failed: {e}") from e
    return {
        "question": question,
        "detected_sport": resolve_sport(question, sport),
        "keyword_scores": sport_keyword_scores(question),
        "processed_text": preprocess_text(question),
        "tokens": tokenize_question(question),
        "embedding_length": embedding_length,
    }
