"""Pinecone vector store implementation."""

import logging
from typing import Any, Dict, List, Optional

from pinecone import Pinecone
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from rulebook_qa.config.retrieval import PineconeConfig
from rulebook_qa.core.dataclasses import Candidate, RuleMetadata
from rulebook_qa.core.interfaces import VectorStore
from rulebook_qa.utils.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class PineconeRuleMetadata(BaseModel):
    """Rule metadata as stored in Pinecone.

    Older indexes store the passage body under ``text`` and the rule number
    under ``number``; both spellings are accepted.
    """
    model_config = ConfigDict(extra="ignore")

    content: str = Field(default="", validation_alias=AliasChoices("content", "text"))
    sport: Optional[str] = None
    rule_number: Optional[str] = Field(default=None, validation_alias=AliasChoices("number", "rule_number"))
    title: Optional[str] = None
    path: Optional[str] = None

    @field_validator("content", mode="before")
    @classmethod
    def coerce_content(cls, v):
        """Treat missing content as empty."""
        return "" if v is None else str(v)

    @field_validator("rule_number", "sport", "title", "path", mode="before")
    @classmethod
    def coerce_optional(cls, v):
        """Stringify scalar values; blank strings become None."""
        if v is None:
            return None
        v = str(v).strip()
        return v or None

    def to_rule_metadata(self) -> RuleMetadata:
        return RuleMetadata(
            content=self.content,
            sport=self.sport,
            rule_number=self.rule_number,
            title=self.title,
            path=self.path,
        )


def parse_match_metadata(metadata: Optional[Dict[str, Any]]) -> RuleMetadata:
    """Validate raw match metadata into a RuleMetadata record."""
    return PineconeRuleMetadata.model_validate(metadata or {}).to_rule_metadata()


def build_filter(filters: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Translate equality filters into Pinecone filter syntax.

    Args:
        filters: Field -> value (lists become ``$in``)

    Returns:
        Pinecone filter dict, or None when no filters are given
    """
    if not filters:
        return None
    pinecone_filter = {}
    for key, value in filters.items():
        if isinstance(value, list):
            pinecone_filter[key] = {"$in": value}
        else:
            pinecone_filter[key] = {"$eq": value}
    return pinecone_filter


class PineconeVectorStore(VectorStore):
    """Pinecone vector store implementation."""

    def __init__(self, config: PineconeConfig = None, index: Any = None):
        """Initialize Pinecone store.

        Args:
            config: PineconeConfig (defaults to PineconeConfig.from_env())
            index: Optional pre-built index handle (skips client creation)

        Raises:
            ConfigurationError: If the API key is missing
        """
        self.config = config or PineconeConfig.from_env()

        if index is not None:
            self.index = index
            return

        if not self.config.api_key:
            raise ConfigurationError("PINECONE_API_KEY not found in environment")

        self.pc = Pinecone(api_key=self.config.api_key)
        self.index = self.pc.Index(self.config.index_name)

    def query(
        self,
        vector: List[float],
        top_k: int,
        filters: Optional[Dict[str, Any]] = None,
        namespace: Optional[str] = None
    ) -> List[Candidate]:
        """Query Pinecone index.

        Args:
            vector: Query embedding vector
            top_k: Number of results to return
            filters: Optional metadata filters (e.g., {"sport": "Golf"})
            namespace: Optional namespace (defaults to config namespace)

        Returns:
            List of candidates ordered by descending similarity
        """
        query_kwargs = {
            "vector": vector,
            "top_k": top_k,
            "include_metadata": True,
        }
        ns = namespace or self.config.namespace
        if ns:
            query_kwargs["namespace"] = ns
        pinecone_filter = build_filter(filters)
        if pinecone_filter:
            query_kwargs["filter"] = pinecone_filter

        response = self.index.query(**query_kwargs)

        candidates = []
        for match in response.matches or []:
            candidates.append(Candidate(
                chunk_id=match.id,
                score=match.score or 0.0,
                metadata=parse_match_metadata(match.metadata),
            ))

        if candidates:
            top = candidates[0]
            logger.debug(f"Top match {top.chunk_id}: score={top.score:.3f} sport={top.sport}")
        return candidates
