"""Shared fixtures."""

import os

import pytest

from rulebook_qa.config.retrieval import (
    AnswerConfig,
    EmbeddingConfig,
    PineconeConfig,
    RankingConfig,
    RetrievalConfig,
)

_SETTINGS_ENV = (
    "PINECONE_API_KEY",
    "PINECONE_INDEX_NAME",
    "PINECONE_NAMESPACE",
    "LLM_PROVIDER",
    "EMBEDDING_PROVIDER",
    "EMBEDDING_MODEL",
    "AZURE_OPENAI_ENDPOINT",
    "AZURE_OPENAI_API_VERSION",
    "AZURE_OPENAI_DEPLOYMENT_NAME",
    "AZURE_OPENAI_USE_AZURE_AD",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in list(os.environ):
        if name.startswith("RULEBOOK_") or name in _SETTINGS_ENV:
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def ranking_config() -> RankingConfig:
    return RankingConfig()


@pytest.fixture
def answer_config() -> AnswerConfig:
    return AnswerConfig(api_key="test-key")


@pytest.fixture
def pinecone_config() -> PineconeConfig:
    return PineconeConfig()


@pytest.fixture
def retrieval_config(ranking_config, answer_config, pinecone_config) -> RetrievalConfig:
    return RetrievalConfig(
        embedding_config=EmbeddingConfig(api_key="test-key"),
        pinecone_config=pinecone_config,
        ranking_config=ranking_config,
        answer_config=answer_config,
    )
