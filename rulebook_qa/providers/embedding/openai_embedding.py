"""OpenAI embedding provider implementation."""

import time
from functools import lru_cache
from typing import List, Tuple

from openai import APIError, AzureOpenAI, OpenAI, RateLimitError
from azure.identity import DefaultAzureCredential, get_bearer_token_provider

from rulebook_qa.config.retrieval import EmbeddingConfig
from rulebook_qa.core.interfaces import EmbeddingProvider
from rulebook_qa.utils.env import get_azure_openai_api_key, get_azure_openai_api_version, get_azure_openai_endpoint, get_openai_api_key
from rulebook_qa.utils.exceptions import ConfigurationError, EmbeddingError
from rulebook_qa.utils.text import preprocess_text


class OpenAIEmbeddingProvider(EmbeddingProvider):
    """OpenAI embedding provider with retry logic.

    Supports both OpenAI and Azure OpenAI.
    """

    def __init__(self, config: EmbeddingConfig = None):
        """Initialize provider with config.

        Args:
            config: EmbeddingConfig (defaults to EmbeddingConfig.from_env())

        Raises:
            ConfigurationError: If credentials or Azure settings are missing
        """
        self.config = config or EmbeddingConfig.from_env()

        provider = self.config.provider or "openai"

        if provider == "azure_openai":
            endpoint = self.config.azure_endpoint or get_azure_openai_endpoint()

            if not endpoint:
                raise ConfigurationError("AZURE_OPENAI_ENDPOINT not found in environment")
            if not self.config.azure_deployment_name:
                raise ConfigurationError("AZURE_OPENAI_EMBEDDING_DEPLOYMENT_NAME not found in environment")

            api_version = self.config.azure_api_version or get_azure_openai_api_version()

            if self.config.use_azure_ad:
                token_provider = get_bearer_token_provider(
                    DefaultAzureCredential(),
                    "https://cognitiveservices.azure.com/.default"
                )
                self.client = AzureOpenAI(
                    azure_endpoint=endpoint,
                    azure_ad_token_provider=token_provider,
                    api_version=api_version
                )
            else:
                api_key = self.config.api_key or get_azure_openai_api_key()
                if not api_key:
                    raise ConfigurationError("AZURE_OPENAI_API_KEY not found in environment. Set AZURE_OPENAI_USE_AZURE_AD=true to use Azure AD authentication.")
                self.client = AzureOpenAI(
                    api_key=api_key,
                    api_version=api_version,
                    azure_endpoint=endpoint
                )

            # For Azure OpenAI, use deployment name instead of model name
            self.model_name = self.config.azure_deployment_name
        else:
            api_key = self.config.api_key or get_openai_api_key()
            if not api_key:
                raise ConfigurationError("OPENAI_API_KEY not found in environment")
            self.client = OpenAI(api_key=api_key)
            self.model_name = self.config.model

        # Bounded per provider; entries are evicted least-recently-used
        self._cached_embed = lru_cache(maxsize=self.config.cache_size)(self._embed_with_retry)

    def embed_query(self, query: str) -> List[float]:
        """Embed a single query string.

        Args:
            query: Query string to embed

        Returns:
            Embedding vector

        Raises:
            EmbeddingError: If the embedding service fails after retries
        """
        return list(self._cached_embed(preprocess_text(query)))

    def _embed_with_retry(self, text: str) -> Tuple[float, ...]:
        """Embed text with exponential backoff retry.

        Args:
            text: Text to embed

        Returns:
            Embedding vector
        """
        for attempt in range(self.config.max_retries):
            try:
                response = self.client.embeddings.create(
                    model=self.model_name,
                    input=[text]
                )
                return tuple(response.data[0].embedding)
            except (RateLimitError, APIError) as e:
                if attempt < self.config.max_retries - 1:
                    time.sleep(2 ** attempt)
                else:
                    raise EmbeddingError(f"Embedding request failed: {e}") from e

        raise EmbeddingError("Failed to embed text")

    def clear_cache(self):
        """Clear the embedding cache."""
        self._cached_embed.cache_clear()
