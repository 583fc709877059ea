"""Configuration for the retrieval subsystem."""

from dataclasses import dataclass
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from rulebook_qa.utils.env import load_env


@dataclass
class EmbeddingConfig:
    """Configuration for OpenAI embeddings."""
    model: str = "text-embedding-3-small"
    dimension: int = 1536
    max_retries: int = 3
    cache_size: int = 256  # 0 disables the query cache
    # Azure OpenAI settings (optional)
    provider: str = "openai"  # "openai" or "azure_openai"
    api_key: Optional[str] = None
    azure_endpoint: Optional[str] = None
    azure_api_version: str = "2025-01-01-preview"
    azure_deployment_name: Optional[str] = None
    use_azure_ad: bool = True  # Use Azure AD authentication (DefaultAzureCredential) instead of API key

    @classmethod
    def from_env(cls, **overrides):
        """Create config from environment variables with optional overrides."""
        env = load_env()
        config = cls(**overrides)
        # Load provider preference
        if "provider" not in overrides:
            config.provider = env.get("EMBEDDING_PROVIDER", config.provider)
        if "model" not in overrides:
            config.model = env.get("EMBEDDING_MODEL", config.model)
        # Load API key
        if not config.api_key:
            config.api_key = env.get("OPENAI_API_KEY") or env.get("AZURE_OPENAI_API_KEY")
        # Load Azure-specific settings if using Azure
        if config.provider == "azure_openai":
            if not config.azure_endpoint:
                config.azure_endpoint = env.get("AZURE_OPENAI_ENDPOINT")
            if not config.azure_deployment_name:
                config.azure_deployment_name = env.get("AZURE_OPENAI_EMBEDDING_DEPLOYMENT_NAME") or env.get("AZURE_OPENAI_DEPLOYMENT_NAME")
            config.azure_api_version = env.get("AZURE_OPENAI_API_VERSION", config.azure_api_version)
            if "use_azure_ad" not in overrides:
                use_azure_ad_env = env.get("AZURE_OPENAI_USE_AZURE_AD", "true").lower()
                config.use_azure_ad = use_azure_ad_env in ("true", "1", "yes")
        return config


class PineconeConfig(BaseSettings):
    """Configuration for Pinecone vector store.

    The rule corpus is indexed with capitalized sport names ("Golf"), so the
    sport filter value is cased with ``sport_filter_case`` before querying.
    """

    api_key: Optional[str] = Field(default=None, validation_alias="PINECONE_API_KEY")
    index_name: str = Field(default="sports-rules", validation_alias="PINECONE_INDEX_NAME")
    namespace: Optional[str] = Field(default=None, validation_alias="PINECONE_NAMESPACE")
    top_k: int = Field(default=8, ge=1)
    min_filtered_results: int = Field(default=2, ge=0)
    sport_filter_case: Literal["title", "lower", "as_is"] = "title"

    model_config = SettingsConfigDict(env_prefix="RULEBOOK_", extra="ignore", populate_by_name=True)

    @field_validator("namespace", mode="before")
    @classmethod
    def blank_namespace(cls, v):
        """An empty namespace means the default one."""
        return v or None

    @classmethod
    def from_env(cls, **overrides):
        """Create config from environment variables (and .env) with optional overrides."""
        load_env()
        return cls(**overrides)

    def format_sport(self, sport: str) -> str:
        """Apply the configured casing to a sport filter value."""
        if self.sport_filter_case == "title":
            return sport.title()
        if self.sport_filter_case == "lower":
            return sport.lower()
        return sport


class RankingConfig(BaseSettings):
    """Boost magnitudes and truncation policy for the relevance ranker.

    Boosts must be positive: each one has to strictly raise a score.
    """

    sport_boost: float = Field(default=0.3, gt=0)
    length_boost: float = Field(default=0.05, gt=0)
    length_threshold: int = Field(default=200, ge=0)
    keyword_boost: float = Field(default=0.05, gt=0)
    partial_keyword_boost: float = Field(default=0.05, gt=0)
    contextual_boosts: bool = True
    top_n: int = Field(default=6, ge=1)
    mark_primary: bool = False
    separator: str = "\n\n---\n\n"

    model_config = SettingsConfigDict(env_prefix="RULEBOOK_", extra="ignore")

    @classmethod
    def from_env(cls, **overrides):
        """Create config from environment variables (and .env) with optional overrides."""
        load_env()
        return cls(**overrides)


class AnswerConfig(BaseSettings):
    """Configuration for prompt composition and the completion call."""

    model: str = "gpt-4o"
    temperature: float = Field(default=0.3, ge=0, le=2)
    max_tokens: int = Field(default=1500, ge=1)
    min_content_length: int = Field(default=15, ge=0)
    trace_prompt_tokens: bool = False
    # LLM provider settings
    provider: Literal["openai", "azure_openai"] = Field(default="openai", validation_alias="LLM_PROVIDER")
    api_key: Optional[str] = None
    azure_endpoint: Optional[str] = Field(default=None, validation_alias="AZURE_OPENAI_ENDPOINT")
    azure_api_version: str = Field(default="2025-01-01-preview", validation_alias="AZURE_OPENAI_API_VERSION")
    azure_deployment_name: Optional[str] = Field(default=None, validation_alias="AZURE_OPENAI_DEPLOYMENT_NAME")
    use_azure_ad: bool = Field(default=True, validation_alias="AZURE_OPENAI_USE_AZURE_AD")

    model_config = SettingsConfigDict(env_prefix="RULEBOOK_", extra="ignore", populate_by_name=True)

    @classmethod
    def from_env(cls, **overrides):
        """Create config from environment variables (and .env) with optional overrides."""
        load_env()
        return cls(**overrides)


@dataclass
class RetrievalConfig:
    """Configuration for the question-answering pipeline."""

    # Embedding config
    embedding_config: EmbeddingConfig = None

    # Pinecone config
    pinecone_config: PineconeConfig = None

    # Ranking config
    ranking_config: RankingConfig = None

    # Answer config
    answer_config: AnswerConfig = None

    def __post_init__(self):
        """Initialize sub-configs if not provided."""
        if self.embedding_config is None:
            self.embedding_config = EmbeddingConfig.from_env()
        if self.pinecone_config is None:
            self.pinecone_config = PineconeConfig.from_env()
        if self.ranking_config is None:
            self.ranking_config = RankingConfig.from_env()
        if self.answer_config is None:
            self.answer_config = AnswerConfig.from_env()

    @classmethod
    def from_env(cls, **overrides):
        """Create config from environment variables with optional overrides."""
        return cls(**overrides)
