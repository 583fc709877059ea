"""OpenAI LLM provider implementation."""

import logging
from typing import Optional

from openai import APIError, AzureOpenAI, OpenAI, RateLimitError
from azure.identity import DefaultAzureCredential, get_bearer_token_provider

from rulebook_qa.config.retrieval import AnswerConfig
from rulebook_qa.core.interfaces import LLMProvider
from rulebook_qa.utils.env import (
    get_openai_api_key,
    get_azure_openai_api_key,
    get_azure_openai_endpoint,
    get_azure_openai_api_version,
)
from rulebook_qa.utils.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class OpenAILLMProvider(LLMProvider):
    """OpenAI chat completion provider.

    Supports both OpenAI and Azure OpenAI.
    """

    def __init__(self, config: Optional[AnswerConfig] = None):
        """Initialize OpenAI LLM provider.

        Args:
            config: AnswerConfig with LLM settings (defaults to AnswerConfig.from_env())

        Raises:
            ConfigurationError: If credentials or Azure settings are missing
        """
        self.config = config or AnswerConfig.from_env()

        if self.config.provider == "azure_openai":
            endpoint = self.config.azure_endpoint or get_azure_openai_endpoint()
            if not endpoint:
                raise ConfigurationError("AZURE_OPENAI_ENDPOINT not found in environment")

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
            # Use deployment name if provided, otherwise use model name
            self.model_name = self.config.azure_deployment_name or self.config.model
        else:
            api_key = self.config.api_key or get_openai_api_key()
            if not api_key:
                raise ConfigurationError("OPENAI_API_KEY not found in environment")
            self.client = OpenAI(api_key=api_key)
            self.model_name = self.config.model

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
            model: Model name (uses config default if not provided)
            temperature: Sampling temperature
            max_tokens: Maximum tokens to generate (uses config default if not provided)

        Returns:
            Generated text ("" when the response carries no content)

        Raises:
            APIError: If API call fails
        """
        if self.config.provider == "azure_openai":
            # Azure routes by deployment name
            model = self.model_name
        else:
            model = model or self.model_name
        max_tokens = max_tokens or self.config.max_tokens

        try:
            response = self.client.chat.completions.create(
                model=model,
                messages=[{"role": "user", "content": prompt}],
                temperature=temperature,
                max_tokens=max_tokens,
            )
        except RateLimitError as e:
            logger.error(f"Rate limit error: {e}")
            raise
        except APIError as e:
            logger.error(f"API error: {e}")
            raise

        if not response.choices:
            return ""
        return response.choices[0].message.content or ""
