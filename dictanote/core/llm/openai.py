"""
OpenAI LLM provider using official SDK.
"""

from openai import APIStatusError, AsyncOpenAI

from dictanote.core.llm.base import LLMProvider
from dictanote.utils.exceptions import ConfigurationError, LLMError, ValidationError
from dictanote.utils.logger import get_logger

logger = get_logger(__name__)


class OpenAILLM(LLMProvider):
    """
    OpenAI LLM provider for text completion.

    Works with any OpenAI-compatible endpoint through base_url.
    """

    def __init__(
        self,
        api_key: str | None,
        model: str = "gpt-4o-mini",
        organization: str | None = None,
        base_url: str | None = None,
        timeout: float = 120.0,
    ):
        """
        Initialize OpenAI LLM provider.

        Args:
            api_key: OpenAI API key (required)
            model: Model name (e.g., "gpt-4o", "gpt-4o-mini")
            organization: Optional organization ID
            base_url: Optional custom base URL
            timeout: Request timeout in seconds

        Raises:
            ConfigurationError: If api_key is missing
        """
        if not api_key:
            raise ConfigurationError("OpenAI API key is required")

        self.model = model

        self.client = AsyncOpenAI(
            api_key=api_key, organization=organization, base_url=base_url, timeout=timeout
        )

    async def complete(
        self,
        system_prompt: str,
        user_message: str,
        max_tokens: int = 4000,
        temperature: float = 0.3,
        **kwargs,
    ) -> str:
        """
        Generate completion using OpenAI chat completions.

        Args:
            system_prompt: System instruction
            user_message: User turn
            max_tokens: Maximum tokens to generate
            temperature: Sampling temperature
            **kwargs: Additional parameters (e.g., stop, presence_penalty)
        Returns:
            Generated text
        Raises:
            LLMError: If OpenAI API call fails (status_code set for HTTP errors)
            ValidationError: If user_message is empty
        """
        if not user_message or not user_message.strip():
            raise ValidationError("User message cannot be empty")

        messages = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_message},
        ]

        params = {
            "model": self.model,
            "messages": messages,
            "temperature": temperature,
            "max_tokens": max_tokens,
            **kwargs,
        }

        try:
            response = await self.client.chat.completions.create(**params)
        except APIStatusError as e:
            logger.error("OpenAI API error ({}): {}", e.status_code, e.message)
            raise LLMError(f"OpenAI API error: {e.message}", status_code=e.status_code) from e
        except Exception as e:
            logger.error("OpenAI request failed ({}): {}", type(e).__name__, e)
            raise LLMError(f"OpenAI API error: {e}") from e

        content = response.choices[0].message.content
        if not content:
            raise LLMError("OpenAI returned empty content")

        return content

    async def close(self):
        """Close OpenAI client."""
        await self.client.close()
