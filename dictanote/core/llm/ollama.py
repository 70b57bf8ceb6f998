"""
Ollama LLM provider using native ollama-python SDK.
"""

import ollama

from dictanote.core.llm.base import LLMProvider
from dictanote.utils.exceptions import LLMError, ValidationError
from dictanote.utils.logger import get_logger

logger = get_logger(__name__)


class OllamaLLM(LLMProvider):
    """
    Ollama LLM provider for text completion.

    Local models need no credential.
    """

    def __init__(
        self,
        host: str = "http://localhost:11434",
        model: str = "llama3.1:8b",
        timeout: float = 120.0,
    ):
        """
        Initialize Ollama LLM provider.

        Args:
            host: Ollama server URL
            model: Model name for text generation (e.g., "llama3.1", "mistral")
            timeout: Request timeout in seconds
        """
        self.host = host
        self.model = model
        self.timeout = timeout

        self.client = ollama.AsyncClient(host=host, timeout=timeout)

    async def complete(
        self,
        system_prompt: str,
        user_message: str,
        max_tokens: int = 4000,
        temperature: float = 0.3,
        **kwargs,
    ) -> str:
        """
        Generate completion using Ollama chat.

        Args:
            system_prompt: System instruction
            user_message: User turn
            max_tokens: Maximum tokens to generate
            temperature: Sampling temperature
            **kwargs: Additional options (passed to Ollama)

        Returns:
            Generated text

        Raises:
            LLMError: If the Ollama call fails (status_code set for HTTP errors)
            ValidationError: If user_message is empty
        """
        if not user_message or not user_message.strip():
            raise ValidationError("User message cannot be empty")

        options = {
            "temperature": temperature,
            "num_predict": max_tokens,
            **kwargs.get("options", {}),
        }

        messages = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_message},
        ]

        try:
            response = await self.client.chat(
                model=self.model,
                messages=messages,
                options=options,
                **{k: v for k, v in kwargs.items() if k != "options"},
            )
        except ollama.ResponseError as e:
            logger.error("Ollama API error ({}): {}", e.status_code, e.error)
            raise LLMError(f"Ollama API error: {e.error}", status_code=e.status_code) from e
        except Exception as e:
            logger.error("Ollama request failed ({}): {}", type(e).__name__, e)
            raise LLMError(f"Ollama request failed: {e}") from e

        content = response["message"]["content"]
        if not content:
            raise LLMError("Ollama returned empty content")

        return content

    async def close(self):
        """Close client (Ollama SDK handles cleanup internally)."""
        pass
