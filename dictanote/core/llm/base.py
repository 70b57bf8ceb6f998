"""
Abstract base class for LLM providers.
Handles the single request/response completion used for note analysis.
"""

from abc import ABC, abstractmethod


class LLMProvider(ABC):
    """
    Abstract base for LLM text completion providers.

    Responsibilities:
    - One system prompt + one user message in, plain text out
    - Raising LLMError with the provider's HTTP status code on failure
    """

    @abstractmethod
    async def complete(
        self,
        system_prompt: str,
        user_message: str,
        max_tokens: int = 4000,
        temperature: float = 0.3,
        **kwargs,
    ) -> str:
        """
        Generate completion for a system prompt and a user message.

        Args:
            system_prompt: Instruction text for the model
            user_message: The user turn (note text, optional spec context)
            max_tokens: Maximum tokens to generate
            temperature: Sampling temperature (0.0 = deterministic, 1.0 = creative)
            **kwargs: Provider-specific parameters

        Returns:
            Generated text

        Raises:
            ValidationError: If the user message is empty
            ConfigurationError: If a required credential is missing
            LLMError: Provider errors, with status_code when known
        """
        pass

    @abstractmethod
    async def close(self):
        """
        Close any open connections.
        """
