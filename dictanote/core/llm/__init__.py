"""
LLM provider abstraction layer for note analysis.

Supported providers:
- OpenAI (official SDK)
- Ollama (native SDK)
"""
from dictanote.core.llm.base import LLMProvider
from dictanote.core.llm.ollama import OllamaLLM
from dictanote.core.llm.openai import OpenAILLM

__all__ = [
    "LLMProvider",
    "OllamaLLM",
    "OpenAILLM",
]
