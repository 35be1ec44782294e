"""LLM Client Package"""

from ai_commit.llm.base import LLMClient, LLMResponse, LLMError
from ai_commit.llm.gemini import GeminiClient

__all__ = [
    "LLMClient",
    "LLMResponse",
    "LLMError",
    "GeminiClient",
]
