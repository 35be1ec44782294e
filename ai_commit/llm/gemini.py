"""Gemini (Google GenAI) LLM Client"""

import httpx

from ai_commit.llm.base import LLMClient, LLMResponse, LLMError


class GeminiClient(LLMClient):
    """Gemini API client. One request per generate() call, no retries."""

    DEFAULT_MODEL = "gemini-2.5-flash"

    def __init__(self, api_key: str, model: str | None = None, timeout: int | None = None):
        self.api_key = api_key
        self.model = model or self.DEFAULT_MODEL
        self.timeout = timeout

        if not self.api_key:
            raise LLMError("No Gemini API key provided")

        try:
            from google import genai
            from google.genai import types
        except ImportError:
            raise LLMError(
                "Google GenAI SDK not installed. Run:\n"
                "  pip install google-genai"
            )

        http_options = None
        if self.timeout:
            # HttpOptions takes milliseconds
            http_options = types.HttpOptions(timeout=self.timeout * 1000)
        # Pinned to the Gemini Developer API; GOOGLE_GENAI_USE_VERTEXAI must not switch it
        self._client = genai.Client(api_key=self.api_key, vertexai=False, http_options=http_options)

    @property
    def name(self) -> str:
        return self.model

    def generate(self, prompt: str) -> LLMResponse:
        from google.genai import errors

        try:
            response = self._client.models.generate_content(
                model=self.model,
                contents=prompt,
            )
        except errors.APIError as e:
            raise LLMError(f"Gemini API error ({e.code}): {e.message or e}")
        except errors.UnknownApiResponseError as e:
            raise LLMError(f"Malformed response from Gemini: {e}")
        except httpx.TimeoutException:
            raise LLMError(f"Request to Gemini timed out after {self.timeout}s")
        except httpx.HTTPError as e:
            raise LLMError(f"Request to Gemini failed: {e}")

        content = response.text
        if not content:
            raise LLMError("Empty response from Gemini. The prompt may have been blocked.")

        usage = response.usage_metadata
        return LLMResponse(
            content=content,
            model=self.model,
            tokens_used=(usage.total_token_count or 0) if usage else 0,
        )
