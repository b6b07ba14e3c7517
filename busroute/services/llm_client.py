# busroute/services/llm_client.py
from typing import Optional, Protocol

from google import genai
from google.genai import types

from busroute.core.exceptions import ConfigurationError


class GenerativeTextClient(Protocol):
    """Anything that can turn a prompt into free-form text."""

    async def generate(
        self,
        prompt: str,
        *,
        model: str,
        temperature: float,
        max_output_tokens: int,
    ) -> str:
        ...


class GeminiTextClient:
    """Gemini text generation through the google-genai SDK."""

    def __init__(self, api_key: str, client: Optional[genai.Client] = None):
        if not api_key:
            raise ConfigurationError(setting="GEMINI_API_KEY")
        self._client = client or genai.Client(api_key=api_key)

    async def generate(
        self,
        prompt: str,
        *,
        model: str,
        temperature: float,
        max_output_tokens: int,
    ) -> str:
        response = await self._client.aio.models.generate_content(
            model=model,
            contents=prompt,
            config=types.GenerateContentConfig(
                temperature=temperature,
                max_output_tokens=max_output_tokens,
            ),
        )
        return response.text or ""

    async def aclose(self):
        await self._client.aio.aclose()
