"""
LLM Client
==========
Asynchronous client wrapper for text-generation providers.
Supports Gemini (REST API) and OpenAI-compatible providers (Groq, OpenRouter).

Call Semantics:
    - One POST per ``generate`` call, no retries
    - HTTP errors surface as ``httpx.HTTPStatusError``
    - Timeouts surface as ``httpx.TimeoutException``
    - A response without usable text raises ``LLMResponseError``
    - Callers (the Annotator) catch and log; nothing is retried
"""
import logging
from typing import Optional

import httpx

from docgen.llm.router import ProviderConfig

logger = logging.getLogger(__name__)


class LLMResponseError(Exception):
    """Raised when a provider answers but the payload carries no text."""


# ---------------------------------------------------------------------------
# Response Parsing
# ---------------------------------------------------------------------------
def extract_gemini_text(data: dict) -> str:
    """Concatenate the text parts of the first Gemini candidate."""
    try:
        candidates = data.get("candidates") or []
        if not candidates:
            return ""
        parts = candidates[0].get("content", {}).get("parts", [])
        return "".join(part.get("text", "") for part in parts)
    except (AttributeError, IndexError, KeyError, TypeError):
        return ""


def extract_openai_text(data: dict) -> str:
    """Return the message content of the first OpenAI-compatible choice."""
    try:
        choices = data.get("choices") or []
        if not choices:
            return ""
        return choices[0].get("message", {}).get("content") or ""
    except (AttributeError, IndexError, KeyError, TypeError):
        return ""


# ---------------------------------------------------------------------------
# LLM Client
# ---------------------------------------------------------------------------
class LLMClient:
    """
    Async HTTP client for calling LLM providers.

    Usage:
        client = LLMClient()
        text = await client.generate("Write comments for ...", GEMINI_CONFIG)
        await client.close()
    """

    def __init__(self, timeout_seconds: Optional[float] = None) -> None:
        self._http: Optional[httpx.AsyncClient] = None
        self._timeout_seconds = timeout_seconds

    async def _get_http(self, provider: ProviderConfig) -> httpx.AsyncClient:
        """Lazy-initialise the HTTP client."""
        if self._http is None or self._http.is_closed:
            timeout = self._timeout_seconds or provider.timeout_seconds
            self._http = httpx.AsyncClient(timeout=httpx.Timeout(timeout))
        return self._http

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._http and not self._http.is_closed:
            await self._http.aclose()
            self._http = None

    async def generate(self, prompt: str, provider: ProviderConfig) -> str:
        """
        Send ``prompt`` to ``provider`` and return the generated text.

        Parameters
        ----------
        prompt : str
            Complete user prompt (instruction + file content).
        provider : ProviderConfig
            Provider to call.

        Returns
        -------
        str
            Raw generated text, untouched.

        Raises
        ------
        httpx.HTTPError
            On transport errors, timeouts, or non-2xx status codes.
        LLMResponseError
            If the response contains no text.
        """
        if provider.name == "gemini":
            text = await self._call_gemini(prompt, provider)
        else:
            text = await self._call_openai_compatible(prompt, provider)

        if not text:
            raise LLMResponseError(f"Empty response from {provider.name}")
        logger.debug("Provider %s returned %d characters", provider.name, len(text))
        return text

    async def _call_gemini(self, prompt: str, provider: ProviderConfig) -> str:
        """Call Gemini REST API."""
        http = await self._get_http(provider)
        url = f"{provider.base_url}/models/{provider.model}:generateContent"
        payload = {
            "contents": [
                {"parts": [{"text": prompt}]}
            ],
        }
        headers = {"x-goog-api-key": provider.api_key}
        resp = await http.post(url, json=payload, headers=headers)
        resp.raise_for_status()
        return extract_gemini_text(resp.json())

    async def _call_openai_compatible(self, prompt: str, provider: ProviderConfig) -> str:
        """Call OpenAI-compatible API (Groq, OpenRouter)."""
        http = await self._get_http(provider)
        url = f"{provider.base_url}/chat/completions"
        headers = {
            "Authorization": f"Bearer {provider.api_key}",
            "Content-Type": "application/json",
        }
        payload = {
            "model": provider.model,
            "messages": [
                {"role": "user", "content": prompt},
            ],
        }
        resp = await http.post(url, json=payload, headers=headers)
        resp.raise_for_status()
        return extract_openai_text(resp.json())
