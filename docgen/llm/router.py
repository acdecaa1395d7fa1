"""
LLM Router
==========
Provider table and selection.

One provider is chosen for the whole run (``LLM_PROVIDER``). There is no
fallback and no retry: a failed call fails that file only, and the walker
moves on.

Providers:
    - gemini      — Google Gemini REST API (default, gemini-2.0-flash)
    - groq        — OpenAI-compatible endpoint
    - openrouter  — OpenAI-compatible endpoint
"""
import logging
from dataclasses import dataclass
from typing import Dict

from docgen.core.config import (
    GEMINI_API_KEY, GROQ_API_KEY, OPENROUTER_API_KEY,
    GEMINI_MODEL, REQUEST_TIMEOUT_SECONDS,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Provider Configuration
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class ProviderConfig:
    """Configuration for a single LLM provider."""
    name: str
    api_key: str
    base_url: str
    model: str
    timeout_seconds: float = REQUEST_TIMEOUT_SECONDS


GEMINI_CONFIG = ProviderConfig(
    name="gemini",
    api_key=GEMINI_API_KEY or "",
    base_url="https://generativelanguage.googleapis.com/v1beta",
    model=GEMINI_MODEL,
)

GROQ_CONFIG = ProviderConfig(
    name="groq",
    api_key=GROQ_API_KEY or "",
    base_url="https://api.groq.com/openai/v1",
    model="llama-3.3-70b-versatile",
)

OPENROUTER_CONFIG = ProviderConfig(
    name="openrouter",
    api_key=OPENROUTER_API_KEY or "",
    base_url="https://openrouter.ai/api/v1",
    model="stepfun/step-3.5-flash:free",
)

PROVIDERS: Dict[str, ProviderConfig] = {
    p.name: p for p in (GEMINI_CONFIG, GROQ_CONFIG, OPENROUTER_CONFIG)
}


def get_provider(name: str) -> ProviderConfig:
    """
    Look up a provider by name.

    Raises
    ------
    ValueError
        If ``name`` is not a known provider.
    """
    provider = PROVIDERS.get(name)
    if provider is None:
        raise ValueError(
            f"Unknown LLM provider {name!r}; expected one of {sorted(PROVIDERS)}"
        )
    if not provider.api_key:
        logger.warning(
            "No API key configured for provider %s; every request will fail", name
        )
    return provider
