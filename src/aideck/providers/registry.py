# src/aideck/providers/registry.py
from __future__ import annotations
from typing import List, Tuple

from aideck.core.config import Settings
from aideck.providers.base import ProviderAdapter
from aideck.providers.openai_chat import OpenAIChat
from aideck.providers.gemini import GeminiGenerate
from aideck.providers.anthropic_messages import ClaudeMessages
from aideck.providers.perplexity import PerplexityChat

# Fixed order = order of result keys and content slides
ADAPTER_CLASSES = (OpenAIChat, GeminiGenerate, ClaudeMessages, PerplexityChat)


def build_adapters(settings: Settings) -> List[ProviderAdapter]:
    return [
        OpenAIChat(model=settings.OPENAI_MODEL, max_tokens=settings.OPENAI_MAX_TOKENS),
        GeminiGenerate(model=settings.GEMINI_MODEL),
        ClaudeMessages(model=settings.CLAUDE_MODEL, max_tokens=settings.CLAUDE_MAX_TOKENS,
                       version=settings.ANTHROPIC_VERSION),
        PerplexityChat(model=settings.PERPLEXITY_MODEL, max_tokens=settings.PERPLEXITY_MAX_TOKENS),
    ]


def configured(adapters: List[ProviderAdapter], settings: Settings) -> List[Tuple[ProviderAdapter, str]]:
    """(adapter, api_key) for every adapter whose credential is set."""
    out = []
    for a in adapters:
        key = settings.credential(a.env_var)
        if key:
            out.append((a, key))
    return out


def required_env_vars() -> List[str]:
    return [c.env_var for c in ADAPTER_CLASSES]
