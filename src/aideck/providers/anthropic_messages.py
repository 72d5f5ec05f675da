# src/aideck/providers/anthropic_messages.py
from typing import Any, Optional
from aideck.providers.base import ProviderAdapter, UpstreamRequest, chat_messages, text_at

class ClaudeMessages(ProviderAdapter):
    name = "claude"
    env_var = "CLAUDE_API_KEY"
    url = "https://api.anthropic.com/v1/messages"

    def __init__(self, model: str = "claude-3-haiku-20240307", max_tokens: int = 1024,
                 version: str = "2023-06-01"):
        self.model = model
        self.max_tokens = max_tokens
        self.version = version

    def build_request(self, prompt: str, api_key: str) -> UpstreamRequest:
        return UpstreamRequest(
            url=self.url,
            headers={"x-api-key": api_key, "anthropic-version": self.version},
            json={"model": self.model, "max_tokens": self.max_tokens, "messages": chat_messages(prompt)},
        )

    def parse(self, payload: Any) -> Optional[str]:
        return text_at(payload, "content", 0, "text")
