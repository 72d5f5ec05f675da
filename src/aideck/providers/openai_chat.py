# src/aideck/providers/openai_chat.py
from typing import Any, Optional
from aideck.providers.base import ProviderAdapter, UpstreamRequest, chat_messages, text_at

class OpenAIChat(ProviderAdapter):
    name = "chatgpt"
    env_var = "OPENAI_API_KEY"
    url = "https://api.openai.com/v1/chat/completions"

    def __init__(self, model: str = "gpt-4o-mini", max_tokens: int = 800):
        self.model = model
        self.max_tokens = max_tokens

    def build_request(self, prompt: str, api_key: str) -> UpstreamRequest:
        return UpstreamRequest(
            url=self.url,
            headers={"Authorization": f"Bearer {api_key}"},
            json={"model": self.model, "messages": chat_messages(prompt), "max_tokens": self.max_tokens},
        )

    def parse(self, payload: Any) -> Optional[str]:
        return text_at(payload, "choices", 0, "message", "content")
