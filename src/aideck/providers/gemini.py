# src/aideck/providers/gemini.py
from typing import Any, Optional
from aideck.providers.base import ProviderAdapter, UpstreamRequest, text_at

class GeminiGenerate(ProviderAdapter):
    name = "gemini"
    env_var = "GEMINI_API_KEY"
    base = "https://generativelanguage.googleapis.com/v1beta/models"

    def __init__(self, model: str = "gemini-pro"):
        self.model = model

    def build_request(self, prompt: str, api_key: str) -> UpstreamRequest:
        # key travels in the query string; never echo the URL in errors
        return UpstreamRequest(
            url=f"{self.base}/{self.model}:generateContent",
            params={"key": api_key},
            json={"contents": [{"parts": [{"text": prompt}]}]},
        )

    def parse(self, payload: Any) -> Optional[str]:
        return text_at(payload, "candidates", 0, "content", "parts", 0, "text")
