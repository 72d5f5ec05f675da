# src/aideck/providers/perplexity.py
from aideck.providers.openai_chat import OpenAIChat

class PerplexityChat(OpenAIChat):
    """Perplexity speaks the OpenAI chat-completions shape."""
    name = "perplexity"
    env_var = "PERPLEXITY_API_KEY"
    url = "https://api.perplexity.ai/chat/completions"

    def __init__(self, model: str = "pplx-70b-online", max_tokens: int = 800):
        super().__init__(model=model, max_tokens=max_tokens)
