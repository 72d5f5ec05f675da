from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional

class Settings(BaseSettings):
    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3001
    LOG_LEVEL: str = "INFO"

    # Provider credentials (unset or blank = provider skipped)
    OPENAI_API_KEY: Optional[str] = None
    GEMINI_API_KEY: Optional[str] = None
    CLAUDE_API_KEY: Optional[str] = None
    PERPLEXITY_API_KEY: Optional[str] = None

    # Provider models / output caps
    OPENAI_MODEL: str = "gpt-4o-mini"
    OPENAI_MAX_TOKENS: int = 800
    GEMINI_MODEL: str = "gemini-pro"
    CLAUDE_MODEL: str = "claude-3-haiku-20240307"
    CLAUDE_MAX_TOKENS: int = 1024
    ANTHROPIC_VERSION: str = "2023-06-01"
    PERPLEXITY_MODEL: str = "pplx-70b-online"
    PERPLEXITY_MAX_TOKENS: int = 800

    # Per-provider timeout in seconds; <= 0 waits indefinitely
    PROVIDER_TIMEOUT_S: float = 120.0

    # HTTP surface
    CORS_ALLOW_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://localhost:3001",
        "http://localhost:3000",
    ]
    MAX_BODY_MB: int = 10
    EXPOSE_ERROR_STACK: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
    )

    def credential(self, env_var: str) -> Optional[str]:
        value = getattr(self, env_var, None)
        if value is None or not str(value).strip():
            return None
        return str(value).strip()

    @property
    def provider_timeout(self) -> Optional[float]:
        t = self.PROVIDER_TIMEOUT_S
        return t if t and t > 0 else None

settings = Settings()
