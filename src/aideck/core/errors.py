from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Dict, Any


@dataclass(eq=False)
class ProblemDetails(Exception):
    """Request-level failure rendered by the app as ``{"error": detail}``."""
    title: str = "Request failed"
    detail: str = ""
    status: int = 400
    code: Optional[str] = None
    meta: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.detail or self.title}

    def __str__(self) -> str:
        return f"{self.title} ({self.code or ''}): {self.detail}"


class ProviderError(RuntimeError):
    """An upstream call that did not produce a usable body."""

    def __init__(self, provider: str, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.provider = provider
        self.status = status
