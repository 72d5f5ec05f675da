# src/aideck/providers/base.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Protocol, runtime_checkable


@dataclass(frozen=True)
class UpstreamRequest:
    url: str
    json: Dict[str, Any]
    headers: Dict[str, str] = field(default_factory=dict)
    params: Dict[str, str] = field(default_factory=dict)


@runtime_checkable
class ProviderAdapter(Protocol):
    name: str
    env_var: str
    def build_request(self, prompt: str, api_key: str) -> UpstreamRequest: ...
    def parse(self, payload: Any) -> Optional[str]: ...


def dig(payload: Any, *path: Any) -> Any:
    """
    Walk dict keys / list indexes; None as soon as a step does not fit.
    dig({"a": [{"b": 1}]}, "a", 0, "b") -> 1
    """
    cur = payload
    for step in path:
        if isinstance(step, int):
            if not isinstance(cur, list) or not -len(cur) <= step < len(cur):
                return None
            cur = cur[step]
        else:
            if not isinstance(cur, dict) or step not in cur:
                return None
            cur = cur[step]
    return cur


def text_at(payload: Any, *path: Any) -> Optional[str]:
    """Non-empty string at path, else None."""
    val = dig(payload, *path)
    if isinstance(val, str) and val:
        return val
    return None


def chat_messages(prompt: str) -> list:
    return [{"role": "user", "content": prompt}]
