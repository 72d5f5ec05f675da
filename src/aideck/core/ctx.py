# src/aideck/core/ctx.py
from __future__ import annotations
import contextvars
from typing import Optional, Mapping

_request_id = contextvars.ContextVar("request_id", default=None)
_provider   = contextvars.ContextVar("provider",   default=None)

def set_ctx(*, request_id: Optional[str]=None, provider: Optional[str]=None) -> None:
    if request_id is not None: _request_id.set(request_id)
    if provider is not None:   _provider.set(provider)

def get_ctx() -> Mapping[str, Optional[str]]:
    return {
        "request_id": _request_id.get(),
        "provider":   _provider.get(),
    }
