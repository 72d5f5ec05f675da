# src/aideck/services/aggregate.py
from __future__ import annotations

import asyncio
import json
import time
from typing import Any, Dict, List, Optional, Tuple

import httpx

from aideck.core.config import Settings
from aideck.core.ctx import set_ctx
from aideck.core.errors import ProblemDetails, ProviderError
from aideck.core.logging import get_logger
from aideck.core.metrics import PROVIDER_CALLS, PROVIDER_LATENCY
from aideck.providers.base import ProviderAdapter
from aideck.providers.registry import configured, required_env_vars

log = get_logger(__name__)

ERROR_PREFIX = "Error: "


def no_keys_message() -> str:
    return "No API keys configured. Please set at least one of: " + ", ".join(required_env_vars())


def describe(exc: BaseException) -> str:
    """Human-readable failure text; never includes request URLs."""
    if isinstance(exc, ProviderError):
        return str(exc)
    if isinstance(exc, (asyncio.TimeoutError, httpx.TimeoutException)):
        return f"request timed out ({type(exc).__name__})"
    msg = str(exc).strip()
    return msg or type(exc).__name__


async def call_provider(
    client: httpx.AsyncClient,
    adapter: ProviderAdapter,
    prompt: str,
    api_key: str,
) -> Tuple[str, str]:
    """
    One upstream call -> (text, outcome).
    outcome: "ok" (success path found) | "raw" (2xx without success path).
    Raises ProviderError on non-2xx or a body that is not JSON.
    """
    req = adapter.build_request(prompt, api_key)
    r = await client.post(req.url, json=req.json, headers=req.headers, params=req.params or None)
    if not r.is_success:
        raise ProviderError(adapter.name, f"HTTP {r.status_code} {r.reason_phrase}".strip(), status=r.status_code)
    try:
        payload: Any = r.json()
    except ValueError as e:
        raise ProviderError(adapter.name, f"invalid JSON body from {adapter.name}: {e}", status=r.status_code)
    text = adapter.parse(payload)
    if text is not None:
        return text, "ok"
    return json.dumps(payload, indent=2, ensure_ascii=False), "raw"


async def _settle(
    client: httpx.AsyncClient,
    adapter: ProviderAdapter,
    prompt: str,
    api_key: str,
    timeout: Optional[float],
) -> str:
    """Always returns a result string; failures become 'Error: ...'."""
    set_ctx(provider=adapter.name)
    log.info("Calling %s", adapter.name)
    start = time.perf_counter()
    try:
        coro = call_provider(client, adapter, prompt, api_key)
        if timeout is not None:
            text, outcome = await asyncio.wait_for(coro, timeout=timeout)
        else:
            text, outcome = await coro
    except Exception as e:
        text, outcome = ERROR_PREFIX + describe(e), "error"
        log.error("%s failed: %s", adapter.name, text)
    else:
        if outcome == "raw":
            log.warning("%s returned no text at the expected path; using raw body", adapter.name)
        else:
            log.info("%s succeeded", adapter.name)
    PROVIDER_LATENCY.labels(adapter.name).observe(time.perf_counter() - start)
    PROVIDER_CALLS.labels(adapter.name, outcome).inc()
    return text


async def aggregate(
    prompt: str,
    adapters: List[ProviderAdapter],
    settings: Settings,
    client: httpx.AsyncClient,
) -> Dict[str, str]:
    """
    Fan the prompt out to every configured provider and wait for all of them.
    Keys follow adapter order and are exactly the configured providers.
    """
    todo = configured(adapters, settings)
    for a in adapters:
        if not settings.credential(a.env_var):
            log.info("Skipping %s (no API key)", a.name)
    if not todo:
        log.error("No results - no API keys configured")
        raise ProblemDetails(title="No providers", detail=no_keys_message(), status=400, code="E_NO_KEYS")

    texts = await asyncio.gather(
        *(_settle(client, a, prompt, key, settings.provider_timeout) for a, key in todo)
    )
    return {a.name: text for (a, _), text in zip(todo, texts)}
