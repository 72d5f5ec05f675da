# tests/conftest.py
import os, sys, pathlib
import json
from typing import Callable, Dict, List

import httpx
import pytest

# Add <repo>/src to sys.path so `import aideck...` works under pytest
ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from aideck.core.config import Settings  # noqa: E402

KEY_VARS = ("OPENAI_API_KEY", "GEMINI_API_KEY", "CLAUDE_API_KEY", "PERPLEXITY_API_KEY")


@pytest.fixture(autouse=True)
def _no_ambient_keys(monkeypatch):
    # Real credentials in the shell must never reach tests
    for k in KEY_VARS:
        monkeypatch.delenv(k, raising=False)


def make_settings(**overrides) -> Settings:
    values = {k: None for k in KEY_VARS}
    values.update(overrides)
    return Settings(_env_file=None, **values)


# Canned upstream bodies keyed by host
def openai_body(text: str) -> Dict:
    return {"choices": [{"message": {"role": "assistant", "content": text}}]}

def gemini_body(text: str) -> Dict:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}

def claude_body(text: str) -> Dict:
    return {"content": [{"type": "text", "text": text}]}


class Upstream:
    """Records every request and answers from a host -> callable table."""
    def __init__(self, routes: Dict[str, Callable[[httpx.Request], httpx.Response]]):
        self.routes = routes
        self.calls: List[httpx.Request] = []

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        handler = self.routes.get(request.url.host)
        if handler is None:
            raise httpx.ConnectError("no route to host", request=request)
        resp = handler(request)
        if hasattr(resp, "__await__"):
            resp = await resp
        return resp

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def hosts(self) -> List[str]:
        return [r.url.host for r in self.calls]


def json_reply(body, status: int = 200):
    return lambda request: httpx.Response(status, json=body)


def request_json(request: httpx.Request):
    return json.loads(request.content.decode("utf-8"))
