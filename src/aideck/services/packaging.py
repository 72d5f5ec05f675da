from __future__ import annotations
import base64
import time
from typing import Any, Dict, Mapping, Optional

from aideck.slides.descriptors import build_descriptors, deck_metadata
from aideck.slides.pptx_builder import render_pptx

FILE_PREFIX = "ai-aggregation"


def encode_document(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def make_file_name(now_ms: Optional[int] = None) -> str:
    ts = now_ms if now_ms is not None else int(time.time() * 1000)
    return f"{FILE_PREFIX}-{ts}.pptx"


def package_results(prompt: str, results: Mapping[str, Any]) -> Dict[str, Any]:
    """Results -> {"ok", "document", "fileName"} envelope."""
    data = render_pptx(build_descriptors(prompt, results), deck_metadata(prompt))
    return {"ok": True, "document": encode_document(data), "fileName": make_file_name()}
