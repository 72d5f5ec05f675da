# src/aideck/api/routes/aggregate.py
from __future__ import annotations

import json
import traceback
from typing import Any, Dict

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from aideck.core.errors import ProblemDetails
from aideck.core.logging import get_logger
from aideck.services.aggregate import aggregate
from aideck.services.packaging import package_results

router = APIRouter()
log = get_logger(__name__)


async def _read_prompt(request: Request) -> str:
    try:
        body: Any = await request.json()
    except (ValueError, UnicodeDecodeError):
        body = None
    prompt = body.get("prompt") if isinstance(body, dict) else None
    if not prompt:
        log.error("No prompt provided")
        raise ProblemDetails(title="Invalid request", detail="prompt required", status=400, code="E_PROMPT_REQUIRED")
    return prompt if isinstance(prompt, str) else str(prompt)


@router.get("/health")
def health(request: Request) -> Dict[str, Any]:
    return {"status": "ok", "port": request.app.state.settings.PORT}


@router.post("/api/aggregate")
async def aggregate_to_deck(request: Request):
    """
    Body: {"prompt": "..."}
    200 -> {"ok": true, "document": <base64 pptx>, "fileName": "ai-aggregation-<ms>.pptx"}
    """
    log.info("Received aggregation request")
    prompt = await _read_prompt(request)
    log.info("Prompt received: %s...", prompt[:50])

    state = request.app.state
    results = await aggregate(prompt, state.adapters, state.settings, state.http_client)
    log.info("Results collected: %s", ", ".join(results))

    try:
        log.info("Generating PPTX...")
        payload = package_results(prompt, results)
    except Exception as e:
        log.exception("Aggregate error")
        content: Dict[str, Any] = {"error": str(e) or "internal error"}
        if state.settings.EXPOSE_ERROR_STACK:
            content["stack"] = traceback.format_exc()
        return JSONResponse(status_code=500, content=content)

    log.info("PPTX generated (%s), sending response", payload["fileName"])
    return payload
