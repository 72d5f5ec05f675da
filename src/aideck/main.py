# src/aideck/main.py
from __future__ import annotations

import asyncio
from typing import Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from aideck import __version__
from aideck.core.config import Settings, settings as default_settings
from aideck.core.cors import AllowListCORSMiddleware
from aideck.core.errors import ProblemDetails
from aideck.core.logging import configure_logging, get_logger
from aideck.core.metrics import MetricsMiddleware, make_metrics_app
from aideck.core.middleware import MaxBodySizeMiddleware, RequestContextMiddleware
from aideck.providers.registry import build_adapters
from aideck.api.routes.aggregate import router as aggregate_router

log = get_logger(__name__)


def _loop_exception_handler(loop: asyncio.AbstractEventLoop, context: dict) -> None:
    # Unhandled task failures are logged; the process keeps serving.
    exc = context.get("exception")
    log.error("Unhandled async failure: %s", context.get("message"), exc_info=exc)


def create_app(settings: Optional[Settings] = None,
               transport: Optional[httpx.AsyncBaseTransport] = None) -> FastAPI:
    """
    Build the ASGI app around an explicit Settings instance.
    `transport` replaces the upstream network (tests use httpx.MockTransport).
    """
    cfg = settings or default_settings
    configure_logging(cfg.LOG_LEVEL)
    app = FastAPI(title="AI Deck Aggregator", version=__version__)
    app.state.settings = cfg
    app.state.adapters = build_adapters(cfg)
    app.state.http_client = None

    # ---- Middlewares (last added runs first) ----
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(MaxBodySizeMiddleware, max_mb=cfg.MAX_BODY_MB)
    app.add_middleware(AllowListCORSMiddleware, allow_origins=cfg.CORS_ALLOW_ORIGINS)
    app.add_middleware(RequestContextMiddleware)

    app.mount("/metrics", make_metrics_app())

    @app.exception_handler(ProblemDetails)
    async def _problem(request: Request, exc: ProblemDetails):
        return JSONResponse(status_code=exc.status, content=exc.to_dict())

    app.include_router(aggregate_router)

    # ---- Startup / shutdown ----
    @app.on_event("startup")
    async def on_startup():
        asyncio.get_running_loop().set_exception_handler(_loop_exception_handler)
        # httpx timeouts are left off; the per-provider bound is applied around each call
        app.state.http_client = httpx.AsyncClient(timeout=None, transport=transport)
        log.info("Server listening on http://localhost:%d", cfg.PORT)
        for a in app.state.adapters:
            log.info("  %s: %s", a.env_var, "set" if cfg.credential(a.env_var) else "not set")

    @app.on_event("shutdown")
    async def on_shutdown():
        if app.state.http_client is not None:
            await app.state.http_client.aclose()
            app.state.http_client = None

    return app


app = create_app()
