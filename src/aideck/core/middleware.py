from __future__ import annotations
import uuid
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from aideck.core.ctx import set_ctx
from aideck.core.errors import ProblemDetails

TOO_LARGE = "request body too large"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Bind a request id to the logging context and echo it back as X-Request-ID."""
    async def dispatch(self, request: Request, call_next: Callable):
        rid = request.headers.get("x-request-id") or uuid.uuid4().hex[:12]
        set_ctx(request_id=rid)
        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        return response


class MaxBodySizeMiddleware:
    """
    Reject request bodies larger than max_mb.
    A declared Content-Length is checked up front; chunked bodies are counted
    as they are read and raise ProblemDetails(413) once past the cap.
    """
    def __init__(self, app: ASGIApp, max_mb: int = 10):
        self.app = app
        self.cap = int(max_mb) * 1024 * 1024

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        cl = Request(scope).headers.get("content-length")
        if cl and cl.isdigit() and int(cl) > self.cap:
            await JSONResponse({"error": TOO_LARGE}, status_code=413)(scope, receive, send)
            return

        received = 0

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b"") or b"")
                if received > self.cap:
                    raise ProblemDetails(title="Payload too large", detail=TOO_LARGE,
                                         status=413, code="E_BODY_TOO_LARGE")
            return message

        await self.app(scope, limited_receive, send)
