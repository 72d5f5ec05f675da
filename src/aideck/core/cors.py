from __future__ import annotations
from typing import Callable, Iterable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

ALLOW_METHODS = "GET, POST, PUT, DELETE, OPTIONS"
ALLOW_HEADERS = "Content-Type, Authorization"


class AllowListCORSMiddleware(BaseHTTPMiddleware):
    """
    Echo Access-Control-Allow-Origin only for allow-listed origins.
    Method/header/credential headers go on every response, and any OPTIONS
    request is answered with 204 before reaching the routes.
    """
    def __init__(self, app, allow_origins: Iterable[str] = ()):
        super().__init__(app)
        self.allow_origins = frozenset(allow_origins)

    def _decorate(self, request: Request, response: Response) -> Response:
        origin = request.headers.get("origin")
        if origin and origin in self.allow_origins:
            response.headers["Access-Control-Allow-Origin"] = origin
            response.headers["Vary"] = "Origin"
        response.headers["Access-Control-Allow-Methods"] = ALLOW_METHODS
        response.headers["Access-Control-Allow-Headers"] = ALLOW_HEADERS
        response.headers["Access-Control-Allow-Credentials"] = "true"
        return response

    async def dispatch(self, request: Request, call_next: Callable):
        if request.method == "OPTIONS":
            return self._decorate(request, Response(status_code=204))
        response = await call_next(request)
        return self._decorate(request, response)
