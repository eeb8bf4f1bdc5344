from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    # everything the voice assistant platform may send
    "Access-Control-Allow-Headers": "Content-Type, Authorization, access-control-allow-origin, X-Requested-With, Accept",
}


class ApiCorsMiddleware(BaseHTTPMiddleware):
    """Permissive CORS for every path under ``path_prefix``.

    Preflight ``OPTIONS`` requests are answered here with 204 and never reach
    the route.
    """

    def __init__(self, app: ASGIApp, path_prefix: str = "/api"):
        super().__init__(app)
        self.path_prefix = path_prefix.rstrip("/")

    def matches(self, path: str) -> bool:
        return path == self.path_prefix or path.startswith(self.path_prefix + "/")

    async def dispatch(self, request: Request, call_next: Callable):
        if not self.matches(request.url.path):
            return await call_next(request)

        if request.method == "OPTIONS":
            return Response(status_code=204, headers=CORS_HEADERS)

        response = await call_next(request)
        for name, value in CORS_HEADERS.items():
            response.headers[name] = value
        return response
