"""HTTP middleware for the Rack Estimator.

RequestIDMiddleware generates a UUID4 per request, stores it in a ContextVar
so it can be retrieved anywhere in the request lifecycle, and attaches it as
a X-Request-ID response header.

CORSHeadersMiddleware answers every OPTIONS request directly and stamps the
same static CORS headers on every other response, success or error.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from app.config import settings

# Module-level ContextVar: allows non-HTTP code (services, handlers) to read
# the current request ID without needing the Request object.
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def get_request_id() -> str:
    return request_id_var.get()


def cors_headers() -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": settings.CORS_ALLOW_ORIGIN,
        "Access-Control-Allow-Methods": settings.CORS_ALLOW_METHODS,
        "Access-Control-Max-Age": str(settings.CORS_MAX_AGE_SECONDS),
        "Access-Control-Allow-Headers": settings.CORS_ALLOW_HEADERS,
    }


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Generates a UUID4 request ID, sets the ContextVar, and adds the
    X-Request-ID header to every response."""

    async def dispatch(self, request: Request, call_next) -> Response:  # type: ignore[override]
        req_id = str(uuid.uuid4())
        request_id_var.set(req_id)
        response = await call_next(request)
        response.headers["X-Request-ID"] = req_id
        return response


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """Permissive CORS: preflight short-circuit plus headers on every response.

    Unlike starlette's CORSMiddleware the headers do not depend on the
    request's Origin header.
    """

    async def dispatch(self, request: Request, call_next) -> Response:  # type: ignore[override]
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=cors_headers())
        response = await call_next(request)
        response.headers.update(cors_headers())
        return response
