"""Rack Estimator FastAPI application factory.

Entry point: uvicorn app.main:app
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import settings
from app.errors import EstimatorError
from app.middleware import CORSHeadersMiddleware, RequestIDMiddleware, get_request_id
from app.routers import estimate, health

_HTTP_ERROR_CODES = {
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    yield


app = FastAPI(title=settings.APP_TITLE, lifespan=lifespan)

# Last added runs outermost: every response, preflight included, gets a request ID.
app.add_middleware(CORSHeadersMiddleware)
app.add_middleware(RequestIDMiddleware)


def _error_response(
    status_code: int,
    code: str,
    message: str,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "code": code,
                "message": message,
                "request_id": get_request_id(),
            }
        },
        headers={**(headers or {}), "X-Request-ID": get_request_id()},
    )


@app.exception_handler(EstimatorError)
async def estimator_error_handler(request: Request, exc: EstimatorError) -> JSONResponse:
    return _error_response(exc.status_code, exc.code, exc.message)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error_response(
        exc.status_code,
        _HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR"),
        str(exc.detail),
        headers=exc.headers,
    )


app.include_router(health.router)
app.include_router(estimate.router)
