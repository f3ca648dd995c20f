"""
Global exception handlers.

- ApiError -> its own status code and `{"msg": ...}`
- routing misses (404, and 405 on a known path) -> 404 "The route does not exist"
- anything else -> 500, details stay in the log
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .errors import ApiError

logger = logging.getLogger(__name__)

ROUTE_NOT_FOUND_MSG = "The route does not exist"
INTERNAL_ERROR_MSG = "internal server error"


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    logger.warning(
        "api_error status=%s method=%s path=%s msg=%s",
        exc.status_code,
        request.method,
        request.url.path,
        exc.msg,
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_response())


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        logger.info("route_not_found method=%s path=%s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"msg": ROUTE_NOT_FOUND_MSG},
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"msg": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "unhandled_error method=%s path=%s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"msg": INTERNAL_ERROR_MSG},
    )
