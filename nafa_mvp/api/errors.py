"""Exception handlers that turn errors into client responses.

``/api/*`` errors always use a JSON body of the form ``{"error": ...}``.
Routing misses under ``/api`` (unknown path *or* unsupported method) are
reported as a plain 404.  Outside ``/api`` the text body is kept.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from nafa_mvp.domain.errors import ApiError, NotFoundError

logger = logging.getLogger(__name__)

API_PREFIX = "/api/"


def error_response(exc: ApiError) -> JSONResponse:
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


async def handle_api_error(request: Request, exc: ApiError) -> JSONResponse:
    logger.info("%s %s → %d %s", request.method, request.url.path, exc.status_code, exc.message)
    return error_response(exc)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> Response:
    if request.url.path.startswith(API_PREFIX):
        if exc.status_code in (404, 405):
            return error_response(NotFoundError())
        return JSONResponse({"error": str(exc.detail)}, status_code=exc.status_code)
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, handle_api_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
