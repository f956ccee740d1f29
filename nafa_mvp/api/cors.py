"""Permissive CORS handling for the development server.

Every response carries the same CORS headers, and every OPTIONS request
is answered directly with an empty 200.
"""

from __future__ import annotations

from typing import Awaitable, Callable

from fastapi import Request, Response

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


async def cors_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    # Preflight for any path
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=CORS_HEADERS)

    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response
