"""Middleware: request timing and body size limits."""

from __future__ import annotations

import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

_DOCUMENT_PATHS = ("/highlight", "/validate")
_MAX_BODY_DOCUMENT = 5 * 1024 * 1024  # 5 MB for highlight/validate
_MAX_BODY_DEFAULT = 1 * 1024 * 1024  # 1 MB for everything else


class RequestTimingMiddleware(BaseHTTPMiddleware):
    """Add X-Request-Duration header with processing time."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.monotonic()
        response = await call_next(request)
        duration_ms = (time.monotonic() - start) * 1000
        response.headers["X-Request-Duration-Ms"] = f"{duration_ms:.1f}"
        return response


def _too_large(limit: int) -> JSONResponse:
    return JSONResponse(
        status_code=413,
        content={"detail": f"Request body too large (max {limit // (1024 * 1024)} MB)"},
    )


class RequestBodyLimitMiddleware(BaseHTTPMiddleware):
    """Reject request bodies that exceed size limits.

    Highlight and validate endpoints allow up to 5 MB; all other
    endpoints are capped at 1 MB.  The Content-Length header is checked
    first; the body is then streamed and counted, so a missing or lying
    header cannot push an oversized payload into memory.  The consumed
    bytes are cached on ``request._body`` for downstream handlers.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        path = request.url.path.rstrip("/")
        limit = _MAX_BODY_DOCUMENT if path.endswith(_DOCUMENT_PATHS) else _MAX_BODY_DEFAULT

        content_length = request.headers.get("content-length")
        if content_length is not None:
            try:
                declared = int(content_length)
            except ValueError:
                declared = None
            if declared is not None and declared > limit:
                return _too_large(limit)

        if request.method in ("POST", "PUT", "PATCH"):
            chunks: list[bytes] = []
            total = 0
            async for chunk in request.stream():
                total += len(chunk)
                if total > limit:
                    return _too_large(limit)
                chunks.append(chunk)
            request._body = b"".join(chunks)  # noqa: SLF001

        return await call_next(request)
