"""
Request Context Middleware

Binds a request id and the request path to the structlog context for the
duration of each request, so every log line emitted while handling it can
be correlated. The id is echoed back in the X-Request-ID header.
"""

import uuid

from fastapi import FastAPI, Request

from scorecard.shared.core.logging import clear_log_context, log_context


REQUEST_ID_HEADER = "X-Request-ID"


def setup_request_context(app: FastAPI) -> None:
    """
    Register the request context middleware.

    Args:
        app: FastAPI application instance
    """

    @app.middleware("http")
    async def bind_request_context(request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        clear_log_context()
        log_context(request_id=request_id, path=request.url.path)
        try:
            response = await call_next(request)
        finally:
            clear_log_context()
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
