"""Request/response logging middleware."""
import time
import logging
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("app.requests")

REQUEST_ID_HEADER = "X-Request-ID"


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log each request and its outcome under a short request id.

    The id is echoed back in ``X-Request-ID`` so a client-reported failure
    can be matched to the server-side traceback.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        start = time.perf_counter()
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:12]
        request.state.request_id = request_id
        method = request.method
        path = request.url.path
        client = request.client.host if request.client else "unknown"

        logger.info("[%s] → %s %s [%s]", request_id, method, path, client)

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.exception(
                "[%s] ✗ %s %s FAILED after %.0fms: %s",
                request_id,
                method,
                path,
                duration_ms,
                str(e),
            )
            raise
        duration_ms = (time.perf_counter() - start) * 1000
        log = logger.warning if response.status_code >= 500 else logger.info
        log(
            "[%s] ← %s %s %d (%.0fms)",
            request_id,
            method,
            path,
            response.status_code,
            duration_ms,
        )
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
