# ==============================================================================
# REQUEST LOGGER MIDDLEWARE
# ==============================================================================
# One log line per request plus X-Request-ID / X-Response-Time headers
# ==============================================================================

from __future__ import annotations

import logging
import time
import uuid
from typing import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from realty_admin.core.constants import APIConstants

logger = logging.getLogger(__name__)


class RequestLoggerMiddleware(BaseHTTPMiddleware):
    """
    Logs method, path, status and duration of each request.

    A caller-supplied ``X-Request-ID`` is kept so admin UI traces match
    the server log; otherwise a short random id is used.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        request_id = request.headers.get(APIConstants.REQUEST_ID_HEADER) or uuid.uuid4().hex[:8]
        label = f"[{request_id}] {request.method} {request.url.path}"
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(f"{label} - failed after {(time.perf_counter() - started) * 1000:.2f}ms: {e}")
            raise

        elapsed = f"{(time.perf_counter() - started) * 1000:.2f}ms"
        level = logging.WARNING if response.status_code >= 400 else logging.INFO
        logger.log(level, f"{label} - {response.status_code} ({elapsed})")

        response.headers[APIConstants.REQUEST_ID_HEADER] = request_id
        response.headers[APIConstants.RESPONSE_TIME_HEADER] = elapsed
        return response
