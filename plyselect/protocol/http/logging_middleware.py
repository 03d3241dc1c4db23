from __future__ import annotations

import logging
import time
import uuid
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request


logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "x-request-id"


class RequestIDLoggingMiddleware(BaseHTTPMiddleware):
    """Tag each request with an id and log it on the way in and out.

    A caller-supplied ``x-request-id`` is reused, otherwise a UUID4 is minted.
    """

    async def dispatch(self, request: Request, call_next: Callable):
        start = time.perf_counter()
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id
        fields = {"request_id": request_id, "method": request.method, "path": request.url.path}

        logger.info("request", extra=fields)
        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id

        # Server errors stand out from routine traffic
        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(
            level,
            "response",
            extra={
                **fields,
                "status_code": response.status_code,
                "duration_ms": int((time.perf_counter() - start) * 1000),
            },
        )
        return response
