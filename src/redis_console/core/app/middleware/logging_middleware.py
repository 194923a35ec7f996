from __future__ import annotations

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    def __init__(
        self,
        app: ASGIApp,
        log_requests: bool = False,
        log_responses: bool = False,
    ):
        super().__init__(app)
        self.log_requests = log_requests
        self.log_responses = log_responses

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if self.log_requests:
            logger.info(f"Request: {request.method} {request.url.path}")

        start = time.perf_counter()
        response = await call_next(request)

        if self.log_responses:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.info(
                f"Response status: {response.status_code} ({duration_ms:.1f} ms)"
            )

        return response
