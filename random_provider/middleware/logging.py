"""
Logging middleware for the random context provider.

Logs every request and response with timing information so broker
integration runs can be traced from the provider side.
"""

import json
import logging
import time
from datetime import datetime
from typing import Any, Callable, Dict

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware for request/response logging.

    Adds ``X-Process-Time`` and ``X-Timestamp`` headers to every response.
    """

    def __init__(self, app, enable_detailed_logging: bool = False):
        """
        Initialize the logging middleware.

        Args:
            app: FastAPI application instance
            enable_detailed_logging: Whether to log request/response details at debug level
        """
        super().__init__(app)
        self.enable_detailed_logging = enable_detailed_logging

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.time()
        client_ip = request.client.host if request.client else None

        logger.info(f"📥 {request.method} {request.url.path} - {client_ip}")

        if self.enable_detailed_logging:
            logger.debug(f"📋 Request details: {json.dumps(self._extract_request_info(request), indent=2)}")

        try:
            response = await call_next(request)
        except Exception as e:
            process_time = time.time() - start_time
            logger.error(
                f"💥 {request.method} {request.url.path} - ERROR - {process_time:.3f}s - {str(e)}"
            )
            # Re-raise the exception for error handling middleware
            raise

        process_time = time.time() - start_time
        logger.info(
            f"📤 {request.method} {request.url.path} - {response.status_code} - "
            f"{process_time:.3f}s"
        )

        if self.enable_detailed_logging:
            logger.debug(
                f"📋 Response details: status={response.status_code}, "
                f"content_type={response.headers.get('content-type')}"
            )

        response.headers["X-Process-Time"] = str(process_time)
        response.headers["X-Timestamp"] = datetime.now().isoformat()

        return response

    def _extract_request_info(self, request: Request) -> Dict[str, Any]:
        return {
            "method": request.method,
            "path": str(request.url.path),
            "path_params": dict(request.path_params),
            "query_params": dict(request.query_params),
            "user_agent": request.headers.get("user-agent"),
            "content_type": request.headers.get("content-type"),
            "content_length": request.headers.get("content-length"),
        }
