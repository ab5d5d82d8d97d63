import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger("app.requests")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        path = request.url.path
        logger.info(
            "API Request",
            extra={
                "context": {
                    "type": "api_request",
                    "method": request.method,
                    "path": path,
                    "ip": request.client.host if request.client else None,
                    "user_agent": request.headers.get("user-agent"),
                }
            },
        )

        response = await call_next(request)

        logger.info(
            "API Response",
            extra={
                "context": {
                    "type": "api_response",
                    "status_code": response.status_code,
                    "path": path,
                    "method": request.method,
                    "duration_ms": round((time.perf_counter() - started) * 1000, 2),
                }
            },
        )
        return response
