"""
Payments API — Access Logging Middleware
==========================================

What:  Writes one line to the `paymentsapi.access` logger per request.

Fields (also attached to the record as `extra`):
    method, path, route, status, duration_ms, request_id, client_ip

`route` is the matched route template, e.g. /users/{user_id}/payment,
or "-" when nothing matched. Aggregating on it groups all lookups of the
payment route together regardless of the user ID. Query strings are
never logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from paymentsapi.middleware.request_id import request_id_var

logger = logging.getLogger("paymentsapi.access")

UNMATCHED_ROUTE = "-"


def level_for_status(status: int) -> int:
    """5xx → ERROR, 4xx → WARNING, everything else → INFO."""
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


def route_template(request: Request) -> str:
    """Template of the route the router matched, set in the shared scope."""
    route = request.scope.get("route")
    return getattr(route, "path_format", None) or UNMATCHED_ROUTE


class RequestLoggingMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)

        fields = {
            "method": request.method,
            "path": request.url.path,
            "route": route_template(request),
            "status": response.status_code,
            "duration_ms": elapsed_ms,
            "request_id": request_id_var.get(""),
            "client_ip": request.client.host if request.client else "unknown",
        }
        logger.log(
            level_for_status(response.status_code),
            "%(method)s %(path)s (%(route)s) %(status)d %(duration_ms).1fms [%(request_id)s] from %(client_ip)s",
            fields,
            extra=fields,
        )
        return response
