"""
Notedeck Backend — Access Log
===============================

What:  One line per request on the "notedeck.access" logger.

    POST /api/notes -> 201 (12.4ms) user=5b0c... ip=10.0.0.7

The user id is present only when the auth gate resolved a token for the
request. Request bodies and Authorization headers are never logged: they
carry passwords and bearer tokens.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("notedeck.access")

_QUIET_PATHS = frozenset({"/health"})


def _level_for(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs after the response is produced; probes and CORS preflights are skipped."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in _QUIET_PATHS or request.method == "OPTIONS":
            return await call_next(request)

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            # RequestIDMiddleware answers with 500; log the line it will send
            self._log(request, 500, started)
            raise

        self._log(request, response.status_code, started)
        return response

    @staticmethod
    def _log(request: Request, status: int, started: float) -> None:
        elapsed_ms = (time.perf_counter() - started) * 1000
        user_id = getattr(request.state, "user_id", None)
        client_ip = request.client.host if request.client else "unknown"

        logger.log(
            _level_for(status),
            "%s %s -> %d (%.1fms) user=%s ip=%s",
            request.method,
            request.url.path,
            status,
            elapsed_ms,
            user_id or "-",
            client_ip,
        )
