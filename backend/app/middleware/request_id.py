"""
Notedeck Backend — Request Correlation
========================================

What:  Tags every request with an id that shows up in the X-Request-ID
       response header, in error bodies, and on every log record emitted while
       the request is being handled.
How:   RequestIDMiddleware sets a ContextVar for the duration of the request;
       RequestIDLogFilter copies it onto log records as `request_id`.

Unhandled exceptions are turned into the 500 response here, while the id is
still bound. A handler registered for `Exception` on the app would run in
Starlette's ServerErrorMiddleware, outside every user middleware, and lose it.
"""

import logging
import re
import uuid
from contextvars import ContextVar
from typing import Any, Dict, Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

# Client-supplied ids end up in log lines; anything else gets replaced
_ACCEPTED_ID = re.compile(r"^[A-Za-z0-9._-]{1,64}$")

request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def new_request_id() -> str:
    return uuid.uuid4().hex[:12]


def error_body(error: str, message: str, details: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """The JSON shape of every error response."""
    body: Dict[str, Any] = {
        "error": error,
        "message": message,
        "request_id": request_id_var.get(""),
    }
    if details is not None:
        body["details"] = details
    return body


class RequestIDLogFilter(logging.Filter):
    """Adds `request_id` to every record ("-" outside a request)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get("") or "-"
        return True


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Outermost middleware: binds the id before anything else logs."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        supplied = request.headers.get(REQUEST_ID_HEADER, "")
        rid = supplied if _ACCEPTED_ID.match(supplied) else new_request_id()

        token = request_id_var.set(rid)
        request.state.request_id = rid
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            response = JSONResponse(
                status_code=500,
                content=error_body("internal_server_error", "Server error"),
            )
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
