"""
Notedeck Backend — Middleware Package
=======================================

What:  Cross-cutting request handling.

    request_id.py  RequestIDMiddleware — correlation ID per request
    logging.py     RequestLoggingMiddleware — access log line per request
    auth.py        Auth gate — bearer token → user id, used as a route
                   dependency on protected routers

Middleware Chain:
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler
"""
