# Middleware package init
"""
Employee Directory Backend - Middleware Package
===============================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (request direction):
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    - Request ID first, so the access log line and any error log share it
    - CORS innermost; it answers preflight OPTIONS itself

Responses travel the chain in reverse, which is where the X-Request-ID
header is added and the request duration is measured.
"""
