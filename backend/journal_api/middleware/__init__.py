"""
Journal API: Middleware Package
================================

Middleware Chain (order matters):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    Request ID runs first so every log line written while handling the
    request, including the access line, carries the same correlation ID.
"""
