# Middleware package init
"""
FAQDesk Backend: Middleware Package
=====================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (outermost first):
    Request → [HTTPS redirect] → [Request ID] → [Logging] → Route Handler

    HTTPS redirect is only installed when HTTPS_REDIRECT is enabled.
    The request ID is set before the access log line is written, so every
    log entry for a request carries the same ID.
"""
