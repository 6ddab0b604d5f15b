# Middleware package init
"""
Payments API — Middleware Package
===================================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → Route Handler

    1. Request ID: Generate correlation ID for logging and tracing
    2. Logging: Log request details with the generated request ID

    Response ← [Request ID] ← [Logging] ← Route Handler
"""
