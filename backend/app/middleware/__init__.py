# Middleware package init
"""
Pinboard Backend — Middleware Package
=======================================

Middleware Chain (request direction):
    Request → [Rate Limit] → [Request ID] → [Logging] → [GZip] → [CORS] → Route

    1. Rate Limit first: reject abusive clients before any work
    2. Request ID: correlation id for logs and the X-Request-ID header
    3. Logging: access line with status and duration
"""
