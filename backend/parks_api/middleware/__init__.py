# Middleware package init
"""
National Parks API — Middleware Package
========================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: assign the correlation ID first so every log line has it
    2. Logging: log method, path, status and duration once the response exists
"""
