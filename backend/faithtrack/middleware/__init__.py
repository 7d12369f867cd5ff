# Middleware package init
"""
Faithtrack Backend: Middleware Package
========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    - Request ID runs first so every log line of the request can carry it
    - Logging records status and duration once the response comes back
    - CORS is FastAPI's CORSMiddleware (handles preflight)
"""
