# Middleware package init
"""
NoteKeeper Backend — Middleware Package
========================================

Middleware Chain (order matters):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID first: every later log line can read it
    2. Logging: records status and duration once the handler returns
    3. GZip: FastAPI's GZipMiddleware compresses bodies of 500 bytes or more
    4. CORS: Applied by FastAPI's CORSMiddleware
"""
