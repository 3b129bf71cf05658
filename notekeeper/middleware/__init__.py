# Middleware package init
"""
Notekeeper — Middleware Package
=================================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID first, so every later log line can carry it
    2. Logging records status and duration on the way back out
    3. CORS answers preflight requests from the browser frontend
"""
