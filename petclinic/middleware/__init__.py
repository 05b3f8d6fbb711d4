# Middleware package init
"""
PetClinic Owners — Middleware Package
======================================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → Route Handler

    Request ID runs first so the access log line carries the correlation ID.
    Starlette executes middleware in REVERSE order of `add_middleware` calls.
"""
