"""
Error types and the catch-all exception handler.

Services raise RecordNotFoundError; routes turn it into a 404.
Anything else that escapes a route is logged and returned as a 500.
"""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class RecordNotFoundError(LookupError):
    """A referenced record does not exist in the store."""

    def __init__(self, kind: str, record_id: str):
        super().__init__(f"{kind} not found")
        self.kind = kind
        self.record_id = record_id


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected errors and hide internals from the client."""
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})
