"""
Error taxonomy shared by services and routers.
Services raise these; create_app() installs the handler that renders them.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class AppError(Exception):
    status_code = 500
    message = "Internal server error."

    def __init__(self, message: str = None):
        if message:
            self.message = message
        super().__init__(self.message)


class MissingParameter(AppError):
    """Client supplied an absent or empty required field"""
    status_code = 400
    message = "Missing required query parameters."


class InvalidParameter(MissingParameter):
    """Field present but unusable (e.g. negative XP)"""
    message = "Invalid parameter value."


class NotFound(AppError):
    status_code = 404
    message = "Not found"


class StoreError(AppError):
    """Record store failed; surfaced as a server error, never retried here"""
    status_code = 500
    message = "Internal server error."


class StoreUnavailable(StoreError):
    """Database not reachable; same 500 contract as any other store failure"""


# ==================== HANDLERS ====================

async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def register_error_handlers(app: FastAPI):
    app.add_exception_handler(AppError, app_error_handler)
