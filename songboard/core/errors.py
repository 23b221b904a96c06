# ============================================================================
# FILE: songboard/core/errors.py
# Error taxonomy shared by services and the HTTP layer
# ============================================================================
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
import logging

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base error carrying a machine-readable code and a human message"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_code = "internal_error"

    def __init__(self, message: str, code: str = None):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code


class ValidationError(AppError):
    """Missing or malformed input the user can correct"""

    status_code = status.HTTP_400_BAD_REQUEST
    default_code = "invalid_input"


class AuthError(AppError):
    """Missing, invalid or stale session token"""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_code = "not_authenticated"


class NotFoundError(AppError):
    """Referenced record does not exist"""

    status_code = status.HTTP_404_NOT_FOUND
    default_code = "not_found"


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{exc.code}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"code": exc.code, "detail": exc.message},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
