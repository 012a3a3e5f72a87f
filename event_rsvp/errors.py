"""Error taxonomy shared by routers and repositories.

Routers raise ``ClientInputError`` for bad input, repositories raise
``StorageError`` (after logging the underlying driver error) and the
handlers registered by ``register_exception_handlers`` turn them into
``{"error": ...}`` responses.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class AppError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ClientInputError(AppError):
    """Malformed or missing client input."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(AppError):
    status_code = status.HTTP_409_CONFLICT


class StorageError(AppError):
    """A query against the store failed. The message is safe to show to clients."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class SchemaMismatchError(StorageError):
    """The store rejected a query because a referenced column does not exist."""


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(content={"error": message}, status_code=status_code)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return error_response(exc.message, exc.status_code)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.debug(f"Rejected request body for {request.url.path}: {exc.errors()}")
    return error_response("Invalid JSON", status.HTTP_400_BAD_REQUEST)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
