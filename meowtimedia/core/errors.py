"""Error taxonomy and the handlers that render it as JSON."""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class AppError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class UnauthenticatedError(AppError):
    status_code = 401
    default_message = "Please login to access this resource"


class ForbiddenError(AppError):
    status_code = 403
    default_message = "Access denied"


class NotFoundError(AppError):
    status_code = 404
    default_message = "Not found"


class InvalidInputError(AppError):
    status_code = 400
    default_message = "Invalid input"


class ConflictError(AppError):
    # duplicates are reported as a plain bad request
    status_code = 400
    default_message = "Already exists"


class InternalError(AppError):
    status_code = 500


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code == 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message, exc_info=exc)
        return _error_response(exc.status_code, InternalError.default_message)
    return _error_response(exc.status_code, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if errors:
        loc = ".".join(str(part) for part in errors[0].get("loc", ()) if part != "body")
        message = f"Invalid {loc}: {errors[0].get('msg')}" if loc else str(errors[0].get("msg"))
    else:
        message = InvalidInputError.default_message
    return _error_response(400, message)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error_response(exc.status_code, str(exc.detail))


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return _error_response(500, InternalError.default_message)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_response(500, InternalError.default_message)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
