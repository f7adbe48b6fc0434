from typing import Optional

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from dsa_companion.config import logger


# Custom exceptions
class AppException(Exception):
    """Base exception for application-specific errors."""

    def __init__(self, status_code: int, detail: str):
        super().__init__(detail)
        self.status_code = status_code
        self.detail = detail


class BadRequestException(AppException):
    """Exception for missing or malformed input."""

    def __init__(self, detail: str = "Bad request"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class ConflictException(BadRequestException):
    """Exception for unique-constraint violations (duplicate username or email)."""

    def __init__(self, detail: str = "User already exists"):
        super().__init__(detail=detail)


class AuthenticationException(AppException):
    """Exception for authentication-related errors."""

    def __init__(self, detail: str = "Authentication failed"):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


class ResourceNotFoundException(AppException):
    """Exception for resource not found errors."""

    def __init__(self, detail: str = "Resource not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class DatabaseException(AppException):
    """Exception for database-related errors, including corrupted rows."""

    def __init__(self, detail: str = "Database error occurred"):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail
        )


class ModelProviderException(AppException):
    """Exception for an unreachable, unconfigured or silent model provider."""

    def __init__(self, detail: str = "AI service error"):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail
        )


class UpstreamFormatException(AppException):
    """Exception for a model provider reply that is not the expected JSON."""

    def __init__(self, detail: str = "Malformed upstream response"):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail
        )


def error_response(status_code: int, detail: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": detail},
    )


# Exception handlers
async def app_exception_handler(request: Request, exc: AppException):
    """Handler for application-specific exceptions."""
    if exc.status_code >= 500:
        logger.error(f"Application error: {exc.detail} (Status: {exc.status_code})")
    else:
        logger.warning(f"Request rejected: {exc.detail} (Status: {exc.status_code})")
    return error_response(exc.status_code, exc.detail)


def _field_name(loc) -> Optional[str]:
    parts = [str(part) for part in loc if part not in ("body", "query", "path")]
    return ".".join(parts) or None


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handler for request bodies and query strings FastAPI could not validate."""
    errors = exc.errors()
    # A body that is not JSON at all is located by character offset, not field
    fields = sorted(
        {
            name
            for name in (_field_name(e["loc"]) for e in errors if e["type"] != "json_invalid")
            if name
        }
    )
    missing = all(e["type"] == "missing" for e in errors)
    prefix = "Missing required fields" if missing else "Invalid fields"
    detail = f"{prefix}: {', '.join(fields)}" if fields else "Invalid request body"
    logger.warning(f"Request validation failed on {request.url.path}: {detail}")
    return error_response(status.HTTP_400_BAD_REQUEST, detail)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handler for routing errors such as unknown paths or wrong methods."""
    detail = exc.detail if isinstance(exc.detail, str) else "Request failed"
    if exc.status_code == status.HTTP_404_NOT_FOUND and detail == "Not Found":
        detail = f"Not found - {request.url.path}"
    return error_response(exc.status_code, detail)


async def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError):
    """Handler for SQLAlchemy errors."""
    logger.error(f"Database error: {str(exc)}")
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Database error occurred"
    )


async def general_exception_handler(request: Request, exc: Exception):
    """Handler for all other exceptions."""
    logger.error(f"Unexpected error: {str(exc)}", exc_info=True)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Server error")


# Function to register exception handlers with FastAPI app
def register_exception_handlers(app):
    """Register all exception handlers with the FastAPI application."""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    logger.info("Exception handlers registered")
