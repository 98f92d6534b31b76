"""Exception handling configuration"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.config import settings

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": ", ".join(settings.cors_origins),
    "Access-Control-Allow-Headers": ", ".join(settings.cors_headers),
}


class ReportServiceException(Exception):
    """Base exception for the report service"""

    def __init__(self, message: str, status_code: int = 500, details: Any = None):
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(message)

    @property
    def kind(self) -> str:
        return type(self).__name__


class ValidationError(ReportServiceException):
    """Missing or malformed request fields, or an unknown provider"""

    def __init__(self, message: str, details: Any = None):
        super().__init__(message, status_code=400, details=details)


class AuthError(ReportServiceException):
    """Missing or unresolvable bearer credential"""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message, status_code=401)


class IdentityServiceError(ReportServiceException):
    """Identity service could not be reached or failed on its side"""

    def __init__(self, message: str = "Identity service unavailable"):
        super().__init__(message, status_code=500)


class ConfigurationError(ReportServiceException):
    """Backend credentials or endpoints are not configured"""

    def __init__(self, message: str):
        super().__init__(message, status_code=500)


class ProviderError(ReportServiceException):
    """AI backend call failed or returned a non-success status"""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        provider: str | None = None,
        provider_code: int | None = None,
        details: Any = None,
    ):
        self.provider = provider
        self.provider_code = provider_code
        super().__init__(message, status_code=status_code or 500, details=details)


class StorageError(ReportServiceException):
    """Persisting the generated report failed"""

    MESSAGE = "Failed to save report to database"

    def __init__(self, message: str = MESSAGE):
        super().__init__(message, status_code=500)


def error_response(
    message: str, status_code: int, headers: dict[str, str] | None = None
) -> JSONResponse:
    """Boundary shape for every failed request"""
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": message, "status": status_code},
        headers={**CORS_HEADERS, **(headers or {})},
    )


def configure_exception_handlers(app: FastAPI) -> None:
    """Configure exception handlers for the FastAPI application"""
    from src.services.error_normalizer import normalize_error

    @app.exception_handler(ReportServiceException)
    async def report_exception_handler(
        request: Request, exc: ReportServiceException
    ) -> JSONResponse:
        normalized = normalize_error(exc)
        logger.error(f"{normalized.kind}: {normalized.message} (status={normalized.status_code})")
        return error_response(normalized.message, normalized.status_code)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        normalized = normalize_error(exc)
        logger.warning(f"Rejected request body: {exc.errors()}")
        return error_response(normalized.message, normalized.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        normalized = normalize_error(exc)
        logger.warning(f"{request.method} {request.url.path}: {normalized.status_code} {normalized.message}")
        return error_response(normalized.message, normalized.status_code, headers=exc.headers)

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logger.exception(f"Unhandled exception: {exc}")
        normalized = normalize_error(exc)
        return error_response(normalized.message, normalized.status_code)
