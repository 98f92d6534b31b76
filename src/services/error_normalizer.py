"""Map every failure onto one error shape with a numeric status"""

import json
import logging
from dataclasses import dataclass
from typing import Any

import httpx
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.config.exception_config import (
    ProviderError,
    ReportServiceException,
    ValidationError,
)

logger = logging.getLogger(__name__)

DEFAULT_STATUS = 500
UNEXPECTED_ERROR_MESSAGE = "Unexpected error"


@dataclass
class NormalizedError:
    """Error shape returned at the HTTP boundary"""

    kind: str
    status_code: int
    message: str
    details: Any = None


def _as_http_status(value: Any) -> int | None:
    """Accept ints and digit strings that look like an HTTP error status"""
    if isinstance(value, bool):
        return None
    if isinstance(value, str) and value.strip().isdigit():
        value = int(value.strip())
    if isinstance(value, int) and 400 <= value <= 599:
        return value
    return None


def parse_provider_error(raw_body: str, raw_status: int | None, provider: str) -> ProviderError:
    """
    Turn a failed provider response into a ProviderError.

    Both Gemini and Azure OpenAI wrap failures as
    ``{"error": {"code": ..., "message": ...}}``. When the body parses and
    carries a message, that message is surfaced as-is and the provider's
    own code wins over the transport status. Otherwise the raw status and
    body text are used.

    Args:
        raw_body: Response body text
        raw_status: HTTP status of the response, if any
        provider: Display name of the provider, e.g. "Gemini"

    Returns:
        ProviderError ready to be raised
    """
    try:
        data = json.loads(raw_body)
        error = data["error"] if isinstance(data, dict) else None
        message = error.get("message") if isinstance(error, dict) else None
        if isinstance(message, str) and message:
            provider_code = _as_http_status(error.get("code"))
            return ProviderError(
                message,
                status_code=provider_code or _as_http_status(raw_status),
                provider=provider,
                provider_code=provider_code,
                details=error,
            )
    except (ValueError, KeyError, TypeError):
        # Not structured error data, fall through to the raw text
        pass

    status_text = raw_status if raw_status is not None else "unknown status"
    return ProviderError(
        f"{provider} API error: {status_text} - {raw_body}",
        status_code=_as_http_status(raw_status),
        provider=provider,
    )


def provider_transport_error(exc: httpx.HTTPError, provider: str) -> ProviderError:
    """Wrap a network-level failure (timeout, refused connection, ...)"""
    # The cause is logged by the caller; only a fixed message leaves the service
    if isinstance(exc, httpx.TimeoutException):
        message = f"{provider} API error: request timed out"
    else:
        message = f"{provider} API error: request failed"
    return ProviderError(message, provider=provider)


def _describe_request_errors(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request body"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    detail = first.get("msg", "invalid value")
    if location:
        return f"Invalid request body: {location}: {detail}"
    return f"Invalid request body: {detail}"


def normalize_error(exc: BaseException) -> NormalizedError:
    """
    Produce the boundary error for any exception.

    Service exceptions keep their own status and message. Request-shape
    errors become a ValidationError. Routing errors (404, 405) keep the
    framework's status and detail. Anything else is an unexpected
    server error whose detail is not exposed.
    """
    if isinstance(exc, ReportServiceException):
        return NormalizedError(
            kind=exc.kind,
            status_code=exc.status_code if isinstance(exc.status_code, int) else DEFAULT_STATUS,
            message=exc.message or UNEXPECTED_ERROR_MESSAGE,
            details=exc.details,
        )

    if isinstance(exc, RequestValidationError):
        wrapped = ValidationError(_describe_request_errors(exc))
        return NormalizedError(
            kind=wrapped.kind,
            status_code=wrapped.status_code,
            message=wrapped.message,
        )

    if isinstance(exc, StarletteHTTPException):
        return NormalizedError(
            kind="HTTPError",
            status_code=exc.status_code,
            message=str(exc.detail),
        )

    return NormalizedError(
        kind="InternalError",
        status_code=DEFAULT_STATUS,
        message=UNEXPECTED_ERROR_MESSAGE,
    )
