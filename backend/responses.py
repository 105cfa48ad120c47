"""Standardized response infrastructure.

Two shapes are used:
- ``ActionResult`` ({data, error}) returned by every server action.
- The error envelope (code, message, timestamp, request_id) used by the HTTP
  exception handlers.
"""

from datetime import UTC, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ValidationError


class ResponseCode(str, Enum):
    """Response codes for API error envelopes.

    Ranges: 0xxx=Success, 1xxx=Client Error, 2xxx=Server Error, 3xxx=External Service
    """

    # Success codes
    SUCCESS = "0000"

    # Client errors
    VALIDATION_ERROR = "1000"
    NOT_FOUND = "1003"
    UNAUTHORIZED = "1007"

    # Server errors
    INTERNAL_ERROR = "2000"
    DATABASE_ERROR = "2002"

    # External service errors
    LLM_RATE_LIMIT = "3001"


# Response messages mapped to codes
RESPONSE_MESSAGES: dict[ResponseCode, str] = {
    ResponseCode.SUCCESS: "Operation completed successfully",
    ResponseCode.VALIDATION_ERROR: "Request validation failed",
    ResponseCode.NOT_FOUND: "Resource not found",
    ResponseCode.UNAUTHORIZED: "Authentication required",
    ResponseCode.INTERNAL_ERROR: "An internal error occurred",
    ResponseCode.DATABASE_ERROR: "Database operation failed",
    ResponseCode.LLM_RATE_LIMIT: "Rate limit exceeded. Please wait and retry",
}

# HTTP status codes for each response code
HTTP_STATUS_MAP: dict[ResponseCode, int] = {
    ResponseCode.SUCCESS: 200,
    ResponseCode.VALIDATION_ERROR: 422,
    ResponseCode.NOT_FOUND: 404,
    ResponseCode.UNAUTHORIZED: 401,
    ResponseCode.INTERNAL_ERROR: 500,
    ResponseCode.DATABASE_ERROR: 500,
    ResponseCode.LLM_RATE_LIMIT: 429,
}


def get_message(code: ResponseCode) -> str:
    """Get the message for a response code."""
    return RESPONSE_MESSAGES.get(code, "Unknown error")


def get_http_status(code: ResponseCode) -> int:
    """Get HTTP status code for a response code."""
    return HTTP_STATUS_MAP.get(code, 500)


def error_dict(
    code: ResponseCode,
    custom_message: str | None = None,
    error_details: dict[str, Any] | None = None,
    request_id: str | None = None,
) -> dict[str, Any]:
    """Build a standardized error response dictionary."""
    return {
        "code": code.value,
        "success": False,
        "message": custom_message or get_message(code),
        "timestamp": datetime.now(UTC).isoformat(),
        "request_id": request_id,
        "error_details": error_details,
    }


# --- Server action results ---


class ActionResult(BaseModel):
    """Result of a server action.

    ``error`` is None on success. ``data`` is None for write-only actions
    and on failure (except where an action documents a partial payload).
    """

    data: Any = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def format_validation_errors(errors: list[dict[str, Any]]) -> str:
    """Join pydantic error entries into a single message.

    Each entry is rendered as ``<dotted.location>: <message>``; the ``body``
    prefix FastAPI adds to request locations is dropped.
    """
    parts = []
    for err in errors:
        loc = [str(p) for p in err.get("loc", ()) if p != "body"]
        field = ".".join(loc)
        msg = err.get("msg", "Invalid value")
        parts.append(f"{field}: {msg}" if field else msg)
    return ", ".join(parts)


def validation_failure(exc: ValidationError, data: Any = None) -> ActionResult:
    """Build the action result for a schema-validation failure."""
    return ActionResult(data=data, error=format_validation_errors(exc.errors()))


def action_failure(prefix: str, exc: Exception, data: Any = None) -> ActionResult:
    """Build the action result for any non-validation failure."""
    message = str(exc) or "An unknown error occurred"
    return ActionResult(data=data, error=f"{prefix}. {message}")
