from http import HTTPStatus
from typing import Tuple
from fastapi import status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from libs.result import Error
from src.app.use_cases.tasks import TASK_NOT_FOUND
from .schemas.error_response import ErrorResponse

VALIDATION_FAILED = "VALIDATION_FAILED"
INTERNAL_ERROR = "INTERNAL_ERROR"

ERROR_STATUS_CODES = {
    VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    TASK_NOT_FOUND: status.HTTP_404_NOT_FOUND,
}

# Framework-level 4xx (unknown route, method not allowed, ...) keep their status
ERROR_STATUS_CODES.update(
    {f"HTTP_{code.value}": code.value for code in HTTPStatus if 400 <= code.value < 500}
)


class ClientError(Exception):
    """Raised by routes to hand a use case error to the error-mapping layer"""

    def __init__(self, base_error: Error):
        super().__init__(base_error.message)
        self.base_error = base_error


def map_error(error: Error) -> Tuple[int, ErrorResponse]:
    """Translate an error into the HTTP status and body sent to the client.

    Codes without an entry in ERROR_STATUS_CODES are unclassified failures:
    they become a 500 and their text is only exposed in ``details``.
    """
    status_code = ERROR_STATUS_CODES.get(error.code)
    if status_code is None:
        return (
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorResponse(
                message="Internal server error",
                details=error.reason or error.message,
            ),
        )
    return status_code, ErrorResponse(message=error.message, details=error.reason or error.message)


def validation_error(exc: RequestValidationError) -> Error:
    """Build a VALIDATION_FAILED error from the first problem pydantic reported"""
    errors = exc.errors()
    if not errors:
        return Error(code=VALIDATION_FAILED, message="Invalid request", reason="Validation failed")

    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "path", "query"))

    if first.get("type") == "missing":
        message = f"{field} is required" if field else "request body is required"
    else:
        cause = (first.get("ctx") or {}).get("error")
        detail = str(cause) if cause is not None else first.get("msg", "invalid value")
        message = f"{field}: {detail}" if field else detail

    return Error(code=VALIDATION_FAILED, message=message, reason="Validation failed")


def http_error(exc: StarletteHTTPException) -> Error:
    """Build an error for a failure raised by the framework itself, such as routing"""
    try:
        phrase = HTTPStatus(exc.status_code).phrase
    except ValueError:
        phrase = "HTTP error"
    return Error(code=f"HTTP_{exc.status_code}", message=str(exc.detail or phrase), reason=phrase)


def unexpected_error(exc: Exception) -> Error:
    return Error(code=INTERNAL_ERROR, message="Internal server error", reason=str(exc) or type(exc).__name__)
