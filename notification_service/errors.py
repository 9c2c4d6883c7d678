"""Error taxonomy for the /notify endpoint.

Every rejection the service can produce is one member of
:class:`NotificationError`. Each member knows its HTTP status and the exact
string sent back to the client in ``{"error": ...}``; :func:`error_response`
is the only place those bodies are rendered.
"""
from enum import Enum

from fastapi.responses import JSONResponse

from notification_service.models import ErrorResponse


class NotificationError(Enum):
    METHOD_NOT_ALLOWED = (405, "method not allowed")
    INVALID_BODY = (400, "invalid request body")
    VALIDATION_ERROR = (400, "message and user_id are required")

    def __init__(self, status_code: int, detail: str):
        self.status_code = status_code
        self.detail = detail


class NotificationRejected(Exception):
    """Raised by a handler to answer with one of the fixed error bodies."""

    def __init__(self, error: NotificationError):
        super().__init__(error.detail)
        self.error = error


def error_response(error: NotificationError) -> JSONResponse:
    return JSONResponse(
        status_code=error.status_code,
        content=ErrorResponse(error=error.detail).model_dump()
    )
