import json
import logging
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from notification_service.config import LOG_FORMAT, LOG_LEVEL, SERVICE_NAME
from notification_service.errors import (
    NotificationError,
    NotificationRejected,
    error_response
)
from notification_service.models import (
    HealthResponse,
    NotificationRequest,
    NotificationResponse
)

# Configure logging
logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger(SERVICE_NAME)

app = FastAPI(title=SERVICE_NAME, docs_url=None, redoc_url=None, openapi_url=None)


@app.exception_handler(NotificationRejected)
async def handle_rejection(request: Request, exc: NotificationRejected):
    logger.warning(f"Rejected {request.method} {request.url.path}: {exc.error.detail}")
    return error_response(exc.error)


@app.exception_handler(StarletteHTTPException)
async def handle_http_error(request: Request, exc: StarletteHTTPException):
    # Path matched but verb did not
    if exc.status_code == 405:
        rejected = NotificationRejected(NotificationError.METHOD_NOT_ALLOWED)
        return await handle_rejection(request, rejected)
    return await http_exception_handler(request, exc)


def decode_notification(body: bytes) -> NotificationRequest:
    """Decode a request body as JSON whatever its Content-Type."""
    try:
        return NotificationRequest.model_validate(json.loads(body))
    except (ValueError, ValidationError):
        raise NotificationRejected(NotificationError.INVALID_BODY)


@app.post("/notify", response_model=NotificationResponse)
async def send_notification(request: Request):
    notif_req = decode_notification(await request.body())
    if not notif_req.message or not notif_req.user_id:
        raise NotificationRejected(NotificationError.VALIDATION_ERROR)

    # Nothing is delivered; acceptance is the whole operation
    logger.info(
        f"Notification accepted for user {notif_req.user_id} "
        f"({len(notif_req.message)} chars)"
    )
    return NotificationResponse()


async def health(request: Request):
    return JSONResponse(HealthResponse().model_dump())


# No method filter: every verb is answered
app.add_route("/health", health)
