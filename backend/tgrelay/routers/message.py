"""Message relay — forward one message to one Telegram chat."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Request
from fastapi.exception_handlers import http_exception_handler as default_http_exception_handler
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from tgrelay.models import (
    REQUIRED_FIELDS,
    RelayErrorResponse,
    RelayMessageRequest,
    RelayMessageResponse,
    missing_required,
)
from tgrelay.services.telegram import FALLBACK_ERROR, telegram_client

logger = logging.getLogger(__name__)

RELAY_PATH = "/api/message"

router = APIRouter(prefix="/api", tags=["message"])


def _timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _error(status_code: int, body: RelayErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Give methods the router never registered the relay's 405 body."""
    if exc.status_code == 405 and request.url.path.rstrip("/") == RELAY_PATH:
        resp = _error(405, RelayErrorResponse(error="Method not allowed"))
        resp.headers.update(exc.headers or {})
        return resp
    return await default_http_exception_handler(request, exc)


@router.api_route(
    "/message",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"],
    response_model=RelayMessageResponse,
)
async def relay_message(request: Request):
    """Relay the posted message to Telegram and report the outcome."""
    if request.method != "POST":
        return _error(405, RelayErrorResponse(error="Method not allowed"))

    try:
        body = await request.json()
        if missing_required(body):
            return _error(400, RelayErrorResponse(error="Missing required fields", required=REQUIRED_FIELDS))

        try:
            req = RelayMessageRequest.model_validate(body)
        except ValidationError as e:
            return _error(
                400,
                RelayErrorResponse(
                    error="Invalid request body",
                    details="; ".join(f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in e.errors()),
                ),
            )

        result = await telegram_client.send_message(
            req.message,
            req.bot_id,
            req.chat_id,
            req.reply_to_message_id,
            req.delay,
        )
        if not result:
            raise RuntimeError(result.error or FALLBACK_ERROR)

        return RelayMessageResponse(success=True, timestamp=_timestamp())
    except Exception as e:
        logger.exception("Handler error")
        return _error(
            500,
            RelayErrorResponse(
                error="Failed to send message",
                details=str(e) or type(e).__name__,
                timestamp=_timestamp(),
            ),
        )
