"""Telegram Bot API client — relays a single message to a single chat.

API: POST https://api.telegram.org/bot<token>/sendMessage
Body: {"chat_id": ..., "text": ..., "parse_mode": "Markdown", ...}
Errors come back as non-2xx with {"ok": false, "description": "..."}.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any

import httpx

from tgrelay.config import settings

logger = logging.getLogger(__name__)

PARSE_MODE = "Markdown"
FALLBACK_ERROR = "Failed to send message"


@dataclass(frozen=True)
class SendResult:
    ok: bool
    error: str | None = None

    def __bool__(self) -> bool:
        return self.ok


def build_payload(
    message: str,
    chat_id: str | int,
    reply_to_message_id: str | int | None = None,
) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "chat_id": chat_id,
        "text": message,
        "parse_mode": PARSE_MODE,
        "disable_web_page_preview": False,
    }
    if reply_to_message_id:
        payload["reply_to_message_id"] = reply_to_message_id
    return payload


def _chat_hint(chat_id: str | int, keep: int = 4) -> str:
    value = str(chat_id)
    if len(value) <= keep:
        return value
    return f"...{value[-keep:]}"


def _error_description(resp: httpx.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return FALLBACK_ERROR
    if isinstance(body, dict) and body.get("description"):
        return str(body["description"])
    return FALLBACK_ERROR


async def wait_before_send(delay_ms: float) -> None:
    """Suspend the current request for ``delay_ms`` milliseconds; no-op when <= 0."""
    if delay_ms <= 0:
        return
    await asyncio.sleep(delay_ms / 1000)


class TelegramClient:
    def __init__(self, transport: httpx.AsyncBaseTransport | None = None):
        self._base_url = settings.api_base_url.rstrip("/")
        self._timeout = settings.request_timeout_s
        self._transport = transport

    def endpoint(self, bot_id: str) -> str:
        return f"{self._base_url}/bot{bot_id}/sendMessage"

    async def send_message(
        self,
        message: str,
        bot_id: str,
        chat_id: str | int,
        reply_to_message_id: str | int | None = None,
        delay: float | None = None,
    ) -> SendResult:
        """Send ``message`` to ``chat_id`` as bot ``bot_id``.

        Never raises: network errors, timeouts and provider rejections are
        logged and returned as ``SendResult(ok=False, error=...)``.
        """
        if delay is None:
            delay = settings.default_delay_ms
        dest = _chat_hint(chat_id)
        try:
            await wait_before_send(delay)

            payload = build_payload(message, chat_id, reply_to_message_id)
            logger.info("Sending message to chat %s", dest)
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                resp = await client.post(
                    self.endpoint(bot_id),
                    headers={"Content-Type": "application/json"},
                    json=payload,
                )

            if not resp.is_success:
                description = _error_description(resp)
                logger.error(
                    "Error sending message to chat %s: %s (status %d)",
                    dest,
                    description,
                    resp.status_code,
                )
                return SendResult(ok=False, error=description)

            logger.info("Sent message to chat %s (status %d)", dest, resp.status_code)
            return SendResult(ok=True)
        except Exception as exc:
            logger.exception("Error sending message to chat %s", dest)
            return SendResult(ok=False, error=str(exc) or type(exc).__name__)


telegram_client = TelegramClient()
