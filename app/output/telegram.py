"""
Telegram output: send plain text via the Bot API sendMessage method.
"""

import httpx
import structlog

from app.output.base import SendResult

logger = structlog.get_logger()

TELEGRAM_BASE = "https://api.telegram.org"
CHANNEL = "telegram"


async def send_telegram(token: str, chat_id: str, text: str) -> SendResult:
    """Send text to a Telegram chat.

    Args:
        token: Bot token, embedded in the URL path.
        chat_id: Target chat or channel id.
        text: Message text.

    Success means the API answered with a truthy ``ok`` flag.
    """
    url = f"{TELEGRAM_BASE}/bot{token}/sendMessage"
    try:
        async with httpx.AsyncClient() as client:
            resp = await client.post(url, json={"text": text, "chat_id": chat_id})
        data = resp.json()
    except Exception as e:
        logger.exception("output.telegram.failed", chat_id=chat_id)
        return SendResult(channel=CHANNEL, success=False, error=str(e))

    if not isinstance(data, dict) or not data.get("ok"):
        description = data.get("description") if isinstance(data, dict) else None
        logger.error("output.telegram.rejected", chat_id=chat_id, status=resp.status_code, detail=data)
        return SendResult(
            channel=CHANNEL,
            success=False,
            error=f"Telegram API error ({resp.status_code}): {description or 'ok=false'}",
        )

    logger.info("output.telegram.sent", chat_id=chat_id)
    return SendResult(channel=CHANNEL, success=True)
