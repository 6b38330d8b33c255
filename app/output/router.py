"""
Output router: relay a contact submission to every configured channel.

Channels are tried in order (Telegram, then email), once each. A failing
channel never stops the next one; unconfigured channels are skipped.
"""

from collections.abc import Awaitable

import structlog

from app.output.base import DispatchResult, SendResult
from app.output.channels import ChannelConfig
from app.output.mail import channel_name, send_email
from app.output.telegram import CHANNEL as TELEGRAM_CHANNEL
from app.output.telegram import send_telegram
from app.output.templates import compose_message
from app.schemas.contact import ContactSubmission

logger = structlog.get_logger()


async def _guarded(channel: str, call: Awaitable[SendResult]) -> SendResult:
    try:
        return await call
    except Exception as e:
        logger.exception("output.channel_crashed", channel=channel)
        return SendResult(channel=channel, success=False, error=str(e))


async def dispatch(submission: ContactSubmission, channels: ChannelConfig) -> DispatchResult:
    """Send a submission to all configured channels.

    Args:
        submission: Contact form fields.
        channels: Resolved channel configuration.

    Returns:
        DispatchResult with one SendResult per attempted channel. Never raises.
    """
    text = compose_message(submission)
    result = DispatchResult()

    if channels.chat is not None:
        result.results.append(
            await _guarded(
                TELEGRAM_CHANNEL,
                send_telegram(channels.chat.token, channels.chat.chat_id, text),
            )
        )
    else:
        logger.info("output.telegram.skipped", reason="not configured")

    if channels.email is not None:
        result.results.append(
            await _guarded(
                channel_name(channels.email),
                send_email(channels.email, submission, text),
            )
        )
    else:
        logger.info("output.email.skipped", reason="not configured")

    logger.info(
        "output.dispatched",
        detail=result.detail,
        success=result.overall_success,
    )
    return result
