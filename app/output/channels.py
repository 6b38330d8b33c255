"""
Channel configuration, resolved once from settings.

- chat: Telegram bot token + chat id, both required
- email: Resend API key wins outright; otherwise SMTP user + password; otherwise none
"""

from dataclasses import dataclass
from typing import Literal

import structlog

from app.config import Settings

logger = structlog.get_logger()


@dataclass(frozen=True)
class ChatChannel:
    token: str
    chat_id: str


@dataclass(frozen=True)
class ApiEmailProvider:
    api_key: str
    recipient: str
    api_url: str = "https://api.resend.com/emails"
    sender: str = "Portfolio <onboarding@resend.dev>"
    kind: Literal["resend"] = "resend"


@dataclass(frozen=True)
class SmtpEmailProvider:
    user: str
    password: str
    host: str = "smtp.gmail.com"
    port: int = 587
    kind: Literal["smtp"] = "smtp"

    @property
    def recipient(self) -> str:
        return self.user

    @property
    def implicit_tls(self) -> bool:
        # 465 is SMTPS; every other port upgrades with STARTTLS
        return self.port == 465


EmailProvider = ApiEmailProvider | SmtpEmailProvider


@dataclass(frozen=True)
class ChannelConfig:
    chat: ChatChannel | None = None
    email: EmailProvider | None = None


def resolve_email_provider(settings: Settings) -> EmailProvider | None:
    if settings.RESEND_API_KEY:
        return ApiEmailProvider(
            api_key=settings.RESEND_API_KEY,
            recipient=settings.EMAIL_ADDRESS,
            api_url=settings.RESEND_API_URL,
            sender=settings.RESEND_FROM,
        )
    if settings.EMAIL_ADDRESS and settings.GMAIL_PASSKEY:
        return SmtpEmailProvider(
            user=settings.EMAIL_ADDRESS,
            password=settings.GMAIL_PASSKEY,
            host=settings.SMTP_HOST,
            port=settings.SMTP_PORT,
        )
    return None


def resolve_channels(settings: Settings) -> ChannelConfig:
    """Build the process-wide ChannelConfig from settings."""
    chat = None
    if settings.TELEGRAM_BOT_TOKEN and settings.TELEGRAM_CHAT_ID:
        chat = ChatChannel(token=settings.TELEGRAM_BOT_TOKEN, chat_id=settings.TELEGRAM_CHAT_ID)
    else:
        logger.info("channels.telegram.not_configured")

    email = resolve_email_provider(settings)
    if email is None:
        logger.info("channels.email.not_configured")

    logger.info(
        "channels.resolved",
        chat=chat is not None,
        email=email.kind if email else None,
    )
    return ChannelConfig(chat=chat, email=email)
