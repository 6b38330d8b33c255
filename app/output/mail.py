"""
Email output: one message to the operator's own inbox.

- ApiEmailProvider → Resend REST API (bearer auth)
- SmtpEmailProvider → SMTP relay via aiosmtplib (STARTTLS)
"""

from email.errors import HeaderParseError
from email.headerregistry import Address
from email.message import EmailMessage
from email.utils import parseaddr

import aiosmtplib
import httpx
import structlog

from app.output.base import SendResult
from app.output.channels import ApiEmailProvider, EmailProvider, SmtpEmailProvider
from app.output.templates import email_subject, render_email_template
from app.schemas.contact import ContactSubmission

logger = structlog.get_logger()


def channel_name(provider: EmailProvider) -> str:
    return f"email({provider.kind})"


def _header_safe(value: str) -> str:
    """Collapse CR/LF so user input cannot add headers."""
    return " ".join(value.splitlines()).strip()


def reply_address(value: str) -> str | None:
    """Submitter address usable as Reply-To, or None when it would not parse."""
    try:
        _, addr = parseaddr(_header_safe(value))
        local, _, domain = addr.partition("@")
        if not local or not domain or "@" in domain or " " in addr:
            return None
        return str(Address(addr_spec=addr))
    except (HeaderParseError, IndexError, ValueError):
        return None


async def send_email(
    provider: EmailProvider,
    submission: ContactSubmission,
    fallback_text: str,
) -> SendResult:
    """Send the submission by email through the configured provider.

    Args:
        provider: Resolved email provider.
        submission: The contact submission, rendered into the HTML body.
        fallback_text: Plain-text body.
    """
    channel = channel_name(provider)
    try:
        if isinstance(provider, ApiEmailProvider):
            await _send_via_api(provider, submission, fallback_text)
        else:
            await _send_via_smtp(provider, submission, fallback_text)

        logger.info("output.email.sent", provider=provider.kind)
        return SendResult(channel=channel, success=True)

    except Exception as e:
        logger.exception("output.email.failed", provider=provider.kind)
        return SendResult(channel=channel, success=False, error=str(e))


async def _send_via_api(
    provider: ApiEmailProvider,
    submission: ContactSubmission,
    fallback_text: str,
) -> None:
    payload = {
        "from": provider.sender,
        "to": [provider.recipient],
        "reply_to": submission.email,
        "subject": _header_safe(email_subject(submission)),
        "html": render_email_template(submission),
        "text": fallback_text,
    }
    async with httpx.AsyncClient() as client:
        resp = await client.post(
            provider.api_url,
            json=payload,
            headers={"Authorization": f"Bearer {provider.api_key}"},
        )
    if not resp.is_success:
        raise RuntimeError(f"Resend API error ({resp.status_code}): {resp.text}")


def build_smtp_message(
    provider: SmtpEmailProvider,
    submission: ContactSubmission,
    fallback_text: str,
) -> EmailMessage:
    msg = EmailMessage()
    msg["From"] = Address(
        display_name=f"{_header_safe(submission.name)} via Portfolio".strip(),
        addr_spec=provider.user,
    )
    msg["To"] = provider.recipient
    msg["Subject"] = _header_safe(email_subject(submission))
    reply_to = reply_address(submission.email)
    if reply_to:
        msg["Reply-To"] = reply_to
    msg.set_content(fallback_text)
    msg.add_alternative(render_email_template(submission), subtype="html")
    return msg


async def _send_via_smtp(
    provider: SmtpEmailProvider,
    submission: ContactSubmission,
    fallback_text: str,
) -> None:
    msg = build_smtp_message(provider, submission, fallback_text)
    errors, response = await aiosmtplib.send(
        msg,
        hostname=provider.host,
        port=provider.port,
        username=provider.user,
        password=provider.password,
        use_tls=provider.implicit_tls,
        start_tls=not provider.implicit_tls,
    )
    if errors:
        raise RuntimeError(f"SMTP relay rejected recipients: {errors}")
    logger.debug("output.email.smtp_response", response=response)
