import json
from unittest.mock import AsyncMock, patch

import httpx
import pytest
import respx

from app.output.channels import SmtpEmailProvider
from app.output.mail import build_smtp_message, channel_name, reply_address, send_email
from app.output.templates import compose_message
from app.schemas.contact import ContactSubmission

RESEND_URL = "https://api.resend.com/emails"


class TestChannelName:

    def test_names(self, api_provider, smtp_provider):
        assert channel_name(api_provider) == "email(resend)"
        assert channel_name(smtp_provider) == "email(smtp)"


class TestResend:

    @pytest.mark.asyncio
    async def test_success(self, api_provider, submission):
        text = compose_message(submission)
        with respx.mock:
            route = respx.post(RESEND_URL).mock(
                return_value=httpx.Response(200, json={"id": "email-id"})
            )
            result = await send_email(api_provider, submission, text)

        assert result.success is True
        assert result.channel == "email(resend)"

        request = route.calls.last.request
        assert request.headers["Authorization"] == "Bearer re_test"
        body = json.loads(request.content)
        assert body["to"] == ["owner@example.com"]
        assert body["reply_to"] == "ada@example.com"
        assert body["subject"] == "New Message From Ada"
        assert body["text"] == text
        assert "ada@example.com" in body["html"]

    @pytest.mark.asyncio
    async def test_error_status(self, api_provider, submission):
        with respx.mock:
            respx.post(RESEND_URL).mock(
                return_value=httpx.Response(403, json={"message": "API key is invalid"})
            )
            result = await send_email(api_provider, submission, "text")

        assert result.success is False
        assert "403" in result.error

    @pytest.mark.asyncio
    async def test_transport_error(self, api_provider, submission):
        with respx.mock:
            respx.post(RESEND_URL).mock(side_effect=httpx.ReadTimeout("timed out"))
            result = await send_email(api_provider, submission, "text")

        assert result.success is False
        assert "timed out" in result.error


class TestSmtp:

    def test_message_headers(self, smtp_provider, submission):
        msg = build_smtp_message(smtp_provider, submission, "plain body")
        assert msg["To"] == "owner@example.com"
        assert msg["Subject"] == "New Message From Ada"
        assert msg["Reply-To"] == "ada@example.com"
        assert "Ada via Portfolio" in msg["From"]
        assert "owner@example.com" in msg["From"]

        plain = msg.get_body(preferencelist=("plain",))
        html = msg.get_body(preferencelist=("html",))
        assert plain.get_content().strip() == "plain body"
        assert "Hello" in html.get_content()

    def test_header_injection_is_flattened(self, smtp_provider):
        sub = ContactSubmission(
            name="Eve\r\nBcc: victim@example.com",
            email="eve@example.com",
            message="hi",
        )
        msg = build_smtp_message(smtp_provider, sub, "hi")
        assert msg["Bcc"] is None
        assert "\n" not in msg["Subject"]

    @pytest.mark.asyncio
    async def test_success(self, smtp_provider, submission):
        with patch("app.output.mail.aiosmtplib.send", new=AsyncMock(return_value=({}, "OK"))) as mock_send:
            result = await send_email(smtp_provider, submission, "plain body")

        assert result.success is True
        assert result.channel == "email(smtp)"
        kwargs = mock_send.await_args.kwargs
        assert kwargs["hostname"] == "smtp.gmail.com"
        assert kwargs["port"] == 587
        assert kwargs["username"] == "owner@example.com"
        assert kwargs["password"] == "passkey"
        assert kwargs["start_tls"] is True
        assert kwargs["use_tls"] is False

    @pytest.mark.asyncio
    async def test_relay_error(self, smtp_provider, submission):
        failing = AsyncMock(side_effect=OSError("connection refused"))
        with patch("app.output.mail.aiosmtplib.send", new=failing):
            result = await send_email(smtp_provider, submission, "plain body")

        assert result.success is False
        assert "connection refused" in result.error

    @pytest.mark.asyncio
    async def test_rejected_recipients(self, smtp_provider, submission):
        rejected = AsyncMock(return_value=({"owner@example.com": (550, "no such user")}, "OK"))
        with patch("app.output.mail.aiosmtplib.send", new=rejected):
            result = await send_email(smtp_provider, submission, "plain body")

        assert result.success is False
        assert "rejected" in result.error

    @pytest.mark.asyncio
    async def test_port_465_uses_implicit_tls(self, submission):
        provider = SmtpEmailProvider(user="owner@example.com", password="passkey", port=465)
        with patch("app.output.mail.aiosmtplib.send", new=AsyncMock(return_value=({}, "OK"))) as mock_send:
            result = await send_email(provider, submission, "plain body")

        assert result.success is True
        kwargs = mock_send.await_args.kwargs
        assert kwargs["port"] == 465
        assert kwargs["use_tls"] is True
        assert kwargs["start_tls"] is False

    @pytest.mark.parametrize("value", ['"', "<", "a@b@c", "not an address", ""])
    def test_unparseable_reply_to_is_left_out(self, smtp_provider, value):
        sub = ContactSubmission(name="Ada", email=value, message="hi")
        msg = build_smtp_message(smtp_provider, sub, "hi")
        assert msg["Reply-To"] is None
        assert msg["To"] == "owner@example.com"


class TestReplyAddress:

    def test_plain_address(self):
        assert reply_address("ada@example.com") == "ada@example.com"

    def test_named_address_keeps_addr_spec(self):
        assert reply_address("Ada <ada@example.com>") == "ada@example.com"

    @pytest.mark.parametrize("value", ['"', "<", "a@b@c", "@example.com", "ada@", ""])
    def test_rejects_malformed(self, value):
        assert reply_address(value) is None
